"""
ドメイン例外

呼び出し元の契約違反 (必須フィールド欠損、型不一致) を表す例外を定義します。
"""

from typing import List, Optional
from pydantic import ValidationError


class InvalidRecordError(Exception):
    """
    不正レコード例外

    必須フィールドの欠損や、整数でない age などの入力不備を表します。
    不正な入力は既定値で補わず、この例外で即座に失敗させます。
    """

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        errors: Optional[List[str]] = None,
    ):
        """
        Args:
            message: エラーメッセージ
            index: 入力コレクション内での不正レコードの位置
            errors: "フィールド: メッセージ" 形式のバリデーションエラー一覧
        """
        super().__init__(message)
        self.index = index
        self.errors = errors or []

    @classmethod
    def from_validation_error(
        cls,
        error: ValidationError,
        index: int,
        source: Optional[str] = None,
    ) -> "InvalidRecordError":
        """
        pydantic の ValidationError から InvalidRecordError を作成

        Args:
            error: RawDinoRecord の検証で発生した例外
            index: 不正レコードの位置
            source: 入力元 (ファイルパスなど)。メッセージに付記される

        Returns:
            InvalidRecordError: loc を前置したメッセージを持つ例外
        """
        messages = [
            f"{'.'.join(str(loc) for loc in detail['loc'])}: {detail['msg']}"
            for detail in error.errors()
        ]
        location = f" in {source}" if source else ""
        return cls(
            f"Invalid record at index {index}{location}: {'; '.join(messages)}",
            index=index,
            errors=messages
        )
