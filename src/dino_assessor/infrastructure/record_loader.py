"""
レコードローダー

JSON ファイルから加工前レコードを読み込みます。
"""

import json
from typing import List, Optional
from pathlib import Path
from pydantic import ValidationError

from ..domain.exceptions import InvalidRecordError
from ..domain.models import RawDinoRecord


class RecordLoadError(Exception):
    """
    読み込みエラー例外

    ファイルが存在しない、JSON として不正、トップレベルが配列でない場合を表します。
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        """
        Args:
            message: エラーメッセージ
            path: 読み込もうとしたファイルのパス
        """
        super().__init__(message)
        self.path = path


class RecordLoader:
    """
    JSON 配列 → RawDinoRecord リストの読み込み

    ファイル形式:
        [{"name": "DinoA", "category": "herbivore", "period": "Cretaceous",
          "diet": "plants", "age": 100}, ...]
    """

    def __init__(self, input_path: Path):
        """
        RecordLoader を初期化

        Args:
            input_path: 読み込む JSON ファイルのパス
        """
        self.input_path = Path(input_path)

    def load_records(self) -> List[RawDinoRecord]:
        """
        レコードを読み込み

        Returns:
            List[RawDinoRecord]: ファイル内の順序を保ったレコードリスト

        Raises:
            RecordLoadError: ファイル欠損、JSON パース失敗、配列でない場合
            InvalidRecordError: 配列要素が RawDinoRecord として不正な場合
        """
        if not self.input_path.exists():
            raise RecordLoadError(
                f"Input file not found: {self.input_path}", path=self.input_path
            )

        with open(self.input_path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise RecordLoadError(
                    f"Invalid JSON in {self.input_path}: {e}", path=self.input_path
                ) from e

        if not isinstance(data, list):
            raise RecordLoadError(
                f"Expected a JSON array in {self.input_path}, got {type(data).__name__}",
                path=self.input_path
            )

        records = []
        for index, item in enumerate(data):
            try:
                records.append(RawDinoRecord.model_validate(item))
            except ValidationError as e:
                raise InvalidRecordError.from_validation_error(
                    e, index, source=str(self.input_path)
                ) from e
        return records
