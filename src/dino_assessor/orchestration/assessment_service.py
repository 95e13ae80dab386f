"""アセスメント・オーケストレーションサービス"""

from typing import Any, Iterable, List, Mapping, Optional, Union
import logging
from pydantic import ValidationError

from ..domain.aggregator import CategoryAggregator
from ..domain.enricher import DinoEnricher
from ..domain.exceptions import InvalidRecordError
from ..domain.models import AssessmentResult, DinoStatus, RawDinoRecord

RawInput = Union[RawDinoRecord, Mapping[str, Any]]


class AssessmentService:
    """
    レコード付与とカテゴリ集計のオーケストレーション

    Responsibilities:
    - 入力レコードの検証 (dict は RawDinoRecord に変換)
    - 入力順を保ったままの派生属性付与
    - カテゴリ別サマリーの作成
    - 構造化ログ出力

    呼び出し間で状態を持たないため、同じ入力には常に同じ結果を返します。
    """

    def __init__(self):
        """AssessmentService を初期化"""
        self.logger = logging.getLogger(__name__)

    def assess(self, raw_records: Optional[Iterable[RawInput]]) -> AssessmentResult:
        """
        アセスメントを実行

        Args:
            raw_records: 加工前レコード (RawDinoRecord または dict) のイテラブル。
                         ジェネレーターも可 (一度だけ読み出す)。
                         None は空リストと同じ扱い。

        Returns:
            AssessmentResult: 付与済みレコードとカテゴリ別件数

        Raises:
            InvalidRecordError: 必須フィールド欠損や型不一致のレコードがある場合
        """
        if raw_records is None:
            self.logger.info("No records given, returning empty assessment")
            return AssessmentResult(records=[], summary={})

        raw_records = list(raw_records)
        self.logger.info(
            "Starting assessment",
            extra={"record_count": len(raw_records)}
        )

        validated = self._validate_records(raw_records)
        records = [DinoEnricher.enrich(record) for record in validated]
        summary = CategoryAggregator.summarize(records)

        self.logger.info(
            "Assessment completed",
            extra={
                "record_count": len(records),
                "category_count": len(summary),
                "alive_count": sum(1 for r in records if r.status == DinoStatus.ALIVE)
            }
        )

        return AssessmentResult(records=records, summary=summary)

    def _validate_records(self, raw_records: Iterable[RawInput]) -> List[RawDinoRecord]:
        """
        入力レコードを RawDinoRecord に揃える

        Args:
            raw_records: 加工前レコード

        Returns:
            List[RawDinoRecord]: 検証済みレコード (入力順)

        Raises:
            InvalidRecordError: 検証に失敗したレコードがある場合 (最初の1件で停止)
        """
        validated = []
        for index, item in enumerate(raw_records):
            if isinstance(item, RawDinoRecord):
                validated.append(item)
                continue

            try:
                validated.append(RawDinoRecord.model_validate(item))
            except ValidationError as e:
                invalid = InvalidRecordError.from_validation_error(e, index)
                self.logger.error(
                    f"Invalid record at index {index}",
                    extra={"errors": invalid.errors}
                )
                raise invalid from e

        return validated
