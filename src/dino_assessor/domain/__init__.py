"""
ドメイン層

レコード付与・カテゴリ集計ロジックとデータモデルを提供します。
"""

from .models import RawDinoRecord, EnrichedDinoRecord, DinoStatus, AssessmentResult
from .enricher import DinoEnricher
from .aggregator import CategoryAggregator
from .exceptions import InvalidRecordError

__all__ = [
    "RawDinoRecord",
    "EnrichedDinoRecord",
    "DinoStatus",
    "AssessmentResult",
    "DinoEnricher",
    "CategoryAggregator",
    "InvalidRecordError",
]
