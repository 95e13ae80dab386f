"""
カテゴリ集計ロジック

付与済みレコードをカテゴリごとに数え上げ、サマリーを作成します。
"""

from typing import Dict, Optional, Sequence

from .models import EnrichedDinoRecord


class CategoryAggregator:
    """
    カテゴリ集計クラス

    category の完全一致でグループ化し、各グループの件数を返します。
    件数 0 のカテゴリはサマリーに現れません。
    """

    @staticmethod
    def summarize(records: Optional[Sequence[EnrichedDinoRecord]]) -> Dict[str, int]:
        """
        カテゴリ別件数を集計

        Args:
            records: 付与済みレコード (None は空リストと同じ扱い)

        Returns:
            Dict[str, int]: カテゴリ名 → 件数 (入力が空なら空辞書)
        """
        summary: Dict[str, int] = {}
        for record in records or []:
            summary[record.category] = summary.get(record.category, 0) + 1
        return summary
