"""CategoryAggregator のユニットテスト"""

from src.dino_assessor.domain.aggregator import CategoryAggregator
from src.dino_assessor.domain.enricher import DinoEnricher
from src.dino_assessor.domain.models import RawDinoRecord


def enriched(name, category, age=10, diet="plants"):
    """テスト用 EnrichedDinoRecord を作成"""
    return DinoEnricher.enrich(
        RawDinoRecord(name=name, category=category, period="Cretaceous", diet=diet, age=age)
    )


class TestCategoryAggregator:
    """カテゴリ集計のテストケース"""

    def test_counts_each_category(self):
        """カテゴリごとに件数を数える"""
        records = [
            enriched("DinoA", "herbivore", age=100),
            enriched("DinoB", "carnivore", age=80, diet="meat"),
        ]

        assert CategoryAggregator.summarize(records) == {"herbivore": 1, "carnivore": 1}

    def test_counts_multiple_in_same_category(self):
        """同じカテゴリの複数レコード"""
        records = [
            enriched("Yoshi", "herbivore", age=10),
            enriched("Littlefoot", "herbivore", age=5),
        ]

        assert CategoryAggregator.summarize(records) == {"herbivore": 2}

    def test_dead_records_are_counted(self):
        """Dead のレコードも件数に含める"""
        records = [
            enriched("Bowser", "omnivore", age=35),
            enriched("Baby Sinclair", "herbivore", age=0),
        ]

        assert CategoryAggregator.summarize(records) == {"omnivore": 1, "herbivore": 1}

    def test_grouping_is_exact_match(self):
        """大文字小文字の違いは別カテゴリ"""
        records = [
            enriched("A", "herbivore"),
            enriched("B", "Herbivore"),
        ]

        assert CategoryAggregator.summarize(records) == {"herbivore": 1, "Herbivore": 1}

    def test_empty_input_returns_empty_summary(self):
        """空リストは空辞書"""
        assert CategoryAggregator.summarize([]) == {}

    def test_none_input_returns_empty_summary(self):
        """None は空リストと同じ扱い"""
        assert CategoryAggregator.summarize(None) == {}

    def test_counts_sum_to_record_count(self):
        """件数の合計は入力件数と一致"""
        records = [
            enriched("A", "herbivore"),
            enriched("B", "carnivore", diet="meat"),
            enriched("C", "herbivore"),
            enriched("D", "omnivore"),
        ]

        summary = CategoryAggregator.summarize(records)

        assert sum(summary.values()) == len(records)
        assert set(summary) == {r.category for r in records}
