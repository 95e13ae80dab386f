"""
レコード付与ロジック

加工前レコード (RawDinoRecord) に health / status / age_metric を付与し、
EnrichedDinoRecord に変換します。
各段階は前段の結果のみに依存する純粋関数として実装しています:
health → status → age_metric
"""

from .models import RawDinoRecord, EnrichedDinoRecord, DinoStatus


class DinoEnricher:
    """
    レコード付与クラス

    1レコード分の派生属性を算出する静的メソッドを提供します。
    未知のカテゴリ・食性は例外にせず、else 分岐に落とします。
    """

    # カテゴリごとの適正な食性
    _PROPER_DIETS = {
        "herbivore": "plants",
        "carnivore": "meat",
    }

    _FULL_HEALTH = 100

    @staticmethod
    def enrich(raw_record: RawDinoRecord) -> EnrichedDinoRecord:
        """
        加工前レコードに派生属性を付与

        Args:
            raw_record: 加工前レコード

        Returns:
            EnrichedDinoRecord: 付与済みレコード (raw_record は変更しない)
        """
        health = DinoEnricher.calculate_health(
            raw_record.age, raw_record.category, raw_record.diet
        )
        status = DinoEnricher.determine_status(health)
        age_metric = DinoEnricher.determine_age_metric(raw_record.age, status)

        return EnrichedDinoRecord(
            **raw_record.model_dump(include=set(RawDinoRecord.model_fields)),
            health=health,
            status=status,
            age_metric=age_metric
        )

    @staticmethod
    def calculate_health(age: int, category: str, diet: str) -> int:
        """
        age, category, diet から health を算出

        - age <= 0 → 0
        - 既知カテゴリで適正な食性 → 100 - age
        - 既知カテゴリで食性が異なる → (100 - age) // 2
        - 未知カテゴリ → 0

        割り算は床関数 (//, 負の無限大方向への切り捨て) です。
        age > 100 の場合は負の値をそのまま返します
        (例: age=151, herbivore, meat → -51 // 2 = -26)。

        Args:
            age: 年齢
            category: カテゴリ
            diet: 食性

        Returns:
            int: health (負になり得る)
        """
        if age <= 0:
            return 0

        proper_diet = DinoEnricher._PROPER_DIETS.get(category)
        if proper_diet is None:
            return 0

        base_health = DinoEnricher._FULL_HEALTH - age
        # 適正でない食性の場合は半減
        if diet == proper_diet:
            return base_health
        return base_health // 2

    @staticmethod
    def determine_status(health: int) -> DinoStatus:
        """health > 0 なら Alive、それ以外は Dead"""
        return DinoStatus.ALIVE if health > 0 else DinoStatus.DEAD

    @staticmethod
    def determine_age_metric(age: int, status: DinoStatus) -> int:
        """
        age, status から age_metric を算出

        Dead は常に 0。Alive かつ age > 1 なら age // 2、
        それ以外 (Alive で age == 1) は 0。

        Args:
            age: 年齢
            status: determine_status() の結果

        Returns:
            int: 0 以上の age_metric
        """
        if status == DinoStatus.DEAD:
            return 0

        return age // 2 if age > 1 else 0
