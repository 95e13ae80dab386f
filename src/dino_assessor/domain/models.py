"""
データモデル定義

このモジュールは dino-assessor のドメイン層のデータモデルを定義します:
- RawDinoRecord: 呼び出し元から渡される加工前の恐竜レコード
- EnrichedDinoRecord: health / status / age_metric を付与したレコード
- AssessmentResult: 付与済みレコードとカテゴリ別件数のまとめ
"""

from enum import Enum
from typing import Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class DinoStatus(str, Enum):
    """生存ステータス (2値のみ)"""
    ALIVE = "Alive"
    DEAD = "Dead"


class RawDinoRecord(BaseModel):
    """
    加工前の恐竜レコード

    呼び出し元から受け取った時点で不変として扱います。
    age は厳密な整数のみ受け付け、"80" や True のような値は拒否します。
    """

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(..., description="名前")
    category: StrictStr = Field(..., description="カテゴリ ('herbivore', 'carnivore' など)")
    period: StrictStr = Field(..., description="時代")
    diet: StrictStr = Field(..., description="食性 ('plants', 'meat' など)")
    age: StrictInt = Field(..., description="年齢")


class EnrichedDinoRecord(RawDinoRecord):
    """
    派生属性を付与した恐竜レコード

    派生属性はすべて入力フィールドのみから決まる純粋な値です。
    health は age > 100 の場合に負になり得ます。
    """

    health: int = Field(..., description="体力 (age, category, diet から算出)")
    status: DinoStatus = Field(..., description="生存ステータス (health から算出)")
    age_metric: int = Field(..., ge=0, description="年齢指標 (age, status から算出)")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "DinoB",
                "category": "carnivore",
                "period": "Jurassic",
                "diet": "meat",
                "age": 80,
                "health": 20,
                "status": "Alive",
                "age_metric": 40
            }
        },
    )


class AssessmentResult(BaseModel):
    """
    アセスメント結果

    Attributes:
        records: 付与済みレコード (入力順、タプルのため追加・削除不可)
        summary: カテゴリ名 → 件数。入力に存在するカテゴリのみ含む

    Note:
        frozen=True は属性の再代入のみを禁止します。
        summary は通常の dict なので、要素の変更は呼び出し側で行わないこと。
    """

    model_config = ConfigDict(frozen=True)

    records: Tuple[EnrichedDinoRecord, ...] = Field(default_factory=tuple, description="付与済みレコード")
    summary: Dict[str, int] = Field(default_factory=dict, description="カテゴリ別件数")
