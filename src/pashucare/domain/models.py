"""
データモデル定義

このモジュールは pashucare のドメイン層のデータモデルを定義します:
- Animal: 譲渡対象の保護動物
- AdoptionRequest: 送信済みの譲渡申請（不変）
- SortKey / ViewCriteria: 一覧表示の検索・絞り込み・並び替え条件
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# 動物種別フィルタの「すべて」センチネル
ALL_SPECIES = "All"

# UI のフィルタ選択肢として表示する動物種別
SPECIES_CHOICES = ["Dog", "Cat", "Rabbit"]


class SortKey(str, Enum):
    """一覧の並び替えキー"""
    NEWEST = "newest"
    AGE_ASC = "ageAsc"
    AGE_DESC = "ageDesc"


class Animal(BaseModel):
    """
    譲渡対象の保護動物

    id は外部から割り当てられ、アクティブセット内で一意です。
    生成後は変更されません（削除のみ）。
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="動物 ID (一意・不変)")
    name: str = Field(..., description="名前")
    species: str = Field(..., description="動物種別 (Dog, Cat, Rabbit など)")
    age: int = Field(..., description="年齢 (年単位)")
    sex: str = Field(..., description="性別")
    desc: str = Field(default="", description="紹介文")
    image: str = Field(..., description="画像の URI 参照 (相対パス・data: URI も可、到達性は検証しない)")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """
        名前の非空チェック

        Raises:
            ValueError: 空白のみ、または空文字列の場合
        """
        if not v.strip():
            raise ValueError("名前は空にできません")
        return v

    @field_validator("age")
    @classmethod
    def validate_age(cls, v: int) -> int:
        """
        年齢の負値チェック

        Raises:
            ValueError: 負の値が渡された場合
        """
        if v < 0:
            raise ValueError(f"年齢は負の値にできません: {v}")
        return v


class AdoptionRequest(BaseModel):
    """
    譲渡申請

    送信成功時に生成され、以後変更されません。
    永続化時は camelCase のキー (animalId, animalName, adopterName,
    adopterEmail, date) で保存されます。
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    animal_id: int = Field(..., alias="animalId", description="申請時点の動物 ID")
    animal_name: str = Field(..., alias="animalName", description="申請時点の動物名 (スナップショット)")
    adopter_name: str = Field(..., alias="adopterName", description="申請者名 (trim 済み)")
    adopter_email: str = Field(..., alias="adopterEmail", description="申請者メールアドレス (trim 済み)")
    date: datetime = Field(..., description="申請日時 (ISO 8601, UTC)")

    def to_storage(self) -> dict:
        """永続化用の JSON 互換 dict に変換"""
        return self.model_dump(mode="json", by_alias=True)


class ViewCriteria(BaseModel):
    """
    一覧表示条件（永続化しない）

    Attributes:
        query: 名前に対する部分一致検索文字列（大文字小文字を区別しない）
        species_filter: ALL_SPECIES または完全一致させる動物種別
        sort_key: 並び替えキー
    """

    query: str = ""
    species_filter: str = ALL_SPECIES
    sort_key: SortKey = SortKey.NEWEST
