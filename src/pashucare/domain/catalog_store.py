"""
カタログストア

譲渡前（アクティブ）の動物セットと表示条件を保持し、
画面に表示する絞り込み・並び替え済みの一覧（プロジェクション）を算出します。
"""

import logging
from typing import Dict, Iterable, List, Optional, Union

from .models import ALL_SPECIES, Animal, SortKey, ViewCriteria


class CatalogStore:
    """
    アクティブな動物セットと表示条件の管理

    Responsibilities:
    - シードからのアクティブセット初期化
    - 検索文字列・動物種別フィルタ・並び替えキーの設定
    - 譲渡済み動物の削除（存在しない ID は無視）
    - プロジェクションの算出（副作用なし・冪等）
    """

    def __init__(self, seed: Optional[Iterable[Animal]] = None):
        """
        CatalogStore を初期化

        Args:
            seed: 初期アクティブセット。None の場合は空。
        """
        self.logger = logging.getLogger(__name__)
        self._animals: Dict[int, Animal] = {}
        self._criteria = ViewCriteria()
        if seed is not None:
            self.initialize(seed)

    def initialize(self, seed: Iterable[Animal]) -> None:
        """
        アクティブセットをシードで置き換え

        Args:
            seed: 動物リスト（ID の一意性は呼び出し側が保証する）

        Note: 挿入順はシードの順序。表示条件は変更しない。
        """
        # dict は挿入順を保持する
        self._animals = {animal.id: animal for animal in seed}
        self.logger.debug(f"Catalog initialized with {len(self._animals)} animals")

    @property
    def criteria(self) -> ViewCriteria:
        """現在の表示条件"""
        return self._criteria

    @property
    def animals(self) -> List[Animal]:
        """アクティブセット（挿入順）"""
        return list(self._animals.values())

    def set_query(self, text: str) -> None:
        """名前の部分一致検索文字列を設定"""
        self._criteria = self._criteria.model_copy(update={"query": text or ""})

    def set_species_filter(self, value: str) -> None:
        """
        動物種別フィルタを設定

        Args:
            value: ALL_SPECIES または完全一致させる動物種別。
                   未知の値は何にも一致しない。
        """
        self._criteria = self._criteria.model_copy(
            update={"species_filter": value or ALL_SPECIES}
        )

    def set_sort_key(self, key: Union[SortKey, str]) -> None:
        """
        並び替えキーを設定

        Args:
            key: SortKey またはその値文字列。未知の値は NEWEST として扱う。
        """
        try:
            sort_key = SortKey(key)
        except ValueError:
            self.logger.warning(f"Unknown sort key: {key!r}, falling back to {SortKey.NEWEST.value}")
            sort_key = SortKey.NEWEST
        self._criteria = self._criteria.model_copy(update={"sort_key": sort_key})

    def get(self, animal_id: int) -> Optional[Animal]:
        """ID でアクティブセットから動物を取得（存在しない場合は None）"""
        return self._animals.get(animal_id)

    def remove(self, animal_id: int) -> bool:
        """
        動物をアクティブセットから削除

        Args:
            animal_id: 削除する動物の ID

        Returns:
            bool: 削除した場合 True。存在しない場合は何もせず False。
        """
        removed = self._animals.pop(animal_id, None)
        if removed is None:
            return False
        self.logger.info(f"Removed animal from catalog: {removed.name}", extra={"animal_id": animal_id})
        return True

    def project(self) -> List[Animal]:
        """
        表示用の一覧を算出

        1. 動物種別で絞り込み（ALL_SPECIES の場合はすべて）
        2. 名前の部分一致で絞り込み（大文字小文字を区別しない、空文字列はすべて一致）
        3. 並び替え（年齢昇順・年齢降順・挿入順の逆順）

        Returns:
            List[Animal]: 表示用の動物リスト

        Note: sorted() は安定ソートのため、同年齢の動物は元の相対順を保持する
        """
        criteria = self._criteria
        query = criteria.query.casefold()

        visible = [
            animal for animal in self._animals.values()
            if criteria.species_filter == ALL_SPECIES or animal.species == criteria.species_filter
        ]
        visible = [animal for animal in visible if query in animal.name.casefold()]

        if criteria.sort_key == SortKey.AGE_ASC:
            return sorted(visible, key=lambda animal: animal.age)
        if criteria.sort_key == SortKey.AGE_DESC:
            return sorted(visible, key=lambda animal: animal.age, reverse=True)
        return list(reversed(visible))

    def __len__(self) -> int:
        return len(self._animals)

    def __contains__(self, animal_id: object) -> bool:
        return animal_id in self._animals
