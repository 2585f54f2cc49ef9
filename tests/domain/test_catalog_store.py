"""
CatalogStore のユニットテスト

アクティブセットの管理とプロジェクション（絞り込み・検索・並び替え）を検証します。
"""

import pytest

from src.pashucare.domain.catalog_store import CatalogStore
from src.pashucare.domain.models import ALL_SPECIES, Animal, SortKey
from src.pashucare.domain.seed import DEFAULT_ANIMALS


def create_animal(animal_id: int, name: str, species: str = "Dog", age: int = 2) -> Animal:
    """テスト用 Animal を作成するヘルパー"""
    return Animal(
        id=animal_id,
        name=name,
        species=species,
        age=age,
        sex="Female",
        image=f"https://example.com/animals/{animal_id}.jpg"
    )


def names(animals):
    return [animal.name for animal in animals]


@pytest.fixture
def store():
    """デフォルトシード (Maya, Chintu, Kaju, Bruno) で初期化したストア"""
    return CatalogStore(DEFAULT_ANIMALS)


class TestCatalogStoreInitialization:
    """初期化のテスト"""

    def test_empty_store(self):
        """シードなしの場合は空"""
        store = CatalogStore()
        assert len(store) == 0
        assert store.project() == []

    def test_initialize_sets_active_set_in_seed_order(self, store):
        """シードの順序でアクティブセットが設定される"""
        assert names(store.animals) == ["Maya", "Chintu", "Kaju", "Bruno"]

    def test_initialize_replaces_previous_set(self, store):
        """再初期化で以前のセットは置き換えられる"""
        store.initialize([create_animal(10, "Tiger")])
        assert names(store.animals) == ["Tiger"]

    def test_initialize_keeps_criteria(self, store):
        """再初期化しても表示条件は維持される"""
        store.set_query("ti")
        store.initialize([create_animal(10, "Tiger")])
        assert store.criteria.query == "ti"


class TestCatalogStoreSpeciesFilter:
    """動物種別フィルタのテスト"""

    def test_all_sentinel_returns_full_set(self, store):
        """「すべて」の場合は全件を返す"""
        store.set_species_filter(ALL_SPECIES)
        assert len(store.project()) == 4

    def test_exact_species_match(self, store):
        """完全一致する動物種別のみ返す"""
        store.set_species_filter("Dog")
        assert set(names(store.project())) == {"Maya", "Bruno"}

    def test_species_match_is_case_sensitive(self, store):
        """動物種別は完全一致（大文字小文字を区別）"""
        store.set_species_filter("dog")
        assert store.project() == []

    def test_unknown_species_matches_nothing(self, store):
        """未知の動物種別は何にも一致しない"""
        store.set_species_filter("Parrot")
        assert store.project() == []

    def test_filter_result_is_subset_of_active_set(self, store):
        """結果は常にアクティブセットの部分集合"""
        for species in ["Dog", "Cat", "Rabbit"]:
            store.set_species_filter(species)
            result = store.project()
            assert all(animal.species == species for animal in result)
            assert len(result) == len([a for a in store.animals if a.species == species])


class TestCatalogStoreQuery:
    """名前検索のテスト"""

    def test_empty_query_matches_everything(self, store):
        """空文字列はすべてに一致する"""
        store.set_query("")
        assert len(store.project()) == 4

    def test_query_is_case_insensitive_substring(self, store):
        """大文字小文字を区別しない部分一致"""
        store.set_query("AY")
        assert names(store.project()) == ["Maya"]

    def test_query_matches_multiple(self, store):
        """複数の動物に一致する"""
        store.set_query("u")
        assert set(names(store.project())) == {"Chintu", "Kaju", "Bruno"}

    def test_query_without_match(self, store):
        """一致しない場合は空"""
        store.set_query("zzz")
        assert store.project() == []

    def test_query_combined_with_species(self, store):
        """動物種別フィルタと組み合わせられる"""
        store.set_species_filter("Dog")
        store.set_query("u")
        assert names(store.project()) == ["Bruno"]

    def test_none_query_is_treated_as_empty(self, store):
        """None は空文字列として扱う"""
        store.set_query(None)
        assert store.criteria.query == ""
        assert len(store.project()) == 4


class TestCatalogStoreSort:
    """並び替えのテスト"""

    def test_default_sort_is_newest_first(self, store):
        """デフォルトは挿入順の逆順"""
        assert names(store.project()) == ["Bruno", "Kaju", "Chintu", "Maya"]

    def test_sort_by_age_ascending(self, store):
        """年齢昇順"""
        store.set_sort_key(SortKey.AGE_ASC)
        assert names(store.project()) == ["Kaju", "Chintu", "Maya", "Bruno"]

    def test_sort_by_age_descending(self, store):
        """年齢降順"""
        store.set_sort_key("ageDesc")
        assert names(store.project()) == ["Bruno", "Maya", "Chintu", "Kaju"]

    def test_age_sort_is_stable_for_ties(self):
        """同年齢の動物は元の相対順を保持する（昇順・降順とも）"""
        store = CatalogStore([
            create_animal(1, "A", age=2),
            create_animal(2, "B", age=1),
            create_animal(3, "C", age=2),
            create_animal(4, "D", age=1),
        ])

        store.set_sort_key(SortKey.AGE_ASC)
        assert names(store.project()) == ["B", "D", "A", "C"]

        store.set_sort_key(SortKey.AGE_DESC)
        assert names(store.project()) == ["A", "C", "B", "D"]

    def test_unknown_sort_key_falls_back_to_newest(self, store):
        """未知の並び替えキーは NEWEST として扱う"""
        store.set_sort_key("byColor")
        assert store.criteria.sort_key == SortKey.NEWEST
        assert names(store.project()) == ["Bruno", "Kaju", "Chintu", "Maya"]


class TestCatalogStoreRemove:
    """削除のテスト"""

    def test_remove_existing_animal(self, store):
        """存在する動物を削除できる"""
        assert store.remove(1) is True
        assert 1 not in store
        assert "Maya" not in names(store.project())

    def test_remove_twice_is_idempotent(self, store):
        """同じ ID を2回削除しても結果は変わらない"""
        store.remove(1)
        after_first = store.animals
        assert store.remove(1) is False
        assert store.animals == after_first

    def test_remove_nonexistent_is_noop(self, store):
        """存在しない ID の削除は何もしない（エラーにならない）"""
        before = store.animals
        assert store.remove(999) is False
        assert store.animals == before

    def test_get_returns_none_after_remove(self, store):
        """削除後は取得できない"""
        assert store.get(2).name == "Chintu"
        store.remove(2)
        assert store.get(2) is None


class TestCatalogStoreProjection:
    """プロジェクションの性質のテスト"""

    def test_project_is_idempotent(self, store):
        """変更がなければ同じ結果を返す"""
        store.set_species_filter("Dog")
        store.set_sort_key(SortKey.AGE_DESC)
        assert store.project() == store.project()

    def test_project_does_not_mutate_active_set(self, store):
        """プロジェクションはアクティブセットを変更しない"""
        store.set_sort_key(SortKey.AGE_ASC)
        store.project()
        assert names(store.animals) == ["Maya", "Chintu", "Kaju", "Bruno"]

    def test_scenario_dog_filter_age_ascending(self, store):
        """Dog・年齢昇順で Maya, Bruno の順になる"""
        store.set_species_filter("Dog")
        store.set_sort_key(SortKey.AGE_ASC)
        assert names(store.project()) == ["Maya", "Bruno"]
