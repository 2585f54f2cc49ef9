"""
譲渡台帳

譲渡申請を検証・記録し、譲渡済み動物をカタログから削除して、
申請履歴を永続化します。
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Set, TYPE_CHECKING

from .catalog_store import CatalogStore
from .models import AdoptionRequest, Animal
from .validation import validate_adopter

if TYPE_CHECKING:
    from ..infrastructure.ledger_store import LedgerStore


def utc_now() -> datetime:
    """現在時刻 (UTC, タイムゾーン付き)"""
    return datetime.now(timezone.utc)


class AdoptionLedger:
    """
    譲渡申請の追記専用台帳

    申請は新しい順に保持され、一度記録されたら変更・削除されません。
    永続化は注入された LedgerStore を介して行います。
    """

    def __init__(
        self,
        ledger_store: "LedgerStore",
        catalog: CatalogStore,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        AdoptionLedger を初期化

        Args:
            ledger_store: 申請履歴の永続化ポート
            catalog: 譲渡済み動物を削除するカタログストア
            clock: 申請日時の取得関数。None の場合は utc_now を使用。
        """
        self.ledger_store = ledger_store
        self.catalog = catalog
        self.clock = clock or utc_now
        self.logger = logging.getLogger(__name__)
        self._requests: List[AdoptionRequest] = []

    @property
    def requests(self) -> List[AdoptionRequest]:
        """申請履歴（新しい順）"""
        return list(self._requests)

    def load(self) -> List[AdoptionRequest]:
        """
        永続化済みの申請履歴を読み込み

        Returns:
            List[AdoptionRequest]: 申請履歴（データなし・破損時は空リスト）
        """
        self._requests = list(self.ledger_store.load())
        self.logger.info(f"Loaded {len(self._requests)} adoption requests")
        return self.requests

    def submit(self, animal: Animal, adopter_name: str, adopter_email: str) -> AdoptionRequest:
        """
        譲渡申請を送信

        Args:
            animal: 申請対象の動物（スナップショット）
            adopter_name: 申請者名
            adopter_email: 申請者メールアドレス

        Returns:
            AdoptionRequest: 記録された申請

        Raises:
            InvalidInputError: 名前が空、またはメールアドレスの形式が不正な場合
            OSError: 永続化に失敗した場合（台帳・カタログとも変更しない）

        Postconditions:
            - 申請が台帳の先頭に追加されている
            - 対象動物がカタログから削除されている
            - 更新後の台帳全体が永続化されている
        Invariants: 検証失敗・永続化失敗時は台帳・カタログとも変更しない
        """
        name, email = validate_adopter(adopter_name, adopter_email)

        request = AdoptionRequest(
            animal_id=animal.id,
            animal_name=animal.name,
            adopter_name=name,
            adopter_email=email,
            date=self.clock()
        )

        self._requests.insert(0, request)
        try:
            self.ledger_store.save(self._requests)
        except OSError:
            # 永続化失敗時は台帳を元に戻し、カタログは変更しない
            self._requests.pop(0)
            self.logger.error(
                f"Failed to persist adoption request for {animal.name}",
                extra={"animal_id": animal.id},
                exc_info=True
            )
            raise
        self.catalog.remove(animal.id)

        self.logger.info(
            f"Adoption request recorded for {animal.name}",
            extra={"animal_id": animal.id, "ledger_size": len(self._requests)}
        )
        return request

    def adopted_ids(self) -> Set[int]:
        """申請済み動物の ID 集合"""
        return {request.animal_id for request in self._requests}

    def __len__(self) -> int:
        return len(self._requests)
