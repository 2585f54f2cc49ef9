"""画面操作オーケストレーション"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Iterable, List, Optional, Union
import logging

from pydantic import BaseModel

from ..domain.adoption_ledger import AdoptionLedger, utc_now
from ..domain.catalog_store import CatalogStore
from ..domain.models import AdoptionRequest, Animal, SortKey, ViewCriteria
from ..domain.validation import FormValidationError, InvalidInputError
from ..infrastructure.outreach_client import OutreachClient


ADOPTION_SUBMITTED_MESSAGE = "Adoption request submitted — we will contact you soon!"
ADOPTION_SAVE_FAILED_MESSAGE = "Could not save your request. Please try again."

# 表示時間
ERROR_FLASH_DURATION = timedelta(milliseconds=1500)
SUCCESS_FLASH_DURATION = timedelta(milliseconds=2200)
DIALOG_CLOSE_DELAY = timedelta(milliseconds=1200)


class FlashLevel(str, Enum):
    """フラッシュメッセージのレベル"""
    SUCCESS = "success"
    ERROR = "error"


class FlashMessage(BaseModel):
    """
    一定時間後に消えるメッセージ

    expires_at を過ぎたら tick() で消去されます。
    """
    text: str
    level: FlashLevel
    expires_at: datetime


class AdoptionDialog(BaseModel):
    """
    譲渡申請ダイアログの状態

    Attributes:
        animal: 申請対象の動物（開いた時点のスナップショット）
        message: フォームに表示するメッセージ
        submitted: 申請が記録済みか
        closes_at: 自動で閉じる時刻（申請成功後のみ）
    """
    animal: Animal
    message: str = ""
    submitted: bool = False
    closes_at: Optional[datetime] = None


class SiteStats(BaseModel):
    """トップページの統計表示"""
    rescued: str = "1,234+"
    adopted: int = 0
    volunteers: str = "85"


class ViewModel(BaseModel):
    """描画側に渡す画面状態"""
    animals: List[Animal]
    adopted: List[AdoptionRequest]
    criteria: ViewCriteria
    stats: SiteStats
    flash: Optional[FlashMessage] = None
    dialog: Optional[AdoptionDialog] = None


Observer = Callable[[ViewModel], None]


class AdoptionApp:
    """
    画面操作のオーケストレーション

    Responsibilities:
    - 利用者の操作（検索、絞り込み、申請、問い合わせ、寄付）の受付
    - カタログストア・譲渡台帳の更新の調整
    - フラッシュメッセージ・申請ダイアログの一時状態管理
    - 状態変更のたびに購読者へ ViewModel を通知

    Invariants: 入力エラー・保存失敗は利用者向けメッセージに変換し、例外をスローしない
    """

    def __init__(
        self,
        catalog: CatalogStore,
        ledger: AdoptionLedger,
        outreach_client: OutreachClient,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        AdoptionApp を初期化

        Args:
            catalog: カタログストア
            ledger: 譲渡台帳
            outreach_client: 問い合わせ・寄付クライアント
            clock: 現在時刻の取得関数。None の場合は utc_now を使用。
        """
        self.catalog = catalog
        self.ledger = ledger
        self.outreach_client = outreach_client
        self.clock = clock or utc_now
        self.logger = logging.getLogger(__name__)
        self.flash: Optional[FlashMessage] = None
        self.dialog: Optional[AdoptionDialog] = None
        self._observers: List[Observer] = []

    def start(self, seed: Iterable[Animal]) -> None:
        """
        初期状態を構築

        シードでカタログを初期化し、申請履歴を読み込んだうえで
        申請済みの動物をカタログから取り除きます。
        """
        self.catalog.initialize(seed)
        self.ledger.load()
        for animal_id in self.ledger.adopted_ids():
            self.catalog.remove(animal_id)
        self.logger.info(
            "Adoption app started",
            extra={"active_count": len(self.catalog), "adopted_count": len(self.ledger)}
        )
        self._publish()

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        状態変更の購読を登録

        Returns:
            Callable[[], None]: 購読解除関数
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def view_model(self) -> ViewModel:
        """現在の画面状態"""
        return ViewModel(
            animals=self.catalog.project(),
            adopted=self.ledger.requests,
            criteria=self.catalog.criteria,
            stats=SiteStats(adopted=len(self.ledger)),
            flash=self.flash,
            dialog=self.dialog
        )

    def set_query(self, text: str) -> None:
        self.catalog.set_query(text)
        self._publish()

    def set_species_filter(self, value: str) -> None:
        self.catalog.set_species_filter(value)
        self._publish()

    def set_sort_key(self, key: Union[SortKey, str]) -> None:
        self.catalog.set_sort_key(key)
        self._publish()

    def describe_animal(self, animal_id: int) -> Optional[str]:
        """詳細表示用の説明文（存在しない場合は None）"""
        animal = self.catalog.get(animal_id)
        if animal is None:
            return None
        return f"More about {animal.name}: Age {animal.age}, {animal.sex}"

    def open_adopt(self, animal_id: int) -> bool:
        """
        譲渡申請ダイアログを開く

        Returns:
            bool: 開いた場合 True。アクティブセットに存在しない ID の場合は False。
        """
        animal = self.catalog.get(animal_id)
        if animal is None:
            self.logger.warning(f"Cannot open adoption dialog, animal not found: {animal_id}")
            return False
        self.dialog = AdoptionDialog(animal=animal)
        self._publish()
        return True

    def cancel_adopt(self) -> None:
        """譲渡申請ダイアログを閉じる（入力内容は破棄）"""
        if self.dialog is None:
            return
        self.dialog = None
        self._publish()

    def submit_adoption(self, adopter_name: str, adopter_email: str) -> Optional[AdoptionRequest]:
        """
        譲渡申請を送信

        Returns:
            Optional[AdoptionRequest]: 記録された申請。入力エラー・保存失敗や
            ダイアログ未表示・送信済みの場合は None。
        """
        if self.dialog is None or self.dialog.submitted:
            self.logger.warning("Adoption submitted without an open dialog, ignoring")
            return None

        try:
            request = self.ledger.submit(self.dialog.animal, adopter_name, adopter_email)
        except InvalidInputError as e:
            self.logger.info(f"Adoption form rejected: {e.field}")
            self.dialog = self.dialog.model_copy(update={"message": e.message})
            self._publish()
            return None
        except OSError as e:
            self.logger.error(f"Adoption request could not be saved: {str(e)}")
            self.dialog = self.dialog.model_copy(update={"message": ADOPTION_SAVE_FAILED_MESSAGE})
            self._publish()
            return None

        self.dialog = self.dialog.model_copy(update={
            "message": ADOPTION_SUBMITTED_MESSAGE,
            "submitted": True,
            "closes_at": self.clock() + DIALOG_CLOSE_DELAY
        })
        self._publish()
        return request

    def submit_contact(self, message: str) -> bool:
        """お問い合わせを送信（成功時 True）"""
        try:
            text = self.outreach_client.send_message(message)
        except FormValidationError as e:
            self._flash(e.message, FlashLevel.ERROR)
            return False
        self._flash(text, FlashLevel.SUCCESS)
        return True

    def submit_donation(self, amount: Union[int, float]) -> bool:
        """寄付を送信（成功時 True）"""
        try:
            text = self.outreach_client.donate(amount)
        except FormValidationError as e:
            self._flash(e.message, FlashLevel.ERROR)
            return False
        self._flash(text, FlashLevel.SUCCESS)
        return True

    def sign_up_volunteer(self) -> None:
        self._flash(self.outreach_client.sign_up_volunteer(), FlashLevel.SUCCESS)

    def tick(self, now: Optional[datetime] = None) -> bool:
        """
        期限切れの一時状態を消去

        Args:
            now: 基準時刻。None の場合は clock() を使用。

        Returns:
            bool: 状態が変化した場合 True
        """
        now = now or self.clock()
        changed = False

        if self.flash is not None and self.flash.expires_at <= now:
            self.flash = None
            changed = True

        if self.dialog is not None and self.dialog.closes_at is not None and self.dialog.closes_at <= now:
            self.dialog = None
            changed = True

        if changed:
            self._publish()
        return changed

    def _flash(self, text: str, level: FlashLevel) -> None:
        duration = ERROR_FLASH_DURATION if level == FlashLevel.ERROR else SUCCESS_FLASH_DURATION
        self.flash = FlashMessage(text=text, level=level, expires_at=self.clock() + duration)
        self._publish()

    def _publish(self) -> None:
        """購読者へ現在の画面状態を通知"""
        if not self._observers:
            return
        view_model = self.view_model()
        for observer in list(self._observers):
            observer(view_model)
