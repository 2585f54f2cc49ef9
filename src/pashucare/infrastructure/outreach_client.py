"""問い合わせ・寄付・ボランティア登録クライアント（送信はシミュレーション）"""

import logging
from typing import Any, Dict, Optional, Union

from ..domain.validation import validate_amount, validate_message


CONTACT_SENT_MESSAGE = "Message sent — thank you! We will reply soon."
VOLUNTEER_MESSAGE = "Thanks — our volunteer coordinator will reach out!"


def format_amount(amount: Union[int, float]) -> str:
    """金額を表示用文字列に整形（整数値は小数点なし）"""
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)


class OutreachClient:
    """
    外部向けアクションのスタブ

    Responsibilities:
    - お問い合わせメッセージ送信（ローカル検証のみ、実送信なし）
    - 寄付の受付（ローカル検証のみ、決済なし）
    - ボランティア登録の受付

    Note: 実際の送信・決済は行わず、固定の結果メッセージを返す
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        OutreachClient を初期化

        Args:
            config: 表示設定（currency_symbol など）
        """
        self.config = config or {}
        self.logger = logging.getLogger(__name__)

    @property
    def currency_symbol(self) -> str:
        return self.config.get("currency_symbol", "₹")

    def send_message(self, message: str) -> str:
        """
        お問い合わせメッセージを送信

        Returns:
            str: 利用者向けの結果メッセージ

        Raises:
            EmptyMessageError: メッセージが空の場合
        """
        text = validate_message(message)
        self.logger.info("Contact message accepted (simulated)", extra={"length": len(text)})
        return CONTACT_SENT_MESSAGE

    def donate(self, amount: Union[int, float]) -> str:
        """
        寄付を受付

        Returns:
            str: 利用者向けのお礼メッセージ

        Raises:
            NonPositiveAmountError: 金額が 0 以下、または NaN・無限大の場合
        """
        validate_amount(amount)
        self.logger.info(f"Donation accepted (simulated): {format_amount(amount)}")
        return f"Thank you for donating {self.currency_symbol}{format_amount(amount)}!"

    def sign_up_volunteer(self) -> str:
        """ボランティア登録を受付"""
        self.logger.info("Volunteer sign-up accepted (simulated)")
        return VOLUNTEER_MESSAGE
