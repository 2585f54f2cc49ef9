"""
フォーム入力バリデーション

譲渡申請・お問い合わせ・寄付フォームの入力検証と、
検証失敗を表す例外クラスを提供します。
"""

import math
import re
from typing import Optional, Tuple


# local@domain.tld 形式（@ は1つ、ドメイン部に '.' を含み、空白なし）
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

ADOPTION_INPUT_MESSAGE = "Please enter a valid name and email."
EMPTY_MESSAGE_MESSAGE = "Please write a message."
NON_POSITIVE_AMOUNT_MESSAGE = "Enter a valid donation amount."


class FormValidationError(Exception):
    """
    フォームバリデーションエラー基底クラス

    message はそのまま利用者向けのメッセージとして表示されます。
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(FormValidationError):
    """
    譲渡申請フォームの入力エラー

    名前が空、またはメールアドレスの形式が不正な場合を表します。
    利用者向けメッセージは共通ですが、field で原因を区別できます。
    """

    def __init__(self, message: str, field: Optional[str] = None):
        """
        Args:
            message: エラーメッセージ
            field: 検証に失敗したフィールド ("adopter_name" / "adopter_email")
        """
        super().__init__(message)
        self.field = field


class EmptyMessageError(FormValidationError):
    """お問い合わせメッセージが空の場合のエラー"""

    def __init__(self, message: str = EMPTY_MESSAGE_MESSAGE):
        super().__init__(message)


class NonPositiveAmountError(FormValidationError):
    """寄付金額が 0 以下の場合のエラー"""

    def __init__(self, amount: float, message: str = NON_POSITIVE_AMOUNT_MESSAGE):
        super().__init__(message)
        self.amount = amount


def validate_adopter(adopter_name: str, adopter_email: str) -> Tuple[str, str]:
    """
    譲渡申請者の入力を検証

    名前 → メールアドレスの順に検証します。

    Args:
        adopter_name: 申請者名
        adopter_email: 申請者メールアドレス

    Returns:
        Tuple[str, str]: trim 済みの (名前, メールアドレス)

    Raises:
        InvalidInputError: 名前が空、またはメールアドレスの形式が不正な場合
    """
    name = (adopter_name or "").strip()
    email = (adopter_email or "").strip()

    if not name:
        raise InvalidInputError(ADOPTION_INPUT_MESSAGE, field="adopter_name")
    if not EMAIL_PATTERN.fullmatch(email):
        raise InvalidInputError(ADOPTION_INPUT_MESSAGE, field="adopter_email")

    return name, email


def validate_message(message: str) -> str:
    """
    お問い合わせメッセージを検証

    Returns:
        str: trim 済みのメッセージ

    Raises:
        EmptyMessageError: 空白のみ、または空の場合
    """
    text = (message or "").strip()
    if not text:
        raise EmptyMessageError()
    return text


def validate_amount(amount: float) -> float:
    """
    寄付金額を検証

    Raises:
        NonPositiveAmountError: 0 以下、または NaN・無限大の場合
    """
    if amount is None or not math.isfinite(amount) or not amount > 0:
        raise NonPositiveAmountError(amount)
    return amount
