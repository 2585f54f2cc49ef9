"""フォーム入力バリデーションのユニットテスト"""

import math

import pytest

from src.pashucare.domain.validation import (
    EmptyMessageError,
    FormValidationError,
    InvalidInputError,
    NonPositiveAmountError,
    validate_adopter,
    validate_amount,
    validate_message,
)


class TestValidateAdopter:
    """譲渡申請者の検証"""

    def test_valid_input_is_trimmed(self):
        assert validate_adopter(" Asha ", " asha@example.com\n") == ("Asha", "asha@example.com")

    @pytest.mark.parametrize("email", [
        "a@b.c",
        "first.last@sub.example.co.in",
        "asha+pets@example.com",
    ])
    def test_accepts_basic_email_shapes(self, email):
        """local@domain.tld 形式を受け入れる"""
        assert validate_adopter("Asha", email)[1] == email

    @pytest.mark.parametrize("email", [
        "asha@example",
        "@example.com",
        "asha@.",
        "asha@example.com more",
    ])
    def test_rejects_malformed_email(self, email):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_adopter("Asha", email)
        assert exc_info.value.field == "adopter_email"

    def test_none_values_are_rejected(self):
        with pytest.raises(InvalidInputError):
            validate_adopter(None, None)

    def test_errors_share_base_class(self):
        """すべてのフォームエラーは FormValidationError を継承する"""
        assert issubclass(InvalidInputError, FormValidationError)
        assert issubclass(EmptyMessageError, FormValidationError)
        assert issubclass(NonPositiveAmountError, FormValidationError)


class TestValidateMessage:
    """お問い合わせメッセージの検証"""

    def test_valid_message(self):
        assert validate_message("  Hello!  ") == "Hello!"

    @pytest.mark.parametrize("message", ["", "   ", "\n\t", None])
    def test_blank_message_is_rejected(self, message):
        with pytest.raises(EmptyMessageError) as exc_info:
            validate_message(message)
        assert exc_info.value.message == "Please write a message."


class TestValidateAmount:
    """寄付金額の検証"""

    @pytest.mark.parametrize("amount", [1, 0.5, 500])
    def test_positive_amount(self, amount):
        assert validate_amount(amount) == amount

    @pytest.mark.parametrize("amount", [0, -1, -0.01, None])
    def test_non_positive_amount_is_rejected(self, amount):
        with pytest.raises(NonPositiveAmountError) as exc_info:
            validate_amount(amount)
        assert exc_info.value.amount == amount
        assert exc_info.value.message == "Enter a valid donation amount."

    @pytest.mark.parametrize("amount", [math.nan, math.inf, -math.inf])
    def test_non_finite_amount_is_rejected(self, amount):
        """NaN・無限大は金額として扱わない"""
        with pytest.raises(NonPositiveAmountError) as exc_info:
            validate_amount(amount)
        assert exc_info.value.message == "Enter a valid donation amount."
