"""Password rules — strength and confirmation match."""

from typing import Mapping, Optional

from signup_form.config import get_settings
from signup_form.models.signals import InputField, NodeName, Signal, SignalValue
from signup_form.validators.base import BaseRule


def password_is_valid(password: str, min_length: int = 8, banned: str = "password") -> bool:
    """Long enough and not exactly the banned literal (case-sensitive)."""
    return password != banned and len(password) >= min_length


def passwords_match(password: str, confirmation: str) -> bool:
    """Exact comparison of the raw values. Two empty strings match."""
    return password == confirmation


class PasswordValidRule(BaseRule):
    """Validates the raw password against length and banned-word rules."""

    def __init__(self, min_length: Optional[int] = None, banned: Optional[str] = None):
        settings = get_settings()
        self.min_length = settings.PASSWORD_MIN_LENGTH if min_length is None else min_length
        self.banned = settings.BANNED_PASSWORD if banned is None else banned

    @property
    def signal(self) -> Signal:
        return Signal.PASSWORD_VALID

    @property
    def depends_on(self) -> tuple[NodeName, ...]:
        return (InputField.PASSWORD,)

    def compute(self, values: Mapping[NodeName, SignalValue]) -> SignalValue:
        return password_is_valid(
            self._text(values, InputField.PASSWORD),
            min_length=self.min_length,
            banned=self.banned,
        )


class PasswordsMatchRule(BaseRule):
    """Compares password and confirmation."""

    @property
    def signal(self) -> Signal:
        return Signal.PASSWORDS_MATCH

    @property
    def depends_on(self) -> tuple[NodeName, ...]:
        return (InputField.PASSWORD, InputField.PASSWORD_CONFIRMATION)

    def compute(self, values: Mapping[NodeName, SignalValue]) -> SignalValue:
        return passwords_match(
            self._text(values, InputField.PASSWORD),
            self._text(values, InputField.PASSWORD_CONFIRMATION),
        )
