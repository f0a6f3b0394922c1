"""Email rules — normalization and the @/. containment check."""

from typing import Mapping

from signup_form.models.signals import InputField, NodeName, Signal, SignalValue
from signup_form.validators.base import BaseRule


def normalize_email(email: str) -> str:
    """Lowercase the whole address and trim surrounding whitespace and newlines.

    Internal spaces are kept.
    """
    return email.lower().strip()


def email_is_valid(email: str) -> bool:
    """Loose check: the address contains both '@' and '.' anywhere."""
    return "@" in email and "." in email


class NormalizedEmailRule(BaseRule):
    """Derives the normalized email from the raw email input."""

    @property
    def signal(self) -> Signal:
        return Signal.NORMALIZED_EMAIL

    @property
    def depends_on(self) -> tuple[NodeName, ...]:
        return (InputField.EMAIL,)

    def compute(self, values: Mapping[NodeName, SignalValue]) -> SignalValue:
        return normalize_email(self._text(values, InputField.EMAIL))


class EmailValidRule(BaseRule):
    """Checks the normalized email, never the raw one."""

    @property
    def signal(self) -> Signal:
        return Signal.EMAIL_VALID

    @property
    def depends_on(self) -> tuple[NodeName, ...]:
        return (Signal.NORMALIZED_EMAIL,)

    def compute(self, values: Mapping[NodeName, SignalValue]) -> SignalValue:
        return email_is_valid(self._text(values, Signal.NORMALIZED_EMAIL))
