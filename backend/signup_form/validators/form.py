"""Form rule — the single gate on submission."""

from typing import Mapping

from signup_form.models.signals import InputField, NodeName, Signal, SignalValue
from signup_form.validators.base import BaseRule


def form_is_valid(email_valid: bool, password_valid: bool, match: bool, agree_terms: bool) -> bool:
    return email_valid and password_valid and match and agree_terms


class FormValidRule(BaseRule):
    """True only when every check passes and the terms are agreed."""

    @property
    def signal(self) -> Signal:
        return Signal.FORM_VALID

    @property
    def depends_on(self) -> tuple[NodeName, ...]:
        return (
            Signal.EMAIL_VALID,
            Signal.PASSWORD_VALID,
            Signal.PASSWORDS_MATCH,
            InputField.AGREE_TERMS,
        )

    def compute(self, values: Mapping[NodeName, SignalValue]) -> SignalValue:
        return form_is_valid(
            self._flag(values, Signal.EMAIL_VALID),
            self._flag(values, Signal.PASSWORD_VALID),
            self._flag(values, Signal.PASSWORDS_MATCH),
            self._flag(values, InputField.AGREE_TERMS),
        )
