"""Signal names, input fields, and the form snapshot model."""

from enum import Enum
from typing import Union

from pydantic import BaseModel


class InputField(str, Enum):
    """Source values set directly by the UI."""

    EMAIL = "email"
    PASSWORD = "password"
    PASSWORD_CONFIRMATION = "password_confirmation"
    AGREE_TERMS = "agree_terms"


class Signal(str, Enum):
    """Derived values computed from the inputs. Never set directly."""

    NORMALIZED_EMAIL = "normalized_email"
    EMAIL_VALID = "email_valid"
    PASSWORD_VALID = "password_valid"
    PASSWORDS_MATCH = "passwords_match"
    FORM_VALID = "form_valid"


# Any node of the graph: a source or a derived signal
NodeName = Union[InputField, Signal]
SignalValue = Union[str, bool]

INPUT_DEFAULTS: dict[InputField, SignalValue] = {
    InputField.EMAIL: "",
    InputField.PASSWORD: "",
    InputField.PASSWORD_CONFIRMATION: "",
    InputField.AGREE_TERMS: False,
}


class SignupSnapshot(BaseModel):
    """Point-in-time view of every input and derived value."""

    email: str = ""
    password: str = ""
    password_confirmation: str = ""
    agree_terms: bool = False

    normalized_email: str = ""
    email_valid: bool = False
    password_valid: bool = False
    passwords_match: bool = True
    form_valid: bool = False

    def failing_checks(self) -> list[str]:
        """Names of the form_valid conjuncts that are currently false."""
        checks = {
            Signal.EMAIL_VALID.value: self.email_valid,
            Signal.PASSWORD_VALID.value: self.password_valid,
            Signal.PASSWORDS_MATCH.value: self.passwords_match,
            InputField.AGREE_TERMS.value: self.agree_terms,
        }
        return [name for name, ok in checks.items() if not ok]
