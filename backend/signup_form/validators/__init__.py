"""Derived-signal rules for the sign-up form.

Usage:
    from signup_form.validators import default_rules

    engine = ValidationEngine(rules=default_rules())
"""

from signup_form.validators.base import BaseRule
from signup_form.validators.email import EmailValidRule, NormalizedEmailRule, email_is_valid, normalize_email
from signup_form.validators.form import FormValidRule, form_is_valid
from signup_form.validators.password import (
    PasswordValidRule,
    PasswordsMatchRule,
    password_is_valid,
    passwords_match,
)


def default_rules() -> list[BaseRule]:
    """Create the default rule set. Order does not matter; the engine sorts by dependency."""
    return [
        NormalizedEmailRule(),
        EmailValidRule(),
        PasswordValidRule(),
        PasswordsMatchRule(),
        FormValidRule(),
    ]


__all__ = [
    "BaseRule",
    "NormalizedEmailRule",
    "EmailValidRule",
    "PasswordValidRule",
    "PasswordsMatchRule",
    "FormValidRule",
    "default_rules",
    "normalize_email",
    "email_is_valid",
    "password_is_valid",
    "passwords_match",
    "form_is_valid",
]
