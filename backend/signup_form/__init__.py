"""Sign-up form core — reactive validation for email/password sign-up.

Usage:
    from signup_form import ValidationEngine, Signal, configure_logging

    configure_logging()  # once, at host startup; reads SIGNUP_LOG_LEVEL / SIGNUP_DEBUG
    engine = ValidationEngine()
    engine.subscribe(Signal.FORM_VALID, on_form_valid)
    engine.set_email(text)

Until configure_logging() runs, structlog keeps its defaults and prints
debug events to stdout.
"""

from signup_form.engine import ValidationEngine
from signup_form.exceptions import FormNotReadyError, SignupFormError
from signup_form.logging_config import configure_logging
from signup_form.models.signals import InputField, Signal, SignupSnapshot
from signup_form.presenter import SignupPresenter
from signup_form.services.event_bus import EventBus

__all__ = [
    "ValidationEngine",
    "SignupPresenter",
    "EventBus",
    "InputField",
    "Signal",
    "SignupSnapshot",
    "SignupFormError",
    "FormNotReadyError",
    "configure_logging",
]
