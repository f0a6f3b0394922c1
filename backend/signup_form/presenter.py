"""Sign-up presenter — binds the validation engine to headless widget state.

The presenter plays the part of the screen controller: widget callbacks
forward raw edits to the engine, and engine signals are mapped onto field
colors, the submit button, and the displayed email text. A real UI copies
these states onto its widgets; tests read them directly.
"""

from typing import Callable, Optional

import structlog

from signup_form.engine import ValidationEngine
from signup_form.exceptions import FormNotReadyError
from signup_form.models.presentation import (
    Alert,
    ButtonBackground,
    FieldColor,
    FieldState,
    SubmitButtonState,
)
from signup_form.models.signals import Signal

logger = structlog.get_logger()

WELCOME_TITLE = "Welcome!"
DISMISS_ACTION = "Dismiss"


def validity_color(valid: bool) -> FieldColor:
    return FieldColor.LABEL if valid else FieldColor.ERROR


class SignupPresenter:
    """Headless controller for the sign-up screen."""

    def __init__(self, engine: Optional[ValidationEngine] = None):
        self.engine = engine or ValidationEngine()

        self.email_field = FieldState()
        self.password_field = FieldState()
        self.password_confirmation_field = FieldState()
        self.submit_button = SubmitButtonState()
        self.presented_alert: Optional[Alert] = None

        self._unsubscribers: list[Callable[[], None]] = []
        self._bind()

    # ── Bindings ──

    def _bind(self) -> None:
        bindings = {
            Signal.FORM_VALID: self._apply_submit_enabled,
            Signal.EMAIL_VALID: lambda ok: self._apply_color(self.email_field, ok),
            Signal.PASSWORD_VALID: lambda ok: self._apply_color(self.password_field, ok),
            Signal.PASSWORDS_MATCH: lambda ok: self._apply_color(self.password_confirmation_field, ok),
            Signal.NORMALIZED_EMAIL: self._apply_email_text,
        }
        for signal, listener in bindings.items():
            self._unsubscribers.append(self.engine.subscribe(signal, listener))

    def _apply_submit_enabled(self, enabled: bool) -> None:
        self.submit_button.enabled = enabled
        self.submit_button.background = ButtonBackground.PRIMARY if enabled else ButtonBackground.DISABLED

    @staticmethod
    def _apply_color(field: FieldState, valid: bool) -> None:
        field.color = validity_color(valid)

    def _apply_email_text(self, normalized: str) -> None:
        # Leave the text alone while it already matches what the user typed
        if normalized != self.engine.email:
            self.email_field.text = normalized

    def close(self) -> None:
        """Drop every binding to the engine."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    # ── Widget callbacks ──

    def email_did_change(self, text: Optional[str]) -> None:
        self.email_field.text = text or ""
        self.engine.set_email(text)
        # Normalized value may be unchanged while the raw text differs from it
        self._apply_email_text(self.engine.normalized_email)

    def password_did_change(self, text: Optional[str]) -> None:
        self.password_field.text = text or ""
        self.engine.set_password(text)

    def password_confirmation_did_change(self, text: Optional[str]) -> None:
        self.password_confirmation_field.text = text or ""
        self.engine.set_password_confirmation(text)

    def agree_terms_did_change(self, is_on: bool) -> None:
        self.engine.set_agree_terms(is_on)

    # ── Actions ──

    def sign_up(self) -> Alert:
        """Handle a tap on the submit control.

        Returns:
            The welcome alert now being presented

        Raises:
            FormNotReadyError: If the form is not valid
        """
        snapshot = self.engine.snapshot()
        if not snapshot.form_valid:
            failing = snapshot.failing_checks()
            logger.warning("sign_up_rejected", failing=failing)
            raise FormNotReadyError(failing)

        self.presented_alert = Alert(title=WELCOME_TITLE, actions=[DISMISS_ACTION])
        logger.info("sign_up_completed")
        return self.presented_alert

    def dismiss_alert(self) -> None:
        self.presented_alert = None
