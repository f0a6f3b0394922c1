"""Exceptions raised at the edges of the sign-up form."""

from typing import Optional


class SignupFormError(Exception):
    """Base class for sign-up form errors."""


class FormNotReadyError(SignupFormError):
    """Raised when sign-up is attempted while the form is invalid."""

    def __init__(self, failing: Optional[list[str]] = None):
        self.failing = list(failing or [])
        super().__init__(f"Form is not ready for sign-up: {', '.join(self.failing) or 'unknown'}")
