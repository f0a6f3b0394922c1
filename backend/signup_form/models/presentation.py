"""Headless widget state applied by the UI layer."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class FieldColor(str, Enum):
    """Text color of a form field."""

    LABEL = "label"   # valid, default text color
    ERROR = "red"     # invalid


class ButtonBackground(str, Enum):
    """Submit button background per control state."""

    PRIMARY = "blue"
    DISABLED = "dark_gray"


class FieldState(BaseModel):
    """Displayed text and color of one text field."""

    text: str = ""
    color: FieldColor = FieldColor.ERROR


class SubmitButtonState(BaseModel):
    """Enabled flag and background of the submit control."""

    enabled: bool = False
    background: ButtonBackground = ButtonBackground.DISABLED


class Alert(BaseModel):
    """Modal shown after a successful sign-up."""

    title: str
    message: Optional[str] = None
    actions: list[str] = ["Dismiss"]
