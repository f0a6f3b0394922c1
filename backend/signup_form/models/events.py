"""Signal change event model kept in event bus history."""

from pydantic import BaseModel
from typing import Literal, Union
from datetime import datetime, timezone


class BaseEvent(BaseModel):
    """Base model for all emitted events."""

    type: str
    timestamp: datetime = None

    def model_post_init(self, __context):
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc)

    def model_dump(self, **kwargs):
        """Always serialize datetimes as ISO strings."""
        kwargs.setdefault("mode", "json")
        return super().model_dump(**kwargs)


class SignalChangedEvent(BaseEvent):
    """Emitted when a derived signal takes a new value."""

    type: Literal["signal_changed"] = "signal_changed"
    signal: str
    value: Union[bool, str]
