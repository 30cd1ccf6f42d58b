"""User-visible notifications."""

from pydantic import BaseModel, ConfigDict

from .enums import Severity


class Notification(BaseModel):
    """A message for the notification sink."""

    model_config = ConfigDict(frozen=True)

    message: str
    severity: Severity = Severity.INFO
