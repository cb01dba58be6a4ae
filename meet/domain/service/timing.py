"""Time rules shared by the invite and meeting services."""

from datetime import datetime

from meet.config import SchedulingSettings
from meet.domain.error import ValidationError
from meet.util.clock import as_utc, utcnow


def check_not_past(
    value: datetime, settings: SchedulingSettings, field: str
) -> None:
    """Reject a time that already passed, when the setting asks for it.

    Raises:
        ValidationError: If the time is not in the future
    """
    if settings.reject_past_times and as_utc(value) <= utcnow():
        raise ValidationError(f"{field} must be in the future")
