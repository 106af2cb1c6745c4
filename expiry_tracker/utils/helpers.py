import re
from datetime import date, datetime, timezone
from typing import Optional

from expiry_tracker.errors import ValidationError

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in DateTime columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_expiration_date(value: str) -> date:
    """Parse a YYYY-MM-DD calendar date; anything else is a ValidationError"""
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        raise ValidationError("Expiration date must use the YYYY-MM-DD format")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Expiration date must use the YYYY-MM-DD format")


def validate_expiration_date(value: str, today: Optional[date] = None) -> date:
    """Parse and reject dates strictly before today (same day is allowed)"""
    parsed = parse_expiration_date(value)
    if parsed < (today or date.today()):
        raise ValidationError("Expiration date cannot be in the past")
    return parsed
