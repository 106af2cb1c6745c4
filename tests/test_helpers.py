from datetime import date

import pytest

from expiry_tracker.errors import ValidationError
from expiry_tracker.utils.helpers import parse_expiration_date, validate_expiration_date

TODAY = date(2030, 6, 15)


def test_parse_calendar_date():
    assert parse_expiration_date("2999-01-01") == date(2999, 1, 1)


@pytest.mark.parametrize("value", ["2030-6-15", "15/06/2030", "tomorrow", "2030-02-30", "", "2030-06-15T00:00:00"])
def test_malformed_dates_are_validation_errors(value):
    with pytest.raises(ValidationError):
        parse_expiration_date(value)


def test_same_day_allowed_and_past_rejected():
    assert validate_expiration_date("2030-06-15", today=TODAY) == TODAY
    assert validate_expiration_date("2030-06-16", today=TODAY) == date(2030, 6, 16)
    with pytest.raises(ValidationError):
        validate_expiration_date("2030-06-14", today=TODAY)
