from datetime import datetime

import pytest

from src.roll_call.roll_call.common.datetime_utils import start_of_day
from src.roll_call.roll_call.common.validators import require_positive_int
from src.roll_call.roll_call.core.exceptions import ValidationError


def test_start_of_day_is_local_midnight():
    assert start_of_day(datetime(2026, 3, 2, 23, 59, 59, 999999)) == datetime(2026, 3, 2)
    assert start_of_day(datetime(2026, 3, 2)) == datetime(2026, 3, 2)


@pytest.mark.parametrize("value,expected", [(5, 5), ("12", 12), (3.0, 3)])
def test_require_positive_int_accepts(value, expected):
    assert require_positive_int(value, "Duration") == expected


@pytest.mark.parametrize("value", [0, -1, None, "x", 1.5, False])
def test_require_positive_int_rejects(value):
    with pytest.raises(ValidationError):
        require_positive_int(value, "Duration")


@pytest.mark.parametrize("value", [11, 10**13, float("inf")])
def test_require_positive_int_enforces_maximum(value):
    with pytest.raises(ValidationError):
        require_positive_int(value, "Duration", maximum=10)
