from datetime import date

import pytest

from src.leave_tracker.leave_tracker.common import date_utils
from src.leave_tracker.leave_tracker.core.exceptions import ValidationError


def test_days_between_inclusive_same_day_is_one():
    assert date_utils.days_between_inclusive("2024-01-01", "2024-01-01") == 1


def test_days_between_inclusive_counts_both_ends():
    assert date_utils.days_between_inclusive("2024-01-01", "2024-01-10") == 10


def test_days_between_inclusive_is_symmetric_and_crosses_leap_day():
    assert date_utils.days_between_inclusive("2024-03-01", "2024-02-28") == 3


def test_normalize_iso_pads_and_rejects_garbage():
    assert date_utils.normalize_iso("2024-3-5") == "2024-03-05"
    with pytest.raises(ValidationError):
        date_utils.normalize_iso("05/03/2024")
    with pytest.raises(ValidationError):
        date_utils.normalize_iso("")


def test_today_is_evaluated_on_each_call(monkeypatch):
    days = iter([date(2024, 1, 1), date(2024, 1, 2)])
    monkeypatch.setattr(date_utils, "today_local", lambda: next(days))

    assert date_utils.today() == "2024-01-01"
    assert date_utils.today() == "2024-01-02"


def test_iter_days_oldest_first_ending_at_end():
    days = list(date_utils.iter_days("2024-03-02", 3))
    assert days == ["2024-02-29", "2024-03-01", "2024-03-02"]


def test_format_display():
    assert date_utils.format_display("2024-03-05") == "Mar 5, 2024"
