from __future__ import annotations

import math
from datetime import date, datetime

import pytest

from termlib import settings
from termlib.conventions import ACT_360, TARGET
from termlib.errors import OutOfRangeError, UnresolvedReferenceDateError
from termlib.termstructures import TermStructure


class _Structure(TermStructure):
    pass


def test_fixed_reference_date():
    ts = _Structure(reference_date="2024-01-01", day_counter="ACT/360", name="fixed")
    assert ts.reference_date() == date(2024, 1, 1)
    assert not ts.is_moving
    assert ts.day_counter() == ACT_360
    assert ts.calendar() is None
    assert ts.settlement_days() is None
    assert str(ts) == "_Structure(fixed)"


def test_time_from_reference():
    ts = _Structure(reference_date=date(2024, 1, 1), day_counter="ACT/360")
    assert ts.time_from_reference(date(2024, 7, 1)) == pytest.approx(182 / 360)
    assert ts.time_from_reference(datetime(2024, 7, 1, 15, 30)) == pytest.approx(182 / 360)
    assert ts.time_from_reference(date(2023, 12, 31)) < 0.0


def test_unresolved_reference_date():
    ts = _Structure()
    with pytest.raises(UnresolvedReferenceDateError):
        ts.reference_date()
    with pytest.raises(UnresolvedReferenceDateError):
        ts.time_from_reference(date(2024, 1, 1))
    ts.set_reference_date("2024-03-01")
    assert ts.reference_date() == date(2024, 3, 1)


def test_moving_reference_date():
    ts = _Structure(calendar="TARGET", settlement_days=2)
    assert ts.is_moving
    assert ts.calendar() == TARGET
    settings.set_evaluation_date(date(2024, 1, 5))
    assert ts.reference_date() == date(2024, 1, 9)
    settings.set_evaluation_date("2024-01-08")
    assert ts.reference_date() == date(2024, 1, 10)


def test_fixing_a_moving_reference_date():
    ts = _Structure(calendar="TARGET", settlement_days=2)
    ts.set_reference_date(date(2024, 2, 1))
    assert not ts.is_moving
    settings.set_evaluation_date(date(2024, 1, 5))
    assert ts.reference_date() == date(2024, 2, 1)


def test_moving_structure_needs_calendar():
    with pytest.raises(ValueError):
        _Structure(settlement_days=2)


def test_unbounded_range():
    ts = _Structure(reference_date=date(2024, 1, 1))
    assert ts.max_date() == date.max
    assert ts.max_time() == math.inf
    ts.check_range(date(2100, 1, 1), False)
    ts.check_range_with_time(1.0e6, False)


def test_check_range_before_reference():
    ts = _Structure(reference_date=date(2024, 1, 1))
    with pytest.raises(OutOfRangeError):
        ts.check_range(date(2023, 12, 31), True)
    with pytest.raises(OutOfRangeError):
        ts.check_range_with_time(-1.0e-8, True)
    ts.check_range(date(2024, 1, 1), False)
    ts.check_range_with_time(0.0, False)


class _Capped(TermStructure):
    def max_date(self) -> date:
        return date(2030, 1, 1)


def test_check_range_beyond_max():
    ts = _Capped(reference_date=date(2024, 1, 1))
    assert ts.max_time() == pytest.approx(ts.time_from_reference(date(2030, 1, 1)))
    ts.check_range(date(2030, 1, 1), False)
    with pytest.raises(OutOfRangeError):
        ts.check_range(date(2030, 1, 2), False)
    with pytest.raises(OutOfRangeError):
        ts.check_range_with_time(ts.max_time() + 1.0, False)
    ts.check_range(date(2030, 1, 2), True)
    ts.check_range_with_time(ts.max_time() + 1.0, True)

    ts.enable_extrapolation()
    ts.check_range(date(2031, 1, 1), False)
    ts.enable_extrapolation(False)
    assert not ts.allows_extrapolation
