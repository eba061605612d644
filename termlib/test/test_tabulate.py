from __future__ import annotations

from datetime import date

import pytest

from termlib.conventions import ACT_360, Compounding
from termlib.errors import OutOfRangeError
from termlib.termstructures import curve_table


def test_curve_table(flat_curve, reference_date):
    dates = [date(2026, 1, 1), reference_date, "2025-01-01"]
    table = curve_table(flat_curve, dates)

    assert list(table.columns) == ["date", "time", "discount", "zero_rate", "inst_forward"]
    assert len(table) == 3
    assert table["date"].tolist() == [date(2026, 1, 1), reference_date, date(2025, 1, 1)]
    assert table.loc[1, "discount"] == 1.0
    assert table.loc[0, "discount"] == flat_curve.discount(date(2026, 1, 1))
    assert table["zero_rate"].tolist() == pytest.approx([0.05] * 3, rel=1e-9)
    assert table["inst_forward"].tolist() == pytest.approx([0.05] * 3, rel=1e-8)


def test_curve_table_in_other_convention(flat_curve):
    table = curve_table(flat_curve, [date(2024, 7, 1)], day_counter=ACT_360, compounding=Compounding.SIMPLE)
    expected = flat_curve.zero_rate(date(2024, 7, 1), ACT_360, Compounding.SIMPLE).rate
    assert table.loc[0, "zero_rate"] == expected


def test_curve_table_propagates_range_errors(flat_curve):
    with pytest.raises(OutOfRangeError):
        curve_table(flat_curve, [date(2020, 1, 1)])
