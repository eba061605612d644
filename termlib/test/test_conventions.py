from __future__ import annotations

from datetime import date, datetime

import pandas as pd
import pytest

from termlib import settings
from termlib.conventions import (
    ACT_360,
    ACT_365F,
    NULL_CALENDAR,
    TARGET,
    WEEKEND_ONLY,
    Compounding,
    Frequency,
    get_calendar,
    get_day_count_convention,
)
from termlib.quotes import Quote, SimpleQuote
from termlib.errors import InvalidQuoteError
from termlib.utils.date import add_days, to_date, year_ends


class TestDayCount:
    def test_act_365f(self):
        assert ACT_365F.year_fraction(date(2024, 1, 1), date(2025, 1, 1)) == pytest.approx(366 / 365)

    def test_act_360(self):
        assert ACT_360.day_count(date(2024, 1, 1), date(2024, 7, 1)) == 182
        assert ACT_360.year_fraction("2024-01-01", datetime(2024, 7, 1)) == pytest.approx(182 / 360)

    def test_reference_period_accepted(self):
        dc = get_day_count_convention("ACT/ACT ISMA")
        yf = dc.year_fraction(date(2024, 1, 1), date(2024, 7, 1), date(2024, 1, 1), date(2024, 7, 1))
        assert yf == pytest.approx(0.5)

    def test_registry(self):
        assert get_day_count_convention("act/365") is ACT_365F
        assert get_day_count_convention(ACT_360) is ACT_360
        with pytest.raises(ValueError):
            get_day_count_convention("ACT/999")

    def test_names(self):
        assert str(ACT_365F) == "ACT/365F"
        assert ACT_365F.long_name == "Actual/365 (Fixed)"


class TestCalendar:
    def test_target_settlement(self):
        # 2024-01-05 is a Friday
        assert TARGET.add_business_days(date(2024, 1, 5), 2) == date(2024, 1, 9)

    def test_weekend_roll(self):
        assert WEEKEND_ONLY.add_business_days(date(2024, 1, 6), 0) == date(2024, 1, 8)

    def test_null_calendar(self):
        assert NULL_CALENDAR.add_business_days(date(2024, 1, 6), 2) == date(2024, 1, 8)

    def test_registry(self):
        assert get_calendar("eur") is TARGET
        assert get_calendar(TARGET) is TARGET
        with pytest.raises(ValueError):
            get_calendar("MARS")


class TestEnums:
    def test_frequency(self):
        assert Frequency.SEMIANNUAL.periods_per_year() == 2

    def test_discrete_compounding(self):
        assert Compounding.COMPOUNDED.is_discrete()
        assert Compounding.SIMPLE_THEN_COMPOUNDED.is_discrete()
        assert not Compounding.CONTINUOUS.is_discrete()
        assert not Compounding.SIMPLE.is_discrete()


class TestQuote:
    def test_simple_quote(self):
        quote = SimpleQuote()
        assert isinstance(quote, Quote)
        assert not quote.is_valid()
        with pytest.raises(InvalidQuoteError):
            quote.value()
        quote.set_value(0.98)
        assert quote.is_valid()
        assert quote.value() == 0.98


class TestDates:
    def test_to_date(self):
        assert to_date("2024-03-01") == date(2024, 3, 1)
        assert to_date("20240301") == date(2024, 3, 1)
        assert to_date(datetime(2024, 3, 1, 12)) == date(2024, 3, 1)
        assert to_date(pd.Timestamp("2024-03-01")) == date(2024, 3, 1)
        with pytest.raises(ValueError):
            to_date("01/03/2024")
        with pytest.raises(TypeError):
            to_date(20240301)

    def test_helpers(self):
        assert year_ends(2024, 3) == [date(2024, 12, 31), date(2025, 12, 31), date(2026, 12, 31)]
        assert year_ends(2024, 0) == []
        assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)


class TestSettings:
    def test_evaluation_date(self):
        assert settings.set_evaluation_date("2024-05-17") == date(2024, 5, 17)
        assert settings.evaluation_date() == date(2024, 5, 17)

    def test_instantaneous_step(self):
        assert settings.INSTANTANEOUS_DT == 1.0e-4
