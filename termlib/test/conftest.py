from __future__ import annotations

from datetime import date

import pytest

from termlib import settings
from termlib.conventions import ACT_365F
from termlib.termstructures import FlatForward, YieldTermStructure


@pytest.fixture(autouse=True)
def restore_evaluation_date():
    saved = settings.evaluation_date()
    yield
    settings.set_evaluation_date(saved)


@pytest.fixture(scope="session")
def reference_date() -> date:
    return date(2024, 1, 1)


@pytest.fixture(scope="session")
def flat_rule() -> FlatForward:
    return FlatForward(0.05)


@pytest.fixture
def flat_curve(reference_date: date, flat_rule: FlatForward) -> YieldTermStructure:
    return YieldTermStructure(flat_rule, reference_date=reference_date, day_counter=ACT_365F)
