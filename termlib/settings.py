"""
Engine-wide settings.

The evaluation date lives in QuantLib's global ``Settings`` singleton, so
moving curves built here and any QuantLib objects in the same process agree
on "today".
"""

import logging
from datetime import date, datetime
from typing import Union

import QuantLib as ql

from termlib.utils.date import to_date

logger = logging.getLogger(__name__)

# Step (in years) of the finite differences behind instantaneous zero and
# forward rates.
INSTANTANEOUS_DT = 1.0e-4


def evaluation_date() -> date:
    """Current global evaluation date."""
    ql_date = ql.Settings.instance().evaluationDate
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


def set_evaluation_date(value: Union[date, datetime, str]) -> date:
    """Set the global evaluation date and return it as a ``date``."""
    new_date = to_date(value)
    logger.debug("Evaluation date set to %s", new_date)
    ql.Settings.instance().evaluationDate = ql.Date(
        new_date.day, new_date.month, new_date.year
    )
    return new_date
