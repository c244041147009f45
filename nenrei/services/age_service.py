"""Age calculation between two dates.

Inputs are resolved through ``to_instant``: 年月日 text first, then free-form
text. The age is the year difference, minus one when the second date's
month/day has not yet reached the first date's month/day. Time of day is
ignored and the result is negative when the second date comes first.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional

from nenrei.services.config_service import ConfigService, DateConfig
from nenrei.utils.helpers.date_utils import DateInput, to_instant
from nenrei.utils.helpers.exceptions import InvalidDateError
from nenrei.utils.logging_utils import log_age_event

logger = logging.getLogger(__name__)


class AgeCalculator:
    """Compute whole-year (and whole-month) ages between date inputs."""

    def __init__(
        self,
        config: Optional[DateConfig] = None,
        *,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self._config = config
        self._today = today or date.today

    @property
    def config(self) -> DateConfig:
        if self._config is None:
            self._config = ConfigService().load()
        return self._config

    def resolve(self, value: DateInput, *, argument: str = "date") -> datetime:
        """Resolve an input to an instant or raise InvalidDateError."""
        instant = to_instant(value, self.config)
        if instant is None:
            logger.warning("Unresolvable %s input of type %s", argument, type(value).__name__)
            raise InvalidDateError(f"{argument} could not be resolved to a date: {value!r}", value=value)
        return instant

    def age(self, date1: DateInput, date2: DateInput) -> int:
        start = self.resolve(date1, argument="date1")
        end = self.resolve(date2, argument="date2")

        years = end.year - start.year
        month_diff = end.month - start.month
        if month_diff < 0 or (month_diff == 0 and end.day < start.day):
            years -= 1

        log_age_event({"unit": "years", "result": years}, self.config.event_log_path)
        return years

    def age_in_months(self, date1: DateInput, date2: DateInput) -> int:
        start = self.resolve(date1, argument="date1")
        end = self.resolve(date2, argument="date2")

        months = (end.year - start.year) * 12 + (end.month - start.month)
        if end.day < start.day:
            months -= 1

        log_age_event({"unit": "months", "result": months}, self.config.event_log_path)
        return months

    def age_from_today(self, birth_date: DateInput) -> int:
        """Age of ``birth_date`` as of the current local date."""
        return self.age(birth_date, self._today())


_default_calculator: Optional[AgeCalculator] = None


def get_calculator() -> AgeCalculator:
    """Return the shared calculator configured from the environment."""
    global _default_calculator
    if _default_calculator is None:
        _default_calculator = AgeCalculator()
    return _default_calculator


def age(date1: DateInput, date2: DateInput) -> int:
    return get_calculator().age(date1, date2)


def age_in_months(date1: DateInput, date2: DateInput) -> int:
    return get_calculator().age_in_months(date1, date2)


def age_from_today(birth_date: DateInput) -> int:
    return get_calculator().age_from_today(birth_date)


__all__ = [
    "AgeCalculator",
    "age",
    "age_from_today",
    "age_in_months",
    "get_calculator",
]
