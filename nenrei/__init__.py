"""nenrei: Japanese date parsing and age calculation helpers."""

from nenrei.models.schema import CalendarDate
from nenrei.services.age_service import AgeCalculator, age, age_from_today, age_in_months
from nenrei.services.config_service import ConfigService, DateConfig
from nenrei.services.record_service import find_max_record, score_record
from nenrei.utils.helpers.date_utils import parse_date, to_instant
from nenrei.utils.helpers.exceptions import (
    ConfigurationError,
    DateProcessingError,
    InvalidDateError,
)

__version__ = "0.1.0"

__all__ = [
    "AgeCalculator",
    "CalendarDate",
    "ConfigService",
    "ConfigurationError",
    "DateConfig",
    "DateProcessingError",
    "InvalidDateError",
    "age",
    "age_from_today",
    "age_in_months",
    "find_max_record",
    "parse_date",
    "score_record",
    "to_instant",
]
