"""Date parsing helpers.

``parse_date`` understands exactly one textual form, the Japanese
``2024年1月1日`` style with an optional ``9時30分0秒`` time group.
``to_instant`` builds on it and falls back to free-form parsing for
anything else.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time
from typing import Optional, Union

from dateutil import parser as dateutil_parser

from nenrei.models.schema import CalendarDate, DateConfig
from nenrei.utils.helpers.exceptions import InvalidDateError

logger = logging.getLogger(__name__)

DateInput = Union[CalendarDate, date, datetime, str]

JAPANESE_DATE_PATTERN = re.compile(
    r'([0-9]{4})年([0-9]{1,2})月([0-9]{1,2})日'
    r'(?:([0-9]{1,2})時([0-9]{1,2})分([0-9]{1,2})秒)?'
)


def parse_date(value) -> Optional[CalendarDate]:
    """Parse ``YYYY年M月D日`` (optionally ``H時M分S秒``) into a CalendarDate.

    The whole string must match; anything else returns None. Field ranges are
    not checked, so ``2024年13月32日`` still parses. A CalendarDate is
    returned as-is.
    """
    if isinstance(value, CalendarDate):
        return value
    if isinstance(value, date):
        return CalendarDate.from_datetime(value)
    if not isinstance(value, str):
        return None

    match = JAPANESE_DATE_PATTERN.fullmatch(value)
    if not match:
        return None

    year, month, day, hour, minute, second = match.groups()
    return CalendarDate(
        year=int(year),
        month=int(month),
        day=int(day),
        hour=int(hour or 0),
        minute=int(minute or 0),
        second=int(second or 0),
    )


def _parse_free_form(text: str, config: DateConfig) -> Optional[datetime]:
    if not config.allow_fallback_parsing:
        return None
    # Missing fields read as January 1 of the current year, not as today.
    default = datetime(datetime.now().year, 1, 1)
    try:
        parsed = dateutil_parser.parse(text, default=default, dayfirst=config.fallback_dayfirst)
    except (ValueError, OverflowError):
        logger.debug("Free-form date parsing failed", exc_info=True)
        return None
    # Timezones are out of scope; keep the wall-clock reading.
    return parsed.replace(tzinfo=None)


def to_instant(value: DateInput, config: Optional[DateConfig] = None) -> Optional[datetime]:
    """Resolve a date-like input to a naive datetime, or None.

    Resolution order: structured 年月日 text (or an already parsed value),
    then free-form parsing of other strings.
    """
    config = config or DateConfig()

    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime.combine(value, time())

    structured = parse_date(value)
    if structured is not None:
        try:
            return structured.to_datetime()
        except InvalidDateError:
            logger.debug("Structured date could not be resolved", exc_info=True)
            return None

    if isinstance(value, str):
        return _parse_free_form(value, config)
    return None


__all__ = ["DateInput", "JAPANESE_DATE_PATTERN", "parse_date", "to_instant"]
