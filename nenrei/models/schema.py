from __future__ import annotations

from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Optional

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, ConfigDict, Field

from nenrei.utils.helpers.exceptions import InvalidDateError


class DateConfig(BaseModel):
    allow_fallback_parsing: bool = Field(
        default=True,
        description="Try free-form parsing when the text is not in 年月日 form.",
    )
    fallback_dayfirst: bool = Field(
        default=False,
        description="Read ambiguous free-form dates such as 01/02/2024 as day first.",
    )
    event_log_path: Optional[Path] = Field(
        default=None,
        description="Append structured date events to this file as JSON lines.",
    )


class CalendarDate(BaseModel):
    """A calendar date with optional time of day and no timezone.

    Field values are kept exactly as parsed. Month 13 or day 32 are valid
    values here; they only roll over when converted with ``to_datetime``.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(description="Calendar month, 1-12 when in range.")
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def from_datetime(cls, value: date) -> "CalendarDate":
        if isinstance(value, datetime):
            return cls(
                year=value.year,
                month=value.month,
                day=value.day,
                hour=value.hour,
                minute=value.minute,
                second=value.second,
            )
        return cls(year=value.year, month=value.month, day=value.day)

    def to_datetime(self) -> datetime:
        """Resolve to a naive datetime, rolling out-of-range fields forward.

        Month 13 becomes January of the following year, day 0 becomes the last
        day of the previous month, and so on.
        """
        try:
            base = datetime(self.year, 1, 1) + relativedelta(months=self.month - 1)
            return base + timedelta(
                days=self.day - 1,
                hours=self.hour,
                minutes=self.minute,
                seconds=self.second,
            )
        except (ValueError, OverflowError) as exc:
            raise InvalidDateError(f"{self!r} is outside the supported calendar range", value=self) from exc

    def __str__(self) -> str:
        text = f"{self.year:04d}年{self.month}月{self.day}日"
        if self.hour or self.minute or self.second:
            text += f"{self.hour}時{self.minute}分{self.second}秒"
        return text


__all__ = ["CalendarDate", "DateConfig"]
