"""Models package for nenrei."""

from nenrei.models.schema import CalendarDate, DateConfig

__all__ = [
    "CalendarDate",
    "DateConfig",
]
