"""Pick the record whose numeric fields add up to the largest total."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Sequence


def _is_numeric(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def score_record(record: Mapping[str, Any], fields: Optional[Sequence[str]] = None) -> float:
    """Sum the numeric values of ``fields`` (or of every field when omitted).

    Missing and non-numeric values count as zero.
    """
    if fields is None:
        values = record.values()
    else:
        values = (record.get(name) for name in fields)
    return sum(float(value) for value in values if _is_numeric(value))


def find_max_record(
    records: Iterable[Mapping[str, Any]],
    fields: Optional[Sequence[str]] = None,
) -> Optional[Mapping[str, Any]]:
    """Return the first record with the highest score, or None when empty."""
    best: Optional[Mapping[str, Any]] = None
    best_score = 0.0
    for record in records:
        score = score_record(record, fields)
        # Strict comparison: earlier records win ties.
        if best is None or score > best_score:
            best = record
            best_score = score
    return best


__all__ = ["find_max_record", "score_record"]
