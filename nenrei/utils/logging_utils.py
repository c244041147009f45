"""Lightweight JSON logging utilities for date resolution events."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)
event_logger = logging.getLogger("nenrei.events")

# Birth dates are personal data; never write them to logs.
SENSITIVE_KEYS = {"birth_date", "raw_value", "raw_text"}


def _build_payload(event: Dict[str, Any]) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
    }
    for key, value in event.items():
        if key is None:
            continue
        normalized = str(key)
        if normalized.lower() in SENSITIVE_KEYS:
            continue
        payload[normalized] = value
    return payload


def log_date_event(event: Dict[str, Any], log_path: Optional[Path] = None) -> Dict[str, Any]:
    """Emit a structured date event without leaking sensitive values.

    The event always goes to the ``nenrei.events`` logger. When ``log_path``
    is given it is also appended to that file as one JSON line. Returns the
    payload that was written.
    """

    payload = _build_payload(event)
    line = json.dumps(payload, ensure_ascii=False, default=str)
    event_logger.info(line)

    if log_path is not None:
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            with log_path.open("a", encoding="utf-8") as handle:
                handle.write(line)
                handle.write("\n")
        except OSError as exc:  # pragma: no cover - logging must never break a calculation
            logger.debug("Failed to write date event log: %s", exc, exc_info=True)
    return payload


def log_age_event(event: Dict[str, Any], log_path: Optional[Path] = None) -> Dict[str, Any]:
    """Record an age calculation outcome."""

    payload = {"event_type": "age"}
    payload.update(event)
    return log_date_event(payload, log_path)
