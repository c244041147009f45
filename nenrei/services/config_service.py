"""Environment-based configuration loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values, find_dotenv

from nenrei.models.schema import DateConfig
from nenrei.utils.helpers.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

ENV_ALLOW_FALLBACK = "NENREI_ALLOW_FALLBACK"
ENV_DAYFIRST = "NENREI_DAYFIRST"
ENV_EVENT_LOG = "NENREI_EVENT_LOG"


def _parse_bool(name: str, raw: Optional[str], default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    token = raw.strip().lower()
    if token in _TRUE_VALUES:
        return True
    if token in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")


class ConfigService:
    """Load DateConfig from the process environment (and a .env file)."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, *, use_dotenv: bool = True) -> None:
        self._environ = environ
        self._use_dotenv = use_dotenv
        self._config: Optional[DateConfig] = None
        self._logger = logging.getLogger(__name__)

    def load(self) -> DateConfig:
        """Return the cached config, reading the environment on first use."""
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> DateConfig:
        if self._environ is None:
            environ: Dict[str, str] = {}
            if self._use_dotenv:
                environ.update(self._read_dotenv())
            # Process environment wins over the .env file.
            environ.update(os.environ)
        else:
            environ = dict(self._environ)

        event_log = (environ.get(ENV_EVENT_LOG) or "").strip()
        config = DateConfig(
            allow_fallback_parsing=_parse_bool(ENV_ALLOW_FALLBACK, environ.get(ENV_ALLOW_FALLBACK), True),
            fallback_dayfirst=_parse_bool(ENV_DAYFIRST, environ.get(ENV_DAYFIRST), False),
            event_log_path=Path(event_log) if event_log else None,
        )
        self._logger.debug("Date config loaded", extra={"config": config.model_dump(mode="json")})
        return config

    def _read_dotenv(self) -> Dict[str, str]:
        """Read the .env file nearest the working directory without touching os.environ."""
        path = find_dotenv(usecwd=True)
        if not path:
            return {}
        self._logger.debug("Reading .env file", extra={"path": path})
        return {key: value for key, value in dotenv_values(path).items() if value is not None}


__all__ = ["ConfigService", "DateConfig"]
