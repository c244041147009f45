"""Pytest configuration and shared fixtures for nenrei tests."""

from datetime import date

import pytest

from nenrei.services import age_service
from nenrei.services.age_service import AgeCalculator
from nenrei.services.config_service import DateConfig

FIXED_TODAY = date(2024, 6, 14)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host NENREI_* variables and the shared calculator out of tests."""
    for name in ("NENREI_ALLOW_FALLBACK", "NENREI_DAYFIRST", "NENREI_EVENT_LOG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(age_service, "_default_calculator", None)


@pytest.fixture
def default_config() -> DateConfig:
    return DateConfig()


@pytest.fixture
def calculator(default_config: DateConfig) -> AgeCalculator:
    """Calculator whose notion of today is pinned to FIXED_TODAY."""
    return AgeCalculator(default_config, today=lambda: FIXED_TODAY)
