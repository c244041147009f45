import json
from datetime import date, datetime

import pytest

from nenrei.models.schema import CalendarDate
from nenrei.services import age_service
from nenrei.services.age_service import AgeCalculator, age, age_from_today
from nenrei.services.config_service import DateConfig
from nenrei.utils.helpers.exceptions import InvalidDateError

FIXED_TODAY = date(2024, 6, 14)


@pytest.mark.parametrize(
    "birth, reference, expected",
    [
        ("2000年1月1日", "2024年1月1日", 24),
        ("2000年1月2日", "2024年1月1日", 23),
        ("2000年6月15日", "2024年6月14日", 23),
        ("2000年6月14日", "2024年6月14日", 24),
        ("2000年12月31日", "2024年1月1日", 23),
        ("2000年2月29日", "2023年2月28日", 22),
        ("2000年2月29日", "2023年3月1日", 23),
    ],
)
def test_age_applies_birthday_correction(calculator, birth, reference, expected):
    assert calculator.age(birth, reference) == expected


@pytest.mark.parametrize(
    "value",
    ["2024年2月29日", "1990年7月7日12時0分0秒", CalendarDate(year=1985, month=3, day=3), date(2001, 9, 9)],
)
def test_age_same_date_is_zero(calculator, value):
    assert calculator.age(value, value) == 0


def test_age_ignores_time_of_day(calculator):
    assert calculator.age("2000年1月1日23時59分59秒", "2024年1月1日0時0分0秒") == 24
    assert calculator.age(datetime(2000, 1, 1, 23, 0), datetime(2024, 1, 1, 0, 0)) == 24


def test_age_can_be_negative(calculator):
    assert calculator.age("2024年1月1日", "2000年1月1日") == -24
    assert calculator.age("2024年6月15日", "2000年1月1日") == -25


def test_age_accepts_mixed_inputs(calculator):
    assert calculator.age(date(2000, 1, 1), "2024-01-01") == 24
    assert calculator.age(CalendarDate(year=2000, month=1, day=2), "2024年1月1日") == 23


def test_age_compares_rolled_over_dates(calculator):
    # 2000年13月1日 is 2001-01-01
    assert calculator.age("2000年13月1日", "2001年1月1日") == 0
    assert calculator.age("2000年13月1日", "2001年12月31日") == 0
    assert calculator.age("2000年13月1日", "2002年1月1日") == 1


@pytest.mark.parametrize("bad", ["not-a-date", "", "0000年1月1日", None])
def test_age_raises_for_unresolvable_input(calculator, bad):
    with pytest.raises(InvalidDateError) as excinfo:
        calculator.age(bad, "2024年1月1日")
    assert excinfo.value.value == bad
    assert "date1" in str(excinfo.value)


def test_age_reports_second_argument(calculator):
    with pytest.raises(InvalidDateError, match="date2"):
        calculator.age("2000年1月1日", "not-a-date")


def test_invalid_date_error_is_a_value_error(calculator):
    with pytest.raises(ValueError):
        calculator.age("not-a-date", "2024年1月1日")


def test_age_without_fallback_rejects_free_form_text():
    calculator = AgeCalculator(DateConfig(allow_fallback_parsing=False))
    with pytest.raises(InvalidDateError):
        calculator.age("2000-01-01", "2024年1月1日")
    assert calculator.age("2000年1月1日", "2024年1月1日") == 24


def test_age_from_today_uses_injected_today(calculator):
    assert calculator.age_from_today("2000年6月15日") == 23
    assert calculator.age_from_today("2000年6月14日") == 24
    assert calculator.age_from_today(CalendarDate(year=2000, month=6, day=15)) == calculator.age(
        "2000年6月15日", FIXED_TODAY
    )


def test_age_from_today_agrees_with_age_against_system_date():
    birth = CalendarDate(year=1990, month=4, day=1)
    today = date.today()
    calculator = AgeCalculator(today=lambda: today)
    assert calculator.age_from_today(birth) == calculator.age(birth, today)
    assert age_from_today(birth) in (age(birth, today), age(birth, date.today()))


def test_age_in_months(calculator):
    assert calculator.age_in_months("2024年1月15日", "2024年3月15日") == 2
    assert calculator.age_in_months("2024年1月31日", "2024年2月29日") == 0
    assert calculator.age_in_months("2023年6月14日", "2024年6月14日") == 12
    assert calculator.age_in_months("2023年6月15日", "2024年6月14日") == 11


def test_module_functions_read_environment(monkeypatch):
    monkeypatch.setenv("NENREI_ALLOW_FALLBACK", "off")
    with pytest.raises(InvalidDateError):
        age("2000-01-01", "2024-01-01")
    assert age("2000年1月1日", "2024年1月1日") == 24
    assert age_service.get_calculator() is age_service.get_calculator()


def test_age_writes_event_without_dates(tmp_path):
    log_path = tmp_path / "events.jsonl"
    calculator = AgeCalculator(DateConfig(event_log_path=log_path))

    assert calculator.age("2000年1月1日", "2024年1月1日") == 24

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event["event_type"] == "age"
    assert event["unit"] == "years"
    assert event["result"] == 24
    assert set(event) == {"timestamp", "event_type", "unit", "result"}
