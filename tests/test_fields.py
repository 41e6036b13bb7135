from datetime import datetime, timezone

import pytest

from moneyboard.fields import (
    parse_amount,
    parse_optional_dmy,
    parse_optional_ymd,
    parse_ymd,
)


def _utc_naive(moment):
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def test_optional_ymd_year_only():
    d = parse_optional_ymd("2024")
    assert (d.year, d.month, d.day, d.hour) == (2024, 1, 1, 0)
    assert d.tzinfo is not None


def test_optional_ymd_full_date():
    d = parse_optional_ymd("2024-05-17")
    assert (d.year, d.month, d.day, d.hour, d.minute) == (2024, 5, 17, 0, 0)


def test_optional_ymd_bad_month_defaults():
    d = parse_optional_ymd("2024-x-3")
    assert (d.month, d.day) == (1, 3)


@pytest.mark.parametrize("value", ["abc", None, 2024, ""])
def test_optional_ymd_unreadable_is_none(value):
    assert parse_optional_ymd(value) is None


def test_optional_ymd_invalid_month_raises():
    with pytest.raises(ValueError):
        parse_optional_ymd("2024-13")


def test_ymd_is_utc_midnight_in_local_offset():
    d = parse_ymd("2023-12-01")
    assert _utc_naive(d) == datetime(2023, 12, 1)
    assert d.utcoffset() == datetime.now().astimezone().utcoffset()


@pytest.mark.parametrize("value", ["2023-02-30", "01.12.2023", "", 5])
def test_ymd_rejects(value):
    with pytest.raises(ValueError):
        parse_ymd(value)


def test_optional_dmy():
    assert parse_optional_dmy("") is None
    assert _utc_naive(parse_optional_dmy("01.12.2023")) == datetime(2023, 12, 1)
    assert _utc_naive(parse_optional_dmy("02.12.2023")) == _utc_naive(parse_ymd("2023-12-02"))


def test_optional_dmy_rejects_other_format():
    with pytest.raises(ValueError):
        parse_optional_dmy("2023-12-01")


@pytest.mark.parametrize(
    ("text", "cents"),
    [
        ("+1,23 €", 123),
        ("-123.4", 12340),
        ("-8.99", 899),
        ("-980.00", 98000),
        ("1.000,00", 100000),
    ],
)
def test_amount_examples(text, cents):
    assert parse_amount(text) == cents


def test_amount_comma_and_dot_agree():
    assert parse_amount("12,34") == parse_amount("12.34")
    assert parse_amount("-12,34 €") == parse_amount("12.34")


@pytest.mark.parametrize("text", ["5", "-", "abc", ""])
def test_amount_rejects(text):
    with pytest.raises(ValueError):
        parse_amount(text)