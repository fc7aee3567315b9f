"""Tests for parsing locale formatted dates and date ranges."""

import pendulum
import pytest

from planning.exception import (
    CallerPreconditionError,
    DateParseError,
    MalformedDateError,
    MalformedRangeError,
)
from planning.model.date_span import DateSpan
from planning.model.locale import ENGLISH
from planning.service.date_range import parse_date, parse_date_range


class TestParseDate:
    def test_french_date(self) -> None:
        assert parse_date("1 avril 2025") == pendulum.date(2025, 4, 1)

    def test_month_name_is_case_insensitive(self) -> None:
        assert parse_date("14 JUILLET 2025") == pendulum.date(2025, 7, 14)
        assert parse_date("3 Décembre 2024") == pendulum.date(2024, 12, 3)

    def test_accented_month_names(self) -> None:
        assert parse_date("28 février 2024") == pendulum.date(2024, 2, 28)
        assert parse_date("15 août 2025") == pendulum.date(2025, 8, 15)

    def test_leap_day(self) -> None:
        assert parse_date("29 février 2024") == pendulum.date(2024, 2, 29)

    @pytest.mark.parametrize(
        "token",
        [
            "1 avril",
            "avril 2025",
            "1 avril 2025 10h",
            "1  avril 2025",
            "",
            "not a date",
        ],
    )
    def test_wrong_part_count(self, token: str) -> None:
        with pytest.raises(MalformedDateError):
            parse_date(token)

    def test_unknown_month_name(self) -> None:
        with pytest.raises(MalformedDateError, match="Invalid month"):
            parse_date("1 april 2025")

    def test_abbreviated_month_is_rejected(self) -> None:
        with pytest.raises(MalformedDateError):
            parse_date("1 avr. 2025")

    @pytest.mark.parametrize("token", ["premier avril 2025", "1 avril 20x5", "1.5 avril 2025"])
    def test_non_integer_day_or_year(self, token: str) -> None:
        with pytest.raises(MalformedDateError):
            parse_date(token)

    @pytest.mark.parametrize(
        "token",
        ["1_0 avril 2025", "+1 avril 2025", "1 avril 2_025", "\u0661 avril 2025", "1 avril 2025\t"],
    )
    def test_only_plain_digits_are_accepted(self, token: str) -> None:
        with pytest.raises(MalformedDateError, match="Invalid day or year"):
            parse_date(token)

    def test_leading_zero_day(self) -> None:
        assert parse_date("01 avril 2025") == pendulum.date(2025, 4, 1)

    @pytest.mark.parametrize("token", ["31 avril 2025", "29 février 2023", "0 mai 2025"])
    def test_day_outside_month_is_rejected(self, token: str) -> None:
        with pytest.raises(MalformedDateError):
            parse_date(token)

    def test_error_carries_expression(self) -> None:
        with pytest.raises(MalformedDateError) as excinfo:
            parse_date("1 april 2025")
        assert excinfo.value.expression == "1 april 2025"

    def test_parse_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_date("1 april 2025")

    def test_english_locale(self) -> None:
        assert parse_date("1 April 2025", ENGLISH) == pendulum.date(2025, 4, 1)


class TestParseDateRange:
    def test_single_date_is_single_day(self) -> None:
        span = parse_date_range("1 avril 2025")

        assert span.start == pendulum.date(2025, 4, 1)
        assert span.end == span.start
        assert span.is_single_day is True

    def test_single_date_is_stripped(self) -> None:
        span = parse_date_range("  1 avril 2025 ")
        assert span.start == pendulum.date(2025, 4, 1)

    def test_range(self) -> None:
        span = parse_date_range("1 avril 2025 → 8 avril 2025")

        assert span.start == pendulum.date(2025, 4, 1)
        assert span.end == pendulum.date(2025, 4, 8)
        assert span.start < span.end
        assert span.is_single_day is False

    def test_range_without_spaces_around_separator(self) -> None:
        span = parse_date_range("1 avril 2025→8 avril 2025")
        assert span.end == pendulum.date(2025, 4, 8)

    def test_range_across_years(self) -> None:
        span = parse_date_range("30 décembre 2024 → 2 janvier 2025")

        assert span.start == pendulum.date(2024, 12, 30)
        assert span.end == pendulum.date(2025, 1, 2)

    def test_range_with_identical_endpoints_is_single_day(self) -> None:
        span = parse_date_range("5 mai 2025 → 5 mai 2025")

        assert span.is_single_day is True
        assert span.start == span.end

    def test_too_many_parts(self) -> None:
        with pytest.raises(MalformedRangeError):
            parse_date_range("1 avril 2025 → 2 avril 2025 → 3 avril 2025")

    def test_missing_end(self) -> None:
        with pytest.raises(MalformedDateError):
            parse_date_range("1 avril 2025 →")

    def test_invalid_endpoint(self) -> None:
        with pytest.raises(MalformedDateError):
            parse_date_range("1 avril 2025 → 8 april 2025")

    def test_reversed_range(self) -> None:
        with pytest.raises(MalformedRangeError, match="ends before it starts"):
            parse_date_range("8 avril 2025 → 1 avril 2025")

    def test_all_failures_share_a_base_class(self) -> None:
        for expression in ["nope", "1 avril 2025 → 2 avril 2025 → 3 avril 2025"]:
            with pytest.raises(DateParseError):
                parse_date_range(expression)


class TestDateSpan:
    def test_of_derives_single_day(self) -> None:
        day = pendulum.date(2025, 4, 1)
        assert DateSpan.of(day, day).is_single_day is True
        assert DateSpan.of(day, day.add(days=1)).is_single_day is False

    def test_of_rejects_reversed_dates(self) -> None:
        with pytest.raises(CallerPreconditionError):
            DateSpan.of(pendulum.date(2025, 4, 2), pendulum.date(2025, 4, 1))
