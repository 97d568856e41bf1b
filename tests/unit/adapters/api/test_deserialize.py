"""
Tests des convertisseurs des encodages de l'API.
"""

from datetime import date, datetime, time, timezone

import pytest

from thetvdb.adapters.api.deserialize import (
    format_air_time,
    format_date_time,
    parse_air_time,
    parse_int_bool,
    parse_int_string,
    parse_optional_date,
    parse_optional_date_time,
    parse_optional_float,
    parse_optional_string,
    parse_optional_timestamp,
    parse_timestamp,
)


class TestOptionalValues:
    """Valeurs "absentes" encodees de facon variable."""

    @pytest.mark.parametrize("raw", ["", None, 0])
    def test_optional_string_absent(self, raw) -> None:
        assert parse_optional_string(raw) is None

    def test_optional_string_present(self) -> None:
        assert parse_optional_string("AMC") == "AMC"

    @pytest.mark.parametrize("raw", [None, 0, 0.0, "0"])
    def test_optional_float_absent(self, raw) -> None:
        assert parse_optional_float(raw) is None

    def test_optional_float_present(self) -> None:
        assert parse_optional_float(8.5) == 8.5
        assert parse_optional_float("7.2") == 7.2

    @pytest.mark.parametrize("raw", [None, 0])
    def test_optional_timestamp_absent(self, raw) -> None:
        assert parse_optional_timestamp(raw) is None

    def test_timestamp_is_utc(self) -> None:
        assert parse_timestamp(1630000000) == datetime(2021, 8, 26, 17, 46, 40, tzinfo=timezone.utc)

    def test_timestamp_rejects_strings(self) -> None:
        with pytest.raises(ValueError):
            parse_timestamp("1630000000")


class TestDates:
    """Dates et dates-heures en chaine."""

    def test_date(self) -> None:
        assert parse_optional_date("2008-01-20") == date(2008, 1, 20)

    def test_empty_date(self) -> None:
        assert parse_optional_date("") is None

    def test_invalid_date(self) -> None:
        with pytest.raises(ValueError):
            parse_optional_date("January 20, 2008")

    def test_date_time_is_utc(self) -> None:
        assert parse_optional_date_time("2020-03-01 08:30:00") == datetime(
            2020, 3, 1, 8, 30, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize("raw", ["", "0000-00-00 00:00:00", None])
    def test_zero_date_time(self, raw) -> None:
        assert parse_optional_date_time(raw) is None

    def test_naive_datetime_value_gets_utc(self) -> None:
        parsed = parse_optional_date_time(datetime(2020, 3, 1, 8, 30))

        assert parsed.tzinfo is timezone.utc

    def test_format_date_time_round_trip(self) -> None:
        moment = datetime(2020, 3, 1, 8, 30, tzinfo=timezone.utc)

        assert parse_optional_date_time(format_date_time(moment)) == moment


class TestAirTime:
    """Heure de diffusion des series."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("9:00 PM", time(21, 0)),
            ("9:00PM", time(21, 0)),
            ("9:00 pm", time(21, 0)),
            ("12:30 AM", time(0, 30)),
            ("21:15", time(21, 15)),
        ],
    )
    def test_formats(self, raw: str, expected: time) -> None:
        assert parse_air_time(raw) == expected

    def test_empty(self) -> None:
        assert parse_air_time("") is None

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            parse_air_time("prime time")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(time(21, 0), "9:00 PM"), (time(0, 5), "12:05 AM"), (time(12, 0), "12:00 PM")],
    )
    def test_format(self, value: time, expected: str) -> None:
        assert format_air_time(value) == expected


class TestIntegers:
    """Entiers et booleens encodes."""

    def test_int_string(self) -> None:
        assert parse_int_string("62") == 62
        assert parse_int_string(62) == 62

    def test_int_string_rejects_text(self) -> None:
        with pytest.raises(ValueError):
            parse_int_string("many")

    def test_int_bool(self) -> None:
        assert parse_int_bool(0) is False
        assert parse_int_bool(1) is True
        assert parse_int_bool(True) is True

    def test_int_bool_rejects_strings(self) -> None:
        with pytest.raises(ValueError):
            parse_int_bool("1")
