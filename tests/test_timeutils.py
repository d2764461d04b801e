from datetime import datetime, timezone

import pytest

from app.core.exceptions import TimestampParseError
from app.services.search.timeutils import (
    FlightTime,
    add_one_day,
    connection_gap_millis,
    day_bucket,
    format_flight_time,
    is_late_enough_to_spill_to_next_day,
    parse_flight_time,
)

HOUR_MS = 60 * 60 * 1000


class TestParseFlightTime:
    """Strict parsing of 'yyyy MMM d HH:mm z' timestamps."""

    def test_parses_gmt_timestamp(self):
        parsed = parse_flight_time("2016 May 10 21:15 GMT")
        assert parsed.instant == datetime(2016, 5, 10, 21, 15, tzinfo=timezone.utc)
        assert parsed.zone == "GMT"

    def test_single_digit_day_and_lowercase_month(self):
        parsed = parse_flight_time("2016 may 1 08:05 GMT")
        assert parsed.instant == datetime(2016, 5, 1, 8, 5, tzinfo=timezone.utc)

    def test_keeps_published_zone_and_converts_instant(self):
        parsed = parse_flight_time("2016 May 10 22:00 US/Eastern")
        assert parsed.zone == "US/Eastern"
        assert parsed.instant == datetime(2016, 5, 11, 2, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("text", [
        "",
        "2016-05-10 08:00",
        "2016 May 10 08:00",
        "2016 May 10 8:00 GMT",
        "2016 Foo 10 08:00 GMT",
        "2016 Feb 30 08:00 GMT",
        "2016 May 10 25:00 GMT",
        "2016 May 10 08:00 NOPE",
        "May 10 2016 08:00 GMT",
    ])
    def test_rejects_malformed_text(self, text):
        with pytest.raises(TimestampParseError) as excinfo:
            parse_flight_time(text)
        assert excinfo.value.text == text

    def test_rejects_non_string(self):
        with pytest.raises(TimestampParseError):
            parse_flight_time(None)

    def test_parse_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_flight_time("yesterday")

    def test_format_round_trip(self):
        assert format_flight_time(parse_flight_time("2016 May 1 08:05 GMT")) == "2016 May 1 08:05 GMT"

    def test_ordering_compares_instants_across_zones(self):
        eastern = parse_flight_time("2016 May 10 22:00 US/Eastern")
        gmt = parse_flight_time("2016 May 11 01:00 GMT")
        assert gmt < eastern
        assert isinstance(eastern, FlightTime)


class TestDayBucket:

    def test_gmt_day(self):
        assert day_bucket("2016 May 10 21:15 GMT") == "2016_05_10"

    def test_uses_canonical_zone_not_published_zone(self):
        # 22:00 Eastern is already the 11th in GMT
        assert day_bucket("2016 May 10 22:00 US/Eastern") == "2016_05_11"

    def test_alternative_canonical_zone(self):
        assert day_bucket("2016 May 11 02:00 GMT", canonical_zone="US/Eastern") == "2016_05_10"

    def test_accepts_parsed_values(self):
        assert day_bucket(parse_flight_time("2016 Dec 31 23:59 GMT")) == "2016_12_31"

    def test_malformed_input_raises(self):
        with pytest.raises(TimestampParseError):
            day_bucket("2016/05/10")


class TestNextDaySpill:

    @pytest.mark.parametrize("clock, expected", [
        ("20:59", False),
        ("21:00", False),
        ("21:01", True),
        ("22:00", True),
        ("23:10", True),
        ("00:30", False),
    ])
    def test_cutoff_at_21(self, clock, expected):
        assert is_late_enough_to_spill_to_next_day(f"2016 May 10 {clock} GMT", 21) is expected

    def test_hour_is_read_in_canonical_zone(self):
        # 18:30 Eastern is 22:30 GMT
        assert is_late_enough_to_spill_to_next_day("2016 May 10 18:30 US/Eastern", 21)


class TestAddOneDay:

    def test_same_wall_clock_next_day(self):
        assert str(add_one_day("2016 May 10 23:10 GMT")) == "2016 May 11 23:10 GMT"

    def test_month_and_year_rollover(self):
        assert str(add_one_day("2016 May 31 08:00 GMT")) == "2016 Jun 1 08:00 GMT"
        assert str(add_one_day("2016 Dec 31 08:00 GMT")) == "2017 Jan 1 08:00 GMT"

    def test_leap_day(self):
        assert str(add_one_day("2016 Feb 28 12:00 GMT")) == "2016 Feb 29 12:00 GMT"

    def test_keeps_zone_across_dst_change(self):
        before = parse_flight_time("2016 Mar 12 08:00 US/Eastern")
        after = add_one_day(before)
        assert after.zone == "US/Eastern"
        assert str(after) == "2016 Mar 13 08:00 US/Eastern"
        # Clocks sprang forward overnight
        assert connection_gap_millis(before, after) == 23 * HOUR_MS


class TestConnectionGap:

    def test_positive_gap(self):
        assert connection_gap_millis("2016 May 10 10:00 GMT", "2016 May 10 10:30 GMT") == 30 * 60 * 1000

    def test_negative_gap_when_departure_precedes_arrival(self):
        assert connection_gap_millis("2016 May 10 10:30 GMT", "2016 May 10 10:00 GMT") == -30 * 60 * 1000

    def test_gap_across_zones(self):
        assert connection_gap_millis("2016 May 10 22:00 US/Eastern", "2016 May 11 03:00 GMT") == HOUR_MS

    def test_malformed_departure_raises(self):
        with pytest.raises(TimestampParseError):
            connection_gap_millis("2016 May 10 10:00 GMT", "soon")
