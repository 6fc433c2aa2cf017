"""
Tests for the wateroffice datasource: station XML and real-time CSV.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from eco_dashboard.analysis import build_station_detail
from eco_dashboard.datasources.wateroffice import client
from eco_dashboard.datasources.wateroffice.readings import fetch_readings, parse_readings
from eco_dashboard.datasources.wateroffice.stations import fetch_stations, parse_stations
from eco_dashboard.errors import MalformedPayload, RemoteUnavailable
from eco_dashboard.reference.stations import UNKNOWN_STATION_NAME
from eco_dashboard.schemas import StatusLevel, WaterStation
from tests.conftest import ScriptedFetch

NOW = datetime(2024, 6, 15, 12, 0)

# =============================================================================
# Sample payloads
# =============================================================================

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<current_conditions>
  <station id="07DA001">
    <name>BOW RIVER AT CALGARY</name>
    <province>AB</province>
  </station>
  <station id="07BE001">
    <province>AB</province>
  </station>
  <station id="08MF005">
    <name>FRASER RIVER AT HOPE</name>
    <province>BC</province>
  </station>
</current_conditions>
"""

SAMPLE_CSV = """Date,Time,Parameter,Parameter name,Value,Unit
2024-06-15,11:00:00,46,Water Level,1.82,m
2024-06-15,11:00:00,47,Discharge,88.4,m3/s
2024-06-15,11:05:00,46,Water Level,1.85,m
"""


# =============================================================================
# Request building
# =============================================================================


class TestRealtimeParams:
    def test_two_hour_window(self) -> None:
        params = client.realtime_params("07DA001", NOW)
        assert params["stations[]"] == ["07DA001"]
        assert params["parameters[]"] == ["46", "47"]
        assert params["start_date"] == "2024-06-15 10:00:00"
        assert params["end_date"] == "2024-06-15 12:00:00"

    def test_fetch_realtime_csv_url(self) -> None:
        fetch = ScriptedFetch({"real_time_data": SAMPLE_CSV})
        client.fetch_realtime_csv("07DA001", NOW, fetch=fetch)
        url, params = fetch.calls[0]
        assert url == client.REAL_TIME_DATA_URL
        assert params["stations[]"] == ["07DA001"]


# =============================================================================
# Stations
# =============================================================================


class TestParseStations:
    """Current-conditions XML parsing."""

    def test_keeps_only_known_stations(self) -> None:
        stations = parse_stations(SAMPLE_XML, now=NOW)
        assert [s.station_id for s in stations] == ["07DA001", "07BE001"]

    def test_name_from_xml(self) -> None:
        stations = parse_stations(SAMPLE_XML, now=NOW)
        assert stations[0].name == "BOW RIVER AT CALGARY"

    def test_missing_name(self) -> None:
        stations = parse_stations(SAMPLE_XML, now=NOW)
        assert stations[1].name == UNKNOWN_STATION_NAME

    def test_coordinates_from_reference(self) -> None:
        station = parse_stations(SAMPLE_XML, now=NOW)[0]
        assert station.latitude == pytest.approx(51.045)
        assert station.longitude == pytest.approx(-114.058)
        assert station.province == "Alberta"
        assert station.status == StatusLevel.NORMAL
        assert station.last_updated == NOW

    def test_nested_stations_found(self) -> None:
        xml = '<root><group><station id="07DA001"><name>Bow</name></station></group></root>'
        assert len(parse_stations(xml)) == 1

    def test_invalid_xml(self) -> None:
        with pytest.raises(MalformedPayload):
            parse_stations("<current_conditions><station>")

    def test_no_stations(self) -> None:
        assert parse_stations("<current_conditions/>") == []


class TestFetchStations:
    def test_fetch_and_parse(self) -> None:
        fetch = ScriptedFetch({"current_conditions": SAMPLE_XML})
        assert len(fetch_stations(fetch=fetch)) == 2
        assert fetch.calls[0][1] == {"lang": "en"}

    def test_no_known_station_is_malformed(self) -> None:
        fetch = ScriptedFetch({"current_conditions": "<current_conditions/>"})
        with pytest.raises(MalformedPayload):
            fetch_stations(fetch=fetch)

    def test_remote_failure(self) -> None:
        with pytest.raises(RemoteUnavailable):
            fetch_stations(fetch=ScriptedFetch())


# =============================================================================
# Readings
# =============================================================================


class TestParseReadings:
    """Real-time CSV parsing."""

    def test_header_skipped(self) -> None:
        readings = parse_readings(SAMPLE_CSV, "07DA001", now=NOW)
        assert len(readings) == 3
        assert readings[0].code == "46"

    def test_fields(self) -> None:
        reading = parse_readings(SAMPLE_CSV, "07DA001", now=NOW)[1]
        assert reading.timestamp == datetime(2024, 6, 15, 11, 0)
        assert reading.code == "47"
        assert reading.display_name == "Discharge"
        assert reading.value == pytest.approx(88.4)
        assert reading.unit == "m3/s"
        assert reading.region_id == "07DA001"
        assert reading.location_name == "Bow River at Calgary"

    def test_short_rows_skipped(self) -> None:
        text = SAMPLE_CSV + "2024-06-15,11:10:00,46\n"
        assert len(parse_readings(text, "07DA001", now=NOW)) == 3

    def test_bad_value_defaults_to_zero(self) -> None:
        text = "header\n2024-06-15,11:00:00,46,Water Level,n/a,m\n"
        (reading,) = parse_readings(text, "07DA001", now=NOW)
        assert reading.value == 0.0

    def test_bad_timestamp_defaults_to_now(self) -> None:
        text = "header\nsoon,later,46,Water Level,1.2,m\n"
        (reading,) = parse_readings(text, "07DA001", now=NOW)
        assert reading.timestamp == NOW

    def test_non_finite_value_defaults_to_zero(self) -> None:
        text = "header\n2024-06-15,11:00:00,46,Water Level,inf,m\n"
        (reading,) = parse_readings(text, "07DA001", now=NOW)
        assert reading.value == 0.0

    def test_offset_time_dropped(self) -> None:
        text = "header\n2024-06-15,11:00:00-06:00,46,Water Level,1.2,m\n"
        (reading,) = parse_readings(text, "07DA001", now=NOW)
        assert reading.timestamp == datetime(2024, 6, 15, 11, 0)
        assert reading.timestamp.tzinfo is None

    def test_mixed_times_build_detail(self) -> None:
        text = (
            "header\n"
            "2024-06-15,11:00:00-06:00,46,Water Level,1.2,m\n"
            "soon,later,46,Water Level,1.4,m\n"
            "2024-06-15,11:30:00,47,Discharge,88.0,m3/s\n"
        )
        readings = parse_readings(text, "07DA001", now=NOW)
        station = WaterStation(station_id="07DA001", name="Bow River at Calgary")

        detail = build_station_detail(station, readings)

        assert all(r.timestamp.tzinfo is None for r in detail.readings)
        assert detail.readings[0].timestamp == NOW
        assert detail.current_water_level == pytest.approx(1.4)

    def test_blank_lines_ignored(self) -> None:
        text = "header\n\n2024-06-15,11:00:00,46,Water Level,1.2,m\n\n"
        assert len(parse_readings(text, "07DA001", now=NOW)) == 1

    def test_crlf_line_endings(self) -> None:
        text = SAMPLE_CSV.replace("\n", "\r\n")
        readings = parse_readings(text, "07DA001", now=NOW)
        assert readings[0].unit == "m"

    def test_header_only_is_malformed(self) -> None:
        with pytest.raises(MalformedPayload):
            parse_readings("Date,Time,Parameter,Parameter name,Value,Unit\n", "07DA001")

    def test_empty_is_malformed(self) -> None:
        with pytest.raises(MalformedPayload):
            parse_readings("", "07DA001")

    def test_unknown_station_location(self) -> None:
        (reading,) = parse_readings(
            "header\n2024-06-15,11:00:00,46,Water Level,1.2,m\n", "05AA001", now=NOW
        )
        assert reading.location_name == "Station 05AA001"


class TestFetchReadings:
    def test_fetch_and_parse(self) -> None:
        fetch = ScriptedFetch({"real_time_data": SAMPLE_CSV})
        assert len(fetch_readings("07DA001", now=NOW, fetch=fetch)) == 3

    def test_remote_failure(self) -> None:
        with pytest.raises(RemoteUnavailable):
            fetch_readings("07DA001", now=NOW, fetch=ScriptedFetch())
