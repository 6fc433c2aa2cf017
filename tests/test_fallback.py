"""Tests for synthetic fallback data (birds and stations)."""

from __future__ import annotations

import itertools
import random
from datetime import datetime, timedelta

import pytest

from eco_dashboard.analysis.views import build_station_detail
from eco_dashboard.datasources.ebird.fallback import (
    DEFAULT_WINDOW,
    fallback_window,
    generate_fallback_observations,
)
from eco_dashboard.datasources.wateroffice.fallback import (
    STEPS,
    fallback_stations,
    generate_fallback_readings,
    station_info,
)
from eco_dashboard.reference.birds import BIRDS_BY_CODE
from eco_dashboard.reference.stations import (
    ALBERTA_STATIONS,
    DISCHARGE_PARAM,
    UNKNOWN_STATION_NAME,
    WATER_LEVEL_PARAM,
)
from eco_dashboard.schemas import ObservationQuery, StatusLevel

NOW = datetime(2024, 6, 15, 12, 0)

SPECIES = [None, "amerob", "notabird"]
STARTS = [None, datetime(2024, 6, 1), datetime(2024, 6, 14, 23, 0)]
ENDS = [None, datetime(2024, 6, 15), datetime(2024, 6, 15, 0, 30)]


def _queries() -> list[ObservationQuery]:
    queries = []
    for species, start, end in itertools.product(SPECIES, STARTS, ENDS):
        if start is not None and end is not None and start > end:
            continue
        queries.append(
            ObservationQuery(region="CA-AB", species_code=species, start=start, end=end)
        )
    return queries


class TestFallbackWindow:
    def test_defaults_to_thirty_days_before_now(self) -> None:
        start, end = fallback_window(ObservationQuery(region="CA-AB"), NOW)
        assert end == NOW
        assert start == NOW - DEFAULT_WINDOW

    def test_start_only(self) -> None:
        start, end = fallback_window(
            ObservationQuery(region="CA-AB", start=datetime(2024, 6, 1)), NOW
        )
        assert (start, end) == (datetime(2024, 6, 1), NOW)

    def test_end_only(self) -> None:
        end_bound = datetime(2024, 5, 1)
        start, end = fallback_window(ObservationQuery(region="CA-AB", end=end_bound), NOW)
        assert (start, end) == (end_bound - DEFAULT_WINDOW, end_bound)

    def test_future_start_extends_end(self) -> None:
        future = NOW + timedelta(days=2)
        start, end = fallback_window(ObservationQuery(region="CA-AB", start=future), NOW)
        assert start == end == future


class TestBirdFallback:
    """Synthetic sightings always satisfy the query and are never empty."""

    @pytest.mark.parametrize("query", _queries(), ids=lambda q: q.cache_key())
    def test_non_empty_and_matches_filters(self, query: ObservationQuery) -> None:
        records = generate_fallback_observations(query, random.Random(7), now=NOW)
        assert records

        start, end = fallback_window(query, NOW)
        for record in records:
            if query.species_code:
                assert record.code == query.species_code
            assert start <= record.timestamp <= end
            assert record.region_id == "CA-AB"

    def test_unknown_species_forced_record(self, rng: random.Random) -> None:
        query = ObservationQuery(region="CA-AB", species_code="notabird")
        records = generate_fallback_observations(query, rng, now=NOW)
        assert len(records) == 1
        forced = records[0]
        assert forced.code == "notabird"
        assert forced.display_name == "notabird"
        assert forced.count == 5
        assert forced.checklist_id == "S1001"
        assert forced.timestamp == NOW - timedelta(days=1)

    def test_forced_record_clamped_into_window(self, rng: random.Random) -> None:
        query = ObservationQuery(
            region="CA-AB",
            species_code="notabird",
            start=datetime(2024, 6, 15, 11, 0),
            end=datetime(2024, 6, 15, 11, 30),
        )
        (record,) = generate_fallback_observations(query, rng, now=NOW)
        assert record.timestamp == datetime(2024, 6, 15, 11, 0)

    def test_known_species_use_reference_names(self, rng: random.Random) -> None:
        records = generate_fallback_observations(ObservationQuery(region="CA-AB"), rng, now=NOW)
        for record in records:
            species = BIRDS_BY_CODE[record.code]
            assert record.display_name == species.common_name
            assert record.scientific_name == species.scientific_name

    def test_seeded_output_is_repeatable(self) -> None:
        query = ObservationQuery(region="CA-AB")
        first = generate_fallback_observations(query, random.Random(1), now=NOW)
        second = generate_fallback_observations(query, random.Random(1), now=NOW)
        assert first == second

    def test_counts_in_range(self, rng: random.Random) -> None:
        records = generate_fallback_observations(ObservationQuery(region="CA-AB"), rng, now=NOW)
        assert all(1 <= r.count <= 50 for r in records)


class TestStationFallback:
    def test_all_known_stations(self) -> None:
        stations = fallback_stations(NOW)
        assert [s.station_id for s in stations] == list(ALBERTA_STATIONS)
        assert all(s.status == StatusLevel.NORMAL for s in stations)
        assert all(s.last_updated == NOW for s in stations)

    def test_station_info_unknown(self) -> None:
        station = station_info("99ZZ999", NOW)
        assert station.name == UNKNOWN_STATION_NAME
        assert station.latitude is None
        assert station.longitude is None

    def test_station_info_known(self) -> None:
        station = station_info("07DA001", NOW)
        assert station.name == "Bow River at Calgary"
        assert station.latitude == pytest.approx(51.045)

    def test_readings_shape(self, rng: random.Random) -> None:
        readings = generate_fallback_readings("07DA001", rng, now=NOW)
        assert len(readings) == STEPS * 2
        levels = [r for r in readings if r.code == WATER_LEVEL_PARAM]
        flows = [r for r in readings if r.code == DISCHARGE_PARAM]
        assert len(levels) == len(flows) == STEPS
        assert levels[0].timestamp == NOW
        assert levels[1].timestamp == NOW - timedelta(minutes=6)

    def test_readings_in_plausible_ranges(self, rng: random.Random) -> None:
        for r in generate_fallback_readings("07DA001", rng, now=NOW):
            if r.code == WATER_LEVEL_PARAM:
                assert 2.5 <= r.value <= 3.0
                assert r.unit == "m"
            else:
                assert 150.0 <= r.value <= 200.0

    def test_fallback_detail_is_normal(self, rng: random.Random) -> None:
        detail = build_station_detail(
            station_info("07DA001", NOW),
            generate_fallback_readings("07DA001", rng, now=NOW),
            is_fallback=True,
        )
        assert detail.water_level_status == StatusLevel.NORMAL
        assert detail.discharge_status == StatusLevel.NORMAL
        assert len(detail.readings) == 10
        assert detail.is_fallback
