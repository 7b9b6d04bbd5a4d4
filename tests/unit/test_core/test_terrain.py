"""Tests for the terrain catalog and classifiers."""

import pytest
from core.terrain import (
    TerrainType,
    DEFAULT_TERRAIN,
    WIND_POTENTIAL,
    SOLAR_POTENTIAL,
    SAMPLE_LOCATIONS,
    parse_terrain,
    lookup_wind,
    lookup_solar,
    terrain_label,
    classify_display_name,
    classify_address_tags,
    search_samples,
)


class TestCatalog:
    """Baseline tables."""

    def test_every_terrain_has_entries(self):
        for terrain in TerrainType:
            assert terrain in WIND_POTENTIAL
            assert terrain in SOLAR_POTENTIAL
            assert terrain_label(terrain)

    def test_baselines_in_range(self):
        for table in (WIND_POTENTIAL, SOLAR_POTENTIAL):
            for potential in table.values():
                assert 0 <= potential.base <= 100
                assert potential.description

    def test_known_values(self):
        assert lookup_wind(TerrainType.MOUNTAINS).base == 90
        assert lookup_wind(TerrainType.URBAN).base == 25
        assert lookup_solar(TerrainType.DESERT).base == 95
        assert lookup_solar(TerrainType.ARCTIC).base == 35

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            WIND_POTENTIAL[TerrainType.URBAN] = None

    def test_unknown_terrain_falls_back_to_temperate(self):
        assert lookup_wind("swamp") == WIND_POTENTIAL[TerrainType.TEMPERATE]
        assert lookup_solar(None) == SOLAR_POTENTIAL[TerrainType.TEMPERATE]
        assert lookup_wind("") == WIND_POTENTIAL[TerrainType.TEMPERATE]


class TestParseTerrain:

    def test_members_pass_through(self):
        assert parse_terrain(TerrainType.DESERT) is TerrainType.DESERT

    def test_strings_are_case_insensitive(self):
        assert parse_terrain("Coastal") is TerrainType.COASTAL
        assert parse_terrain("  ARCTIC ") is TerrainType.ARCTIC

    def test_anything_else_is_default(self):
        assert parse_terrain(42) is DEFAULT_TERRAIN
        assert parse_terrain("volcano") is DEFAULT_TERRAIN


class TestClassification:

    def test_display_name_keywords(self):
        assert classify_display_name("Sahara, Algeria") is TerrainType.DESERT
        assert classify_display_name("Bondi Beach, Sydney") is TerrainType.COASTAL
        assert classify_display_name("Mountain View, California") is TerrainType.MOUNTAINS
        assert classify_display_name("Black Forest, Germany") is TerrainType.FOREST
        assert classify_display_name("Mexico City") is TerrainType.URBAN

    def test_display_name_first_match_wins(self):
        # "desert" is checked before "city"
        assert classify_display_name("Desert Hot Springs city") is TerrainType.DESERT

    def test_display_name_no_match(self):
        assert classify_display_name("Lisbon, Portugal") is DEFAULT_TERRAIN
        assert classify_display_name("") is DEFAULT_TERRAIN
        assert classify_display_name(None) is DEFAULT_TERRAIN

    def test_address_tags(self):
        assert classify_address_tags({"natural": "beach"}) is TerrainType.COASTAL
        assert classify_address_tags({"natural": "peak"}) is TerrainType.MOUNTAINS
        assert classify_address_tags({"landuse": "forest"}) is TerrainType.FOREST
        assert classify_address_tags({"place": "city"}) is TerrainType.URBAN
        assert classify_address_tags({"place": "suburb"}) is TerrainType.SUBURBAN

    def test_address_tags_missing(self):
        assert classify_address_tags({"road": "Main St"}) is DEFAULT_TERRAIN
        assert classify_address_tags(None) is DEFAULT_TERRAIN
        assert classify_address_tags("not a dict") is DEFAULT_TERRAIN


class TestSamples:

    def test_ten_samples_cover_each_terrain(self):
        assert len(SAMPLE_LOCATIONS) == 10
        assert {s["terrain"] for s in SAMPLE_LOCATIONS} == set(TerrainType)

    def test_search_requires_three_characters(self):
        assert search_samples("") == []
        assert search_samples("sa") == []

    def test_search_is_case_insensitive(self):
        names = [s["name"] for s in search_samples("SAHARA")]
        assert names == ["Sahara Desert, Algeria"]

    def test_search_matches_several(self):
        names = [s["name"] for s in search_samples("usa")]
        assert len(names) == 4

    def test_search_returns_copies(self):
        result = search_samples("svalbard")
        result[0]["name"] = "changed"
        assert SAMPLE_LOCATIONS[8]["name"] == "Svalbard, Norway"
