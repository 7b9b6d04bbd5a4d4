import pytest
from dataclasses import FrozenInstanceError
from core.models import Location, AnalysisResult, Recommendation, ScoreSource, WindFactors, clamp
from core.terrain import TerrainType


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_location_create_clamps_coordinates():
    loc = Location.create(95.0, -200.0, name="Edge")
    assert loc.lat == 90.0
    assert loc.lng == -180.0


def test_location_create_default_name():
    loc = Location.create(12.34567, -1.5)
    assert loc.name == "Location at 12.3457, -1.5000"
    assert loc.terrain is TerrainType.TEMPERATE


def test_location_create_parses_terrain():
    assert Location.create(0, 0, terrain="desert").terrain is TerrainType.DESERT
    assert Location.create(0, 0, terrain="lava").terrain is TerrainType.TEMPERATE


def test_location_is_immutable():
    loc = Location.create(0, 0)
    with pytest.raises(FrozenInstanceError):
        loc.lat = 1.0


def test_analysis_result_to_dict():
    result = AnalysisResult(
        location=Location.create(1, 2, name="Here", terrain="plains"),
        wind_score=70,
        solar_score=80.5,
        wind_description="w",
        solar_description="s",
        recommendation=Recommendation.BOTH,
        wind_factors=WindFactors(latitude=1, altitude=2, coastal=3, seasonal=4),
    )
    data = result.to_dict()
    assert data["location"] == {"lat": 1.0, "lng": 2.0, "name": "Here", "terrain": "plains"}
    assert data["recommendation"] == "both"
    assert data["source"] == ScoreSource.TERRAIN.value
    assert data["wind_factors"] == {"latitude": 1, "altitude": 2, "coastal": 3, "seasonal": 4}
