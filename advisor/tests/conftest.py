"""Advisor test configuration."""

from datetime import date

import pytest
from advisor.personalization import compute_factors
from almanac.merge import reset_data_caches
from stardate.config import reset_settings_cache
from stardate.schemas.catalog import CelestialBodies
from stardate.schemas.dates import MergedDate
from stardate.schemas.overlays import DescriptionRecord, MeaningRecord, MeaningSignals
from stardate.services.scoring_settings import ScoringSettings, reset_scoring_settings_cache

BODIES = {
    "Sun": "Cancer 3°",
    "Moon": "Libra 11°",
    "Mercury": "Direct in Cancer",
    "Venus": "Gemini 20°",
    "Mars": "Virgo 9°",
    "Jupiter": "Cancer 12°",
    "Saturn": "Aries 1°",
    "Uranus": "Gemini 1°",
    "Neptune": "Aries 2°",
    "Pluto": "Aquarius 2°",
    "North Node": "Pisces 20°",
}


@pytest.fixture(autouse=True)
def _fresh_caches():
    reset_settings_cache()
    reset_scoring_settings_cache()
    reset_data_caches()
    yield
    reset_settings_cache()
    reset_scoring_settings_cache()
    reset_data_caches()


@pytest.fixture
def scoring():
    return ScoringSettings()


@pytest.fixture
def make_date():
    """Build a MergedDate with sensible defaults."""

    def _make(
        date="July 25, 2025",
        weekday="Friday",
        mercury="Direct in Cancer",
        notes=None,
        suitability=None,
        signals=None,
        advice=None,
    ):
        meaning = None
        if suitability is not None or signals is not None:
            meaning = MeaningRecord(
                date=date,
                suitability=suitability or "",
                signals=MeaningSignals(**signals) if signals is not None else None,
            )
        description = None
        if advice is not None:
            description = DescriptionRecord(date=date, feel="Steady.", advice=advice)
        return MergedDate(
            date=date,
            weekday=weekday,
            bodies=CelestialBodies(**{**BODIES, "Mercury": mercury}),
            notes=notes or [],
            meaning=meaning,
            description=description,
        )

    return _make


@pytest.fixture
def leo_factors(scoring):
    return compute_factors(date(1999, 7, 23), scoring.personalization)
