"""Integration test configuration."""

import pytest
from almanac.merge import reset_data_caches
from stardate.config import reset_settings_cache
from stardate.services.scoring_settings import reset_scoring_settings_cache


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
def catalog_entry():
    """One catalog date as stored in catalog.json."""
    return {
        "date": "July 25, 2025",
        "weekday": "Friday",
        "bodies": {
            "Sun": "Leo 2°",
            "Moon": "Leo 16°",
            "Mercury": "Direct in Cancer",
            "Venus": "Gemini 20°",
            "Mars": "Virgo 9°",
            "Jupiter": "Cancer 12°",
            "Saturn": "Aries 1°",
            "Uranus": "Gemini 1°",
            "Neptune": "Aries 2°",
            "Pluto": "Aquarius 2°",
            "North Node": "Pisces 20°",
        },
        "notes": [],
        "sources_inline": [],
    }
