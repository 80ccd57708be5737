"""Almanac test configuration."""

import pytest
from almanac.merge import reset_data_caches
from stardate.config import reset_settings_cache
from stardate.schemas.catalog import Catalog, CelestialBodies
from stardate.schemas.dates import MergedDate
from stardate.schemas.overlays import (
    AstroCopyFile,
    DescriptionFile,
    MeaningFile,
    MeaningRecord,
    MeaningSignals,
)

DIRECT_BODIES = {
    "Sun": "Leo 2°",
    "Moon": "Leo 16°",
    "Mercury": "Direct in Leo 6°",
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
    reset_data_caches()
    yield
    reset_settings_cache()
    reset_data_caches()


@pytest.fixture
def make_date():
    """Build a MergedDate with sensible defaults."""

    def _make(
        date="July 25, 2025",
        weekday="Friday",
        mercury="Direct in Leo 6°",
        notes=None,
        suitability=None,
        signals=None,
    ):
        bodies = CelestialBodies(**{**DIRECT_BODIES, "Mercury": mercury})
        meaning = None
        if suitability is not None or signals is not None:
            meaning = MeaningRecord(
                date=date,
                suitability=suitability or "",
                signals=MeaningSignals(**signals) if signals is not None else None,
            )
        return MergedDate(
            date=date,
            weekday=weekday,
            bodies=bodies,
            notes=notes or [],
            meaning=meaning,
        )

    return _make


@pytest.fixture
def small_catalog():
    return Catalog.model_validate(
        {
            "data": {
                "2030": {
                    "summary": "A quiet year.",
                    "dates": [
                        {
                            "date": "January 18, 2030",
                            "weekday": "Friday",
                            "bodies": DIRECT_BODIES,
                            "notes": ["First Quarter Moon in Aries"],
                            "sources_inline": ["Swiss Ephemeris daily tables"],
                        },
                        {
                            "date": "January 19, 2030",
                            "weekday": "Saturday",
                            "bodies": {**DIRECT_BODIES, "Mercury": "Retrograde in Aquarius 3°"},
                            "notes": [],
                        },
                    ],
                },
                "2029": {"summary": "", "dates": []},
            }
        }
    )


@pytest.fixture
def small_overlays():
    meanings = MeaningFile.model_validate(
        {
            "meta": {"version": "1", "interpretation_notes": "How we read the sky."},
            "meanings": {
                "2030": [
                    {
                        "date": "January 18, 2030",
                        "headline": "Steady start",
                        "suitability": "High — steady",
                        "signals": {"mercury_state": "direct", "tone": ["disciplined"]},
                    },
                    # Trailing space: must not attach
                    {"date": "January 19, 2030 ", "suitability": "Medium"},
                ]
            },
        }
    )
    descriptions = DescriptionFile.model_validate(
        {
            "descriptions": {
                "2030": [
                    {
                        "date": "January 19, 2030",
                        "feel": "Foggy but workable.",
                        "why": "Mercury retrograde.",
                        "advice": ["Confirm your test center twice"],
                    }
                ]
            }
        }
    )
    astro_copy = AstroCopyFile.model_validate(
        {"astro_copy": {"2030": [{"date": "January 18, 2030", "text": "A clean, grounded day."}]}}
    )
    return meanings, descriptions, astro_copy
