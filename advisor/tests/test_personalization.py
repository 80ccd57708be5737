"""Tests for sun-sign factors and personalized recommendations."""

from datetime import date

import pytest
from advisor.personalization import (
    TONE_PLANETS,
    compute_factors,
    map_tone_to_planet,
    personalize,
)
from almanac.selectors import MOON_PHASES
from stardate.schemas.personal import PersonalizedFactors, TestingPersonality


def _factors(**overrides):
    values = {
        "sun_sign": "Leo",
        "mercury_compatibility": 60,
        "moon_phase_affinities": {},
        "planetary_affinities": {},
        "testing_personality": TestingPersonality(),
    }
    values.update(overrides)
    return PersonalizedFactors(**values)


class TestComputeFactors:
    def test_leo(self, leo_factors):
        assert leo_factors.sun_sign == "Leo"
        assert leo_factors.mercury_compatibility == 60
        assert set(leo_factors.moon_phase_affinities) == set(MOON_PHASES)
        assert leo_factors.moon_phase_affinities["Full Moon"] == 80
        assert leo_factors.moon_phase_affinities["Waxing Gibbous"] == 80
        assert leo_factors.moon_phase_affinities["New Moon"] == 50
        assert leo_factors.planetary_affinities == {
            "Sun": 80,
            "Jupiter": 80,
            "Mars": 80,
            "Saturn": 30,
            "Uranus": 30,
        }

    def test_leo_personality(self, leo_factors):
        p = leo_factors.testing_personality
        assert p.performs_under_pressure is True
        assert p.prefers_routine is True
        assert p.resilient is True
        assert p.intuitive is False
        assert p.analytical is False

    @pytest.mark.parametrize(
        "birth_date,compat",
        [
            (date(2001, 6, 1), 20),  # Gemini, High sensitivity
            (date(2001, 5, 1), 90),  # Taurus, Low sensitivity
            (date(2001, 4, 1), 60),  # Aries, Medium sensitivity
        ],
    )
    def test_mercury_compatibility(self, birth_date, compat, scoring):
        assert compute_factors(birth_date, scoring.personalization).mercury_compatibility == compat

    def test_personality_tags_overlap(self, scoring):
        scorpio = compute_factors(date(1995, 11, 1), scoring.personalization).testing_personality
        assert scorpio.performs_under_pressure
        assert scorpio.intuitive
        assert scorpio.prefers_routine
        assert scorpio.resilient
        assert not scorpio.analytical


class TestToneMap:
    def test_twenty_tones_ten_planets(self):
        assert len(TONE_PLANETS) == 20
        assert len(set(TONE_PLANETS.values())) == 10

    def test_lookup_is_case_insensitive(self):
        assert map_tone_to_planet("Confident") == "Sun"
        assert map_tone_to_planet("intense") == "Pluto"
        assert map_tone_to_planet("sleepy") is None


class TestPersonalize:
    def test_leo_on_retrograde_new_moon(self, make_date, leo_factors, scoring):
        d = make_date(
            mercury="Retrograde in Leo 2°",
            notes=["Day after the July 24 New Moon in Leo"],
            signals={"mercury_state": "retrograde", "tone": ["confident", "dramatic"]},
        )
        rec = personalize(d, leo_factors, 50, scoring.personalization)
        # +4 Mercury, +0 New Moon, +6 +6 Sun tones, +10 pressure
        assert rec.personalized_score == 76
        assert rec.base_score == 50
        assert rec.boosts.count("Sun energy supports your Leo nature") == 2
        assert "High-pressure energy matches your natural test-taking style" in rec.boosts
        assert rec.cautions == []
        assert rec.tips == ["Walk in like you belong there", "Give every tedious question the same care"]

    def test_sensitive_sign_gets_retrograde_caution(self, make_date, scoring):
        gemini = compute_factors(date(2001, 6, 1), scoring.personalization)
        d = make_date(signals={"mercury_state": "retrograde"})
        rec = personalize(d, gemini, 50, scoring.personalization)
        assert rec.personalized_score == 38
        assert rec.cautions == ["Gemini may be extra sensitive to Mercury retrograde effects"]
        assert rec.tips[0] == "Double-check all logistics and allow extra travel time"
        assert len(rec.tips) == 3

    def test_resilient_sign_gets_retrograde_boost(self, make_date, scoring):
        taurus = compute_factors(date(2001, 5, 1), scoring.personalization)
        d = make_date(signals={"mercury_state": "retrograde"})
        rec = personalize(d, taurus, 50, scoring.personalization)
        assert rec.personalized_score == 66
        assert "Taurus handles Mercury retrograde better than most" in rec.boosts
        assert "Your sign's natural adaptability helps during Mercury Rx periods" in rec.why_it_works

    def test_text_only_retrograde_does_not_adjust(self, make_date, scoring):
        taurus = compute_factors(date(2001, 5, 1), scoring.personalization)
        d = make_date(mercury="Retrograde in Leo 2°", signals={"mercury_state": "direct"})
        rec = personalize(d, taurus, 50, scoring.personalization)
        assert rec.personalized_score == 50

    def test_optimal_moon_phase(self, make_date, scoring):
        cancer = compute_factors(date(1990, 7, 1), scoring.personalization)
        d = make_date(notes=["Full Moon in Capricorn"])
        rec = personalize(d, cancer, 50, scoring.personalization)
        assert rec.personalized_score == 59
        assert "Full Moon aligns perfectly with your Cancer energy" in rec.boosts
        assert "This lunar phase enhances your natural Cancer strengths" in rec.why_it_works

    def test_challenging_planet_and_routine(self, make_date, leo_factors, scoring):
        d = make_date(signals={"tone": ["disciplined"]})
        rec = personalize(d, leo_factors, 50, scoring.personalization)
        # -4 Saturn, +5 routine (no Mercury signal)
        assert rec.personalized_score == 51
        assert rec.cautions == ["Saturn energy may challenge your Leo approach"]
        assert "Stable planetary conditions support your preference for routine" in rec.why_it_works

    def test_unmapped_planet_contributes_nothing(self, make_date, leo_factors, scoring):
        d = make_date(signals={"mercury_state": "direct", "tone": ["gentle", "sleepy"]})
        rec = personalize(d, leo_factors, 50, scoring.personalization)
        assert rec.personalized_score == 50

    def test_no_signals_at_all(self, make_date, scoring):
        cancer = compute_factors(date(1990, 7, 1), scoring.personalization)
        rec = personalize(make_date(), cancer, 50, scoring.personalization)
        assert rec.personalized_score == 50
        assert rec.boosts == []
        assert rec.tips == ["Bring a comforting snack", "Reset emotionally during every break"]

    def test_rounds_half_up(self, make_date, scoring):
        cancer = compute_factors(date(1990, 7, 1), scoring.personalization)
        assert personalize(make_date(), cancer, 50.5, scoring.personalization).personalized_score == 51
        assert personalize(make_date(), cancer, 49.5, scoring.personalization).personalized_score == 50


class TestClamp:
    def test_ceiling(self, make_date, scoring):
        factors = _factors(
            mercury_compatibility=90,
            moon_phase_affinities={"Full Moon": 80},
            planetary_affinities={"Sun": 80},
            testing_personality=TestingPersonality(performs_under_pressure=True),
        )
        d = make_date(
            notes=["Full Moon in Aquarius"],
            signals={"mercury_state": "retrograde", "tone": ["confident", "dramatic"]},
        )
        rec = personalize(d, factors, 95, scoring.personalization)
        assert rec.personalized_score == 100
        assert rec.base_score == 95

    def test_floor(self, make_date, scoring):
        factors = _factors(
            mercury_compatibility=20,
            planetary_affinities={"Saturn": 30},
        )
        d = make_date(
            signals={"mercury_state": "retrograde", "tone": ["disciplined", "structured"]},
        )
        rec = personalize(d, factors, 5, scoring.personalization)
        assert rec.personalized_score == 0

    @pytest.mark.parametrize("base", [0, 25, 50, 75, 100])
    def test_always_within_bounds(self, make_date, leo_factors, scoring, base):
        d = make_date(
            notes=["Full Moon in Aquarius"],
            signals={"mercury_state": "retrograde", "tone": list(TONE_PLANETS)},
        )
        score = personalize(d, leo_factors, base, scoring.personalization).personalized_score
        assert 0 <= score <= 100
