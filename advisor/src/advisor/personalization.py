"""Sun-sign personalization: per-user factors and per-date score adjustments."""

from __future__ import annotations

import logging
import math
from datetime import date

from almanac.selectors import MOON_PHASES, has_mercury_signal, moon_phase, tones
from almanac.zodiac import get_zodiac_profile, resolve_sun_sign
from stardate.schemas.dates import MergedDate
from stardate.schemas.personal import (
    PersonalizedFactors,
    PersonalizedRecommendation,
    TestingPersonality,
)
from stardate.schemas.zodiac import ZodiacProfile
from stardate.services.scoring_settings import PersonalizationWeights, get_scoring_settings

logger = logging.getLogger(__name__)

# Day tone keyword -> ruling planet
TONE_PLANETS: dict[str, str] = {
    "confident": "Sun",
    "dramatic": "Sun",
    "energetic": "Mars",
    "aggressive": "Mars",
    "gentle": "Venus",
    "harmonious": "Venus",
    "communicative": "Mercury",
    "analytical": "Mercury",
    "intuitive": "Moon",
    "emotional": "Moon",
    "optimistic": "Jupiter",
    "expansive": "Jupiter",
    "disciplined": "Saturn",
    "structured": "Saturn",
    "innovative": "Uranus",
    "unconventional": "Uranus",
    "spiritual": "Neptune",
    "mystical": "Neptune",
    "transformative": "Pluto",
    "intense": "Pluto",
}


def map_tone_to_planet(tone: str) -> str | None:
    return TONE_PLANETS.get(tone.lower())


def testing_personality(profile: ZodiacProfile) -> TestingPersonality:
    """Overlapping boolean tags, not a partition."""
    return TestingPersonality(
        performs_under_pressure=profile.element == "Fire" or profile.sign == "Scorpio",
        prefers_routine=profile.element == "Earth" or profile.modality == "Fixed",
        intuitive=profile.element == "Water" or profile.sign == "Pisces",
        analytical=profile.element in ("Earth", "Air"),
        resilient=profile.modality == "Fixed" or profile.element == "Earth",
    )


def factors_for_profile(
    profile: ZodiacProfile, weights: PersonalizationWeights | None = None
) -> PersonalizedFactors:
    w = weights or get_scoring_settings().personalization

    moon_affinities = {phase: w.neutral_affinity for phase in MOON_PHASES}
    for phase in profile.traits.optimal_moon_phases:
        moon_affinities[phase] = w.optimal_phase_affinity

    # Planets in neither list get no entry at all
    planet_affinities: dict[str, int] = {}
    for planet in profile.traits.beneficial_planets:
        planet_affinities[planet] = w.beneficial_planet_affinity
    for planet in profile.traits.challenging_planets:
        planet_affinities[planet] = w.challenging_planet_affinity

    return PersonalizedFactors(
        sun_sign=profile.sign,
        mercury_compatibility=w.mercury_compatibility[profile.traits.mercury_rx_sensitivity],
        moon_phase_affinities=moon_affinities,
        planetary_affinities=planet_affinities,
        testing_personality=testing_personality(profile),
    )


def compute_factors(
    birth_date: date, weights: PersonalizationWeights | None = None
) -> PersonalizedFactors:
    """Derive personalization factors fresh from a birth date."""
    sign = resolve_sun_sign(birth_date)
    logger.debug("Computing personalization factors for %s", sign)
    return factors_for_profile(get_zodiac_profile(sign), weights)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def personalize(
    d: MergedDate,
    factors: PersonalizedFactors,
    base_score: float,
    weights: PersonalizationWeights | None = None,
) -> PersonalizedRecommendation:
    """Adjust a base score for one user's sun-sign profile.

    Adjustments are independent and additive; the clamp to [0, 100] is applied
    last.
    """
    w = weights or get_scoring_settings().personalization
    profile = get_zodiac_profile(factors.sun_sign)
    sign = factors.sun_sign
    score = float(base_score)
    boosts: list[str] = []
    cautions: list[str] = []
    why: list[str] = []
    tips: list[str] = []

    signals = d.meaning.signals if d.meaning else None
    if signals is not None and signals.mercury_state == "retrograde":
        compat = factors.mercury_compatibility
        score += (compat - w.neutral_affinity) * w.mercury_weight
        if compat > w.boost_threshold:
            boosts.append(f"{sign} handles Mercury retrograde better than most")
            why.append("Your sign's natural adaptability helps during Mercury Rx periods")
        elif compat < w.caution_threshold:
            cautions.append(f"{sign} may be extra sensitive to Mercury retrograde effects")
            tips.append("Double-check all logistics and allow extra travel time")

    phase = moon_phase(d)
    if phase and factors.moon_phase_affinities.get(phase):
        affinity = factors.moon_phase_affinities[phase]
        score += (affinity - w.neutral_affinity) * w.moon_weight
        if affinity > w.boost_threshold:
            boosts.append(f"{phase} aligns perfectly with your {sign} energy")
            why.append(f"This lunar phase enhances your natural {sign} strengths")

    day_tones = tones(d)
    for tone in day_tones:
        planet = map_tone_to_planet(tone)
        if not planet or not factors.planetary_affinities.get(planet):
            continue
        affinity = factors.planetary_affinities[planet]
        score += (affinity - w.neutral_affinity) * w.planet_weight
        if affinity > w.boost_threshold:
            boosts.append(f"{planet} energy supports your {sign} nature")
        elif affinity < w.caution_threshold:
            cautions.append(f"{planet} energy may challenge your {sign} approach")

    personality = factors.testing_personality
    if personality.performs_under_pressure and "confident" in day_tones:
        score += w.pressure_bonus
        boosts.append("High-pressure energy matches your natural test-taking style")

    if personality.prefers_routine and not has_mercury_signal(d):
        score += w.routine_bonus
        why.append("Stable planetary conditions support your preference for routine")

    tips.extend(profile.personalized_advice.test_day[: w.test_day_tip_count])

    clamped = min(max(score, w.score_floor), w.score_ceiling)
    return PersonalizedRecommendation(
        base_score=base_score,
        personalized_score=_round_half_up(clamped),
        boosts=boosts,
        cautions=cautions,
        why_it_works=why,
        tips=tips,
    )
