"""Match-quality heuristic for result cards (0-100, independent of ranking)."""

from __future__ import annotations

from almanac.selectors import is_weekend_slot, mercury_state
from almanac.text import parse_catalog_date
from stardate.schemas.dates import MergedDate
from stardate.schemas.personal import UserPreferences
from stardate.schemas.ranking import MatchScore
from stardate.services.scoring_settings import MatchWeights, get_scoring_settings

MERCURY_BADGES = {
    "direct": "Mercury Direct",
    "retrograde": "Mercury Retrograde",
    "stationary": "Mercury Stationary",
}

MERCURY_REASONS = {
    "direct": "Mercury direct supports clear thinking and communication",
    "retrograde": "Mercury retrograde may cause confusion or delays",
    "stationary": "Mercury stationary brings unpredictable energy",
}

# Checked in order; a note earns at most one phase bonus
PHASE_NOTES = [
    ("new moon", "New Moon", "New Moon energy for fresh starts and new beginnings"),
    ("full moon", "Full Moon", "Full Moon energy for peak performance and clarity"),
    ("first quarter", "First Quarter", "First Quarter Moon supports building momentum"),
    ("last quarter", "Last Quarter", "Last Quarter Moon for releasing and letting go"),
]


def energy_label(value: int) -> str:
    if value < 30:
        return "Calm"
    if value > 70:
        return "High-Energy"
    return "Balanced"


def risk_label(value: int) -> str:
    if value < 30:
        return "Safe"
    if value > 70:
        return "YOLO"
    return "Balanced"


def preference_labels(prefs: UserPreferences) -> dict[str, str]:
    return {
        "energy": energy_label(prefs.energy_preference),
        "risk": risk_label(prefs.risk_tolerance),
    }


def _in_preferred_window(d: MergedDate, prefs: UserPreferences) -> bool:
    if prefs.preferred_test_start is None or prefs.preferred_test_end is None:
        return False
    test_date = parse_catalog_date(d.date)
    if test_date is None:
        return False
    return prefs.preferred_test_start <= test_date <= prefs.preferred_test_end


def match_score(
    d: MergedDate, prefs: UserPreferences, weights: MatchWeights | None = None
) -> MatchScore:
    w = weights or get_scoring_settings().match
    score = w.base_score
    badges: list[str] = []
    why: list[str] = []

    # Dates with no Mercury wording read as direct
    state = mercury_state(d)
    if state == "unknown":
        state = "direct"
    score += w.mercury_adjustments.get(state, 0.0)
    badges.append(MERCURY_BADGES[state])
    why.append(MERCURY_REASONS[state])

    for note in d.notes:
        lowered = note.lower()
        for needle, phase, reason in PHASE_NOTES:
            if needle in lowered:
                score += w.moon_phase_bonuses.get(phase, 0.0)
                badges.append(phase)
                why.append(reason)
                break

    if is_weekend_slot(d):
        score += w.weekend_bonus
        badges.append("Weekend")
        why.append("Weekend test day for relaxed scheduling")

    if _in_preferred_window(d, prefs):
        score += w.preferred_window_bonus
        badges.append("Ideal Timing")
        why.append("Test date falls within your preferred window")

    if prefs.risk_tolerance > w.slider_high:
        if d.notes:
            score += w.adventurous_bonus
            why.append("Unique astrological aspects for adventurous spirits")
    elif prefs.risk_tolerance < w.slider_low:
        if state == "direct" and not d.notes:
            score += w.conservative_bonus
            why.append("Stable planetary conditions for conservative approach")

    if prefs.energy_preference > w.slider_high:
        if any("full moon" in note.lower() for note in d.notes):
            score += w.high_energy_bonus
            why.append("High-energy lunar phase matches your preference")

    clamped = min(max(score, 0.0), 100.0)
    return MatchScore(
        score=int(clamped + 0.5),
        badges=badges[: w.badge_limit],
        why=why[: w.reason_limit],
        mercury_status=state,
    )
