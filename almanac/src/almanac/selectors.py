"""Derived per-date facts: Mercury state, suitability bucket, lunar phase.

Each selector prefers the structured ``meaning.signals`` record and falls back
to pattern matching over the catalog's free text when it is absent.
"""

from __future__ import annotations

import re

from stardate.schemas.dates import MercuryState, MergedDate, SuitabilityBucket
from stardate.schemas.overlays import MeaningSignals

# Canonical lunar phase names, in synodic order
MOON_PHASES = [
    "New Moon",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full Moon",
    "Waning Gibbous",
    "Third Quarter",
    "Waning Crescent",
]

WEEKEND_SLOTS = {"Friday", "Saturday"}

_RETROGRADE = re.compile(r"retrograde", re.IGNORECASE)
_HIGH = re.compile(r"^high\b", re.IGNORECASE)
_MEDIUM_HIGH = re.compile(r"^medium[–-]high\b", re.IGNORECASE)
_MEDIUM = re.compile(r"^medium\b", re.IGNORECASE)


def _signals(d: MergedDate) -> MeaningSignals | None:
    if d.meaning is None:
        return None
    return d.meaning.signals


def is_mercury_retrograde(d: MergedDate) -> bool:
    signals = _signals(d)
    if signals is not None and signals.mercury_state == "retrograde":
        return True
    return bool(_RETROGRADE.search(d.bodies.mercury or ""))


def suitability_bucket(d: MergedDate) -> SuitabilityBucket:
    return bucket_for(d.meaning.suitability if d.meaning else "")


def bucket_for(suitability: str) -> SuitabilityBucket:
    """Classify free-text suitability; Medium–High is checked before Medium."""
    s = suitability or ""
    if _HIGH.search(s):
        return "High"
    if _MEDIUM_HIGH.search(s):
        return "Medium–High"
    if _MEDIUM.search(s):
        return "Medium"
    return "Other"


def mercury_state(d: MergedDate) -> MercuryState:
    signals = _signals(d)
    if signals is not None and signals.mercury_state:
        state = signals.mercury_state.lower()
        if "retrograde" in state:
            return "retrograde"
        if "direct" in state:
            return "direct"
        if "station" in state:
            return "stationary"

    text = (d.bodies.mercury or "").lower()
    if "retrograde" in text:
        return "retrograde"
    if "stationary" in text:
        return "stationary"
    if "direct" in text:
        return "direct"
    return "unknown"


def has_mercury_signal(d: MergedDate) -> bool:
    signals = _signals(d)
    return bool(signals is not None and signals.mercury_state)


def tones(d: MergedDate) -> list[str]:
    signals = _signals(d)
    return list(signals.tone) if signals is not None else []


def moon_phase(d: MergedDate) -> str | None:
    """Lunar phase named in the first note that mentions one, else ``None``.

    "Last Quarter" is reported under its canonical name "Third Quarter".
    """
    for note in d.notes:
        if "moon" not in note.lower():
            continue
        if not ("New" in note or "Full" in note or "Quarter" in note):
            continue
        if "New Moon" in note:
            return "New Moon"
        if "Full Moon" in note:
            return "Full Moon"
        if "First Quarter" in note:
            return "First Quarter"
        if "Last Quarter" in note or "Third Quarter" in note:
            return "Third Quarter"
        return None
    return None


def is_weekend_slot(d: MergedDate) -> bool:
    return d.weekday in WEEKEND_SLOTS
