"""Sun-sign resolution and static test-taking profiles."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from functools import lru_cache

from stardate.schemas.zodiac import ZodiacProfile, ZodiacProfileFile, ZodiacSign

from almanac.catalog import data_dir, read_json

logger = logging.getLogger(__name__)

PROFILES_FILE = "zodiac_profiles.json"

# Zodiac signs in order
SIGNS: list[ZodiacSign] = [
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
]

# Returned only if the range table has a gap, which load-time validation rules out
DEFAULT_SIGN: ZodiacSign = "Aries"


def month_day(d: date) -> str:
    """Zero-padded ``MM-DD`` key used by the range table."""
    return f"{d.month:02d}-{d.day:02d}"


def all_month_days() -> list[str]:
    """All 366 calendar month-days, Feb 29 included."""
    start = date(2024, 1, 1)  # leap year
    return [month_day(start + timedelta(days=i)) for i in range(366)]


def sign_coverage(profiles: dict[str, ZodiacProfile]) -> dict[str, list[str]]:
    """Map every month-day to the signs whose range contains it."""
    coverage: dict[str, list[str]] = {}
    for md in all_month_days():
        coverage[md] = [sign for sign, p in profiles.items() if p.date_range.contains(md)]
    return coverage


def validate_sign_table(profiles: dict[str, ZodiacProfile]) -> None:
    """Raise ValueError unless the ranges partition the calendar exactly."""
    missing = sorted(set(SIGNS) - set(profiles))
    if missing:
        raise ValueError(f"Zodiac profile table missing signs: {', '.join(missing)}")
    for key, profile in profiles.items():
        if key != profile.sign:
            raise ValueError(f"Profile keyed '{key}' describes sign '{profile.sign}'")

    gaps = []
    overlaps = []
    for md, signs in sign_coverage(profiles).items():
        if not signs:
            gaps.append(md)
        elif len(signs) > 1:
            overlaps.append(f"{md} ({'/'.join(signs)})")
    if gaps or overlaps:
        raise ValueError(
            "Zodiac date ranges must cover each day exactly once: "
            f"gaps={gaps[:10]} overlaps={overlaps[:10]}"
        )


@lru_cache(maxsize=1)
def load_zodiac_profiles() -> dict[str, ZodiacProfile]:
    path = data_dir() / PROFILES_FILE
    profiles = ZodiacProfileFile.model_validate(read_json(path)).profiles
    validate_sign_table(profiles)
    logger.debug("Loaded %d zodiac profiles from %s", len(profiles), path)
    return profiles


def resolve_sun_sign(
    birth_date: date, profiles: dict[str, ZodiacProfile] | None = None
) -> ZodiacSign:
    """Sun sign for a birth date; ranges are inclusive on both ends."""
    profiles = profiles or load_zodiac_profiles()
    md = month_day(birth_date)
    for profile in profiles.values():
        if profile.date_range.contains(md):
            return profile.sign
    logger.error("No zodiac range contains %s; falling back to %s", md, DEFAULT_SIGN)
    return DEFAULT_SIGN


def get_zodiac_profile(
    sign: str, profiles: dict[str, ZodiacProfile] | None = None
) -> ZodiacProfile:
    profiles = profiles or load_zodiac_profiles()
    try:
        return profiles[sign]
    except KeyError:
        raise ValueError(f"Unknown zodiac sign '{sign}'") from None
