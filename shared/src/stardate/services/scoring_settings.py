"""Scoring settings -- every ranking and personalization constant in one typed table."""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from stardate.config import get_settings

logger = logging.getLogger(__name__)


class PersonalizationWeights(BaseModel):
    mercury_compatibility: dict[str, int] = Field(
        default={"High": 20, "Medium": 60, "Low": 90}
    )
    neutral_affinity: int = 50
    optimal_phase_affinity: int = 80
    beneficial_planet_affinity: int = 80
    challenging_planet_affinity: int = 30
    mercury_weight: float = 0.4
    moon_weight: float = 0.3
    planet_weight: float = 0.2
    boost_threshold: int = 70
    caution_threshold: int = 40
    pressure_bonus: float = 10.0
    routine_bonus: float = 5.0
    test_day_tip_count: int = 2
    score_floor: int = 0
    score_ceiling: int = 100


class RankingWeights(BaseModel):
    bucket_scores: dict[str, float] = Field(
        default={"High": 1000.0, "Medium–High": 800.0, "Medium": 600.0, "Other": 400.0}
    )
    personalization_scale: float = 0.5
    personalization_base_score: float = 50.0
    weekend_filter_bonus: float = 100.0
    direct_filter_bonus: float = 50.0
    retrograde_penalty: float = 200.0
    recency_window_days: int = 120
    recency_max_bonus: float = 50.0
    recency_decay_divisor: float = 10.0
    saturday_bonus: float = 20.0
    friday_bonus: float = 10.0


class MatchWeights(BaseModel):
    base_score: float = 50.0
    mercury_adjustments: dict[str, float] = Field(
        default={"direct": 15.0, "retrograde": -20.0, "stationary": -10.0}
    )
    moon_phase_bonuses: dict[str, float] = Field(
        default={"New Moon": 10.0, "Full Moon": 15.0, "First Quarter": 8.0, "Last Quarter": 5.0}
    )
    weekend_bonus: float = 5.0
    preferred_window_bonus: float = 20.0
    adventurous_bonus: float = 5.0
    conservative_bonus: float = 10.0
    high_energy_bonus: float = 5.0
    slider_high: int = 70
    slider_low: int = 30
    badge_limit: int = Field(default=5, ge=1)
    reason_limit: int = Field(default=3, ge=1)


class ScoringSettings(BaseModel):
    personalization: PersonalizationWeights = Field(default_factory=PersonalizationWeights)
    ranking: RankingWeights = Field(default_factory=RankingWeights)
    match: MatchWeights = Field(default_factory=MatchWeights)


def load_scoring_settings(overrides: Mapping[str, Any] | None = None) -> ScoringSettings:
    """Build scoring settings from defaults plus dotted-key overrides.

    Keys use dotted paths like ``ranking.retrograde_penalty`` (an optional
    ``scoring.`` prefix is accepted). Unknown groups are ignored.
    """
    grouped: dict[str, dict[str, Any]] = {}
    for key, value in (overrides or {}).items():
        if key.startswith("scoring."):
            key = key[len("scoring."):]
        parts = key.split(".")
        if len(parts) != 2:
            logger.warning("Ignoring scoring override with unexpected key %r", key)
            continue
        group, field = parts
        grouped.setdefault(group, {})[field] = value

    defaults = ScoringSettings()
    merged = defaults.model_dump()
    for group, fields in grouped.items():
        if group in merged:
            merged[group].update(fields)
        else:
            logger.warning("Ignoring scoring overrides for unknown group %r", group)

    return ScoringSettings(**merged)


def load_scoring_overrides_file(path: str | Path) -> dict[str, Any]:
    """Read a flat JSON object of dotted scoring keys."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Scoring overrides in {path} must be a JSON object")
    return raw


@lru_cache(maxsize=1)
def get_scoring_settings() -> ScoringSettings:
    """Get cached scoring settings, applying the configured overrides file."""
    path = get_settings().scoring_overrides_path.strip()
    if not path:
        return ScoringSettings()
    logger.info("Loading scoring overrides from %s", path)
    return load_scoring_settings(load_scoring_overrides_file(path))


def reset_scoring_settings_cache() -> None:
    get_scoring_settings.cache_clear()


def scoring_settings_schema() -> dict[str, Any]:
    """Return the full JSON Schema for ScoringSettings with defaults."""
    return ScoringSettings.model_json_schema()
