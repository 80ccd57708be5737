"""Pydantic schemas for user preferences and sun-sign personalization."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stardate.schemas.zodiac import ZodiacSign

logger = logging.getLogger(__name__)

SuitabilityFilter = Literal["All", "High", "Medium–High", "Medium"]


def _coerce_optional_date(value: object, field_name: str) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    logger.warning("Ignoring invalid %s: %r", field_name, value)
    return None


class UserPreferences(BaseModel):
    """Onboarding answers, passed by value into every scoring call."""

    model_config = ConfigDict(frozen=True)

    birth_date: date | None = None
    birth_time: str | None = None  # "HH:MM" or null
    city: str | None = None
    country: str | None = None
    energy_preference: int = Field(default=50, ge=0, le=100)
    risk_tolerance: int = Field(default=50, ge=0, le=100)
    preferred_test_start: date | None = None
    preferred_test_end: date | None = None
    timezone: str | None = None
    selected_year: str | None = None

    @field_validator("birth_date", "preferred_test_start", "preferred_test_end", mode="before")
    @classmethod
    def lenient_date(cls, value: object, info) -> date | None:
        return _coerce_optional_date(value, info.field_name)


class RankingFilters(BaseModel):
    """Result-list toggles."""

    model_config = ConfigDict(frozen=True)

    avoid_mercury_rx: bool = False
    prefer_weekends: bool = False
    suitability_filter: SuitabilityFilter = "All"
    show_coach_tips: bool = True

    @field_validator("suitability_filter", mode="before")
    @classmethod
    def normalize_dash(cls, value: object) -> object:
        if isinstance(value, str) and value.strip().lower() == "medium-high":
            return "Medium–High"
        return value


class TestingPersonality(BaseModel):
    __test__ = False  # keep pytest from collecting this model

    model_config = ConfigDict(frozen=True)

    performs_under_pressure: bool = False
    prefers_routine: bool = False
    intuitive: bool = False
    analytical: bool = False
    resilient: bool = False


class PersonalizedFactors(BaseModel):
    """Per-user factors derived from the sun-sign profile; never persisted."""

    model_config = ConfigDict(frozen=True)

    sun_sign: ZodiacSign
    mercury_compatibility: int = Field(ge=0, le=100)
    moon_phase_affinities: dict[str, int] = Field(default_factory=dict)
    planetary_affinities: dict[str, int] = Field(default_factory=dict)
    testing_personality: TestingPersonality = Field(default_factory=TestingPersonality)


class PersonalizedRecommendation(BaseModel):
    base_score: float
    personalized_score: int
    boosts: list[str] = Field(default_factory=list)
    cautions: list[str] = Field(default_factory=list)
    why_it_works: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
