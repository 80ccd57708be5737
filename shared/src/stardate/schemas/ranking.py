"""Pydantic schemas for scored and ranked dates."""

from __future__ import annotations

from pydantic import BaseModel, Field

from stardate.schemas.dates import MercuryState, MergedDate, SuitabilityBucket
from stardate.schemas.personal import PersonalizedRecommendation


class MatchScore(BaseModel):
    """0-100 match-quality heuristic shown on a result card."""

    score: int = Field(ge=0, le=100)
    badges: list[str] = Field(default_factory=list)
    why: list[str] = Field(default_factory=list)
    mercury_status: MercuryState = "unknown"


class RankedDate(BaseModel):
    """A merged date with its ordering key and display annotations."""

    date: MergedDate
    composite_score: float
    bucket: SuitabilityBucket
    mercury_state: MercuryState
    is_mercury_retrograde: bool
    match: MatchScore
    personalization: PersonalizedRecommendation | None = None
    coach_tips: list[str] = Field(default_factory=list)
    preview: str = ""
    score_release: str = ""
