"""Pydantic schemas for merged per-date views."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from stardate.schemas.catalog import CatalogDate
from stardate.schemas.overlays import AstroCopyRecord, DescriptionRecord, MeaningRecord

SuitabilityBucket = Literal["High", "Medium–High", "Medium", "Other"]
MercuryState = Literal["retrograde", "direct", "stationary", "unknown"]


class MergedDate(CatalogDate):
    """A catalog date with whichever overlays matched its date string."""

    meaning: MeaningRecord | None = None
    description: DescriptionRecord | None = None
    astro_copy: AstroCopyRecord | None = None


class YearView(BaseModel):
    """Merged view of one catalog year."""

    model_config = ConfigDict(frozen=True)

    year: str
    summary: str = ""
    dates: list[MergedDate] = Field(default_factory=list)
