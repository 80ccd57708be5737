"""Pydantic schemas for the interpretation overlays joined onto catalog dates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MeaningSignals(BaseModel):
    """Structured signals extracted for a date, all optional."""

    model_config = ConfigDict(frozen=True)

    moon_sign: str | None = None
    mercury_state: str | None = None  # 'retrograde', 'direct', 'station', ...
    tone: list[str] = Field(default_factory=list)
    discipline: str | None = None  # 'low', 'moderate', 'good', 'strong'


class MeaningRecord(BaseModel):
    """Plain-English meaning of a date."""

    model_config = ConfigDict(frozen=True)

    date: str
    headline: str = ""
    tags: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    cautions: list[str] = Field(default_factory=list)
    suitability: str = ""  # free text starting with "High", "Medium–High", ...
    signals: MeaningSignals | None = None


class DescriptionRecord(BaseModel):
    """Test-day feel, the reason for it, and short advice bullets."""

    model_config = ConfigDict(frozen=True)

    date: str
    feel: str = ""
    why: str = ""
    advice: list[str] = Field(default_factory=list)


class AstroCopyRecord(BaseModel):
    """Horoscope-style narrative for a date."""

    model_config = ConfigDict(frozen=True)

    date: str
    text: str = ""


class OverlayMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str = ""
    generated_for: str = ""
    interpretation_notes: str | None = None
    note: str | None = None


class MeaningFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    meta: OverlayMeta = Field(default_factory=OverlayMeta)
    meanings: dict[str, list[MeaningRecord]] = Field(default_factory=dict)


class DescriptionFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    meta: OverlayMeta = Field(default_factory=OverlayMeta)
    descriptions: dict[str, list[DescriptionRecord]] = Field(default_factory=dict)


class AstroCopyFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    meta: OverlayMeta = Field(default_factory=OverlayMeta)
    astro_copy: dict[str, list[AstroCopyRecord]] = Field(default_factory=dict)
