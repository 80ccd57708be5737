"""Pydantic schemas for the static astronomical date catalog."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CelestialBodies(BaseModel):
    """Free-text position/status for each of the 11 catalog bodies."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sun: str = Field(alias="Sun")
    moon: str = Field(alias="Moon")
    mercury: str = Field(alias="Mercury")
    venus: str = Field(alias="Venus")
    mars: str = Field(alias="Mars")
    jupiter: str = Field(alias="Jupiter")
    saturn: str = Field(alias="Saturn")
    uranus: str = Field(alias="Uranus")
    neptune: str = Field(alias="Neptune")
    pluto: str = Field(alias="Pluto")
    north_node: str = Field(alias="North Node")

    def as_labeled(self) -> dict[str, str]:
        """Return bodies keyed by their catalog labels."""
        return self.model_dump(by_alias=True)


class CatalogDate(BaseModel):
    """One candidate test date and its precomputed sky."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str  # e.g. "July 25, 2025"; exact join key for overlays
    weekday: str
    bodies: CelestialBodies
    notes: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list, alias="sources_inline")


class CatalogYear(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: str = ""
    dates: list[CatalogDate] = Field(default_factory=list)


class CatalogSources(BaseModel):
    model_config = ConfigDict(frozen=True)

    planetary_positions: list[str] = Field(default_factory=list)
    moon_phase_context: list[str] = Field(default_factory=list)


class CatalogMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str = ""
    sources: CatalogSources = Field(default_factory=CatalogSources)


class Catalog(BaseModel):
    """Complete catalog file: year -> dates."""

    model_config = ConfigDict(frozen=True)

    metadata: CatalogMetadata = Field(default_factory=CatalogMetadata)
    data: dict[str, CatalogYear] = Field(default_factory=dict)
    overall_sources_note: str = ""
