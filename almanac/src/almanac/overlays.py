"""Interpretation overlays: meanings, descriptions and astro copy, keyed by date string."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TypeVar

from pydantic import BaseModel
from stardate.schemas.overlays import (
    AstroCopyFile,
    AstroCopyRecord,
    DescriptionFile,
    DescriptionRecord,
    MeaningFile,
    MeaningRecord,
)

from almanac.catalog import data_dir, read_json

logger = logging.getLogger(__name__)

MEANINGS_FILE = "meanings.json"
DESCRIPTIONS_FILE = "descriptions.json"
ASTRO_COPY_FILE = "astro_copy.json"

OverlayT = TypeVar("OverlayT", bound=BaseModel)


def _load_overlay(filename: str, model: type[OverlayT]) -> OverlayT:
    path = data_dir() / filename
    if not path.exists():
        logger.warning("Overlay file %s not found; treating it as empty", path)
        return model()
    return model.model_validate(read_json(path))


@lru_cache(maxsize=1)
def load_meanings() -> MeaningFile:
    return _load_overlay(MEANINGS_FILE, MeaningFile)


@lru_cache(maxsize=1)
def load_descriptions() -> DescriptionFile:
    return _load_overlay(DESCRIPTIONS_FILE, DescriptionFile)


@lru_cache(maxsize=1)
def load_astro_copy() -> AstroCopyFile:
    return _load_overlay(ASTRO_COPY_FILE, AstroCopyFile)


def meaning_map(year: str, meanings: MeaningFile | None = None) -> dict[str, MeaningRecord]:
    """Meaning records for a year keyed by their exact date string.

    Later duplicates win, matching a plain dict build.
    """
    meanings = meanings or load_meanings()
    return {m.date: m for m in meanings.meanings.get(year, [])}


def description_map(
    year: str, descriptions: DescriptionFile | None = None
) -> dict[str, DescriptionRecord]:
    descriptions = descriptions or load_descriptions()
    return {d.date: d for d in descriptions.descriptions.get(year, [])}


def astro_copy_map(year: str, astro_copy: AstroCopyFile | None = None) -> dict[str, AstroCopyRecord]:
    astro_copy = astro_copy or load_astro_copy()
    return {c.date: c for c in astro_copy.astro_copy.get(year, [])}


def interpretation_notes(meanings: MeaningFile | None = None) -> str | None:
    """The "how we interpret" blurb shipped with the meanings overlay."""
    meanings = meanings or load_meanings()
    return meanings.meta.interpretation_notes
