"""Join catalog dates with their interpretation overlays."""

from __future__ import annotations

import logging

from stardate.schemas.catalog import Catalog, CatalogDate
from stardate.schemas.dates import MergedDate, YearView
from stardate.schemas.overlays import (
    AstroCopyFile,
    AstroCopyRecord,
    DescriptionFile,
    DescriptionRecord,
    MeaningFile,
    MeaningRecord,
)

from almanac.catalog import get_year_dates, get_year_summary, list_years, load_catalog
from almanac.overlays import (
    astro_copy_map,
    description_map,
    load_astro_copy,
    load_descriptions,
    load_meanings,
    meaning_map,
)
from almanac.zodiac import load_zodiac_profiles

logger = logging.getLogger(__name__)


def merge_dates(
    dates: list[CatalogDate],
    meanings: dict[str, MeaningRecord],
    descriptions: dict[str, DescriptionRecord],
    astro_copy: dict[str, AstroCopyRecord],
) -> list[MergedDate]:
    """Attach overlays by exact date-string equality.

    No trimming or case folding: a catalog/overlay formatting drift leaves the
    overlay unattached (``None``) rather than raising.
    """
    merged = []
    for d in dates:
        merged.append(
            MergedDate(
                date=d.date,
                weekday=d.weekday,
                bodies=d.bodies,
                notes=list(d.notes),
                sources=list(d.sources),
                meaning=meanings.get(d.date),
                description=descriptions.get(d.date),
                astro_copy=astro_copy.get(d.date),
            )
        )
    return merged


def merge_year(
    year: str,
    catalog: Catalog | None = None,
    meanings: MeaningFile | None = None,
    descriptions: DescriptionFile | None = None,
    astro_copy: AstroCopyFile | None = None,
) -> YearView:
    """Merged view of one year; an unknown year yields an empty view."""
    catalog = catalog or load_catalog()
    meanings = meanings or load_meanings()
    descriptions = descriptions or load_descriptions()
    astro_copy = astro_copy or load_astro_copy()

    dates = merge_dates(
        get_year_dates(year, catalog),
        meaning_map(year, meanings),
        description_map(year, descriptions),
        astro_copy_map(year, astro_copy),
    )
    missing = sum(1 for d in dates if d.meaning is None)
    logger.debug("Merged %d dates for %s (%d without meaning)", len(dates), year, missing)
    return YearView(year=year, summary=get_year_summary(year, catalog), dates=dates)


def merge_all(catalog: Catalog | None = None) -> list[YearView]:
    catalog = catalog or load_catalog()
    return [merge_year(year, catalog) for year in list_years(catalog)]


def find_date(year: str, date_string: str, catalog: Catalog | None = None) -> MergedDate | None:
    for d in merge_year(year, catalog).dates:
        if d.date == date_string:
            return d
    return None


def reset_data_caches() -> None:
    """Drop every cached static table (useful in tests)."""
    load_catalog.cache_clear()
    load_meanings.cache_clear()
    load_descriptions.cache_clear()
    load_astro_copy.cache_clear()
    load_zodiac_profiles.cache_clear()
