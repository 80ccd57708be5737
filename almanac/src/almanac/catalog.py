"""Static catalog of MCAT test dates and their precomputed sky."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from stardate.config import get_settings
from stardate.schemas.catalog import Catalog, CatalogDate

logger = logging.getLogger(__name__)

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"
CATALOG_FILE = "catalog.json"


def data_dir() -> Path:
    """Directory holding the static JSON tables (``DATA_DIR`` or package data)."""
    configured = get_settings().data_dir.strip()
    return Path(configured) if configured else PACKAGE_DATA_DIR


def read_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


@lru_cache(maxsize=1)
def load_catalog() -> Catalog:
    """Load and validate the catalog once per process.

    A missing or malformed catalog is a data-integrity error and propagates.
    """
    path = data_dir() / CATALOG_FILE
    catalog = Catalog.model_validate(read_json(path))
    logger.debug(
        "Loaded catalog from %s: %d years, %d dates",
        path,
        len(catalog.data),
        sum(len(y.dates) for y in catalog.data.values()),
    )
    return catalog


def list_years(catalog: Catalog | None = None) -> list[str]:
    """Available catalog years, sorted."""
    catalog = catalog or load_catalog()
    return sorted(catalog.data.keys())


def get_year_dates(year: str, catalog: Catalog | None = None) -> list[CatalogDate]:
    catalog = catalog or load_catalog()
    entry = catalog.data.get(year)
    return list(entry.dates) if entry else []


def get_year_summary(year: str, catalog: Catalog | None = None) -> str:
    catalog = catalog or load_catalog()
    entry = catalog.data.get(year)
    return entry.summary if entry else ""

