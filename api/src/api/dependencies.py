"""FastAPI dependency injection."""

from __future__ import annotations

from datetime import date

from fastapi import HTTPException, status
from stardate.services.scoring_settings import ScoringSettings, get_scoring_settings


def get_scoring() -> ScoringSettings:
    return get_scoring_settings()


def parse_iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid date format"
        ) from exc
