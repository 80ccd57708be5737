"""Public API endpoints."""

from __future__ import annotations

from datetime import date

from advisor.personalization import compute_factors, personalize
from advisor.match import preference_labels
from advisor.ranking import rank_dates, sun_sign_for
from almanac.catalog import list_years
from almanac.merge import find_date, merge_all, merge_year
from almanac.overlays import interpretation_notes
from almanac.zodiac import get_zodiac_profile, resolve_sun_sign
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field
from stardate.config import get_settings
from stardate.schemas.personal import RankingFilters, UserPreferences
from stardate.services.scoring_settings import ScoringSettings

from api.dependencies import get_scoring, parse_iso_date

router = APIRouter()


class RankingRequest(BaseModel):
    preferences: UserPreferences = Field(default_factory=UserPreferences)
    filters: RankingFilters = Field(default_factory=RankingFilters)
    today: date | None = None


class PersonalizationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    birth_date: date
    year: str
    test_date: str = Field(alias="date")
    base_score: float = Field(default=50.0, ge=0, le=100)


@router.get("/years")
async def get_years():
    return {"years": list_years(), "default_year": get_settings().default_year}


@router.get("/calendar")
async def get_calendar():
    return {"years": [view.model_dump() for view in merge_all()]}


@router.get("/years/{year}")
async def get_year(year: str):
    return merge_year(year).model_dump()


@router.post("/years/{year}/rankings")
async def rank_year_dates(
    year: str,
    body: RankingRequest,
    scoring: ScoringSettings = Depends(get_scoring),
):
    view = merge_year(year)
    results = rank_dates(
        view.dates, body.preferences, body.filters, today=body.today, scoring=scoring
    )
    return {
        "year": year,
        "sun_sign": sun_sign_for(body.preferences),
        "preferences": preference_labels(body.preferences),
        "count": len(results),
        "results": [r.model_dump() for r in results],
    }


@router.post("/personalization")
async def personalize_date(
    body: PersonalizationRequest,
    scoring: ScoringSettings = Depends(get_scoring),
):
    target = find_date(body.year, body.test_date)
    if target is None:
        raise HTTPException(status_code=404, detail="Test date not found")
    factors = compute_factors(body.birth_date, scoring.personalization)
    recommendation = personalize(target, factors, body.base_score, scoring.personalization)
    return {"sun_sign": factors.sun_sign, **recommendation.model_dump()}


@router.get("/sun-sign")
async def get_sun_sign(birth_date: str = Query(...)):
    sign = resolve_sun_sign(parse_iso_date(birth_date))
    return {"sign": sign, "profile": get_zodiac_profile(sign).model_dump()}


@router.get("/signs/{sign}")
async def get_sign(sign: str):
    try:
        profile = get_zodiac_profile(sign.strip().capitalize())
    except ValueError as exc:
        raise HTTPException(status_code=404, detail="Zodiac sign not found") from exc
    return profile.model_dump()


@router.get("/interpretation-notes")
async def get_interpretation_notes():
    return {"notes": interpretation_notes()}
