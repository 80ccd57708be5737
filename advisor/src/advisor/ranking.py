"""Composite scoring, filtering and ordering of candidate test dates."""

from __future__ import annotations

import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from almanac.merge import merge_year
from almanac.selectors import (
    is_mercury_retrograde,
    is_weekend_slot,
    mercury_state,
    suitability_bucket,
)
from almanac.text import date_preview, estimated_score_release_date, parse_catalog_date
from almanac.zodiac import resolve_sun_sign
from stardate.config import get_settings
from stardate.schemas.dates import MergedDate
from stardate.schemas.personal import (
    PersonalizedFactors,
    PersonalizedRecommendation,
    RankingFilters,
    UserPreferences,
)
from stardate.schemas.ranking import RankedDate
from stardate.services.scoring_settings import ScoringSettings, get_scoring_settings

from advisor.match import match_score
from advisor.personalization import compute_factors, personalize

logger = logging.getLogger(__name__)


def today_for(prefs: UserPreferences) -> date:
    """Current date in the user's timezone, else the site timezone, else UTC."""
    for name in (prefs.timezone, get_settings().timezone):
        if not name:
            continue
        try:
            return datetime.now(ZoneInfo(name)).date()
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r, trying next fallback", name)
    return datetime.now(ZoneInfo("UTC")).date()


def factors_for(prefs: UserPreferences, scoring: ScoringSettings) -> PersonalizedFactors | None:
    if prefs.birth_date is None:
        return None
    return compute_factors(prefs.birth_date, scoring.personalization)


def recency_bonus(d: MergedDate, today: date, scoring: ScoringSettings) -> float:
    w = scoring.ranking
    test_date = parse_catalog_date(d.date)
    if test_date is None:
        return 0.0
    days = (test_date - today).days
    if 0 < days < w.recency_window_days:
        return max(0.0, w.recency_max_bonus - days / w.recency_decay_divisor)
    return 0.0


def composite_score(
    d: MergedDate,
    filters: RankingFilters,
    *,
    today: date,
    factors: PersonalizedFactors | None = None,
    scoring: ScoringSettings | None = None,
) -> tuple[float, PersonalizedRecommendation | None]:
    """Unclamped ordering key for one date, plus its recommendation if any."""
    scoring = scoring or get_scoring_settings()
    w = scoring.ranking
    score = w.bucket_scores.get(suitability_bucket(d), w.bucket_scores["Other"])
    recommendation = None

    if factors is not None:
        # Scored from the neutral midpoint so only the personal delta reaches the
        # composite; the composite itself is in the hundreds and would always clamp.
        try:
            recommendation = personalize(
                d, factors, w.personalization_base_score, scoring.personalization
            )
            delta = recommendation.personalized_score - w.personalization_base_score
            score += delta * w.personalization_scale
        except Exception:
            logger.warning("Personalization failed for %s; scoring without it", d.date, exc_info=True)
            recommendation = None

    retrograde = is_mercury_retrograde(d)
    if filters.prefer_weekends and is_weekend_slot(d):
        score += w.weekend_filter_bonus
    if filters.avoid_mercury_rx and not retrograde:
        score += w.direct_filter_bonus
    if retrograde:
        score -= w.retrograde_penalty

    score += recency_bonus(d, today, scoring)

    if d.weekday == "Saturday":
        score += w.saturday_bonus
    elif d.weekday == "Friday":
        score += w.friday_bonus

    return score, recommendation


def passes_filters(d: MergedDate, filters: RankingFilters) -> bool:
    if filters.avoid_mercury_rx and is_mercury_retrograde(d):
        return False
    if filters.prefer_weekends and not is_weekend_slot(d):
        return False
    if filters.suitability_filter != "All" and suitability_bucket(d) != filters.suitability_filter:
        return False
    return True


def filter_dates(dates: list[MergedDate], filters: RankingFilters) -> list[MergedDate]:
    return [d for d in dates if passes_filters(d, filters)]


def coach_tips(d: MergedDate, recommendation: PersonalizedRecommendation | None) -> list[str]:
    tips: list[str] = []
    if d.description is not None:
        tips.extend(d.description.advice)
    if recommendation is not None:
        tips.extend(recommendation.tips)
    return tips


def rank_dates(
    dates: list[MergedDate],
    prefs: UserPreferences,
    filters: RankingFilters,
    *,
    today: date | None = None,
    scoring: ScoringSettings | None = None,
) -> list[RankedDate]:
    """Filter, score and order dates, best first.

    Equal composite scores keep their input order.
    """
    scoring = scoring or get_scoring_settings()
    today = today or today_for(prefs)
    if prefs.birth_date is None:
        logger.info("No birth date; ranking without personalization")
    try:
        factors = factors_for(prefs, scoring)
    except Exception:
        logger.warning("Could not compute personalization factors; ranking without them", exc_info=True)
        factors = None

    ranked = []
    for d in filter_dates(dates, filters):
        score, recommendation = composite_score(
            d, filters, today=today, factors=factors, scoring=scoring
        )
        ranked.append(
            RankedDate(
                date=d,
                composite_score=score,
                bucket=suitability_bucket(d),
                mercury_state=mercury_state(d),
                is_mercury_retrograde=is_mercury_retrograde(d),
                match=match_score(d, prefs, scoring.match),
                personalization=recommendation,
                coach_tips=coach_tips(d, recommendation) if filters.show_coach_tips else [],
                preview=date_preview(d),
                score_release=estimated_score_release_date(d.date),
            )
        )
    # sorted() is stable
    return sorted(ranked, key=lambda r: r.composite_score, reverse=True)


def rank_year(
    year: str,
    prefs: UserPreferences,
    filters: RankingFilters | None = None,
    *,
    today: date | None = None,
    scoring: ScoringSettings | None = None,
) -> list[RankedDate]:
    view = merge_year(year)
    return rank_dates(view.dates, prefs, filters or RankingFilters(), today=today, scoring=scoring)


def sun_sign_for(prefs: UserPreferences) -> str | None:
    if prefs.birth_date is None:
        return None
    try:
        return resolve_sun_sign(prefs.birth_date)
    except Exception:
        logger.warning("Could not resolve sun sign for %s", prefs.birth_date, exc_info=True)
        return None
