"""Advisor entry point for running as a module: python -m advisor."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from almanac.text import format_test_date
from stardate.config import get_settings
from stardate.schemas.personal import RankingFilters, UserPreferences

from advisor.match import preference_labels
from advisor.ranking import rank_year, sun_sign_for

logger = logging.getLogger("advisor")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="advisor", description="Rank test dates for a year.")
    parser.add_argument("--year", default=settings.default_year)
    parser.add_argument("--birth-date", default=None, help="YYYY-MM-DD")
    parser.add_argument("--avoid-mercury-rx", action="store_true")
    parser.add_argument("--prefer-weekends", action="store_true")
    parser.add_argument(
        "--suitability", default="All", help="All, High, Medium-High or Medium"
    )
    parser.add_argument("--energy", type=int, default=50, help="Energy preference 0-100")
    parser.add_argument("--risk", type=int, default=50, help="Risk tolerance 0-100")
    parser.add_argument("--today", type=date.fromisoformat, default=None, help="YYYY-MM-DD")
    parser.add_argument("--limit", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    args = _parse_args(argv)

    prefs = UserPreferences(
        birth_date=args.birth_date,
        selected_year=args.year,
        energy_preference=args.energy,
        risk_tolerance=args.risk,
    )
    filters = RankingFilters(
        avoid_mercury_rx=args.avoid_mercury_rx,
        prefer_weekends=args.prefer_weekends,
        suitability_filter=args.suitability,
    )
    results = rank_year(args.year, prefs, filters, today=args.today)
    if args.limit is not None:
        results = results[: args.limit]

    sign = sun_sign_for(prefs)
    labels = preference_labels(prefs)
    logger.info(
        "Ranked %d dates for %s (sun sign: %s, energy: %s, risk: %s)",
        len(results),
        args.year,
        sign or "n/a",
        labels["energy"],
        labels["risk"],
    )
    if not results:
        print(f"No dates for {args.year} match these filters.")
        return 1

    for position, r in enumerate(results, start=1):
        personal = r.personalization.personalized_score if r.personalization else "-"
        rx = " Rx" if r.is_mercury_retrograde else ""
        print(
            f"{position:>2}. {format_test_date(r.date.date):<18} {r.bucket:<12} "
            f"score={r.composite_score:7.1f} personal={personal} match={r.match.score}{rx}"
        )
        print(f"    scores out {r.score_release}")
        if r.preview:
            print(f"    {r.preview}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
