"""Display helpers for catalog date strings and overlay copy."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from stardate.schemas.dates import MergedDate

CATALOG_DATE_FORMAT = "%B %d, %Y"  # "July 25, 2025"
SCORE_RELEASE_DAYS = 30
PREVIEW_LENGTH = 180


def parse_catalog_date(value: str) -> date | None:
    try:
        return datetime.strptime(value.strip(), CATALOG_DATE_FORMAT).date()
    except (AttributeError, ValueError):
        return None


def _display(d: date) -> str:
    return f"{d.strftime('%a, %b')} {d.day}, {d.year}"


def format_test_date(value: str) -> str:
    """``"July 25, 2025"`` -> ``"Fri, Jul 25, 2025"``; unparseable input is echoed."""
    parsed = parse_catalog_date(value)
    return _display(parsed) if parsed else value


def estimated_score_release_date(value: str) -> str:
    """Scores are released roughly 30 days after the test."""
    parsed = parse_catalog_date(value)
    if parsed is None:
        return "~30 days after test"
    return _display(parsed + timedelta(days=SCORE_RELEASE_DAYS))


def truncate_text(text: str, max_length: int = 160) -> str:
    """Truncate at a word boundary when one falls within the last 20 characters."""
    if len(text) <= max_length:
        return text
    truncated = text[:max_length]
    last_space = truncated.rfind(" ")
    if last_space > max_length - 20:
        return truncated[:last_space] + "..."
    return truncated + "..."


def date_preview(d: MergedDate, max_length: int = PREVIEW_LENGTH) -> str:
    if d.astro_copy and d.astro_copy.text:
        return truncate_text(d.astro_copy.text, max_length)
    if d.description and d.description.feel:
        return truncate_text(d.description.feel, max_length)
    return ""
