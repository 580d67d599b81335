"""Daily puzzle seeds and builds, keyed to a fixed civil time zone."""

from datetime import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo

from .builder import PuzzleBuilder
from .models import BuildConfig, BuildResult


# Every client gets the same puzzle for the same calendar day in this zone
DAILY_TIMEZONE = ZoneInfo("America/Chicago")


def central_date_str(now: Optional[datetime] = None) -> str:
    """
    Calendar date (YYYY-MM-DD) in the daily puzzle time zone.

    Naive datetimes are treated as UTC.
    """
    if now is None:
        now = datetime.now(DAILY_TIMEZONE)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=ZoneInfo("UTC"))
    return now.astimezone(DAILY_TIMEZONE).strftime("%Y-%m-%d")


def daily_seed(date: str, corpus_size: int) -> str:
    """
    Base seed for a dated puzzle.

    The date is rewritten in canonical YYYY-MM-DD form, so "2025-9-14" and
    "2025-09-14" seed the same puzzle.

    Raises:
        ValueError: If `date` is not a YYYY-MM-DD calendar date
    """
    day = datetime.strptime(date, "%Y-%m-%d").date()
    return f"{day.isoformat()}|{corpus_size}"


def build_daily(
    words: List[str],
    date: Optional[str] = None,
    config: Optional[BuildConfig] = None,
) -> BuildResult:
    """
    Build the puzzle for `date` (default: today) from a raw corpus.

    The seed mixes in the size of the normalized corpus, so the same
    corpus snapshot always yields the same puzzle for a given day.
    """
    builder = PuzzleBuilder.create(words, config)
    seed = daily_seed(date or central_date_str(), builder.corpus_size)
    return builder.build(seed)
