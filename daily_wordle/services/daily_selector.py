"""
Daily Puzzle Selector

Maps a calendar date to the day's secret word. Every player who asks on the
same date gets the same word.
"""

from datetime import date, datetime
from typing import Sequence

from ..models.game import DailyPuzzle


def _calendar_date(value: date) -> date:
    # Time of day and timezone never affect which puzzle a date gets.
    if isinstance(value, datetime):
        return value.date()
    return value


def day_ordinal(today: date, epoch: date) -> int:
    """Whole calendar days from `epoch` to `today`. Negative before the epoch."""
    return (_calendar_date(today) - _calendar_date(epoch)).days


def select_daily(solutions: Sequence[str], today: date, epoch: date) -> DailyPuzzle:
    """
    Pick the puzzle for `today`.

    Args:
        solutions: Ordered solution list
        today: Calendar date to select for
        epoch: Calendar date of puzzle #0

    Returns:
        DailyPuzzle with the word, the raw day ordinal and the index used
    """
    if not solutions:
        raise ValueError("Cannot select a daily word from an empty solution list")

    ordinal = day_ordinal(today, epoch)
    count = len(solutions)
    index = ((ordinal % count) + count) % count

    return DailyPuzzle(
        word=solutions[index],
        day_ordinal=ordinal,
        index=index,
        puzzle_date=_calendar_date(today)
    )
