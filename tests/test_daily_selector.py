from datetime import date, datetime

import pytest

from daily_wordle.services.daily_selector import day_ordinal, select_daily

EPOCH = date(2025, 1, 1)
WORDS = ["crane", "level", "sissy", "abbey", "tiger"]


def test_epoch_day_is_ordinal_zero():
    puzzle = select_daily(WORDS, EPOCH, EPOCH)

    assert puzzle.day_ordinal == 0
    assert puzzle.index == 0
    assert puzzle.word == "crane"
    assert puzzle.label == "Day #0"


def test_ordinal_counts_calendar_days():
    puzzle = select_daily(WORDS, date(2025, 1, 3), EPOCH)

    assert puzzle.day_ordinal == 2
    assert puzzle.word == "sissy"


def test_index_wraps_around_solution_list():
    puzzle = select_daily(WORDS, date(2025, 1, 6), EPOCH)

    assert puzzle.day_ordinal == 5
    assert puzzle.index == 0
    assert puzzle.word == "crane"


def test_dates_before_epoch_still_select_a_word():
    puzzle = select_daily(WORDS, date(2024, 12, 31), EPOCH)

    assert puzzle.day_ordinal == -1
    assert puzzle.index == 4
    assert puzzle.word == "tiger"
    assert puzzle.label == "Day #-1"


def test_time_of_day_is_ignored():
    morning = select_daily(WORDS, datetime(2025, 3, 1, 0, 0, 1), EPOCH)
    night = select_daily(WORDS, datetime(2025, 3, 1, 23, 59, 59), EPOCH)

    assert morning == night
    assert morning.day_ordinal == day_ordinal(date(2025, 3, 1), EPOCH) == 59


def test_selection_is_deterministic():
    today = date(2026, 10, 19)

    assert select_daily(WORDS, today, EPOCH) == select_daily(WORDS, today, EPOCH)


def test_single_word_list_always_returns_it():
    for today in (date(2020, 5, 5), EPOCH, date(2031, 7, 4)):
        assert select_daily(["lone"], today, EPOCH).word == "lone"


def test_empty_solution_list_is_rejected():
    with pytest.raises(ValueError):
        select_daily([], EPOCH, EPOCH)
