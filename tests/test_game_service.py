from datetime import date, timedelta

import pytest

from daily_wordle.config import TestingConfig
from daily_wordle.services.game_service import GameService, get_game_service
from daily_wordle.services.game_session import GameSession


def test_initialize_sets_global_service(game_service):
    assert get_game_service() is game_service


def test_current_puzzle_follows_clock(game_service, clock):
    assert game_service.current_puzzle().word == "crane"

    clock.today = clock.today + timedelta(days=1)
    puzzle = game_service.current_puzzle()
    assert puzzle.word == "level"
    assert puzzle.day_ordinal == 1


def test_create_session(game_service):
    session_id = game_service.create_session()
    session = game_service.get_session(session_id)

    assert isinstance(session, GameSession)
    assert session.secret_word == "crane"
    assert session.session_id == session_id
    assert session.day_ordinal == 0
    assert session.max_guesses == TestingConfig.MAX_GUESSES
    assert game_service.active_session_count() == 1


def test_sessions_are_independent(game_service):
    first = game_service.get_session(game_service.create_session())
    second = game_service.get_session(game_service.create_session())

    first.type_letter("c")

    assert first is not second
    assert second.cursor_col == 0


def test_unknown_session(game_service):
    assert game_service.get_session("nope") is None
    assert game_service.get_game_state("nope") is None


def test_game_state_hides_answer(game_service):
    session_id = game_service.create_session()

    assert game_service.get_game_state(session_id).answer is None


def test_session_expires_on_new_day(game_service, clock):
    session_id = game_service.create_session()
    clock.today = clock.today + timedelta(days=1)

    assert game_service.get_session(session_id) is None
    assert game_service.active_session_count() == 0

    fresh = game_service.get_session(game_service.create_session())
    assert fresh.secret_word == "level"


def test_cleanup_stale_sessions(game_service, clock):
    old_ids = {game_service.create_session(), game_service.create_session()}
    clock.today = clock.today + timedelta(days=1)
    current_id = game_service.create_session()

    result = game_service.cleanup_stale_sessions()

    assert result["cleaned_count"] == 2
    assert set(result["session_ids"]) == old_ids
    assert game_service.get_session(current_id) is not None


def test_delete_session(game_service):
    session_id = game_service.create_session()

    assert game_service.delete_session(session_id)
    assert not game_service.delete_session(session_id)


def test_word_list_enforcement_comes_from_config(word_source, clock):
    class EnforcingConfig(TestingConfig):
        ENFORCE_WORD_LIST = True

    service = GameService(word_source, EnforcingConfig, clock)
    session = service.get_session(service.create_session())

    for letter in "zzzzz":
        session.type_letter(letter)
    assert session.submit().reason == "not-in-word-list"


def test_enforcing_sessions_share_one_vocabulary(word_source, clock):
    class EnforcingConfig(TestingConfig):
        ENFORCE_WORD_LIST = True

    service = GameService(word_source, EnforcingConfig, clock)
    first = service.get_session(service.create_session())
    second = service.get_session(service.create_session())

    assert first.vocabulary is second.vocabulary
    assert first.vocabulary is word_source.vocabulary


def test_sessions_skip_vocabulary_when_not_enforcing(game_service):
    session = game_service.get_session(game_service.create_session())

    assert session.vocabulary is None


def test_word_length_must_match_word_source(word_source):
    class SixLetterConfig(TestingConfig):
        WORD_LENGTH = 6

    with pytest.raises(ValueError):
        GameService(word_source, SixLetterConfig, lambda: date(2025, 1, 1))
