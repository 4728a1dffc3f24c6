"""
Game Service

Owns the loaded word source and hands out one daily game session per player.
"""

import threading
import time
import uuid
from datetime import date
from typing import Callable, Dict, Optional

from ..config import Config
from ..models.game import DailyPuzzle, GameState
from ..utils.game_logger import game_logger
from .daily_selector import select_daily
from .game_session import GameSession
from .word_source import WordSource


class GameService:
    """
    Daily game service managing many player sessions.

    This class handles:
    - Selecting today's puzzle from the word source
    - Session creation with unique session IDs
    - Dropping sessions once their puzzle day is over
    - Game state snapshots without exposing answers of running games
    """

    def __init__(self,
                 word_source: WordSource,
                 config_class=Config,
                 clock: Callable[[], date] = date.today):
        if word_source.word_length != config_class.WORD_LENGTH:
            raise ValueError(
                f"Word source uses {word_source.word_length}-letter words, "
                f"configuration expects {config_class.WORD_LENGTH}"
            )

        self.word_source = word_source
        self.word_length = config_class.WORD_LENGTH
        self.max_guesses = config_class.MAX_GUESSES
        self.epoch = config_class.EPOCH_DATE
        self.enforce_word_list = config_class.ENFORCE_WORD_LIST
        self.clock = clock

        self.sessions: Dict[str, Dict] = {}  # session_id -> {"session", "puzzle_date", "created_at"}
        self._lock = threading.Lock()

    def current_puzzle(self) -> DailyPuzzle:
        """Today's puzzle according to the service clock."""
        return select_daily(self.word_source.solutions, self.clock(), self.epoch)

    def create_session(self) -> str:
        """
        Creates a new game session for today's puzzle.

        Returns:
            str: Unique session ID
        """
        puzzle = self.current_puzzle()
        session_id = str(uuid.uuid4())

        session = GameSession(
            puzzle.word,
            word_length=self.word_length,
            max_guesses=self.max_guesses,
            vocabulary=self.word_source.vocabulary if self.enforce_word_list else None,
            enforce_word_list=self.enforce_word_list,
            session_id=session_id,
            day_ordinal=puzzle.day_ordinal
        )

        with self._lock:
            self.sessions[session_id] = {
                "session": session,
                "puzzle_date": puzzle.puzzle_date,
                "created_at": time.time()
            }

        game_logger.log_game_event(
            session_id, 'session_created', 'system',
            day_ordinal=puzzle.day_ordinal, puzzle_index=puzzle.index
        )
        return session_id

    def get_session(self, session_id: str) -> Optional[GameSession]:
        """
        Returns the live session, or None if it does not exist or its day is over.
        """
        with self._lock:
            entry = self.sessions.get(session_id)
            if entry is None:
                return None

            if entry["puzzle_date"] != self.clock():
                del self.sessions[session_id]
                expired = True
            else:
                expired = False

        if expired:
            game_logger.log_game_event(
                session_id, 'session_expired', 'system',
                puzzle_date=entry["puzzle_date"].isoformat()
            )
            return None

        return entry["session"]

    def get_game_state(self, session_id: str) -> Optional[GameState]:
        session = self.get_session(session_id)
        if session is None:
            return None
        return session.get_state()

    def delete_session(self, session_id: str) -> bool:
        """
        Removes a session from memory.

        Returns:
            bool: True if the session was deleted, False if not found
        """
        with self._lock:
            if session_id in self.sessions:
                del self.sessions[session_id]
                return True
        return False

    def cleanup_stale_sessions(self) -> Dict:
        """
        Drops every session whose puzzle date is no longer today.

        Returns:
            Dict with the number of sessions removed and their IDs
        """
        today = self.clock()
        with self._lock:
            stale_ids = [
                session_id for session_id, entry in self.sessions.items()
                if entry["puzzle_date"] != today
            ]
            for session_id in stale_ids:
                del self.sessions[session_id]

        for session_id in stale_ids:
            game_logger.log_game_event(session_id, 'session_expired', 'system', reason='new_day')

        return {
            "cleaned_count": len(stale_ids),
            "session_ids": stale_ids
        }

    def active_session_count(self) -> int:
        with self._lock:
            return len(self.sessions)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: WordSource,
                            config_class=Config,
                            clock: Callable[[], date] = date.today) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_source, config_class, clock)
    return _game_service
