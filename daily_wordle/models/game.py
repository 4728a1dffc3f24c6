"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter feedback, ordered by strength: correct > present > absent."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def strength(self) -> int:
        return _STRENGTH[self]


_STRENGTH = {
    LetterStatus.CORRECT: 3,
    LetterStatus.PRESENT: 2,
    LetterStatus.ABSENT: 1,
}


class TerminalState(Enum):
    """Whether a session is still accepting input."""
    NONE = "none"
    WON = "won"
    LOST = "lost"


class RejectionReason(Enum):
    """Why an action was ignored. None of these end the session."""
    TOO_SHORT = "too-short"
    NOT_IN_WORD_LIST = "not-in-word-list"
    INVALID_LETTER = "invalid-letter"
    ROW_FULL = "row-full"
    NOTHING_TO_DELETE = "nothing-to-delete"
    UNKNOWN_KEY = "unknown-key"
    GAME_OVER = "game-over"


@dataclass(frozen=True)
class Attempt:
    """One submitted and evaluated guess row."""
    guess: str
    statuses: Tuple[LetterStatus, ...]

    @property
    def tiles(self) -> List[Tuple[str, LetterStatus]]:
        return list(zip(self.guess, self.statuses))

    def to_pairs(self) -> List[Tuple[str, str]]:
        """Letter/status pairs with string statuses for JSON serialization."""
        return [(letter, status.value) for letter, status in self.tiles]


@dataclass(frozen=True)
class DailyPuzzle:
    """The puzzle selected for one calendar day."""
    word: str
    day_ordinal: int
    index: int
    puzzle_date: date

    @property
    def label(self) -> str:
        return f"Day #{self.day_ordinal}"


@dataclass
class ActionResult:
    """Outcome of a single player action, consumed by the presentation layer."""
    action: str
    accepted: bool
    cursor_row: int
    cursor_col: int
    terminal: str
    reason: Optional[str] = None
    message: Optional[str] = None
    attempt: Optional[List[Tuple[str, str]]] = None  # submit only


@dataclass
class GameState:
    """Snapshot of a session for the presentation layer."""
    session_id: Optional[str]
    day_ordinal: Optional[int]
    word_length: int
    max_guesses: int
    cursor_row: int
    cursor_col: int
    current_letters: str
    grid: List[List[str]]
    guesses: List[str]
    attempts: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    terminal: str
    key_hints: Dict[str, str] = field(default_factory=dict)
    answer: Optional[str] = None  # Only included when the game is over
