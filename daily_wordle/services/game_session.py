"""
Game Session

Turn-based state machine for one player's daily game: the letter grid, the
row/column cursor, submitted attempts, keyboard hints and the win/lose state.
"""

import threading
from functools import wraps
from typing import AbstractSet, List, Optional

from ..config.game_settings import ALPHABET, MAX_GUESSES, WORD_LENGTH
from ..models.game import (
    ActionResult,
    Attempt,
    GameState,
    RejectionReason,
    TerminalState,
)
from .evaluator import evaluate_guess
from .key_hints import KeyHintTracker

SUBMIT_KEYS = ('enter',)
DELETE_KEYS = ('backspace', 'delete')


def _locked(method):
    """Run a session method while holding the session lock."""
    @wraps(method)
    def decorated_function(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return decorated_function


class GameSession:
    """
    A single game against a fixed secret word.

    Every action is synchronous and never raises for bad input: an action that
    cannot apply returns a rejected ActionResult and leaves the state as it was.
    Once the game is won or lost, every action is rejected. Actions on one
    session are serialized, so request threads may share it.
    """

    def __init__(self,
                 secret_word: str,
                 word_length: int = WORD_LENGTH,
                 max_guesses: int = MAX_GUESSES,
                 vocabulary: Optional[AbstractSet[str]] = None,
                 enforce_word_list: bool = False,
                 session_id: Optional[str] = None,
                 day_ordinal: Optional[int] = None):
        secret_word = secret_word.lower()
        if len(secret_word) != word_length:
            raise ValueError(f"Secret word must be {word_length} letters long")
        if max_guesses < 1:
            raise ValueError("max_guesses must be at least 1")

        self.secret_word = secret_word
        self.word_length = word_length
        self.max_guesses = max_guesses
        self.vocabulary = vocabulary
        self.enforce_word_list = enforce_word_list
        self.session_id = session_id
        self.day_ordinal = day_ordinal

        self.grid: List[List[str]] = [[''] * word_length for _ in range(max_guesses)]
        self.attempts: List[Attempt] = []
        self.cursor_row = 0
        self.cursor_col = 0
        self.terminal = TerminalState.NONE
        self.hints = KeyHintTracker()
        # Reentrant: handle_key dispatches to the other locked actions.
        self._lock = threading.RLock()

    @property
    def is_over(self) -> bool:
        return self.terminal is not TerminalState.NONE

    @property
    def current_letters(self) -> str:
        if self.cursor_row >= self.max_guesses:
            return ''
        return ''.join(self.grid[self.cursor_row][:self.cursor_col])

    @_locked
    def type_letter(self, letter: str) -> ActionResult:
        """Write a lowercase letter into the next free cell of the current row."""
        if self.is_over:
            return self._reject('type_letter', RejectionReason.GAME_OVER)
        if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
            return self._reject('type_letter', RejectionReason.INVALID_LETTER)
        if self.cursor_col >= self.word_length:
            return self._reject('type_letter', RejectionReason.ROW_FULL)

        self.grid[self.cursor_row][self.cursor_col] = letter
        self.cursor_col += 1
        return self._result('type_letter')

    @_locked
    def delete_letter(self) -> ActionResult:
        """Clear the last filled cell of the current row."""
        if self.is_over:
            return self._reject('delete_letter', RejectionReason.GAME_OVER)
        if self.cursor_col == 0:
            return self._reject('delete_letter', RejectionReason.NOTHING_TO_DELETE)

        self.cursor_col -= 1
        self.grid[self.cursor_row][self.cursor_col] = ''
        return self._result('delete_letter')

    @_locked
    def submit(self) -> ActionResult:
        """
        Evaluate the current row.

        A win leaves the cursor on the winning row. Any other guess moves to
        the next row, and using up the last row loses the game.
        """
        if self.is_over:
            return self._reject('submit', RejectionReason.GAME_OVER)
        if self.cursor_col < self.word_length:
            return self._reject('submit', RejectionReason.TOO_SHORT, "Not enough letters")

        guess = self.current_letters
        if self.enforce_word_list and self.vocabulary is not None and guess not in self.vocabulary:
            return self._reject('submit', RejectionReason.NOT_IN_WORD_LIST, "Not in word list")

        statuses = evaluate_guess(guess, self.secret_word, self.word_length)
        attempt = Attempt(guess=guess, statuses=tuple(statuses))
        self.attempts.append(attempt)

        for letter, status in attempt.tiles:
            self.hints.record(letter, status)

        message = None
        if guess == self.secret_word:
            self.terminal = TerminalState.WON
            message = "You got it!"
        else:
            self.cursor_row += 1
            self.cursor_col = 0
            if self.cursor_row == self.max_guesses:
                self.terminal = TerminalState.LOST
                message = f"The word was: {self.secret_word.upper()}"

        result = self._result('submit', message)
        result.attempt = attempt.to_pairs()
        return result

    @_locked
    def handle_key(self, key: str) -> ActionResult:
        """Dispatch a keyboard key name: enter, backspace/delete, or a letter."""
        if not isinstance(key, str):
            return self._reject('key', RejectionReason.UNKNOWN_KEY)

        key = key.lower()
        if key in SUBMIT_KEYS:
            return self.submit()
        if key in DELETE_KEYS:
            return self.delete_letter()
        if len(key) == 1 and key in ALPHABET:
            return self.type_letter(key)
        return self._reject('key', RejectionReason.UNKNOWN_KEY)

    @_locked
    def get_state(self) -> GameState:
        """Snapshot of the session. The answer is only included once the game is over."""
        return GameState(
            session_id=self.session_id,
            day_ordinal=self.day_ordinal,
            word_length=self.word_length,
            max_guesses=self.max_guesses,
            cursor_row=self.cursor_row,
            cursor_col=self.cursor_col,
            current_letters=self.current_letters,
            grid=[row.copy() for row in self.grid],
            guesses=[attempt.guess for attempt in self.attempts],
            attempts=[attempt.to_pairs() for attempt in self.attempts],
            terminal=self.terminal.value,
            key_hints=self.hints.snapshot(),
            answer=self.secret_word if self.is_over else None
        )

    def _result(self, action: str, message: Optional[str] = None) -> ActionResult:
        return ActionResult(
            action=action,
            accepted=True,
            cursor_row=self.cursor_row,
            cursor_col=self.cursor_col,
            terminal=self.terminal.value,
            message=message
        )

    def _reject(self, action: str, reason: RejectionReason, message: Optional[str] = None) -> ActionResult:
        return ActionResult(
            action=action,
            accepted=False,
            cursor_row=self.cursor_row,
            cursor_col=self.cursor_col,
            terminal=self.terminal.value,
            reason=reason.value,
            message=message
        )
