"""
Key Hint Tracker

Best-known status of every guessed letter, used to color the keyboard.
"""

from typing import Dict, Optional

from ..models.game import LetterStatus


class KeyHintTracker:
    """Per-letter status that only ever moves up: absent -> present -> correct."""

    def __init__(self):
        self._hints: Dict[str, LetterStatus] = {}

    def record(self, letter: str, status: LetterStatus) -> LetterStatus:
        """Record a new observation and return the letter's resulting hint."""
        current = self._hints.get(letter)
        if current is None or status.strength > current.strength:
            self._hints[letter] = status
        return self._hints[letter]

    def current_hint(self, letter: str) -> Optional[LetterStatus]:
        return self._hints.get(letter)

    def snapshot(self) -> Dict[str, str]:
        return {letter: status.value for letter, status in sorted(self._hints.items())}

    def __len__(self):
        return len(self._hints)
