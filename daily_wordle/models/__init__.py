"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    ActionResult,
    Attempt,
    DailyPuzzle,
    GameState,
    LetterStatus,
    RejectionReason,
    TerminalState,
)

__all__ = [
    'ActionResult', 'Attempt', 'DailyPuzzle', 'GameState',
    'LetterStatus', 'RejectionReason', 'TerminalState'
]
