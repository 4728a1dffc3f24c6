"""
Services Package

Contains all business logic and service classes.
"""

from .daily_selector import day_ordinal, select_daily
from .evaluator import evaluate_guess
from .game_service import GameService, get_game_service, initialize_game_service
from .game_session import GameSession
from .key_hints import KeyHintTracker
from .word_source import WordSource, WordSourceError, load_word_source

__all__ = [
    'day_ordinal', 'select_daily',
    'evaluate_guess',
    'GameService', 'get_game_service', 'initialize_game_service',
    'GameSession',
    'KeyHintTracker',
    'WordSource', 'WordSourceError', 'load_word_source'
]
