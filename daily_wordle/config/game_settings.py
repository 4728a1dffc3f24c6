"""
Game Configuration Constants Module

This module defines the default game rules for the daily puzzle.
Every value here can be overridden at startup through the environment
(see app_config.py); nothing is mutable at runtime.
"""

import os
from datetime import date
from typing import Final

WORD_LENGTH: Final[int] = 5
"""
Number of letters in every solution and every accepted guess.
"""

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per daily game.
"""

EPOCH: Final[date] = date(2025, 1, 1)
"""
Calendar date of puzzle #0. Changing it shifts every future daily word.
"""

ENFORCE_WORD_LIST: Final[bool] = False
"""
Reject guesses that are not in the accepted vocabulary.
Off by default: any full-length guess is evaluated.
"""

WORDS_FILE: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words.json')
"""
Default word document with "solutions" and "allowed" arrays.
"""

ALPHABET: Final[str] = 'abcdefghijklmnopqrstuvwxyz'
VOWELS: Final[str] = 'aeiou'
