"""
Word Source

Loads the solution list and the accepted-guess vocabulary from a JSON
document of the form {"solutions": [...], "allowed": [...]}.
"""

import json
from dataclasses import dataclass
from functools import cached_property
from typing import Dict, FrozenSet, Iterable, Tuple

from ..config.game_settings import ALPHABET, VOWELS, WORD_LENGTH


class WordSourceError(ValueError):
    """The word document is missing, malformed, or has no solutions."""


@dataclass(frozen=True)
class WordSource:
    """
    Candidate solutions plus the extra words accepted as guesses.

    The order of `solutions` is what daily selection indexes into, so it
    is kept exactly as it appears in the document.
    """
    solutions: Tuple[str, ...]
    allowed: FrozenSet[str]
    word_length: int = WORD_LENGTH

    @cached_property
    def vocabulary(self) -> FrozenSet[str]:
        # Built once; every enforcing session shares this set.
        return frozenset(self.solutions) | self.allowed

    @classmethod
    def from_document(cls, data, word_length: int = WORD_LENGTH) -> 'WordSource':
        """
        Build a word source from an already-parsed document.

        Raises:
            WordSourceError: If the structure is wrong, the solution list is
                empty or holds duplicates, or any word has the wrong shape.
        """
        if not isinstance(data, dict):
            raise WordSourceError("Word document must be a JSON object")

        solutions = data.get('solutions')
        allowed = data.get('allowed', [])
        if not isinstance(solutions, list) or not isinstance(allowed, list):
            raise WordSourceError("Invalid word file structure: 'solutions' and 'allowed' must be arrays")

        solutions = _normalize(solutions, word_length, 'solutions')
        allowed = _normalize(allowed, word_length, 'allowed')

        if not solutions:
            raise WordSourceError("No solution words found")

        if len(solutions) != len(set(solutions)):
            duplicates = sorted({word for word in solutions if solutions.count(word) > 1})
            raise WordSourceError(f"Duplicate words found in solutions: {duplicates}")

        return cls(solutions=tuple(solutions), allowed=frozenset(allowed), word_length=word_length)

    def statistics(self) -> Dict:
        """Letter statistics over the solution list, reported by the health check."""
        total_vowels = sum(1 for word in self.solutions for char in word if char in VOWELS)

        letter_frequency: Dict[str, int] = {}
        for word in self.solutions:
            for char in word:
                letter_frequency[char] = letter_frequency.get(char, 0) + 1

        return {
            "total_solutions": len(self.solutions),
            "total_allowed": len(self.allowed),
            "avg_vowel_count": round(total_vowels / len(self.solutions), 2),
            "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
        }


def _normalize(words: Iterable, word_length: int, section: str) -> list:
    normalized = []
    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise WordSourceError(f"Entry {index} in '{section}' is not a string")
        word = word.strip().lower()
        if len(word) != word_length:
            raise WordSourceError(f"Word '{word}' in '{section}' is not {word_length} characters long")
        if any(char not in ALPHABET for char in word):
            raise WordSourceError(f"Word '{word}' in '{section}' contains non-alphabetic characters")
        normalized.append(word)
    return normalized


def load_word_source(path: str, word_length: int = WORD_LENGTH) -> WordSource:
    """
    Load and validate the word document at `path`.

    Raises:
        WordSourceError: If the file is missing, is not valid JSON, or fails validation.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise WordSourceError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise WordSourceError(f"Invalid JSON in {path}: {e}")

    return WordSource.from_document(data, word_length)
