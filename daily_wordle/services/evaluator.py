"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm, including repeated letters.
"""

from collections import Counter
from typing import List, Optional

from ..models.game import LetterStatus
from ..utils.game_logger import game_logger


def evaluate_guess(guess: str, solution: str, word_length: Optional[int] = None) -> List[LetterStatus]:
    """
    Classify every letter of `guess` against `solution`.

    Exact matches are claimed first so that a repeated guess letter can only
    be marked present as many times as the solution still has it unmatched.
    A guess whose length differs from the solution evaluates to all absent.
    """
    length = word_length if word_length is not None else len(solution)
    result = [LetterStatus.ABSENT] * length

    if len(guess) != len(solution) or len(solution) != length:
        game_logger.logger.error(
            f"Guess/solution length mismatch: guess={guess!r} solution_length={len(solution)} expected={length}"
        )
        return result

    remaining = Counter(solution)

    # First pass: exact positions
    for i, (g, s) in enumerate(zip(guess, solution)):
        if g == s:
            result[i] = LetterStatus.CORRECT
            remaining[g] -= 1

    # Second pass: right letter, wrong position
    for i, g in enumerate(guess):
        if result[i] is LetterStatus.CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = LetterStatus.PRESENT
            remaining[g] -= 1

    return result
