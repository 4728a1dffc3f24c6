import logging
from collections import Counter
from itertools import product

from daily_wordle.models.game import LetterStatus
from daily_wordle.services.evaluator import evaluate_guess

C = LetterStatus.CORRECT
P = LetterStatus.PRESENT
A = LetterStatus.ABSENT

WORDS = ["level", "eerie", "crane", "nacre", "sissy", "abbey", "babes", "geese", "speed", "llama"]


def test_repeated_guess_letters_do_not_over_claim():
    assert evaluate_guess("eerie", "level") == [P, C, A, A, A]


def test_exact_guess_is_all_correct():
    assert evaluate_guess("crane", "crane") == [C] * 5


def test_anagram_is_present_except_fixed_letters():
    assert evaluate_guess("nacre", "crane") == [P, P, P, P, C]


def test_exact_matches_are_claimed_before_present():
    assert evaluate_guess("babes", "abbey") == [P, P, C, C, A]


def test_extra_copies_of_a_fully_matched_letter_are_absent():
    assert evaluate_guess("sssss", "sissy") == [C, A, C, C, A]


def test_no_shared_letters():
    assert evaluate_guess("quick", "level") == [A] * 5


def test_correct_count_matches_positional_matches():
    for guess, solution in product(WORDS, repeat=2):
        statuses = evaluate_guess(guess, solution)
        expected = sum(1 for g, s in zip(guess, solution) if g == s)
        assert statuses.count(C) == expected, (guess, solution)


def test_hits_never_exceed_letter_multiplicity():
    for guess, solution in product(WORDS, repeat=2):
        statuses = evaluate_guess(guess, solution)
        multiplicity = Counter(solution)
        hits = Counter(letter for letter, status in zip(guess, statuses) if status is not A)
        for letter, count in hits.items():
            assert count <= multiplicity[letter], (guess, solution, letter)


def test_every_word_against_itself_is_all_correct():
    for word in WORDS:
        assert evaluate_guess(word, word) == [C] * len(word)


def test_length_mismatch_degrades_to_absent(caplog):
    with caplog.at_level(logging.ERROR):
        statuses = evaluate_guess("cran", "crane")

    assert statuses == [A] * 5
    assert "length mismatch" in caplog.text


def test_length_mismatch_uses_configured_length(caplog):
    with caplog.at_level(logging.ERROR):
        statuses = evaluate_guess("crane", "cranes", word_length=5)

    assert statuses == [A] * 5
