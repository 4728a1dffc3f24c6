import json

import pytest

from daily_wordle.config import WORDS_FILE
from daily_wordle.services.word_source import WordSource, WordSourceError, load_word_source


def test_words_are_lowercased_and_order_kept():
    source = WordSource.from_document({"solutions": ["Crane", "LEVEL", "abbey"], "allowed": ["EERIE"]})

    assert source.solutions == ("crane", "level", "abbey")
    assert source.allowed == frozenset({"eerie"})


def test_vocabulary_is_union_of_solutions_and_allowed():
    source = WordSource.from_document({"solutions": ["crane"], "allowed": ["eerie"]})

    assert source.vocabulary == frozenset({"crane", "eerie"})
    assert source.vocabulary is source.vocabulary


def test_allowed_may_be_empty():
    source = WordSource.from_document({"solutions": ["crane"], "allowed": []})

    assert source.allowed == frozenset()


@pytest.mark.parametrize("document", [
    {"solutions": [], "allowed": ["crane"]},
    {"allowed": ["crane"]},
    {"solutions": "crane", "allowed": []},
    {"solutions": ["crane"], "allowed": "eerie"},
    {"solutions": ["cranes"], "allowed": []},
    {"solutions": ["cr4ne"], "allowed": []},
    {"solutions": ["crane"], "allowed": ["eeri"]},
    {"solutions": ["crane", "CRANE"], "allowed": []},
    {"solutions": [12345], "allowed": []},
    ["crane"],
])
def test_invalid_documents_are_rejected(document):
    with pytest.raises(WordSourceError):
        WordSource.from_document(document)


def test_configured_word_length():
    source = WordSource.from_document({"solutions": ["planet"], "allowed": []}, word_length=6)

    assert source.word_length == 6
    with pytest.raises(WordSourceError):
        WordSource.from_document({"solutions": ["crane"], "allowed": []}, word_length=6)


def test_load_from_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"solutions": ["crane", "level"], "allowed": ["eerie"]}), encoding="utf-8")

    source = load_word_source(str(path))

    assert source.solutions == ("crane", "level")


def test_missing_file_is_a_word_source_error(tmp_path):
    with pytest.raises(WordSourceError, match="not found"):
        load_word_source(str(tmp_path / "missing.json"))


def test_malformed_json_is_a_word_source_error(tmp_path):
    path = tmp_path / "words.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(WordSourceError, match="Invalid JSON"):
        load_word_source(str(path))


def test_bundled_word_list_is_valid():
    source = load_word_source(WORDS_FILE)

    assert len(source.solutions) > 0
    assert all(len(word) == 5 for word in source.vocabulary)


def test_statistics():
    source = WordSource.from_document({"solutions": ["level", "eerie"], "allowed": ["crane"]})
    stats = source.statistics()

    assert stats["total_solutions"] == 2
    assert stats["total_allowed"] == 1
    assert stats["avg_vowel_count"] == 3.0
    assert stats["most_common_letters"][0] == ("e", 5)
