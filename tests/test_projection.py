import pytest

from iobify.alignment import UNALIGNED
from iobify.labels import CharacterLabel, tag_tokenized_text
from iobify.projection import iobify, project_labels

O = CharacterLabel.OUTSIDE
I = CharacterLabel.INSIDE
T = CharacterLabel.TOKEN_START
S = CharacterLabel.SENTENCE_START


def test_iobify_identical_texts():
    assert iobify("Hi world", "Hi world") == [S, I, O, T, I, I, I, I]


def test_iobify_identity_equals_tokenized_labels():
    text = "Hello big world\nBye now"
    assert iobify(text, text) == tag_tokenized_text(text)


def test_iobify_raw_without_space():
    assert iobify("Hithere", "Hi there") == [S, I, T, I, I, I, I]


def test_iobify_separately_tokenized_comma():
    # the tokenized space before the comma is deleted, the comma itself matches
    assert iobify("Hi, there", "Hi , there") == [S, I, T, O, T, I, I, I, I]


def test_iobify_inserted_punctuation_is_inside():
    assert iobify("Hi! there", "Hi there") == [S, I, I, O, T, I, I, I, I]


def test_iobify_leading_punctuation_starts_sentence():
    assert iobify("(a b", "a b") == [S, I, O, T]


def test_iobify_sentence_break_on_raw_space():
    assert iobify("Hi. Go!", "Hi .\nGo !") == [S, I, T, O, S, I, T]


def test_iobify_whitespace_variants():
    assert iobify("Hi\tworld", "Hi world") == iobify("Hi world", "Hi world")
    assert iobify("a  b", "a b") == [S, O, O, T]


def test_iobify_empty_inputs():
    assert iobify("", "") == []
    assert iobify("", "abc") == []
    assert iobify("ab", "") == [O, O]


def test_iobify_length_and_idempotence():
    pairs = [
        ("Mr.Smith He  left.", "Mr. Smith\nHe left ."),
        ("don't", "do n't"),
        ("x", "completely different"),
    ]
    for raw, tok in pairs:
        first = iobify(raw, tok)
        assert len(first) == len(raw)
        assert iobify(raw, tok) == first


def test_project_labels_gap_keeps_previous_index():
    assert project_labels("a b", [S], [0, UNALIGNED, 0]) == [S, O, I]


def test_project_labels_length_mismatch_raises():
    with pytest.raises(ValueError):
        project_labels("abc", [S], [0])
