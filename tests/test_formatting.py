import pytest

from iobify.formatting import format_document, format_labels, parse_document
from iobify.labels import CharacterLabel

O = CharacterLabel.OUTSIDE
I = CharacterLabel.INSIDE
T = CharacterLabel.TOKEN_START
S = CharacterLabel.SENTENCE_START


def test_format_labels_uses_code_points():
    assert list(format_labels("Hi é", [S, I, O, T])) == [
        "72 S",
        "105 I",
        "32 O",
        "233 T",
    ]


def test_format_document_ends_with_blank_record():
    assert format_document("Hi", [S, I]) == "72 S\n105 I\n\n"
    assert format_document("", []) == "\n"


def test_format_labels_length_mismatch_raises():
    with pytest.raises(ValueError):
        list(format_labels("abc", [S]))


def test_parse_document_reads_records_back():
    block = format_document("a\nb", [S, O, S])
    assert parse_document(block) == [("a", S), ("\n", O), ("b", S)]


def test_parse_document_malformed_record_raises():
    with pytest.raises(ValueError):
        parse_document("72 S\nnot a record\n")
    with pytest.raises(ValueError):
        parse_document("72 X\n")
