"""Per-character labels for tokenized text."""

from __future__ import annotations

from enum import Enum
from typing import List

__all__ = [
    "CharacterLabel",
    "tag_tokenized_text",
    "label_to_string",
    "label_from_string",
]


class CharacterLabel(Enum):
    OUTSIDE = "O"
    INSIDE = "I"
    TOKEN_START = "T"
    SENTENCE_START = "S"


def tag_tokenized_text(tok: str) -> List[CharacterLabel]:
    """
    Label every character of tokenized text from its own structure.

    Tokens are separated by a single space and sentences by ``"\\n"``.
    The first character of a sentence gets SENTENCE_START, the first
    character of any later token in it TOKEN_START, other token
    characters INSIDE and the separators OUTSIDE.
    """
    result = []
    in_sentence = False
    in_token = False
    for char in tok:
        if char == " ":
            label = CharacterLabel.OUTSIDE
            in_token = False
        elif char == "\n":
            label = CharacterLabel.OUTSIDE
            in_token = False
            in_sentence = False
        elif in_token:
            label = CharacterLabel.INSIDE
        elif in_sentence:
            label = CharacterLabel.TOKEN_START
            in_token = True
        else:
            label = CharacterLabel.SENTENCE_START
            in_token = True
            in_sentence = True
        result.append(label)
    return result


def label_to_string(label: CharacterLabel) -> str:
    return label.value


def label_from_string(letter: str) -> CharacterLabel:
    try:
        return CharacterLabel(letter)
    except ValueError:
        raise ValueError(
            f"Unknown label letter: {letter!r} "
            f"(expected one of {[label.value for label in CharacterLabel]})"
        ) from None
