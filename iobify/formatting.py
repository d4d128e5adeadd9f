"""Text records for labeled raw characters: ``<code point> <label letter>``."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .labels import CharacterLabel, label_from_string, label_to_string

__all__ = ["format_labels", "format_document", "parse_document"]


def format_labels(raw: str, labels: Sequence[CharacterLabel]) -> Iterator[str]:
    if len(labels) != len(raw):
        raise ValueError(
            f"Got {len(labels)} labels for {len(raw)} raw characters"
        )
    for char, label in zip(raw, labels):
        yield f"{ord(char)} {label_to_string(label)}"


def format_document(raw: str, labels: Sequence[CharacterLabel]) -> str:
    """All records of one document, followed by an empty separator record."""
    return "".join(record + "\n" for record in format_labels(raw, labels)) + "\n"


def parse_document(block: str) -> List[Tuple[str, CharacterLabel]]:
    """Read the records of one formatted document back into (char, label) pairs."""
    result = []
    for record in block.splitlines():
        if not record.strip():
            continue
        parts = record.split()
        if len(parts) != 2 or not parts[0].isdigit():
            raise ValueError(f"Malformed record: {record!r}")
        code_point, letter = parts
        result.append((chr(int(code_point)), label_from_string(letter)))
    return result
