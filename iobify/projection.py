from __future__ import annotations

from typing import List, Sequence

from .alignment import UNALIGNED, align
from .labels import CharacterLabel, tag_tokenized_text

__all__ = ["project_labels", "iobify"]


def project_labels(
    raw: str,
    tok_labels: Sequence[CharacterLabel],
    alignment: Sequence[int],
) -> List[CharacterLabel]:
    """
    Carry tokenized-side labels over to the raw characters.

    A stretch of raw characters aligned to the same tokenized character
    is one token piece: the first one takes the tokenized label, the rest
    are INSIDE. Unaligned raw characters are OUTSIDE and do not break a
    stretch.
    """
    if len(alignment) != len(raw):
        raise ValueError(
            f"Alignment length {len(alignment)} does not match raw length {len(raw)}"
        )

    result = []
    previous = UNALIGNED
    for i in alignment:
        if i == UNALIGNED:
            result.append(CharacterLabel.OUTSIDE)
            continue
        if i == previous:
            result.append(CharacterLabel.INSIDE)
        else:
            result.append(tok_labels[i])
        previous = i
    return result


def iobify(raw: str, tok: str) -> List[CharacterLabel]:
    """Label every character of ``raw`` using its tokenized version ``tok``."""
    tok_labels = tag_tokenized_text(tok)
    alignment = align(raw, tok)
    return project_labels(raw, tok_labels, alignment)
