"""Read raw and tokenized files as synchronized line pairs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Iterator, NamedTuple, Optional, Union

__all__ = [
    "DEFAULT_NEWLINE_MARKER",
    "DEFAULT_SENTENCE_MARKER",
    "LinePair",
    "LinePairError",
    "InvalidEncodingError",
    "LineCountMismatchError",
    "prepare_raw_line",
    "prepare_tokenized_line",
    "read_line_pairs",
]

logger = logging.getLogger(__name__)

# Stands for a newline inside a raw document.
DEFAULT_NEWLINE_MARKER = "<NEWLINE>"
# Separates sentences in a tokenized document.
DEFAULT_SENTENCE_MARKER = "<SENT>"


class LinePairError(ValueError):
    """The two input files cannot be read as matching line pairs."""


class InvalidEncodingError(LinePairError):
    def __init__(self, path, line_number: int, reason: str):
        self.path = path
        self.line_number = line_number
        super().__init__(f"Invalid UTF-8 in {path}, line {line_number}: {reason}")


class LineCountMismatchError(LinePairError):
    def __init__(self, exhausted, other, line_number: int):
        self.exhausted = exhausted
        self.line_number = line_number
        super().__init__(
            f"Unexpected end of {exhausted}: {other} still has line {line_number}"
        )


class LinePair(NamedTuple):
    number: int
    raw: str
    tokenized: str


def prepare_raw_line(line: str, newline_marker: str = DEFAULT_NEWLINE_MARKER) -> str:
    return line.replace(newline_marker, "\n")


def prepare_tokenized_line(
    line: str, sentence_marker: str = DEFAULT_SENTENCE_MARKER
) -> str:
    return line.replace(sentence_marker, "\n")


def _decode(data: bytes, path, line_number: int) -> str:
    if data.endswith(b"\n"):
        data = data[:-1]
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(path, line_number, str(exc)) from exc


def _next_line(fh: BinaryIO) -> Optional[bytes]:
    data = fh.readline()
    return data if data else None


def read_line_pairs(
    raw_path: Union[str, Path],
    tok_path: Union[str, Path],
    newline_marker: str = DEFAULT_NEWLINE_MARKER,
    sentence_marker: str = DEFAULT_SENTENCE_MARKER,
) -> Iterator[LinePair]:
    """
    Yield one ``LinePair`` per line of the two files, markers replaced by ``"\\n"``.

    Lines are split on ``"\\n"`` only and decoded as strict UTF-8. Raises
    ``InvalidEncodingError`` for an undecodable line and
    ``LineCountMismatchError`` as soon as one file runs out before the
    other. ``OSError`` from opening or reading is not caught.
    """
    with open(raw_path, "rb") as raw_fh, open(tok_path, "rb") as tok_fh:
        number = 0
        while True:
            raw_data = _next_line(raw_fh)
            if raw_data is None:
                break
            number += 1
            raw_line = _decode(raw_data, raw_path, number)

            tok_data = _next_line(tok_fh)
            if tok_data is None:
                raise LineCountMismatchError(tok_path, raw_path, number)
            tok_line = _decode(tok_data, tok_path, number)

            yield LinePair(
                number,
                prepare_raw_line(raw_line, newline_marker),
                prepare_tokenized_line(tok_line, sentence_marker),
            )

        if _next_line(tok_fh) is not None:
            raise LineCountMismatchError(raw_path, tok_path, number + 1)

        logger.debug("Read %d line pairs from %s and %s", number, raw_path, tok_path)
