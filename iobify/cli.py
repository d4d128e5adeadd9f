"""Command-line entry point: label raw text against its tokenized version."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .alignment import align, edit_script, to_pairwise_alignment
from .formatting import format_document
from .labels import tag_tokenized_text
from .projection import project_labels
from .reader import (
    DEFAULT_NEWLINE_MARKER,
    DEFAULT_SENTENCE_MARKER,
    LinePairError,
    read_line_pairs,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iobify",
        description=(
            "Label every character of RAWFILE as O (outside), I (inside), "
            "T (token start) or S (sentence start) using the tokenized "
            "version in TOKFILE. Both files hold one document per line."
        ),
    )
    parser.add_argument("rawfile", help="Untokenized text, one document per line")
    parser.add_argument(
        "tokfile",
        help="Tokenized text: tokens separated by spaces, sentences by the sentence marker",
    )
    parser.add_argument(
        "--newline-marker",
        default=DEFAULT_NEWLINE_MARKER,
        metavar="MARKER",
        help=f"Marker for a newline inside a raw document (default: {DEFAULT_NEWLINE_MARKER})",
    )
    parser.add_argument(
        "--sentence-marker",
        default=DEFAULT_SENTENCE_MARKER,
        metavar="MARKER",
        help=f"Sentence boundary marker in the tokenized file (default: {DEFAULT_SENTENCE_MARKER})",
    )
    parser.add_argument(
        "--show-alignment",
        action="store_true",
        help="Log the character alignment of every document to stderr",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run(args: argparse.Namespace, out=None) -> int:
    out = out if out is not None else sys.stdout
    pairs = read_line_pairs(
        args.rawfile,
        args.tokfile,
        newline_marker=args.newline_marker,
        sentence_marker=args.sentence_marker,
    )
    count = 0
    try:
        for pair in pairs:
            tok_labels = tag_tokenized_text(pair.tokenized)
            script = edit_script(pair.tokenized, pair.raw)
            alignment = align(pair.raw, pair.tokenized, script=script)
            labels = project_labels(pair.raw, tok_labels, alignment)
            if args.show_alignment:
                logger.info(
                    "Line %d:\n%s",
                    pair.number,
                    to_pairwise_alignment(pair.raw, pair.tokenized, script),
                )
            out.write(format_document(pair.raw, labels))
            count += 1
    except OSError as exc:
        logger.error("Failed to read input: %s", exc)
        return 1
    except LinePairError as exc:
        logger.error("%s", exc)
        return 1
    logger.debug("Labeled %d documents", count)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
