from __future__ import annotations

from enum import Enum
from typing import Callable, List, Mapping, Optional

import numpy as np
from Bio import Align

__all__ = [
    "EditOperation",
    "UNALIGNED",
    "DEFAULT_EDIT_COSTS",
    "whitespace_tolerant_match",
    "edit_script",
    "edit_distance",
    "align",
    "to_pairwise_alignment",
]

# Marks a raw character that has no tokenized counterpart.
UNALIGNED = -1

DEFAULT_EDIT_COSTS = {
    "insert": 1,
    "delete": 1,
    "substitute": 2,
}


class EditOperation(Enum):
    INSERT = "insert"
    DELETE = "delete"
    SUBSTITUTE = "substitute"
    MATCH = "match"


def whitespace_tolerant_match(source: str, target: str) -> bool:
    """Token/sentence separators on the tokenized side match any raw whitespace."""
    if source in (" ", "\n") and target.isspace():
        return True
    return source == target


def _cost_table(
    source: str,
    target: str,
    costs: Mapping[str, int],
    matches: Callable[[str, str], bool],
) -> np.ndarray:
    m, n = len(source), len(target)
    ins, dele, sub = costs["insert"], costs["delete"], costs["substitute"]

    table = np.zeros((m + 1, n + 1), dtype=np.int64)
    table[:, 0] = np.arange(m + 1) * dele
    table[0, :] = np.arange(n + 1) * ins
    insert_ramp = np.arange(n + 1, dtype=np.int64) * ins

    # one substitution-cost row per distinct source character
    diagonal_costs = {}
    for i in range(1, m + 1):
        s = source[i - 1]
        diagonal_cost = diagonal_costs.get(s)
        if diagonal_cost is None:
            mask = np.fromiter((matches(s, t) for t in target), dtype=bool, count=n)
            diagonal_cost = np.where(mask, 0, sub).astype(np.int64)
            diagonal_costs[s] = diagonal_cost

        previous = table[i - 1]
        row = np.empty(n + 1, dtype=np.int64)
        row[0] = previous[0] + dele
        row[1:] = np.minimum(previous[1:] + dele, previous[:-1] + diagonal_cost)
        # row[j] = min over k <= j of row[k] + (j - k) * ins
        table[i] = np.minimum.accumulate(row - insert_ramp) + insert_ramp
    return table


def edit_script(
    source: str,
    target: str,
    costs: Mapping[str, int] = DEFAULT_EDIT_COSTS,
    matches: Callable[[str, str], bool] = whitespace_tolerant_match,
) -> List[EditOperation]:
    """
    Minimum-cost edit script turning ``source`` (tokenized) into ``target`` (raw).

    Traceback runs from the bottom-right corner of the cost table and at
    each cell takes the first step, in the order delete, insert,
    substitute, match, that accounts for the cell's cost. Equal-cost
    scripts are therefore always resolved the same way.
    """
    table = _cost_table(source, target, costs, matches)
    ins, dele, sub = costs["insert"], costs["delete"], costs["substitute"]

    script: List[EditOperation] = []
    i, j = len(source), len(target)
    while i > 0 or j > 0:
        here = table[i, j]
        if i > 0 and table[i - 1, j] + dele == here:
            script.append(EditOperation.DELETE)
            i -= 1
        elif j > 0 and table[i, j - 1] + ins == here:
            script.append(EditOperation.INSERT)
            j -= 1
        elif (
            i > 0
            and j > 0
            and not matches(source[i - 1], target[j - 1])
            and table[i - 1, j - 1] + sub == here
        ):
            script.append(EditOperation.SUBSTITUTE)
            i -= 1
            j -= 1
        elif (
            i > 0
            and j > 0
            and matches(source[i - 1], target[j - 1])
            and table[i - 1, j - 1] == here
        ):
            script.append(EditOperation.MATCH)
            i -= 1
            j -= 1
        else:
            raise RuntimeError(
                f"Edit table traceback is stuck at cell ({i}, {j}) with cost {here}"
            )
    script.reverse()
    return script


def edit_distance(
    source: str,
    target: str,
    costs: Mapping[str, int] = DEFAULT_EDIT_COSTS,
    matches: Callable[[str, str], bool] = whitespace_tolerant_match,
) -> int:
    return int(_cost_table(source, target, costs, matches)[-1, -1])


def align(
    raw: str,
    tok: str,
    costs: Mapping[str, int] = DEFAULT_EDIT_COSTS,
    matches: Callable[[str, str], bool] = whitespace_tolerant_match,
    script: Optional[List[EditOperation]] = None,
) -> List[int]:
    """
    Map every raw character to the index of a tokenized character.

    Returns a list of len(raw); positions without a counterpart hold
    ``UNALIGNED``. A non-whitespace raw character that the edit script
    inserts belongs to the token on its left, or, when nothing is on its
    left, to the token on its right. Raw whitespace may stay unaligned.
    Pass ``script`` to reuse an edit script already computed for the pair.
    """
    if script is None:
        script = edit_script(tok, raw, costs=costs, matches=matches)

    alignment: List[int] = []
    i = 0  # tok offset
    j = 0  # raw offset
    for op in script:
        if op is EditOperation.MATCH or op is EditOperation.SUBSTITUTE:
            alignment.append(i)
            i += 1
            j += 1
        elif op is EditOperation.INSERT:
            if j > 0 and not raw[j].isspace():
                alignment.append(alignment[j - 1])
            else:
                alignment.append(UNALIGNED)
            j += 1
        elif op is EditOperation.DELETE:
            i += 1
        else:
            raise ValueError(f"Unknown edit operation: {op!r}")

    # Attach leading unaligned characters to their right neighbour. The
    # last raw character is left as is.
    for j in range(len(raw) - 2, -1, -1):
        if alignment[j] == UNALIGNED and not raw[j].isspace():
            alignment[j] = alignment[j + 1]

    return alignment


def to_pairwise_alignment(
    raw: str,
    tok: str,
    script: Optional[List[EditOperation]] = None,
) -> Align.Alignment:
    """
    Express the edit script as a Biopython alignment for display.

    The tokenized text is the target (first row) and the raw text the
    query. Newlines are shown as a pilcrow so each row prints on one line.
    Biopython marks columns by character identity, so raw whitespace matched
    by a tokenized separator is shown as that separator; otherwise a
    tolerated match would print like a substitution.
    """
    if script is None:
        script = edit_script(tok, raw)

    steps = {
        EditOperation.MATCH: (1, 1),
        EditOperation.SUBSTITUTE: (1, 1),
        EditOperation.DELETE: (1, 0),
        EditOperation.INSERT: (0, 1),
    }

    tok_shown = list(tok.replace("\n", "¶"))
    raw_shown = list(raw.replace("\n", "¶"))

    points = [(0, 0)]
    previous = None
    for op in script:
        step = steps[op]
        i, j = points[-1]
        if op is EditOperation.MATCH:
            raw_shown[j] = tok_shown[i]
        if step == previous:
            points[-1] = (i + step[0], j + step[1])
        else:
            points.append((i + step[0], j + step[1]))
        previous = step

    coordinates = np.array(points, dtype=int).T
    sequences = ["".join(tok_shown), "".join(raw_shown)]
    return Align.Alignment(sequences, coordinates)
