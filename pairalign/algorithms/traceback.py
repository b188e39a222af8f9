"""Traceback shared by the global and local dynamic-programming aligners."""

from __future__ import annotations

from typing import List

import numpy as np

from pairalign.scoring.base import ScoringRule
from pairalign.types import AlignmentResult, CharacterSequence
from pairalign.types.alignment import (
    APPROXIMATE_MATCH_CHAR,
    GAP_CHAR,
    GAP_SYMBOL,
    MATCH_CHAR,
    MISMATCH_CHAR,
)


def column_marker(
    a: str, b: str, substitution: int, rule: ScoringRule, signal_match: bool
) -> str:
    """Descriptor marker for a column pairing ``a`` with ``b``.

    Binary rules (``signal_match``) mark every pairing that scores as well as
    ``a`` against itself as a match. Graded rules keep the match marker for
    literal identity and flag other positive pairings as approximate.
    """
    if signal_match:
        return MATCH_CHAR if substitution == rule.substitution(a, a) else MISMATCH_CHAR
    if a == b:
        return MATCH_CHAR
    if substitution > 0:
        return APPROXIMATE_MATCH_CHAR
    return MISMATCH_CHAR


def trace_alignment(
    matrix: np.ndarray,
    first: CharacterSequence,
    second: CharacterSequence,
    rule: ScoringRule,
    signal_match: bool,
    line: int,
    column: int,
    local: bool = False,
) -> AlignmentResult:
    """Walk ``matrix`` back from (line, column) and rebuild one optimal alignment.

    At each cell the insertion predecessor is tried first, then the diagonal,
    and the removal is taken otherwise. With ``local`` the walk stops at the
    first zero cell.
    """
    score = int(matrix[line, column])
    first_with_gaps: List[str] = []
    descriptor: List[str] = []
    second_with_gaps: List[str] = []

    while (line > 0 or column > 0) and (not local or matrix[line, column] > 0):
        current = matrix[line, column]

        if column > 0:
            b = second.at(column)
            if current == matrix[line, column - 1] + rule.insertion(b):
                first_with_gaps.append(GAP_SYMBOL)
                descriptor.append(GAP_CHAR)
                second_with_gaps.append(b)
                column -= 1
                continue

        if line > 0 and column > 0:
            a = first.at(line)
            b = second.at(column)
            substitution = rule.substitution(a, b)
            if current == matrix[line - 1, column - 1] + substitution:
                first_with_gaps.append(a)
                descriptor.append(column_marker(a, b, substitution, rule, signal_match))
                second_with_gaps.append(b)
                line -= 1
                column -= 1
                continue

        first_with_gaps.append(first.at(line))
        descriptor.append(GAP_CHAR)
        second_with_gaps.append(GAP_SYMBOL)
        line -= 1

    first_with_gaps.reverse()
    descriptor.reverse()
    second_with_gaps.reverse()

    return AlignmentResult(
        first_with_gaps="".join(first_with_gaps),
        descriptor="".join(descriptor),
        second_with_gaps="".join(second_with_gaps),
        score=score,
    )


__all__ = ["trace_alignment", "column_marker"]
