"""Smith-Waterman local alignment."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from pairalign.algorithms.base import AlignmentKernel, PairwiseAligner
from pairalign.algorithms.traceback import trace_alignment
from pairalign.scoring.base import ScoringRule
from pairalign.types import AlignmentResult, CharacterSequence


def compute_matrix(
    first: CharacterSequence, second: CharacterSequence, rule: ScoringRule
) -> Tuple[np.ndarray, Tuple[int, int]]:
    """Fill the local alignment matrix and locate its best cell.

    Cells never drop below zero, and the first row and column stay at zero.
    Among equal maxima the first one met in row-major order is kept.

    Returns:
        The (n+1) x (m+1) matrix and the (line, column) of the best cell.
    """
    n = len(first)
    m = len(second)
    matrix = np.zeros((n + 1, m + 1), dtype=np.int64)
    best = 0
    best_cell = (0, 0)

    for i in range(1, n + 1):
        a = first.at(i)

        for j in range(1, m + 1):
            b = second.at(j)
            value = max(
                0,
                matrix[i, j - 1] + rule.insertion(b),
                matrix[i - 1, j - 1] + rule.substitution(a, b),
                matrix[i - 1, j] + rule.removal(a),
            )
            matrix[i, j] = value

            if value > best:
                best = value
                best_cell = (i, j)

    return matrix, best_cell


def align(
    first: CharacterSequence,
    second: CharacterSequence,
    rule: ScoringRule,
    signal_match: bool,
) -> AlignmentResult:
    """Compute the optimal local alignment, tracing back from the best cell."""
    matrix, (line, column) = compute_matrix(first, second, rule)
    return trace_alignment(
        matrix, first, second, rule, signal_match, line, column, local=True
    )


def _score_by_rows(
    first: CharacterSequence, second: CharacterSequence, rule: ScoringRule
) -> int:
    n = len(first)
    m = len(second)
    row = np.zeros(m + 1, dtype=np.int64)
    best = 0

    for i in range(1, n + 1):
        a = first.at(i)
        diagonal = row[0]

        for j in range(1, m + 1):
            b = second.at(j)
            above = row[j]
            row[j] = max(
                0,
                row[j - 1] + rule.insertion(b),
                diagonal + rule.substitution(a, b),
                above + rule.removal(a),
            )
            diagonal = above
            best = max(best, row[j])

    return int(best)


def _score_by_columns(
    first: CharacterSequence, second: CharacterSequence, rule: ScoringRule
) -> int:
    n = len(first)
    m = len(second)
    column = np.zeros(n + 1, dtype=np.int64)
    best = 0

    for j in range(1, m + 1):
        b = second.at(j)
        diagonal = column[0]

        for i in range(1, n + 1):
            a = first.at(i)
            left = column[i]
            column[i] = max(
                0,
                left + rule.insertion(b),
                diagonal + rule.substitution(a, b),
                column[i - 1] + rule.removal(a),
            )
            diagonal = left
            best = max(best, column[i])

    return int(best)


def score(
    first: CharacterSequence, second: CharacterSequence, rule: ScoringRule
) -> int:
    """Best local score keeping a single row or column of the matrix."""
    if len(first) <= len(second):
        return _score_by_columns(first, second, rule)
    return _score_by_rows(first, second, rule)


SMITH_WATERMAN = AlignmentKernel(name="smith-waterman", align=align, score=score)


class SmithWatermanAligner(PairwiseAligner):
    """Local alignment of the best-scoring pair of substrings."""

    def __init__(self, scoring_rule: Optional[ScoringRule] = None) -> None:
        super().__init__(SMITH_WATERMAN, scoring_rule)


__all__ = ["SmithWatermanAligner", "SMITH_WATERMAN", "compute_matrix"]
