"""Needleman-Wunsch global alignment."""

from __future__ import annotations

from typing import Optional

import numpy as np

from pairalign.algorithms.base import AlignmentKernel, PairwiseAligner
from pairalign.algorithms.traceback import trace_alignment
from pairalign.scoring.base import ScoringRule
from pairalign.types import AlignmentResult, CharacterSequence


def compute_matrix(
    first: CharacterSequence, second: CharacterSequence, rule: ScoringRule
) -> np.ndarray:
    """Fill the (n+1) x (m+1) global alignment matrix row by row."""
    n = len(first)
    m = len(second)
    matrix = np.zeros((n + 1, m + 1), dtype=np.int64)

    for j in range(1, m + 1):
        matrix[0, j] = matrix[0, j - 1] + rule.insertion(second.at(j))

    for i in range(1, n + 1):
        a = first.at(i)
        matrix[i, 0] = matrix[i - 1, 0] + rule.removal(a)

        for j in range(1, m + 1):
            b = second.at(j)
            matrix[i, j] = max(
                matrix[i, j - 1] + rule.insertion(b),
                matrix[i - 1, j - 1] + rule.substitution(a, b),
                matrix[i - 1, j] + rule.removal(a),
            )

    return matrix


def align(
    first: CharacterSequence,
    second: CharacterSequence,
    rule: ScoringRule,
    signal_match: bool,
) -> AlignmentResult:
    """Compute the optimal global alignment, tracing back from the last cell."""
    matrix = compute_matrix(first, second, rule)
    return trace_alignment(
        matrix, first, second, rule, signal_match, len(first), len(second)
    )


def _score_by_rows(
    first: CharacterSequence, second: CharacterSequence, rule: ScoringRule
) -> int:
    n = len(first)
    m = len(second)
    row = np.zeros(m + 1, dtype=np.int64)

    for j in range(1, m + 1):
        row[j] = row[j - 1] + rule.insertion(second.at(j))

    for i in range(1, n + 1):
        a = first.at(i)
        diagonal = row[0]
        row[0] = row[0] + rule.removal(a)

        for j in range(1, m + 1):
            b = second.at(j)
            above = row[j]
            row[j] = max(
                row[j - 1] + rule.insertion(b),
                diagonal + rule.substitution(a, b),
                above + rule.removal(a),
            )
            diagonal = above

    return int(row[m])


def _score_by_columns(
    first: CharacterSequence, second: CharacterSequence, rule: ScoringRule
) -> int:
    n = len(first)
    m = len(second)
    column = np.zeros(n + 1, dtype=np.int64)

    for i in range(1, n + 1):
        column[i] = column[i - 1] + rule.removal(first.at(i))

    for j in range(1, m + 1):
        b = second.at(j)
        diagonal = column[0]
        column[0] = column[0] + rule.insertion(b)

        for i in range(1, n + 1):
            a = first.at(i)
            left = column[i]
            column[i] = max(
                left + rule.insertion(b),
                diagonal + rule.substitution(a, b),
                column[i - 1] + rule.removal(a),
            )
            diagonal = left

    return int(column[n])


def score(
    first: CharacterSequence, second: CharacterSequence, rule: ScoringRule
) -> int:
    """Optimal global score keeping a single row or column of the matrix.

    The kept vector runs along the shorter sequence.
    """
    if len(first) <= len(second):
        return _score_by_columns(first, second, rule)
    return _score_by_rows(first, second, rule)


NEEDLEMAN_WUNSCH = AlignmentKernel(name="needleman-wunsch", align=align, score=score)


class NeedlemanWunschAligner(PairwiseAligner):
    """Global alignment spanning both sequences end to end."""

    def __init__(self, scoring_rule: Optional[ScoringRule] = None) -> None:
        super().__init__(NEEDLEMAN_WUNSCH, scoring_rule)


__all__ = ["NeedlemanWunschAligner", "NEEDLEMAN_WUNSCH", "compute_matrix"]
