"""Scoring rules used by the alignment algorithms."""

from .base import ScoringRule
from .fixed import FixedScoringRule
from .matrix import INDEL_MARKER, MatrixScoringRule, parse_substitution_matrix


__all__ = [
    "ScoringRule",
    "FixedScoringRule",
    "MatrixScoringRule",
    "parse_substitution_matrix",
    "INDEL_MARKER",
]
