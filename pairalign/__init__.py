"""Pairwise sequence alignment by dynamic programming.

Global (Needleman-Wunsch) and local (Smith-Waterman) aligners over a
pluggable scoring rule: fixed match/mismatch/gap scores or a substitution
matrix read from text.
"""

__version__ = "0.1.0"

from pairalign.algorithms import (
    AlignerState,
    NeedlemanWunschAligner,
    PairwiseAligner,
    SmithWatermanAligner,
)
from pairalign.exceptions import (
    AlignerStateError,
    InvalidMatrixError,
    InvalidScoringRuleError,
    InvalidSequenceError,
    PairAlignError,
)
from pairalign.scoring import (
    FixedScoringRule,
    MatrixScoringRule,
    ScoringRule,
    parse_substitution_matrix,
)
from pairalign.types import AlignmentResult, CharacterSequence, read_sequence

__all__ = [
    "AlignerState",
    "NeedlemanWunschAligner",
    "PairwiseAligner",
    "SmithWatermanAligner",
    "AlignerStateError",
    "InvalidMatrixError",
    "InvalidScoringRuleError",
    "InvalidSequenceError",
    "PairAlignError",
    "FixedScoringRule",
    "MatrixScoringRule",
    "ScoringRule",
    "parse_substitution_matrix",
    "AlignmentResult",
    "CharacterSequence",
    "read_sequence",
]
