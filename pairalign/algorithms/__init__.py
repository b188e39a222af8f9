"""Algorithms for the project."""

from .base import AlignerState, AlignmentKernel, PairwiseAligner
from .needleman_wunsch import NEEDLEMAN_WUNSCH, NeedlemanWunschAligner
from .smith_waterman import SMITH_WATERMAN, SmithWatermanAligner


__all__ = [
    "AlignerState",
    "AlignmentKernel",
    "PairwiseAligner",
    "NEEDLEMAN_WUNSCH",
    "NeedlemanWunschAligner",
    "SMITH_WATERMAN",
    "SmithWatermanAligner",
]
