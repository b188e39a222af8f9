"""Exception types raised by pairalign."""


class PairAlignError(Exception):
    """Base class for all pairalign errors."""


class InvalidSequenceError(PairAlignError, ValueError):
    """Sequence text contains disallowed characters or no residues at all."""


class InvalidMatrixError(PairAlignError, ValueError):
    """Substitution matrix text violates the matrix file structure."""


class InvalidScoringRuleError(PairAlignError, ValueError):
    """Scoring rule has no score for a symbol of the loaded sequences."""


class AlignerStateError(PairAlignError, RuntimeError):
    """Operation invoked before the aligner was configured and loaded."""


__all__ = [
    "PairAlignError",
    "InvalidSequenceError",
    "InvalidMatrixError",
    "InvalidScoringRuleError",
    "AlignerStateError",
]
