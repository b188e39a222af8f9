"""Types for the project."""

from .sequence import CharacterSequence, read_sequence
from .alignment import AlignmentResult


__all__ = [
    "CharacterSequence",
    "read_sequence",
    "AlignmentResult",
]
