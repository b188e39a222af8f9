"""Utility functions for the project."""

from .fasta import read_fasta
from .matrices import available_matrices, load_bundled_matrix
from .serialization import (
    load_scoring_rule,
    save_scoring_rule,
    scoring_rule_from_dict,
    scoring_rule_to_dict,
)

__all__ = [
    "read_fasta",
    "available_matrices",
    "load_bundled_matrix",
    "load_scoring_rule",
    "save_scoring_rule",
    "scoring_rule_from_dict",
    "scoring_rule_to_dict",
]
