"""Shared interface for scoring rules."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod


class ScoringRule(ABC):
    """Scores substitutions, insertions and removals of single symbols.

    Every instance carries its own re-entrant lock. Aligners hold it for the
    whole of a computation, so a rule shared between aligners running in
    different threads cannot be reconfigured halfway through a matrix.
    """

    def __init__(self, case_sensitive: bool = True) -> None:
        self._case_sensitive = case_sensitive
        self._lock = threading.RLock()

    @property
    def case_sensitive(self) -> bool:
        """Whether symbols are compared with their case preserved."""
        return self._case_sensitive

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding this rule instance."""
        return self._lock

    @abstractmethod
    def substitution(self, a: str, b: str) -> int:
        """Score for aligning symbol ``a`` of the first sequence with ``b`` of the second."""
        raise NotImplementedError

    @abstractmethod
    def insertion(self, a: str) -> int:
        """Score for aligning a gap in the first sequence with ``a`` of the second."""
        raise NotImplementedError

    @abstractmethod
    def removal(self, a: str) -> int:
        """Score for aligning ``a`` of the first sequence with a gap in the second."""
        raise NotImplementedError

    @abstractmethod
    def maximum(self) -> int:
        """Upper bound on the absolute value of any score this rule returns."""
        raise NotImplementedError

    @abstractmethod
    def supports_partial_match(self) -> bool:
        """Whether non-identical symbols can still score as similar."""
        raise NotImplementedError


__all__ = ["ScoringRule"]
