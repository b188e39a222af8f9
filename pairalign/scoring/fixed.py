"""Match/mismatch scoring with a linear, symbol-independent gap cost."""

from __future__ import annotations

from typing import Optional

from pairalign.scoring.base import ScoringRule


class FixedScoringRule(ScoringRule):
    """Binary scoring rule: one reward for a match, one penalty for a mismatch.

    Insertions and removals both cost ``gap_cost`` whatever the symbol.
    """

    def __init__(
        self,
        match_reward: int,
        mismatch_penalty: int,
        gap_cost: int,
        case_sensitive: bool = True,
    ) -> None:
        super().__init__(case_sensitive)
        self._match_reward = int(match_reward)
        self._mismatch_penalty = int(mismatch_penalty)
        self._gap_cost = int(gap_cost)
        self._maximum = self._compute_maximum()

    @property
    def match_reward(self) -> int:
        return self._match_reward

    @property
    def mismatch_penalty(self) -> int:
        return self._mismatch_penalty

    @property
    def gap_cost(self) -> int:
        return self._gap_cost

    def update(
        self,
        match_reward: Optional[int] = None,
        mismatch_penalty: Optional[int] = None,
        gap_cost: Optional[int] = None,
    ) -> None:
        """Reconfigure scores in place; waits for computations using this rule."""
        with self.lock:
            if match_reward is not None:
                self._match_reward = int(match_reward)
            if mismatch_penalty is not None:
                self._mismatch_penalty = int(mismatch_penalty)
            if gap_cost is not None:
                self._gap_cost = int(gap_cost)
            self._maximum = self._compute_maximum()

    def substitution(self, a: str, b: str) -> int:
        if self.case_sensitive:
            same = a == b
        else:
            same = a.lower() == b.lower()
        return self._match_reward if same else self._mismatch_penalty

    def insertion(self, a: str) -> int:
        return self._gap_cost

    def removal(self, a: str) -> int:
        return self._gap_cost

    def maximum(self) -> int:
        return self._maximum

    def supports_partial_match(self) -> bool:
        return False

    def _compute_maximum(self) -> int:
        return max(
            abs(self._match_reward), abs(self._mismatch_penalty), abs(self._gap_cost)
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(match_reward={self._match_reward}, "
            f"mismatch_penalty={self._mismatch_penalty}, gap_cost={self._gap_cost}, "
            f"case_sensitive={self.case_sensitive})"
        )


__all__ = ["FixedScoringRule"]
