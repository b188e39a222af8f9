"""Shared lifecycle for pairwise alignment algorithms."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, NamedTuple, Optional

from pairalign.exceptions import AlignerStateError
from pairalign.scoring.base import ScoringRule
from pairalign.types import AlignmentResult, CharacterSequence
from pairalign.types.sequence import SequenceSource, read_sequence

logger = logging.getLogger(__name__)

AlignFunction = Callable[
    [CharacterSequence, CharacterSequence, ScoringRule, bool], AlignmentResult
]
ScoreFunction = Callable[[CharacterSequence, CharacterSequence, ScoringRule], int]


class AlignmentKernel(NamedTuple):
    """Pure functions doing the numeric work of one alignment algorithm.

    Attributes:
        name: Short algorithm name used in log messages
        align: Builds the full matrix and traces one optimal alignment back
        score: Computes only the optimal score in linear space
    """

    name: str
    align: AlignFunction
    score: ScoreFunction


class AlignerState(Enum):
    """Lifecycle states of a PairwiseAligner."""

    UNCONFIGURED = "unconfigured"
    RULE_SET = "rule_set"
    LOADED = "loaded"
    COMPUTED = "computed"


class PairwiseAligner:
    """Holds a scoring rule and a sequence pair, and memoizes results.

    The alignment and the score are computed lazily and cached until the
    scoring rule or the sequences change. Computations hold the scoring
    rule's lock, so one rule can be shared by aligners in several threads.
    """

    def __init__(
        self, kernel: AlignmentKernel, scoring_rule: Optional[ScoringRule] = None
    ) -> None:
        self._kernel = kernel
        self._scoring_rule: Optional[ScoringRule] = None
        self._signal_match = False
        self._first: Optional[CharacterSequence] = None
        self._second: Optional[CharacterSequence] = None
        self._alignment: Optional[AlignmentResult] = None
        self._score: Optional[int] = None
        if scoring_rule is not None:
            self.set_scoring_rule(scoring_rule)

    @property
    def scoring_rule(self) -> Optional[ScoringRule]:
        return self._scoring_rule

    @property
    def sequences(self) -> Optional[tuple[CharacterSequence, CharacterSequence]]:
        """The loaded sequence pair, or None."""
        if self._first is None or self._second is None:
            return None
        return self._first, self._second

    @property
    def signal_match(self) -> bool:
        """Whether every best-scoring substitution is shown as an exact match."""
        return self._signal_match

    @property
    def state(self) -> AlignerState:
        if self._scoring_rule is None:
            return AlignerState.UNCONFIGURED
        if self.sequences is None:
            return AlignerState.RULE_SET
        if self._alignment is not None or self._score is not None:
            return AlignerState.COMPUTED
        return AlignerState.LOADED

    def set_scoring_rule(self, scoring_rule: ScoringRule) -> None:
        """Use ``scoring_rule`` from now on; loaded sequences are kept."""
        if scoring_rule is None:
            raise ValueError("Scoring rule must not be None.")

        self._scoring_rule = scoring_rule
        self._signal_match = not scoring_rule.supports_partial_match()
        self._forget_results()

    def load_sequences(self, first: SequenceSource, second: SequenceSource) -> None:
        """Load the sequence pair to align.

        Each argument may be a CharacterSequence, raw sequence text, a path or
        an open text stream. If either fails to load, no sequences stay loaded.
        """
        self._forget_results()
        self._first = None
        self._second = None

        first_seq = read_sequence(first)
        second_seq = read_sequence(second)

        self._first = first_seq
        self._second = second_seq
        logger.debug(
            "Loaded sequences of length %d and %d", len(first_seq), len(second_seq)
        )

    def unload_sequences(self) -> None:
        self._forget_results()
        self._first = None
        self._second = None

    def get_alignment(self) -> AlignmentResult:
        """Return the optimal alignment, computing it on first use."""
        rule, first, second = self._require_ready()

        if self._alignment is None:
            logger.debug(
                "Computing %s alignment of %dx%d",
                self._kernel.name,
                len(first),
                len(second),
            )
            with rule.lock:
                alignment = self._kernel.align(first, second, rule, self._signal_match)
            self._alignment = alignment
            self._score = alignment.score

        return self._alignment

    def get_score(self) -> int:
        """Return the optimal score, computing it in linear space on first use."""
        rule, first, second = self._require_ready()

        if self._score is None:
            logger.debug(
                "Computing %s score of %dx%d",
                self._kernel.name,
                len(first),
                len(second),
            )
            with rule.lock:
                self._score = self._kernel.score(first, second, rule)

        return self._score

    def _require_ready(self) -> tuple[ScoringRule, CharacterSequence, CharacterSequence]:
        if self._first is None or self._second is None:
            raise AlignerStateError("The sequences to compare have not been loaded.")
        if self._scoring_rule is None:
            raise AlignerStateError("No scoring rule has been set for the alignment.")
        return self._scoring_rule, self._first, self._second

    def _forget_results(self) -> None:
        if self._alignment is not None or self._score is not None:
            logger.debug("Discarding memoized %s results", self._kernel.name)
        self._alignment = None
        self._score = None


__all__ = ["PairwiseAligner", "AlignmentKernel", "AlignerState"]
