"""Unit tests for the Needleman-Wunsch global aligner."""

from __future__ import annotations

import random

import pytest

from pairalign.algorithms.needleman_wunsch import (
    NeedlemanWunschAligner,
    compute_matrix,
    score,
)
from pairalign.exceptions import InvalidScoringRuleError
from pairalign.scoring import FixedScoringRule, MatrixScoringRule
from pairalign.types import AlignmentResult, CharacterSequence

TOY_MATRIX = """\
   A   C   G   T   *
A  2  -1   1  -1  -3
C -1   2  -1   1  -3
G  1  -1   2  -1  -3
T -1   1  -1   2  -3
* -3  -3  -3  -3   0
"""


def _align(first: str, second: str, rule) -> AlignmentResult:
    """Run the global aligner on two sequence strings."""
    aligner = NeedlemanWunschAligner(rule)
    aligner.load_sequences(first, second)
    return aligner.get_alignment()


def _random_pairs(count: int, alphabet: str = "ACGT", seed: int = 7):
    """Yield reproducible random sequence pairs of uneven lengths."""
    rng = random.Random(seed)
    for _ in range(count):
        first = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 12)))
        second = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 12)))
        yield first, second


def test_global_alignment_of_acgt_and_agt():
    """ACGT vs AGT with +1/-1/-1 opens one gap in the second sequence."""
    result = _align("ACGT", "AGT", FixedScoringRule(1, -1, -1))

    assert result == AlignmentResult(
        first_with_gaps="ACGT",
        descriptor=": ::",
        second_with_gaps="A-GT",
        score=2,
    )


def test_global_score_only_matches_full_alignment_score():
    """The linear-space score agrees with the traced alignment in both orientations."""
    rule = FixedScoringRule(1, -1, -1)
    aligner = NeedlemanWunschAligner(rule)

    aligner.load_sequences("ACGT", "AGT")
    assert aligner.get_score() == 2

    aligner.load_sequences("AGT", "ACGT")
    assert aligner.get_score() == 2
    assert aligner.get_alignment().score == 2


def test_global_matrix_boundaries_accumulate_gap_scores():
    """First row and column hold running sums of insertion and removal scores."""
    rule = FixedScoringRule(1, -1, -2)
    matrix = compute_matrix(
        CharacterSequence.from_text("ACG"), CharacterSequence.from_text("AC"), rule
    )

    assert matrix.shape == (4, 3)
    assert list(matrix[0]) == [0, -2, -4]
    assert list(matrix[:, 0]) == [0, -2, -4, -6]
    assert matrix[3, 2] == 0


def test_insertion_is_preferred_over_diagonal_on_ties():
    """A vs AA: the insertion predecessor is checked first, so the gap lands last."""
    result = _align("A", "AA", FixedScoringRule(1, -1, -1))

    assert result.first_with_gaps == "A-"
    assert result.descriptor == ": "
    assert result.second_with_gaps == "AA"
    assert result.score == 0


def test_diagonal_is_preferred_over_removal_on_ties():
    """AA vs A: the diagonal wins over the removal, so the gap lands first."""
    result = _align("AA", "A", FixedScoringRule(1, -1, -1))

    assert result.first_with_gaps == "AA"
    assert result.descriptor == " :"
    assert result.second_with_gaps == "-A"
    assert result.score == 0


def test_matrix_rule_marks_positive_mismatches_as_approximate():
    """With a graded rule, non-identical positive pairs get the approximate marker."""
    rule = MatrixScoringRule.from_text(TOY_MATRIX)
    result = _align("AC", "GC", rule)

    assert result.first_with_gaps == "AC"
    assert result.descriptor == ".:"
    assert result.second_with_gaps == "GC"
    assert result.score == 3


def test_binary_rule_signals_case_insensitive_matches():
    """A case-insensitive fixed rule shows every match with the match marker."""
    result = _align("acgt", "ACGT", FixedScoringRule(1, -1, -1, case_sensitive=False))

    assert result.descriptor == "::::"
    assert result.score == 4


def test_graded_rule_keeps_match_marker_for_literal_identity():
    """A case-insensitive matrix rule scores a/A as a match but marks it approximate."""
    rule = MatrixScoringRule.from_text(TOY_MATRIX, case_sensitive=False)
    result = _align("ag", "AG", rule)

    assert result.first_with_gaps == "ag"
    assert result.descriptor == ".."
    assert result.second_with_gaps == "AG"
    assert result.score == 4


def test_mismatch_marker_for_non_positive_substitution():
    """Mismatches under a binary rule are shown as blanks."""
    result = _align("ACA", "AGA", FixedScoringRule(2, -1, -3))

    assert result.first_with_gaps == "ACA"
    assert result.descriptor == ": :"
    assert result.second_with_gaps == "AGA"
    assert result.score == 3


def test_global_alignment_lengths_and_residues():
    """Padded strings and descriptor share one length covering both sequences."""
    rule = FixedScoringRule(1, -1, -1)
    for first, second in _random_pairs(40):
        result = _align(first, second, rule)

        assert len(result.first_with_gaps) == len(result.descriptor)
        assert len(result.second_with_gaps) == len(result.descriptor)
        assert result.length >= max(len(first), len(second))
        assert result.first_with_gaps.replace("-", "") == first
        assert result.second_with_gaps.replace("-", "") == second


@pytest.mark.parametrize(
    "rule",
    [
        FixedScoringRule(1, -1, -1),
        FixedScoringRule(2, -3, -1),
        MatrixScoringRule.from_text(TOY_MATRIX),
    ],
)
def test_global_score_agreement(rule):
    """Linear-space scores equal the score of the traced alignment."""
    for first, second in _random_pairs(40, seed=11):
        first_seq = CharacterSequence.from_text(first)
        second_seq = CharacterSequence.from_text(second)
        assert score(first_seq, second_seq, rule) == _align(first, second, rule).score


def test_unknown_symbol_fails_during_computation():
    """Sequences load fine; the incompatible rule fails once scores are computed."""
    aligner = NeedlemanWunschAligner(MatrixScoringRule.from_text(TOY_MATRIX))
    aligner.load_sequences("ACGN", "ACG")

    with pytest.raises(InvalidScoringRuleError):
        aligner.get_score()
    with pytest.raises(InvalidScoringRuleError):
        aligner.get_alignment()
