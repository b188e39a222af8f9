"""Unit tests for the fixed and substitution-matrix scoring rules."""

from __future__ import annotations

import threading

import pytest

from pairalign.exceptions import InvalidMatrixError, InvalidScoringRuleError
from pairalign.scoring import (
    FixedScoringRule,
    MatrixScoringRule,
    parse_substitution_matrix,
)

DNA_MATRIX = """\
# toy nucleotide matrix
   A   C   G   T   *
A  2  -1   1  -1  -3
C -1   2  -1   1  -3
G  1  -1   2  -1  -3
T -1   1  -1   2  -3
* -3  -3  -3  -3   0
"""


def _build_matrix_text(header: str, rows: list[str]) -> str:
    """Join a header line and data rows into matrix text."""
    return "\n".join([header, *rows]) + "\n"


def test_fixed_rule_case_sensitive_scores():
    """Case-sensitive fixed rule treats differently cased letters as a mismatch."""
    rule = FixedScoringRule(3, -2, -4)

    assert rule.substitution("A", "A") == 3
    assert rule.substitution("A", "a") == -2
    assert rule.substitution("A", "C") == -2
    assert rule.insertion("G") == -4
    assert rule.removal("T") == -4
    assert rule.case_sensitive is True
    assert rule.supports_partial_match() is False


def test_fixed_rule_case_insensitive_scores():
    """Case-insensitive fixed rule folds case before comparing."""
    rule = FixedScoringRule(1, -1, -2, case_sensitive=False)

    assert rule.substitution("a", "A") == 1
    assert rule.substitution("g", "C") == -1


def test_fixed_rule_maximum_is_largest_absolute_score():
    """maximum() is the largest absolute value among the three scores."""
    assert FixedScoringRule(1, -1, -1).maximum() == 1
    assert FixedScoringRule(2, -5, -3).maximum() == 5
    assert FixedScoringRule(1, -1, -7).maximum() == 7


def test_fixed_rule_update_recomputes_maximum():
    """update() changes only the given scores and refreshes the maximum."""
    rule = FixedScoringRule(1, -1, -1)
    rule.update(gap_cost=-9)

    assert rule.gap_cost == -9
    assert rule.match_reward == 1
    assert rule.maximum() == 9


def test_fixed_rule_update_waits_for_lock_holder():
    """A reconfiguration cannot happen while another thread holds the rule lock."""
    rule = FixedScoringRule(1, -1, -1)
    updated = threading.Event()

    def reconfigure():
        rule.update(match_reward=5)
        updated.set()

    with rule.lock:
        worker = threading.Thread(target=reconfigure)
        worker.start()
        assert not updated.wait(timeout=0.2)
        assert rule.substitution("A", "A") == 1

    worker.join(timeout=5)
    assert updated.is_set()
    assert rule.substitution("A", "A") == 5


def test_each_rule_has_its_own_lock():
    """Independent rule instances never share a lock."""
    first = FixedScoringRule(1, -1, -1)
    second = FixedScoringRule(1, -1, -1)

    assert first.lock is not second.lock


def test_matrix_rule_reproduces_every_table_value():
    """Every literal value of the source table is returned by the lookups."""
    rule = MatrixScoringRule.from_text(DNA_MATRIX)
    symbols = "ACGT"
    expected = {
        "A": [2, -1, 1, -1],
        "C": [-1, 2, -1, 1],
        "G": [1, -1, 2, -1],
        "T": [-1, 1, -1, 2],
    }

    for row in symbols:
        for column, value in zip(symbols, expected[row]):
            assert rule.substitution(row, column) == value
        assert rule.removal(row) == -3
        assert rule.insertion(row) == -3
    assert rule.substitution("*", "*") == 0
    assert rule.maximum() == 3
    assert rule.supports_partial_match() is True


def test_matrix_rule_unknown_symbol_is_incompatible():
    """Lookups of symbols missing from the table raise InvalidScoringRuleError."""
    rule = MatrixScoringRule.from_text(DNA_MATRIX)

    with pytest.raises(InvalidScoringRuleError):
        rule.substitution("A", "N")
    with pytest.raises(InvalidScoringRuleError):
        rule.insertion("U")
    with pytest.raises(InvalidScoringRuleError):
        rule.removal("a")


def test_matrix_rule_case_insensitive_normalizes_headers_and_lookups():
    """Case-insensitive parsing upper-cases headers and query symbols."""
    text = _build_matrix_text(
        "a c *",
        ["a 1 0 -1", "c 0 1 -1", "* -1 -1 0"],
    )
    rule = parse_substitution_matrix(text.splitlines(), case_sensitive=False)

    assert rule.columns == "AC*"
    assert rule.rows == "AC*"
    assert rule.substitution("a", "A") == 1
    assert rule.removal("c") == -1


def test_matrix_rule_format_table_parses_back():
    """format_table() output parses to a rule with the same content."""
    rule = MatrixScoringRule.from_text(DNA_MATRIX)
    reparsed = MatrixScoringRule.from_text(rule.format_table())

    assert reparsed.rows == rule.rows
    assert reparsed.columns == rule.columns
    assert reparsed.table == rule.table


def test_matrix_comments_and_blank_lines_are_skipped():
    """Comment lines, trailing comments and blank lines are ignored."""
    text = "\n\n# leading comment\n\n A * # header\n# between rows\nA 1 -2\n\n* -2 0\n"
    rule = MatrixScoringRule.from_text(text)

    assert rule.substitution("A", "A") == 1
    assert rule.insertion("A") == -2


def test_matrix_rows_may_be_ordered_differently_from_columns():
    """Rows are matched to columns by symbol, not by position."""
    text = _build_matrix_text("A B *", ["* -1 -2 0", "B 3 4 -5", "A 5 6 -7"])
    rule = MatrixScoringRule.from_text(text)

    assert rule.substitution("B", "A") == 3
    assert rule.substitution("A", "B") == 6
    assert rule.removal("A") == -7
    assert rule.insertion("B") == -2


@pytest.mark.parametrize(
    "text",
    [
        # no indel column
        "A C G T\nA 1 0 0 0\nC 0 1 0 0\nG 0 0 1 0\nT 0 0 0 1\n",
        # only the indel column
        "*\n* 0\n",
        # empty input
        "",
        # duplicate column header
        "A A *\nA 1 1 -1\nA 1 1 -1\n* -1 -1 0\n",
        # multi-character header token
        "AC *\nA 1 -1\n* -1 0\n",
        # numeric header token
        "1 *\n1 1 -1\n* -1 0\n",
        # too few rows
        "A C *\nA 1 0 -1\n* -1 -1 0\n",
        # too many rows
        "A *\nA 1 -1\n* -1 0\nB 0 0\n",
        # no indel row
        "A C *\nA 1 0 -1\nC 0 1 -1\nG 0 0 0\n",
        # duplicate row header
        "A C *\nA 1 0 -1\nA 0 1 -1\n* -1 -1 0\n",
        # row symbol without a column
        "A C *\nA 1 0 -1\nG 0 1 -1\n* -1 -1 0\n",
        # non-numeric cell
        "A *\nA x -1\n* -1 0\n",
        # fractional cell
        "A *\nA 1.5 -1\n* -1 0\n",
        # short row
        "A C *\nA 1 0\nC 0 1 -1\n* -1 -1 0\n",
        # long row
        "A *\nA 1 -1 7\n* -1 0\n",
    ],
)
def test_invalid_matrices_are_rejected(text):
    """Any structural violation raises InvalidMatrixError."""
    with pytest.raises(InvalidMatrixError):
        MatrixScoringRule.from_text(text)


def test_matrix_without_indel_marker_message():
    """A header of A C G T fails on the missing indel column first."""
    text = "A C G T\nA 1 -1 -1 -1\nC -1 1 -1 -1\nG -1 -1 1 -1\nT -1 -1 -1 1\n"

    with pytest.raises(InvalidMatrixError, match="removal/insertion penalty column"):
        MatrixScoringRule.from_text(text)


def test_matrix_from_file(tmp_path):
    """from_file reads the same format from disk."""
    path = tmp_path / "toy.txt"
    path.write_text(DNA_MATRIX, encoding="utf-8")

    rule = MatrixScoringRule.from_file(path)

    assert rule.columns == "ACGT*"
    assert rule.substitution("G", "A") == 1
