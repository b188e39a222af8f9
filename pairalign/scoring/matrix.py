"""Substitution-matrix scoring rule and the parser for its text format.

The text format is a header line of single-letter column symbols followed by
one line per row symbol, each holding as many integers as there are columns::

    # comment lines start with '#'
       A   C   G   T   *
    A  1  -1  -1  -1  -2
    C -1   1  -1  -1  -2
    G -1  -1   1  -1  -2
    T -1  -1  -1   1  -2
    * -2  -2  -2  -2   0

The ``*`` row and column hold the insertion and removal scores.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from pairalign.exceptions import InvalidMatrixError, InvalidScoringRuleError
from pairalign.scoring.base import ScoringRule

logger = logging.getLogger(__name__)

INDEL_MARKER = "*"
COMMENT_CHAR = "#"


def _check_columns(columns: str) -> None:
    if INDEL_MARKER not in columns:
        raise InvalidMatrixError(
            "Substitution matrix does not have a removal/insertion penalty column "
            f"('{INDEL_MARKER}')."
        )
    if len(columns) < 2:
        raise InvalidMatrixError(
            "Substitution matrix must have at least one column with a real symbol."
        )
    duplicates = sorted({c for c in columns if columns.count(c) > 1})
    if duplicates:
        raise InvalidMatrixError(f"Duplicate column headers: {duplicates}")


def _check_rows(rows: str, columns: str) -> None:
    if len(rows) != len(columns):
        raise InvalidMatrixError(
            f"Substitution matrix has {len(rows)} rows but {len(columns)} columns; "
            "it must be square."
        )
    if INDEL_MARKER not in rows:
        raise InvalidMatrixError(
            f"Substitution matrix does not have an insertion penalty row ('{INDEL_MARKER}')."
        )
    duplicates = sorted({r for r in rows if rows.count(r) > 1})
    if duplicates:
        raise InvalidMatrixError(f"Duplicate row headers: {duplicates}")
    unmatched = [r for r in rows if r not in columns]
    if unmatched:
        raise InvalidMatrixError(
            f"No matching column for row symbol(s): {unmatched}"
        )


class MatrixScoringRule(ScoringRule):
    """Scoring rule backed by a square substitution table.

    Insertions are looked up in the indel row and removals in the indel
    column. Table entries grade similarity, so partial matches are possible.
    """

    def __init__(
        self,
        rows: str,
        columns: str,
        table: Sequence[Sequence[int]],
        case_sensitive: bool = True,
    ) -> None:
        super().__init__(case_sensitive)
        if not case_sensitive:
            rows = rows.upper()
            columns = columns.upper()
        _check_columns(columns)
        _check_rows(rows, columns)
        if len(table) != len(rows) or any(len(values) != len(columns) for values in table):
            raise InvalidMatrixError(
                f"Substitution table must be {len(rows)} x {len(columns)}."
            )

        self._rows = rows
        self._columns = columns
        self._table: Dict[str, Dict[str, int]] = {
            row: {column: int(value) for column, value in zip(columns, values)}
            for row, values in zip(rows, table)
        }
        self._maximum = max(
            abs(value) for values in self._table.values() for value in values.values()
        )

    @classmethod
    def from_text(cls, text: str, case_sensitive: bool = True) -> "MatrixScoringRule":
        """Parse a substitution matrix from its text form."""
        return parse_substitution_matrix(text.splitlines(), case_sensitive)

    @classmethod
    def from_file(cls, path: Path, case_sensitive: bool = True) -> "MatrixScoringRule":
        """Parse a substitution matrix stored in a text file."""
        with Path(path).open("r", encoding="utf-8") as handle:
            return parse_substitution_matrix(handle, case_sensitive)

    @property
    def rows(self) -> str:
        """Row symbols, in file order."""
        return self._rows

    @property
    def columns(self) -> str:
        """Column symbols, in file order."""
        return self._columns

    @property
    def table(self) -> List[List[int]]:
        """Copy of the table as a list of rows."""
        return [[self._table[r][c] for c in self._columns] for r in self._rows]

    def substitution(self, a: str, b: str) -> int:
        if not self.case_sensitive:
            a = a.upper()
            b = b.upper()
        try:
            return self._table[a][b]
        except KeyError:
            raise InvalidScoringRuleError(
                f"Substitution of {a!r} by {b!r} is not covered by the substitution matrix."
            ) from None

    def insertion(self, a: str) -> int:
        return self.substitution(INDEL_MARKER, a)

    def removal(self, a: str) -> int:
        return self.substitution(a, INDEL_MARKER)

    def maximum(self) -> int:
        return self._maximum

    def supports_partial_match(self) -> bool:
        return True

    def format_table(self) -> str:
        """Render the table in the text format accepted by ``from_text``."""
        lines = ["\t" + "\t".join(self._columns)]
        for row in self._rows:
            values = "\t".join(str(self._table[row][c]) for c in self._columns)
            lines.append(f"{row}\t{values}")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(columns={self._columns!r}, "
            f"case_sensitive={self.case_sensitive})"
        )


def _tokens(line: str) -> List[str]:
    """Split a line into tokens, dropping everything after the comment marker."""
    comment_at = line.find(COMMENT_CHAR)
    if comment_at != -1:
        line = line[:comment_at]
    return line.split()


def _parse_symbol(token: str, context: str) -> str:
    if len(token) > 1:
        raise InvalidMatrixError(
            f"{context} must have only one character, got {token!r}."
        )
    if not (token.isalpha() or token == INDEL_MARKER):
        raise InvalidMatrixError(
            f"{context} must be a letter or the special character '{INDEL_MARKER}', "
            f"got {token!r}."
        )
    return token


def parse_substitution_matrix(
    lines: Iterable[str], case_sensitive: bool = True
) -> MatrixScoringRule:
    """Build a MatrixScoringRule from the lines of a substitution matrix.

    Parsing is all-or-nothing: any structural problem raises
    ``InvalidMatrixError`` and no rule is returned.
    """
    token_lines = (tokens for tokens in map(_tokens, lines) if tokens)

    header = next(token_lines, [])
    columns = "".join(_parse_symbol(token, "Column header") for token in header)
    if not case_sensitive:
        columns = columns.upper()
    _check_columns(columns)
    size = len(columns)

    row_symbols: List[str] = []
    table: List[List[int]] = []
    for tokens in token_lines:
        line_no = len(row_symbols) + 1
        if line_no > size:
            raise InvalidMatrixError(
                f"Substitution matrix has more than {size} rows; "
                "it needs the same number of rows and columns."
            )
        row_symbols.append(_parse_symbol(tokens[0], f"Header of row {line_no}"))
        values = tokens[1:]
        if len(values) != size:
            raise InvalidMatrixError(
                f"Row {line_no} has {len(values)} values; expected {size}."
            )
        row: List[int] = []
        for column_no, value in enumerate(values, start=1):
            try:
                row.append(int(value))
            except ValueError:
                raise InvalidMatrixError(
                    f"Invalid value {value!r} at row {line_no}, column {column_no}."
                ) from None
        table.append(row)

    rows = "".join(row_symbols)
    if not case_sensitive:
        rows = rows.upper()
    _check_rows(rows, columns)

    logger.debug("Parsed %dx%d substitution matrix: %s", size, size, columns)
    return MatrixScoringRule(rows, columns, table, case_sensitive=case_sensitive)


__all__ = [
    "MatrixScoringRule",
    "parse_substitution_matrix",
    "INDEL_MARKER",
    "COMMENT_CHAR",
]
