#!/usr/bin/env python3
"""Align two sequences and print the alignment or just its score."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from pairalign.algorithms import (  # pylint: disable=C0413
    NeedlemanWunschAligner,
    PairwiseAligner,
    SmithWatermanAligner,
)
from pairalign.exceptions import PairAlignError  # pylint: disable=C0413
from pairalign.scoring import (  # pylint: disable=C0413
    FixedScoringRule,
    MatrixScoringRule,
    ScoringRule,
)
from pairalign.types import AlignmentResult  # pylint: disable=C0413
from pairalign.utils import (  # pylint: disable=C0413
    available_matrices,
    load_bundled_matrix,
    load_scoring_rule,
)
from scripts.constants import (  # pylint: disable=C0413
    ALIGNMENT_MODES,
    DEFAULT_GAP_COST,
    DEFAULT_MATCH_REWARD,
    DEFAULT_MISMATCH_PENALTY,
    DEFAULT_MODE,
    LINE_WIDTH,
)

logger = logging.getLogger(__name__)

ALIGNERS = {
    "global": NeedlemanWunschAligner,
    "local": SmithWatermanAligner,
}


def add_scoring_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the options selecting a scoring rule."""
    group = parser.add_argument_group("scoring")
    group.add_argument("--match", type=int, default=DEFAULT_MATCH_REWARD)
    group.add_argument("--mismatch", type=int, default=DEFAULT_MISMATCH_PENALTY)
    group.add_argument("--gap", type=int, default=DEFAULT_GAP_COST)
    group.add_argument(
        "--matrix",
        type=str,
        default=None,
        help=(
            f"Substitution matrix file, or a bundled one: {available_matrices()}. "
            "Bundled matrices ignore case."
        ),
    )
    group.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file describing the scoring rule.",
    )
    group.add_argument(
        "--case-insensitive",
        action="store_true",
        help="Compare symbols without regard to case.",
    )


def scoring_rule_from_args(args: argparse.Namespace) -> ScoringRule:
    """Build the scoring rule selected on the command line."""
    case_sensitive = not args.case_insensitive
    if args.config is not None:
        return load_scoring_rule(args.config)
    if args.matrix is not None:
        matrix_path = Path(args.matrix)
        if matrix_path.is_file():
            return MatrixScoringRule.from_file(matrix_path, case_sensitive)
        return load_bundled_matrix(args.matrix)
    return FixedScoringRule(args.match, args.mismatch, args.gap, case_sensitive)


def format_alignment(result: AlignmentResult, width: int = LINE_WIDTH) -> str:
    """Return the alignment wrapped in blocks of ``width`` columns."""
    lines = []
    for start in range(0, result.length, width):
        stop = start + width
        lines.append(result.first_with_gaps[start:stop])
        lines.append(result.descriptor[start:stop])
        lines.append(result.second_with_gaps[start:stop])
        lines.append("")
    lines.append(f"Length: {result.length}")
    lines.append(f"Identities: {result.identities}/{result.length}")
    lines.append(f"Gaps: {result.gaps}")
    lines.append(f"Score: {result.score}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute an optimal pairwise alignment of two sequences."
    )
    parser.add_argument("first", type=str, help="First sequence file.")
    parser.add_argument("second", type=str, help="Second sequence file.")
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Treat FIRST and SECOND as sequence text instead of file names.",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=ALIGNMENT_MODES,
        default=DEFAULT_MODE,
        help="Global (Needleman-Wunsch) or local (Smith-Waterman) alignment.",
    )
    parser.add_argument(
        "--score-only",
        action="store_true",
        help="Print only the score, computed in linear space.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    add_scoring_arguments(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        aligner: PairwiseAligner = ALIGNERS[args.mode](scoring_rule_from_args(args))
        if args.raw:
            aligner.load_sequences(args.first, args.second)
        else:
            aligner.load_sequences(Path(args.first), Path(args.second))

        if args.score_only:
            print(aligner.get_score())
        else:
            print(format_alignment(aligner.get_alignment()))
    except (PairAlignError, ValueError, OSError) as error:
        logger.debug("Alignment failed", exc_info=True)
        print(f"error: {error}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
