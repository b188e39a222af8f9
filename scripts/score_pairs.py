#!/usr/bin/env python3
"""Score every pair of records in a FASTA file and write the scores to CSV.

All aligners share one scoring rule and run on a thread pool; each score is
computed in linear space.
"""

from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from itertools import combinations
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from pairalign.exceptions import PairAlignError  # pylint: disable=C0413
from pairalign.scoring import ScoringRule  # pylint: disable=C0413
from pairalign.types import CharacterSequence  # pylint: disable=C0413
from pairalign.utils import read_fasta  # pylint: disable=C0413
from scripts.align_pair import (  # pylint: disable=C0413
    ALIGNERS,
    add_scoring_arguments,
    scoring_rule_from_args,
)
from scripts.constants import (  # pylint: disable=C0413
    ALIGNMENT_MODES,
    DEFAULT_MODE,
    DEFAULT_WORKERS,
    SCORES_CSV,
)

logger = logging.getLogger(__name__)

ScoreRow = Tuple[str, str, int]


def score_pair(
    mode: str, rule: ScoringRule, first: CharacterSequence, second: CharacterSequence
) -> ScoreRow:
    """Score one pair with its own aligner instance."""
    aligner = ALIGNERS[mode](rule)
    aligner.load_sequences(first, second)
    return first.identifier, second.identifier, aligner.get_score()


def score_all_pairs(
    sequences: List[CharacterSequence],
    rule: ScoringRule,
    mode: str = DEFAULT_MODE,
    workers: int = DEFAULT_WORKERS,
) -> List[ScoreRow]:
    """Score all unordered pairs of ``sequences``, in input order."""
    pairs = list(combinations(sequences, 2))
    logger.info("Scoring %d pairs with %d workers", len(pairs), workers)
    with ThreadPoolExecutor(workers, thread_name_prefix="score-pairs") as pool:
        futures = [pool.submit(score_pair, mode, rule, a, b) for a, b in pairs]
        return [future.result() for future in futures]


def write_scores(rows: List[ScoreRow], output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    scores_df = pd.DataFrame(rows, columns=["first", "second", "score"])
    scores_df.to_csv(output, index=False)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Score all pairs of sequences in a FASTA file."
    )
    parser.add_argument("fasta", type=Path, help="FASTA file with two or more records.")
    parser.add_argument(
        "-m", "--mode", choices=ALIGNMENT_MODES, default=DEFAULT_MODE
    )
    parser.add_argument("-o", "--output", type=Path, default=SCORES_CSV)
    parser.add_argument("-w", "--workers", type=int, default=DEFAULT_WORKERS)
    parser.add_argument("-v", "--verbose", action="store_true")
    add_scoring_arguments(parser)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        rule = scoring_rule_from_args(args)
        sequences = read_fasta(args.fasta)
        if len(sequences) < 2:
            raise ValueError(f"{args.fasta} must hold at least two sequences.")
        rows = score_all_pairs(sequences, rule, args.mode, args.workers)
        write_scores(rows, args.output)
    except (PairAlignError, ValueError, OSError) as error:
        logger.debug("Scoring failed", exc_info=True)
        print(f"error: {error}", file=sys.stderr)
        return 1

    logger.info("Wrote %d scores to %s", len(rows), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
