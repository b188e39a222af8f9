"""Constants for the command line scripts."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Data directories
# ============================================================================
RESULTS_FOLDER = PROJECT_ROOT / "results"
SCORES_CSV = RESULTS_FOLDER / "scores.csv"

# ============================================================================
# Default scoring (FixedScoringRule)
# ============================================================================
DEFAULT_MATCH_REWARD = 1
DEFAULT_MISMATCH_PENALTY = -1
DEFAULT_GAP_COST = -1

# ============================================================================
# Algorithm selection
# ============================================================================
ALIGNMENT_MODES = ("global", "local")
DEFAULT_MODE = "global"
DEFAULT_WORKERS = 4

# ============================================================================
# Output
# ============================================================================
LINE_WIDTH = 60
