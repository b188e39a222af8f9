"""Substitution matrices shipped with the package."""

from pathlib import Path
from typing import List

from pairalign.scoring.matrix import MatrixScoringRule

DATA_FOLDER = Path(__file__).resolve().parent.parent / "data"


def available_matrices() -> List[str]:
    """Names of the bundled substitution matrices."""
    return sorted(path.stem for path in DATA_FOLDER.glob("*.txt"))


def bundled_matrix_path(name: str) -> Path:
    """Path of the bundled matrix called ``name`` (case-insensitive)."""
    path = DATA_FOLDER / f"{name.lower()}.txt"
    if not path.is_file():
        raise ValueError(
            f"Unknown substitution matrix {name!r}; available: {available_matrices()}"
        )
    return path


def load_bundled_matrix(name: str, case_sensitive: bool = False) -> MatrixScoringRule:
    """Load a bundled matrix. Bundled tables use upper case symbols only."""
    return MatrixScoringRule.from_file(bundled_matrix_path(name), case_sensitive)


__all__ = ["available_matrices", "bundled_matrix_path", "load_bundled_matrix"]
