"""Alignment types."""

from dataclasses import dataclass

MATCH_CHAR = ":"
APPROXIMATE_MATCH_CHAR = "."
MISMATCH_CHAR = " "
GAP_CHAR = " "
GAP_SYMBOL = "-"


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a pairwise alignment algorithm.

    Attributes:
        first_with_gaps: First sequence padded with gap symbols
        descriptor: One marker per column (match, approximate match, mismatch or gap)
        second_with_gaps: Second sequence padded with gap symbols
        score: The alignment score under the scoring rule that produced it
    """

    first_with_gaps: str
    descriptor: str
    second_with_gaps: str
    score: int

    def __post_init__(self) -> None:
        if not (
            len(self.first_with_gaps) == len(self.descriptor) == len(self.second_with_gaps)
        ):
            raise ValueError(
                "first_with_gaps, descriptor and second_with_gaps must have the same length."
            )

    @property
    def length(self) -> int:
        """Number of alignment columns."""
        return len(self.descriptor)

    @property
    def identities(self) -> int:
        """Number of columns marked as exact matches."""
        return self.descriptor.count(MATCH_CHAR)

    @property
    def gaps(self) -> int:
        """Number of gap symbols across both padded sequences."""
        return self.first_with_gaps.count(GAP_SYMBOL) + self.second_with_gaps.count(
            GAP_SYMBOL
        )

    def __str__(self) -> str:
        return (
            f"{self.first_with_gaps}\n"
            f"{self.descriptor}\n"
            f"{self.second_with_gaps}\n"
            f"Computed Score: {self.score}"
        )


__all__ = [
    "AlignmentResult",
    "MATCH_CHAR",
    "APPROXIMATE_MATCH_CHAR",
    "MISMATCH_CHAR",
    "GAP_CHAR",
    "GAP_SYMBOL",
]
