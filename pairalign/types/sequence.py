"""Sequence types."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO, Tuple, Union

from pairalign.exceptions import InvalidSequenceError

COMMENT_CHAR = ">"

SequenceSource = Union["CharacterSequence", str, Path, TextIO]


@dataclass(frozen=True)
class CharacterSequence:
    """Immutable symbol sequence addressed with 1-based positions."""

    identifier: str
    residues: Tuple[str, ...]
    description: Optional[str] = None

    def __post_init__(self) -> None:
        # Freeze residues so a loaded sequence can never change under an aligner
        object.__setattr__(self, "residues", tuple(self.residues))
        self._validate()

    def __len__(self) -> int:
        return len(self.residues)

    def __str__(self) -> str:
        return "".join(self.residues)

    def at(self, position: int) -> str:
        """Return the residue at ``position``, counting from 1."""
        if position < 1 or position > len(self.residues):
            raise IndexError(
                f"position {position} outside 1..{len(self.residues)}"
            )
        return self.residues[position - 1]

    @classmethod
    def from_text(
        cls,
        text: str,
        identifier: str = "",
        description: Optional[str] = None,
    ) -> "CharacterSequence":
        """Parse sequence text.

        A ``>`` starts a comment running to the end of its line. Letters are
        kept in order and whitespace is skipped; anything else is rejected.
        """
        residues = []
        for line in text.splitlines():
            comment_at = line.find(COMMENT_CHAR)
            if comment_at != -1:
                line = line[:comment_at]
            for char in line:
                if char.isalpha():
                    residues.append(char)
                elif not char.isspace():
                    raise InvalidSequenceError(
                        f"Invalid character {char!r} in sequence; only letters "
                        "and whitespace are allowed."
                    )
        return cls(identifier=identifier, residues=tuple(residues), description=description)

    def _validate(self) -> None:
        if not self.residues:
            raise InvalidSequenceError("The sequence is empty.")
        invalid = sorted({r for r in self.residues if len(r) != 1 or not r.isalpha()})
        if invalid:
            raise InvalidSequenceError(f"Invalid residues: {invalid}")


def read_sequence(source: SequenceSource, identifier: str = "") -> CharacterSequence:
    """Build a CharacterSequence from text, a file path or an open text stream."""
    if isinstance(source, CharacterSequence):
        return source
    if isinstance(source, Path):
        with source.open("r", encoding="utf-8") as handle:
            return CharacterSequence.from_text(
                handle.read(), identifier=identifier or source.stem
            )
    if isinstance(source, str):
        return CharacterSequence.from_text(source, identifier=identifier)
    if hasattr(source, "read"):
        return CharacterSequence.from_text(source.read(), identifier=identifier)
    raise TypeError(f"Cannot read a sequence from {type(source).__name__}")


__all__ = ["CharacterSequence", "read_sequence", "COMMENT_CHAR"]
