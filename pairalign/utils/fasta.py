"""Functions for working with FASTA files."""

from typing import List, Optional

import skbio
import skbio.io

from pairalign.types import CharacterSequence


def character_sequence_from_skbio(record: skbio.Sequence) -> CharacterSequence:
    """Convert a scikit-bio record to a CharacterSequence."""
    metadata = getattr(record, "metadata", {}) or {}
    identifier = metadata.get("id") or ""
    description = metadata.get("description") or None

    return CharacterSequence.from_text(
        str(record), identifier=identifier, description=description
    )


def read_fasta(file_path: str, ids: Optional[List[str]] = None) -> List[CharacterSequence]:
    """Read a FASTA file and return one CharacterSequence per record.

    Records whose residues are not plain letters raise InvalidSequenceError.
    """
    sequences: List[CharacterSequence] = []
    for record in skbio.io.read(str(file_path), format="fasta", constructor=skbio.Sequence):
        if ids and record.metadata["id"] not in ids:
            continue
        sequences.append(character_sequence_from_skbio(record))
    return sequences


__all__ = ["read_fasta", "character_sequence_from_skbio"]
