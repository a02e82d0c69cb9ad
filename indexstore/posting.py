"""
Postings and the term -> postings table behind the store.

A posting is immutable once appended; the table only ever grows.
"""

from dataclasses import asdict, dataclass
from typing import Mapping


@dataclass(frozen=True)
class Posting:
    """
    One entry of a term's postings list.
    - doc_id: document identifier minted by the store
    - tf: how many times the term occurs in that document
    """

    doc_id: int
    tf: int


class InvertedIndex:
    """Term -> postings in append order. Nothing is merged or removed."""

    def __init__(self) -> None:
        self._postings: dict[str, list[Posting]] = {}

    def extend(self, doc_id: int, term_frequencies: Mapping[str, int]) -> None:
        for term, tf in term_frequencies.items():
            self._postings.setdefault(term, []).append(Posting(doc_id, tf))

    def postings(self, term: str) -> list[Posting]:
        """Fresh list of the term's postings; [] for an unseen term."""
        return list(self._postings.get(term, ()))

    def __len__(self) -> int:
        return len(self._postings)

    def to_dict(self) -> dict:
        """{term: [{"doc_id": ..., "tf": ...}, ...]}, ready for json.dump."""
        return {
            term: [asdict(p) for p in postings]
            for term, postings in self._postings.items()
        }
