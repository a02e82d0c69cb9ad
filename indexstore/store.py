"""
Index store: document registry plus inverted index.

Document paths get sequential integer ids (0, 1, 2, ...). The id doubles as
the position of the path in an in-memory list, so resolving an id back to its
path does not scan the registry. Term frequencies come from the caller's
tokenizer and are appended to the inverted index as postings.
"""

import logging
from abc import ABC, abstractmethod
from typing import Mapping

from .errors import DocumentNotFoundError, InvalidArgumentError
from .posting import InvertedIndex, Posting

logger = logging.getLogger(__name__)

# Id handed out by the first registration of a fresh store
FIRST_DOCUMENT_ID = 0


class IndexStorage(ABC):
    """Contract for a document registry with an inverted index."""

    @abstractmethod
    def register_document(self, path: str) -> int:
        """Assign the next document id to path."""

    @abstractmethod
    def resolve_document(self, doc_id: int) -> str:
        """Return the path registered under doc_id."""

    @abstractmethod
    def update_postings(self, doc_id: int, term_frequencies: Mapping[str, int]) -> None:
        """Append postings for doc_id from a term -> frequency mapping."""

    @abstractmethod
    def lookup_term(self, term: str) -> list[Posting]:
        """Return the postings recorded for term."""


class IndexStore(IndexStorage):
    """
    In-memory IndexStorage owned by whoever constructs it.
    Append-only: paths and postings are never deduplicated or removed.
    """

    def __init__(self) -> None:
        # doc_id - FIRST_DOCUMENT_ID -> path
        self._paths: list[str] = []
        self._index = InvertedIndex()

    @property
    def num_documents(self) -> int:
        return len(self._paths)

    @property
    def num_terms(self) -> int:
        return len(self._index)

    def register_document(self, path: str) -> int:
        """
        Assign the next document id to path and return it.
        Re-registering a path mints a new id; the old one still resolves.
        """
        if not path:
            raise InvalidArgumentError("document path cannot be empty")

        doc_id = FIRST_DOCUMENT_ID + len(self._paths)
        self._paths.append(path)
        logger.debug("Registered document %s as %d", path, doc_id)
        return doc_id

    def resolve_document(self, doc_id: int) -> str:
        """Return the path registered under doc_id."""
        valid = isinstance(doc_id, int) and not isinstance(doc_id, bool)
        pos = doc_id - FIRST_DOCUMENT_ID if valid else -1
        if not 0 <= pos < len(self._paths):
            raise DocumentNotFoundError(f"document with id {doc_id!r} not found")
        return self._paths[pos]

    def update_postings(self, doc_id: int, term_frequencies: Mapping[str, int]) -> None:
        """
        Append a Posting(doc_id, freq) for every (term, freq) pair.
        doc_id is not checked against the registry, and calling twice with the
        same arguments appends the postings twice. An empty term rejects the
        whole mapping before anything is appended.
        """
        if term_frequencies is None:
            raise InvalidArgumentError("term frequencies cannot be None")
        if "" in term_frequencies:
            raise InvalidArgumentError("term cannot be empty")

        self._index.extend(doc_id, term_frequencies)
        logger.debug("Indexed %d terms for document %s", len(term_frequencies), doc_id)

    def lookup_term(self, term: str) -> list[Posting]:
        """Return a copy of the postings for term in append order, or []."""
        if not term:
            raise InvalidArgumentError("term cannot be empty")
        return self._index.postings(term)

    def to_dict(self) -> dict:
        """Snapshot of the registry (indexed by doc id) and the inverted index."""
        return {
            "documents": list(self._paths),
            "index": self._index.to_dict(),
        }
