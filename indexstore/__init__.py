"""In-memory inverted index store package."""

from .posting import Posting, InvertedIndex
from .store import IndexStorage, IndexStore, FIRST_DOCUMENT_ID
from .errors import IndexStoreError, InvalidArgumentError, DocumentNotFoundError
