# boolindex/Indexer.py
"""
Indexer module for building an inverted index.

Maps every term to the set of documents it occurs in at least once.
Presence only: no positions and no frequencies.
"""

import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Set, Tuple

from boolindex.DocumentManager import DocumentManager
from boolindex.Tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class InvertedIndex:
    """
    Read-only term -> documents mapping, produced by build_inverted_index().
    """
    def __init__(self, postings: Mapping[str, Iterable], documents: Iterable):
        self._postings: Dict[str, FrozenSet] = {t: frozenset(docs) for t, docs in postings.items()}
        self.postings = MappingProxyType(self._postings)
        self._documents: Tuple = tuple(documents)
        self._universe: FrozenSet = frozenset(self._documents)

    # --- Getters --- #

    def lookup(self, term: str) -> FrozenSet:
        """
        Documents containing `term`. Unknown terms give the empty set.
        """
        return self._postings.get(term, frozenset())

    def universe(self) -> FrozenSet:
        return self._universe

    @property
    def documents(self) -> Tuple:
        return self._documents

    def vocab(self) -> List[str]:
        return sorted(self._postings.keys())

    def df(self, term: str) -> int:
        return len(self.lookup(term))

    def as_dict(self) -> Dict[str, List]:
        """
        Plain snapshot for persistence, documents sorted by their string form.
        """
        return {t: sorted(docs, key=str) for t, docs in self._postings.items()}

    def __contains__(self, term) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)


def build_inverted_index(documents: Iterable, manager: Optional[DocumentManager] = None,
                         tokenizer: Optional[Tokenizer] = None) -> InvertedIndex:
    """
    Read every document through `manager` and record which documents each term occurs in.
    A document that fails to read raises DocumentReadError before any of its terms are recorded.
    """
    manager = manager or DocumentManager()
    tokenizer = tokenizer or Tokenizer()
    documents = tuple(documents)

    postings: Dict[str, Set] = defaultdict(set)
    for handle in documents:
        terms = list(tokenizer.token_stream(manager.read_document(handle)))
        # sets take care of repeated terms
        for term in terms:
            postings[term].add(handle)

    index = InvertedIndex(postings, documents)
    logger.info("Built inverted index: %d terms over %d documents", len(index), len(documents))
    return index
