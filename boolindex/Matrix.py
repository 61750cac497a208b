# boolindex/Matrix.py
"""
Dense term-document matrix.

Rows are terms, columns are documents, and each cell holds how often the
term occurs in the document. The row numbers come from a marisa trie
built once from the frozen vocabulary; the columns follow the document
order handed to the builder.
"""

import logging
from collections import Counter
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

import marisa_trie
import numpy as np

from boolindex.DocumentManager import DocumentManager
from boolindex.Errors import IndexStateError
from boolindex.Lexicon import Lexicon
from boolindex.Tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class TermDocumentMatrix:
    """
    Counts plus the row and column mappings that make them interpretable.
    Immutable once built.
    """
    def __init__(self, counts: np.ndarray, rows: marisa_trie.Trie, documents: Iterable):
        self.documents: Tuple = tuple(documents)
        if counts.shape != (len(rows), len(self.documents)):
            raise ValueError(
                f"Matrix shape {counts.shape} does not match "
                f"{len(rows)} terms x {len(self.documents)} documents"
            )

        self.counts = counts
        self.counts.setflags(write=False)
        self.rows = rows
        self.column_of: Dict[object, int] = {doc: i for i, doc in enumerate(self.documents)}
        self._universe: FrozenSet = frozenset(self.documents)

    # --- Getters --- #

    def row(self, term: str) -> Optional[int]:
        return self.rows.get(term)

    def column(self, handle) -> Optional[int]:
        return self.column_of.get(handle)

    def terms(self) -> List[str]:
        """
        Terms in row order.
        """
        return [self.rows.restore_key(i) for i in range(len(self.rows))]

    def count(self, term: str, handle) -> int:
        r = self.row(term)
        c = self.column(handle)
        if r is None or c is None:
            return 0
        return int(self.counts[r, c])

    def lookup(self, term: str) -> FrozenSet:
        """
        Scan the term's row for positive counts and map the columns back to documents.
        """
        r = self.row(term)
        if r is None:
            return frozenset()
        return frozenset(self.documents[c] for c in np.flatnonzero(self.counts[r]))

    def universe(self) -> FrozenSet:
        return self._universe

    @property
    def shape(self) -> Tuple[int, int]:
        return self.counts.shape


def build_row_trie(terms: Iterable[str]) -> marisa_trie.Trie:
    """
    Fix a row number for every term. The trie is the only source of row numbers from here on.
    """
    return marisa_trie.Trie(list(terms))


def build_term_document_matrix(documents: Iterable, lexicon: Lexicon,
                               manager: Optional[DocumentManager] = None,
                               tokenizer: Optional[Tokenizer] = None,
                               dtype: str = "uint32") -> TermDocumentMatrix:
    """
    Count every vocabulary term in every document.

    The lexicon must be frozen: the row order is taken from it exactly once.
    Terms that are not in the lexicon are skipped.
    """
    if not lexicon.frozen:
        raise IndexStateError("Freeze the vocabulary before building the term-document matrix")

    manager = manager or DocumentManager()
    tokenizer = tokenizer or Tokenizer()
    documents = tuple(documents)
    if len(set(documents)) != len(documents):
        raise ValueError("Document list contains duplicates; every column needs its own document")

    rows = build_row_trie(lexicon.terms())
    counts = np.zeros((len(rows), len(documents)), dtype=np.dtype(dtype))

    for col, handle in enumerate(documents):
        tf = Counter(tokenizer.token_stream(manager.read_document(handle)))
        for term, freq in tf.items():
            r = rows.get(term)
            if r is None:
                logger.debug("Skipping %r in %r: not in the vocabulary", term, handle)
                continue
            counts[r, col] += freq

    matrix = TermDocumentMatrix(counts, rows, documents)
    logger.info("Built term-document matrix: %d terms x %d documents", *matrix.shape)
    return matrix
