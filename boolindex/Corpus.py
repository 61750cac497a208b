# boolindex/Corpus.py
"""
Corpus: the global vocabulary plus the list of documents it was built from.

Documents are ingested one at a time, in order. Each document is fully
tokenized before the lexicon is touched, so a document that fails to
read leaves no trace.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from boolindex.DocumentManager import DocumentManager
from boolindex.Errors import IndexStateError
from boolindex.Lexicon import Lexicon
from boolindex.Tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class Corpus:
    def __init__(self, tokenizer: Optional[Tokenizer] = None, manager: Optional[DocumentManager] = None):
        self.tokenizer = tokenizer or Tokenizer()
        self.manager = manager or DocumentManager()
        self.lexicon = Lexicon()
        self._documents: List[object] = []
        self._seen = set()

    def ingest(self, handle, lines: Iterable[str]) -> int:
        """
        Add every term of one document to the vocabulary.
        Returns the number of term occurrences in the document.
        """
        if self.lexicon.frozen:
            raise IndexStateError("Corpus is frozen; documents can no longer be added")

        # every line is read before the lexicon changes
        terms = list(self.tokenizer.token_stream(lines))

        for term in terms:
            self.lexicon.add(term)

        if handle not in self._seen:
            self._seen.add(handle)
            self._documents.append(handle)

        logger.debug("Ingested %r: %d terms", handle, len(terms))
        return len(terms)

    def ingest_document(self, handle) -> int:
        """
        Read a document through the document source and ingest it.
        DocumentReadError propagates to the caller.
        """
        return self.ingest(handle, self.manager.read_document(handle))

    def ingest_all(self, handles: Iterable) -> int:
        total = 0
        for handle in handles:
            total += self.ingest_document(handle)
        logger.info(
            "Corpus holds %d documents, %d unique terms, %d terms in total",
            len(self._documents), len(self.lexicon), self.lexicon.total_terms,
        )
        return total

    def freeze(self) -> Tuple[str, ...]:
        return self.lexicon.freeze()

    @property
    def documents(self) -> Tuple[object, ...]:
        return tuple(self._documents)

    @property
    def total_terms(self) -> int:
        return self.lexicon.total_terms

    def vocabulary(self) -> Tuple[str, ...]:
        return self.lexicon.terms()
