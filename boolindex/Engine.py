# boolindex/Engine.py
"""
SearchEngine: the query surface.

Wires the document source, the corpus and both index builders together
and enforces the build order: ingest documents, build, then query.
"""

import logging
import os
from typing import Any, Dict, Iterable, Optional, Set

from boolindex import Storage
from boolindex.Config import Config
from boolindex.Corpus import Corpus
from boolindex.DocumentManager import DocumentManager
from boolindex.Errors import IndexStateError
from boolindex.Indexer import InvertedIndex, build_inverted_index
from boolindex.Matrix import TermDocumentMatrix, build_term_document_matrix
from boolindex.Query import QueryProcessor
from boolindex.Tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class SearchEngine:
    def __init__(self, config: Optional[Config] = None, manager: Optional[DocumentManager] = None,
                 tokenizer: Optional[Tokenizer] = None):
        self.config = config or Config()
        self.tokenizer = tokenizer or Tokenizer()
        self.manager = manager or DocumentManager(encoding=self.config.encoding)
        self.corpus = Corpus(self.tokenizer, self.manager)

        self.index: Optional[InvertedIndex] = None
        self.matrix: Optional[TermDocumentMatrix] = None
        self._index_query: Optional[QueryProcessor] = None
        self._matrix_query: Optional[QueryProcessor] = None

    def add_documents(self, handles: Iterable) -> int:
        """
        Ingest documents into the vocabulary, in order. Returns the number of terms read.
        """
        if self.built:
            raise IndexStateError("Index already built; create a new engine to add documents")
        return self.corpus.ingest_all(handles)

    def build(self) -> None:
        """
        Freeze the vocabulary and build both representations from the ingested documents.
        """
        if self.built:
            raise IndexStateError("Index already built")

        self.corpus.freeze()
        documents = self.corpus.documents

        self.index = build_inverted_index(documents, self.manager, self.tokenizer)
        self.matrix = build_term_document_matrix(
            documents, self.corpus.lexicon, self.manager, self.tokenizer, dtype=self.config.matrix_dtype
        )
        self._index_query = QueryProcessor(self.index)
        self._matrix_query = QueryProcessor(self.matrix)

    def build_from(self, path) -> None:
        self.add_documents(self.manager.discover(path))
        self.build()

    @property
    def built(self) -> bool:
        return self.index is not None and self.matrix is not None

    def evaluate(self, query: str, using_matrix: bool = False) -> Set:
        if not self.built:
            raise IndexStateError("Build the index before querying")
        processor = self._matrix_query if using_matrix else self._index_query
        return processor.evaluate(query)

    def save(self, directory: Optional[str] = None) -> str:
        if not self.built:
            raise IndexStateError("Nothing to save before build()")

        outdir = directory or self.config.index_dir
        save_text = self.config.save_text
        Storage.save_vocabulary(self.corpus.vocabulary(), self.corpus.total_terms, outdir, save_text)
        Storage.save_inverted_index(self.index, outdir, save_text)
        Storage.save_matrix(self.matrix, outdir, save_text)
        self.config.to_json(os.path.join(outdir, "config_used.json"))
        logger.info("Saved index files to %s", outdir)
        return outdir

    def stats(self) -> Dict[str, Any]:
        return {
            "documents": len(self.corpus.documents),
            "vocabulary": len(self.corpus.lexicon),
            "total_terms": self.corpus.total_terms,
        }
