# boolindex/Storage.py
"""
Persistence for finished structures.

Binary files are what load_* reads back; the .txt dumps are for people.
  vocabulary.marisa            frozen terms
  dictionary.txt               "<total> words in total", then one term per line
  documents.msgpack.zst        document order (matrix columns, index universe)
  inverted_index.msgpack.zst   (term, [documents]) records, sorted by term
  inverted_index.txt           "term: doc doc ..."
  matrix.npy                   counts
  matrix_rows.marisa           row trie
  term_document_matrix.txt     one row of counts per line

Document handles must be msgpack-serializable (strings or ints).
"""

import logging
import os
from typing import Iterable, Iterator, List, Tuple

import marisa_trie
import msgpack
import numpy as np
import zstandard as zstd

from boolindex.Indexer import InvertedIndex
from boolindex.Matrix import TermDocumentMatrix

logger = logging.getLogger(__name__)

VOCABULARY_FILE = "vocabulary.marisa"
DICTIONARY_TEXT_FILE = "dictionary.txt"
DOCUMENTS_FILE = "documents.msgpack.zst"
INDEX_FILE = "inverted_index.msgpack.zst"
INDEX_TEXT_FILE = "inverted_index.txt"
MATRIX_FILE = "matrix.npy"
MATRIX_ROWS_FILE = "matrix_rows.marisa"
MATRIX_TEXT_FILE = "term_document_matrix.txt"


def _write_records(filepath: str, records: Iterable) -> None:
    """
    Encode records one by one with msgpack and compress with zstandard
    """
    with open(filepath, "wb") as f, zstd.ZstdCompressor().stream_writer(f) as zf:
        pack = msgpack.Packer().pack
        for rec in records:
            zf.write(pack(rec))


def _read_records(filepath: str) -> Iterator:
    """
    Stream records written by _write_records
    """
    with open(filepath, "rb") as f, zstd.ZstdDecompressor().stream_reader(f) as zf:
        for rec in msgpack.Unpacker(zf):
            yield rec


# --- Vocabulary --- #

def save_vocabulary(terms: Iterable[str], total_terms: int, outdir: str, save_text: bool = True) -> None:
    os.makedirs(outdir, exist_ok=True)
    terms = list(terms)
    marisa_trie.Trie(terms).save(os.path.join(outdir, VOCABULARY_FILE))

    if save_text:
        with open(os.path.join(outdir, DICTIONARY_TEXT_FILE), "w", encoding="utf8") as f:
            f.write(f"{total_terms} words in total\n")
            for term in terms:
                f.write(term + "\n")


def load_vocabulary(outdir: str) -> marisa_trie.Trie:
    trie = marisa_trie.Trie()
    trie.load(os.path.join(outdir, VOCABULARY_FILE))
    return trie


# --- Documents --- #

def save_documents(documents: Iterable, outdir: str) -> None:
    os.makedirs(outdir, exist_ok=True)
    _write_records(os.path.join(outdir, DOCUMENTS_FILE), documents)


def load_documents(outdir: str) -> List:
    return list(_read_records(os.path.join(outdir, DOCUMENTS_FILE)))


# --- Inverted index --- #

def save_inverted_index(index: InvertedIndex, outdir: str, save_text: bool = True) -> None:
    os.makedirs(outdir, exist_ok=True)
    snapshot = index.as_dict()
    save_documents(index.documents, outdir)
    _write_records(
        os.path.join(outdir, INDEX_FILE),
        ((term, snapshot[term]) for term in sorted(snapshot)),
    )

    if save_text:
        with open(os.path.join(outdir, INDEX_TEXT_FILE), "w", encoding="utf8") as f:
            for term in sorted(snapshot):
                f.write(term + ": " + " ".join(str(d) for d in snapshot[term]) + "\n")


def load_inverted_index(outdir: str) -> InvertedIndex:
    postings = {term: docs for term, docs in _read_records(os.path.join(outdir, INDEX_FILE))}
    return InvertedIndex(postings, load_documents(outdir))


# --- Matrix --- #

def save_matrix(matrix: TermDocumentMatrix, outdir: str, save_text: bool = True) -> None:
    os.makedirs(outdir, exist_ok=True)
    np.save(os.path.join(outdir, MATRIX_FILE), matrix.counts)
    matrix.rows.save(os.path.join(outdir, MATRIX_ROWS_FILE))
    save_documents(matrix.documents, outdir)

    if save_text:
        np.savetxt(os.path.join(outdir, MATRIX_TEXT_FILE), matrix.counts, fmt="%d")


def load_matrix(outdir: str) -> TermDocumentMatrix:
    counts = np.load(os.path.join(outdir, MATRIX_FILE))
    rows = marisa_trie.Trie()
    rows.load(os.path.join(outdir, MATRIX_ROWS_FILE))
    return TermDocumentMatrix(counts, rows, load_documents(outdir))


def saved_files(outdir: str) -> List[Tuple[str, int]]:
    """
    (name, size in bytes) for every file in `outdir`
    """
    out = []
    for name in sorted(os.listdir(outdir)):
        path = os.path.join(outdir, name)
        if os.path.isfile(path):
            out.append((name, os.path.getsize(path)))
    return out
