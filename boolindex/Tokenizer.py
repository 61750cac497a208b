# boolindex/Tokenizer.py
"""
Tokenizer module.

Raw lines are split on whitespace with nltk and every piece is
normalized into a term. Both the inverted index and the term-document
matrix go through this module, so they always see the same terms.
"""

import re
from typing import Iterable, Iterator, List

from nltk.tokenize import WhitespaceTokenizer


class Tokenizer:
    """
    The Tokenizer class.

    Responsibilities:
      - Split a line on runs of whitespace.
      - Strip leading and trailing characters that are not ASCII letters.
      - Drop pieces that end up empty.
      - Lowercase what is left.

    No stemming and no stopword removal: a term is exactly the stripped,
    lowercased word.
    """
    def __init__(self):
        self._splitter = WhitespaceTokenizer()

        # Non-letters at either end of a piece
        self._edge_re = re.compile(r"^[^A-Za-z]+|[^A-Za-z]+$")

    def normalize(self, word: str) -> str:
        """
        Normalize a single whitespace-free piece. Returns "" when nothing is left.
        """
        return self._edge_re.sub("", word).lower()

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize one line of raw text into terms.

        Parameters
        ----------
        text : str
            A raw line from a document.

        Returns
        -------
        List[str]
            A fresh list of terms on every call.
        """
        if text is None:
            return []

        terms = []
        for piece in self._splitter.tokenize(text):
            term = self.normalize(piece)
            if term:
                terms.append(term)
        return terms

    def token_stream(self, lines: Iterable[str]) -> Iterator[str]:
        """
        Tokenize, but over a stream of lines
        """
        for line in lines:
            for term in self.tokenize(line):
                yield term
