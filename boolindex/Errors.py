# boolindex/Errors.py
"""
Exceptions raised by the indexing core.
"""


class DocumentReadError(OSError):
    """A document handle could not be read. Nothing from it was indexed."""

    def __init__(self, handle, reason):
        super().__init__(f"Cannot read document {handle!r}: {reason}")
        self.handle = handle
        self.reason = reason


class IndexStateError(RuntimeError):
    """Build steps were called out of order (vocabulary, then matrix, then queries)."""
