import logging
import os
from typing import Dict, Iterator, List, Mapping

from boolindex.Errors import DocumentReadError

logger = logging.getLogger(__name__)


class DocumentManager:
    """
    Document source backed by the filesystem. A handle is a file path.
    """
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def discover(self, path: str) -> List[str]:
        """
        All regular files below `path`, sorted, so the document order is repeatable.
        A single file path is returned as is.
        """
        if os.path.isfile(path):
            return [path]
        if not os.path.isdir(path):
            raise FileNotFoundError(f"No such file or directory: {path}")

        found = []
        for root, _dirs, files in os.walk(path):
            for name in files:
                found.append(os.path.join(root, name))
        found.sort()
        logger.info("Found %d documents under %s", len(found), path)
        return found

    def read_document_stream(self, filepath) -> Iterator[str]:
        try:
            with open(filepath, "r", encoding=self.encoding) as f:
                for line in f:
                    yield line
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(filepath, exc) from exc

    def read_document(self, filepath) -> List[str]:
        """
        Read every line up front. Either the whole document comes back or
        DocumentReadError is raised.
        """
        return list(self.read_document_stream(filepath))


class MemoryDocumentManager(DocumentManager):
    """
    Document source over in-memory texts, keyed by any hashable handle.
    """
    def __init__(self, texts: Mapping[object, str]):
        super().__init__()
        self.texts: Dict[object, str] = dict(texts)

    def discover(self, path=None) -> List[object]:
        return list(self.texts.keys())

    def read_document_stream(self, handle) -> Iterator[str]:
        if handle not in self.texts:
            raise DocumentReadError(handle, "unknown document")
        for line in self.texts[handle].splitlines():
            yield line
