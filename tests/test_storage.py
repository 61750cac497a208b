# ======================================================
# tests/test_storage.py
# ======================================================
# Here, we are testing persistence to ensure:
#   - saved structures load back with the same answers
#   - the human-readable dumps follow the documented layout
#   - text dumps can be switched off
# ======================================================

import os
import tempfile
import unittest

import numpy as np

from boolindex import Storage
from boolindex.Config import Config
from boolindex.DocumentManager import MemoryDocumentManager
from boolindex.Engine import SearchEngine
from boolindex.Query import QueryProcessor


class TestStorage(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.outdir = os.path.join(self.tmp.name, "index")

        manager = MemoryDocumentManager({
            "doc1": "cat dog cat",
            "doc2": "dog",
            "doc3": "bird",
        })
        self.engine = SearchEngine(Config(index_dir=self.outdir), manager=manager)
        self.engine.add_documents(["doc1", "doc2", "doc3"])
        self.engine.build()
        self.engine.save()

    def test_inverted_index_round_trip(self):
        index = Storage.load_inverted_index(self.outdir)
        self.assertEqual(index.documents, ("doc1", "doc2", "doc3"))
        for term in ["cat", "dog", "bird", "zebra"]:
            self.assertEqual(index.lookup(term), self.engine.index.lookup(term))
        self.assertEqual(QueryProcessor(index).evaluate("not dog"), {"doc3"})

    def test_matrix_round_trip(self):
        matrix = Storage.load_matrix(self.outdir)
        self.assertTrue(np.array_equal(matrix.counts, self.engine.matrix.counts))
        self.assertEqual(matrix.terms(), self.engine.matrix.terms())
        self.assertEqual(matrix.count("cat", "doc1"), 2)
        self.assertEqual(QueryProcessor(matrix).evaluate("cat or dog"), {"doc1", "doc2"})

    def test_vocabulary_round_trip(self):
        trie = Storage.load_vocabulary(self.outdir)
        self.assertEqual(set(trie.keys()), {"cat", "dog", "bird"})
        self.assertEqual(Storage.load_documents(self.outdir), ["doc1", "doc2", "doc3"])

    def test_text_dumps(self):
        with open(os.path.join(self.outdir, Storage.DICTIONARY_TEXT_FILE), encoding="utf8") as f:
            lines = f.read().splitlines()
        self.assertEqual(lines, ["5 words in total", "cat", "dog", "bird"])

        with open(os.path.join(self.outdir, Storage.INDEX_TEXT_FILE), encoding="utf8") as f:
            lines = f.read().splitlines()
        self.assertEqual(lines, ["bird: doc3", "cat: doc1", "dog: doc1 doc2"])

        loaded = np.loadtxt(os.path.join(self.outdir, Storage.MATRIX_TEXT_FILE), dtype=int, ndmin=2)
        self.assertTrue(np.array_equal(loaded, self.engine.matrix.counts))

        names = [name for name, _ in Storage.saved_files(self.outdir)]
        self.assertIn("config_used.json", names)

    def test_no_text_dumps(self):
        outdir = os.path.join(self.tmp.name, "binary")
        self.engine.config.save_text = False
        self.engine.save(outdir)
        names = [name for name, _ in Storage.saved_files(outdir)]
        self.assertNotIn(Storage.DICTIONARY_TEXT_FILE, names)
        self.assertNotIn(Storage.INDEX_TEXT_FILE, names)
        self.assertNotIn(Storage.MATRIX_TEXT_FILE, names)
        self.assertIn(Storage.MATRIX_FILE, names)


class TestConfig(unittest.TestCase):

    def test_json_round_trip(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "config.json")
            cfg = Config(index_dir="elsewhere/", matrix_dtype="int64", save_text=False, log_level="DEBUG")
            cfg.to_json(path)
            self.assertEqual(Config.from_json(path), cfg)


if __name__ == "__main__":
    unittest.main()
