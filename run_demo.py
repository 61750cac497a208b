# ======================================================
# run_demo.py
# ======================================================
import argparse
import logging
import os

from boolindex.Config import Config
from boolindex.Engine import SearchEngine

DEFAULT_QUERIES = [
    "busses or status",
    "cat or dog",
    "not dog",
    "bird and dog",
]


def build_index_from_sample(path, cfg):
    print(f"=== Building the index from {path} ===")

    engine = SearchEngine(cfg)
    paths = engine.manager.discover(path)

    # If no documents are found, warn the user.
    if not paths:
        print(f"No documents found in {path}.")
        return None

    engine.add_documents(paths)
    engine.build()

    stats = engine.stats()
    print(f"Indexed {stats['documents']} documents.")
    print(f"Vocabulary size: {stats['vocabulary']} unique terms, {stats['total_terms']} words in total.")
    return engine


def demo_queries(engine, queries):
    for query in queries:
        print(f"=== Boolean search for: {query} ===")
        for label, using_matrix in (("Inverted index", False), ("Term-document matrix", True)):
            results = sorted(engine.evaluate(query, using_matrix=using_matrix), key=str)
            if not results:
                print(f"{label}: no results found.")
            else:
                print(f"{label}: " + ", ".join(str(d) for d in results))


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--data", default="data", help="Directory (or single file) of text documents")
    ap.add_argument("--config", help="Config JSON; defaults are used otherwise")
    ap.add_argument("--outdir", help="Where to write index files (overrides config)")
    ap.add_argument("--no-save", action="store_true", help="Do not write index files")
    ap.add_argument("queries", nargs="*", help="Boolean queries to run")
    args = ap.parse_args()

    cfg = Config.from_json(args.config) if args.config else Config()
    if args.outdir:
        cfg.index_dir = args.outdir

    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not os.path.exists(args.data):
        print(f"No documents found at {args.data}.")
        return

    engine = build_index_from_sample(args.data, cfg)
    if engine is None:
        return

    if not args.no_save:
        outdir = engine.save()
        print(f"Index files written to {outdir}")

    demo_queries(engine, args.queries or DEFAULT_QUERIES)


if __name__ == "__main__":
    main()
