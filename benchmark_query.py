"""
Benchmark query ranking over a document folder.

Compares:
- query: one query at a time
- batch_query: ThreadPoolExecutor-based batch ranking

Queries are sampled from the vocabulary of the indexed corpus.

Usage:
    uv run python benchmark_query.py articles/
    uv run python benchmark_query.py articles/ --num-queries 500 --terms-per-query 3
"""

import argparse
import time

import numpy as np
from tqdm import tqdm

from tfidf_ranking.engine import batch_query, build, query
from tfidf_ranking.index import Index
from tfidf_ranking.loading import load_stopwords, read_corpus
from tfidf_ranking.log_setup import setup_logging
from tfidf_ranking.results import ResultList


def sample_queries(index: Index, num_queries: int, terms_per_query: int, seed: int) -> list[str]:
    """Build random queries from vocabulary terms."""
    rng = np.random.default_rng(seed)
    terms = index.vocabulary.terms
    if not terms:
        return []
    return [
        " ".join(rng.choice(terms, size=terms_per_query, replace=True))
        for _ in range(num_queries)
    ]


def benchmark_method(
    index: Index,
    queries: list[str],
    method: str,
    num_runs: int = 3,
) -> tuple[float, float, list[ResultList]]:
    """
    Benchmark a ranking method.

    Args:
        index: Search index
        queries: Query strings
        method: "sequential" or "batch"
        num_runs: Number of runs for averaging

    Returns:
        (mean_time, std_time, results)
    """
    times = []
    results: list[ResultList] = []

    for _ in range(num_runs):
        start = time.perf_counter()
        if method == "sequential":
            results = [query(index, q) for q in tqdm(queries, desc="Ranking", unit="query", leave=False)]
        else:
            results = batch_query(index, queries)
        times.append(time.perf_counter() - start)

    return float(np.mean(times)), float(np.std(times)), results


def verify_correctness(
    results1: list[ResultList],
    results2: list[ResultList],
    tol: float = 1e-9,
) -> tuple[bool, str]:
    """Verify that two result sets are identical."""
    if len(results1) != len(results2):
        return False, f"Length mismatch: {len(results1)} vs {len(results2)}"

    for i, (first, second) in enumerate(zip(results1, results2)):
        if first.document_ids != second.document_ids:
            return False, f"Query {i}: Rankings differ"
        if not np.allclose(first.scores, second.scores, atol=tol):
            return False, f"Query {i}: Score mismatch"

    return True, "All results match"


def main():
    parser = argparse.ArgumentParser(description="Benchmark TF-IDF query ranking")
    parser.add_argument("articles", help="Folder with the documents to index")
    parser.add_argument("--stopwords", type=str, default="", help="Stop-word file (optional)")
    parser.add_argument(
        "--num-queries",
        type=int,
        default=100,
        help="Number of queries to benchmark (default: 100)",
    )
    parser.add_argument(
        "--terms-per-query",
        type=int,
        default=2,
        help="Vocabulary terms per sampled query (default: 2)",
    )
    parser.add_argument(
        "--num-runs",
        type=int,
        default=3,
        help="Number of runs for averaging (default: 3)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for query sampling (default: 42)",
    )
    args = parser.parse_args()
    setup_logging()

    stop_words = load_stopwords(args.stopwords) if args.stopwords else frozenset()
    print(f"Building index over {args.articles}...")
    index = build(read_corpus(args.articles), stop_words)
    queries = sample_queries(index, args.num_queries, args.terms_per_query, args.seed)

    print(f"\n{'='*60}")
    print("Benchmark Configuration:")
    print(f"  Documents: {index.document_count:,}")
    print(f"  Vocabulary: {index.vocab_size:,}")
    print(f"  Queries: {len(queries)}")
    print(f"  Runs: {args.num_runs}")
    print(f"{'='*60}\n")

    mean1, std1, results1 = benchmark_method(index, queries, "sequential", args.num_runs)
    print(f"  query:       {mean1*1000:.2f} ms ± {std1*1000:.2f} ms")

    mean2, std2, results2 = benchmark_method(index, queries, "batch", args.num_runs)
    print(f"  batch_query: {mean2*1000:.2f} ms ± {std2*1000:.2f} ms")

    ok, message = verify_correctness(results1, results2)
    print(f"\nCorrectness: {'PASS' if ok else 'FAIL'} - {message}")
    if mean2 > 0:
        print(f"Speedup: {mean1 / mean2:.2f}x")


if __name__ == "__main__":
    main()
