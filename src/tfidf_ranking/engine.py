"""
Index-build and query operations.

    index = build(read_corpus("articles/"), load_stopwords("stopwords.txt"))
    results = query(index, "information retrieval")
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from loguru import logger

from tfidf_ranking.config import Config
from tfidf_ranking.index import Index, build_frequency_index
from tfidf_ranking.results import RankedResult, ResultList
from tfidf_ranking.similarity import rank
from tfidf_ranking.tokenizer import tokenize
from tfidf_ranking.vectors import encode, term_counts
from tfidf_ranking.vocabulary import build_vocabulary

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray


def build(corpus: Iterable[tuple[str, str]], stop_words: Iterable[str] = ()) -> Index:
    """
    Build a search index.

    Args:
        corpus: (identifier, text) pairs. Consumed once.
        stop_words: Lower-case words excluded from the vocabulary.

    Returns:
        Read-only Index. Document texts are not kept.
    """
    start = time.perf_counter()
    document_ids: list[str] = []
    texts: list[str] = []
    for document_id, text in corpus:
        document_ids.append(document_id)
        texts.append(text)

    vocabulary = build_vocabulary(texts, stop_words)
    logger.debug("Vocabulary built: {} terms", len(vocabulary))

    frequencies = build_frequency_index(texts, vocabulary)
    index = Index(tuple(document_ids), frequencies)

    logger.info(
        "Indexed {} documents, vocabulary of {} terms in {:.3f}s",
        index.document_count,
        index.vocab_size,
        time.perf_counter() - start,
    )
    return index


def query_terms(index: Index, text: str) -> list[str]:
    """Query tokens that belong to the vocabulary, in query order."""
    return [token for token in tokenize(text) if token in index.vocabulary]


def encode_query(index: Index, text: str) -> NDArray[np.float64]:
    """Project query text into the index's vector space."""
    return encode(
        term_counts(tokenize(text), index.vocabulary),
        index.vocabulary,
        index.document_frequency,
        index.document_count,
    )


def query(index: Index, text: str, top_k: int | None = None) -> ResultList:
    """
    Rank the indexed documents against a query.

    Never fails: an empty query, or one made only of unknown or stop words,
    returns an empty ResultList.
    """
    return rank(
        encode_query(index, text),
        index.document_ids,
        index.document_vectors,
        index.document_norms,
        top_k=top_k,
    )


def batch_query(
    index: Index,
    texts: list[str],
    top_k: int | None = None,
    num_workers: int | None = None,
) -> list[ResultList]:
    """Rank for multiple queries, in parallel for larger batches."""
    if not texts:
        return []

    def query_single(text: str) -> ResultList:
        return query(index, text, top_k)

    # For small batches, run sequentially
    if len(texts) < Config.min_queries_for_parallel:
        return [query_single(text) for text in texts]

    # The index is read-only, so workers can share it
    with ThreadPoolExecutor(max_workers=num_workers or Config.num_query_workers) as executor:
        return list(executor.map(query_single, texts))


class SearchSession:
    """
    Query front end that remembers the most recent ranking.

    The last results stay available for lookup by rank until the next search.
    """

    def __init__(self, index: Index, top_k: int | None = None):
        self.index = index
        self.top_k = top_k
        self.last_results: ResultList | None = None
        self.last_terms: list[str] = []

    @property
    def has_results(self) -> bool:
        return bool(self.last_results)

    def search(self, text: str) -> ResultList:
        self.last_terms = query_terms(self.index, text)
        self.last_results = query(self.index, text, self.top_k)
        logger.debug("Query {!r} matched {} documents", text, len(self.last_results))
        return self.last_results

    def result(self, position: int) -> RankedResult:
        """
        Result at zero-based rank ``position`` of the last search.

        Raises:
            ResultIndexError: No search yet, or position out of range.
        """
        return (self.last_results or ResultList())[position]


__all__ = ["SearchSession", "batch_query", "build", "encode_query", "query", "query_terms"]
