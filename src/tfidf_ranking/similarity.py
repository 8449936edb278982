"""
Cosine similarity and top-k ranking.

Only documents with a strictly positive similarity are returned. Documents
or queries with a zero norm never match.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np
from scipy.sparse import csr_matrix

from tfidf_ranking.config import Config
from tfidf_ranking.results import RankedResult, ResultList

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


def cosine_similarity(vec1: ArrayLike, vec2: ArrayLike) -> float:
    """
    Compute cosine similarity between two weighted vectors.

    Returns 0.0 when either vector has zero norm.
    """
    a = np.asarray(vec1, dtype=np.float64)
    b = np.asarray(vec2, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"Vector shapes differ: {a.shape} vs {b.shape}")

    magnitude = np.linalg.norm(a) * np.linalg.norm(b)
    # Avoid division by zero
    if magnitude == 0:
        return 0.0
    return float(np.dot(a, b) / magnitude)


def similarity_scores(
    query_vector: NDArray[np.float64],
    document_vectors: csr_matrix,
    document_norms: NDArray[np.float64] | None = None,
) -> NDArray[np.float64]:
    """
    Cosine similarity of the query against every document row.

    Args:
        query_vector: Dense query vector (vocab_size,)
        document_vectors: Sparse (N_docs, vocab_size) matrix
        document_norms: Pre-computed row norms (N_docs,), computed if omitted

    Returns:
        Scores (N_docs,), 0.0 wherever either norm is zero
    """
    n_docs = document_vectors.shape[0]
    query_norm = float(np.linalg.norm(query_vector))
    if n_docs == 0 or query_norm == 0:
        return np.zeros(n_docs, dtype=np.float64)

    if document_norms is None:
        document_norms = np.sqrt(np.asarray(document_vectors.power(2).sum(axis=1)).ravel())

    dots = np.asarray(document_vectors @ query_vector, dtype=np.float64).ravel()
    denominators = document_norms * query_norm
    scores = np.zeros(n_docs, dtype=np.float64)
    np.divide(dots, denominators, out=scores, where=denominators > 0)
    # Rounding can push a parallel pair a hair above 1
    return np.minimum(scores, 1.0)


def select_top_k(scores: NDArray[np.float64], top_k: int) -> NDArray[np.int64]:
    """
    Indices of the top-k strictly positive scores, best first.

    Equal scores keep their index order (stable sort).
    """
    if top_k <= 0:
        raise ValueError(f"top_k must be positive, got {top_k}")
    candidates = np.flatnonzero(scores > 0)
    order = np.argsort(-scores[candidates], kind="stable")
    return candidates[order][:top_k].astype(np.int64)


def rank(
    query_vector: NDArray[np.float64],
    document_ids: Sequence[str],
    document_vectors: csr_matrix,
    document_norms: NDArray[np.float64] | None = None,
    top_k: int | None = None,
) -> ResultList:
    """
    Rank documents against a query vector.

    Args:
        query_vector: TF-IDF vector for the query
        document_ids: Identifier of each document row
        document_vectors: Cached TF-IDF document vectors
        document_norms: Optional pre-computed document norms
        top_k: Maximum number of results (defaults to Config.top_k)

    Returns:
        ResultList ordered by descending similarity, possibly empty
    """
    if top_k is None:
        top_k = Config.top_k
    scores = similarity_scores(query_vector, document_vectors, document_norms)
    top = select_top_k(scores, top_k)
    return ResultList(RankedResult(document_ids[idx], float(scores[idx])) for idx in top)


__all__ = ["cosine_similarity", "rank", "select_top_k", "similarity_scores"]
