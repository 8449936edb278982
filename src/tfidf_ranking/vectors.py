"""
TF-IDF vector encoding.

A weighted vector has one float64 entry per vocabulary term, in vocabulary
order, equal to ``tf(t) * log10(N / df(t))``.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

import numpy as np

from tfidf_ranking.vocabulary import Vocabulary

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


def inverse_document_frequency(
    document_frequency: ArrayLike,
    document_count: int,
) -> NDArray[np.float64]:
    """
    IDF per vocabulary position:
        idf(t) = log10(N / df(t))

    Terms with df(t) == 0 get an IDF of 0.0 rather than a division by zero.
    """
    df = np.asarray(document_frequency, dtype=np.float64)
    idf = np.zeros_like(df)
    present = df > 0
    idf[present] = np.log10(document_count / df[present])
    return idf


def term_counts(tokens: Iterable[str], vocabulary: Vocabulary) -> Counter[str]:
    """Count the tokens that belong to the vocabulary."""
    return Counter(token for token in tokens if token in vocabulary)


def encode(
    counts: Mapping[str, int],
    vocabulary: Vocabulary,
    document_frequency: ArrayLike,
    document_count: int,
) -> NDArray[np.float64]:
    """
    Encode a term-count profile as a weighted vector.

    Args:
        counts: Term -> occurrence count. Terms outside the vocabulary are ignored.
        vocabulary: Fixed vocabulary defining vector positions.
        document_frequency: Document frequency per vocabulary position.
        document_count: Number of documents in the corpus.

    Returns:
        TF-IDF vector of shape (len(vocabulary),)
    """
    tf = np.zeros(len(vocabulary), dtype=np.float64)
    for term, count in counts.items():
        position = vocabulary.position(term)
        if position is not None:
            tf[position] = count
    return tf * inverse_document_frequency(document_frequency, document_count)


__all__ = ["encode", "inverse_document_frequency", "term_counts"]
