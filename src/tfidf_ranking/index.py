"""
Frequency index and the immutable search index built on top of it.

The term-frequency table and the document-frequency table are produced by a
single pass over the documents and returned together, so a term's document
frequency always equals the number of documents with a nonzero count for it.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from scipy.sparse import csr_matrix, diags, lil_matrix

from tfidf_ranking.tokenizer import tokenize
from tfidf_ranking.vectors import inverse_document_frequency, term_counts
from tfidf_ranking.vocabulary import Vocabulary

if TYPE_CHECKING:
    from numpy.typing import NDArray


def _frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class FrequencyIndex:
    """
    Per-document term counts and corpus-wide document frequencies.

    Attributes:
        vocabulary: Vocabulary the columns refer to.
        tf_matrix: Sparse (N_docs, vocab_size) matrix of term counts.
        document_frequency: Number of documents containing each term (vocab_size,).
    """

    vocabulary: Vocabulary
    tf_matrix: csr_matrix
    document_frequency: NDArray[np.int64]

    @property
    def document_count(self) -> int:
        return self.tf_matrix.shape[0]

    def term_frequency(self, doc_idx: int) -> Counter[str]:
        """Term frequency table for one document (terms with count 0 omitted)."""
        row = self.tf_matrix[doc_idx]
        return Counter({
            self.vocabulary.terms[term_id]: int(count)
            for term_id, count in zip(row.indices, row.data)
            if count
        })


def build_frequency_index(documents: Sequence[str], vocabulary: Vocabulary) -> FrequencyIndex:
    """
    Count vocabulary terms in every document.

    Args:
        documents: Raw document texts, in index order.
        vocabulary: Fixed vocabulary.

    Returns:
        FrequencyIndex holding both tables.
    """
    tf_lil = lil_matrix((len(documents), len(vocabulary)), dtype=np.float64)
    df = np.zeros(len(vocabulary), dtype=np.int64)

    for doc_idx, text in enumerate(documents):
        for term, count in term_counts(tokenize(text), vocabulary).items():
            term_id = vocabulary.positions[term]
            tf_lil[doc_idx, term_id] = count
            df[term_id] += 1  # once per document: counts are already aggregated

    return FrequencyIndex(
        vocabulary=vocabulary,
        tf_matrix=csr_matrix(tf_lil),
        document_frequency=_frozen(df),
    )


@dataclass(frozen=True, eq=False)
class Index:
    """
    Read-only search index over a fixed corpus.

    Holds everything a query needs: document ids, the vocabulary, both
    frequency tables, IDF weights, and the cached TF-IDF vector of every
    document. No document text is retained.
    """

    document_ids: tuple[str, ...]
    frequencies: FrequencyIndex
    idf: NDArray[np.float64] = field(init=False, repr=False)
    document_vectors: csr_matrix = field(init=False, repr=False)
    document_norms: NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.document_ids) != self.frequencies.document_count:
            raise ValueError(
                f"Got {len(self.document_ids)} ids for {self.frequencies.document_count} documents."
            )
        if len(set(self.document_ids)) != len(self.document_ids):
            raise ValueError("Document ids must be unique.")

        idf = inverse_document_frequency(self.frequencies.document_frequency, self.document_count)
        if idf.size:
            # Column scaling keeps each entry an exact tf * idf product
            vectors = csr_matrix(self.frequencies.tf_matrix @ diags(idf))
        else:
            vectors = csr_matrix(self.frequencies.tf_matrix.shape, dtype=np.float64)
        norms = np.sqrt(np.asarray(vectors.power(2).sum(axis=1), dtype=np.float64).ravel())

        object.__setattr__(self, "idf", _frozen(idf))
        object.__setattr__(self, "document_vectors", vectors)
        object.__setattr__(self, "document_norms", _frozen(norms))

    def __len__(self) -> int:
        return self.document_count

    @property
    def vocabulary(self) -> Vocabulary:
        return self.frequencies.vocabulary

    @property
    def document_count(self) -> int:
        return len(self.document_ids)

    @property
    def vocab_size(self) -> int:
        return len(self.frequencies.vocabulary)

    @property
    def document_frequency(self) -> NDArray[np.int64]:
        return self.frequencies.document_frequency

    def term_frequency(self, doc_idx: int) -> Counter[str]:
        return self.frequencies.term_frequency(doc_idx)

    def document_vector(self, doc_idx: int) -> NDArray[np.float64]:
        """Cached TF-IDF vector of a document as a dense array."""
        return self.document_vectors[doc_idx].toarray().ravel()

    def get_df(self, term: str) -> int:
        """Get document frequency for a term (0 if not in vocabulary)."""
        position = self.vocabulary.position(term)
        if position is None:
            return 0
        return int(self.frequencies.document_frequency[position])


__all__ = ["FrequencyIndex", "Index", "build_frequency_index"]
