from __future__ import annotations

from collections.abc import Iterable
from functools import cached_property
from typing import Iterator

from tfidf_ranking.tokenizer import tokenize


class Vocabulary:
    """
    Fixed, ordered set of index terms.

    Terms are kept sorted, and every weighted vector uses position ``i`` to mean
    ``terms[i]``. The term-to-position mapping is built once and shared by
    document and query encoding.

    Args:
        terms (Iterable[str]): Distinct terms. Duplicates are collapsed.
    """

    def __init__(self, terms: Iterable[str]):
        self.terms: tuple[str, ...] = tuple(sorted(set(terms)))

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def __contains__(self, term: object) -> bool:
        return term in self.positions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self.terms == other.terms

    def __hash__(self) -> int:
        return hash(self.terms)

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self.terms)})"

    @cached_property
    def positions(self) -> dict[str, int]:
        """Vocabulary mapping: assigns each term its vector position."""
        return {term: idx for idx, term in enumerate(self.terms)}

    def position(self, term: str) -> int | None:
        """Get the vector position of a term (None if not in vocabulary)."""
        return self.positions.get(term)


def build_vocabulary(documents: Iterable[str], stop_words: Iterable[str] = ()) -> Vocabulary:
    """
    Collect the distinct tokens of every document, minus stop words.

    Args:
        documents: Raw document texts.
        stop_words: Lower-case words to exclude.

    Returns:
        The vocabulary with its ordering fixed.
    """
    terms: set[str] = set()
    for text in documents:
        terms.update(tokenize(text))
    terms.difference_update(stop_words)
    return Vocabulary(terms)


__all__ = ["Vocabulary", "build_vocabulary"]
