"""
Word tokenization for indexing and querying.

A token is a maximal run of Unicode letters, lower-cased. Digits,
punctuation and whitespace only ever separate tokens.
"""

from __future__ import annotations

import re
from itertools import groupby
from typing import Iterator

# \w minus digits and underscore; may still hold No/Nl numerics such as ² or Ⅷ
_WORD_PATTERN = re.compile(r"[^\W\d_]+")


def _letter_runs(text: str) -> Iterator[str]:
    """Maximal runs of characters for which str.isalpha() holds."""
    for match in _WORD_PATTERN.finditer(text):
        word = match.group()
        if word.isalpha():
            yield word
            continue
        for is_letter, run in groupby(word, key=str.isalpha):
            if is_letter:
                yield "".join(run)


class TokenSequence:
    """
    Lazy, re-iterable view of the tokens in a piece of text.

    Each call to ``iter()`` re-scans the text, so the sequence can be
    consumed any number of times without materializing a list.
    """

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[str]:
        return (word.lower() for word in _letter_runs(self.text))

    def __repr__(self) -> str:
        return f"TokenSequence({self.text[:40]!r})"


def tokenize(text: str) -> TokenSequence:
    """Tokenizes the input text into a lazy sequence of lower-cased words."""
    return TokenSequence(text)


class WordTokenizer:
    """Callable tokenizer returning a materialized token list."""

    def __call__(self, text: str) -> list[str]:
        return list(tokenize(text))


__all__ = ["TokenSequence", "WordTokenizer", "tokenize"]
