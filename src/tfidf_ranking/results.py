from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Iterator, overload


class ResultIndexError(IndexError):
    """Requested a result position outside the last ranking."""


@dataclass(frozen=True)
class RankedResult:
    """
    A ranked document: its identifier and cosine similarity to the query.

    Ordering is by descending score, so ``sorted(results)`` puts the best match first.
    """

    document_id: str
    score: float

    def __lt__(self, other: RankedResult) -> bool:
        if not isinstance(other, RankedResult):
            return NotImplemented
        return self.score > other.score


class ResultList(Sequence[RankedResult]):
    """Immutable, ordered ranking returned by a query."""

    __slots__ = ("_results",)

    def __init__(self, results: Iterable[RankedResult] = ()):
        self._results: tuple[RankedResult, ...] = tuple(results)

    def __len__(self) -> int:
        return len(self._results)

    @overload
    def __getitem__(self, index: int) -> RankedResult: ...

    @overload
    def __getitem__(self, index: slice) -> ResultList: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ResultList(self._results[index])
        if not 0 <= index < len(self._results):
            raise ResultIndexError(
                f"Result index {index} out of range; {len(self._results)} result(s) available."
            )
        return self._results[index]

    def __iter__(self) -> Iterator[RankedResult]:
        return iter(self._results)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResultList):
            return self._results == other._results
        if isinstance(other, (list, tuple)):
            return list(self._results) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._results)

    def __repr__(self) -> str:
        return f"ResultList({list(self._results)!r})"

    @property
    def document_ids(self) -> list[str]:
        return [result.document_id for result in self._results]

    @property
    def scores(self) -> list[float]:
        return [result.score for result in self._results]

    def document_id(self, index: int) -> str:
        """Identifier of the document at zero-based rank ``index``."""
        return self[index].document_id


__all__ = ["RankedResult", "ResultIndexError", "ResultList"]
