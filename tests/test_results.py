import pytest

from tfidf_ranking.results import RankedResult, ResultIndexError, ResultList


def test_ranked_result_sorts_by_descending_score():
    results = [RankedResult("a", 0.2), RankedResult("b", 0.9), RankedResult("c", 0.5)]
    assert [r.document_id for r in sorted(results)] == ["b", "c", "a"]


def test_ranked_result_is_immutable():
    result = RankedResult("a", 0.5)
    with pytest.raises(AttributeError):
        result.score = 1.0


def test_result_list_indexed_access():
    results = ResultList([RankedResult("a", 0.9), RankedResult("b", 0.3)])

    assert len(results) == 2
    assert results[0] == RankedResult("a", 0.9)
    assert results.document_id(1) == "b"
    assert results.document_ids == ["a", "b"]
    assert results[:1] == [RankedResult("a", 0.9)]


@pytest.mark.parametrize("index", [2, 10, -1])
def test_result_list_out_of_range(index):
    results = ResultList([RankedResult("a", 0.9), RankedResult("b", 0.3)])
    with pytest.raises(ResultIndexError):
        results[index]


def test_result_index_error_is_index_error():
    with pytest.raises(IndexError):
        ResultList().document_id(0)


def test_empty_result_list():
    results = ResultList()
    assert not results
    assert list(results) == []
    assert results == []
