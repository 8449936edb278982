import numpy as np
import pytest

from tfidf_ranking.engine import build, query


@pytest.mark.parametrize(
    "documents, query_text, expected_ranking",
    [
        (
            [
                "information retrieval is the activity of obtaining information system resources",
                "BM25 ranks documents based on their relevance to a query",
                "Python is widely used for text processing and ranking algorithms",
            ],
            "information retrieval system",
            ["0"],
        ),
        (
            [
                "foo foo foo bar",
                "foo bar baz",
                "baz qux",
            ],
            "foo",
            ["0", "1"],
        ),
    ],
)
def test_tfidf_ranking(documents, query_text, expected_ranking):
    index = build((str(i), text) for i, text in enumerate(documents))

    results = query(index, query_text)
    assert results.document_ids == expected_ranking, (
        f"Expected ranking {expected_ranking}, got {results.document_ids}"
    )


def test_tfidf_ordering_regression() -> None:
    """
    Regression check to guard the TF-IDF cosine kernel:
    - Documents dominated by rare query terms rank above those diluted by other terms.
    - Non-matching documents are dropped rather than ranked last.
    """
    documents = [
        ("heavy", "foo foo foo bar"),
        ("light", "foo bar baz"),
        ("none", "baz qux"),
    ]
    index = build(documents)

    results = query(index, "foo bar")

    assert results.document_ids == ["heavy", "light"]
    assert results[0].score > results[1].score
    # foo and bar share df=2, so "heavy" is the (3, 1) direction and the query is (1, 1)
    assert np.isclose(results[0].score, 4 / (np.sqrt(10) * np.sqrt(2)))
