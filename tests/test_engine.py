import numpy as np
import pytest

from tfidf_ranking.config import Config
from tfidf_ranking.engine import SearchSession, batch_query, build, encode_query, query, query_terms
from tfidf_ranking.results import ResultIndexError
from tfidf_ranking.similarity import cosine_similarity


@pytest.fixture
def animals():
    corpus = [
        ("doc1", "cat dog"),
        ("doc2", "cat cat bird"),
        ("doc3", "bird bird bird"),
    ]
    return build(corpus, stop_words=())


@pytest.fixture
def articles():
    corpus = [
        ("a1", "Information retrieval is the activity of obtaining information resources."),
        ("a2", "Cosine similarity measures the angle between two vectors."),
        ("a3", "Python is widely used for text processing and ranking algorithms."),
        ("a4", "The retrieval system ranks documents by cosine similarity to the query."),
        ("a5", "Stop words such as the and of carry little information."),
    ]
    return build(corpus, stop_words={"the", "is", "of", "and", "as", "to", "by", "for"})


def test_query_ranks_by_term_weight(animals):
    results = query(animals, "cat")

    assert results.document_ids == ["doc2", "doc1"]
    assert results[0].score > results[1].score
    assert "doc3" not in results.document_ids


def test_scores_match_cosine_of_vectors(animals):
    results = query(animals, "cat bird")
    query_vector = encode_query(animals, "cat bird")

    for result in results:
        doc_idx = animals.document_ids.index(result.document_id)
        expected = cosine_similarity(query_vector, animals.document_vector(doc_idx))
        assert np.isclose(result.score, expected)


def test_query_is_case_insensitive(animals):
    assert query(animals, "CAT") == query(animals, "cat")


def test_query_of_stop_words_only_is_empty(articles):
    assert list(query(articles, "the of and")) == []


def test_query_of_unknown_terms_is_empty(articles):
    assert list(query(articles, "zebra xylophone")) == []


def test_empty_query(articles):
    assert list(query(articles, "")) == []
    assert list(query(articles, "   123 !!! ")) == []


def test_term_in_every_document_does_not_match():
    index = build([("x", "common alpha"), ("y", "common beta")])
    # idf(common) = log10(2/2) = 0
    assert list(query(index, "common")) == []


def test_results_are_capped_at_top_k():
    corpus = [(f"doc{i:02d}", "needle " + "hay " * i) for i in range(15)]
    corpus.append(("other", "haystack only"))
    index = build(corpus)

    results = query(index, "needle")

    assert len(results) == Config.top_k == 10
    assert all(result.score > 0 for result in results)
    assert results.scores == sorted(results.scores, reverse=True)
    # Shorter documents point more strongly towards "needle"
    assert results.document_ids[0] == "doc00"


def test_query_top_k_override(articles):
    assert len(query(articles, "retrieval cosine similarity", top_k=1)) == 1


def test_query_terms(articles):
    assert query_terms(articles, "The Retrieval of unicorn information") == ["retrieval", "information"]


def test_empty_corpus():
    index = build([], stop_words={"the"})

    assert index.vocab_size == 0
    assert index.document_count == 0
    assert list(query(index, "anything at all")) == []


def test_independent_indexes():
    first = build([("a", "red apple"), ("b", "green pear")])
    second = build([("c", "red car"), ("d", "blue boat"), ("e", "red bus")])

    assert query(first, "red").document_ids == ["a"]
    assert query(second, "red").document_ids == ["c", "e"]
    assert first.vocab_size == 4
    assert second.vocab_size == 5


def test_build_consumes_generator():
    corpus = ((f"doc{i}", text) for i, text in enumerate(["alpha beta", "beta gamma"]))
    index = build(corpus)
    assert index.document_ids == ("doc0", "doc1")


@pytest.mark.parametrize("min_parallel", [1, 100])
def test_batch_query_matches_sequential(articles, monkeypatch, min_parallel):
    monkeypatch.setattr(Config, "min_queries_for_parallel", min_parallel)
    texts = ["retrieval", "cosine similarity", "python ranking", "the", "information"] * 3

    batched = batch_query(articles, texts, num_workers=4)

    assert batched == [query(articles, text) for text in texts]


def test_batch_query_empty(articles):
    assert batch_query(articles, []) == []


def test_session_lookup_after_single_result(animals):
    session = SearchSession(animals)

    results = session.search("dog")

    assert len(results) == 1
    assert session.result(0).document_id == "doc1"
    with pytest.raises(ResultIndexError):
        session.result(1)


def test_session_without_search(animals):
    session = SearchSession(animals)

    assert not session.has_results
    with pytest.raises(ResultIndexError):
        session.result(0)


def test_session_replaces_last_results(animals):
    session = SearchSession(animals)
    session.search("cat")
    assert session.has_results
    assert session.last_terms == ["cat"]

    session.search("unicorn")
    assert not session.has_results
    assert session.last_terms == []
