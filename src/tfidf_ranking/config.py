"""
Runtime configuration.

Defaults can be overridden via environment variables, e.g.:
    TFIDF_TOP_K=20                 # Number of results returned per query
    TFIDF_STOPWORDS=stopwords.txt  # One stop word per line
    TFIDF_LOG_LEVEL=DEBUG
"""

import os


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Global configuration. Command-line flags take precedence over these values."""

    # Ranking
    top_k: int = int(os.environ.get("TFIDF_TOP_K", "10"))

    # Corpus and stop-word files
    encoding: str = os.environ.get("TFIDF_ENCODING", "utf-8")
    stopwords_path: str = os.environ.get("TFIDF_STOPWORDS", "")

    # Output
    log_level: str = os.environ.get("TFIDF_LOG_LEVEL", "INFO").upper()
    show_progress: bool = _env_bool("TFIDF_SHOW_PROGRESS", "true")

    # Number of workers for parallel query processing
    num_query_workers: int = int(os.environ.get("TFIDF_QUERY_WORKERS", "8"))
    min_queries_for_parallel: int = int(os.environ.get("TFIDF_MIN_PARALLEL_QUERIES", "10"))


__all__ = ["Config"]
