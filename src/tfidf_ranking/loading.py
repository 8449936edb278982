"""
Reading the corpus directory and the stop-word list from disk.

Any failure here is fatal for index building and surfaces as CorpusError.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from loguru import logger
from tqdm import tqdm

from tfidf_ranking.config import Config


class CorpusError(Exception):
    """The corpus or the stop-word list could not be read."""


def list_documents(directory: str | Path) -> list[Path]:
    """Regular files in the corpus directory, sorted by name."""
    directory = Path(directory)
    if not directory.is_dir():
        raise CorpusError(f"The given folder doesn't exist: {directory}")
    try:
        return sorted(path for path in directory.iterdir() if path.is_file())
    except OSError as e:
        raise CorpusError(f"Error listing folder {directory}: {e}") from e


def read_document(document_id: str | Path, encoding: str | None = None) -> str:
    """Read the full text of a document by its identifier (its path)."""
    path = Path(document_id)
    try:
        return path.read_text(encoding=encoding or Config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError(f"Error reading file {path}: {e}") from e


def read_corpus(
    directory: str | Path,
    encoding: str | None = None,
    show_progress: bool | None = None,
) -> Iterator[tuple[str, str]]:
    """
    Yield (identifier, text) for every document in a directory.

    The identifier is the document's absolute path.

    Args:
        directory: Folder holding one document per file.
        encoding: Text encoding (defaults to Config.encoding).
        show_progress: Show a progress bar (defaults to Config.show_progress).
    """
    if show_progress is None:
        show_progress = Config.show_progress
    paths = list_documents(directory)
    logger.debug("Found {} documents in {}", len(paths), directory)
    for path in tqdm(paths, desc="Reading documents", unit="doc", disable=not show_progress):
        yield str(path.resolve()), read_document(path, encoding)


def load_stopwords(path: str | Path, encoding: str | None = None) -> frozenset[str]:
    """
    Load stop words, one per line.

    Lines are stripped and lower-cased; blank lines are skipped.
    """
    text = read_document(path, encoding)
    stop_words = frozenset(
        word for word in (line.strip().lower() for line in text.splitlines()) if word
    )
    logger.info("Loaded {} stop words from {}", len(stop_words), path)
    return stop_words


__all__ = ["CorpusError", "list_documents", "load_stopwords", "read_corpus", "read_document"]
