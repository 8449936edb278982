"""
Interactive console for searching a folder of text documents.

Commands:
    query <words>   rank documents against the words, show the top results
    results         show the results of the last query again
    type <index>    print the document at a position of the last results
    exit | quit     leave the console

Run with:
    tfidf-ranking articles/ --stopwords stopwords.txt
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from loguru import logger

from tfidf_ranking.config import Config
from tfidf_ranking.engine import SearchSession, build
from tfidf_ranking.loading import CorpusError, load_stopwords, read_corpus, read_document
from tfidf_ranking.log_setup import setup_logging
from tfidf_ranking.results import ResultIndexError

EXIT_COMMANDS = frozenset({"exit", "quit"})


class SearchShell:
    """Line-oriented command loop over a SearchSession."""

    prompt = "Enter command > "

    def __init__(
        self,
        session: SearchSession,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        encoding: str | None = None,
    ):
        self.session = session
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.encoding = encoding

    def write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def run(self) -> None:
        """Read commands until an exit command or end of input."""
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self.write()
                break
            if not self.handle(line):
                break
            self.write()

    def handle(self, line: str) -> bool:
        """Execute one command line. Returns False when the shell should stop."""
        parts = line.split(maxsplit=1)
        command = parts[0] if parts else ""
        argument = parts[1].strip() if len(parts) > 1 else ""

        if command == "query":
            self.do_query(argument)
        elif command == "results" and not argument:
            self.do_results()
        elif command == "type":
            self.do_type(argument)
        elif command in EXIT_COMMANDS and not argument:
            return False
        elif command:
            self.write("Unknown command.")
        return True

    def do_query(self, text: str) -> None:
        self.session.search(text)
        self.write(f"Query is: [{', '.join(self.session.last_terms)}]")
        self.write(f"Top {self.session.top_k or Config.top_k} results:")
        self.print_results()

    def do_results(self) -> None:
        if not self.session.has_results:
            self.write("No previous results found.")
            return
        self.print_results()

    def print_results(self) -> None:
        for position, result in enumerate(self.session.last_results or ()):
            self.write(f"[{position:2d}]({result.score:.4f}) {result.document_id}")

    def do_type(self, argument: str) -> None:
        try:
            position = int(argument)
        except ValueError:
            self.write("Unknown command. Expected argument is index of query result.")
            return

        try:
            document_id = self.session.result(position).document_id
        except ResultIndexError:
            self.write("The requested result is not available.")
            return

        try:
            text = read_document(document_id, self.encoding)
        except CorpusError as e:
            logger.error("{}", e)
            self.write(f"Error opening file: {e}")
            return

        rule = "-" * len(document_id)
        self.write(rule)
        self.write(f"Document: {document_id}")
        self.write(text.rstrip("\n"))
        self.write(rule)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Rank text documents against queries with TF-IDF cosine similarity."
    )
    parser.add_argument("articles", help="Folder with the documents being searched.")
    parser.add_argument(
        "--stopwords",
        type=str,
        default=Config.stopwords_path,
        help="Stop-word file, one word per line (default: $TFIDF_STOPWORDS or none).",
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=Config.top_k,
        help=f"Number of results per query (default: {Config.top_k}).",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default=Config.encoding,
        help=f"Encoding of documents and stop-word file (default: {Config.encoding}).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=Config.log_level,
        help=f"Log level (default: {Config.log_level}).",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar while reading documents.",
    )
    args = parser.parse_args(argv)
    if args.top_k <= 0:
        parser.error("--top-k must be positive")
    return args


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    stdout = stdout or sys.stdout

    try:
        stop_words = load_stopwords(args.stopwords, args.encoding) if args.stopwords else frozenset()
        index = build(
            read_corpus(args.articles, args.encoding, show_progress=not args.no_progress),
            stop_words,
        )
    except CorpusError as e:
        logger.error("{}", e)
        stdout.write(f"Error: {e}\n")
        return 1

    stdout.write(f"Vocabulary size is {index.vocab_size} words.\n\n")
    shell = SearchShell(SearchSession(index, top_k=args.top_k), stdin, stdout, args.encoding)
    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
