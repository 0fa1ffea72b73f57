"""Command-line interface for the word graph tooling.

WHY: Word-list curators need to turn .txt word lists into shipped graph
files, check how well connected a list is, and drop small islands of
words. The CLI wires file handling, graph building, encoding and
connectivity analysis together behind three subcommands.

HOW: argparse with subcommands:
  generate [PATH]         — .txt file or directory → {stem}-graph.json
  analyze [PATH]          — .txt/.json file or directory → report on
                            stdout and in reports/{stem}-report.txt
  trim FILE MAX_SIZE      — remove components of size <= MAX_SIZE from
                            a .txt list, backing it up first
PATH defaults to the configured word-list directory. Status messages go
to stderr; the analyze report goes to stdout so it can be piped.

RULES:
- Status output goes to stderr (not stdout)
- Expected failures print "Error: ..." to stderr and exit 1
- generate/analyze keep going after a bad file and exit 1 at the end
- trim only accepts .txt word lists, never graph files
- Logging is configured here and nowhere else
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from word_graph.codec.records import WordGraphEncodeError, WordGraphParseError
from word_graph.config import LOG_FORMAT, LOG_LEVEL, WORDLISTS_DIR
from word_graph.core.connectivity import ConnectivityAnalyzer, trim_small_components
from word_graph.core.graph import WordGraph
from word_graph.wordlists import (
    find_analyzable_files,
    find_word_lists,
    graph_output_path,
    is_graph_file,
    is_under_git,
    is_word_list_file,
    load_graph_file,
    load_word_list,
    save_graph_file,
    write_report,
    write_word_list,
)

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so reports can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_path(raw: Optional[str]) -> Path:
    path = Path(raw if raw else WORDLISTS_DIR).resolve()
    if not path.exists():
        _fail("Path not found: {}".format(path))
    return path


def _for_each_file(files: List[Path], handler: Callable[[Path], None]) -> bool:
    """Run ``handler`` on every file; report failures and keep going.

    Returns True if every file succeeded.
    """
    ok = True
    for file in files:
        try:
            handler(file)
        except (WordGraphParseError, WordGraphEncodeError, OSError, ValueError) as e:
            print("Error processing {}: {}".format(file, e), file=sys.stderr)
            ok = False
    return ok


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


def _generate_file(path: Path) -> None:
    _status("Processing {} ...".format(path))
    words = load_word_list(path)
    _status("  Loaded {} words.".format(len(words)))

    graph = WordGraph.from_word_list(words)
    output = save_graph_file(graph_output_path(path), graph)
    _status("  Generated graph saved to {}".format(output))


def _run_generate(args: argparse.Namespace) -> None:
    path = _resolve_path(args.path)

    if path.is_dir():
        files = find_word_lists(path)
        if not files:
            _status("No .txt word list files found in {}.".format(path))
            return
        _status("Found {} word list file(s) in {}.".format(len(files), path))
    elif is_word_list_file(path):
        files = [path]
    else:
        _fail("Not a .txt word list: {}".format(path))
        return

    if not _for_each_file(files, _generate_file):
        sys.exit(1)
    _status("All word lists processed.")


# ---------------------------------------------------------------------------
# analyze
# ---------------------------------------------------------------------------


def _load_any(path: Path) -> WordGraph:
    if is_graph_file(path):
        graph = load_graph_file(path)
        _status("  Loaded pre-computed graph with {} words.".format(len(graph)))
        return graph
    words = load_word_list(path)
    _status("  Loaded {} words, computing graph...".format(len(words)))
    return WordGraph.from_word_list(words)


def _analyze_file(path: Path) -> None:
    _status("Analyzing {} ...".format(path))
    graph = _load_any(path)
    report = ConnectivityAnalyzer(graph).report()
    print(report)
    output = write_report(path, report)
    _status("  Report saved to {}".format(output))


def _run_analyze(args: argparse.Namespace) -> None:
    path = _resolve_path(args.path)

    if path.is_dir():
        files = find_analyzable_files(path)
        if not files:
            _status("No word list or graph files found in {}.".format(path))
            return
        _status("Found {} file(s) to analyze.".format(len(files)))
    elif is_word_list_file(path) or is_graph_file(path):
        files = [path]
    else:
        _fail("Unsupported file type: {}".format(path))
        return

    if not _for_each_file(files, _analyze_file):
        sys.exit(1)
    _status("Analysis complete.")


# ---------------------------------------------------------------------------
# trim
# ---------------------------------------------------------------------------


def _run_trim(args: argparse.Namespace) -> None:
    path = Path(args.file).resolve()
    if not path.is_file():
        _fail("File {} does not exist".format(path))
    if not is_word_list_file(path):
        _fail("This command only works with .txt word list files, not graph files")
    if args.max_size < 1:
        _fail("Maximum size must be a positive number")

    _status("Processing {} ...".format(path))
    words = load_word_list(path)
    _status("  Loaded {} words.".format(len(words)))

    kept, removed = trim_small_components(words, args.max_size)
    removed_count = sum(len(component) for component in removed)
    _status("  Identified {} components with size <= {}".format(len(removed), args.max_size))

    if not removed:
        _status("No words to remove. Word list unchanged.")
        return

    if is_under_git(path):
        _status("  File is under git control, skipping backup creation")
    backup = write_word_list(path, kept, backup=True)
    if backup is not None:
        _status("  Backup created at {}".format(backup))

    _status("Removed {} words from {}".format(removed_count, path))
    _status("New word list has {} words".format(len(kept)))
    _status("")
    _status("Removed words:")
    for index, component in enumerate(removed, start=1):
        _status("Component {} ({} words): {}".format(index, len(component), ", ".join(component)))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without touching files.
    """
    parser = argparse.ArgumentParser(
        prog="word-graph",
        description="Build, analyze and trim single-letter edit graphs for word lists.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser(
        "generate",
        help="Generate {stem}-graph.json files from .txt word lists.",
    )
    generate.add_argument(
        "path",
        nargs="?",
        default=None,
        help="A .txt word list or a directory of them (default: {}).".format(WORDLISTS_DIR),
    )
    generate.set_defaults(handler=_run_generate)

    analyze = subparsers.add_parser(
        "analyze",
        help="Report the connected components of a word list or graph file.",
    )
    analyze.add_argument(
        "path",
        nargs="?",
        default=None,
        help="A .txt word list, a .json graph, or a directory (default: {}).".format(WORDLISTS_DIR),
    )
    analyze.set_defaults(handler=_run_analyze)

    trim = subparsers.add_parser(
        "trim",
        help="Remove small connected components from a .txt word list.",
    )
    trim.add_argument("file", help="Path to the .txt word list to rewrite.")
    trim.add_argument(
        "max_size",
        type=int,
        help="Components with this many words or fewer are removed.",
    )
    trim.set_defaults(handler=_run_trim)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    logger.debug("Running %s command", args.command)
    args.handler(args)


if __name__ == "__main__":
    main()
