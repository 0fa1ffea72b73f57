"""Helper functions for word-list and graph files on disk.

WHY: The engine itself does no I/O. The CLI still needs to read word
lists, read and write graph JSON, find the files in a directory, decide
where outputs and reports go, and back up a word list before rewriting
it. Keeping that here leaves the core pure and the CLI thin.

HOW: parse_word_list() and load_word_list() read newline-delimited
lists. load_graph_file() and save_graph_file() go through the codec.
graph_output_path() and report_output_path() apply the naming
conventions. write_word_list() rewrites a list, with a .bak backup
unless the file is under git control.

RULES:
- Word lists: one word per line, whitespace stripped, blank lines ignored
- Graph files: {stem}-graph.json next to the word list
- Reports: reports/{stem}-report.txt next to the analyzed file
- Backups: {path}.bak, skipped when a .git directory is found above the file
- All files are UTF-8
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable, List, Optional

from word_graph.codec.graph_json import dumps, loads
from word_graph.config import (
    BACKUP_SUFFIX,
    GRAPH_SUFFIX,
    REPORT_SUFFIX,
    REPORTS_DIRNAME,
    WORD_LIST_SUFFIX,
)
from word_graph.core.graph import WordGraph

logger = logging.getLogger(__name__)


def parse_word_list(text: str) -> List[str]:
    """Split newline-delimited text into words, dropping blank lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_word_list(path: str | Path) -> List[str]:
    """Load a word list file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    return parse_word_list(Path(path).read_text(encoding="utf-8"))


def load_graph_file(path: str | Path) -> WordGraph:
    """Load a serialized graph file into a WordGraph.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        WordGraphParseError: If the content is not a valid graph.
    """
    records = loads(Path(path).read_text(encoding="utf-8"))
    return WordGraph(records)


def save_graph_file(path: str | Path, graph: WordGraph) -> Path:
    """Write a graph as indented JSON and return the path written."""
    target = Path(path)
    target.write_text(dumps(graph.records), encoding="utf-8")
    logger.info("Saved graph with %d words to %s", len(graph), target)
    return target


def is_graph_file(path: str | Path) -> bool:
    return Path(path).suffix.lower() == ".json"


def is_word_list_file(path: str | Path) -> bool:
    return Path(path).suffix.lower() == WORD_LIST_SUFFIX


def find_word_lists(directory: str | Path) -> List[Path]:
    """Return the .txt word lists in ``directory``, sorted by name."""
    return sorted(p for p in Path(directory).iterdir() if p.is_file() and is_word_list_file(p))


def find_analyzable_files(directory: str | Path) -> List[Path]:
    """Return the .txt and .json files in ``directory``, sorted by name."""
    return sorted(
        p for p in Path(directory).iterdir()
        if p.is_file() and (is_word_list_file(p) or is_graph_file(p))
    )


def graph_output_path(word_list_path: str | Path) -> Path:
    """``words.txt`` → ``words-graph.json`` in the same directory."""
    source = Path(word_list_path)
    return source.with_name("{}{}".format(source.stem, GRAPH_SUFFIX))


def report_output_path(input_path: str | Path) -> Path:
    """``dir/words.txt`` → ``dir/reports/words-report.txt``.

    The reports directory is not created here.
    """
    source = Path(input_path)
    return source.parent / REPORTS_DIRNAME / "{}{}".format(source.stem, REPORT_SUFFIX)


def write_report(input_path: str | Path, report: str) -> Path:
    """Write ``report`` under the reports directory next to ``input_path``."""
    target = report_output_path(input_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(report, encoding="utf-8")
    return target


def is_under_git(path: str | Path) -> bool:
    """True if a .git directory exists in the file's directory or any parent."""
    current = Path(path).resolve().parent
    for directory in [current, *current.parents]:
        if (directory / ".git").exists():
            return True
    return False


def write_word_list(
    path: str | Path, words: Iterable[str], backup: bool = True
) -> Optional[Path]:
    """Rewrite a word list file, one word per line.

    When ``backup`` is True and the file is not under git control, the
    previous content is first copied to ``{path}.bak``.

    Returns:
        The backup path, or None if no backup was made.
    """
    target = Path(path)
    backup_path: Optional[Path] = None

    if backup and target.exists() and not is_under_git(target):
        backup_path = target.with_name(target.name + BACKUP_SUFFIX)
        shutil.copyfile(target, backup_path)
        logger.info("Backup created at %s", backup_path)

    target.write_text("".join("{}\n".format(word) for word in words), encoding="utf-8")
    return backup_path
