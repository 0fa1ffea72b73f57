"""Connected-component analysis and reporting for word graphs.

WHY: A word the child can never reach (or can never leave) is a dead
end in the game. Word-list curators need to see isolated words and
small islands so they can add bridging words or drop the islands.

HOW: ConnectivityAnalyzer runs a depth-first traversal from each
unvisited word in vocabulary order, collecting one component per start.
The traversal keeps an explicit stack of neighbor iterators, so it
visits words in exactly the order a recursive DFS would without being
bounded by the interpreter's recursion limit. Components are then
ranked largest first; ties keep discovery order.

RULES:
- Every word belongs to exactly one non-empty component
- Visited words are never re-entered, so cycles terminate
- Members of a component are listed in DFS visit order
- The report shows up to REPORT_SAMPLE_SIZE samples per component and
  lists up to REPORT_ISOLATED_LIMIT isolated words before truncating
- Trimming returns a filtered vocabulary; the caller rebuilds from it
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Set, Tuple

from word_graph.config import REPORT_ISOLATED_LIMIT, REPORT_SAMPLE_SIZE
from word_graph.core.graph import WordGraph

logger = logging.getLogger(__name__)


@dataclass
class ConnectivityResult:
    """The component partition of one graph.

    RULES:
    - total_words: vocabulary size of the analyzed graph
    - components: word lists, largest first, ties in discovery order
    """

    total_words: int
    components: List[List[str]] = field(default_factory=list)

    @property
    def isolated_words(self) -> List[str]:
        """Words that form a component on their own, in ranked order."""
        return [component[0] for component in self.components if len(component) == 1]

    def component_sets(self) -> List[Set[str]]:
        return [set(component) for component in self.components]


class ConnectivityAnalyzer:
    """Partitions a WordGraph into connected components.

    WHY: The graph's neighbor relation is symmetric, so a plain DFS from
    each unvisited word finds exactly its connected component.

    HOW: components() runs the traversal; analyze() wraps the result with
    the word count; report() formats it as plain text.
    """

    def __init__(self, graph: WordGraph) -> None:
        self.graph = graph

    def components(self) -> List[List[str]]:
        """Return all connected components, largest first."""
        visited: Set[str] = set()
        found: List[List[str]] = []

        for word in self.graph.words:
            if word not in visited:
                found.append(self._collect_component(word, visited))

        # sorted() is stable, so equal sizes keep discovery order
        ranked = sorted(found, key=len, reverse=True)
        logger.debug(
            "Found %d components over %d words", len(ranked), len(self.graph)
        )
        return ranked

    def _collect_component(self, start: str, visited: Set[str]) -> List[str]:
        visited.add(start)
        component = [start]
        stack: List[Iterator[str]] = [self.graph.iter_neighbors(start)]

        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    component.append(neighbor)
                    stack.append(self.graph.iter_neighbors(neighbor))
                    break
            else:
                stack.pop()

        return component

    def analyze(self) -> ConnectivityResult:
        return ConnectivityResult(
            total_words=len(self.graph),
            components=self.components(),
        )

    def isolated_words(self) -> List[str]:
        return self.analyze().isolated_words

    def report(
        self,
        sample_size: int = REPORT_SAMPLE_SIZE,
        isolated_limit: int = REPORT_ISOLATED_LIMIT,
    ) -> str:
        return format_report(self.analyze(), sample_size, isolated_limit)


def format_report(
    result: ConnectivityResult,
    sample_size: int = REPORT_SAMPLE_SIZE,
    isolated_limit: int = REPORT_ISOLATED_LIMIT,
) -> str:
    """Render a ConnectivityResult as a plain-text report.

    Layout: a title, the total word and component counts, one block per
    component (size plus sample words, with "(and N more)" when
    truncated), and a trailing section listing isolated words.
    """
    lines: List[str] = [
        "Word Graph Connectivity Report",
        "==============================",
        "",
        "Total words: {}".format(result.total_words),
        "Connected components: {}".format(len(result.components)),
        "",
    ]

    for index, component in enumerate(result.components, start=1):
        size = len(component)
        samples = component[:sample_size]
        lines.append("Component {}: {} {}".format(index, size, "word" if size == 1 else "words"))
        sample_line = "Sample words: {}".format(", ".join(samples))
        if size > len(samples):
            sample_line += " (and {} more)".format(size - len(samples))
        lines.append(sample_line)
        lines.append("")

    isolated = result.isolated_words
    if isolated:
        lines.append("Isolated words: {}".format(len(isolated)))
        if len(isolated) <= isolated_limit:
            lines.append("Words: {}".format(", ".join(isolated)))
        else:
            lines.append(
                "First {}: {}, ... (and {} more)".format(
                    isolated_limit,
                    ", ".join(isolated[:isolated_limit]),
                    len(isolated) - isolated_limit,
                )
            )

    return "\n".join(lines) + "\n"


def trim_small_components(
    words: Iterable[str], max_size: int
) -> Tuple[List[str], List[List[str]]]:
    """Drop every word whose component has at most ``max_size`` words.

    Args:
        words: The vocabulary, in file order. Duplicates are kept as-is in
            the returned list if their component survives.
        max_size: Components of this size or smaller are removed.

    Returns:
        Tuple of (kept words in original order, removed components).

    Raises:
        ValueError: If max_size is less than 1.
    """
    if max_size < 1:
        raise ValueError("Maximum component size must be a positive number, got {}".format(max_size))

    word_list = list(words)
    graph = WordGraph.from_word_list(word_list)
    components = ConnectivityAnalyzer(graph).components()

    removed = [component for component in components if len(component) <= max_size]
    to_remove = {word for component in removed for word in component}
    kept = [word for word in word_list if word not in to_remove]

    logger.info(
        "Trimming %d components (%d words) of size <= %d",
        len(removed), len(to_remove), max_size,
    )
    return kept, removed
