"""Bucketed construction of word records from a vocabulary.

WHY: A vocabulary holds tens of thousands of words. Comparing every pair
is O(n²·L) and far too slow for an offline tool that is re-run whenever a
word list changes. Hashing each word's one-letter variants turns edge
discovery into near-linear work.

HOW: Three independent passes feed per-word accumulators, which are
then frozen into WordRecord objects:
  1. delete/insert — remove each letter in turn and look the result up
     in the vocabulary set; record the delete and the mirrored insert
  2. replace       — bucket every word under (position, prefix, suffix)
     for each position; words sharing a bucket differ only there
  3. case          — bucket case-bearing words by their lowercase form;
     connect each to the lowercase word and to sibling variants that
     are exactly one case flip away

RULES:
- Duplicate words are collapsed silently; the empty string is accepted
- Every edge is recorded in both directions by the builder itself
- Letter lists are deduplicated and keep first-discovered order
- Output is keyed and ordered by first occurrence in the vocabulary
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from word_graph.core.edits import is_single_case_change, is_single_replacement
from word_graph.core.records import WordRecord

logger = logging.getLogger(__name__)


def _add_unique(letters: List[str], letter: str) -> bool:
    """Append ``letter`` unless already present. Returns True if it was added."""
    if letter in letters:
        return False
    letters.append(letter)
    return True


class WordGraphBuilder:
    """Builds the complete set of WordRecords for a vocabulary.

    WHY: Callers (the graph, the CLI, tests) want one object that owns the
    vocabulary snapshot and the intermediate edge maps while they are
    being filled, and hands back immutable records at the end.

    HOW: The constructor snapshots the vocabulary. build() runs the three
    passes into mutable per-word lists and converts them to WordRecords.
    Each call to build() starts from empty accumulators.

    RULES:
    - The vocabulary is never mutated after construction
    - build() is deterministic for a given vocabulary order
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._words: List[str] = list(dict.fromkeys(words))
        self._word_set = frozenset(self._words)

        self._deletes: Dict[str, List[bool]] = {}
        self._inserts: Dict[str, List[List[str]]] = {}
        self._replaces: Dict[str, List[List[str]]] = {}

    @property
    def words(self) -> Tuple[str, ...]:
        """The deduplicated vocabulary in first-occurrence order."""
        return tuple(self._words)

    def build(self) -> Dict[str, WordRecord]:
        """Run all passes and return one WordRecord per vocabulary word."""
        self._deletes.clear()
        self._inserts.clear()
        self._replaces.clear()

        deletions = self._process_delete_insert_operations()
        replacements = self._process_replace_operations()
        case_changes = self._process_case_operations()

        logger.debug(
            "Built graph for %d words: %d delete edges, %d replace edges, %d case edges",
            len(self._words), deletions, replacements, case_changes,
        )

        return {word: self._create_record(word) for word in self._words}

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def _process_delete_insert_operations(self) -> int:
        count = 0
        for word in self._words:
            for i in range(len(word)):
                shorter = word[:i] + word[i + 1:]
                if shorter in self._word_set:
                    self._record_delete(word, i)
                    self._record_insert(shorter, i, word[i])
                    count += 1
        return count

    def _process_replace_operations(self) -> int:
        buckets: Dict[Tuple[int, str, str], List[str]] = defaultdict(list)
        for word in self._words:
            for i in range(len(word)):
                buckets[(i, word[:i], word[i + 1:])].append(word)

        count = 0
        for (position, _, _), bucket in buckets.items():
            if len(bucket) < 2:
                continue
            for a_index, a in enumerate(bucket):
                for b in bucket[a_index + 1:]:
                    self._record_replace(a, position, b[position])
                    self._record_replace(b, position, a[position])
                    count += 1
        return count

    def _process_case_operations(self) -> int:
        lower_case_map: Dict[str, List[str]] = defaultdict(list)
        for word in self._words:
            lowered = word.lower()
            if lowered != word:
                lower_case_map[lowered].append(word)

        count = 0
        for lowered, variants in lower_case_map.items():
            if lowered in self._word_set:
                for variant in variants:
                    if self._connect_case_pair(lowered, variant):
                        count += 1

            for a_index, a in enumerate(variants):
                for b in variants[a_index + 1:]:
                    if self._connect_case_pair(a, b):
                        count += 1
        return count

    def _connect_case_pair(self, a: str, b: str) -> bool:
        """Record mutual replace edges if ``a`` and ``b`` are one case flip apart."""
        if not is_single_case_change(a, b):
            return False
        replacement = is_single_replacement(a, b)
        self._record_replace(a, replacement.position, replacement.to_char)
        self._record_replace(b, replacement.position, replacement.from_char)
        return True

    # ------------------------------------------------------------------
    # Accumulators
    # ------------------------------------------------------------------

    def _record_delete(self, word: str, position: int) -> None:
        flags = self._deletes.get(word)
        if flags is None:
            flags = self._deletes[word] = [False] * len(word)
        flags[position] = True

    def _record_insert(self, word: str, position: int, letter: str) -> None:
        gaps = self._inserts.get(word)
        if gaps is None:
            gaps = self._inserts[word] = [[] for _ in range(len(word) + 1)]
        _add_unique(gaps[position], letter)

    def _record_replace(self, word: str, position: int, letter: str) -> None:
        slots = self._replaces.get(word)
        if slots is None:
            slots = self._replaces[word] = [[] for _ in range(len(word))]
        _add_unique(slots[position], letter)

    def _create_record(self, word: str) -> WordRecord:
        length = len(word)
        deletes = self._deletes.get(word)
        inserts = self._inserts.get(word)
        replaces = self._replaces.get(word)
        return WordRecord(
            text=word,
            deletable=tuple(deletes) if deletes else (False,) * length,
            insertable=tuple(tuple(g) for g in inserts) if inserts else ((),) * (length + 1),
            replaceable=tuple(tuple(s) for s in replaces) if replaces else ((),) * length,
        )


def build_records(words: Iterable[str]) -> Dict[str, WordRecord]:
    """Build WordRecords for ``words`` in one call."""
    return WordGraphBuilder(words).build()
