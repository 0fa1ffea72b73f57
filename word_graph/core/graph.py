"""Query-time word graph over decoded word records.

WHY: At runtime the app needs fast answers to "is this a word?", "what
are the legal moves from here?" and "which words are one move away?".
Pre-materializing an adjacency list would store every edge twice; the
per-position records already describe every edge once.

HOW: WordGraph holds the vocabulary (ordered tuple plus a frozenset for
membership) and a dict of WordRecords. Neighbors are derived on demand
from a record's candidate words, filtered against the vocabulary so a
stale or foreign reference in a loaded file never leaks out.

RULES:
- A WordGraph owns its records exclusively and is never mutated
- neighbors() of an unknown word is an empty set, not an error
- require() raises MissingWordError for an unknown word
- Vocabulary words without a record behave as words with no edges
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

from word_graph.codec.graph_json import decode_graph, encode_graph
from word_graph.core.builder import WordGraphBuilder
from word_graph.core.records import WordRecord


class MissingWordError(LookupError):
    """Raised when a required word is not in the graph.

    WHY: Callers that expect a word to exist (e.g. the UI moving to a
    neighbor it was just offered) must be able to tell a caller bug from a
    legitimately absent word, instead of getting a silent default.

    HOW: Raised by WordGraph.require(); carries the missing word.
    """

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__("Word '{}' not found".format(word))


class WordGraph:
    """An immutable vocabulary plus its per-word edit records.

    WHY: One object answers every runtime query and also exposes the raw
    records for serialization and for connectivity analysis.

    HOW: Constructed from records (built or decoded). Every record key is
    a vocabulary word; extra ``words`` may be supplied for vocabulary
    entries that have no record.
    """

    def __init__(
        self,
        records: Mapping[str, WordRecord],
        words: Optional[Iterable[str]] = None,
    ) -> None:
        self._records: Dict[str, WordRecord] = dict(records)
        ordered = list(self._records)
        if words is not None:
            ordered.extend(words)
        self._words: Tuple[str, ...] = tuple(dict.fromkeys(ordered))
        self._word_set = frozenset(self._words)
        for word in self._words:
            if word not in self._records:
                self._records[word] = WordRecord.empty(word)
        self._max_word_length = max((len(w) for w in self._words), default=0)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_word_list(cls, words: Iterable[str]) -> WordGraph:
        """Build a graph straight from a vocabulary."""
        builder = WordGraphBuilder(words)
        return cls(builder.build(), builder.words)

    @classmethod
    def from_json(cls, data: Any) -> WordGraph:
        """Decode a graph from its parsed JSON object form.

        Raises:
            WordGraphParseError: If the data is malformed.
        """
        return cls(decode_graph(data))

    def to_json(self) -> Dict[str, Dict[str, str]]:
        """Encode the graph to its JSON object form; every word gets an entry."""
        return encode_graph(self.records)

    # ------------------------------------------------------------------
    # Vocabulary
    # ------------------------------------------------------------------

    @property
    def words(self) -> Tuple[str, ...]:
        """Vocabulary in insertion order."""
        return self._words

    def sorted_words(self) -> List[str]:
        return sorted(self._words)

    def contains(self, word: str) -> bool:
        return word in self._word_set

    def __contains__(self, word: object) -> bool:
        return word in self._word_set

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def max_word_length(self) -> int:
        """Length of the longest word; 0 for an empty graph."""
        return self._max_word_length

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def lookup(self, word: str) -> Optional[WordRecord]:
        """Return the record for ``word``, or None if it is not in the graph."""
        return self._records.get(word)

    def require(self, word: str) -> WordRecord:
        """Return the record for ``word``.

        Raises:
            MissingWordError: If ``word`` is not in the graph.
        """
        record = self.lookup(word)
        if record is None:
            raise MissingWordError(word)
        return record

    @property
    def records(self) -> Mapping[str, WordRecord]:
        """Every word's record, in vocabulary order."""
        return {word: self._records[word] for word in self._words}

    # ------------------------------------------------------------------
    # Neighbors
    # ------------------------------------------------------------------

    def iter_neighbors(self, word: str) -> Iterator[str]:
        """Yield the words one legal move away, in traversal order.

        Order is deletions by position, then insertions by gap, then
        replacements by position, each in stored letter order. Candidates
        absent from the vocabulary are skipped.
        """
        record = self._records.get(word)
        if record is None:
            return
        for candidate in record.candidate_words:
            if candidate in self._word_set and candidate != word:
                yield candidate

    def neighbors(self, word: str) -> Set[str]:
        """The set of words one legal delete, insert or replace away."""
        return set(self.iter_neighbors(word))
