"""Per-word record types for the word graph.

WHY: Every stage of the pipeline talks about the same thing: for one
word, which positions can be deleted, which letters can be inserted at
each gap, and which letters can replace each letter. Holding that in one
immutable, well-typed record decouples building from encoding and from
querying.

HOW: Two dataclasses:
  WordRecord       — the in-memory form, one tuple entry per position
  SerializedRecord — the compact textual form with optional fields

RULES:
- len(deletable) == len(replaceable) == len(text)
- len(insertable) == len(text) + 1 (one gap before each letter, one after)
- Letter sets are tuples in first-discovered order with no duplicates
- A replacement letter never equals the current letter at that position
- Records are frozen; derived data is memoized on the instance
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, Optional, Tuple

from word_graph.core.edits import flip_case


@dataclass(frozen=True)
class WordRecord:
    """All single-letter edits from one word that land on another known word.

    WHY: The UI and the connectivity analysis need per-position answers
    ("can this letter be deleted?", "what can go in this gap?") without
    searching the vocabulary again.

    HOW: Produced once by the builder or decoded from a serialized record.
    Case changes are stored as ordinary replacements with the case-flipped
    letter.

    RULES:
    - text: the word itself (the key)
    - deletable[i]: True iff removing text[i] yields a vocabulary word
    - insertable[i]: letters that can be inserted before text[i]
      (insertable[len(text)] is the gap after the last letter)
    - replaceable[i]: letters that can replace text[i]
    """

    text: str
    deletable: Tuple[bool, ...]
    insertable: Tuple[Tuple[str, ...], ...]
    replaceable: Tuple[Tuple[str, ...], ...]

    def __post_init__(self) -> None:
        length = len(self.text)
        if len(self.deletable) != length:
            raise ValueError(
                "deletable for '{}' has {} entries, expected {}".format(
                    self.text, len(self.deletable), length
                )
            )
        if len(self.insertable) != length + 1:
            raise ValueError(
                "insertable for '{}' has {} entries, expected {}".format(
                    self.text, len(self.insertable), length + 1
                )
            )
        if len(self.replaceable) != length:
            raise ValueError(
                "replaceable for '{}' has {} entries, expected {}".format(
                    self.text, len(self.replaceable), length
                )
            )

    @classmethod
    def empty(cls, text: str) -> WordRecord:
        """A record with no legal operations at any position."""
        length = len(text)
        return cls(
            text=text,
            deletable=(False,) * length,
            insertable=((),) * (length + 1),
            replaceable=((),) * length,
        )

    def can_delete(self, position: int) -> bool:
        return self.deletable[position]

    def insertions(self, position: int) -> Tuple[str, ...]:
        return self.insertable[position]

    def replacements(self, position: int) -> Tuple[str, ...]:
        return self.replaceable[position]

    def can_change_case(self, position: int) -> bool:
        """True if flipping the case of the letter at ``position`` is a legal move."""
        letter = self.text[position]
        flipped = flip_case(letter)
        return flipped != letter and flipped in self.replaceable[position]

    @property
    def has_edges(self) -> bool:
        return (
            any(self.deletable)
            or any(self.insertable)
            or any(self.replaceable)
        )

    @cached_property
    def candidate_words(self) -> Tuple[str, ...]:
        """Every word reachable by one stored operation, in traversal order.

        Order: deletions by position, then insertions by gap and letter
        order, then replacements by position and letter order. Duplicates
        are dropped, keeping the first occurrence. Candidates are NOT
        checked against any vocabulary here; the graph does that.
        """
        text = self.text
        seen: Dict[str, None] = {}

        for i, ok in enumerate(self.deletable):
            if ok:
                seen.setdefault(text[:i] + text[i + 1:], None)

        for i, letters in enumerate(self.insertable):
            for letter in letters:
                seen.setdefault(text[:i] + letter + text[i:], None)

        for i, letters in enumerate(self.replaceable):
            for letter in letters:
                seen.setdefault(text[:i] + letter + text[i + 1:], None)

        return tuple(seen)


@dataclass(frozen=True)
class SerializedRecord:
    """The compact textual form of a WordRecord.

    WHY: Graph files for tens of thousands of words are shipped to the
    browser. Reusing the word's own letters as delete flags and packing
    letter sets into slash-separated strings keeps them small.

    HOW: Each field is None when the word has no operation of that kind;
    absence and an empty string are different things and only absence is
    produced by the encoder.

    RULES:
    - delete: len(text) characters, the letter itself or "." per position
    - insert: len(text) + 1 fields separated by "/"
    - replace: len(text) fields separated by "/"
    - to_dict() drops None fields and never writes the legacy case keys
    - from_dict() also reads the legacy uppercase/lowercase flag strings
    """

    delete: Optional[str] = None
    insert: Optional[str] = None
    replace: Optional[str] = None
    uppercase: Optional[str] = field(default=None, compare=False)
    lowercase: Optional[str] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, str]:
        result: Dict[str, str] = {}
        if self.delete is not None:
            result["delete"] = self.delete
        if self.insert is not None:
            result["insert"] = self.insert
        if self.replace is not None:
            result["replace"] = self.replace
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> SerializedRecord:
        """Parse a SerializedRecord from a JSON object.

        The legacy ``uppercase``/``lowercase`` flag strings are carried
        through so the decoder can fold them into replacements.
        """
        return cls(
            delete=data.get("delete"),
            insert=data.get("insert"),
            replace=data.get("replace"),
            uppercase=data.get("uppercase"),
            lowercase=data.get("lowercase"),
        )
