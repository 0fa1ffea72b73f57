"""Pure single-edit predicates between two words.

WHY: The builder, the tests and the UI glue all need the same answer to
"are these two words one delete / one replacement / one case flip
apart, and where?". Keeping the answer in plain functions means there is
one definition of adjacency.

HOW: Each predicate walks the two strings once and returns the position
(and letters) of the single difference, or None.

RULES:
- Words are compared code point by code point
- Words whose lengths differ by more than 1 are never adjacent
- Identical words are never adjacent to themselves
- A case-only difference at one index is a replacement
"""

from __future__ import annotations

from typing import NamedTuple, Optional


class Replacement(NamedTuple):
    """Where two equal-length words differ and which letters are swapped."""

    position: int
    from_char: str
    to_char: str


def is_single_deletion(longer: str, shorter: str) -> Optional[int]:
    """Return the position in ``longer`` whose removal yields ``shorter``.

    The position is the first index where the two strings diverge (or
    the last index of ``longer`` when ``shorter`` is a prefix of it).
    When a doubled letter is removed, deleting any copy gives the same
    result; this returns the first divergence point.

    Returns None if the lengths are not ``n + 1`` and ``n`` or if more
    than one removal would be needed.
    """
    if len(longer) != len(shorter) + 1:
        return None

    position = len(shorter)
    for i, ch in enumerate(shorter):
        if longer[i] != ch:
            position = i
            break

    if longer[position + 1:] != shorter[position:]:
        return None
    return position


def is_single_replacement(a: str, b: str) -> Optional[Replacement]:
    """Return the single index at which equal-length ``a`` and ``b`` differ.

    A case-only difference counts. Returns None when the lengths differ,
    when the words are identical, or when two or more indices differ.
    """
    if len(a) != len(b):
        return None

    found: Optional[Replacement] = None
    for i, (ca, cb) in enumerate(zip(a, b)):
        if ca != cb:
            if found is not None:
                return None
            found = Replacement(i, ca, cb)
    return found


def is_single_case_change(a: str, b: str) -> bool:
    """True if ``a`` and ``b`` differ only by the case of one letter."""
    replacement = is_single_replacement(a, b)
    if replacement is None:
        return False
    return replacement.from_char.lower() == replacement.to_char.lower()


def flip_case(letter: str) -> str:
    """Swap the case of a single letter; non-cased characters come back unchanged."""
    if letter.isupper():
        return letter.lower()
    return letter.upper()
