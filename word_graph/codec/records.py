"""Encoding and decoding of single word records.

WHY: The compact per-word strings are easy to get subtly wrong: a
delete string one character short, an insert list with a missing slash.
A corrupted record would silently produce a wrong graph, so every
decode is length-checked and letter-checked against its key word.

HOW: encode_record() turns the per-position tuples of a WordRecord into
the three optional strings. decode_record() reverses it, raising
WordGraphParseError with the word and a description of the problem.

RULES:
- delete: the word's letter where deletion is legal, "." elsewhere
- insert: len+1 "/"-separated fields; replace: len "/"-separated fields
- A kind with no legal operation is omitted (None), never all-empty
- Decoded letter sets are deduplicated, keeping first occurrence
- A replacement letter equal to the current letter is malformed
- Legacy uppercase/lowercase flags decode into case-flip replacements
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple, Union

from word_graph.config import DELETE_PLACEHOLDER, FIELD_SEPARATOR
from word_graph.core.edits import flip_case
from word_graph.core.records import SerializedRecord, WordRecord


class WordGraphParseError(ValueError):
    """Raised when a serialized record does not match its key word.

    WHY: A malformed graph file must fail loudly at load time with enough
    context to find the bad entry, rather than yielding a half-built
    graph.

    HOW: Carries the offending word (None when the problem is not tied to
    one entry, e.g. invalid JSON) and a human-readable detail.

    RULES:
    - Always include the word when one is known
    - detail describes what was expected and what was found
    """

    def __init__(self, word: Optional[str], detail: str) -> None:
        self.word = word
        self.detail = detail
        if word is None:
            super().__init__("Invalid word graph: {}".format(detail))
        else:
            super().__init__("Invalid word graph record for '{}': {}".format(word, detail))


class WordGraphEncodeError(ValueError):
    """Raised when a record holds data the compact format cannot express.

    The delete string uses "." as its placeholder and the insert/replace
    strings use "/" as their separator, so a deletable "." or a "/"
    letter would not survive a round trip.
    """


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _encode_flags(text: str, flags: Tuple[bool, ...]) -> Optional[str]:
    if not any(flags):
        return None
    chars: List[str] = []
    for letter, flag in zip(text, flags):
        if flag:
            if letter == DELETE_PLACEHOLDER:
                raise WordGraphEncodeError(
                    "Cannot encode deletable '{}' in '{}': it is the placeholder".format(
                        letter, text
                    )
                )
            chars.append(letter)
        else:
            chars.append(DELETE_PLACEHOLDER)
    return "".join(chars)


def _encode_fields(text: str, fields: Tuple[Tuple[str, ...], ...]) -> Optional[str]:
    if not any(fields):
        return None
    for letters in fields:
        if FIELD_SEPARATOR in letters:
            raise WordGraphEncodeError(
                "Cannot encode letter '{}' for '{}': it is the field separator".format(
                    FIELD_SEPARATOR, text
                )
            )
    return FIELD_SEPARATOR.join("".join(letters) for letters in fields)


def encode_record(record: WordRecord) -> SerializedRecord:
    """Convert a WordRecord into its compact serialized form.

    Raises:
        WordGraphEncodeError: If the record cannot be represented.
    """
    return SerializedRecord(
        delete=_encode_flags(record.text, record.deletable),
        insert=_encode_fields(record.text, record.insertable),
        replace=_encode_fields(record.text, record.replaceable),
    )


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _decode_flags(word: str, key: str, value: Optional[str]) -> Tuple[bool, ...]:
    length = len(word)
    if value is None:
        return (False,) * length
    if len(value) != length:
        raise WordGraphParseError(
            word,
            "Expected '{}' string of length {}, got {} ('{}')".format(key, length, len(value), value),
        )
    flags: List[bool] = []
    for i, (char, letter) in enumerate(zip(value, word)):
        if char == DELETE_PLACEHOLDER:
            flags.append(False)
        elif char == letter:
            flags.append(True)
        else:
            raise WordGraphParseError(
                word,
                "'{}' string has '{}' at position {}, expected '{}' or '{}'".format(
                    key, char, i, letter, DELETE_PLACEHOLDER
                ),
            )
    return tuple(flags)


def _decode_fields(
    word: str, key: str, value: Optional[str], expected: int
) -> List[Tuple[str, ...]]:
    if value is None:
        return [() for _ in range(expected)]
    parts = value.split(FIELD_SEPARATOR)
    if len(parts) != expected:
        raise WordGraphParseError(
            word,
            "Expected {} '{}' fields in '{}', got {}".format(expected, key, value, len(parts)),
        )
    return [tuple(dict.fromkeys(part)) for part in parts]


def _check_replacements(word: str, fields: List[Tuple[str, ...]]) -> None:
    for i, letters in enumerate(fields):
        if word[i] in letters:
            raise WordGraphParseError(
                word,
                "'replace' field {} lists the current letter '{}'".format(i, word[i]),
            )


def _fold_case_flags(
    word: str, fields: List[Tuple[str, ...]], key: str, value: Optional[str]
) -> None:
    """Merge a legacy uppercase/lowercase flag string into replacement fields."""
    flags = _decode_flags(word, key, value)
    for i, flag in enumerate(flags):
        if not flag:
            continue
        flipped = flip_case(word[i])
        if len(flipped) != 1 or flipped == word[i]:
            raise WordGraphParseError(
                word,
                "'{}' flags position {} but '{}' has no single-letter case flip".format(
                    key, i, word[i]
                ),
            )
        if flipped not in fields[i]:
            fields[i] = fields[i] + (flipped,)


def _coerce(word: str, data: Union[SerializedRecord, Mapping[str, Any]]) -> SerializedRecord:
    if isinstance(data, SerializedRecord):
        return data
    if not isinstance(data, Mapping):
        raise WordGraphParseError(
            word, "Expected an object, got {}".format(type(data).__name__)
        )
    for key, value in data.items():
        if value is not None and not isinstance(value, str):
            raise WordGraphParseError(
                word,
                "Field '{}' must be a string, got {}".format(key, type(value).__name__),
            )
    return SerializedRecord.from_dict(dict(data))


def decode_record(
    word: str, data: Union[SerializedRecord, Mapping[str, Any]]
) -> WordRecord:
    """Rebuild a WordRecord for ``word`` from its serialized form.

    Args:
        word: The key word the record belongs to.
        data: A SerializedRecord or the raw JSON object for the word.

    Returns:
        The decoded WordRecord.

    Raises:
        WordGraphParseError: If any present field does not fit ``word``.
    """
    serialized = _coerce(word, data)
    length = len(word)

    deletable = _decode_flags(word, "delete", serialized.delete)
    insertable = _decode_fields(word, "insert", serialized.insert, length + 1)
    replaceable = _decode_fields(word, "replace", serialized.replace, length)
    _check_replacements(word, replaceable)

    if serialized.uppercase is not None:
        _fold_case_flags(word, replaceable, "uppercase", serialized.uppercase)
    if serialized.lowercase is not None:
        _fold_case_flags(word, replaceable, "lowercase", serialized.lowercase)

    return WordRecord(
        text=word,
        deletable=deletable,
        insertable=tuple(insertable),
        replaceable=tuple(replaceable),
    )
