"""Whole-graph JSON encoding, decoding and shape validation.

WHY: Graph files are produced by this tool but also edited by hand and
loaded from older builds. The JSON must be checked for shape (an object
of objects with string fields) before any record is decoded, and each
failure must point at the word that caused it.

HOW: The shape is described by word_graph.schema.json and checked with
jsonschema. A ValidationError is translated into WordGraphParseError
naming the first path element (the word key). Records are then decoded
one by one with decode_record().

RULES:
- encode_graph() emits every word, words without edges as {}
- decode_graph() preserves the key order of the input object
- Invalid JSON text raises WordGraphParseError with word=None
- Decoding stops at the first bad record; no partial graph is returned
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import jsonschema

from word_graph.codec.records import WordGraphParseError, decode_record, encode_record
from word_graph.core.records import WordRecord

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent / "word_graph.schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    """Load and cache the word graph JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _validate_shape(data: Any) -> None:
    try:
        jsonschema.validate(instance=data, schema=_get_schema())
    except jsonschema.ValidationError as exc:
        path = list(exc.absolute_path)
        word = str(path[0]) if path else None
        logger.warning("Word graph failed schema validation at %s: %s", path, exc.message)
        raise WordGraphParseError(word, exc.message) from exc


def encode_graph(records: Mapping[str, WordRecord]) -> Dict[str, Dict[str, str]]:
    """Convert WordRecords into the JSON object form, one entry per word."""
    return {word: encode_record(record).to_dict() for word, record in records.items()}


def decode_graph(data: Any) -> Dict[str, WordRecord]:
    """Validate and decode the JSON object form into WordRecords.

    Args:
        data: The parsed JSON value, expected to be an object keyed by word.

    Returns:
        Dict mapping each word to its decoded WordRecord, in input order.

    Raises:
        WordGraphParseError: If the shape is wrong or any record is malformed.
    """
    _validate_shape(data)

    records: Dict[str, WordRecord] = {}
    for word, entry in data.items():
        try:
            records[word] = decode_record(word, entry)
        except WordGraphParseError as exc:
            logger.warning("Rejected word graph record: %s", exc)
            raise
    logger.debug("Decoded %d word records", len(records))
    return records


def dumps(records: Mapping[str, WordRecord], indent: Optional[int] = 2) -> str:
    """Serialize WordRecords to JSON text."""
    return json.dumps(encode_graph(records), indent=indent, ensure_ascii=False)


def loads(text: str) -> Dict[str, WordRecord]:
    """Parse JSON text and decode it into WordRecords.

    Raises:
        WordGraphParseError: If the text is not valid JSON or not a valid graph.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise WordGraphParseError(None, "Not valid JSON: {}".format(exc)) from exc
    return decode_graph(data)
