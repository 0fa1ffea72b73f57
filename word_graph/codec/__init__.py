"""Serialization of word records to and from the compact JSON form.

WHY: Graphs are built offline and shipped as JSON. The codec is the only
component that can receive malformed input, so it owns all validation
and all parse errors.

HOW: records.py converts one WordRecord to/from a SerializedRecord.
graph_json.py handles the whole-graph JSON object, validating its shape
with jsonschema before decoding individual records.

RULES:
- Empty operation kinds are omitted when encoding
- Absent keys decode to "no edges of that kind"
- Every decode failure names the offending word
"""

from word_graph.codec.graph_json import decode_graph, dumps, encode_graph, loads
from word_graph.codec.records import (
    WordGraphEncodeError,
    WordGraphParseError,
    decode_record,
    encode_record,
)

__all__ = [
    "WordGraphEncodeError",
    "WordGraphParseError",
    "decode_graph",
    "decode_record",
    "dumps",
    "encode_graph",
    "encode_record",
    "loads",
]
