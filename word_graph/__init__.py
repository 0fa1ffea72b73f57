"""Word Graph: single-letter edit graph engine for spelling word lists.

WHY: The spelling app lets a child change a word one letter at a time
(delete, insert, replace, or flip a letter's case) and only ever lands
on another known word. Comparing every word with every other word is
quadratic in vocabulary size, so the legal moves are computed once,
offline, and shipped as a compact JSON graph.

HOW: Four-stage pipeline: build (bucketed edge discovery over the
vocabulary), encode (compact per-word records), decode (validated JSON
back into immutable records), query (neighbors and connected-component
analysis). Each stage is independently testable.

RULES:
- WordRecord is the stable contract between building, encoding and querying
- Edges are materialized in both directions at build time
- The serialized form omits empty operation keys
- Malformed serialized records fail fast, naming the offending word
"""

__version__ = "0.1.0"
