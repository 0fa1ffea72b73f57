"""Core graph engine modules.

WHY: The core package is the heart of the tooling: the record types,
the edit predicates, the bucketed graph builder, the query-time graph and
the connectivity analysis. Everything else (codec, CLI, file handling)
consumes these.

HOW: records.py defines the data structures, edits.py the pure edit
predicates, builder.py builds records from a vocabulary, graph.py answers
queries over them, connectivity.py partitions the graph into components.

RULES:
- WordRecord is the contract; change with care
- No file or network I/O in this package
- Everything here is synchronous and free of shared mutable state
"""
