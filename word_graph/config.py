"""Configuration constants and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. File naming conventions, serialized-format
characters and report limits are plain data, not buried in logic, so
the CLI, the codec and the tests all agree on them.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values; the tunable ones read an environment variable
with a default.

RULES:
- Graph files are written as {stem}-graph.json next to the word list
- Reports are written to a reports/ directory next to the input file
- "." marks an illegal delete position, "/" separates per-position fields
- All tunable defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the tool is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Serialized format characters
# ---------------------------------------------------------------------------

DELETE_PLACEHOLDER = "."
"""Marks a position in the ``delete`` string where deletion is illegal."""

FIELD_SEPARATOR = "/"
"""Separates per-position fields in the ``insert`` and ``replace`` strings."""

# ---------------------------------------------------------------------------
# File naming
# ---------------------------------------------------------------------------

WORD_LIST_SUFFIX = ".txt"
GRAPH_SUFFIX = "-graph.json"
REPORTS_DIRNAME = "reports"
REPORT_SUFFIX = "-report.txt"
BACKUP_SUFFIX = ".bak"

WORDLISTS_DIR = os.getenv("WORD_GRAPH_WORDLISTS_DIR", os.path.join("data", "wordlists"))

# ---------------------------------------------------------------------------
# Reporting and logging
# ---------------------------------------------------------------------------

REPORT_SAMPLE_SIZE = int(os.getenv("WORD_GRAPH_REPORT_SAMPLE_SIZE", "10"))
REPORT_ISOLATED_LIMIT = int(os.getenv("WORD_GRAPH_REPORT_ISOLATED_LIMIT", "20"))

LOG_LEVEL = os.getenv("WORD_GRAPH_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
