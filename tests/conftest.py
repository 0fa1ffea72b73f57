"""Shared test fixtures for the word_graph test suite.

WHY: Several test modules need the same small vocabularies and the graphs
built from them. Centralizing them here keeps every module on the same
data and makes expected edges easy to check by hand.

HOW: Plain lists hold the vocabularies; fixtures return fresh copies and
pre-built WordGraph instances.

RULES:
- SAMPLE_WORDS is the small three-letter starter vocabulary.
- Scenario vocabularies are tiny so every expected edge can be listed.
"""

from typing import List

import pytest

from word_graph.core.graph import WordGraph


SAMPLE_WORDS: List[str] = [
    "cat", "bat", "hat", "mat", "rat",
    "car", "bar", "far",
    "can", "ban", "fan", "ran",
    "cot", "dot", "hot", "lot", "rot",
    "cut", "but", "hut", "nut", "rut",
    "dog", "fog", "hog", "log", "bog",
    "dig", "fig", "pig", "rig", "big",
]

MIXED_WORDS: List[str] = [
    "cat", "bat", "rat", "hat", "mat", "sat",
    "at", "rats", "Rate", "rate",
    "paris", "Paris",
    "zebra",
]

CONNECTIVITY_WORDS: List[str] = ["cat", "bat", "dog", "cog", "fox"]


@pytest.fixture
def sample_words():
    return list(SAMPLE_WORDS)


@pytest.fixture
def mixed_words():
    return list(MIXED_WORDS)


@pytest.fixture
def sample_graph():
    return WordGraph.from_word_list(SAMPLE_WORDS)


@pytest.fixture
def mixed_graph():
    return WordGraph.from_word_list(MIXED_WORDS)


@pytest.fixture
def connectivity_graph():
    return WordGraph.from_word_list(CONNECTIVITY_WORDS)
