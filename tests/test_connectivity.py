"""Tests for connected components, the text report and trimming.

WHY: Curators decide which words to drop based on this report. Wrong
component boundaries or a miscounted "(and N more)" would send them
after the wrong words, and a recursive traversal would fall over on a
real word list.

HOW: Small vocabularies with hand-listed components, a hand-built
ConnectivityResult for the truncation paths, and one large chain-heavy
vocabulary for traversal depth.
"""

import itertools

import pytest

from word_graph.core.connectivity import (
    ConnectivityAnalyzer,
    ConnectivityResult,
    format_report,
    trim_small_components,
)
from word_graph.core.graph import WordGraph


class TestComponents:

    def test_cat_bat_dog_cog_fox(self, connectivity_graph):
        components = ConnectivityAnalyzer(connectivity_graph).components()
        assert components == [["cat", "bat"], ["dog", "cog"], ["fox"]]

    def test_largest_first(self):
        graph = WordGraph.from_word_list(["fox", "dog", "cog", "cat", "bat", "hat"])
        components = ConnectivityAnalyzer(graph).components()

        assert [len(c) for c in components] == [3, 2, 1]
        assert components[2] == ["fox"]

    def test_members_in_dfs_order(self):
        graph = WordGraph.from_word_list(["cat", "cot", "cog", "dog"])
        assert ConnectivityAnalyzer(graph).components() == [["cat", "cot", "cog", "dog"]]

    def test_cycle_terminates(self):
        # cat -> bat -> bad -> cad -> cat
        graph = WordGraph.from_word_list(["cat", "bat", "bad", "cad"])
        components = ConnectivityAnalyzer(graph).components()

        assert len(components) == 1
        assert sorted(components[0]) == ["bad", "bat", "cad", "cat"]

    def test_partition_covers_vocabulary(self, mixed_graph):
        components = ConnectivityAnalyzer(mixed_graph).components()
        members = [word for component in components for word in component]

        assert sorted(members) == sorted(mixed_graph.words)
        assert all(components)

    def test_case_and_length_edges_join_components(self, mixed_graph):
        result = ConnectivityAnalyzer(mixed_graph).analyze()
        sets = result.component_sets()

        assert {"cat", "at", "rats", "rate", "Rate"} <= sets[0]
        assert {"paris", "Paris"} in sets
        assert result.isolated_words == ["zebra"]

    def test_empty_graph(self):
        result = ConnectivityAnalyzer(WordGraph({})).analyze()

        assert result.total_words == 0
        assert result.components == []
        assert result.isolated_words == []

    def test_analysis_is_repeatable(self, sample_graph):
        analyzer = ConnectivityAnalyzer(sample_graph)
        assert analyzer.analyze() == analyzer.analyze()

    def test_isolated_words(self, connectivity_graph):
        assert ConnectivityAnalyzer(connectivity_graph).isolated_words() == ["fox"]

    def test_deep_component_does_not_recurse(self):
        words = ["".join(chars) for chars in itertools.product("ab", repeat=11)]
        components = ConnectivityAnalyzer(WordGraph.from_word_list(words)).components()

        assert len(components) == 1
        assert len(components[0]) == 2048


class TestReport:

    def test_report_text(self, connectivity_graph):
        report = ConnectivityAnalyzer(connectivity_graph).report(sample_size=10, isolated_limit=20)

        assert report == (
            "Word Graph Connectivity Report\n"
            "==============================\n"
            "\n"
            "Total words: 5\n"
            "Connected components: 3\n"
            "\n"
            "Component 1: 2 words\n"
            "Sample words: cat, bat\n"
            "\n"
            "Component 2: 2 words\n"
            "Sample words: dog, cog\n"
            "\n"
            "Component 3: 1 word\n"
            "Sample words: fox\n"
            "\n"
            "Isolated words: 1\n"
            "Words: fox\n"
        )

    def test_no_isolated_section_when_none(self):
        graph = WordGraph.from_word_list(["cat", "bat"])
        report = ConnectivityAnalyzer(graph).report(sample_size=10, isolated_limit=20)

        assert "Isolated words" not in report
        assert report.endswith("Sample words: cat, bat\n\n")

    def test_sample_words_truncated(self):
        component = ["w{:02d}".format(i) for i in range(12)]
        result = ConnectivityResult(total_words=12, components=[component])

        report = format_report(result, sample_size=10, isolated_limit=20)

        assert "Component 1: 12 words\n" in report
        assert "Sample words: {} (and 2 more)\n".format(", ".join(component[:10])) in report

    def test_isolated_list_truncated(self):
        isolated = ["w{:02d}".format(i) for i in range(25)]
        result = ConnectivityResult(total_words=25, components=[[w] for w in isolated])

        report = format_report(result, sample_size=10, isolated_limit=20)

        assert "Isolated words: 25\n" in report
        assert report.endswith(
            "First 20: {}, ... (and 5 more)\n".format(", ".join(isolated[:20]))
        )

    def test_isolated_list_at_limit_not_truncated(self):
        isolated = ["w{:02d}".format(i) for i in range(20)]
        result = ConnectivityResult(total_words=20, components=[[w] for w in isolated])

        report = format_report(result, sample_size=10, isolated_limit=20)

        assert report.endswith("Words: {}\n".format(", ".join(isolated)))


class TestTrim:

    def test_trim_singletons(self, connectivity_graph):
        kept, removed = trim_small_components(connectivity_graph.words, 1)

        assert kept == ["cat", "bat", "dog", "cog"]
        assert removed == [["fox"]]

    def test_trim_pairs(self):
        kept, removed = trim_small_components(["cat", "bat", "hat", "dog", "cog", "fox"], 2)

        assert kept == ["cat", "bat", "hat"]
        assert removed == [["dog", "cog"], ["fox"]]

    def test_trim_everything(self, connectivity_graph):
        kept, removed = trim_small_components(connectivity_graph.words, 5)

        assert kept == []
        assert len(removed) == 3

    def test_nothing_to_trim(self):
        kept, removed = trim_small_components(["cat", "bat"], 1)

        assert kept == ["cat", "bat"]
        assert removed == []

    def test_kept_words_rebuild_to_larger_components(self, mixed_words):
        kept, _ = trim_small_components(mixed_words, 2)
        components = ConnectivityAnalyzer(WordGraph.from_word_list(kept)).components()

        assert "zebra" not in kept
        assert "paris" not in kept
        assert all(len(component) > 2 for component in components)

    @pytest.mark.parametrize("max_size", [0, -3])
    def test_rejects_non_positive_size(self, max_size):
        with pytest.raises(ValueError):
            trim_small_components(["cat"], max_size)
