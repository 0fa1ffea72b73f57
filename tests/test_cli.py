"""End-to-end tests for the word-graph CLI.

WHY: The CLI is what curators actually run. It must write graph files
where the app expects them, keep stdout clean for the report, keep going
past a bad file, and never rewrite a word list without a way back.

HOW: main() is called with explicit argv against files in tmp_path.
stdout/stderr are captured with capsys; git detection is monkeypatched
so backup behavior does not depend on where the tests run.
"""

import json

import pytest

from word_graph import cli, wordlists
from word_graph.cli import build_parser, main


def _write(path, words):
    path.write_text("".join("{}\n".format(w) for w in words), encoding="utf-8")
    return path


class TestParser:

    def test_subcommand_required(self):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args([])
        assert excinfo.value.code == 2

    def test_trim_requires_integer_size(self):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["trim", "words.txt", "two"])
        assert excinfo.value.code == 2

    def test_paths_are_optional(self):
        args = build_parser().parse_args(["analyze"])
        assert args.command == "analyze"
        assert args.path is None


class TestGenerate:

    def test_generate_single_file(self, tmp_path, capsys):
        source = _write(tmp_path / "words.txt", ["cat", "at", "bat"])

        main(["generate", str(source)])

        output = tmp_path / "words-graph.json"
        assert json.loads(output.read_text(encoding="utf-8")) == {
            "cat": {"delete": "c..", "replace": "b//"},
            "at": {"insert": "cb//"},
            "bat": {"delete": "b..", "replace": "c//"},
        }
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Loaded 3 words." in captured.err

    def test_generate_directory(self, tmp_path):
        _write(tmp_path / "a.txt", ["cat", "bat"])
        _write(tmp_path / "b.txt", ["dog"])

        main(["generate", str(tmp_path)])

        assert (tmp_path / "a-graph.json").exists()
        assert json.loads((tmp_path / "b-graph.json").read_text(encoding="utf-8")) == {"dog": {}}

    def test_generate_default_directory(self, tmp_path, monkeypatch):
        _write(tmp_path / "words.txt", ["cat"])
        monkeypatch.setattr(cli, "WORDLISTS_DIR", str(tmp_path))

        main(["generate"])

        assert (tmp_path / "words-graph.json").exists()

    def test_generate_empty_directory(self, tmp_path, capsys):
        main(["generate", str(tmp_path)])
        assert "No .txt word list files found" in capsys.readouterr().err

    def test_generate_missing_path(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["generate", str(tmp_path / "missing.txt")])

        assert excinfo.value.code == 1
        assert "Error: Path not found" in capsys.readouterr().err

    def test_generate_rejects_graph_file(self, tmp_path):
        graph = tmp_path / "words-graph.json"
        graph.write_text("{}", encoding="utf-8")

        with pytest.raises(SystemExit) as excinfo:
            main(["generate", str(graph)])
        assert excinfo.value.code == 1


class TestAnalyze:

    def test_analyze_word_list(self, tmp_path, capsys):
        source = _write(tmp_path / "words.txt", ["cat", "bat", "dog", "cog", "fox"])

        main(["analyze", str(source)])

        captured = capsys.readouterr()
        assert "Total words: 5" in captured.out
        assert "Connected components: 3" in captured.out
        assert "Words: fox" in captured.out
        assert "Total words" not in captured.err

        report = tmp_path / "reports" / "words-report.txt"
        assert report.read_text(encoding="utf-8").startswith("Word Graph Connectivity Report\n")

    def test_analyze_graph_file(self, tmp_path, capsys):
        source = _write(tmp_path / "words.txt", ["cat", "bat", "fox"])
        main(["generate", str(source)])
        capsys.readouterr()

        main(["analyze", str(tmp_path / "words-graph.json")])

        captured = capsys.readouterr()
        assert "Connected components: 2" in captured.out
        assert "pre-computed graph with 3 words" in captured.err
        assert (tmp_path / "reports" / "words-graph-report.txt").exists()

    def test_bad_file_does_not_stop_others(self, tmp_path, capsys):
        (tmp_path / "a-graph.json").write_text('{"cat": {"delete": "c"}}', encoding="utf-8")
        _write(tmp_path / "b.txt", ["cat", "bat"])

        with pytest.raises(SystemExit) as excinfo:
            main(["analyze", str(tmp_path)])

        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        assert "Error processing" in captured.err
        assert "'cat'" in captured.err
        assert (tmp_path / "reports" / "b-report.txt").exists()

    def test_analyze_unsupported_file(self, tmp_path):
        notes = tmp_path / "notes.md"
        notes.write_text("cat\n", encoding="utf-8")

        with pytest.raises(SystemExit) as excinfo:
            main(["analyze", str(notes)])
        assert excinfo.value.code == 1


class TestTrim:

    @pytest.fixture
    def no_git(self, monkeypatch):
        monkeypatch.setattr(cli, "is_under_git", lambda path: False)
        monkeypatch.setattr(wordlists, "is_under_git", lambda path: False)

    @pytest.fixture
    def in_git(self, monkeypatch):
        monkeypatch.setattr(cli, "is_under_git", lambda path: True)
        monkeypatch.setattr(wordlists, "is_under_git", lambda path: True)

    def test_trim_with_backup(self, tmp_path, capsys, no_git):
        source = _write(tmp_path / "words.txt", ["cat", "bat", "dog", "cog", "fox"])

        main(["trim", str(source), "1"])

        assert source.read_text(encoding="utf-8") == "cat\nbat\ndog\ncog\n"
        backup = tmp_path / "words.txt.bak"
        assert backup.read_text(encoding="utf-8") == "cat\nbat\ndog\ncog\nfox\n"

        err = capsys.readouterr().err
        assert "Removed 1 words" in err
        assert "Component 1 (1 words): fox" in err

    def test_trim_under_git_skips_backup(self, tmp_path, capsys, in_git):
        source = _write(tmp_path / "words.txt", ["cat", "bat", "fox"])

        main(["trim", str(source), "1"])

        assert source.read_text(encoding="utf-8") == "cat\nbat\n"
        assert not (tmp_path / "words.txt.bak").exists()
        assert "skipping backup" in capsys.readouterr().err

    def test_trim_nothing_to_remove(self, tmp_path, capsys, no_git):
        source = _write(tmp_path / "words.txt", ["cat", "bat"])

        main(["trim", str(source), "1"])

        assert "Word list unchanged" in capsys.readouterr().err
        assert not (tmp_path / "words.txt.bak").exists()

    def test_trim_rejects_graph_file(self, tmp_path, capsys):
        graph = tmp_path / "words-graph.json"
        graph.write_text("{}", encoding="utf-8")

        with pytest.raises(SystemExit) as excinfo:
            main(["trim", str(graph), "1"])

        assert excinfo.value.code == 1
        assert "only works with .txt" in capsys.readouterr().err

    def test_trim_rejects_non_positive_size(self, tmp_path):
        source = _write(tmp_path / "words.txt", ["cat"])

        with pytest.raises(SystemExit) as excinfo:
            main(["trim", str(source), "0"])
        assert excinfo.value.code == 1

    def test_trim_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["trim", str(tmp_path / "missing.txt"), "1"])
        assert excinfo.value.code == 1
