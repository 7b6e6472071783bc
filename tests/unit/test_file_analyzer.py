"""Unit tests for per-file analysis and run aggregation."""

from pathlib import Path
from unittest.mock import patch

import pytest

from dictionary import build_dictionary
from errors import ExtractError, ParseError, ReadError
from file_analyzer import FileAnalyzer, find_files, read_source

WORDS = build_dictionary(["parse", "the", "body", "user", "name", "hello", "world"])

SOURCE_WITH_TWO_TYPOS = (
    "// Parse the resopnse body\n"
    'const userName = "hello wrld";\n'
)


def _write(path: Path, text: str) -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestFindFiles:
    """Test glob expansion."""

    def test_recursive_pattern(self, tmp_path):
        """Test '**' matching nested directories."""
        a = _write(tmp_path / "src" / "a.ts", "")
        b = _write(tmp_path / "src" / "nested" / "b.ts", "")
        _write(tmp_path / "src" / "c.js", "")

        assert find_files([str(tmp_path / "src" / "**" / "*.ts")]) == [a, b]

    def test_overlapping_patterns_are_deduplicated(self, tmp_path):
        """Test that a file matched twice is listed once."""
        a = _write(tmp_path / "a.ts", "")

        assert find_files([str(tmp_path / "*.ts"), a]) == [a]

    def test_directories_are_ignored(self, tmp_path):
        """Test that only files are returned."""
        (tmp_path / "dir.ts").mkdir()

        assert find_files([str(tmp_path / "*")]) == []


class TestReadSource:
    """Test reading source files."""

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a ReadError."""
        with pytest.raises(ReadError):
            read_source(str(tmp_path / "missing.ts"))

    def test_invalid_utf8(self, tmp_path):
        """Test that binary content is a ReadError."""
        path = tmp_path / "binary.ts"
        path.write_bytes(b"const x = '\xff\xfe';")

        with pytest.raises(ReadError, match="not valid UTF-8"):
            read_source(str(path))


class TestFileAnalyzer:
    """Test counting typos in files."""

    def test_counts_found_and_total(self, tmp_path):
        """Test a file with one typo in a comment and one in a string."""
        path = _write(tmp_path / "app.ts", SOURCE_WITH_TWO_TYPOS)

        result = FileAnalyzer(WORDS).analyze_file(path)

        assert result.path == path
        assert result.total == 3
        assert result.found == 2
        assert [span.kind for span in result.typos] == ["comment", "string_fragment"]
        assert result.typos[1].text == "hello wrld"
        assert result.typos[1].line == 2

    def test_short_comment_counts_toward_total_only(self):
        """Test that a two character comment is never a typo."""
        result = FileAnalyzer(WORDS).analyze_source(b"//\nlet x = 1;\n", "typescript")

        assert result.total == 2
        assert result.found == 0

    def test_grammar_from_extension(self, tmp_path):
        """Test that .tsx files parse with the tsx grammar."""
        path = _write(
            tmp_path / "view.tsx",
            "const view = <div className=\"hello\">{userName}</div>;\n",
        )

        result = FileAnalyzer(WORDS).analyze_file(path)
        typo_texts = [span.text for span in result.typos]

        assert "view" in typo_texts
        assert "userName" not in typo_texts
        assert result.total >= 2

    def test_unknown_extension_without_default(self, tmp_path):
        """Test that unrecognised files fail when no default grammar is set."""
        path = _write(tmp_path / "notes.txt", "hello world")

        with pytest.raises(ParseError) as exc_info:
            FileAnalyzer(WORDS, default_grammar=None).analyze_file(path)

        assert exc_info.value.path == path

    def test_extract_error_carries_path(self, tmp_path):
        """Test that extraction failures name the file."""
        path = _write(tmp_path / "app.ts", "const x = 1;")

        with patch(
            "file_analyzer.iter_candidate_spans", side_effect=ExtractError("bad range")
        ):
            with pytest.raises(ExtractError) as exc_info:
                FileAnalyzer(WORDS).analyze_file(path)

        assert exc_info.value.path == path


class TestRunScan:
    """Test the parallel run across files."""

    def test_failed_files_are_skipped(self, tmp_path):
        """Test that failures contribute nothing and do not stop the run."""
        good = _write(tmp_path / "good.ts", SOURCE_WITH_TWO_TYPOS)
        binary = tmp_path / "binary.ts"
        binary.write_bytes(b"\xff\xfe\x00")
        missing = str(tmp_path / "missing.ts")

        summary = FileAnalyzer(WORDS).run_scan([good, str(binary), missing], max_workers=2)

        assert summary.found == 2
        assert summary.total == 3
        assert summary.files_processed == 1
        assert [failure.path for failure in summary.failed] == sorted(
            [str(binary), missing]
        )
        assert summary.elapsed_seconds >= 0

    def test_totals_are_order_independent(self, tmp_path):
        """Test that file order does not change the sums."""
        paths = [
            _write(tmp_path / "a.ts", SOURCE_WITH_TWO_TYPOS),
            _write(tmp_path / "b.ts", "const helloWorld = 'hello';\n"),
            _write(tmp_path / "c.ts", "// bodyy\nlet nmae = 'the body';\n"),
        ]
        analyzer = FileAnalyzer(WORDS)

        forward = analyzer.run_scan(paths, max_workers=3)
        backward = analyzer.run_scan(list(reversed(paths)), max_workers=1)

        assert (forward.found, forward.total) == (backward.found, backward.total)
        assert forward.found == sum(analyzer.analyze_file(p).found for p in paths)
        assert [r.path for r in forward.files] == sorted(paths)

    def test_workers_share_one_dictionary(self, tmp_path):
        """Test that the analyzer holds the dictionary by reference."""
        analyzer = FileAnalyzer(WORDS)

        assert analyzer.dictionary is WORDS
        assert analyzer.classifier.dictionary is WORDS
