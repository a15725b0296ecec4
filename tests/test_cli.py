"""
Tests for the re-gen command line.
"""

import json
from pathlib import Path

import pytest
from loguru import logger

from re_gen.run_generator import load_patterns, main, parse_arguments


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by setup_logging after each test."""
    yield
    logger.remove()


class TestArguments:
    def test_defaults(self) -> None:
        args = parse_arguments(["a+"])
        assert args.patterns == ["a+"]
        assert args.limit == 10
        assert args.count == 1
        assert args.seed is None

    def test_requires_pattern_or_file(self) -> None:
        with pytest.raises(SystemExit):
            parse_arguments([])

    def test_rejects_zero_limit(self) -> None:
        with pytest.raises(SystemExit):
            parse_arguments(["a", "--limit", "0"])


class TestMain:
    def test_prints_strings(self, capsys) -> None:
        assert main(["ab|cd", "--count", "4", "--seed", "3", "--quiet"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert set(lines) <= {"ab", "cd"}

    def test_seed_is_reproducible(self, capsys) -> None:
        main([r"[a-z]{3,8}\d*", "--count", "5", "--seed", "11", "-q"])
        first = capsys.readouterr().out
        main([r"[a-z]{3,8}\d*", "--count", "5", "--seed", "11", "-q"])
        assert capsys.readouterr().out == first

    def test_parse_error_exit_code(self, capsys) -> None:
        assert main(["(", "abc", "-q"]) == 1
        assert capsys.readouterr().out.splitlines() == ["abc"]

    def test_jsonl_output_with_verify(self, tmp_path: Path) -> None:
        output = tmp_path / "out" / "results.jsonl"
        code = main([r"^\d+$", "Z{2,5}", "--count", "2", "--limit", "1", "--verify", "--output", str(output), "-q"])
        assert code == 0
        records = [json.loads(line) for line in output.read_text().splitlines()]
        assert len(records) == 4
        assert all(r["verified"] for r in records)
        assert [r["text"] for r in records if r["pattern"] == "Z{2,5}"] == ["ZZ", "ZZ"]

    def test_verify_failure_exit_code(self, capsys) -> None:
        """Word boundaries are assumed satisfied, so a\\bb never verifies."""
        assert main([r"a\bb", "--verify", "-q"]) == 1

    def test_seed_file(self, tmp_path: Path, capsys) -> None:
        seed_file = tmp_path / "patterns.jsonl"
        seed_file.write_text('{"pattern": "x"}\nnot json\n{"other": 1}\n\n{"pattern": "yy"}\n')
        assert main(["--seed-file", str(seed_file), "-q"]) == 0
        assert capsys.readouterr().out.splitlines() == ["x", "yy"]

    def test_missing_seed_file(self, tmp_path: Path) -> None:
        assert main(["--seed-file", str(tmp_path / "missing.jsonl"), "-q"]) == 1

    def test_dump_tree(self, capsys) -> None:
        assert main(["(a)b", "--dump-tree"]) == 0
        assert "Capture index=1" in capsys.readouterr().err


class TestLoadPatterns:
    def test_skips_bad_lines(self, tmp_path: Path) -> None:
        seed_file = tmp_path / "p.jsonl"
        seed_file.write_text('{"pattern": "a"}\n{"pattern": 5}\n[1]\n{"pattern": "b"}\n')
        assert load_patterns(str(seed_file)) == ["a", "b"]
