"""End-to-end CLI integration tests.

Invokes probtree as a subprocess to verify real command execution.
"""

import json
import subprocess
import sys
from pathlib import Path


def _run_probtree(
    *args: str, stdin: str | None = None, cwd: str | Path | None = None
) -> subprocess.CompletedProcess:
    """Run probtree as a subprocess."""
    return subprocess.run(
        [sys.executable, "-m", "probtree", *args],
        input=stdin,
        capture_output=True,
        text=True,
        cwd=cwd,
        timeout=60,
    )


class TestCLIHelp:
    def test_main_help(self):
        result = _run_probtree("--help")
        assert result.returncode == 0
        assert "probtree" in result.stdout

    def test_parse_help(self):
        result = _run_probtree("parse", "--help")
        assert result.returncode == 0
        assert "--offset" in result.stdout

    def test_version(self):
        result = _run_probtree("--version")
        assert result.returncode == 0
        assert result.stdout.startswith("probtree ")


class TestParseCommand:
    def test_parse_stdin(self, tmp_path):
        result = _run_probtree("parse", stdin="A\n  0.5: B\n  0.5: C\n", cwd=tmp_path)

        assert result.returncode == 0
        records = json.loads(result.stdout)
        assert [r["data"]["id"] for r in records] == ["1", "1_2:0", "2", "1_3:0", "3"]

    def test_parse_file_text(self, outline_file, tmp_path):
        result = _run_probtree("parse", str(outline_file), "-f", "text", cwd=tmp_path)

        assert result.returncode == 0
        assert "umbrella" in result.stdout
