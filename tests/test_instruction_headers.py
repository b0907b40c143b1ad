"""
INSTRUCTION HEADER
Keeps the repo's header convention enforced: every source, tool and test file needs one.
"""

from pathlib import Path

from check_instruction_headers import collect_failures, find_issue


def test_repo_files_have_instruction_headers() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    assert collect_failures(repo_root) == []


def test_find_issue_flags_missing_header(tmp_path) -> None:
    bare = tmp_path / "bare.py"
    bare.write_text("import os\n", encoding="utf-8")
    commented = tmp_path / "commented.py"
    commented.write_text("# INSTRUCTION HEADER\nimport os\n", encoding="utf-8")

    assert "missing marker" in find_issue(bare)
    assert find_issue(commented) == "missing top-of-file module docstring"
