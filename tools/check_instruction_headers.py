"""
INSTRUCTION HEADER
What this file does: Checks that every Python file starts with an Instruction Header docstring.
Where it runs: Terminal (repo root).
Inputs: `.py` files in `src/`, `tools/` and `tests/`.
Outputs: Prints failures and exits non-zero if any are missing.
How to run: `python tools/check_instruction_headers.py`
What success looks like: Prints `OK` and exits with code 0.
Common failures + fixes: Add an Instruction Header docstring to the listed files.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path


MARKER = "INSTRUCTION HEADER"
ROOTS = ["src", "tools", "tests"]
IGNORE_DIRS = {"__pycache__", ".pytest_cache", "exports", "output"}
HEAD_LINES = 40


def find_issue(path: Path) -> str | None:
    """Return why `path` fails the check, or None when its header is fine."""
    try:
        lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as exc:
        return f"cannot read file: {exc}"

    head = lines[:HEAD_LINES]
    if MARKER not in "\n".join(head):
        return f"missing marker in top {HEAD_LINES} lines"

    first_line = ""
    for line in head:
        stripped = line.strip()
        if stripped == "" or stripped.startswith("#!"):
            continue
        if stripped.lower().startswith("# -*- coding:"):
            continue
        first_line = stripped
        break

    if not (first_line.startswith('"""') or first_line.startswith("'''")):
        return "missing top-of-file module docstring"

    return None


def collect_failures(repo_root: Path) -> list[str]:
    failures: list[str] = []
    for root in ROOTS:
        start = repo_root / root
        if not start.exists():
            continue

        for dirpath, dirnames, filenames in os.walk(start):
            dirnames[:] = [d for d in dirnames if d not in IGNORE_DIRS]
            for fname in filenames:
                path = Path(dirpath) / fname
                if path.suffix != ".py":
                    continue
                issue = find_issue(path)
                if issue:
                    failures.append(f"{path.relative_to(repo_root).as_posix()}: {issue}")
    return failures


def main() -> int:
    repo_root = Path(__file__).resolve().parents[1]
    failures = collect_failures(repo_root)

    if failures:
        print("Instruction Header check failed:")
        for item in failures:
            print(f"- {item}")
        return 1

    print("OK: All files contain the Instruction Header.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
