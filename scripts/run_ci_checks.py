#!/usr/bin/env python3
# =============================================================================
# masscompare v1.0.0 -- CI CHECKS RUNNER
# File:   scripts/run_ci_checks.py
# =============================================================================
#
# PURPOSE
# -------
# Runs the CI gate in two sequential stages:
#   Stage 1: pytest (all tests + coverage report for the masscompare package)
#   Stage 2: self-comparison gate -- the repository root compared against
#            itself must report nothing (identity property end to end).
#
# Exit codes:
#   0 -- All stages passed.
#   1 -- Stage 1 (pytest) failed.
#   2 -- Stage 2 (self-comparison) failed.
#
# Usage:
#   python scripts/run_ci_checks.py
#
# Requires the test extra: pip install -e .[test]
# =============================================================================

from __future__ import annotations

import subprocess
import sys
import pathlib

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
_REPO_ROOT = pathlib.Path(__file__).parent.parent
_PYTHON    = sys.executable


def _separator(char: str = "=", width: int = 72) -> str:
    return char * width


def _run(cmd: list[str], label: str) -> int:
    """
    Run a subprocess command, stream stdout/stderr live, return exit code.
    """
    print(_separator())
    print(f"CI STAGE: {label}")
    print(f"CMD:      {' '.join(cmd)}")
    print(_separator("-"))
    sys.stdout.flush()

    proc = subprocess.run(
        cmd,
        cwd=str(_REPO_ROOT),
    )
    return proc.returncode


def main() -> int:
    print(_separator())
    print("MASSCOMPARE CI GATE -- starting")
    print(_separator())
    sys.stdout.flush()

    # ------------------------------------------------------------------
    # Stage 1: pytest with coverage (pytest-cov).
    # ------------------------------------------------------------------
    pytest_rc = _run(
        [_PYTHON, "-m", "pytest", "--cov=masscompare", "--cov-report=term-missing"],
        "pytest (tests + coverage)",
    )

    if pytest_rc != 0:
        print(_separator())
        print(f"CI RESULT: FAIL  [stage=pytest  exit_code={pytest_rc}]")
        print("Merge BLOCKED: pytest stage did not pass.")
        print(_separator())
        sys.stdout.flush()
        return 1

    print(_separator("-"))
    print("CI STAGE pytest: PASS")
    sys.stdout.flush()

    # ------------------------------------------------------------------
    # Stage 2: self-comparison.
    # Any reported line (mismatch or error) exits 1 via --fail-on-diff.
    # ------------------------------------------------------------------
    root = str(_REPO_ROOT.resolve())
    self_rc = _run(
        [_PYTHON, "-m", "masscompare.run_compare", root, root, "--fail-on-diff"],
        "self-comparison (repository root vs itself)",
    )

    if self_rc != 0:
        print(_separator())
        print(f"CI RESULT: FAIL  [stage=self-compare  exit_code={self_rc}]")
        print("Merge BLOCKED: identical directories were reported as different.")
        print(_separator())
        sys.stdout.flush()
        return 2

    print(_separator("-"))
    print("CI STAGE self-compare: PASS")

    # ------------------------------------------------------------------
    # All stages passed.
    # ------------------------------------------------------------------
    print(_separator())
    print("CI RESULT: PASS  [stages=pytest,self-compare]")
    print("Merge permitted.")
    print(_separator())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
