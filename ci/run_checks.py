"""Run the typed-events checks: the pytest suite, then the smoke runner.

Prints one verdict line per check and exits non-zero if any failed.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import List, Sequence, Tuple

ROOT = Path(__file__).resolve().parents[1]


def _checks(pytest_args: Sequence[str]) -> List[Tuple[str, List[str]]]:
    return [
        ("tests", [sys.executable, "-m", "pytest", "-q", *pytest_args]),
        ("smoke", [sys.executable, str(ROOT / "ci" / "smoke.py")]),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    pytest_args = list(sys.argv[1:] if argv is None else argv)
    results: List[Tuple[str, int]] = []
    for name, command in _checks(pytest_args):
        print(f"Running {name}...\n")
        cp = subprocess.run(command, cwd=ROOT, text=True)
        results.append((name, cp.returncode))

    failed = [name for name, code in results if code != 0]
    for name, code in results:
        print(f"{'PASS' if code == 0 else 'FAIL'}: {name} (exit {code})")
    if failed:
        print(f"\nFAIL: {', '.join(failed)} did not pass. See output above for details.")
        return 1
    print("\nPASS: tests green, smoke OK.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
