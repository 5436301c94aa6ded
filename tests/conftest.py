from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, List, Tuple

import pytest


# Ensure src/ is importable for all tests (CI and local)
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for p in (ROOT, SRC):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


class Recorder:
    """Callable that remembers every call it receives."""

    def __init__(self, name: str = "listener", log: List[str] | None = None) -> None:
        self.name = name
        self.calls: List[Tuple[Any, ...]] = []
        self.log = log

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)
        if self.log is not None:
            self.log.append(self.name)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def call_log() -> List[str]:
    return []


@pytest.fixture
def recorder(call_log):
    def factory(name: str = "listener") -> Recorder:
        return Recorder(name, call_log)

    return factory


def pytest_collection_modifyitems(config, items):
    """Default all tests to 'unit' unless explicitly marked otherwise."""
    for item in items:
        marks = {m.name for m in item.iter_markers()}
        if not ("integ" in marks or "smoke" in marks or "unit" in marks):
            item.add_marker(pytest.mark.unit)
