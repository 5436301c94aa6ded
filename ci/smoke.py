#!/usr/bin/env python3
"""One-command smoke runner: exercise the emitter and console logger end to end.

Prints one line on success:
  SMOKE OK | events=3 | emitted=4 | once_consumed=True
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Protocol


def _ensure_import_path() -> None:
    # Ensure `src/` is importable when running `python ci/smoke.py` directly
    root = Path(__file__).resolve().parents[1]
    src = root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


class UserEvents(Protocol):
    def user_created(self, user: Dict[str, str]) -> None: ...

    def user_deleted(self, user_id: str, reason: str) -> None: ...

    def status_changed(self, status: str) -> None: ...

    def data_received(self, data: List[int]) -> None: ...


def main() -> int:
    _ensure_import_path()
    from typed_events import EmitterSettings, EventArgumentsError, TypedEventEmitter, UnknownEventError, create_logger

    logger = create_logger(namespace="smoke")
    emitter: TypedEventEmitter[UserEvents] = TypedEventEmitter(
        UserEvents, settings=EmitterSettings(validate_types=True)
    )
    seen: List[str] = []

    emitter.on("user_created", lambda user: seen.append(f"created:{user['name']}"))
    emitter.on("user_deleted", lambda user_id, reason: seen.append(f"deleted:{user_id}:{reason}"))
    emitter.once("status_changed", lambda status: seen.append(f"status:{status}"))
    emitter.on("data_received", lambda data: seen.append(f"data:{len(data)}"))

    emitted = sum(
        [
            emitter.emit("user_created", {"id": "789", "name": "Alice Johnson"}),
            emitter.emit("user_deleted", "123", "Account closed by user"),
            emitter.emit("status_changed", "online"),
            emitter.emit("data_received", [1, 2, 3, 4, 5]),
        ]
    )
    once_consumed = not emitter.emit("status_changed", "away")

    for line in seen:
        logger.debug(line)

    try:
        emitter.emit("nonexistent", "data")
    except UnknownEventError as exc:
        logger.warn("rejected", str(exc))
    else:
        logger.error("undeclared event was accepted")
        return 1
    try:
        emitter.emit("status_changed", 42)
    except EventArgumentsError as exc:
        logger.warn("rejected", str(exc))
    else:
        logger.error("mistyped argument was accepted")
        return 1

    ok = emitted == 4 and once_consumed and len(seen) == 4
    if not ok:
        logger.error(f"SMOKE FAIL | emitted={emitted} | once_consumed={once_consumed} | seen={seen}")
        return 1
    print(f"SMOKE OK | events={len(emitter.event_names())} | emitted={emitted} | once_consumed={once_consumed}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
