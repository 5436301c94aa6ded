"""Typed event dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from .config import EmitterSettings
from .logging import get_logger, log_event
from .schema import EventSchema

LOGGER = get_logger("emitter")

EventsT = TypeVar("EventsT")
Listener = Callable[..., Any]


@dataclass(slots=True, eq=False)
class ListenerEntry:
    """A registered callback and whether it should fire a single time."""

    callback: Listener
    once: bool = False
    fired: bool = False


class TypedEventEmitter(Generic[EventsT]):
    """A synchronous, in-process event dispatcher.

    Listeners are stored per event in registration order and invoked in that
    order by :meth:`emit`. When ``events`` is given (a declaration class or a
    mapping, see :mod:`typed_events.schema`) only declared event keys are
    accepted and emitted arguments must match the declared parameters.

    Exceptions raised by a listener are not caught: they propagate out of
    :meth:`emit` and the remaining listeners of that emission are skipped.
    """

    def __init__(
        self,
        events: Any = None,
        *,
        settings: EmitterSettings | None = None,
    ) -> None:
        self.settings = settings or EmitterSettings()
        self.schema: Optional[EventSchema] = None
        if events is not None:
            self.schema = EventSchema.from_declaration(events, validate_types=self.settings.validate_types)
        self._registry: Dict[Hashable, List[ListenerEntry]] = {}

    # ----- Registration ----------------------------------------------------
    def on(self, event: Hashable, listener: Listener) -> "TypedEventEmitter[EventsT]":
        """Register ``listener`` at the end of the event's listener list."""

        return self._add(event, listener, once=False, prepend=False)

    def once(self, event: Hashable, listener: Listener) -> "TypedEventEmitter[EventsT]":
        """Register ``listener`` to run on the next emission only."""

        return self._add(event, listener, once=True, prepend=False)

    def prepend_listener(self, event: Hashable, listener: Listener) -> "TypedEventEmitter[EventsT]":
        return self._add(event, listener, once=False, prepend=True)

    def prepend_once_listener(self, event: Hashable, listener: Listener) -> "TypedEventEmitter[EventsT]":
        return self._add(event, listener, once=True, prepend=True)

    # ----- Removal ---------------------------------------------------------
    def off(self, event: Hashable, listener: Listener) -> "TypedEventEmitter[EventsT]":
        """Remove the first registration of ``listener`` for ``event``.

        Matching is by identity. Unknown listeners are ignored.
        """

        self._check_event(event)
        entries = self._registry.get(event)
        if not entries:
            return self
        for index, entry in enumerate(entries):
            if entry.callback is listener:
                del entries[index]
                log_event(LOGGER, "listener:removed", {"event": event, "count": len(entries)})
                break
        if not entries:
            del self._registry[event]
        return self

    remove_listener = off

    def remove_all_listeners(self, event: Optional[Hashable] = None) -> "TypedEventEmitter[EventsT]":
        """Drop every listener of ``event``, or of all events when ``None``."""

        if event is None:
            cleared = len(self._registry)
            self._registry.clear()
            log_event(LOGGER, "listeners:cleared", {"events": cleared})
            return self
        self._check_event(event)
        if self._registry.pop(event, None) is not None:
            log_event(LOGGER, "listeners:cleared", {"event": event})
        return self

    # ----- Emission --------------------------------------------------------
    def emit(self, event: Hashable, *args: Any) -> bool:
        """Invoke every listener of ``event`` with ``args``.

        Returns ``True`` if the event had listeners when emission started.
        """

        if self.schema is not None:
            self.schema.check_arguments(event, args)
        entries = self._registry.get(event)
        if not entries:
            return False
        # Iterate a snapshot: listeners added mid-emission run from the next emit on.
        for entry in tuple(entries):
            if entry.once:
                if entry.fired:
                    continue
                entry.fired = True
                self._discard(event, entry)
            entry.callback(*args)
        return True

    # ----- Introspection ---------------------------------------------------
    def listeners(self, event: Hashable) -> List[Listener]:
        """Return a copy of the callbacks registered for ``event``."""

        self._check_event(event)
        return [entry.callback for entry in self._registry.get(event, ())]

    def listener_count(self, event: Hashable) -> int:
        self._check_event(event)
        return len(self._registry.get(event, ()))

    def event_names(self) -> List[Hashable]:
        return list(self._registry)

    # ----- Internal helpers ------------------------------------------------
    def _check_event(self, event: Hashable) -> None:
        if self.schema is not None:
            self.schema.check_event(event)

    def _add(
        self, event: Hashable, listener: Listener, *, once: bool, prepend: bool
    ) -> "TypedEventEmitter[EventsT]":
        self._check_event(event)
        if not callable(listener):
            raise TypeError(f"Listener for event {event!r} must be callable, got {type(listener).__name__}")
        entry = ListenerEntry(callback=listener, once=once)
        entries = self._registry.setdefault(event, [])
        if prepend:
            entries.insert(0, entry)
        else:
            entries.append(entry)
        log_event(LOGGER, "listener:added", {"event": event, "once": once, "prepend": prepend, "count": len(entries)})
        return self

    def _discard(self, event: Hashable, entry: ListenerEntry) -> None:
        entries = self._registry.get(event)
        if not entries:
            return
        for index, candidate in enumerate(entries):
            if candidate is entry:
                del entries[index]
                break
        if not entries:
            del self._registry[event]

    def __repr__(self) -> str:
        counts = {event: len(entries) for event, entries in self._registry.items()}
        return f"{type(self).__name__}({counts!r})"


__all__ = ["ListenerEntry", "Listener", "TypedEventEmitter"]
