"""Typed, synchronous publish/subscribe dispatch."""

from .config import EmitterSettings, LoggerOptions
from .console import Logger, create_logger
from .emitter import ListenerEntry, TypedEventEmitter
from .exceptions import EventArgumentsError, EventEmitterError, SchemaError, UnknownEventError
from .schema import EventSchema

__all__ = [
    "EmitterSettings",
    "EventArgumentsError",
    "EventEmitterError",
    "EventSchema",
    "ListenerEntry",
    "Logger",
    "LoggerOptions",
    "SchemaError",
    "TypedEventEmitter",
    "UnknownEventError",
    "create_logger",
]
