"""Runtime event declarations.

A declaration is either a class whose public methods name the events::

    class ChatEvents(Protocol):
        def message(self, text: str) -> None: ...
        def data(self, id: int, name: str) -> None: ...

or a mapping of event keys to functions describing the argument list::

    {"message": lambda text: None}

The parameters after ``self`` (for classes) or all parameters (for mappings)
form the argument list every ``emit`` for that event must satisfy.
"""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterable, Mapping, Tuple, Type

from pydantic import BaseModel, ConfigDict, ValidationError, create_model

from .exceptions import EventArgumentsError, SchemaError, UnknownEventError

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
_MODEL_CONFIG = ConfigDict(strict=True, arbitrary_types_allowed=True, protected_namespaces=())


@dataclass(slots=True)
class EventSignature:
    """Argument shape declared for a single event."""

    event: Hashable
    signature: inspect.Signature
    model: Type[BaseModel] | None = None

    def bind(self, args: Tuple[Any, ...]) -> inspect.BoundArguments:
        try:
            return self.signature.bind(*args)
        except TypeError as exc:
            raise EventArgumentsError(self.event, str(exc)) from exc

    def validate(self, args: Tuple[Any, ...]) -> None:
        bound = self.bind(args)
        if self.model is None:
            return
        values = {
            name: value
            for name, value in bound.arguments.items()
            if name in self.model.model_fields
        }
        try:
            self.model.model_validate(values)
        except ValidationError as exc:
            raise EventArgumentsError(self.event, _summarise(exc)) from exc


@dataclass
class EventSchema:
    """Set of declared events and the argument signature each carries."""

    events: Dict[Hashable, EventSignature] = field(default_factory=dict)
    validate_types: bool = False

    @classmethod
    def from_declaration(cls, declaration: Any, *, validate_types: bool = False) -> "EventSchema":
        """Build a schema from a declaration class or mapping."""

        if isinstance(declaration, EventSchema):
            return declaration
        if isinstance(declaration, Mapping):
            items = [(key, function, False) for key, function in declaration.items()]
        elif inspect.isclass(declaration):
            items = list(_class_members(declaration))
        else:
            raise SchemaError(f"Unsupported event declaration: {declaration!r}")

        events: Dict[Hashable, EventSignature] = {}
        for key, function, drop_self in items:
            if not callable(function):
                raise SchemaError(f"Event {key!r} must be declared as a callable, got {type(function).__name__}")
            signature = _event_signature(key, function, drop_self=drop_self)
            model = _build_model(key, function, signature) if validate_types else None
            events[key] = EventSignature(event=key, signature=signature, model=model)
        if not events:
            raise SchemaError(f"Event declaration {declaration!r} declares no events")
        return cls(events=events, validate_types=validate_types)

    def __contains__(self, event: object) -> bool:
        return event in self.events

    def names(self) -> Iterable[Hashable]:
        return tuple(self.events)

    def check_event(self, event: Hashable) -> EventSignature:
        try:
            return self.events[event]
        except (KeyError, TypeError) as exc:
            raise UnknownEventError(event) from exc

    def check_arguments(self, event: Hashable, args: Tuple[Any, ...]) -> None:
        self.check_event(event).validate(args)


def _class_members(declaration: type) -> Iterable[Tuple[str, Any, bool]]:
    seen: Dict[str, Tuple[str, Any, bool]] = {}
    # Walk base classes first so subclasses can redeclare an event.
    for klass in reversed(declaration.__mro__):
        if klass in (object, typing.Protocol, typing.Generic):
            continue
        for name, member in vars(klass).items():
            if name.startswith("_"):
                continue
            drop_self = not isinstance(member, staticmethod)
            if isinstance(member, (staticmethod, classmethod)):
                member = member.__func__
            seen[name] = (name, member, drop_self)
    return seen.values()


def _event_signature(key: Hashable, function: Callable[..., Any], *, drop_self: bool) -> inspect.Signature:
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError) as exc:
        raise SchemaError(f"Cannot read signature of event {key!r}") from exc
    parameters = list(signature.parameters.values())
    if drop_self and parameters and parameters[0].kind is not inspect.Parameter.VAR_POSITIONAL:
        parameters = parameters[1:]
    return signature.replace(parameters=parameters, return_annotation=inspect.Signature.empty)


def _build_model(key: Hashable, function: Callable[..., Any], signature: inspect.Signature) -> Type[BaseModel] | None:
    try:
        hints = typing.get_type_hints(function)
    except Exception as exc:
        raise SchemaError(f"Cannot resolve annotations of event {key!r}") from exc

    fields: Dict[str, Any] = {}
    for name, parameter in signature.parameters.items():
        # pydantic refuses private field names; those parameters are arity checked only.
        if parameter.kind in _SKIPPED_KINDS or name.startswith("_"):
            continue
        annotation = hints.get(name, Any)
        default = ... if parameter.default is inspect.Parameter.empty else parameter.default
        fields[name] = (annotation, default)
    if not fields:
        return None
    try:
        return create_model(f"{key}_arguments", __config__=_MODEL_CONFIG, **fields)
    except Exception as exc:
        raise SchemaError(f"Cannot build argument model for event {key!r}") from exc


def _summarise(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


__all__ = ["EventSchema", "EventSignature"]
