"""Namespaced console logger gated by the current environment."""

from __future__ import annotations

import os
from typing import Any

from rich.console import Console
from rich.text import Text

from .config import DEFAULT_ENVIRONMENT, LoggerOptions


class Logger:
    """Print ``[NAMESPACE]: message`` lines to the terminal.

    ``warn`` and ``error`` go to stderr in yellow and red. ``log`` and
    ``debug`` go to stdout without colour. When ``options.env`` lists
    environments, output only happens while the variable named by
    ``options.env_var`` holds one of them (``development`` when unset).
    """

    def __init__(
        self,
        options: LoggerOptions | None = None,
        *,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.options = options or LoggerOptions()
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, highlight=False, soft_wrap=True)

    @property
    def namespace(self) -> str:
        return self.options.namespace or ""

    @property
    def current_env(self) -> str:
        return os.environ.get(self.options.env_var) or DEFAULT_ENVIRONMENT

    def should_log(self) -> bool:
        if not self.options.env:
            return True
        return self.current_env in self.options.env

    def log(self, message: str, *args: Any) -> None:
        self._write(self.console, message, args)

    def debug(self, message: str, *args: Any) -> None:
        self._write(self.console, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._write(self.error_console, message, args, style="yellow")

    warning = warn

    def error(self, message: str, *args: Any) -> None:
        self._write(self.error_console, message, args, style="red")

    def _write(self, console: Console, message: str, args: tuple, style: str | None = None) -> None:
        if not self.should_log():
            return
        parts = [Text(f"[{self.namespace}]: {message}", style=style or "")]
        parts.extend(Text(arg if isinstance(arg, str) else repr(arg)) for arg in args)
        console.print(Text(" ").join(parts), markup=False, highlight=False)


def create_logger(options: LoggerOptions | None = None, **overrides: Any) -> Logger:
    """Factory returning a :class:`Logger`.

    Keyword overrides (``namespace``, ``env``, ``env_var``) are merged on top of
    ``options``.
    """

    if overrides:
        base = options.model_dump() if options else {}
        options = LoggerOptions(**{**base, **overrides})
    return Logger(options)


__all__ = ["Logger", "create_logger"]
