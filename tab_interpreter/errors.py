"""Error collection and exception types.

Each processing stage owns a :class:`Watcher` that records line-tagged
diagnostics while the stage keeps going. When the stage finishes, any
recorded error is surfaced as one of the exceptions below.
"""

from __future__ import annotations

from collections.abc import Iterable


class Watcher:
    """Collects formatted error messages for one processing stage.

    Examples
    --------
    >>> watcher = Watcher()
    >>> watcher.error(1, "An error occurred here.")
    >>> watcher.error(5, "This was an error.")
    >>> print(watcher)
    [1] Error: An error occurred here.
    [5] Error: This was an error.
    """

    def __init__(self) -> None:
        self._error_log: list[str] = []
        self.had_error = False

    def error(self, line: int, message: str) -> None:
        """Record an error that occurred at the given 1-based line."""
        self._error_log.append(f"[{line}] Error: {message}")
        self.had_error = True

    @property
    def messages(self) -> tuple[str, ...]:
        """Formatted messages in the order they were recorded."""
        return tuple(self._error_log)

    def __str__(self) -> str:
        return "\n".join(self._error_log)


class TabInterpreterError(Exception):
    """Base class for all errors raised by tab_interpreter."""


class StageError(TabInterpreterError):
    """A processing stage finished with collected diagnostics.

    Parameters
    ----------
    watcher : Watcher
        The stage's error collector; its text becomes the exception message.
    """

    def __init__(self, watcher: Watcher) -> None:
        super().__init__(str(watcher))
        self.messages = watcher.messages


class TokenizeError(StageError):
    """The source contained lexical errors."""


class RenderError(StageError):
    """The token stream contained semantic errors, such as bad options."""


class OptionsError(TabInterpreterError, ValueError):
    """One or more segments of an options block were invalid.

    Parameters
    ----------
    messages : Iterable[str]
        One message per invalid segment.
    """

    def __init__(self, messages: Iterable[str]) -> None:
        self.messages = tuple(messages)
        super().__init__("".join(f"\t{message}\n" for message in self.messages))


class StaffStateError(TabInterpreterError):
    """A staff was modified in a way that is not allowed once tabs exist."""
