"""Console interaction for confirmation prompts.

Components:
    ConsoleInteractor - Protocol used by code that needs to ask the user
    StreamConsoleInteractor - Implementation over text streams (stdin/stdout)

Python 3.13+.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, TextIO

from tmclient.diagnostics import ErrorTemplate, UserAbortError
from tmclient.enums import DisplayMode

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["ConsoleInteractor", "StreamConsoleInteractor"]

_YES_ANSWERS = frozenset({"y", "yes"})


class ConsoleInteractor(Protocol):
    """Protocol for printing to and reading from the user.

    This is a Protocol (structural typing) so tests can pass any object with
    the two methods.
    """

    def printfln(self, mode: DisplayMode, message: str) -> None:
        """Print one line of output in the given display mode."""

    def expect_yes(self) -> None:
        """Read an answer and continue only if it is yes.

        Raises:
            UserAbortError: If the answer is anything else
        """


class StreamConsoleInteractor:
    """Console interactor over text streams.

    Attributes:
        out: Stream messages are written to
        read_line: Callable returning one line of user input
    """

    __slots__ = ("out", "read_line")

    def __init__(
        self,
        out: TextIO | None = None,
        read_line: Callable[[], str] | None = None,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.read_line = read_line if read_line is not None else input

    def printfln(self, mode: DisplayMode, message: str) -> None:
        prefix = "" if mode is DisplayMode.INFORMATION else f"[{mode.upper()}] "
        print(f"{prefix}{message}", file=self.out)

    def expect_yes(self) -> None:
        try:
            answer = self.read_line().strip().lower()
        except EOFError:
            # closed or empty stdin counts as no
            raise UserAbortError(ErrorTemplate.user_aborted()) from None
        if answer not in _YES_ANSWERS:
            raise UserAbortError(ErrorTemplate.user_aborted())
        self.printfln(DisplayMode.CONFIRMATION, "Confirmed.")
