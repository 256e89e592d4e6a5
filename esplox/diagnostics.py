"""
Diagnostic reporting for the EspLox front end.

The lexer and parser report every problem they detect, one line-tagged
message per issue, as soon as it is found. Where those messages end up is
decided by the caller through a sink:

- PrintingSink writes them to a stream (stderr by default)
- CollectingSink keeps them in a list for batch callers and tests
- CallbackSink hands each one to a function (REPLs, editors)

Author: xwest
"""

import logging
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, TextIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A single line-tagged error message."""
    line: int
    where: str      # "" for lexer errors, " at 'x'" / " at end of input" for parser errors
    message: str

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class DiagnosticSink:
    """
    Base class for diagnostic destinations.

    Subclasses implement `emit`; `report` builds the Diagnostic, logs it
    and forwards it.
    """

    def report(self, line: int, where: str, message: str) -> Diagnostic:
        diagnostic = Diagnostic(line, where, message)
        logger.debug("%s", diagnostic)
        self.emit(diagnostic)
        return diagnostic

    def emit(self, diagnostic: Diagnostic):
        raise NotImplementedError


class CollectingSink(DiagnosticSink):
    """Keeps every reported diagnostic in order."""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def emit(self, diagnostic: Diagnostic):
        self.diagnostics.append(diagnostic)

    def has_errors(self) -> bool:
        return len(self.diagnostics) > 0

    def messages(self) -> List[str]:
        return [str(d) for d in self.diagnostics]

    def clear(self):
        self.diagnostics.clear()


class CallbackSink(DiagnosticSink):
    """Forwards each diagnostic to a callable."""

    def __init__(self, callback: Callable[[Diagnostic], None]):
        self.callback = callback

    def emit(self, diagnostic: Diagnostic):
        self.callback(diagnostic)


class PrintingSink(DiagnosticSink):
    """Writes each diagnostic as one line to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.count = 0

    def emit(self, diagnostic: Diagnostic):
        # Resolve stderr lazily so redirected streams are honoured
        stream = self.stream if self.stream is not None else sys.stderr
        print(str(diagnostic), file=stream)
        self.count += 1


def default_sink(sink: Optional[DiagnosticSink]) -> DiagnosticSink:
    """Return `sink`, or a fresh PrintingSink when none was given."""
    return sink if sink is not None else PrintingSink()
