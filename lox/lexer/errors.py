"""
Error handling for the Lox lexer.

The scanner never raises on malformed input. It records a Diagnostic for
each problem, hands it to the caller's reporter, skips the bad span and
keeps going so a single pass surfaces every lexical error. LexerError
exists for the convenience helpers that prefer to fail loudly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class ErrorKind(Enum):
    """Closed set of lexical errors, valued by (code, message)."""

    UNEXPECTED_CHARACTER = ("L001", "Unexpected character.")
    UNTERMINATED_STRING = ("L002", "Unterminated string")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class Diagnostic:
    """One lexical error at a source line."""
    kind: ErrorKind
    line: int
    message: str

    @classmethod
    def of(cls, kind: ErrorKind, line: int) -> "Diagnostic":
        """Build a diagnostic carrying the kind's standard message."""
        return cls(kind=kind, line=line, message=kind.message)

    @property
    def code(self) -> str:
        return self.kind.code

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class LexerError(Exception):
    """
    Exception raised by the raising helpers when a scan produced errors.

    Carries every diagnostic from the scan, not only the first.
    """

    def __init__(self, diagnostics: Iterable[Diagnostic]):
        self.diagnostics: Tuple[Diagnostic, ...] = tuple(diagnostics)
        super().__init__(str(self))

    @property
    def first(self) -> Diagnostic:
        return self.diagnostics[0]

    def __str__(self) -> str:
        return "\n".join(str(d) for d in self.diagnostics)
