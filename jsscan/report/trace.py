"""
Diagnostic trace output.

Formats tokens and warnings as one "[KIND] text" line per event. The sink
writes to any text stream so tests can capture it.
"""

import re
import sys
from typing import Optional, TextIO

from ..lexer.tokens import Token
from ..lexer.errors import ScanWarning


class TraceSink:
    """Line-oriented writer for scan events."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def token(self, token: Token) -> None:
        self.stream.write(format_token(token) + "\n")

    def warning(self, warning: ScanWarning) -> None:
        self.stream.write(format_warning(warning) + "\n")


class NullSink(TraceSink):
    """Discards every event."""

    def token(self, token: Token) -> None:
        pass

    def warning(self, warning: ScanWarning) -> None:
        pass


# Undecodable input bytes survive scanning as lone surrogates
_SURROGATES = re.compile("[\ud800-\udfff]")


def format_token(token: Token) -> str:
    text = _SURROGATES.sub("\ufffd", token.text)
    return f"[{token.kind.value}] {text}"


def format_warning(warning: ScanWarning) -> str:
    return f"[WARNING] {warning.message}"
