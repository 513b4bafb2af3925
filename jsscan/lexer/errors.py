"""
Error handling for the jsscan lexer.

Recoverable conditions found while scanning (undeclared or unused variables,
missing statement terminators) are collected as ScanWarning values and never
stop the scan. Fatal conditions (the input cannot be opened, the report
cannot be written) are raised as ScanError subclasses.

Author: xwest
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass(frozen=True)
class Diagnostic:
    """A located message with a severity and a category code."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning"
    code: Optional[str] = None

    def __str__(self) -> str:
        where = f"{self.location}: " if self.location is not None else ""
        return f"{where}{self.severity}: {self.message}"


class ScanError(Exception):
    """
    Exception raised for conditions that abort a scan.
    """

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.diagnostic = Diagnostic(message, None, "error", code)

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code


class SourceReadError(ScanError):
    """The input source could not be opened."""


class ScanWarning:
    """
    Represents a warning that doesn't stop the scan.
    """

    def __init__(self, message: str, location: Optional[SourceLocation] = None,
                 code: Optional[str] = None):
        self.diagnostic = Diagnostic(message, location, "warning", code)

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def to_dict(self) -> Dict[str, Any]:
        """Serialize as {message} or {message, location:{line, column}}."""
        entry: Dict[str, Any] = {"message": self.message}
        if self.location is not None:
            entry["location"] = {
                "line": self.location.line,
                "column": self.location.column,
            }
        return entry

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"ScanWarning({self.message!r}, code={self.code!r})"


# Helper functions for creating common warnings
def create_undeclared_variable_warning(name: str) -> ScanWarning:
    # No location: undeclared uses are reported by name only
    return ScanWarning(f"Undeclared variable used: {name}", code="W001")


def create_unused_variable_warning(name: str, location: SourceLocation) -> ScanWarning:
    return ScanWarning(f"Unused variable: {name}", location, code="W002")


def create_missing_semicolon_warning(location: SourceLocation) -> ScanWarning:
    """Create a warning for a statement line that ends without a terminator."""
    return ScanWarning("Missing semicolon", location, code="W003")


def create_source_read_error(path: str, reason: str) -> SourceReadError:
    """Create an error for an input file that cannot be opened."""
    return SourceReadError(f"Error opening file: {path}: {reason}", code="E001")
