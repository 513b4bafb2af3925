"""
Scan report aggregation and serialization.

The Reporter turns a finished ScanState into a ScanReport: total line
count, every declared symbol with its used flag, and the ordered warning
list. Unused-variable warnings are appended once, after every warning
collected during scanning.

Author: xwest
"""

import json
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

from ..analyzer.symbol_table import Symbol
from ..lexer.errors import ScanError, ScanWarning, create_unused_variable_warning
from ..lexer.tokens import SourceLocation
from ..state import ScanState
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ReportWriteError(ScanError):
    """The report file could not be written."""


@dataclass
class ScanReport:
    """Final, read-only result of one scan."""
    total_lines: int
    variables: List[Dict[str, Any]] = field(default_factory=list)
    warnings: List[ScanWarning] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form: variables, total_lines, warnings."""
        return {
            "variables": [dict(variable) for variable in self.variables],
            "total_lines": self.total_lines,
            "warnings": [warning.to_dict() for warning in self.warnings],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def write(self, path: str) -> None:
        """
        Write the report as JSON, replacing any existing file.

        Raises:
            ReportWriteError: If the file cannot be opened or written
        """
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2)
                f.write("\n")
        except OSError as e:
            raise ReportWriteError(
                f"Error writing report: {path}: {e.strerror or e}",
                code="E002"
            ) from e
        logger.info("wrote report to %s", path)

    @property
    def unused_count(self) -> int:
        return sum(1 for variable in self.variables if not variable["used"])


class Reporter:
    """Collects end-of-scan warnings and builds the report for one ScanState."""

    def __init__(self, state: ScanState):
        self.state = state
        self._finalized = False
        self._report: Optional[ScanReport] = None

    def finalize(self) -> List[ScanWarning]:
        """
        Append one unused-variable warning per unused symbol.

        Returns the warnings added. Calling this again adds nothing.
        """
        if self._finalized:
            return []
        self._finalized = True

        added = []
        for symbol in self.state.symbols.unused_symbols():
            location = _declared_location(self.state, symbol)
            warning = create_unused_variable_warning(symbol.name, location)
            self.state.warn(warning)
            added.append(warning)
        return added

    def build(self) -> ScanReport:
        """Finalize (if needed) and snapshot the state into a ScanReport."""
        self.finalize()
        if self._report is None:
            self._report = ScanReport(
                total_lines=self.state.total_lines,
                variables=[
                    {"name": symbol.name, "used": symbol.used}
                    for symbol in self.state.symbols
                ],
                warnings=list(self.state.warnings),
            )
        return self._report


def _declared_location(state: ScanState, symbol: Symbol) -> SourceLocation:
    # declared_column holds the byte offset of the name
    return SourceLocation(state.filename, symbol.declared_line, symbol.declared_column,
                          symbol.declared_column)
