"""
Per-scan state for jsscan.

Author: xwest
"""

from typing import List
from dataclasses import dataclass, field

from .analyzer.symbol_table import SymbolTable
from .lexer.errors import ScanWarning
from .utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ScanState:
    """
    Accumulators owned by exactly one scan.

    The symbol table shares the warning list so undeclared uses land in
    emission order with every other warning. Create a fresh instance for
    each scan; instances are not meant to be shared.
    """
    warnings: List[ScanWarning] = field(default_factory=list)
    symbols: SymbolTable = field(init=False)
    filename: str = "<unknown>"
    total_lines: int = 0
    finished: bool = False

    def __post_init__(self):
        self.symbols = SymbolTable(self.warnings)

    def warn(self, warning: ScanWarning) -> None:
        logger.debug("%s: %s", self.filename, warning)
        self.warnings.append(warning)
