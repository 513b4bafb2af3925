"""
Symbol table for jsscan declaration tracking.

A single flat table of declared variable names. There is no scoping: the
first declaration of a name wins and later declarations of the same name
are ignored. Uses of undeclared names are recorded as warnings.

Author: xwest
"""

from typing import Dict, Iterator, List, Optional
from dataclasses import dataclass

from ..lexer.errors import ScanWarning, create_undeclared_variable_warning
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Symbol:
    """Represents a declared variable."""
    name: str
    declared_line: int
    declared_column: int
    used: bool = False

    def __str__(self) -> str:
        return f"{self.name}@{self.declared_line}:{self.declared_column}"


class SymbolTable:
    """
    Append-only table of declared names, kept in declaration order.

    Undeclared-use warnings are appended to the shared `warnings` list.
    """

    def __init__(self, warnings: Optional[List[ScanWarning]] = None):
        self._symbols: Dict[str, Symbol] = {}
        self.warnings: List[ScanWarning] = warnings if warnings is not None else []

    def declare(self, name: str, line: int, column: int) -> Symbol:
        """
        Declare a name at the given location.

        If the name is already declared the existing symbol is returned
        unchanged; its location and used flag are kept.
        """
        existing = self._symbols.get(name)
        if existing is not None:
            logger.debug("ignoring redeclaration of %s at line %d", name, line)
            return existing

        symbol = Symbol(name, line, column)
        self._symbols[name] = symbol
        logger.debug("declared %s at line %d", name, line)
        return symbol

    def mark_used(self, name: str) -> bool:
        """
        Record a reference to `name`.

        Returns True if the name was declared. Otherwise an undeclared-use
        warning is recorded and nothing is inserted.
        """
        symbol = self._symbols.get(name)
        if symbol is not None:
            symbol.used = True
            return True

        self.warnings.append(create_undeclared_variable_warning(name))
        return False

    def unused_symbols(self) -> Iterator[Symbol]:
        """Yield symbols never referenced after declaration, in declaration order."""
        return (symbol for symbol in self._symbols.values() if not symbol.used)

    def lookup(self, name: str) -> Optional[Symbol]:
        return self._symbols.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def __len__(self) -> int:
        return len(self._symbols)
