"""
jsscan Analyzer Package

Declaration/use bookkeeping that rides alongside the scanner:
- Flat symbol table (first declaration wins)
- Undeclared-use and unused-variable detection

Author: xwest
"""

from .symbol_table import SymbolTable, Symbol

__all__ = [
    "SymbolTable", "Symbol",
]
