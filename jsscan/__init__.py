"""
jsscan Package

A single-pass lexical scanner for JavaScript-like source with declaration
tracking and a structured diagnostics report.

Architecture:
    jsscan/
    ├── lexer/           # Character stream, token definitions, scanner
    ├── analyzer/        # Flat symbol table (declared vs used)
    ├── report/          # Trace output and JSON report
    ├── pipeline.py      # Scanner -> trace -> report wiring
    └── cli.py           # Command-line entry point

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .config import ScanConfig
from .lexer import Scanner, Token, TokenKind, SourceLocation, ScanError, ScanWarning
from .analyzer import SymbolTable, Symbol
from .state import ScanState
from .report import Reporter, ScanReport, TraceSink
from .pipeline import scan_source, scan_file

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenKind",
    "SourceLocation",
    "SymbolTable",
    "Symbol",
    "ScanState",
    "Reporter",
    "ScanReport",
    "TraceSink",
    "ScanConfig",
    "ScanError",
    "ScanWarning",

    # Entry points
    "scan_source",
    "scan_file",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
