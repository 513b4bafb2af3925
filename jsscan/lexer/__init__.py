"""
jsscan Lexer Package

Single-pass lexical scanner for JavaScript-like source.

Key Features:
- Keyword, identifier, number, string, comment, operator and delimiter tokens
- Longest-match operators with bounded lookahead
- Declaration/use tracking through the symbol table
- Best-effort continuation: malformed input never aborts a scan

Author: xwest
"""

from .tokens import Token, TokenKind, SourceLocation
from .errors import ScanError, ScanWarning, SourceReadError, Diagnostic
from .source import CharStream, read_source
from .scanner import Scanner, tokenize_string, tokenize_file

__all__ = [
    "Scanner",
    "Token",
    "TokenKind",
    "SourceLocation",
    "CharStream",
    "ScanError",
    "ScanWarning",
    "SourceReadError",
    "Diagnostic",
    "read_source",
    "tokenize_string",
    "tokenize_file",
]
