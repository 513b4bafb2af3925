"""
Token definitions for the jsscan lexer.

This module defines the token kinds produced by the scanner along with the
fixed lookup tables that drive classification:
- Keywords (including the declaration keywords var/let/const)
- Multi-character operators (matched longest first)
- Single-character operators and delimiters

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional


class TokenKind(Enum):
    """
    Classification of a lexical unit.

    The value is the tag used in the diagnostic trace.
    """
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    DELIMITER = "DELIMITER"
    STRING = "STRING"
    COMMENT = "COMMENT"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class SourceLocation:
    """Source location information for tokens and diagnostics."""
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of stream

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    A classified lexical unit.

    Attributes:
        kind: Token classification
        text: Display text (normalized and possibly truncated)
        location: Where the token starts in the source
        value: Decoded payload, e.g. comment body or normalized number
        raw: Exact source slice consumed for this token
    """
    kind: TokenKind
    text: str
    location: SourceLocation
    value: Optional[str] = None
    raw: Optional[str] = None

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def source_text(self) -> str:
        """Characters this token consumed from the stream."""
        return self.raw if self.raw is not None else self.text

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.text}"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"


# ============================================================================
# Lookup tables
# ============================================================================

KEYWORDS: FrozenSet[str] = frozenset({
    "if", "else", "for", "while", "return", "function",
    "var", "let", "const", "null", "true", "false", "console", "log",
})

# Keywords that introduce a variable declaration
DECLARATION_KEYWORDS: FrozenSet[str] = frozenset({"var", "let", "const"})

# Keywords that can end an expression statement
VALUE_KEYWORDS: FrozenSet[str] = frozenset({"null", "true", "false"})

# Multi-character operators keyed by length, longest tried first
MULTI_CHAR_OPERATORS: Dict[int, FrozenSet[str]] = {
    3: frozenset({"===", "!=="}),
    2: frozenset({
        "==", "!=", "<=", ">=", "+=", "-=", "*=", "/=",
        "++", "--", "&&", "||", "=>",
    }),
}

MAX_OPERATOR_LENGTH = max(MULTI_CHAR_OPERATORS)

SINGLE_CHAR_OPERATORS: FrozenSet[str] = frozenset("+-*=<>&|!")

DELIMITERS: FrozenSet[str] = frozenset("[]{}(),;")

QUOTES: FrozenSet[str] = frozenset("\"'")

# isspace() in the C locale
WHITESPACE: FrozenSet[str] = frozenset(" \t\n\r\v\f")


def is_identifier_start(char: str) -> bool:
    """Check if character can start an identifier (ASCII letter or underscore)."""
    return char == '_' or (char.isascii() and char.isalpha())


def is_identifier_continue(char: str) -> bool:
    """Check if character can continue an identifier."""
    return char == '_' or (char.isascii() and char.isalnum())


def is_digit(char: str) -> bool:
    return char != '' and char in "0123456789"
