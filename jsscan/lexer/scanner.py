"""
jsscan Scanner - single-pass tokenizer for JavaScript-like source

Classifies identifiers, keywords, numbers, strings, comments, operators and
delimiters in one forward pass. Declarations (var/let/const) and identifier
uses are fed to the symbol table as a side effect of classification.

Lookahead is bounded: two characters for operators, one for telling a
number from a member-access dot. Nothing here raises on malformed input;
every character ends up in some token, Unknown at worst.

Author: xwest
"""

from typing import Iterator, List, Optional

from .tokens import (
    Token, TokenKind, SourceLocation, KEYWORDS, DECLARATION_KEYWORDS, VALUE_KEYWORDS,
    MULTI_CHAR_OPERATORS, MAX_OPERATOR_LENGTH, SINGLE_CHAR_OPERATORS, DELIMITERS, QUOTES, WHITESPACE,
    is_identifier_start, is_identifier_continue, is_digit
)
from .source import CharStream, read_source
from .errors import create_missing_semicolon_warning
from ..config import ScanConfig
from ..state import ScanState
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Blanks that may sit between a statement and the end of its line
_LINE_BLANKS = frozenset(" \t\r\v\f")

# Characters that, starting the next line, continue or close the statement
_CONTINUATIONS = frozenset(";}]),.") | SINGLE_CHAR_OPERATORS


class Scanner:
    """
    jsscan lexical scanner.

    Produces tokens lazily from `next_token()` or by iteration. Symbol and
    warning bookkeeping accumulates in `state`, which must be fresh for
    every scan.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<unknown>",
        state: Optional[ScanState] = None,
        config: Optional[ScanConfig] = None
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: Source code string
            filename: Name of source file for locations
            state: Accumulators for this scan (created if omitted)
            config: Scan options (defaults if omitted)
        """
        self.stream = CharStream(source, filename)
        self.state = state if state is not None else ScanState(filename=filename)
        self.config = config if config is not None else ScanConfig()

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def tokenize(self) -> List[Token]:
        """Scan the remaining input and return every token."""
        return list(self)

    def next_token(self) -> Optional[Token]:
        """
        Get the next token from the stream.

        Returns:
            The next Token, or None once the stream is exhausted
        """
        self._skip_whitespace()
        self.state.total_lines = self.stream.newlines

        if self.stream.at_end():
            self.state.finished = True
            return None

        start = self.stream.location()
        current_char = self.stream.peek()

        if is_identifier_start(current_char):
            token = self._scan_word(start)
        elif is_digit(current_char) or (current_char == '.' and is_digit(self.stream.peek(1))):
            token = self._scan_number(start)
        elif current_char in QUOTES:
            token = self._scan_string(start)
        elif current_char == '/':
            token = self._scan_slash(start)
        elif current_char in DELIMITERS:
            self.stream.advance()
            token = self._make_token(TokenKind.DELIMITER, start)
        elif current_char == '.':
            # A dot not followed by a digit is member access
            self.stream.advance()
            token = self._make_token(TokenKind.OPERATOR, start)
        else:
            token = self._scan_operator(start)

        self.state.total_lines = self.stream.newlines
        return token

    def _make_token(self, kind: TokenKind, start: SourceLocation,
                    text: Optional[str] = None, value: Optional[str] = None) -> Token:
        raw = self.stream.slice_from(start.offset)
        if text is None:
            text = raw
        return Token(kind, self.config.truncate(text), start, value, raw)

    def _skip_whitespace(self):
        self.stream.advance_while(lambda c: c in WHITESPACE)

    def _scan_word(self, start: SourceLocation) -> Token:
        """Scan an identifier or keyword, updating the symbol table."""
        word = self.stream.advance_while(is_identifier_continue)

        if word in KEYWORDS:
            token = self._make_token(TokenKind.KEYWORD, start, value=word)
            if word in DECLARATION_KEYWORDS:
                self._scan_declaration()
            elif word in VALUE_KEYWORDS:
                self._check_terminator(start)
            return token

        token = self._make_token(TokenKind.IDENTIFIER, start, value=word)
        self.state.symbols.mark_used(word)
        self._check_terminator(start)
        return token

    def _scan_declaration(self):
        """Consume the name following var/let/const and declare it."""
        self._skip_whitespace()
        location = self.stream.location()
        byte_offset = self.stream.byte_offset
        name = self.stream.advance_while(is_identifier_continue)
        if not name:
            # Nothing declarable here, e.g. "let (" or end of input
            return

        # The byte offset into the input stands in for a column
        self.state.symbols.declare(name, location.line, byte_offset)
        self._check_terminator(location)

    def _scan_number(self, start: SourceLocation) -> Token:
        """
        Scan a run of digits and dots.

        No validation is done: "1.2.3" is accepted as one number. A leading
        dot gets an implicit zero, so ".5" reads as "0.5".
        """
        lexeme = self.stream.advance_while(lambda c: c == '.' or is_digit(c))
        if lexeme.startswith('.'):
            lexeme = '0' + lexeme

        token = self._make_token(TokenKind.NUMBER, start, text=lexeme, value=lexeme)
        self._check_terminator(start)
        return token

    def _scan_string(self, start: SourceLocation) -> Token:
        """
        Scan a quoted string through its matching unescaped quote.

        Escapes are kept verbatim. An unterminated string runs to the end
        of input and is returned as-is.
        """
        quote = self.stream.advance()
        terminated = False

        while not self.stream.at_end():
            char = self.stream.advance()
            if char == '\\':
                self.stream.advance()
            elif char == quote:
                terminated = True
                break

        raw = self.stream.slice_from(start.offset)
        body = raw[1:-1] if terminated else raw[1:]
        token = self._make_token(TokenKind.STRING, start, value=body)
        self._check_terminator(start)
        return token

    def _scan_slash(self, start: SourceLocation) -> Token:
        """Scan a line comment, block comment, or a slash operator."""
        self.stream.advance()  # Skip '/'
        next_char = self.stream.peek()

        if next_char == '/':
            self.stream.advance()
            body = self.stream.advance_while(lambda c: c != '\n')
            return self._make_token(TokenKind.COMMENT, start, text='//' + body, value=body)

        if next_char == '*':
            self.stream.advance()
            body_start = self.stream.offset
            end = self.stream.source.find('*/', body_start)
            if end == -1:
                # Unterminated: the comment runs to end of input
                body = self.stream.advance_by(len(self.stream.source) - body_start)
            else:
                body = self.stream.advance_by(end - body_start)
                self.stream.advance_by(2)
            return self._make_token(TokenKind.COMMENT, start, text='/*' + body + '*/', value=body)

        if '/' + next_char in MULTI_CHAR_OPERATORS[2]:
            self.stream.advance()
        return self._make_token(TokenKind.OPERATOR, start)

    def _scan_operator(self, start: SourceLocation) -> Token:
        """Match the longest operator at the cursor, else classify Unknown."""
        for length in range(MAX_OPERATOR_LENGTH, 1, -1):
            candidate = self.stream.peek_run(length)
            if len(candidate) == length and candidate in MULTI_CHAR_OPERATORS.get(length, ()):
                self.stream.advance_by(length)
                return self._make_token(TokenKind.OPERATOR, start)

        char = self.stream.advance()
        if char in SINGLE_CHAR_OPERATORS:
            return self._make_token(TokenKind.OPERATOR, start)

        logger.debug("unknown character %r at %s", char, start)
        return self._make_token(TokenKind.UNKNOWN, start)

    def _check_terminator(self, location: SourceLocation):
        """
        Warn if the current line ends a statement without a terminator.

        A line break only ends the statement when the next significant
        character cannot continue it, so multi-line array and object
        literals, call arguments and chained expressions stay quiet.
        """
        if not self.config.check_semicolons:
            return

        saved = self.stream.mark()
        self.stream.advance_while(lambda c: c in _LINE_BLANKS)
        line_end = self.stream.peek()
        self._skip_whitespace()
        next_char = self.stream.peek()
        self.stream.reset(saved)

        if line_end not in ('', '\n'):
            return
        if next_char != '' and next_char in _CONTINUATIONS:
            return
        self.state.warn(create_missing_semicolon_warning(location))


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[ScanConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for locations
        config: Scan options

    Returns:
        List of tokens
    """
    scanner = Scanner(source, filename, ScanState(filename=filename), config)
    return scanner.tokenize()


def tokenize_file(filepath: str, config: Optional[ScanConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        SourceReadError: If file cannot be read
    """
    return tokenize_string(read_source(filepath), filepath, config)
