"""
Character stream with bounded lookahead for the jsscan scanner.

Replaces raw file seeking with an index over an in-memory string. The
scanner reads with peek()/advance() and restores lookahead it did not use
through mark()/reset().

Author: xwest
"""

from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass(frozen=True)
class Position:
    """Saved cursor state, restorable with CharStream.reset()."""
    offset: int
    line: int
    column: int
    newlines: int
    byte_offset: int


def encoded_length(char: str) -> int:
    """Number of bytes `char` occupied in the UTF-8 input."""
    # Undecodable input bytes are carried as U+DC80..U+DCFF, one byte each
    if '\udc80' <= char <= '\udcff':
        return 1
    return len(char.encode('utf-8', 'surrogatepass'))


class CharStream:
    """
    Forward-only cursor over source text.

    Tracks the 1-based line and column of the next character, the number
    of newline characters consumed so far and the byte offset of the
    cursor in the UTF-8 encoded input.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        self.source = source
        self.filename = filename
        self.offset = 0
        self.byte_offset = 0
        self.line = 1
        self.column = 1
        self.newlines = 0

    def at_end(self) -> bool:
        return self.offset >= len(self.source)

    def peek(self, ahead: int = 0) -> str:
        """Return the character `ahead` positions past the cursor, or '' at end."""
        index = self.offset + ahead
        if index < len(self.source):
            return self.source[index]
        return ''

    def peek_run(self, count: int) -> str:
        """Return up to `count` characters starting at the cursor."""
        return self.source[self.offset:self.offset + count]

    def advance(self) -> str:
        """Consume one character, updating line/column. Returns '' at end."""
        if self.offset >= len(self.source):
            return ''
        char = self.source[self.offset]
        self.offset += 1
        self.byte_offset += encoded_length(char)
        if char == '\n':
            self.line += 1
            self.column = 1
            self.newlines += 1
        else:
            self.column += 1
        return char

    def advance_by(self, count: int) -> str:
        """Consume up to `count` characters and return them."""
        start = self.offset
        for _ in range(count):
            if not self.advance():
                break
        return self.source[start:self.offset]

    def advance_while(self, predicate) -> str:
        """Consume characters while predicate holds; return the consumed run."""
        start = self.offset
        while self.offset < len(self.source) and predicate(self.source[self.offset]):
            self.advance()
        return self.source[start:self.offset]

    def mark(self) -> Position:
        return Position(self.offset, self.line, self.column, self.newlines, self.byte_offset)

    def reset(self, position: Position) -> None:
        """Restore the cursor to a previously marked position."""
        self.offset = position.offset
        self.line = position.line
        self.column = position.column
        self.newlines = position.newlines
        self.byte_offset = position.byte_offset

    def location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.offset)

    def slice_from(self, start: int) -> str:
        return self.source[start:self.offset]


def read_source(path: str) -> str:
    """
    Read a whole source file as text.

    The file is closed before this returns. Line endings are preserved as
    written so that token offsets match the file contents. Bytes that are
    not valid UTF-8 are kept as lone surrogates (surrogateescape) and scan
    as Unknown tokens.

    Raises:
        SourceReadError: If the file cannot be opened
    """
    from .errors import create_source_read_error

    try:
        with open(path, 'r', encoding='utf-8', errors='surrogateescape', newline='') as f:
            return f.read()
    except OSError as e:
        raise create_source_read_error(path, e.strerror or str(e)) from e
