"""
Lexer module for tokenizing command lines.

A command line is a sequence of whitespace separated words. There is no
quoting, escaping or numeric literal syntax, so every run of non-whitespace
characters becomes a single WORD token and the lexer can never fail.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types for the command lexer."""

    WORD = auto()  # any maximal run of non-whitespace characters
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """Represents a single token from the lexer."""

    type: TokenType
    value: str
    position: int  # starting position in the source string
    index: int = 0  # ordinal of the token in the line

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, pos={self.position})"


class CommandLexer:
    """
    Tokenizer for command lines.

    Handles:
    - Leading, trailing and repeated whitespace (ignored)
    - Words, matched verbatim with their case preserved
    - A terminating EOF token positioned at the end of the source
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.length = len(source)

    def _current_char(self) -> str | None:
        """Return current character or None if at end."""
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def _advance(self) -> str | None:
        """Advance position and return the character."""
        char = self._current_char()
        if char is not None:
            self.pos += 1
        return char

    def _skip_whitespace(self) -> None:
        while self._current_char() is not None and self._current_char().isspace():  # type: ignore
            self._advance()

    def _read_word(self, index: int) -> Token:
        """Read a word up to the next whitespace character."""
        start_pos = self.pos
        chars: list[str] = []

        while self._current_char() is not None and not self._current_char().isspace():  # type: ignore
            chars.append(self._advance())  # type: ignore

        return Token(
            type=TokenType.WORD,
            value="".join(chars),
            position=start_pos,
            index=index,
        )

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source string, starting over on each call."""
        self.pos = 0
        tokens: list[Token] = []

        while self.pos < self.length:
            self._skip_whitespace()

            if self.pos >= self.length:
                break

            tokens.append(self._read_word(len(tokens)))

        # Add EOF token
        tokens.append(Token(TokenType.EOF, "", self.pos, len(tokens)))

        return tokens
