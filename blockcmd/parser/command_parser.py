"""
Command Parser - Recursive descent parser for command lines.

This module parses a single command line into a Command value, handling:
- Flight toggling (fly true / fly false)
- Block selection (placing stone / placing glass / ...)
- Precise syntax errors listing the keywords legal at the failing token
"""

import logging
from typing import Iterable, Mapping, TypeVar

from blockcmd.lexer import CommandLexer, Token, TokenType
from blockcmd.syntax_tree.nodes import BlockKind, BlockPlacing, Command, Fly

logger = logging.getLogger(__name__)

T = TypeVar("T")

FLY = "fly"
PLACING = "placing"

COMMAND_KEYWORDS = frozenset({FLY, PLACING})
BOOL_KEYWORDS: Mapping[str, bool] = {"true": True, "false": False}
BLOCK_KEYWORDS: Mapping[str, BlockKind] = BlockKind.by_keyword()


class CommandSyntaxError(ValueError):
    """
    Raised when a command line does not match the grammar.

    Attributes:
        position: Character offset of the offending token
        index: Token index of the offending token
        expected: Keywords that would have been legal at that point
        found: The offending lexeme, "" at end of input
    """

    def __init__(self, position: int, expected: Iterable[str], found: str, index: int = 0):
        self.position = position
        self.index = index
        self.expected = frozenset(expected)
        self.found = found
        super().__init__(self._message())

    def _message(self) -> str:
        if self.expected:
            wanted = "expected one of " + ", ".join(f'"{kw}"' for kw in sorted(self.expected))
        else:
            wanted = "expected end of input"

        if not self.found:
            return f"Unexpected end of input at position {self.position}, {wanted}"
        if not self.expected:
            return f'Unexpected token "{self.found}" at position {self.position}, {wanted}'
        return f'Unrecognized token "{self.found}" at position {self.position}, {wanted}'

    def render(self, source: str) -> str:
        """
        Format the error for display under the offending command line.

        Args:
            source: The command line that failed to parse

        Returns:
            The source line, a caret line and the error message
        """
        line = source.rstrip("\r\n")
        caret = " " * self.position + "^" * max(len(self.found), 1)
        return f"{line}\n{caret}\n{self._message()}"

    def _fields(self) -> tuple:
        return (self.position, self.index, self.expected, self.found)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandSyntaxError):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def __reduce__(self):
        return (self.__class__, (self.position, self.expected, self.found, self.index))

    def __repr__(self) -> str:
        return (
            f"CommandSyntaxError(position={self.position}, index={self.index}, "
            f"expected={sorted(self.expected)}, found={self.found!r})"
        )


class CommandParser:
    """
    Recursive descent parser for command lines.

    Grammar:
        command := "fly" bool | "placing" block
        bool    := "true" | "false"
        block   := "stone" | "dirt" | "grass" | "sand" | "brick" | "glass"

    Keywords are matched against whole tokens and are case sensitive.
    Anything after a complete command is an error.
    """

    def __init__(self, source: str):
        self.source = source
        self.lexer = CommandLexer(source)
        self.tokens: list[Token] = []
        self.pos = 0

    def parse(self) -> Command:
        """Parse the command line into a Command."""
        self.tokens = self.lexer.tokenize()
        self.pos = 0

        try:
            command = self._parse_command()
            self._expect_end()
        except CommandSyntaxError as e:
            logger.debug("Failed to parse %r: %s", self.source, e)
            raise

        logger.debug("Parsed %r as %r", self.source, command)
        return command

    def _current_token(self) -> Token:
        """Get the current token."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]  # Return EOF token

    def _advance(self) -> Token:
        """Advance and return the current token."""
        token = self._current_token()
        self.pos += 1
        return token

    def _error(self, expected: Iterable[str]) -> CommandSyntaxError:
        token = self._current_token()
        return CommandSyntaxError(
            position=token.position,
            expected=frozenset(expected),
            found=token.value,
            index=token.index,
        )

    def _expect_keyword(self, table: Mapping[str, T]) -> T:
        """Consume the current token if it is a key of table and return its value."""
        token = self._current_token()
        if token.type == TokenType.WORD and token.value in table:
            self._advance()
            return table[token.value]
        raise self._error(table)

    def _expect_end(self) -> None:
        """Anything left after a complete command is an error."""
        if self._current_token().type != TokenType.EOF:
            raise self._error(frozenset())

    def _parse_command(self) -> Command:
        """Parse a command: dispatch on the leading keyword."""
        token = self._current_token()

        if token.value == FLY:
            self._advance()
            return Fly(self._expect_keyword(BOOL_KEYWORDS))

        if token.value == PLACING:
            self._advance()
            return BlockPlacing(self._expect_keyword(BLOCK_KEYWORDS))

        raise self._error(COMMAND_KEYWORDS)


def parse(source: str) -> Command:
    """
    Parse one command line.

    Args:
        source: The command line

    Returns:
        The parsed Command

    Raises:
        CommandSyntaxError: If the line does not match the grammar
    """
    return CommandParser(source).parse()
