"""
Command Executors - Entry point for parsing and dispatching commands.

This module provides the CommandExecutor class that users interact with
to turn a command line into a call on a CommandHandler.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from blockcmd.parser.command_parser import CommandParser
from blockcmd.syntax_tree.nodes import BlockKind, BlockPlacing, Command, Fly

logger = logging.getLogger(__name__)


class CommandHandler(ABC):
    """
    Receiver of parsed commands.

    Implementations own whatever state a command changes; the
    executor only routes each command variant to its method.
    """

    @abstractmethod
    def fly(self, enabled: bool) -> None:
        pass

    @abstractmethod
    def set_block_placing(self, block: BlockKind) -> None:
        pass


@dataclass
class PlayerState(CommandHandler):
    """Player settings touched by commands."""

    flying: bool = False
    block_placing: BlockKind = BlockKind.STONE

    def fly(self, enabled: bool) -> None:
        self.flying = enabled

    def set_block_placing(self, block: BlockKind) -> None:
        self.block_placing = block


def dispatch(command: Command, handler: CommandHandler) -> None:
    """
    Route a command to the matching handler method.

    Args:
        command: A parsed Command
        handler: The receiver of the command

    Raises:
        TypeError: If command is not a known Command variant
    """
    match command:
        case Fly(enabled=enabled):
            logger.info("Dispatching fly %s", enabled)
            handler.fly(enabled)
        case BlockPlacing(block=block):
            logger.info("Dispatching block placing %s", block.value)
            handler.set_block_placing(block)
        case _:
            raise TypeError(f"Unknown command: {command!r}")


class CommandExecutor:
    """
    Main executor for command lines.

    Usage:
        state = PlayerState()
        CommandExecutor("fly true").execute(state)
    """

    def __init__(self, cmd: str):
        """
        Initialize the executor.

        Args:
            cmd: The command line to execute
        """
        self.cmd = cmd
        self._command: Command | None = None

    def parse(self) -> Command:
        """
        Parse the command line.

        Returns:
            The parsed Command

        Raises:
            CommandSyntaxError: If the line does not match the grammar
        """
        if self._command is None:
            self._command = CommandParser(self.cmd).parse()
        return self._command

    def execute(self, handler: CommandHandler) -> Command:
        """
        Parse the command line and dispatch it to handler.

        Returns:
            The dispatched Command
        """
        command = self.parse()
        dispatch(command, handler)
        return command
