"""
Parser module for command syntax analysis.

This module provides the recursive descent parser converting a
tokenized command line into a Command value.
"""

from .command_parser import CommandParser, CommandSyntaxError, parse

__all__ = [
    "CommandParser",
    "CommandSyntaxError",
    "parse",
]
