"""
Syntax tree module for parsed command values.
"""

from .nodes import BlockKind, BlockPlacing, Command, Fly

__all__ = [
    "BlockKind",
    "BlockPlacing",
    "Command",
    "Fly",
]
