"""
Command value definitions for the command parser.

This module defines the closed set of command values that a successful
parse can produce, and the enumeration of placeable block kinds.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum


class BlockKind(Enum):
    """Placeable block materials. Values are the command keywords."""

    STONE = "stone"
    DIRT = "dirt"
    GRASS = "grass"
    SAND = "sand"
    BRICK = "brick"
    GLASS = "glass"

    @classmethod
    def by_keyword(cls) -> dict[str, "BlockKind"]:
        """Map each command keyword to its block kind."""
        return {member.value: member for member in cls}


class Command(ABC):
    """Base class for all parsed commands. Only Fly and BlockPlacing exist."""

    __slots__ = ()


@dataclass(frozen=True)
class Fly(Command):
    """Toggles flight mode on or off."""

    enabled: bool

    def __repr__(self) -> str:
        return f"Fly(enabled={self.enabled})"


@dataclass(frozen=True)
class BlockPlacing(Command):
    """Selects the block kind used for subsequent placements."""

    block: BlockKind

    def __repr__(self) -> str:
        return f"BlockPlacing(block={self.block.name})"
