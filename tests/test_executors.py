"""
Tests for command dispatch through CommandExecutor.
"""

import pytest

from blockcmd.executors import CommandExecutor, PlayerState, dispatch
from blockcmd.parser.command_parser import CommandSyntaxError
from blockcmd.syntax_tree.nodes import BlockKind, BlockPlacing, Command, Fly


class TestDispatch:
    """Tests for routing commands to handler methods."""

    def test_fly_routed(self, recording_handler):
        dispatch(Fly(True), recording_handler)

        assert recording_handler.calls == [("fly", True)]

    def test_block_placing_routed(self, recording_handler):
        dispatch(BlockPlacing(BlockKind.SAND), recording_handler)

        assert recording_handler.calls == [("set_block_placing", BlockKind.SAND)]

    def test_unknown_command_rejected(self, recording_handler):
        class Teleport(Command):
            pass

        with pytest.raises(TypeError):
            dispatch(Teleport(), recording_handler)
        assert recording_handler.calls == []


class TestCommandExecutor:
    """Tests for the parse-then-dispatch entry point."""

    def test_default_player_state(self, player):
        assert player.flying is False
        assert player.block_placing == BlockKind.STONE

    def test_fly_updates_player(self, player):
        result = CommandExecutor("fly true").execute(player)

        assert result == Fly(True)
        assert player.flying is True

        CommandExecutor("fly false").execute(player)
        assert player.flying is False

    def test_placing_updates_player(self, player):
        CommandExecutor("placing glass").execute(player)

        assert player.block_placing == BlockKind.GLASS
        assert player.flying is False

    def test_parse_is_cached(self):
        executor = CommandExecutor("placing brick")

        assert executor.parse() is executor.parse()

    def test_syntax_error_leaves_state_untouched(self, player):
        with pytest.raises(CommandSyntaxError):
            CommandExecutor("fly sideways").execute(player)

        assert player == PlayerState()
