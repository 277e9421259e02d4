"""
Pytest configuration and shared fixtures for blockcmd tests.
"""

import pytest

from blockcmd.executors import PlayerState
from blockcmd.syntax_tree.nodes import BlockKind


BLOCK_KEYWORDS = ["stone", "dirt", "grass", "sand", "brick", "glass"]


@pytest.fixture
def player():
    """A fresh player state: not flying, placing stone."""
    return PlayerState()


@pytest.fixture(params=BLOCK_KEYWORDS)
def block_keyword(request):
    """Each block keyword in turn."""
    return request.param


@pytest.fixture
def all_block_keywords():
    return frozenset(BLOCK_KEYWORDS)


@pytest.fixture
def sample_script():
    """
    A short command script mixing valid and invalid lines.
    Lines 2 and 4 fail.
    """
    return [
        "fly true\n",
        "fly maybe\n",
        "  placing   brick  \n",
        "placing lava\n",
        "fly false\n",
    ]


@pytest.fixture
def recording_handler():
    """Handler that records every call it receives."""
    from blockcmd.executors import CommandHandler

    class RecordingHandler(CommandHandler):
        def __init__(self):
            self.calls: list[tuple[str, object]] = []

        def fly(self, enabled: bool) -> None:
            self.calls.append(("fly", enabled))

        def set_block_placing(self, block: BlockKind) -> None:
            self.calls.append(("set_block_placing", block))

    return RecordingHandler()
