"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from tictactoe.debug import LOGGER_NAME
from tictactoe.game.board import Board


class Recorder:
    """Handler that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def __call__(self, event, *args) -> None:
        self.calls.append((event, *args))

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def payloads(self) -> list[tuple]:
        return [call[1:] for call in self.calls]


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_recorder():
    return Recorder


@pytest.fixture(autouse=True)
def _restore_logger_level() -> Iterator[None]:
    """Tests that build their own DebugManager must not leak its level."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield
    logger.setLevel(level)
