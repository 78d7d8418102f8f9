"""Tests for the debug manager."""

import logging

import pytest

from tictactoe.debug import CONSOLE_HANDLER_NAME, LOGGER_NAME, DebugLevel, DebugManager, debug
from tictactoe.game.board import Board


@pytest.fixture
def manager() -> DebugManager:
    return DebugManager(level=DebugLevel.DEBUG)


class TestDebugManager:
    def test_shared_instance_is_quiet_by_default(self) -> None:
        assert debug.level == DebugLevel.WARNING

    def test_no_console_output_by_default(self, manager: DebugManager) -> None:
        DebugManager()
        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert not any(h.get_name() == CONSOLE_HANDLER_NAME for h in handlers)
        assert sum(isinstance(h, logging.NullHandler) for h in handlers) == 1

    def test_console_toggle(self, manager: DebugManager) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        try:
            manager.configure(console=True)
            manager.configure(console=True)
            console = [h for h in logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME]
            assert len(console) == 1
            assert type(console[0]) is logging.StreamHandler
        finally:
            manager.configure(console=False)
        assert not any(h.get_name() == CONSOLE_HANDLER_NAME for h in logger.handlers)

    def test_level_filtering(self, manager: DebugManager, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        manager.configure(level=DebugLevel.INFO)
        manager.debug("hidden", "board")
        manager.info("shown", "board")
        messages = [r.getMessage() for r in caplog.records]
        assert "[board] shown" in messages
        assert "[board] hidden" not in messages

    def test_component_filtering(self, manager: DebugManager, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        manager.configure(components=["board"])
        manager.debug("kept", "board")
        manager.debug("dropped", "events")
        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["[board] kept"]

    def test_disabled(self, manager: DebugManager, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        manager.configure(enabled=False)
        manager.error("nothing")
        assert caplog.records == []

    def test_trace_prefix(self, caplog) -> None:
        manager = DebugManager(level=DebugLevel.TRACE)
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        manager.trace("step", "events")
        assert [r.getMessage() for r in caplog.records] == ["TRACE: [events] step"]

    def test_set_from_string(self, manager: DebugManager) -> None:
        assert manager.set_from_string("trace") is True
        assert manager.level == DebugLevel.TRACE
        assert manager.set_from_string("loud") is False
        assert manager.level == DebugLevel.TRACE

    def test_timer(self, manager: DebugManager) -> None:
        manager.start_timer("work")
        elapsed = manager.end_timer("work")
        assert elapsed is not None and elapsed >= 0
        assert manager.end_timer("work") is None

    def test_log_file(self, manager: DebugManager, tmp_path) -> None:
        log_file = tmp_path / "board.log"
        manager.configure(log_file=str(log_file))
        manager.warning("written", "board")
        manager.configure(log_file="")
        assert "[board] written" in log_file.read_text()
        logger = logging.getLogger(LOGGER_NAME)
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)


class TestBoardLogging:
    def test_victory_is_logged(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        debug.configure(level=DebugLevel.INFO)
        try:
            board = Board()
            for x in range(3):
                board.move("X", x, 0)
        finally:
            debug.configure(level=DebugLevel.WARNING)
        assert any("wins" in r.getMessage() for r in caplog.records)
