import logging

import pytest

from core.logging_config import setup_logging


@pytest.fixture
def clear_root_logger(monkeypatch):
    """Returns a callable that detaches every root handler until the test ends."""
    root = logging.getLogger()
    level = root.level
    added = []

    def clear():
        handlers = []
        monkeypatch.setattr(root, "handlers", handlers)
        added.append(handlers)
        return root

    yield clear

    for handlers in added:
        for handler in handlers:
            handler.close()
    root.setLevel(level)


def test_setup_logging_writes_to_log_file(clear_root_logger, tmp_path):
    root = clear_root_logger()
    logfile = tmp_path / "server.log"

    setup_logging("DEBUG", str(logfile))
    logging.getLogger("postboard.test").info("hello from the server")
    for handler in root.handlers:
        handler.flush()

    assert root.level == logging.DEBUG
    assert "[INFO] postboard.test: hello from the server" in logfile.read_text(encoding="utf-8")


def test_setup_logging_without_log_file_adds_console_only(clear_root_logger):
    root = clear_root_logger()

    setup_logging("INFO")

    assert [type(h) for h in root.handlers] == [logging.StreamHandler]


def test_setup_logging_is_applied_once(clear_root_logger):
    root = clear_root_logger()

    setup_logging("INFO")
    setup_logging("INFO")

    assert len(root.handlers) == 1
