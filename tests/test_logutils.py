import logging

import pytest

from optimise.logutils import CustomLogFormatter, setup_logging


@pytest.fixture
def optimise_logger():
    logger = logging.getLogger("optimise")
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.disabled = False
    logger.setLevel(logging.NOTSET)


def test_logging_disabled_by_default(optimise_logger, monkeypatch):
    monkeypatch.delenv("DEBUG_OPTIMISE", raising=False)
    setup_logging()
    assert optimise_logger.disabled


def test_logging_to_stderr(optimise_logger, monkeypatch):
    monkeypatch.setenv("DEBUG_OPTIMISE", "1")
    handlers_before = len(optimise_logger.handlers)
    setup_logging()
    assert not optimise_logger.disabled
    assert optimise_logger.level == logging.DEBUG
    assert len(optimise_logger.handlers) == handlers_before + 1


def test_logging_to_file_only(optimise_logger, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DEBUG_OPTIMISE", "silent")
    setup_logging()
    optimise_logger.debug("hello from the test")
    for handler in optimise_logger.handlers:
        handler.flush()

    log_files = list(tmp_path.glob("optimise_debug_*.log"))
    assert len(log_files) == 1
    assert "hello from the test" in log_files[0].read_text()
    assert not any(
        type(h) is logging.StreamHandler for h in optimise_logger.handlers
    )


def test_formatter_with_colors_ends_with_message():
    record = logging.LogRecord(
        "optimise", logging.WARNING, "dispatcher.py", 7, "Careful", (), None
    )
    line = CustomLogFormatter().format(record)
    assert "WARNING" in line
    assert line.endswith(" | Careful")


def test_formatter_without_colors():
    record = logging.LogRecord(
        "optimise", logging.INFO, "process.py", 42, "Spawning %s", ("cargo",), None
    )
    line = CustomLogFormatter(no_colors=True).format(record)
    assert " | optimise | INFO     | process.py:42" in line
    assert line.endswith(" | Spawning cargo")
