import pytest
from loguru import logger

from autotest_tools.common import ensure_directory, init_logger, reset_logger


@pytest.fixture
def fresh_logger():
    reset_logger()
    yield
    reset_logger()
    init_logger()


def test_file_sink_respects_level(fresh_logger, tmp_path):
    log_file = tmp_path / "logs" / "ui.log"

    init_logger(level="warning", log_file=str(log_file))
    logger.info("navigation details")
    logger.warning("screenshot skipped")
    logger.remove()

    content = log_file.read_text()
    assert "screenshot skipped" in content
    assert "navigation details" not in content


def test_second_init_is_ignored(fresh_logger, tmp_path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"

    init_logger(log_file=str(first))
    init_logger(log_file=str(second))
    logger.remove()

    assert first.exists()
    assert not second.exists()


def test_level_from_environment(fresh_logger, tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    log_file = tmp_path / "debug.log"

    init_logger(log_file=str(log_file))
    logger.debug("frame switched")
    logger.remove()

    assert "frame switched" in log_file.read_text()


def test_ensure_directory(tmp_path):
    target = tmp_path / "a" / "b"

    assert ensure_directory(str(target)) == str(target)
    assert target.is_dir()
    assert ensure_directory("") == ""
