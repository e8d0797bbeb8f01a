import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog

from shared.dal.models import GameRecord
from shared.logging import _render_models, setup_logging


@pytest.fixture(autouse=True)
def _cleanup_root_logger():
    """Close and remove all handlers from the root logger after each test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)


@pytest.fixture(autouse=True)
def _allow_file_logging():
    """Disable the _is_test guard so logging tests can create real file handlers."""
    with patch("shared.logging._is_test", return_value=False):
        yield


class TestSetupLogging:
    def test_configures_stdout_handler(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        setup_logging()
        root = logging.getLogger()

        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_returns_none_without_log_dir(self):
        assert setup_logging() is None

    def test_file_handler_in_log_dir(self, tmp_path):
        log_path = setup_logging(log_dir=tmp_path / "vault")
        root = logging.getLogger()

        assert len(root.handlers) == 2
        assert isinstance(root.handlers[1], logging.FileHandler)
        assert log_path is not None
        assert log_path.parent == tmp_path / "vault"
        assert log_path.suffix == ".log"

    def test_log_file_has_datetime_in_name(self, tmp_path):
        fixed_time = datetime(2025, 3, 15, 10, 30, 45, tzinfo=UTC)
        with patch("shared.logging.datetime") as mock_dt:
            mock_dt.now.return_value = fixed_time
            log_path = setup_logging(log_dir=tmp_path / "vault")

        assert log_path is not None
        assert log_path.name == "2025-03-15_10-30-45.log"

    def test_no_file_under_pytest(self, tmp_path):
        with patch("shared.logging._is_test", return_value=True):
            assert setup_logging(log_dir=tmp_path / "vault") is None
        assert not (tmp_path / "vault").exists()

    def test_repeated_calls_do_not_stack_handlers(self):
        setup_logging()
        setup_logging()

        assert len(logging.getLogger().handlers) == 1

    def test_quiets_noisy_loggers(self):
        setup_logging(level=logging.DEBUG)

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        setup_logging()

        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_log_level_raises(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "bogus")
        with pytest.raises(ValueError, match="Invalid LOG_LEVEL"):
            setup_logging()

    def test_invalid_log_format_raises(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")
        with pytest.raises(ValueError, match="Invalid LOG_FORMAT"):
            setup_logging()

    def test_json_mode_writes_json_lines(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        log_path = setup_logging(log_dir=tmp_path / "vault")

        structlog.contextvars.bind_contextvars(request_id="req-1")
        structlog.get_logger("test.json").info("game created", game_id=7)

        assert log_path is not None
        parsed = json.loads(Path(log_path).read_text().strip().splitlines()[-1])
        assert parsed["event"] == "game created"
        assert parsed["game_id"] == 7
        assert parsed["request_id"] == "req-1"

    def test_console_mode_writes_event(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "console")
        log_path = setup_logging(log_dir=tmp_path / "vault")

        structlog.get_logger("test.console").warning("console test event")

        assert log_path is not None
        assert "console test event" in log_path.read_text()


class TestRenderModels:
    def test_replaces_model_with_dump(self):
        record = GameRecord(id=1, title="Hades", platform="PC")
        result = _render_models(None, "", {"game": record, "event": "x"})

        assert result["game"]["title"] == "Hades"
        assert result["game"]["id"] == 1
        assert result["event"] == "x"

    def test_leaves_plain_values_unchanged(self):
        event_dict = {"count": 42, "name": "test"}
        assert _render_models(None, "", event_dict) == {"count": 42, "name": "test"}
