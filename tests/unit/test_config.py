"""
Tests for environment configuration and logging setup
"""
import logging

import pytest

from src.config import DEFAULT_PORT, Settings, load_settings
from src.logging_setup import resolve_level, setup_logging


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({})
        assert settings == Settings()
        assert settings.port == DEFAULT_PORT
        assert settings.seed_data is True

    def test_reads_environment(self):
        settings = load_settings(
            {"HOST": "127.0.0.1", "PORT": "8080", "SEED_DATA": "false", "LOG_LEVEL": "2", "LOG_FILE": "app.log"}
        )
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.seed_data is False
        assert settings.log_level == "2"
        assert settings.log_file == "app.log"

    @pytest.mark.parametrize("raw", ["abc", "0", "70000"])
    def test_invalid_port_falls_back(self, raw, caplog):
        with caplog.at_level(logging.WARNING, logger="src.config"):
            assert load_settings({"PORT": raw}).port == DEFAULT_PORT
        assert caplog.records

    def test_invalid_seed_flag_falls_back(self):
        assert load_settings({"SEED_DATA": "maybe"}).seed_data is True


class TestLogging:
    @pytest.mark.parametrize(
        "raw, level",
        [("0", logging.CRITICAL + 1), ("1", logging.INFO), ("2", logging.DEBUG), ("x", logging.INFO), ("7", logging.ERROR)],
    )
    def test_resolve_level(self, raw, level):
        assert resolve_level(raw) == level

    def test_setup_logging_to_file(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        log_file = tmp_path / "logs" / "app.log"
        try:
            setup_logging("1", str(log_file))
            logging.getLogger("src.test").info("hello from test")
            for handler in root.handlers:
                handler.flush()
            assert "hello from test" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)


def test_create_app_without_seed():
    from fastapi.testclient import TestClient

    from src.index import create_app

    client = TestClient(create_app(Settings(seed_data=False)))
    assert client.get("/professors").json() == []
    assert client.get("/status").json()["professors"] == 0
