"""
tests/boot/test_setup.py - Configuration and Logging Tests
"""

import os
import logging

import pytest

from boot.setup import load_config, load_env_file, setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("GREETR_HOST", "GREETR_LOG_LEVEL", "GREETR_LOG_DIR", "GREETR_PORT", "PORT"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoadConfig:
    
    def test_defaults(self, clean_env, tmp_path):
        config = load_config(tmp_path / "missing.env")
        
        assert config["host"] == "0.0.0.0"
        assert config["port"] == 3000
        assert config["log_level"] == "INFO"
        assert config["log_dir"] == ""
    
    def test_environment_overrides_host(self, clean_env, tmp_path):
        clean_env.setenv("GREETR_HOST", "127.0.0.1")
        
        config = load_config(tmp_path / "missing.env")
        
        assert config["host"] == "127.0.0.1"
    
    def test_port_cannot_be_overridden(self, clean_env, tmp_path):
        clean_env.setenv("GREETR_PORT", "8080")
        clean_env.setenv("PORT", "8080")
        
        config = load_config(tmp_path / "missing.env")
        
        assert config["port"] == 3000


class TestLoadEnvFile:
    
    @pytest.fixture
    def env_keys(self, clean_env):
        """Drop keys written by load_env_file after each test."""
        yield
        for key in ("GREETR_LOG_LEVEL", "GREETR_LOG_DIR"):
            os.environ.pop(key, None)
    
    def test_reads_key_values(self, env_keys, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\n\nGREETR_LOG_LEVEL = DEBUG\nnot a pair\n")
        
        config = load_config(env_file)
        
        assert config["log_level"] == "DEBUG"
    
    def test_environment_wins_over_env_file(self, env_keys, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GREETR_LOG_LEVEL=DEBUG\nGREETR_LOG_DIR=from-file\n")
        clean_env.setenv("GREETR_LOG_LEVEL", "ERROR")
        
        config = load_config(env_file)
        
        assert config["log_level"] == "ERROR"
        assert config["log_dir"] == "from-file"
    
    def test_missing_file_is_ignored(self, tmp_path):
        load_env_file(tmp_path / "nope.env")


class TestSetupLogging:
    
    def test_console_only(self, restore_root_logger):
        path = setup_logging("WARNING", "")
        
        assert path is None
        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.handlers[0].level == logging.WARNING
    
    def test_log_file(self, restore_root_logger, tmp_path):
        path = setup_logging("INFO", str(tmp_path / "logs"))
        logging.getLogger("greetr.test").debug("to file only")
        for handler in restore_root_logger.handlers:
            handler.flush()
        
        assert path is not None
        content = (tmp_path / "logs" / "greetr.log").read_text(encoding="utf-8")
        assert "to file only" in content
    
    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging("LOUD", "")
        
        assert restore_root_logger.handlers[0].level == logging.INFO
