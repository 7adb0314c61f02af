import logging

import pytest
from pydantic import ValidationError

from how_long_since import config as config_module
from how_long_since.config import Config, loadConfig

@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr(config_module.dotenv, 'load_dotenv', lambda: False)
    for name in ('REFRESH_INTERVAL', 'LOG_LEVEL', 'LOG_FILE'):
        monkeypatch.delenv('HOW_LONG_SINCE_' + name, raising=False)

def test_defaults():
    config = loadConfig()
    assert config == Config()
    assert config.refresh_interval == 1.0
    assert config.log_level == 'WARNING'
    assert config.log_file is None

def test_reads_environment(monkeypatch, tmp_path):
    log_file = str(tmp_path / 'hls.log')
    monkeypatch.setenv('HOW_LONG_SINCE_REFRESH_INTERVAL', '2.5')
    monkeypatch.setenv('HOW_LONG_SINCE_LOG_LEVEL', 'debug')
    monkeypatch.setenv('HOW_LONG_SINCE_LOG_FILE', log_file)
    config = loadConfig()
    assert config.refresh_interval == 2.5
    assert config.log_level == 'DEBUG'
    assert config.log_file == log_file
    assert logging.getLevelName(config.log_level) == logging.DEBUG

def test_rejects_non_positive_interval(monkeypatch):
    monkeypatch.setenv('HOW_LONG_SINCE_REFRESH_INTERVAL', '0')
    with pytest.raises(ValidationError):
        loadConfig()

def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        Config(log_level='chatty')
