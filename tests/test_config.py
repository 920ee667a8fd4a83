from employee_api import config


def test_numeric_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "2")
    assert config._int("LOG_LEVEL", 1) == 2


def test_non_numeric_log_level_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    assert config._int("LOG_LEVEL", 1) == 1
    assert "Ignoring non-numeric LOG_LEVEL='INFO'" in caplog.text


def test_missing_or_blank_log_level(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert config._int("LOG_LEVEL", 1) == 1
    monkeypatch.setenv("LOG_LEVEL", " ")
    assert config._int("LOG_LEVEL", 1) == 1
