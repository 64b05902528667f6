import logging

import pytest

from app.config import init_firebase
from app.core.settings import settings


@pytest.fixture
def config_log(caplog):
    # the "app" logger tree does not propagate to root, attach caplog directly
    config_logger = logging.getLogger("app.config")
    config_logger.addHandler(caplog.handler)
    caplog.set_level(logging.WARNING, logger="app.config")
    yield caplog
    config_logger.removeHandler(caplog.handler)


def test_init_firebase_without_credentials(monkeypatch, tmp_path, config_log):
    monkeypatch.setattr(settings, "firebase_cert_json", None)
    monkeypatch.setattr(settings, "firebase_cert_path", str(tmp_path / "missing.json"))
    assert init_firebase() is False
    assert "No Firebase credentials" in config_log.text


def test_init_firebase_reports_error_in_production(monkeypatch, tmp_path, config_log):
    monkeypatch.setattr(settings, "environment", "production")
    monkeypatch.setattr(settings, "firebase_cert_json", "{not json")
    monkeypatch.setattr(settings, "firebase_cert_path", str(tmp_path / "missing.json"))
    assert init_firebase() is False
    assert "Invalid FIREBASE_CERT_JSON" in config_log.text
    assert any(r.levelno == logging.ERROR for r in config_log.records)


def test_mock_auth_only_in_development_and_test(monkeypatch):
    for env, expected in (("development", True), ("test", True), ("production", False), ("staging", False)):
        monkeypatch.setattr(settings, "environment", env)
        assert settings.mock_auth_enabled is expected
