from dataclasses import FrozenInstanceError

import pytest

from webhook_inspector.core.config import SECRET_ALPHABET, Settings, generate_secret


def test_generate_secret_is_alphanumeric():
    secret = generate_secret()
    assert len(secret) == 32
    assert all(ch in SECRET_ALPHABET for ch in secret)
    assert generate_secret() != secret


def test_from_env_uses_configured_secret(monkeypatch):
    monkeypatch.setenv("WEBHOOK_SECRET", "s3cret")
    monkeypatch.setenv("PORT", "8080")
    settings = Settings.from_env()
    assert settings.secret == "s3cret"
    assert settings.port == 8080
    assert settings.secret_generated is False


@pytest.mark.parametrize("value", [None, ""])
def test_from_env_generates_secret_when_unset(monkeypatch, value):
    if value is None:
        monkeypatch.delenv("WEBHOOK_SECRET", raising=False)
    else:
        monkeypatch.setenv("WEBHOOK_SECRET", value)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)
    settings = Settings.from_env()
    assert len(settings.secret) >= 32
    assert settings.secret_generated is True
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"


def test_settings_are_immutable_and_repr_hides_secret():
    settings = Settings(secret="hidden-value")
    with pytest.raises(FrozenInstanceError):
        settings.secret = "other"
    assert "hidden-value" not in repr(settings)
