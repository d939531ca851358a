"""Tests for mailer settings."""

import pytest
from notifications.config import MailerSettings, get_mailer_settings


class TestMailerSettings:
    def test_defaults_use_fake_backend(self):
        settings = MailerSettings()
        assert settings.backend == "fake"
        assert settings.manager_recipients == ["managers@shopcart.local"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SHOPCART_MAILER_HOST", "smtp.example.com")
        monkeypatch.setenv("SHOPCART_MAILER_PORT", "2525")
        monkeypatch.setenv("SHOPCART_MAILER_PASSWORD", "s3cret")
        monkeypatch.setenv("SHOPCART_MAILER_MANAGER_RECIPIENTS", '["a@example.com", "b@example.com"]')

        settings = MailerSettings()
        assert settings.host == "smtp.example.com"
        assert settings.port == 2525
        assert settings.password.get_secret_value() == "s3cret"
        assert settings.manager_recipients == ["a@example.com", "b@example.com"]

    def test_password_is_not_exposed_in_repr(self, monkeypatch):
        monkeypatch.setenv("SHOPCART_MAILER_PASSWORD", "s3cret")
        assert "s3cret" not in repr(MailerSettings())

    def test_unknown_backend_is_rejected(self):
        with pytest.raises(ValueError):
            MailerSettings(backend="carrier-pigeon")

    def test_unknown_backend_from_environment_is_rejected(self, monkeypatch):
        monkeypatch.setenv("SHOPCART_MAILER_BACKEND", "sms")
        with pytest.raises(ValueError):
            MailerSettings()

    def test_smtp_backend_requires_recipients(self):
        with pytest.raises(ValueError):
            MailerSettings(backend="smtp", manager_recipients=[])

    def test_get_mailer_settings_is_cached(self):
        assert get_mailer_settings() is get_mailer_settings()
