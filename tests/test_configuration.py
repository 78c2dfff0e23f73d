import logging
from pathlib import Path

import pytest

from paystack_gateway.configuration import (
    Configuration,
    LoggingOptions,
    configure,
    default_cache_dir,
    get_config,
    reset_config,
    set_config,
)
from paystack_gateway.log_filter import REDACTED, redact_payload


class TestConfiguration:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PAYSTACK_SECRET_KEY", raising=False)
        config = Configuration()
        assert config.secret_key is None
        assert config.logger is logging.getLogger("paystack_gateway")
        assert config.logging_options == LoggingOptions(headers=False, bodies=False)
        assert config.log_filter is redact_payload
        assert config.use_extensions is True
        assert config.timeout_seconds == 30
        assert config.transport is None

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("PAYSTACK_SECRET_KEY", "sk_env")
        monkeypatch.setenv("PAYSTACK_USE_EXTENSIONS", "false")
        config = reset_config()
        assert config.secret_key == "sk_env"
        assert config.use_extensions is False

    def test_configure_updates_shared_config(self):
        configure(timeout_seconds=5)
        assert get_config().timeout_seconds == 5

    def test_configure_rejects_unknown_option(self):
        with pytest.raises(AttributeError, match="api_version"):
            configure(api_version="2")

    def test_set_config(self):
        config = Configuration(secret_key="sk_other")
        set_config(config)
        assert get_config() is config

    def test_default_cache_dir(self, monkeypatch):
        monkeypatch.setenv("TMPDIR", "/var/tmp")
        assert default_cache_dir() == Path("/var/tmp/cache")
        monkeypatch.delenv("TMPDIR")
        assert default_cache_dir() == Path("/tmp/cache")


class TestRedactPayload:
    def test_sensitive_keys_masked(self):
        payload = {
            "Authorization": "Bearer sk_test",
            "data": {"access_token": "t", "api_key": "k", "email": "ada@example.com"},
            "items": [{"password": "p"}],
        }
        assert redact_payload(payload) == {
            "Authorization": REDACTED,
            "data": {"access_token": REDACTED, "api_key": REDACTED, "email": "ada@example.com"},
            "items": [{"password": REDACTED}],
        }

    def test_scalars_untouched(self):
        assert redact_payload("plain") == "plain"
