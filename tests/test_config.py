import logging

import pytest

from accountboard.config import Settings
from accountboard.main import check_secret_key


class TestSecretKey:
    """Tests for the token signing key"""

    def test_configured_key_is_not_ephemeral(self, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "configured-key")

        config = Settings(_env_file=None)

        assert config.SECRET_KEY == "configured-key"
        assert config.secret_key_is_ephemeral is False

    def test_missing_key_is_generated(self, monkeypatch):
        monkeypatch.delenv("SECRET_KEY", raising=False)

        config = Settings(_env_file=None)

        assert config.SECRET_KEY
        assert config.secret_key_is_ephemeral is True
        assert Settings(_env_file=None).SECRET_KEY != config.SECRET_KEY

    def test_generated_key_logs_warning(self, monkeypatch, caplog):
        monkeypatch.delenv("SECRET_KEY", raising=False)
        caplog.set_level(logging.WARNING, logger="accountboard")

        check_secret_key(Settings(_env_file=None))

        assert "SECRET_KEY is not set" in caplog.text

    def test_configured_key_logs_nothing(self, caplog):
        caplog.set_level(logging.WARNING, logger="accountboard")

        check_secret_key(Settings(_env_file=None, SECRET_KEY="configured-key"))

        assert "SECRET_KEY" not in caplog.text


def test_bcrypt_rounds_upper_bound():
    with pytest.raises(ValueError):
        Settings(_env_file=None, BCRYPT_ROUNDS=32)
