"""Tests for settings and the server entry point bind check."""

from __future__ import annotations

import pytest

from wellcheck.core.config.settings import InsecureBindError, get_settings, is_loopback_host
from wellcheck.core.server import main


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("WELLCHECK_HOST", raising=False)
        settings = get_settings()
        assert settings.wellcheck_host == "127.0.0.1"
        assert settings.wellcheck_allow_insecure_bind is False
        assert settings.client_id_start == 0
        assert settings.client_id_width == 4
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CLIENT_ID_START", "120")
        monkeypatch.setenv("WELLCHECK_PORT", "9100")
        settings = get_settings()
        assert settings.client_id_start == 120
        assert settings.wellcheck_port == 9100


class TestBindAddress:
    @pytest.mark.parametrize("host", ["127.0.0.1", "localhost", "::1"])
    def test_loopback_hosts(self, host):
        assert is_loopback_host(host)

    @pytest.mark.parametrize("host", ["0.0.0.0", "192.168.1.20", "example.org"])
    def test_other_hosts(self, host):
        assert not is_loopback_host(host)

    def test_default_is_loopback(self, monkeypatch):
        monkeypatch.delenv("WELLCHECK_HOST", raising=False)
        monkeypatch.delenv("WELLCHECK_PORT", raising=False)
        assert get_settings().bind_address() == ("127.0.0.1", 8001)

    def test_public_host_refused(self, monkeypatch):
        monkeypatch.setenv("WELLCHECK_HOST", "0.0.0.0")
        monkeypatch.setenv("WELLCHECK_ALLOW_INSECURE_BIND", "false")
        with pytest.raises(InsecureBindError, match="WELLCHECK_ALLOW_INSECURE_BIND"):
            get_settings().bind_address()

    def test_public_host_allowed_when_opted_in(self, monkeypatch):
        monkeypatch.setenv("WELLCHECK_HOST", "0.0.0.0")
        monkeypatch.setenv("WELLCHECK_ALLOW_INSECURE_BIND", "true")
        assert get_settings().bind_address()[0] == "0.0.0.0"

    def test_run_refuses_before_building_app(self, monkeypatch):
        monkeypatch.setenv("WELLCHECK_HOST", "0.0.0.0")
        monkeypatch.setenv("WELLCHECK_ALLOW_INSECURE_BIND", "false")

        def _fail():
            raise AssertionError("app built for a refused host")

        monkeypatch.setattr(main, "create_app", _fail)
        with pytest.raises(InsecureBindError):
            main.run()
