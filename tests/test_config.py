"""Tests for ClientConfig."""

import dataclasses

import pytest

from acapy_client import ClientConfig


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig(base_url="http://localhost:8031")
        assert config.api_key is None
        assert dict(config.headers) == {}
        assert config.timeout == 30000
        assert config.timeout_seconds == 30.0

    def test_trailing_slash_stripped(self):
        assert ClientConfig(base_url="http://localhost:8031/").base_url == "http://localhost:8031"

    def test_immutable(self):
        config = ClientConfig(base_url="http://localhost:8031", headers={"X-A": "1"})
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_key = "changed"
        with pytest.raises(TypeError):
            config.headers["X-A"] = "2"

    def test_hashable_with_headers(self):
        a = ClientConfig(base_url="http://localhost:8031", headers={"X-A": "1"})
        b = ClientConfig(base_url="http://localhost:8031/", headers={"X-A": "1"})
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_headers_participate_in_equality(self):
        a = ClientConfig(base_url="http://localhost:8031", headers={"X-A": "1"})
        b = ClientConfig(base_url="http://localhost:8031", headers={"X-A": "2"})
        assert a != b

    def test_headers_copied(self):
        headers = {"X-A": "1"}
        config = ClientConfig(base_url="http://localhost:8031", headers=headers)
        headers["X-A"] = "2"
        assert config.headers["X-A"] == "1"

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_rejects_non_positive_timeout(self, timeout):
        with pytest.raises(ValueError, match="timeout must be positive"):
            ClientConfig(base_url="http://localhost:8031", timeout=timeout)

    def test_rejects_empty_base_url(self):
        with pytest.raises(ValueError, match="base_url"):
            ClientConfig(base_url="")


class TestFromEnv:
    def test_full_environment(self):
        config = ClientConfig.from_env(
            {
                "ACAPY_ADMIN_URL": "http://issuer:8031/",
                "ACAPY_API_KEY": "secret",
                "ACAPY_TIMEOUT_MS": "5000",
            }
        )
        assert config.base_url == "http://issuer:8031"
        assert config.api_key == "secret"
        assert config.timeout == 5000

    def test_optional_values_default(self):
        config = ClientConfig.from_env({"ACAPY_ADMIN_URL": "http://issuer:8031", "ACAPY_API_KEY": ""})
        assert config.api_key is None
        assert config.timeout == 30000

    def test_missing_url_raises(self):
        with pytest.raises(ValueError, match="ACAPY_ADMIN_URL"):
            ClientConfig.from_env({})

    def test_bad_timeout_raises(self):
        with pytest.raises(ValueError, match="ACAPY_TIMEOUT_MS"):
            ClientConfig.from_env({"ACAPY_ADMIN_URL": "http://x", "ACAPY_TIMEOUT_MS": "soon"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("ACAPY_ADMIN_URL", "http://holder:8032")
        monkeypatch.delenv("ACAPY_API_KEY", raising=False)
        monkeypatch.delenv("ACAPY_TIMEOUT_MS", raising=False)
        assert ClientConfig.from_env().base_url == "http://holder:8032"
