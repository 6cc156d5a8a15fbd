"""Unit tests for humancode.types module."""
import dataclasses

import pytest

from humancode.types import DEFAULT_BASE_URL, ClientConfig, Envelope


class TestClientConfig:
    def test_defaults(self):
        cfg = ClientConfig(app_id="app", app_key="secret")
        assert cfg.base_url == DEFAULT_BASE_URL
        assert cfg.debug is False
        assert cfg.timeout is None

    def test_immutable(self):
        cfg = ClientConfig(app_id="app", app_key="secret")
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.app_key = "other"

    def test_from_mapping_snake_case(self):
        cfg = ClientConfig.from_mapping({
            "app_id": "app",
            "app_key": "secret",
            "base_url": "https://example.com",
            "debug": True,
            "timeout": 10,
        })
        assert cfg == ClientConfig(
            app_id="app",
            app_key="secret",
            base_url="https://example.com",
            debug=True,
            timeout=10,
        )

    def test_from_mapping_camel_case(self):
        cfg = ClientConfig.from_mapping({
            "appId": "app",
            "appKey": "secret",
            "baseUrl": "https://example.com",
        })
        assert cfg.app_id == "app"
        assert cfg.app_key == "secret"
        assert cfg.base_url == "https://example.com"

    def test_from_mapping_default_base_url(self):
        cfg = ClientConfig.from_mapping({"app_id": "app", "app_key": "secret"})
        assert cfg.base_url == DEFAULT_BASE_URL

    def test_from_mapping_requires_app_id(self):
        with pytest.raises(ValueError, match="app_id"):
            ClientConfig.from_mapping({"app_key": "secret"})

    def test_from_mapping_requires_app_key(self):
        with pytest.raises(ValueError, match="app_key"):
            ClientConfig.from_mapping({"appId": "app"})


class TestEnvelope:
    def test_ok(self):
        assert Envelope(code=0, msg="").ok is True

    def test_not_ok(self):
        assert Envelope(code=7, msg="bad nonce").ok is False
