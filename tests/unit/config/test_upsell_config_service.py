"""
🧪 test_upsell_config_service.py - unit-тести для ConfigService

Перевіряє:
- Singleton та дефолти з config.yaml
- Перекриття значень змінними оточення
- set()/section() та злиття вкладених словників
"""

import pytest

from checkout_upsell.config.config_service import ConfigService


@pytest.mark.usefixtures("fresh_config")
def test_singleton_and_yaml_defaults():
    service = ConfigService()
    assert service is ConfigService()
    assert service.get("upsell.batch_size") == 5
    assert service.get("upsell.query_tag") == "UPSELL"
    assert float(service.get("upsell.error_dismiss_sec")) == 3.0
    assert service.get("storefront.timeout_sec") == 10


@pytest.mark.usefixtures("fresh_config")
def test_missing_key_returns_default():
    service = ConfigService()
    assert service.get("upsell.nope", "fallback") == "fallback"
    assert service.get("nope.deeper.key") is None


def test_env_overrides_yaml(monkeypatch, fresh_config):
    monkeypatch.setenv("STOREFRONT_API_URL", "https://env.test/graphql")
    monkeypatch.setenv("STOREFRONT_ACCESS_TOKEN", "tok")
    ConfigService.reset()

    service = ConfigService()
    assert service.get("storefront.api_url") == "https://env.test/graphql"
    assert service.get("storefront.access_token") == "tok"
    assert service.get("storefront.timeout_sec") == 10


def test_empty_env_does_not_override(monkeypatch, fresh_config):
    monkeypatch.setenv("STOREFRONT_API_URL", "")
    ConfigService.reset()
    assert ConfigService().get("storefront.api_url").startswith("https://")


@pytest.mark.usefixtures("fresh_config")
def test_set_and_section():
    service = ConfigService()
    service.set("upsell.batch_size", 3)
    service.set("custom.nested.value", "x")

    section = service.section("upsell")
    assert section["batch_size"] == 3
    assert section["query_tag"] == "UPSELL"
    assert service.get("custom.nested.value") == "x"
    assert service.section("upsell.batch_size") is None

    section["batch_size"] = 99
    assert service.get("upsell.batch_size") == 3


@pytest.mark.usefixtures("fresh_config")
def test_deep_update_merges_nested_dicts():
    service = ConfigService()
    target = {"a": {"b": 1, "c": 2}}
    service._deep_update(target, {"a": {"c": 3, "d": 4}})
    assert target == {"a": {"b": 1, "c": 3, "d": 4}}
    assert service._unflatten_dict({"x.y.z": 1}) == {"x": {"y": {"z": 1}}}
