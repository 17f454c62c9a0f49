from __future__ import annotations

from pathlib import Path

from crm.core import config as core_config


def test_defaults(monkeypatch):
    for name in (
        "CRM_DATA_DIR",
        "CRM_CLIENTS_FILE",
        "CRM_ORDERS_FILE",
        "CRM_ORDER_DUE_DAYS",
        "CRM_CLIENT_CACHE",
        "CRM_STRICT_STORAGE",
        "CRM_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()

    settings = core_config.get_settings()
    assert settings.clients_path == Path("clients.json")
    assert settings.orders_path == Path("orders.json")
    assert settings.order_due_days == 14
    assert settings.client_cache_enabled is False
    assert settings.strict_storage is False
    assert settings.log_level == "INFO"
    core_config.get_settings.cache_clear()


def test_env_overrides(crm_env, monkeypatch):
    monkeypatch.setenv("CRM_CLIENTS_FILE", "c.json")
    monkeypatch.setenv("CRM_ORDER_DUE_DAYS", "not-a-number")
    monkeypatch.setenv("CRM_STRICT_STORAGE", "yes")
    monkeypatch.setenv("CRM_LOG_LEVEL", "debug")
    core_config.get_settings.cache_clear()

    settings = core_config.get_settings()
    assert settings.clients_path == crm_env / "c.json"
    assert settings.order_due_days == 14
    assert settings.strict_storage is True
    assert settings.log_level == "DEBUG"
