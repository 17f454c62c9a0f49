from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Garante que o pacote crm seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from crm.core import config as core_config  # noqa: E402
from crm.domain.entities import (  # noqa: E402
    client_from_dict,
    client_to_dict,
    order_from_dict,
    order_to_dict,
)
from crm.repositories.json_storage import JsonFileStorage  # noqa: E402
from crm.repositories.repository import OrderRepository, Repository  # noqa: E402
from crm.services.crm_service import CrmService  # noqa: E402

FIXED_NOW = datetime(2024, 3, 1, 9, 30, tzinfo=timezone(timedelta(hours=3)))


@pytest.fixture()
def crm_env(tmp_path, monkeypatch):
    """Points CRM_DATA_DIR at a temporary directory and resets cached settings."""
    monkeypatch.setenv("CRM_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("CRM_CLIENT_CACHE", raising=False)
    monkeypatch.delenv("CRM_STRICT_STORAGE", raising=False)
    core_config.get_settings.cache_clear()
    yield tmp_path
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client_storage(tmp_path):
    return JsonFileStorage(tmp_path / "clients.json", client_from_dict, client_to_dict)


@pytest.fixture()
def order_storage(tmp_path):
    return JsonFileStorage(tmp_path / "orders.json", order_from_dict, order_to_dict)


@pytest.fixture()
def fixed_now():
    return FIXED_NOW


@pytest.fixture()
def service(client_storage, order_storage, fixed_now):
    return CrmService(
        Repository(client_storage),
        OrderRepository(order_storage),
        clock=lambda: fixed_now,
    )
