"""
Configuration helpers for the CRM core.

Exposes a Settings object that reads environment variables (data directory,
file names, order due window, feature flags) so that services and scripts do
not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    data_dir: Path
    clients_file: str
    orders_file: str
    order_due_days: int
    client_cache_enabled: bool
    strict_storage: bool
    log_level: str

    @property
    def clients_path(self) -> Path:
        return self.data_dir / self.clients_file

    @property
    def orders_path(self) -> Path:
        return self.data_dir / self.orders_file


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        data_dir=Path(os.getenv("CRM_DATA_DIR") or "."),
        clients_file=os.getenv("CRM_CLIENTS_FILE") or "clients.json",
        orders_file=os.getenv("CRM_ORDERS_FILE") or "orders.json",
        order_due_days=_int(os.getenv("CRM_ORDER_DUE_DAYS", "14"), 14),
        client_cache_enabled=_bool(os.getenv("CRM_CLIENT_CACHE"), False),
        strict_storage=_bool(os.getenv("CRM_STRICT_STORAGE"), False),
        log_level=(os.getenv("CRM_LOG_LEVEL") or "INFO").upper(),
    )
