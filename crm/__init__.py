"""Minimal client/order CRM persisted as JSON files."""

__version__ = "0.1.0"
