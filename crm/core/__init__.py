"""
Core utilities shared across the CRM package.

This package hosts:
- configuration helpers (env vars, data paths, feature flags)
- cross-cutting helpers such as logging setup and the local clock

Repositories and services depend on these primitives instead of reading the
environment or configuring handlers themselves.
"""
