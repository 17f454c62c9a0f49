"""
High-level use cases for the CRM core.

Each service module orchestrates repositories to implement the business
rules (register client, place order, search, notify).

Routers (FastAPI endpoints) and scripts call these services instead of
manipulating the repositories or the JSON files directly.
"""
