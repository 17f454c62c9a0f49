"""
Persistence adapters.

These modules encapsulate how clients and orders are stored/retrieved (today
one JSON file per entity type). Services depend on the repositories rather
than touching the files directly.
"""
