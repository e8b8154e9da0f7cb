"""
DOMAIN SERVICES - Pure domain logic (no I/O)

- clock.py              → the single timestamp source for createdAt
- relationship_index.py → entity keys and relationship pointer keys
"""
