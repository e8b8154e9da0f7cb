"""
DOMAIN LAYER - Profiles, research domains, papers and messages

This layer contains:
- Entities: Business objects with identity (User, ResearchDomain, Paper, Message)
- Value Objects: Immutable types (UserId, PaperId, MessageId, UserEmail)
- Ports: Interfaces that infrastructure implements (KV store, blob store, identity)
- Services: Pure domain logic (relationship index keys)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Redis, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
