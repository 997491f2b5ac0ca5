"""
Tuiter Backend — Application Package
=====================================

What: REST backend for a small social network (users, tuits, likes, follows,
      bookmarks, messages).

Architecture Note:
    Every resource is built from the same layers:

    ┌─────────────────────────────────────┐
    │        Controllers (API Layer)      │  ← routes → handler methods
    ├─────────────────────────────────────┤
    │        DAOs (Data Access)           │  ← one persistence call per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    One AppContext per process holds exactly one DAO and one controller
    per resource type.
"""

__version__ = "1.0.0"
