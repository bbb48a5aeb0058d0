"""
Persistence-facing use cases.

Callers (routers, scripts) depend on PeopleRepository rather than touching the
store or its SQLAlchemy session directly.
"""

from .people_repository import PeopleRepository

__all__ = ["PeopleRepository"]
