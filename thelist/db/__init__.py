"""Database helpers (store and model export)."""

from .models import Base, PersonRow
from .store import Store

__all__ = ["Base", "PersonRow", "Store"]
