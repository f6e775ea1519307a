"""Persistence layer: ArangoDB access through per-collection operations classes."""

from .db import Database

__all__ = ["Database"]
