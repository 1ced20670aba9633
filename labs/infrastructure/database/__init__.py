"""Database infrastructure package."""

from .mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
