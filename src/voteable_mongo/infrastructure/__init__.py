"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Persistence (Mongo client wrapper, Mongo and in-memory votee stores)
"""

from voteable_mongo.infrastructure.persistence.database import MongoDatabase
from voteable_mongo.infrastructure.persistence.memory_store import InMemoryVoteeStore
from voteable_mongo.infrastructure.persistence.mongo_store import MongoVoteeStore

__all__ = [
    "MongoDatabase",
    "MongoVoteeStore",
    "InMemoryVoteeStore",
]
