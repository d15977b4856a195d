"""
Shared Domain Kernel

Contains identifiers and exceptions shared across the package.
"""

from voteable_mongo.domain.shared.exceptions import (
    DomainError,
    InvalidArgumentError,
    UnsupportedOperationError,
    ValidationError,
)
from voteable_mongo.domain.shared.identifiers import StoreId, to_store_id

__all__ = [
    "StoreId",
    "to_store_id",
    "DomainError",
    "ValidationError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
]
