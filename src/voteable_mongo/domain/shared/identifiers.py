"""Coercion of loosely typed identifiers into store-native ids."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bson import ObjectId

StoreId = Any
"""Anything that can be stored as a document ``_id`` or voter id."""

_CONTAINER_TYPES = (Mapping, list, tuple, set, frozenset)


def to_store_id(value: Any) -> StoreId | None:
    """Convert ``value`` to the identifier the store expects.

    Strings are stripped; those that are valid ObjectId hex become
    ``ObjectId`` and other non-blank strings are kept so documents keyed by
    custom ids keep working. Other scalars (ObjectId, int, UUID, datetime,
    ``bson.Binary``...) pass through unchanged. ``None``, blank strings,
    booleans and containers yield ``None``.
    """
    if value is None or isinstance(value, (bool, *_CONTAINER_TYPES)):
        return None
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        if ObjectId.is_valid(stripped):
            return ObjectId(stripped)
        return stripped
    return value
