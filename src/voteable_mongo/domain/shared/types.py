"""Reusable Pydantic Annotated types for domain-wide validation.

Constrained types used across the package are defined here once, so models
can simply annotate their fields::

    from voteable_mongo.domain.shared.types import NonEmptyStr, VoteWeight

    class MyModel(BaseModel):
        name: NonEmptyStr
        weight: VoteWeight
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# ── Numeric types ───────────────────────────────────────────────────

VoteWeight = int | float
"""Static point weight of one up or down vote. May be negative."""

Points = int | float
"""Aggregate point score of a votee."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""


# ── Settings-specific constraints ──────────────────────────────────

ServerSelectionTimeoutMs = Annotated[int, Field(ge=100, le=120_000)]
"""Mongo server selection timeout in milliseconds: 100 … 120 000."""
