"""Core domain entities for the voting bounded context.

Field names follow the stored document layout exactly::

    {_id, votes: {up: [...], down: [...], up_count, down_count, count, point}}
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from voteable_mongo.domain.shared.types import Points, VoteWeight
from voteable_mongo.domain.voting.value_objects import VoteValue


class Votes(BaseModel):
    """Vote tally embedded in a votee."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    up: list[Any] = Field(default_factory=list)
    down: list[Any] = Field(default_factory=list)
    up_count: int = 0
    down_count: int = 0
    count: int = 0
    point: Points = 0

    def voters(self, value: VoteValue) -> list[Any]:
        return self.up if value is VoteValue.UP else self.down


class Votee(BaseModel):
    """In-memory handle on an embedded, vote-bearing sub-document.

    Fields other than ``_id`` and ``votes`` are kept as extras so a handle
    built from a stored fragment keeps them.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra="allow",
        populate_by_name=True,
    )

    id: Any = Field(default=None, alias="_id")
    votes: Votes = Field(default_factory=Votes)

    @classmethod
    def from_document(cls, fragment: dict[str, Any]) -> Votee:
        return cls.model_validate(fragment)


class VoteableConfig(BaseModel):
    """Static voting configuration of one document class."""

    model_config = ConfigDict(frozen=True)

    up: VoteWeight = 1
    down: VoteWeight = -1
    update_parents: bool = False
    update_counters: bool = True

    def weight(self, value: VoteValue) -> VoteWeight:
        return self.up if value is VoteValue.UP else self.down
