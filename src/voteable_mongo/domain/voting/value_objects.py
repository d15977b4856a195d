"""
Voting Domain Value Objects

Immutable value objects for the voting bounded context.
"""

from enum import StrEnum


class VoteValue(StrEnum):
    """Side a vote is cast on."""

    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "VoteValue":
        return VoteValue.DOWN if self is VoteValue.UP else VoteValue.UP

    @property
    def voters_field(self) -> str:
        """Name of the voter-id array inside ``votes``."""
        return self.value

    @property
    def count_field(self) -> str:
        """Name of the counter inside ``votes`` tracking this side."""
        return f"{self.value}_count"


class VoteTransition(StrEnum):
    """How a vote call changes the voter's state on a votee."""

    NEW = "new"  # Voter has not voted yet
    REVOTE = "revote"  # Move an existing vote to the other side
    UNVOTE = "unvote"  # Retract an existing vote
