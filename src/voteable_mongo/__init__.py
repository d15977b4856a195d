"""Atomic up/down voting on documents embedded in MongoDB parent documents."""

from voteable_mongo.domain.shared.exceptions import (
    DomainError,
    InvalidArgumentError,
    UnsupportedOperationError,
)
from voteable_mongo.domain.voting import (
    EmbeddedVotingService,
    VoteableConfig,
    VoteableRegistry,
    Votee,
    VoteOptions,
    Votes,
    VoteValue,
)

__version__ = "0.1.0"

__all__ = [
    "EmbeddedVotingService",
    "VoteableConfig",
    "VoteableRegistry",
    "Votee",
    "Votes",
    "VoteOptions",
    "VoteValue",
    "DomainError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
]
