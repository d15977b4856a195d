"""
Voting Bounded Context

Atomic up/down voting on documents embedded in a parent document.
"""

from voteable_mongo.domain.voting.entities import VoteableConfig, Votee, Votes
from voteable_mongo.domain.voting.options import VoteOptions
from voteable_mongo.domain.voting.planner import VotePlan, plan_vote
from voteable_mongo.domain.voting.propagation import (
    ParentPropagation,
    UnsupportedParentPropagation,
)
from voteable_mongo.domain.voting.registry import VoteableRegistry
from voteable_mongo.domain.voting.repository import VoteeStore
from voteable_mongo.domain.voting.services import EmbeddedVotingService
from voteable_mongo.domain.voting.value_objects import VoteTransition, VoteValue

__all__ = [
    # Entities
    "Votee",
    "Votes",
    "VoteableConfig",
    # Value Objects
    "VoteValue",
    "VoteTransition",
    "VoteOptions",
    # Planning
    "VotePlan",
    "plan_vote",
    # Repository
    "VoteeStore",
    "VoteableRegistry",
    # Services
    "EmbeddedVotingService",
    "ParentPropagation",
    "UnsupportedParentPropagation",
]
