"""
Vote Transition Planner

Turns normalized vote options into a conditional update: a precondition on the
embedded votee and the mutation to apply when it holds. Both go to the store
in one find-and-modify, so the tally is never computed from a separate read.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from voteable_mongo.domain.shared.types import Points
from voteable_mongo.domain.voting.entities import VoteableConfig, Votes
from voteable_mongo.domain.voting.options import VoteOptions
from voteable_mongo.domain.voting.value_objects import VoteTransition, VoteValue


@dataclass(frozen=True)
class VotePlan:
    """A (precondition, mutation) pair scoped to one embedded votee.

    The precondition is expressed as voter membership of the ``up``/``down``
    arrays; the mutation as an optional pull, an optional push and counter
    increments, all relative to the votee's ``votes`` sub-document.
    """

    transition: VoteTransition
    embedded_field: str
    parent_doc_id: Any
    votee_id: Any
    voter_id: Any
    absent_from: tuple[VoteValue, ...] = ()
    present_in: VoteValue | None = None
    pull_from: VoteValue | None = None
    push_to: VoteValue | None = None
    increments: Mapping[str, Points] = field(default_factory=dict)

    @property
    def filter(self) -> dict[str, Any]:
        """Mongo query matching the parent only if the precondition holds."""
        elem_match: dict[str, Any] = {"_id": self.votee_id}
        for side in self.absent_from:
            elem_match[f"votes.{side.voters_field}"] = {"$ne": self.voter_id}
        if self.present_in is not None:
            elem_match[f"votes.{self.present_in.voters_field}"] = self.voter_id
        return {
            "_id": self.parent_doc_id,
            self.embedded_field: {"$elemMatch": elem_match},
        }

    @property
    def update(self) -> dict[str, Any]:
        """Mongo update applied through the positional operator."""
        prefix = f"{self.embedded_field}.$.votes."
        update: dict[str, Any] = {}
        if self.pull_from is not None:
            update["$pull"] = {prefix + self.pull_from.voters_field: self.voter_id}
        if self.push_to is not None:
            update["$push"] = {prefix + self.push_to.voters_field: self.voter_id}
        update["$inc"] = {prefix + key: delta for key, delta in self.increments.items()}
        return update

    def matches(self, votee: Mapping[str, Any]) -> bool:
        """Evaluate the precondition against a plain votee document."""
        if votee.get("_id") != self.votee_id:
            return False
        raw = votee.get("votes") or {}
        votes = Votes(up=raw.get("up") or [], down=raw.get("down") or [])
        for side in self.absent_from:
            if self.voter_id in votes.voters(side):
                return False
        if self.present_in is not None:
            return self.voter_id in votes.voters(self.present_in)
        return True

    def apply(self, votee: dict[str, Any]) -> None:
        """Apply the mutation in place to a plain votee document."""
        votes = votee.setdefault("votes", {})
        if self.pull_from is not None:
            name = self.pull_from.voters_field
            votes[name] = [v for v in votes.get(name) or [] if v != self.voter_id]
        if self.push_to is not None:
            votes.setdefault(self.push_to.voters_field, []).append(self.voter_id)
        for key, delta in self.increments.items():
            votes[key] = votes.get(key, 0) + delta


def plan_new_vote(
    options: VoteOptions, voteable: VoteableConfig, embedded_field: str
) -> VotePlan:
    """Voter must be on neither side; add them to the chosen one."""
    side = options.value
    return VotePlan(
        transition=VoteTransition.NEW,
        embedded_field=embedded_field,
        parent_doc_id=options.parent_doc_id,
        votee_id=options.votee_id,
        voter_id=options.voter_id,
        absent_from=(VoteValue.UP, VoteValue.DOWN),
        push_to=side,
        increments={
            "count": +1,
            side.count_field: +1,
            "point": voteable.weight(side),
        },
    )


def plan_revote(options: VoteOptions, voteable: VoteableConfig, embedded_field: str) -> VotePlan:
    """Voter must be on the opposite side; move them to the chosen one.

    Only the opposite side is checked. A new vote already guarantees a voter
    sits on one side at most, and a revote to the side already held fails the
    same check.
    """
    side = options.value
    opposite = side.opposite
    return VotePlan(
        transition=VoteTransition.REVOTE,
        embedded_field=embedded_field,
        parent_doc_id=options.parent_doc_id,
        votee_id=options.votee_id,
        voter_id=options.voter_id,
        present_in=opposite,
        pull_from=opposite,
        push_to=side,
        increments={
            side.count_field: +1,
            opposite.count_field: -1,
            "point": voteable.weight(side) - voteable.weight(opposite),
        },
    )


def plan_unvote(options: VoteOptions, voteable: VoteableConfig, embedded_field: str) -> VotePlan:
    """Voter must be on the given side; remove them from it."""
    side = options.value
    return VotePlan(
        transition=VoteTransition.UNVOTE,
        embedded_field=embedded_field,
        parent_doc_id=options.parent_doc_id,
        votee_id=options.votee_id,
        voter_id=options.voter_id,
        present_in=side,
        pull_from=side,
        increments={
            side.count_field: -1,
            "count": -1,
            "point": -voteable.weight(side),
        },
    )


_PLANNERS: dict[VoteTransition, Callable[[VoteOptions, VoteableConfig, str], VotePlan]] = {
    VoteTransition.NEW: plan_new_vote,
    VoteTransition.REVOTE: plan_revote,
    VoteTransition.UNVOTE: plan_unvote,
}


def plan_vote(options: VoteOptions, voteable: VoteableConfig, embedded_field: str) -> VotePlan:
    """Select the strategy for ``options.transition`` and build its plan."""
    return _PLANNERS[options.transition](options, voteable, embedded_field)
