"""
Parent Propagation

Extension point for pushing a votee's tally changes up to ancestor documents.
Only the unsupported strategy ships; the increments an ancestor strategy would
apply are computed by :func:`parent_increments`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from voteable_mongo.domain.shared.exceptions import UnsupportedOperationError
from voteable_mongo.domain.shared.messages import ErrorMessages, LogTemplates
from voteable_mongo.domain.shared.types import Points
from voteable_mongo.domain.voting.entities import VoteableConfig
from voteable_mongo.domain.voting.options import VoteOptions
from voteable_mongo.domain.voting.value_objects import VoteTransition

logger = logging.getLogger(__name__)


class ParentPropagation(ABC):
    """Strategy for updating ancestor aggregates after a vote."""

    @abstractmethod
    def ensure_supported(self, votee_class: str, voteable: VoteableConfig) -> None:
        """Raise before any mutation if propagation cannot be honoured."""
        ...

    @abstractmethod
    async def propagate(
        self, document: dict[str, Any], options: VoteOptions, voteable: VoteableConfig
    ) -> None:
        """Apply the vote's effect to the ancestors of ``document``."""
        ...


class UnsupportedParentPropagation(ParentPropagation):
    """Refuses every vote whose class asks for parent updates."""

    def ensure_supported(self, votee_class: str, voteable: VoteableConfig) -> None:
        if voteable.update_parents:
            logger.warning(LogTemplates.PARENT_PROPAGATION_UNSUPPORTED, votee_class)
            raise UnsupportedOperationError(
                "update_parents", ErrorMessages.PARENT_VOTING_UNSUPPORTED
            )

    async def propagate(
        self, document: dict[str, Any], options: VoteOptions, voteable: VoteableConfig
    ) -> None:
        raise UnsupportedOperationError("update_parents", ErrorMessages.PARENT_VOTING_UNSUPPORTED)


def parent_increments(options: VoteOptions, voteable: VoteableConfig) -> dict[str, Points]:
    """Build the ``$inc`` document for a parent's ``votes`` aggregate.

    The point delta is always present; counters are only touched when the
    class keeps ``update_counters`` enabled.
    """
    side = options.value
    inc: dict[str, Points] = {}

    if options.transition is VoteTransition.REVOTE:
        inc["votes.point"] = voteable.weight(side) - voteable.weight(side.opposite)
        if voteable.update_counters:
            inc[f"votes.{side.count_field}"] = +1
            inc[f"votes.{side.opposite.count_field}"] = -1
    elif options.transition is VoteTransition.UNVOTE:
        inc["votes.point"] = -voteable.weight(side)
        if voteable.update_counters:
            inc["votes.count"] = -1
            inc[f"votes.{side.count_field}"] = -1
    else:
        inc["votes.point"] = voteable.weight(side)
        if voteable.update_counters:
            inc["votes.count"] = +1
            inc[f"votes.{side.count_field}"] = +1

    return inc
