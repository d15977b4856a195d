"""
Voting Domain Services

The vote capability attached to an embedded document class.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Literal

from voteable_mongo.domain.shared.exceptions import InvalidArgumentError
from voteable_mongo.domain.shared.messages import ErrorMessages, LogTemplates
from voteable_mongo.domain.voting.options import VoteOptions
from voteable_mongo.domain.voting.planner import plan_vote
from voteable_mongo.domain.voting.projection import project_votee
from voteable_mongo.domain.voting.propagation import (
    ParentPropagation,
    UnsupportedParentPropagation,
)

if TYPE_CHECKING:
    from voteable_mongo.domain.voting.entities import Votee
    from voteable_mongo.domain.voting.registry import VoteableRegistry
    from voteable_mongo.domain.voting.repository import VoteeStore

logger = logging.getLogger(__name__)


class EmbeddedVotingService:
    """Casts, changes and retracts votes on embedded votees of one class.

    The service is configured at construction with the votee class name (the
    key into the voteable registry) and the parent field holding the embedded
    votees. It keeps no state between calls; every vote is a single
    find-and-modify against the store.
    """

    def __init__(
        self,
        store: VoteeStore,
        registry: VoteableRegistry,
        votee_class: str,
        embedded_field: str,
        propagation: ParentPropagation | None = None,
    ) -> None:
        if not embedded_field:
            raise ValueError(ErrorMessages.EMPTY_EMBEDDED_FIELD)
        self._store = store
        self._registry = registry
        self._votee_class = votee_class
        self._embedded_field = embedded_field
        self._propagation = propagation or UnsupportedParentPropagation()

    @property
    def votee_class(self) -> str:
        return self._votee_class

    @property
    def embedded_field(self) -> str:
        return self._embedded_field

    async def vote(
        self, options: VoteOptions | Mapping[str, Any] | None = None, /, **params: Any
    ) -> Votee | Literal[False]:
        """Make a vote on an embedded votee.

        Args:
            options: Vote parameters (``parent_doc_id``, ``votee_id``,
                ``voter_id``, ``value``, optional ``revote``/``unvote`` and
                ``votee``). Keyword arguments are used when omitted;
                passing both is an error.

        Returns:
            The votee handle carrying the updated ``votes``, or False if the
            class is not voteable or the vote was not applied.

        Raises:
            InvalidArgumentError: If the parameters are malformed.
            UnsupportedOperationError: If the class asks for parent updates.
        """
        if options is not None and params:
            raise InvalidArgumentError(ErrorMessages.OPTIONS_AND_KEYWORDS, field="options")
        vote_options = VoteOptions.parse(options if options is not None else params)

        voteable = self._registry.lookup(self._votee_class)
        if voteable is None:
            logger.info(LogTemplates.VOTE_NOT_VOTEABLE, self._votee_class)
            return False

        self._propagation.ensure_supported(self._votee_class, voteable)

        plan = plan_vote(vote_options, voteable, self._embedded_field)
        logger.debug(
            LogTemplates.VOTE_PLANNED,
            plan.transition,
            self._votee_class,
            self._embedded_field,
            plan.voter_id,
            plan.filter,
            plan.update,
        )

        document = await self._store.find_and_modify(plan)
        if document is None:
            logger.info(
                LogTemplates.VOTE_REJECTED,
                plan.transition,
                plan.votee_id,
                plan.parent_doc_id,
                plan.voter_id,
            )
            return False

        if voteable.update_parents:
            await self._propagation.propagate(document, vote_options, voteable)

        votee = project_votee(
            document, self._embedded_field, vote_options.votee_id, vote_options.votee
        )
        if votee is None:
            logger.error(
                LogTemplates.VOTEE_MISSING_FROM_RESULT, plan.votee_id, plan.parent_doc_id
            )
            return False

        logger.debug(
            LogTemplates.VOTE_APPLIED,
            plan.transition,
            plan.votee_id,
            plan.parent_doc_id,
            plan.voter_id,
        )
        return votee
