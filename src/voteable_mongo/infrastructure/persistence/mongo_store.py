"""MongoDB implementation of the votee store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from voteable_mongo.domain.shared.messages import LogTemplates
from voteable_mongo.domain.voting.repository import VoteeStore

if TYPE_CHECKING:
    from pymongo.asynchronous.collection import AsyncCollection

    from voteable_mongo.domain.voting.planner import VotePlan

logger = logging.getLogger(__name__)


class MongoVoteeStore(VoteeStore):
    """Runs vote plans through ``find_one_and_update`` on the parent collection."""

    def __init__(self, collection: AsyncCollection[dict[str, Any]]) -> None:
        self._collection = collection

    @property
    def collection_name(self) -> str:
        return self._collection.name

    async def find_and_modify(self, plan: VotePlan) -> dict[str, Any] | None:
        try:
            return await self._collection.find_one_and_update(
                plan.filter,
                plan.update,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            # The update is all-or-nothing, so a failed call changed nothing.
            logger.warning(LogTemplates.VOTE_STORE_FAILED, self.collection_name, e)
            return None
