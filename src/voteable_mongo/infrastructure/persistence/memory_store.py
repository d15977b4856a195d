"""In-memory implementation of the votee store."""

from __future__ import annotations

import asyncio
import copy
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from voteable_mongo.domain.voting.repository import VoteeStore

if TYPE_CHECKING:
    from voteable_mongo.domain.voting.planner import VotePlan


class InMemoryVoteeStore(VoteeStore):
    """Parent documents kept in a dict, keyed by ``_id``.

    Plans are evaluated under a lock so precondition and mutation form one
    step, like a server-side find-and-modify. Documents are copied on the way
    in and out; callers never share state with the store.
    """

    def __init__(self, documents: Iterable[dict[str, Any]] = ()) -> None:
        self._documents: dict[Any, dict[str, Any]] = {}
        self._lock = asyncio.Lock()
        for document in documents:
            self.insert(document)

    def insert(self, document: dict[str, Any]) -> None:
        self._documents[document["_id"]] = copy.deepcopy(document)

    def get(self, parent_doc_id: Any) -> dict[str, Any] | None:
        document = self._documents.get(parent_doc_id)
        return copy.deepcopy(document) if document is not None else None

    async def find_and_modify(self, plan: VotePlan) -> dict[str, Any] | None:
        async with self._lock:
            document = self._documents.get(plan.parent_doc_id)
            if document is None:
                return None
            for votee in document.get(plan.embedded_field) or []:
                if plan.matches(votee):
                    plan.apply(votee)
                    return copy.deepcopy(document)
            return None
