"""
Unit Tests for InMemoryVoteeStore

Tests for:
- insert/get copy semantics
- find_and_modify on matching, rejected and unknown parents
"""

from bson import ObjectId

from voteable_mongo.domain.voting.entities import VoteableConfig
from voteable_mongo.domain.voting.options import VoteOptions
from voteable_mongo.domain.voting.planner import plan_vote
from voteable_mongo.infrastructure.persistence.memory_store import InMemoryVoteeStore


def _plan(parent_id, votee_id, **flags):
    options = VoteOptions.parse(
        {"parent_doc_id": parent_id, "votee_id": votee_id, "voter_id": "A", "value": "up", **flags}
    )
    return plan_vote(options, VoteableConfig(), "comments")


class TestInMemoryVoteeStore:
    """Unit tests for the in-memory store."""

    def test_get_returns_copy(self, memory_store, parent_id):
        """Should not let callers mutate stored documents."""
        document = memory_store.get(parent_id)
        document["comments"].clear()

        assert len(memory_store.get(parent_id)["comments"]) == 2

    def test_insert_copies_document(self, parent_document, parent_id):
        """Should not keep a reference to the inserted document."""
        store = InMemoryVoteeStore()
        store.insert(parent_document)
        parent_document["title"] = "changed"

        assert store.get(parent_id)["title"] == "Test Post"

    def test_get_unknown_parent(self, memory_store):
        """Should return None for unknown parents."""
        assert memory_store.get(ObjectId()) is None

    async def test_applies_matching_plan(self, memory_store, parent_id, votee_id):
        """Should apply the mutation and return the post image."""
        document = await memory_store.find_and_modify(_plan(parent_id, votee_id))

        assert document["comments"][1]["votes"]["up"] == ["A"]
        assert memory_store.get(parent_id) == document

    async def test_rejected_plan_returns_none(self, memory_store, parent_id, votee_id):
        """Should leave the document alone when the precondition fails."""
        before = memory_store.get(parent_id)

        result = await memory_store.find_and_modify(_plan(parent_id, votee_id, unvote=True))

        assert result is None
        assert memory_store.get(parent_id) == before

    async def test_unknown_parent_returns_none(self, memory_store, votee_id):
        """Should return None when the parent does not exist."""
        assert await memory_store.find_and_modify(_plan(ObjectId(), votee_id)) is None
