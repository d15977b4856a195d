import pytest
from bson import ObjectId

# ============================================================================
# Document Fixtures
# ============================================================================


def empty_votes() -> dict:
    return {"up": [], "down": [], "up_count": 0, "down_count": 0, "count": 0, "point": 0}


@pytest.fixture
def parent_id():
    return ObjectId()


@pytest.fixture
def votee_id():
    return ObjectId()


@pytest.fixture
def sibling_id():
    return ObjectId()


@pytest.fixture
def parent_document(parent_id, votee_id, sibling_id):
    """A post with two embedded, not yet voted comments."""
    return {
        "_id": parent_id,
        "title": "Test Post",
        "comments": [
            {"_id": sibling_id, "body": "first!", "votes": empty_votes()},
            {"_id": votee_id, "body": "Test Comment", "votes": empty_votes()},
        ],
    }


# ============================================================================
# Voting Fixtures
# ============================================================================


@pytest.fixture
def voteable_registry():
    """Registry with Comment configured as up=1, down=-1."""
    from voteable_mongo.domain.voting.registry import VoteableRegistry

    return VoteableRegistry({"Comment": {"up": 1, "down": -1}})


@pytest.fixture
def memory_store(parent_document):
    """In-memory store seeded with the parent document."""
    from voteable_mongo.infrastructure.persistence.memory_store import InMemoryVoteeStore

    return InMemoryVoteeStore([parent_document])


@pytest.fixture
def voting_service(memory_store, voteable_registry):
    """Voting service for comments embedded in posts."""
    from voteable_mongo.domain.voting.services import EmbeddedVotingService

    return EmbeddedVotingService(
        store=memory_store,
        registry=voteable_registry,
        votee_class="Comment",
        embedded_field="comments",
    )


@pytest.fixture
def stored_votes(memory_store, parent_id, votee_id):
    """Callable returning the persisted votes of the votee under test."""

    def _stored_votes() -> dict:
        document = memory_store.get(parent_id)
        for item in document["comments"]:
            if item["_id"] == votee_id:
                return item["votes"]
        raise AssertionError("votee missing from parent")

    return _stored_votes
