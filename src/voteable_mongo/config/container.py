"""Dependency Injection Container

Wires settings, the Mongo client, the voteable registry and the per-class
voting services. Components are created on first access and cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..domain.voting.propagation import ParentPropagation
    from ..domain.voting.registry import VoteableRegistry
    from ..domain.voting.services import EmbeddedVotingService
    from ..infrastructure.persistence.database import MongoDatabase
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Voting services are cached per (votee class, parent collection,
    embedded field) so repeated lookups reuse the same instance.
    """

    settings: Settings
    _database: MongoDatabase | None = None
    _registry: VoteableRegistry | None = None
    _voting_services: dict[tuple[str, str, str], EmbeddedVotingService] = field(
        default_factory=dict
    )

    # === Database ===

    @property
    def database(self) -> MongoDatabase:
        """Get the Mongo client wrapper."""
        if self._database is None:
            from ..infrastructure.persistence.database import MongoDatabase

            self._database = MongoDatabase(self.settings.mongo)
        return self._database

    # === Registry ===

    @property
    def registry(self) -> VoteableRegistry:
        """Get the voteable class registry built from settings."""
        if self._registry is None:
            from ..domain.voting.registry import VoteableRegistry

            self._registry = VoteableRegistry(self.settings.voteable)
        return self._registry

    # === Services ===

    def voting_service(
        self,
        votee_class: str,
        parent_collection: str,
        embedded_field: str,
        propagation: ParentPropagation | None = None,
    ) -> EmbeddedVotingService:
        """Get the voting service for votees embedded in ``parent_collection``."""
        key = (votee_class, parent_collection, embedded_field)
        service = self._voting_services.get(key)
        if service is None:
            from ..domain.voting.services import EmbeddedVotingService
            from ..infrastructure.persistence.mongo_store import MongoVoteeStore

            store = MongoVoteeStore(self.database.collection(parent_collection))
            service = EmbeddedVotingService(
                store=store,
                registry=self.registry,
                votee_class=votee_class,
                embedded_field=embedded_field,
                propagation=propagation,
            )
            self._voting_services[key] = service
        return service

    # === Lifecycle ===

    async def shutdown(self) -> None:
        """Close the Mongo client and drop cached services."""
        if self._database is not None:
            await self._database.close()
        self._voting_services.clear()
        logger.info("Container shutdown complete")


def create_container(settings: Settings | None = None) -> Container:
    """Create a container.

    When ``settings`` is omitted they are loaded from the environment and
    console logging is configured at ``settings.log_level``. Callers passing
    their own settings are expected to own logging setup.
    """
    if settings is None:
        from ..utils.logging import setup_logging
        from .settings import get_settings

        settings = get_settings()
        setup_logging(settings.log_level)
    return Container(settings=settings)
