"""Mongo client lifecycle and collection access."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pymongo import AsyncMongoClient

from voteable_mongo.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from pymongo.asynchronous.collection import AsyncCollection

    from ...config.settings import MongoSettings

logger = logging.getLogger(__name__)


class MongoDatabase:
    def __init__(
        self,
        settings: MongoSettings,
        client: AsyncMongoClient[dict[str, Any]] | None = None,
    ) -> None:
        self._settings = settings
        self._client = client
        self._database_name = settings.database

    @property
    def database_name(self) -> str:
        return self._database_name

    @property
    def client(self) -> AsyncMongoClient[dict[str, Any]]:
        # The client connects lazily, so creating it here does no I/O.
        if self._client is None:
            self._client = AsyncMongoClient(
                self._settings.url,
                serverSelectionTimeoutMS=self._settings.server_selection_timeout_ms,
                appname=self._settings.app_name,
            )
            logger.info(LogTemplates.DATABASE_CONNECTED, self._database_name)
        return self._client

    def collection(self, name: str) -> AsyncCollection[dict[str, Any]]:
        return self.client[self._database_name][name]

    async def ping(self) -> bool:
        """Return True if the server answers a ping."""
        result = await self.client.admin.command("ping")
        return bool(result.get("ok"))

    async def close(self) -> None:
        if self._client is None:
            return
        try:
            await self._client.close()
        finally:
            self._client = None
        logger.info(LogTemplates.DATABASE_CLOSED)
