"""Registry of document classes that accept votes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from voteable_mongo.domain.shared.messages import LogTemplates
from voteable_mongo.domain.voting.entities import VoteableConfig

logger = logging.getLogger(__name__)


class VoteableRegistry:
    """Read-mostly map of class name to :class:`VoteableConfig`."""

    def __init__(self, entries: Mapping[str, VoteableConfig | Mapping[str, Any]] | None = None) -> None:
        self._entries: dict[str, VoteableConfig] = {}
        for class_name, config in (entries or {}).items():
            self.register(class_name, config)

    def register(self, class_name: str, config: VoteableConfig | Mapping[str, Any]) -> VoteableConfig:
        voteable = (
            config if isinstance(config, VoteableConfig) else VoteableConfig.model_validate(config)
        )
        self._entries[class_name] = voteable
        logger.debug(LogTemplates.VOTEABLE_REGISTERED, class_name, voteable.up, voteable.down)
        return voteable

    def lookup(self, class_name: str) -> VoteableConfig | None:
        return self._entries.get(class_name)

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
