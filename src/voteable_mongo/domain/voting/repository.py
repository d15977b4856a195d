"""
Voting Domain Repository Interfaces

Abstract base classes defining the contract for atomic vote persistence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from voteable_mongo.domain.voting.planner import VotePlan


class VoteeStore(ABC):
    """Abstract store of parent documents holding embedded votees.

    Implementations must evaluate the plan's precondition and apply its
    mutation as one indivisible step.
    """

    @abstractmethod
    async def find_and_modify(self, plan: VotePlan) -> dict[str, Any] | None:
        """Apply a vote plan atomically.

        Args:
            plan: The precondition and mutation to submit together.

        Returns:
            The parent document after the mutation, or None if the parent was
            not found, the precondition did not hold or the store operation
            failed. Callers cannot tell these cases apart.
        """
        ...
