"""
Vote Options

Validation and normalization of the loosely typed parameters of a vote call.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from voteable_mongo.domain.shared.exceptions import InvalidArgumentError
from voteable_mongo.domain.shared.identifiers import to_store_id
from voteable_mongo.domain.shared.messages import ErrorMessages
from voteable_mongo.domain.voting.entities import Votee
from voteable_mongo.domain.voting.value_objects import VoteTransition, VoteValue


class VoteOptions(BaseModel):
    """Normalized parameters of a single vote call."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    parent_doc_id: Any
    votee_id: Any = None
    voter_id: Any
    value: VoteValue
    revote: bool = False
    unvote: bool = False
    votee: Votee | None = None

    @field_validator("parent_doc_id", mode="before")
    @classmethod
    def _coerce_parent_doc_id(cls, v: Any) -> Any:
        parent_doc_id = to_store_id(v)
        if parent_doc_id is None:
            raise ValueError(ErrorMessages.PARENT_DOC_ID_REQUIRED)
        return parent_doc_id

    @field_validator("voter_id", mode="before")
    @classmethod
    def _coerce_voter_id(cls, v: Any) -> Any:
        voter_id = to_store_id(v)
        if voter_id is None:
            raise ValueError(ErrorMessages.VOTER_ID_REQUIRED)
        return voter_id

    @field_validator("votee_id", mode="before")
    @classmethod
    def _coerce_votee_id(cls, v: Any) -> Any:
        return to_store_id(v)

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, v: Any) -> VoteValue:
        if isinstance(v, VoteValue):
            return v
        try:
            return VoteValue(str(v).lower())
        except ValueError:
            raise ValueError(ErrorMessages.INVALID_VOTE_VALUE.format(value=v)) from None

    @model_validator(mode="after")
    def _check_transition_and_votee(self) -> VoteOptions:
        if self.revote and self.unvote:
            raise ValueError(ErrorMessages.REVOTE_AND_UNVOTE)
        if self.votee_id is None:
            votee_id = to_store_id(self.votee.id) if self.votee is not None else None
            if votee_id is None:
                raise ValueError(ErrorMessages.VOTEE_ID_REQUIRED)
            object.__setattr__(self, "votee_id", votee_id)
        return self

    @property
    def transition(self) -> VoteTransition:
        if self.revote:
            return VoteTransition.REVOTE
        if self.unvote:
            return VoteTransition.UNVOTE
        return VoteTransition.NEW

    @classmethod
    def parse(cls, raw: VoteOptions | Mapping[str, Any]) -> VoteOptions:
        """Build options from a parameter bag.

        Raises:
            InvalidArgumentError: If an identifier is missing or unparseable,
                the value is not up/down, or revote and unvote are both set.
        """
        if isinstance(raw, VoteOptions):
            return raw
        params = {str(key): value for key, value in raw.items()}
        # Let the field validators report absent ids with their own messages.
        for required in ("parent_doc_id", "voter_id", "value"):
            params.setdefault(required, None)
        for flag in ("revote", "unvote"):
            params[flag] = bool(params.get(flag))
        try:
            return cls.model_validate(params)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else None
            message = str(error.get("ctx", {}).get("error") or error["msg"])
            raise InvalidArgumentError(message, field=field) from e
