"""Reflect an updated parent document back onto votee handles."""

from __future__ import annotations

from typing import Any

from voteable_mongo.domain.voting.entities import Votee, Votes


def find_votee_fragment(
    document: dict[str, Any],
    embedded_field: str,
    votee_id: Any,
    votee: Votee | None = None,
) -> dict[str, Any] | None:
    """Return the embedded fragment matching ``votee_id`` or the handle's id."""
    handle_id = votee.id if votee is not None else None
    for item in document.get(embedded_field) or []:
        item_id = item.get("_id")
        if (handle_id is not None and item_id == handle_id) or item_id == votee_id:
            return item
    return None


def project_votee(
    document: dict[str, Any],
    embedded_field: str,
    votee_id: Any,
    votee: Votee | None = None,
) -> Votee | None:
    """Copy the votee's fresh ``votes`` onto ``votee`` or a new handle.

    Returns:
        The updated handle, or None if the document holds no such votee.
    """
    fragment = find_votee_fragment(document, embedded_field, votee_id, votee)
    if fragment is None:
        return None
    if votee is not None:
        votee.votes = Votes.model_validate(fragment.get("votes") or {})
        return votee
    return Votee.from_document(fragment)
