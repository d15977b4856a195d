"""Centralized message constants for error messages and log output."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Vote option errors
    PARENT_DOC_ID_REQUIRED = "parent doc id is required for embedded models"
    VOTEE_ID_REQUIRED = "votee id is required when no votee is given"
    VOTER_ID_REQUIRED = "voter id is required"
    INVALID_VOTE_VALUE = "vote value must be 'up' or 'down', got {value!r}"
    REVOTE_AND_UNVOTE = "revote and unvote cannot both be set"
    OPTIONS_AND_KEYWORDS = "pass vote options either as a mapping or as keywords, not both"

    # Capability gaps
    PARENT_VOTING_UNSUPPORTED = "parent voting unsupported for embedded documents (yet!)"

    # Settings errors
    INVALID_MONGO_URL = "Mongo URL must start with mongodb:// or mongodb+srv://"
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    EMPTY_EMBEDDED_FIELD = "embedded collection name cannot be empty"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Database lifecycle
    DATABASE_CONNECTED = "Mongo client created for database %s"
    DATABASE_CLOSED = "Mongo client closed"

    # Voting
    VOTE_NOT_VOTEABLE = "%s is not configured as voteable, vote ignored"
    VOTE_PLANNED = "Planned %s vote on %s.%s for voter %s: filter=%r update=%r"
    VOTE_APPLIED = "Applied %s vote on votee %s (parent %s) for voter %s"
    VOTE_REJECTED = "Rejected %s vote on votee %s (parent %s) for voter %s"
    VOTE_STORE_FAILED = "find_one_and_update on %s failed, treating as no match: %r"
    VOTEE_MISSING_FROM_RESULT = "Votee %s missing from updated parent %s"
    PARENT_PROPAGATION_UNSUPPORTED = "Parent propagation requested for %s but not supported"

    # Registry
    VOTEABLE_REGISTERED = "Registered voteable class %s (up=%s, down=%s)"
