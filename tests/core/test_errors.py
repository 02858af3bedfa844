"""Error Hierarchy — codes, statuses and envelopes of every post service error.

Tests cover:
    - Each error maps to its code, category and HTTP status
    - Messages are fixed where callers match on them
    - require_collaborators names every missing collaborator
"""

import pytest

from blogpost.core.errors import (
    BlogPostError, ConfigurationError, ErrorCategory, ErrorSeverity,
    InvalidIdentifierError, InvalidTargetError, InvariantViolationError,
    NotFoundError, PersistenceError, require_collaborators,
)


@pytest.mark.parametrize("error, code, status", [
    (InvalidIdentifierError("nope"), "INVALID_IDENTIFIER", 400),
    (NotFoundError("abc"), "RESOURCE_NOT_FOUND", 404),
    (InvalidTargetError("abc"), "INVALID_TARGET", 400),
    (PersistenceError("boom", "commit"), "PERSISTENCE_ERROR", 503),
    (InvariantViolationError("broken"), "INVARIANT_VIOLATION", 500),
])
def test_error_codes_and_statuses(error, code, status):
    assert isinstance(error, BlogPostError)
    assert error.code == code
    assert error.http_status == status
    assert error.message


def test_invalid_identifier_message_is_fixed():
    assert InvalidIdentifierError("xyz").message == "invalid post id"


def test_invalid_target_message_is_fixed():
    err = InvalidTargetError("abc")
    assert err.message == "post is not available or is deleted"
    assert err.category == ErrorCategory.BUSINESS_RULE
    assert err.context.post_id == "abc"


def test_not_found_message_mentions_availability():
    err = NotFoundError("abc")
    assert "is not available" in err.message
    assert err.context.post_id == "abc"


def test_persistence_error_records_operation():
    err = PersistenceError("Integrity constraint violated", "commit")
    assert err.operation == "commit"
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.message == "Database commit failed: Integrity constraint violated"


def test_to_response_envelope():
    body = NotFoundError("abc").to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"]["post_id"] == "abc"
    assert "timestamp" in body


def test_require_collaborators_passes_when_all_present():
    require_collaborators("Thing", db=object(), logger=object())


def test_require_collaborators_lists_missing():
    with pytest.raises(ConfigurationError) as exc_info:
        require_collaborators("Thing", db=None, logger=None, extra=1)
    assert exc_info.value.missing == ["db", "logger"]
    assert "Thing" in exc_info.value.message
