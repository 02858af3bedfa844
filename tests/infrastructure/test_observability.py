"""Structured Logging — JSON formatter surfaces context fields."""

import json
import logging

from blogpost.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "blogpost.test", logging.ERROR, __file__, 1, "error in saving post", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "ERROR"
    assert log["logger"] == "blogpost.test"
    assert log["message"] == "error in saving post"
    assert "post_id" not in log


def test_surfaces_context_fields():
    log = json.loads(JSONFormatter().format(_record(
        post_id="abc", rpc_method="Create", error_code="PERSISTENCE_ERROR",
        request={"title": "t"},
    )))
    assert log["post_id"] == "abc"
    assert log["rpc_method"] == "Create"
    assert log["error_code"] == "PERSISTENCE_ERROR"
    assert log["request"] == {"title": "t"}


def test_serializes_non_json_values():
    from datetime import datetime, timezone
    from uuid import uuid4

    uid = uuid4()
    when = datetime(2024, 5, 1, tzinfo=timezone.utc)
    log = json.loads(JSONFormatter().format(_record(
        request={"id": uid, "published_on": when},
    )))
    assert log["request"]["id"] == str(uid)
    assert log["request"]["published_on"] == str(when)
