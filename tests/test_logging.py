"""
Tests for structured logging helpers
"""

import json

from gamereviews.logging import (
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
    set_request_context,
)


def test_generate_request_id_is_compact_and_unique():
    ids = {generate_request_id() for _ in range(50)}

    assert len(ids) == 50
    assert all(len(i) == 14 for i in ids)


def test_request_context_set_and_clear():
    request_id = set_request_context()

    assert get_request_id() == request_id

    set_request_context("req-123")
    assert get_request_id() == "req-123"

    clear_request_context()
    assert get_request_id() is None


def test_json_logs_include_request_id(capsys):
    configure_logging(debug=False)
    logger = get_logger("tests.logging")

    set_request_context("req-456")
    try:
        logger.info("Message with context", action="test")
    finally:
        clear_request_context()

    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    event = json.loads(lines[-1])
    assert event["event"] == "Message with context"
    assert event["request_id"] == "req-456"
    assert event["action"] == "test"
    assert event["level"] == "info"
