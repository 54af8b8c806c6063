from __future__ import annotations

import io
import json
import logging

from repo_locator.logging_utils import configure_logging


def test_json_output_includes_extra_fields() -> None:
    stream = io.StringIO()
    configure_logging("debug", stream=stream)

    logging.getLogger("repo_locator.test").info(
        "scanner execution completed",
        extra={"event": "scanner.completed", "repo_count": 3},
    )

    payload = json.loads(stream.getvalue().strip())
    assert payload["level"] == "INFO"
    assert payload["logger"] == "repo_locator.test"
    assert payload["message"] == "scanner execution completed"
    assert payload["event"] == "scanner.completed"
    assert payload["repo_count"] == 3
    assert "lineno" not in payload


def test_level_filters_records() -> None:
    stream = io.StringIO()
    configure_logging("WARNING", stream=stream)

    logging.getLogger("repo_locator.test").info("hidden")

    assert stream.getvalue() == ""


def test_exception_is_serialized() -> None:
    stream = io.StringIO()
    configure_logging("ERROR", stream=stream)

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logging.getLogger("repo_locator.test").exception("failed")

    payload = json.loads(stream.getvalue().strip())
    assert "RuntimeError: boom" in payload["exception"]
