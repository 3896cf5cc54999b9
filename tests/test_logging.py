from __future__ import annotations

import logging

import pytest

from htmltext import convert
from htmltext.utils.logging import configure_logging, get_logger


def test_get_logger_namespacing() -> None:
    assert get_logger("scan").name == "htmltext.scan"
    assert get_logger("htmltext.scan.scanner").name == "htmltext.scan.scanner"
    assert get_logger("htmltext").name == "htmltext"


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging(verbose=True)
    count = len(logger.handlers)
    configure_logging(verbose=False)
    assert len(logger.handlers) == count
    assert logger.level == logging.WARNING


def test_body_tags_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="htmltext")
    convert("junk<body>x</body>tail", newline="\n")
    messages = [r.getMessage() for r in caplog.records if r.name == "htmltext.scan.scanner"]
    assert any("discarding earlier content" in m for m in messages)
    assert any("ignoring remaining input" in m for m in messages)
