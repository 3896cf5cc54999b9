import os

import pytest

from htmltext.config import load_config


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HTMLTEXT_NEWLINE", raising=False)


def test_default_values() -> None:
    cfg = load_config()
    assert cfg.schema_version == 1
    assert cfg.output.newline == "platform"
    assert cfg.output.decode_entities is True
    assert cfg.io.encoding_in == "utf-8-sig"
    assert cfg.io.encoding_out == "utf-8"


def test_platform_line_terminator() -> None:
    cfg = load_config()
    assert cfg.output.line_terminator == os.linesep
