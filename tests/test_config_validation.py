from pathlib import Path

import pytest
from pydantic import ValidationError

from htmltext.config import load_config


def test_invalid_newline(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("output:\n  newline: cr\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_invalid_env_newline() -> None:
    with pytest.raises(ValidationError):
        load_config(env={"HTMLTEXT_NEWLINE": "unix"})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_invalid_schema_version(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("schema_version: 0\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})
