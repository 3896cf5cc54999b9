"""Smoke tests for package import and version."""

import htmltext


def test_import_package() -> None:
    assert callable(htmltext.convert)


def test_version() -> None:
    assert htmltext.__version__ == "0.1.0"
