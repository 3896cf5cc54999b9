# Tests for verifying the package skeleton is importable and documented.

import importlib
import pkgutil

import htmltext


def _modules() -> list[str]:
    return [m.name for m in pkgutil.walk_packages(htmltext.__path__, htmltext.__name__ + ".")]


def test_every_module_documented() -> None:
    assert htmltext.__doc__ and htmltext.__doc__.strip()
    for name in _modules():
        module = importlib.import_module(name)
        assert module.__doc__ and module.__doc__.strip(), f"Missing docstring in {name}"


def test_declared_exports_resolve() -> None:
    for name in [htmltext.__name__, *_modules()]:
        module = importlib.import_module(name)
        for attr in getattr(module, "__all__", []):
            assert hasattr(module, attr), f"{name}.__all__ lists missing {attr}"
