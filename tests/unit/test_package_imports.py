"""
Name: Package Import Tests

Responsibilities:
  - Every module of the package imports cleanly (relative import depth)
"""

import importlib
import pkgutil

import pytest

import marketplace


pytestmark = pytest.mark.unit


def _module_names() -> list[str]:
    return [
        info.name
        for info in pkgutil.walk_packages(marketplace.__path__, prefix="marketplace.")
    ]


def test_walks_adapter_packages():
    names = _module_names()

    assert "marketplace.infrastructure.repositories.in_memory_user_repo" in names
    assert "marketplace.infrastructure.repositories.postgres_user_repo" in names


@pytest.mark.parametrize("module_name", _module_names())
def test_module_imports(module_name):
    importlib.import_module(module_name)
