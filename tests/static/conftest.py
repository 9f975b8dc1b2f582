"""Fixtures for type-checker assertions; see :mod:`tests.static.checker`."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from tests.static.checker import SRC_DIR, CheckResult, run_mypy


@pytest.fixture(scope="session")
def mypy_cache_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """One cache for the session so typeshed is parsed once."""
    return tmp_path_factory.mktemp("mypy-cache")


@pytest.fixture
def typecheck(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    mypy_cache_dir: Path,
) -> Callable[..., CheckResult]:
    """Return ``check(**modules)``: write each snippet as ``<name>.py`` and run mypy."""
    monkeypatch.setenv("MYPYPATH", str(SRC_DIR))

    def check(**modules: str) -> CheckResult:
        return run_mypy(tmp_path, mypy_cache_dir, modules)

    return check
