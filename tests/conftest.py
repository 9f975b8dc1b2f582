"""Shared pytest fixtures for typebrand tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture
def _restore_logging() -> Generator[None]:
    """Restore root and typebrand logger state after a test reconfigures logging.

    Use via ``@pytest.mark.usefixtures("_restore_logging")`` on test classes
    that call ``configure_logging`` or ``typebrand.configure``.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    brand = logging.getLogger("typebrand")
    brand_handlers = brand.handlers[:]
    brand_level = brand.level
    brand_propagate = brand.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    brand.handlers = brand_handlers
    brand.setLevel(brand_level)
    brand.propagate = brand_propagate
