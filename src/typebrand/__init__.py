"""typebrand: zero-cost branded types.

Derive a nominal subtype from a base type and a label::

    from typebrand import Brand

    UserId = Brand("UserId", str)
    ProductId = Brand("ProductId", str)

Type checkers accept a ``UserId`` wherever a ``str`` is expected, but reject
a bare ``str`` or a ``ProductId`` where a ``UserId`` is required. At runtime
``UserId("abc123")`` returns ``"abc123"`` itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from typebrand.config.logging import configure_from_settings
from typebrand.config.settings import BrandSettings
from typebrand.domain.brand import (
    Brand,
    base_of,
    is_assignable,
    is_brand,
    label_of,
    labels_of,
    root_of,
    same_brand,
)
from typebrand.domain.labels import check_label, validate_label

__all__ = [
    "Brand",
    "BrandSettings",
    "base_of",
    "check_label",
    "configure",
    "is_assignable",
    "is_brand",
    "label_of",
    "labels_of",
    "root_of",
    "same_brand",
    "validate_label",
]

__version__ = "0.1.0"


def configure(start: Path | None = None, **overrides: Any) -> BrandSettings:
    """Load settings (see :class:`BrandSettings`) and apply them to logging."""
    settings = BrandSettings.load(start, **overrides)
    configure_from_settings(settings)
    return settings
