"""Brand label rules.

A label is the only thing that tells two brands over the same base apart.
Static checkers also require a ``NewType`` name to match the variable it is
bound to, so a label must be usable as that variable name: a non-keyword
Python identifier.

INVARIANT: labels are never normalized. ``" UserId"`` is rejected, not fixed,
because a silently rewritten label would merge two brands.
"""

from __future__ import annotations

import keyword


def validate_label(label: object) -> bool:
    """Check whether *label* is usable as a brand label."""
    if not isinstance(label, str):
        return False
    return label.isidentifier() and not keyword.iskeyword(label)


def check_label(label: object) -> str:
    """Return *label* unchanged, or raise if it cannot name a brand.

    Raises:
        TypeError: If *label* is not a ``str``.
        ValueError: If *label* is empty, not an identifier, or a keyword.
    """
    if not isinstance(label, str):
        msg = f"Brand label must be a str, got {type(label).__name__}"
        raise TypeError(msg)

    if not label:
        msg = "Brand label must not be empty"
        raise ValueError(msg)

    if not label.isidentifier():
        msg = f"Brand label {label!r} must be a valid Python identifier"
        raise ValueError(msg)

    if keyword.iskeyword(label):
        msg = f"Brand label {label!r} is a reserved keyword"
        raise ValueError(msg)

    return label
