"""Brand constructor: nominal distinctions over a shared base type.

``Brand(label, base)`` derives a type that static checkers accept wherever
*base* is expected, but never accept *base* (or a differently labelled
brand) in its place. Producing a branded value takes an explicit call,
``UserId("abc123")``, which returns its argument untouched.

Static view: ``Brand`` is ``typing.NewType``. Checkers give every
declaration its own nominal identity, so declare a brand once and import it.

Runtime view: ``Brand`` subclasses ``typing.NewType``. Brands compare and
hash by ``(label, base)``, so two independent declarations of the same
label over the same base are the same brand to ``==``, ``typing.Union`` and
:func:`same_brand`. Nothing is registered anywhere.

INVARIANT: a branded value is the unbranded value. ``UserId(v) is v``.
"""

from __future__ import annotations

import collections.abc
import logging
import sys
import types
import typing
from typing import TYPE_CHECKING, Any

from typebrand.domain.labels import check_label

logger = logging.getLogger(__name__)

# CPython type flag: set on every class that may be used as a base class.
_TPFLAGS_BASETYPE = 1 << 10

# ABCs that checkers treat as protocols, so they are refused as NewType bases.
_PROTOCOL_ABCS = frozenset(
    {
        collections.abc.Hashable,
        collections.abc.Sized,
        collections.abc.Container,
        collections.abc.Iterable,
        collections.abc.Iterator,
        collections.abc.Reversible,
        collections.abc.Collection,
        collections.abc.Awaitable,
        collections.abc.AsyncIterable,
        collections.abc.AsyncIterator,
    }
)

# Implicit numeric widening the checkers allow: int -> float -> complex.
_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}

# Attributes typing adds to every Protocol class; never protocol members.
_PROTOCOL_INTERNALS = frozenset(
    {
        "__abstractmethods__",
        "__annotations__",
        "__annotate__",
        "__annotate_func__",
        "__annotations_cache__",
        "__callable_proto_members_only__",
        "__class_getitem__",
        "__dict__",
        "__doc__",
        "__firstlineno__",
        "__init__",
        "__module__",
        "__new__",
        "__non_callable_proto_members__",
        "__orig_bases__",
        "__parameters__",
        "__protocol_attrs__",
        "__qualname__",
        "__slots__",
        "__static_attributes__",
        "__subclasshook__",
        "__type_params__",
        "__weakref__",
        "_is_protocol",
        "_is_runtime_protocol",
    }
)


def _type_name(tp: Any) -> str:
    if isinstance(tp, type) and typing.get_origin(tp) is None:
        return tp.__qualname__
    return repr(tp)


def _check_base(base: object) -> None:
    """Reject bases a static checker would refuse as a ``NewType`` supertype.

    Raises:
        TypeError: If *base* is not a subclassable class or another brand.
    """
    if is_brand(base):
        return

    if base is typing.Any:
        msg = "Brand base must not be typing.Any"
        raise TypeError(msg)

    origin = typing.get_origin(base) or base
    if origin is typing.Union or origin is types.UnionType:
        msg = f"Brand base must be a single class, not the union {base!r}"
        raise TypeError(msg)

    if not isinstance(origin, type):
        msg = f"Brand base must be a class or another brand, got {base!r}"
        raise TypeError(msg)

    if getattr(origin, "_is_protocol", False) or origin in _PROTOCOL_ABCS:
        msg = f"Brand base {origin.__qualname__} is a Protocol; brand a concrete class"
        raise TypeError(msg)

    if not origin.__flags__ & _TPFLAGS_BASETYPE or getattr(origin, "__final__", False):
        msg = f"Brand base {origin.__qualname__} cannot be subclassed"
        raise TypeError(msg)


if TYPE_CHECKING:
    from typing import NewType as Brand
else:

    class Brand(typing.NewType):
        """A label-distinguished subtype of *base* with no runtime footprint.

        Usage::

            UserId = Brand("UserId", str)
            ProductId = Brand("ProductId", str)
            AdminId = Brand("AdminId", UserId)

            def load_user(user_id: UserId) -> User: ...

            load_user(UserId("abc123"))     # OK
            load_user("abc123")             # rejected by the type checker
            load_user(ProductId("abc123"))  # rejected by the type checker

        Raises:
            TypeError: If *label* is not a str or *base* is not a
                subclassable class or another brand.
            ValueError: If *label* is not a non-keyword identifier.
        """

        def __init__(self, label: str, base: Any) -> None:
            check_label(label)
            _check_base(base)
            super().__init__(label, base)
            self.__module__ = sys._getframe(1).f_globals.get("__name__", "__main__")
            logger.debug("Declared brand %s over %s", label, _type_name(base))

        def __eq__(self, other: object) -> bool:
            if not isinstance(other, Brand):
                return NotImplemented
            return self.__name__ == other.__name__ and self.__supertype__ == other.__supertype__

        def __hash__(self) -> int:
            return hash((self.__name__, self.__supertype__))

        def __get_pydantic_core_schema__(self, source_type: Any, handler: Any) -> Any:
            # Validate and serialize exactly as the root base does.
            return handler(root_of(self))


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------


def is_brand(obj: object) -> bool:
    """Whether *obj* is a brand: a ``Brand`` or any plain ``typing.NewType``."""
    return isinstance(obj, typing.NewType)


def _require_brand(tp: object) -> Any:
    if not is_brand(tp):
        msg = f"{tp!r} is not a brand"
        raise TypeError(msg)
    return tp


def label_of(tp: object) -> str:
    """Return the label of brand *tp*.

    Raises:
        TypeError: If *tp* is not a brand.
    """
    return _require_brand(tp).__name__


def base_of(tp: object) -> Any:
    """Return the type *tp* was derived from, one level down.

    Raises:
        TypeError: If *tp* is not a brand.
    """
    return _require_brand(tp).__supertype__


def _chain(tp: object) -> list[Any]:
    links: list[Any] = []
    while is_brand(tp):
        links.append(tp)
        tp = base_of(tp)
    return links


def root_of(tp: object) -> Any:
    """Return the first non-brand type under *tp*; a non-brand is its own root."""
    while is_brand(tp):
        tp = base_of(tp)
    return tp


def labels_of(tp: object) -> tuple[str, ...]:
    """Return every label on *tp*, outermost first.

    Examples:
        >>> UserId = Brand("UserId", str)
        >>> labels_of(Brand("AdminId", UserId))
        ('AdminId', 'UserId')
        >>> labels_of(str)
        ()
    """
    return tuple(label_of(link) for link in _chain(tp))


def same_brand(a: object, b: object) -> bool:
    """Whether *a* and *b* are the same brand under label-scoped identity.

    Two brands are the same when they carry equal labels at every nesting
    level over an equal root, wherever each was declared.
    """
    if not (is_brand(a) and is_brand(b)):
        return False
    return labels_of(a) == labels_of(b) and root_of(a) == root_of(b)


def _protocol_members(proto: type) -> set[str]:
    members: set[str] = set()
    for cls in proto.__mro__:
        if cls in (typing.Protocol, typing.Generic, object):
            continue
        if not getattr(cls, "_is_protocol", False):
            continue
        members.update(getattr(cls, "__annotations__", {}))
        members.update(cls.__dict__)
    return {
        name
        for name in members
        if name not in _PROTOCOL_INTERNALS and not name.startswith("_abc_")
    }


def is_assignable(source: object, target: object) -> bool:
    """Whether a value typed *source* may be used where *target* is expected.

    Mirrors the checker's rules for brands: a brand flows to anything in its
    chain and to its root's superclasses; nothing flows into a brand except
    that brand or one derived from it.

    Structural targets (Protocols) are satisfied when the root carries every
    member; ``typing.Any`` accepts everything, and ``int`` widens to
    ``float`` and ``complex``.
    """
    if target is typing.Any:
        return True

    if is_brand(target):
        return any(same_brand(link, target) for link in _chain(source))

    target_origin = typing.get_origin(target)
    if target_origin is typing.Union or target_origin is types.UnionType:
        return any(is_assignable(source, arm) for arm in typing.get_args(target))

    root = root_of(source)
    if target_origin is not None:
        return bool(root == target)

    root_origin = typing.get_origin(root) or root
    if not isinstance(root_origin, type) or not isinstance(target, type):
        return False
    if getattr(target, "_is_protocol", False):
        return all(hasattr(root_origin, name) for name in _protocol_members(target))
    if issubclass(root_origin, target):
        return True
    return issubclass(root_origin, _PROMOTIONS.get(target, ()))
