# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Mutation units - composable construction of nested value objects.

A mutation unit is a callable that receives a target and changes it in
place. Targets are built by allocating a zero-valued instance and applying
units to it in order:

    >>> meta = build(ObjectMeta, assign('namespace', 'testing'))
    >>> meta.namespace
    'testing'

Units nest: nest() and append() take further units for a child level, build
the child with build() and attach it to the parent.

    >>> rule = build(
    ...     IngressRule,
    ...     assign('host', 'foo'),
    ...     nest('http', append('paths', assign('path', '/bar'))),
    ... )

Paths are dotted attribute names ('metadata.namespace'). Intermediate
children that are still None are allocated from the field's annotated type,
the same way set_item() autocreates intermediate branches.

There is no error channel: assigning a field twice keeps the last value.
"""

from __future__ import annotations

import copy
import logging
import types
import typing
from functools import lru_cache
from typing import Any, Callable, TypeVar

T = TypeVar('T')

Mutation = Callable[[T], None]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _type_hints(cls: type) -> dict[str, Any]:
    return typing.get_type_hints(cls)


def _strip_optional(hint: Any) -> Any:
    """Unwrap 'X | None' and Optional[X] to X."""
    if typing.get_origin(hint) in (typing.Union, types.UnionType):
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def field_type(cls: type, name: str) -> Any:
    """Return the annotated type of a field, with None stripped.

    Args:
        cls: The target class.
        name: The field name.

    Raises:
        AttributeError: If cls has no annotated field called name.
    """
    try:
        hint = _type_hints(cls)[name]
    except KeyError:
        raise AttributeError(
            f"'{cls.__name__}' has no field '{name}'"
        ) from None
    return _strip_optional(hint)


def _factory(hint: Any) -> Callable[[], Any]:
    """Callable producing a zero value for a type hint (dict[str, str] -> dict)."""
    return typing.get_origin(hint) or hint


def item_type(cls: type, name: str) -> Any:
    """Return the element type of a list field (list[X] -> X)."""
    hint = field_type(cls, name)
    args = typing.get_args(hint)
    if not args:
        raise TypeError(f"Field '{cls.__name__}.{name}' is not a typed list")
    return args[0]


def traverse(target: Any, path: str) -> tuple[Any, str]:
    """Walk a dotted path, allocating absent intermediate children.

    Args:
        target: The object the path starts from.
        path: Dotted attribute path.

    Returns:
        Tuple of (owner, final_name) where owner is the object holding the
        last path segment.
    """
    parts = path.split('.')
    current = target

    for name in parts[:-1]:
        child = getattr(current, name)
        if child is None:
            child = _factory(field_type(type(current), name))()
            setattr(current, name, child)
        current = child

    return current, parts[-1]


def build(factory: Callable[[], T], *mutations: Mutation[T]) -> T:
    """Allocate a zero-valued target and apply mutations to it in order.

    Args:
        factory: Callable returning a fresh zero-valued target (usually the
            target class itself).
        *mutations: Units applied one after the other.

    Returns:
        The finished target. It is never referenced by the units afterwards.
    """
    target = factory()
    for mutation in mutations:
        mutation(target)
    logger.debug(
        "Built %s with %d mutation(s)",
        type(target).__name__, len(mutations),
    )
    return target


def assign(path: str, value: Any) -> Mutation[Any]:
    """Unit setting a scalar field.

    The value is deep-copied on every application, so a unit reused across
    builds never shares mutable state between the results.

    Example:
        >>> build(ObjectMeta, assign('namespace', 'a'), assign('namespace', 'b')).namespace
        'b'
    """
    def mutation(target: Any) -> None:
        owner, name = traverse(target, path)
        setattr(owner, name, copy.deepcopy(value))

    return mutation


def nest(path: str, *mutations: Mutation[Any]) -> Mutation[Any]:
    """Unit building a singular child and assigning it to path.

    The child type comes from the field annotation. A previous child is
    replaced, not merged.
    """
    def mutation(target: Any) -> None:
        owner, name = traverse(target, path)
        child_type = _factory(field_type(type(owner), name))
        setattr(owner, name, build(child_type, *mutations))

    return mutation


def append(path: str, *mutations: Mutation[Any]) -> Mutation[Any]:
    """Unit building one element and appending it to the list at path.

    Every application contributes exactly one entry, in call order.

    Example:
        >>> value = build(
        ...     HTTPIngressRuleValue,
        ...     append('paths', assign('path', '/a')),
        ...     append('paths', assign('path', '/b')),
        ... )
        >>> [p.path for p in value.paths]
        ['/a', '/b']
    """
    def mutation(target: Any) -> None:
        owner, name = traverse(target, path)
        element = build(_factory(item_type(type(owner), name)), *mutations)
        items = getattr(owner, name)
        if items is None:
            items = []
            setattr(owner, name, items)
        items.append(element)

    return mutation


def set_entry(path: str, key: str, value: Any) -> Mutation[Any]:
    """Unit setting one entry of a mapping field, allocating the mapping if absent."""
    def mutation(target: Any) -> None:
        owner, name = traverse(target, path)
        mapping = getattr(owner, name)
        if mapping is None:
            mapping = _factory(field_type(type(owner), name))()
            setattr(owner, name, mapping)
        mapping[key] = copy.deepcopy(value)

    return mutation
