# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Insertion-ordered set with named algebraic operations
"""

from collections.abc import Hashable, Iterable, Iterator, MutableSet
from typing import Any, Dict, Optional

import numpy as np


class ExtendedSet(MutableSet):
    """
    A set that remembers insertion order and exposes union, intersection,
    difference and subset/superset tests as methods.

    ``other`` in every operation only needs to support ``in`` and
    iteration, so plain sets, lists and dict views all work. Operations
    never mutate either operand.

    ``True``/``False`` are kept apart from ``1``/``0``, so
    ``ExtendedSet([1, True])`` has two elements. ``1`` and ``1.0`` are the
    same element.
    """

    def __init__(self, iterable: Optional[Iterable[Hashable]] = None):
        # storage key -> element as inserted
        self._items: Dict[Hashable, Hashable] = {}
        if iterable is not None:
            for item in iterable:
                self.add(item)

    @classmethod
    def _from_iterable(cls, it):
        # used by the MutableSet mixins for |, &, - and ^
        return cls(it)

    def __contains__(self, item: Any) -> bool:
        try:
            return _key(item) in self._items
        except TypeError:  # unhashable
            return False

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"

    def add(self, item: Hashable) -> None:
        self._items.setdefault(_key(item), item)

    def discard(self, item: Hashable) -> None:
        if item in self:
            del self._items[_key(item)]

    def delete(self, item: Hashable) -> bool:
        """Remove ``item``; return True if it was present."""
        if item in self:
            del self._items[_key(item)]
            return True
        return False

    def has(self, item: Any) -> bool:
        return item in self

    def clear(self) -> None:
        self._items.clear()

    def union(self, other: Iterable) -> "ExtendedSet":
        """Every element of either operand, self's elements first."""
        result = ExtendedSet(self)
        for item in other:
            result.add(item)
        return result

    def intersection(self, other: Iterable) -> "ExtendedSet":
        return ExtendedSet(item for item in self if item in other)

    def difference(self, other: Iterable) -> "ExtendedSet":
        return ExtendedSet(item for item in self if item not in other)

    def is_subset_of(self, other: Iterable) -> bool:
        """Vacuously True for an empty set."""
        return all(item in other for item in self)

    def is_superset_of(self, other: Iterable) -> bool:
        return all(item in self for item in other)


_BOOL = object()


def _key(item: Hashable) -> Hashable:
    # bools hash equal to 0/1; tag them so they stay separate elements
    if isinstance(item, (bool, np.bool_)):
        return (_BOOL, bool(item))
    return item
