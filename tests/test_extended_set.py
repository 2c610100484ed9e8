# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from mathtypes.extended_set import ExtendedSet


def test_construction():
    assert list(ExtendedSet([1, 2, 3])) == [1, 2, 3]
    assert list(ExtendedSet([3, 1, 3, 2, 1])) == [3, 1, 2]
    assert len(ExtendedSet()) == 0
    assert repr(ExtendedSet(["a"])) == "ExtendedSet(['a'])"


def test_union():
    a = ExtendedSet([1, 2])
    b = ExtendedSet([2, 3])
    union = a.union(b)
    assert isinstance(union, ExtendedSet)
    assert list(union) == [1, 2, 3]
    # operands untouched
    assert list(a) == [1, 2]
    assert list(b) == [2, 3]
    # any iterable works as the other operand
    assert list(a.union([5, 1, 4])) == [1, 2, 5, 4]


def test_intersection():
    a = ExtendedSet([1, 2, 3])
    b = ExtendedSet([2, 3, 4])
    assert list(a.intersection(b)) == [2, 3]
    assert list(ExtendedSet([3, 2, 1]).intersection([1, 2])) == [2, 1]
    assert list(a.intersection(ExtendedSet())) == []


def test_difference():
    a = ExtendedSet([1, 2, 3])
    b = ExtendedSet([2, 3, 4])
    assert list(a.difference(b)) == [1]
    assert list(b.difference(a)) == [4]
    assert list(a.difference(set())) == [1, 2, 3]
    assert list(a) == [1, 2, 3]


def test_subset_and_superset():
    a = ExtendedSet([1, 2])
    b = ExtendedSet([1, 2, 3])
    assert a.is_subset_of(b)
    assert not b.is_subset_of(a)
    assert b.is_superset_of(a)
    assert not a.is_superset_of(b)
    assert a.is_subset_of(a)
    assert a.is_superset_of([2])
    # empty set is a subset of anything
    assert ExtendedSet().is_subset_of(ExtendedSet())
    assert ExtendedSet().is_subset_of([])
    assert b.is_superset_of(ExtendedSet())


def test_native_set_operations():
    s = ExtendedSet([1])
    s.add(2)
    s.add(1)
    assert list(s) == [1, 2]
    assert s.has(2)
    assert 2 in s
    assert [] not in s

    assert s.delete(1) is True
    assert s.delete(1) is False
    s.discard(42)
    assert list(s) == [2]

    s.clear()
    assert len(s) == 0


def test_operators():
    a = ExtendedSet([1, 2])
    b = ExtendedSet([2, 3])
    assert isinstance(a | b, ExtendedSet)
    assert list(a | b) == [1, 2, 3]
    assert a & b == {2}
    assert a - b == {1}
    assert a ^ b == {1, 3}
    assert a == {1, 2}
    assert a <= ExtendedSet([1, 2, 3])


def test_bools_are_distinct_from_numbers():
    s = ExtendedSet([1, True, 0, False, 1.0])
    assert len(s) == 4
    assert list(s) == [1, True, 0, False]
    assert [type(x) for x in s] == [int, bool, int, bool]
    assert s.has(True)
    assert s.has(1.0)

    assert s.delete(True) is True
    assert list(s) == [1, 0, False]
    assert not s.has(True)
    assert s.has(1)

    a = ExtendedSet([1, True])
    b = ExtendedSet([True])
    assert list(a.intersection(b)) == [True]
    assert list(a.difference(b)) == [1]
    assert list(b.union(ExtendedSet([1]))) == [True, 1]
