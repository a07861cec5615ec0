# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from jsondelta import diff
from jsondelta.delta_format import (
    Change, ChangeOp, Delta, DeltaBuilder,
    op_add, op_remove, op_modify,
    is_valid_delta, validate_delta, validate_change)
from jsondelta.log import DeltaFormatError


def test_change_attribute_access():
    e = op_modify(1, 2)
    assert e.op == ChangeOp.MODIFY
    assert e.old == 1
    assert e.new == 2
    assert e == {"op": "modify", "old": 1, "new": 2}
    with pytest.raises(AttributeError):
        e.value


def test_delta_sorted_items():
    d = Delta()
    d["b"] = op_add(1)
    d["a.b"] = op_add(2)
    d["a"] = op_add(3)
    d["A"] = op_add(4)
    assert [path for path, _ in d.sorted_items()] == ["A", "a", "a.b", "b"]


def test_delta_builder_sorts():
    di = DeltaBuilder()
    di.add("z", 1)
    di.remove("a", 2)
    di.modify("m", 3, 4)
    assert len(di) == 3
    delta = di.validated()
    assert isinstance(delta, Delta)
    assert list(delta) == ["a", "m", "z"]


def test_delta_builder_colliding_paths_keep_last():
    di = DeltaBuilder()
    di.add("a.b", 1)
    di.modify("a.b", 1, 2)
    assert di.validated() == {"a.b": op_modify(1, 2)}


def test_diff_is_valid():
    a = {"foo": [1, 2, 3], "bar": {"ting": 7, "tang": 123}}
    b = {"foo": [1, 3, 4], "bar": {"tang": 126, "hello": "world"}}
    d = diff(a, b)
    assert is_valid_delta(d)
    validate_delta(d)


def test_validate_delta_errors():
    with pytest.raises(DeltaFormatError):
        validate_delta([op_add(1)])
    with pytest.raises(DeltaFormatError):
        validate_delta({1: op_add(1)})
    with pytest.raises(DeltaFormatError):
        validate_delta({"a": {"op": "add", "value": 1}})
    assert not is_valid_delta({"a": Change(op="move", value=1)})
    assert is_valid_delta({})


def test_validate_change_errors():
    validate_change(op_add(None))
    validate_change(op_remove(None))
    with pytest.raises(DeltaFormatError):
        validate_change(Change(value=1))
    with pytest.raises(DeltaFormatError):
        validate_change(Change(op="add"))
    with pytest.raises(DeltaFormatError):
        validate_change(Change(op="modify", old=1))
    with pytest.raises(DeltaFormatError):
        validate_change(Change(op="remove", value=1, extra=2))


def test_invalid_op_inverse():
    with pytest.raises(DeltaFormatError):
        Change(op="replace", value=1).inverse()
