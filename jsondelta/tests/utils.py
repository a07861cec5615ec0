# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from jsondelta import apply, diff, revert
from jsondelta.delta_format import is_valid_delta
from jsondelta.utils import values_equal


def assert_values_equal(a, b):
    "Assert equality that also tells 1, 1.0 and True apart."
    assert values_equal(a, b), "%r != %r" % (a, b)


def check_diff_and_patch(a, b):
    "Check that apply(a, diff(a,b)) reproduces b and revert(b, diff(a,b)) reproduces a."
    a_copy = copy.deepcopy(a)
    b_copy = copy.deepcopy(b)
    d = diff(a, b)
    assert is_valid_delta(d)
    assert_values_equal(apply(a, d), b)
    assert_values_equal(revert(b, d), a)
    # Inputs are left untouched
    assert_values_equal(a, a_copy)
    assert_values_equal(b, b_copy)
    return d


def check_symmetric_diff_and_patch(a, b):
    "Check that apply(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)
