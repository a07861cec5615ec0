# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from ..delta_format import DeltaBuilder
from ..log import NestingDepthError, debug
from ..utils import child_path, values_equal

from .config import DiffConfig

__all__ = ["diff"]


def diff(a, b, config=None, *, path=""):
    """Compute the delta between two json-like values.

    Objects present on both sides are compared key by key, everything
    else (scalars, arrays, mismatched kinds) is compared as a whole.
    A key present on one side only is recorded once with its entire
    subtree, the differ does not descend into it.

    Returns a Delta mapping each changed path to its Change.
    """
    if config is None:
        config = DiffConfig()

    di = DeltaBuilder()
    try:
        diff_values(a, b, di, path=path, config=config)
    except RecursionError:
        raise NestingDepthError(
            "Documents are nested too deeply to be diffed.") from None

    delta = di.validated()
    debug("Computed delta with %d changes", len(delta))
    return delta


def _remaining_depth(config, depth):
    if config.max_depth is None:
        return None
    return config.max_depth - depth


def diff_values(a, b, di, path="", config=None, depth=0):
    """Record into the builder di the changes turning a into b."""
    if config is None:
        config = DiffConfig()

    if not config.check_depth(depth):
        debug("Depth limit %d reached at path %r", config.max_depth, path)
        raise NestingDepthError(
            "Value at path {!r} is nested deeper than {} levels.".format(
                path, config.max_depth))

    if values_equal(a, b, max_depth=_remaining_depth(config, depth)):
        return

    if isinstance(a, dict) and isinstance(b, dict):
        diff_dicts(a, b, di, path=path, config=config, depth=depth)
    else:
        # Arrays and scalars are atomic, as are mismatched kinds
        di.modify(path, copy.deepcopy(a), copy.deepcopy(b))


def diff_dicts(a, b, di, path="", config=None, depth=0):
    """Record the changes between dicts a and b over the union of their keys.

    Keys in both a and b are diffed recursively, keys only in a are
    removed and keys only in b are added.
    """
    if config is None:
        config = DiffConfig()

    if not isinstance(a, dict) or not isinstance(b, dict):
        raise TypeError('Arguments to diff_dicts need to be dicts, got %r and %r' % (a, b))

    akeys = set(a.keys())
    bkeys = set(b.keys())

    # Sorting keys in loops to get a deterministic diff result
    for key in sorted(akeys | bkeys):
        subpath = child_path(path, key)
        if key in akeys and key in bkeys:
            diff_values(a[key], b[key], di, path=subpath, config=config,
                        depth=depth + 1)
        elif key in akeys:
            di.remove(subpath, copy.deepcopy(a[key]))
        else:
            di.add(subpath, copy.deepcopy(b[key]))
