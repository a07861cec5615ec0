# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from .delta_format import Delta, Missing
from .diff_utils import invert_delta
from .log import NestingDepthError, debug
from .utils import split_path


__all__ = ["apply", "revert"]


def _copy_value(value):
    try:
        return copy.deepcopy(value)
    except RecursionError:
        raise NestingDepthError(
            "Value is nested too deeply to be copied.") from None


def set_value(root, path, value):
    """Set value at the dotted path in root, or delete it if value is Missing.

    Returns the new root, which is only a different object when
    path is empty and the whole document is replaced.

    Intermediate objects along the path are created when absent.
    An existing intermediate value that is not a dict (scalar or
    array) is discarded and replaced by an empty dict.
    """
    parts = split_path(path)
    if not parts:
        return None if value is Missing else value

    current = root
    for segment in parts[:-1]:
        child = current.get(segment)
        if not isinstance(child, dict):
            child = {}
            current[segment] = child
        current = child

    key = parts[-1]
    if value is Missing:
        current.pop(key, None)
    else:
        current[key] = value
    return root


def apply(original, delta):
    """Produce a patched copy of original with the given delta.

    Changes are applied in ascending path order, so a change at
    'a' is applied before a change at 'a.b'. The original is
    never modified and the result shares no objects with it or
    with the delta, even when the delta is empty.

    A delta is not required to come from diff: paths that do not
    exist are created, removal of absent keys is a no-op, and
    intermediate scalars or arrays on a path are overwritten by
    empty objects.
    """
    if not isinstance(delta, Delta):
        delta = Delta(delta)

    result = _copy_value(original)
    for path, e in delta.sorted_items():
        value = e.target()
        if value is not Missing:
            value = _copy_value(value)
        if path and not isinstance(result, dict):
            if len(split_path(path)) == 1:
                # No intermediate object to coerce, nothing to set the key on
                debug("Skipping change at %r, document root is not an object", path)
                continue
            result = {}
        result = set_value(result, path, value)
    return result


def revert(original, delta):
    """Undo the given delta on original.

    Typically original is the target document the delta was
    computed for, and the source document is returned.
    """
    return apply(original, invert_delta(delta))
