# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from .delta_format import (
    ChangeOp, Change, Delta, validate_change, validate_delta)
from .log import DeltaFormatError
from .utils import split_path


def invert_delta(delta):
    """Build the delta undoing the given one.

    Paths are kept, each change is replaced by its inverse.
    """
    return Delta((path, e.inverse()) for path, e in delta.items())


def to_clean_dicts(delta):
    "Recursively convert a delta to a plain dict of plain dicts, in path order."
    if isinstance(delta, Delta):
        items = delta.sorted_items()
    else:
        items = sorted(delta.items(), key=lambda x: x[0])
    return {path: {k: copy.deepcopy(v) for k, v in e.items()}
            for path, e in items}


def from_clean_dicts(obj):
    """Rebuild a Delta from plain dicts, e.g. as loaded from json.

    Raises a DeltaFormatError if obj does not describe a valid delta.
    """
    if not isinstance(obj, dict):
        raise DeltaFormatError("Delta must be a dict, not '{}'.".format(
            type(obj).__name__))
    delta = Delta()
    for path, e in obj.items():
        if not isinstance(e, dict):
            raise DeltaFormatError(
                "Change at path '{}' must be a dict, not '{}'.".format(
                    path, type(e).__name__))
        change = Change(e)
        validate_change(change)
        delta[path] = change
    validate_delta(delta)
    return delta


def _escape_pointer_token(token):
    return token.replace("~", "~0").replace("/", "~1")


def to_json_pointer(path):
    "Convert a dotted delta path to a json pointer (RFC 6901)."
    return "".join("/" + _escape_pointer_token(p) for p in split_path(path))


def to_json_patch(delta):
    """Convert a delta to a json patch (RFC 6902) operation list.

    Operations are emitted in path order, which is the order apply
    uses. Note that apply creates missing intermediate objects while
    json patch consumers generally do not, so a hand built delta may
    convert to a patch that other tools refuse to apply.
    """
    if not isinstance(delta, Delta):
        delta = Delta(delta)
    patch = []
    for path, e in delta.sorted_items():
        pointer = to_json_pointer(path)
        if e.op == ChangeOp.ADD:
            patch.append({'op': 'add', 'path': pointer, 'value': e.value})
        elif e.op == ChangeOp.REMOVE:
            patch.append({'op': 'remove', 'path': pointer})
        elif e.op == ChangeOp.MODIFY:
            patch.append({'op': 'replace', 'path': pointer, 'value': e.new})
        else:
            raise DeltaFormatError("Invalid op {}.".format(e.op))
    return patch
