# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DeltaFormatError, warning


# Sentinel to allow None as a value
Missing = object()


class ChangeOp:
    "Collection of valid values for the op field in changes."
    ADD = "add"
    REMOVE = "remove"
    MODIFY = "modify"


class Change(dict):
    """A single change at one path of a document.

    Minimal class providing attribute access to change keys,
    so that a delta stays a plain json-serializable structure:

        {"op": "add", "value": v}
        {"op": "remove", "value": v}
        {"op": "modify", "old": a, "new": b}
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value

    def inverse(self):
        """Return the change undoing this one.

        Adds and removes swap, modify swaps old and new.
        """
        op = self.op
        if op == ChangeOp.ADD:
            return op_remove(self.value)
        elif op == ChangeOp.REMOVE:
            return op_add(self.value)
        elif op == ChangeOp.MODIFY:
            return op_modify(self.new, self.old)
        else:
            raise DeltaFormatError("Invalid op {}.".format(op))

    def target(self):
        "The value this change leaves at its path, Missing for removals."
        op = self.op
        if op == ChangeOp.ADD:
            return self.value
        elif op == ChangeOp.MODIFY:
            return self.new
        elif op == ChangeOp.REMOVE:
            return Missing
        else:
            raise DeltaFormatError("Invalid op {}.".format(op))


def op_add(value):
    "Create a change adding value at a path only present in the target."
    return Change(op=ChangeOp.ADD, value=value)

def op_remove(value):
    "Create a change removing value from a path only present in the source."
    return Change(op=ChangeOp.REMOVE, value=value)

def op_modify(old, new):
    "Create a change replacing old with new at a path present in both."
    return Change(op=ChangeOp.MODIFY, old=old, new=new)


class Delta(dict):
    """Mapping from dotted path to Change.

    Entries are processed in ascending path order by apply,
    whatever order they were inserted in.
    """

    def sorted_items(self):
        return sorted(self.items(), key=lambda x: x[0])

    def __repr__(self):
        return "Delta({})".format(dict.__repr__(dict(self.sorted_items())))


class DeltaBuilder(object):

    OPS = (
        ChangeOp.ADD,
        ChangeOp.REMOVE,
        ChangeOp.MODIFY,
        )

    def __init__(self):
        self._delta = {}

    def validated(self):
        return Delta(sorted(self._delta.items(), key=lambda x: x[0]))

    def append(self, path, change):
        # Typechecking (just for internal consistency checking)
        assert isinstance(path, str)
        assert isinstance(change, Change)
        assert change.op in DeltaBuilder.OPS

        # Keys containing the path separator can collide with nested paths
        if path in self._delta:
            warning("Multiple changes target path %r, keeping the last one.", path)
        self._delta[path] = change

    def add(self, path, value):
        self.append(path, op_add(value))

    def remove(self, path, value):
        self.append(path, op_remove(value))

    def modify(self, path, old, new):
        self.append(path, op_modify(old, new))

    def __len__(self):
        return len(self._delta)


def is_valid_delta(delta):
    """Checks whether a delta (mapping of path to change) is well formed.

    Returns a boolean indicating the well-formedness of the delta.
    """
    try:
        validate_delta(delta)
        result = True
    except DeltaFormatError:
        result = False
    return result


def validate_delta(delta):
    """Check whether a delta (mapping of path to change) is well formed.

    Raises a DeltaFormatError if not well formed.
    """
    if not isinstance(delta, dict):
        raise DeltaFormatError("Delta must be a dict, not '{}'.".format(
            type(delta).__name__))
    for path, e in delta.items():
        if not isinstance(path, str):
            raise DeltaFormatError(
                "Invalid delta path '{}' of type '{}'. Expecting str.".format(
                    path, type(path)))
        validate_change(e)


_required_fields = {
    ChangeOp.ADD: ("value",),
    ChangeOp.REMOVE: ("value",),
    ChangeOp.MODIFY: ("old", "new"),
}


def validate_change(e):
    """Check that e is a well formed change.

    Raises a DeltaFormatError if not well formed.
    """
    if not isinstance(e, Change):
        raise DeltaFormatError("Change '{}' is not a change type.".format(e))
    if "op" not in e:
        raise DeltaFormatError("Change '{}' has no op.".format(e))
    op = e.op
    if op not in _required_fields:
        raise DeltaFormatError("Unknown change op '{}'.".format(op))
    expected = set(("op",) + _required_fields[op])
    if set(e.keys()) != expected:
        raise DeltaFormatError(
            "Change with op '{}' expects fields {}, got {}.".format(
                op, sorted(expected), sorted(e.keys())))

    # Note that we're not checking the values in any way, as they
    # can in principle be arbitrary json objects
