# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import NestingDepthError


# Separator between object keys in a delta path
PATH_SEP = "."


def split_path(path):
    "Split a path on the form 'foo.bar' into ['foo','bar']."
    if path == "":
        return []
    return path.split(PATH_SEP)


def child_path(path, key):
    "Path of the value found under key in the object at path."
    return key if path == "" else PATH_SEP.join((path, key))


def value_kind(x):
    """Name the json kind of x.

    bool is checked before int since bool is a subclass of int.
    """
    if x is None:
        return "null"
    elif isinstance(x, bool):
        return "boolean"
    elif isinstance(x, int):
        return "integer"
    elif isinstance(x, float):
        return "float"
    elif isinstance(x, str):
        return "string"
    elif isinstance(x, list):
        return "array"
    elif isinstance(x, dict):
        return "object"
    else:
        raise TypeError("Not a json value: {!r}".format(type(x).__name__))


def values_equal(a, b, max_depth=None, _depth=0):
    """Compare two json values by kind and content.

    Unlike ==, this keeps 1, 1.0 and True apart. Key order of
    objects is not significant.
    """
    if max_depth is not None and _depth > max_depth:
        raise NestingDepthError(
            "Value nested deeper than {} levels.".format(max_depth))
    ka = value_kind(a)
    if ka != value_kind(b):
        return False
    if ka == "object":
        if len(a) != len(b):
            return False
        for key, av in a.items():
            if key not in b:
                return False
            if not values_equal(av, b[key], max_depth, _depth + 1):
                return False
        return True
    elif ka == "array":
        if len(a) != len(b):
            return False
        return all(values_equal(x, y, max_depth, _depth + 1)
                   for x, y in zip(a, b))
    else:
        return a == b
