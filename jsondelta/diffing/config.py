# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

# Stays below the default interpreter recursion limit of 1000,
# each nesting level costs two frames in the differ
DEFAULT_MAX_DEPTH = 300


class DiffConfig:
    """Set of options to pass around while diffing"""

    def __init__(self, *, max_depth=DEFAULT_MAX_DEPTH):
        if max_depth is not None and max_depth < 0:
            raise ValueError("max_depth must be non-negative, got %r" % (max_depth,))
        self.max_depth = max_depth

    def check_depth(self, depth):
        "Return True if values at nesting level depth may be walked."
        return self.max_depth is None or depth <= self.max_depth
