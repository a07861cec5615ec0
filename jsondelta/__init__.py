# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .delta_format import (
    Change, ChangeOp, Delta, op_add, op_remove, op_modify,
    is_valid_delta, validate_delta)
from .diffing import diff, DiffConfig
from .diff_utils import invert_delta, to_clean_dicts, from_clean_dicts, to_json_patch
from .log import DeltaFormatError, NestingDepthError
from .patching import apply, revert


__all__ = [
    "__version__",
    "diff", "apply", "revert",
    "Change", "ChangeOp", "Delta",
    "op_add", "op_remove", "op_modify",
    "DiffConfig", "invert_delta",
    "is_valid_delta", "validate_delta",
    "to_clean_dicts", "from_clean_dicts", "to_json_patch",
    "DeltaFormatError", "NestingDepthError",
    ]
