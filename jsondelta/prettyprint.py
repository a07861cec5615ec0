# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import io
import json
import sys

import colorama

from .delta_format import ChangeOp, Delta
from .log import DeltaFormatError


# Indentation offset in pretty-print
IND = "  "

ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET


DefaultConfig = PrettyPrintConfig()


def format_value(value):
    "Format a json value as indented text lines."
    return json.dumps(value, indent=len(IND), sort_keys=True,
                      ensure_ascii=False).splitlines()


def pretty_print_value(value, prefix, config):
    for line in format_value(value):
        config.out.write("%s%s%s\n" % (prefix, line, config.RESET))


def pretty_print_header(op, path, config):
    label = path if path else "<root>"
    config.out.write("%s%s %s%s\n" % (config.INFO, op, label, config.RESET))


def pretty_print_change(path, e, config=DefaultConfig):
    op = e.op
    if op == ChangeOp.ADD:
        pretty_print_header("added", path, config)
        pretty_print_value(e.value, config.ADD, config)
    elif op == ChangeOp.REMOVE:
        pretty_print_header("removed", path, config)
        pretty_print_value(e.value, config.REMOVE, config)
    elif op == ChangeOp.MODIFY:
        pretty_print_header("modified", path, config)
        pretty_print_value(e.old, config.REMOVE, config)
        pretty_print_value(e.new, config.ADD, config)
    else:
        raise DeltaFormatError("Invalid op {}.".format(op))


def pretty_print_delta(delta, config=DefaultConfig):
    "Pretty-print a delta, one block per changed path in path order."
    if not isinstance(delta, Delta):
        delta = Delta(delta)
    for path, e in delta.sorted_items():
        pretty_print_change(path, e, config)


def pretty_print_delta_to_string(delta, use_color=False):
    out = io.StringIO()
    pretty_print_delta(delta, PrettyPrintConfig(out=out, use_color=use_color))
    return out.getvalue()
