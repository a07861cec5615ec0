# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def json_schema_delta(request):
    schema_path = pjoin(schema_dir, 'delta_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def delta_validator(request, json_schema_delta):
    return Validator(json_schema_delta)


@fixture
def user_profiles():
    before = {
        "name": "Alice",
        "age": 30,
        "address": {"city": "Wonderland", "zip": "12345"},
        "hobbies": ["reading", "chess"],
    }
    after = {
        "name": "Alice",
        "age": 31,
        "address": {"city": "Wonderland", "street": "Rabbit Hole 1"},
        "hobbies": ["reading", "croquet"],
        "active": True,
    }
    return before, after
