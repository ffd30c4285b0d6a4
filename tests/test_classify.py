import datetime as dt

import pytest

from treexml.tag_model import Tag
from treexml.types_node import NodeKind, classify, is_unit


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ([1, 2], NodeKind.SEQUENCE),
        (("a",), NodeKind.SEQUENCE),
        (Tag("a"), NodeKind.TAG),
        ({"_name": "a", "_content": "b"}, NodeKind.TAG),
        (dt.date(2024, 1, 2), NodeKind.DATE),
        (dt.datetime(2024, 1, 2, 3, 4), NodeKind.DATE),
        (None, NodeKind.ABSENT),
        (lambda: "x", NodeKind.CALLABLE),
        ({"a": 1}, NodeKind.MAPPING),
        ({}, NodeKind.MAPPING),
        ("text", NodeKind.SCALAR),
        (3, NodeKind.SCALAR),
        (1.5, NodeKind.SCALAR),
        (True, NodeKind.SCALAR),
    ],
)
def test_classify(value, expected):
    assert classify(value) is expected


def test_falsy_name_is_not_a_descriptor():
    assert classify({"_name": "", "_content": "x"}) is NodeKind.MAPPING
    assert classify({"_content": "x", "_attrs": {"a": 1}}) is NodeKind.MAPPING


def test_sequence_of_descriptors_is_still_a_sequence():
    assert classify([Tag("a"), {"_name": "b"}]) is NodeKind.SEQUENCE


def test_unit_kinds():
    assert is_unit("x")
    assert is_unit(dt.date(2024, 1, 1))
    assert is_unit({"_name": "a"})
    assert not is_unit({"a": 1})
    assert not is_unit([])
    assert not is_unit(None)
    assert not is_unit(lambda: "x")
