"""Tests for decoding the nested-list error AST wire form."""

from __future__ import annotations

from typing import Any

import pytest

from schemalex.exceptions import MalformedNodeError
from schemalex.model import Failure, Key, PredicateApplication, Span, parse_ast, parse_node


def test_parse_failure_with_predicate() -> None:
    node = parse_node(["failure", ["age", ["predicate", ["gt?", [18], 12]]]])

    assert node == Failure("age", PredicateApplication(name="gt?", args=(18,), value=12))


def test_parse_nested_keys() -> None:
    node = parse_node(["key", ["address", ["key", ["city", ["failure", ["city", ["predicate", ["str?", [], 1]]]]]]]])

    assert isinstance(node, Key)
    assert node.key == "address"
    assert isinstance(node.child, Key)
    assert isinstance(node.child.child, Failure)


def test_parse_span_argument() -> None:
    node = parse_node(["predicate", ["size?", [{"span": [3, 4]}], "ab"]])

    assert node == PredicateApplication(name="size?", args=(Span(3, 4),), value="ab")


def test_mapping_arguments_other_than_span_pass_through() -> None:
    node = parse_node(["predicate", ["eql?", [{"a": 1}], {"a": 2}]])

    assert isinstance(node, PredicateApplication)
    assert node.args == ({"a": 1},)


def test_integer_keys_are_accepted_for_array_indexes() -> None:
    node = parse_node(["key", [0, ["predicate", ["str?", [], 1]]]])

    assert node == Key(0, PredicateApplication(name="str?", value=1))


def test_valid_built_nodes_are_returned_as_is() -> None:
    node = Failure("age", PredicateApplication.of("gt?", 18, 12))

    assert parse_node(node) is node


def test_parse_ast_decodes_every_node() -> None:
    nodes = parse_ast(
        [
            ["failure", ["a", ["predicate", ["filled?", [], ""]]]],
            Failure("b", PredicateApplication.of("int?", "x")),
        ]
    )

    assert [node.key for node in nodes] == ["a", "b"]


def test_parse_ast_rejects_non_list() -> None:
    with pytest.raises(MalformedNodeError, match="list of nodes"):
        parse_ast("failure")


@pytest.mark.parametrize(
    ("data", "match"),
    [
        ("failure", "tag, body"),
        (["failure"], "tag, body"),
        (["unknown", ["a", "b"]], "unknown node tag"),
        (["failure", ["a"]], "key, child"),
        (["key", [None, ["predicate", ["str?", [], 1]]]], "node key"),
        (["key", [True, ["predicate", ["str?", [], 1]]]], "node key"),
        (["failure", [["a"], ["predicate", ["str?", [], 1]]]], "node key"),
        (["predicate", ["gt?", [1]]], "name, args, value"),
        (["predicate", ["", [], 1]], "non-empty string"),
        (["predicate", ["gt?", 1, 2]], "args must be a list"),
        (["predicate", ["size?", [{"span": [1]}], "ab"]], "low, high"),
        (["failure", ["a", ["nope", []]]], "unknown node tag"),
    ],
    ids=[
        "bare-string",
        "missing-body",
        "unknown-tag",
        "short-body",
        "none-key",
        "bool-key",
        "unhashable-key",
        "short-predicate",
        "empty-name",
        "non-list-args",
        "bad-span",
        "nested-unknown-tag",
    ],
)
def test_malformed_nodes_raise(data: Any, match: str) -> None:
    with pytest.raises(MalformedNodeError, match=match):
        parse_node(data)


@pytest.mark.parametrize(
    ("node", "match"),
    [
        (PredicateApplication("gt?", 5, 1), "args must be a list"),
        (PredicateApplication(name=None), "non-empty string"),
        (Failure(["x"], PredicateApplication.of("filled?", "")), "node key"),
        (Key(("a", ["b"]), PredicateApplication.of("filled?", "")), "node key"),
        (Failure("x", None), "has no child"),
        (Key("x", Failure("y", PredicateApplication(name=""))), "non-empty string"),
    ],
    ids=[
        "scalar-args",
        "none-name",
        "list-key",
        "tuple-key-with-list",
        "missing-child",
        "nested-empty-name",
    ],
)
def test_malformed_built_nodes_raise(node: Any, match: str) -> None:
    with pytest.raises(MalformedNodeError, match=match):
        parse_node(node)


def test_unhashable_wire_key_inside_tuple_raises() -> None:
    with pytest.raises(MalformedNodeError, match="node key"):
        parse_node(["failure", [("a", ["b"]), ["predicate", ["filled?", [], ""]]]])


def test_error_preview_is_truncated() -> None:
    with pytest.raises(MalformedNodeError) as exc_info:
        parse_node(["x" * 500])

    assert len(str(exc_info.value)) < 200


def test_predicate_of_splits_value_from_args() -> None:
    predicate = PredicateApplication.of("included_in?", [1, 2], 3)

    assert predicate.args == ([1, 2],)
    assert predicate.value == 3
    assert predicate.arity == 1
    assert PredicateApplication.of("filled?") == PredicateApplication(name="filled?")
