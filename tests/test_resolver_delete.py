"""Tests for deleting values."""

import tomllib

import pytest

from tomlquery import (
    IndexOutOfBounds,
    NotAnArray,
    NotATable,
    NotFound,
    delete,
    read,
    tokenize,
)


def test_delete_existing_key() -> None:
    doc = {"a": {"b": 1, "c": 2}}

    assert delete(doc, "a.b") is True
    assert doc == {"a": {"c": 2}}
    with pytest.raises(NotFound):
        read(doc, "a.b")


def test_delete_absent_terminal_returns_false() -> None:
    doc = tomllib.loads("[table]")

    assert delete(doc, "table.a") is False
    assert doc == {"table": {}}


def test_delete_from_empty_document() -> None:
    assert delete({}, "a") is False


def test_delete_absent_index_returns_false() -> None:
    doc = {"a": [1]}

    assert delete(doc, "a.[1]") is False
    assert doc == {"a": [1]}


def test_delete_whole_subtree() -> None:
    doc = tomllib.loads(
        """
        [table]
        a = 1

        [other]
        b = 2
        """
    )

    assert delete(doc, "table") is True
    assert doc == {"other": {"b": 2}}


def test_delete_compacts_arrays() -> None:
    doc = {"foo": {"bar": [10, 20, 30]}}
    stale = tokenize("foo.bar.[2]")

    assert delete(doc, "foo.bar.[0]") is True
    assert read(doc, "foo.bar") == [20, 30]
    with pytest.raises(IndexOutOfBounds):
        read(doc, stale)
    assert delete(doc, stale) is False


def test_delete_keeps_key_order() -> None:
    doc = {"a": 1, "b": 2, "c": 3}

    delete(doc, "b")

    assert list(doc) == ["a", "c"]


def test_delete_missing_ancestor_is_not_found() -> None:
    doc = {"a": {}}

    with pytest.raises(NotFound):
        delete(doc, "a.b.c")


def test_delete_ancestor_out_of_bounds() -> None:
    doc: dict = {"a": []}

    with pytest.raises(IndexOutOfBounds):
        delete(doc, "a.[0].b")


def test_delete_shape_mismatches() -> None:
    doc = {"scalar": 1, "table": {}, "array": [1]}

    with pytest.raises(NotATable):
        delete(doc, "scalar.b")
    with pytest.raises(NotATable):
        delete(doc, "array.b")
    with pytest.raises(NotAnArray):
        delete(doc, "table.[0]")
    with pytest.raises(NotAnArray):
        delete(doc, "table.[0].b")

    assert doc == {"scalar": 1, "table": {}, "array": [1]}
