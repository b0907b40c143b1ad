"""
INSTRUCTION HEADER
Tests for sheetcsv.transform: transposition and header standardization.
"""

import pytest

from sheetcsv.config.schema import SheetConfig
from sheetcsv.transform import (
    clean_up_headers,
    should_transpose,
    standardize_header,
    standardize_headers,
    transform_matrix,
    transpose,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("User Name", "user_name"),
        ("USERNAME", "user_name"),
        ("PrimaryKeyList", "primarykey_list"),
        ("Foo_Bar_", "foo_bar"),
        ("*Order  Date*", "order_date"),
        ("Amount__*", "amount"),
        ("Name ", "name"),
        ("  ", ""),
        ("", ""),
    ],
)
def test_standardize_header(raw, expected) -> None:
    assert standardize_header(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["User Name", "username ", "Foo _", "Tab\t_ ", " Lead", "primaryKEYlist*", "A*B c_", "already_clean"],
)
def test_standardize_header_is_idempotent(raw) -> None:
    once = standardize_header(raw)
    assert standardize_header(once) == once


def test_transpose_swaps_axes() -> None:
    m = [["a", "b", "c"], ["1", "2", "3"]]
    assert transpose(m) == [["a", "1"], ["b", "2"], ["c", "3"]]
    assert transpose(transpose(m)) == m


def test_transpose_pads_short_rows() -> None:
    m = [["a", "b", "c"], ["1"], ["x", "y"]]
    assert transpose(m) == [["a", "1", "x"], ["b", "", "y"], ["c", "", ""]]


def test_transpose_leaves_empty_input_alone() -> None:
    assert transpose([]) == []
    assert transpose([[], ["1", "2"]]) == [[], ["1", "2"]]


def test_header_functions_do_not_mutate_input() -> None:
    m = [["User Name*", "Amount"], ["Bob", "3"]]
    out = standardize_headers(m)
    assert out == [["user_name", "amount"], ["Bob", "3"]]
    assert m[0] == ["User Name*", "Amount"]
    assert clean_up_headers([["a*b", "c"]]) == [["ab", "c"]]
    assert standardize_headers([]) == []


def test_should_transpose_respects_exclusions() -> None:
    assert should_transpose(SheetConfig("Params", "p.csv", transpose=True))
    assert not should_transpose(SheetConfig("Params", "p.csv", transpose=False))
    assert not should_transpose(
        SheetConfig("Params", "p.csv", transpose=True, exclude_from_transpose=frozenset({"Params"}))
    )


def test_transform_matrix_standardizes_header_after_transpose() -> None:
    config = SheetConfig("Params", "p.csv", transpose=True)
    m = [["Field Name", "Widget"], ["Amount*", "10"]]
    assert transform_matrix(m, config) == [["field_name", "amount"], ["Widget", "10"]]


def test_transpose_width_follows_the_widest_row() -> None:
    m = [["a"], ["1", "2", "3"]]
    assert transpose(m) == [["a", "1"], ["", "2"], ["", "3"]]
