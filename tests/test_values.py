"""Tests for the value parser and its narrowing accessors."""

import pytest

from tileman.kernel.errors import DataConvertFailed
from tileman.kernel.tiles import TileCell
from tileman.kernel.values import (
    Integer,
    List,
    Point,
    Text,
    Unparsed,
    parse_value,
    split_commas,
)


class TestParseValue:
    """Grammar rules, in the order they are tried."""

    @pytest.mark.parametrize("n", [0, 1, 42, -7, 2147483647, -2147483648])
    def test_integers_round_trip(self, n):
        assert parse_value(str(n)) == Integer(n)

    @pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999"])
    def test_integers_outside_32_bits_are_unparsed(self, text):
        assert parse_value(text) == Unparsed(text)

    def test_point_drops_out_of_range_coordinates(self):
        assert parse_value("point(1, 2147483648, 2)") == Point([1, 2])

    @pytest.mark.parametrize("text", ["", "hello", "Big Pipe", "with 123 digits", "it's"])
    def test_quoted_text(self, text):
        assert parse_value('"' + text + '"') == Text(text)

    def test_text_has_no_escape_processing(self):
        assert parse_value(r'"a\nb"') == Text(r"a\nb")

    def test_list_of_integers(self):
        assert parse_value("[1, 2, 3]") == List([Integer(1), Integer(2), Integer(3)])

    def test_list_of_mixed_items(self):
        assert parse_value('[1, "two", point(3,4)]') == List(
            [Integer(1), Text("two"), Point([3, 4])]
        )

    def test_empty_list(self):
        assert parse_value("[]") == List([])
        assert parse_value("[   ]") == List([])

    def test_list_keeps_unparsed_items(self):
        assert parse_value("[1, x]") == List([Integer(1), Unparsed("x")])

    def test_point(self):
        assert parse_value("point(4,5)") == Point([4, 5])

    def test_point_with_spaces_and_negatives(self):
        assert parse_value("point( -4 , 5 )") == Point([-4, 5])

    def test_point_drops_non_numeric_pieces(self):
        assert parse_value("point(4, x, 5)") == Point([4, 5])
        assert parse_value("point()") == Point([])

    def test_unparsed_fallback(self):
        assert parse_value("garbage!!") == Unparsed("garbage!!")

    def test_surrounding_whitespace_trimmed(self):
        assert parse_value("   12  ") == Integer(12)
        assert parse_value("  nope  ") == Unparsed("nope")

    def test_lone_quote_is_unparsed(self):
        assert parse_value('"') == Unparsed('"')

    def test_void_is_unparsed(self):
        assert parse_value("void") == Unparsed("void")


class TestCommaSplitting:
    """Flat splitting is the default; the depth-aware splitter is opt-in."""

    def test_nested_list_split_flat_by_default(self):
        assert parse_value("[[1,2],[3]]") == List(
            [Unparsed("[1"), Unparsed("2]"), List([Integer(3)])]
        )

    def test_nested_list_with_depth_aware_splitting(self):
        assert parse_value("[[1,2],[3]]", depth_aware=True) == List(
            [List([Integer(1), Integer(2)]), List([Integer(3)])]
        )

    def test_depth_aware_ignores_commas_in_quotes(self):
        assert parse_value('["a,b", 1]', depth_aware=True) == List([Text("a,b"), Integer(1)])
        assert parse_value('["a,b", 1]') == List([Unparsed('"a'), Unparsed('b"'), Integer(1)])

    def test_split_commas_eats_surrounding_whitespace(self):
        assert split_commas("1 ,  2,3") == ["1", "2", "3"]


class TestAccessors:
    def test_as_integer(self):
        assert Integer(3).as_integer() == 3
        with pytest.raises(DataConvertFailed):
            Text("3").as_integer()

    def test_as_text(self):
        assert Text("x").as_text() == "x"
        with pytest.raises(DataConvertFailed):
            Integer(1).as_text()

    def test_as_point(self):
        assert Point([1, 2]).as_point() == [1, 2]
        with pytest.raises(DataConvertFailed):
            List([Integer(1), Integer(2)]).as_point()

    def test_as_integer_list_drops_non_integers(self):
        value = List([Integer(1), Text("x"), Integer(2), Unparsed("y")])
        assert value.as_integer_list() == [1, 2]

    def test_as_text_list_drops_non_text(self):
        value = List([Integer(1), Text("x"), Text("y")])
        assert value.as_text_list() == ["x", "y"]

    def test_list_accessors_require_a_list(self):
        for value in (Integer(1), Text("x"), Point([1]), Unparsed("z")):
            with pytest.raises(DataConvertFailed):
                value.as_integer_list()
            with pytest.raises(DataConvertFailed):
                value.as_text_list()

    def test_as_tile_cell_list_drops_unknown_codes(self):
        value = List([Integer(1), Integer(8), Integer(-1), Integer(9)])
        assert value.as_tile_cell_list() == [TileCell.WALL, TileCell.ANY, TileCell.GLASS]

    def test_as_null_if_zero(self):
        assert Integer(0).as_null_if_zero() == Unparsed("NULL")
        assert Integer(5).as_null_if_zero() == Integer(5)
        assert Text("x").as_null_if_zero() == Text("x")
        assert List([Integer(0)]).as_null_if_zero() == List([Integer(0)])

    def test_values_are_hashable(self):
        assert len({Integer(1), Integer(1), List([Integer(1)])}) == 2


def test_kind_names_the_variant():
    assert [parse_value(t).kind for t in ("1", '"a"', "[1]", "point(1,2)", "?")] == [
        "Integer", "Text", "List", "Point", "Unparsed",
    ]
