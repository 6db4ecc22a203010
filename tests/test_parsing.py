import pytest

from fdfview.parsing import (
    DEFAULT_COLOR,
    HEIGHT_LIMIT,
    HeightMap,
    Point,
    count_words,
    load_map,
    map_height,
    map_width,
    parse_hex,
    parse_int,
    parse_line,
    parse_map,
    parse_value,
    read_lines,
    split_words,
)


def test_parse_int_skips_whitespace_and_plus():
    assert parse_int("  \t42") == 42
    assert parse_int("+17") == 17


def test_parse_int_stops_at_non_digit():
    assert parse_int("123abc") == 123
    assert parse_int("7\n") == 7


def test_parse_int_ignores_minus_sign():
    assert parse_int("-5") == parse_int("")
    assert parse_int("-5") == 0


def test_parse_int_caps_at_limit():
    assert parse_int("20000") == HEIGHT_LIMIT
    assert parse_int("200001") == HEIGHT_LIMIT
    assert parse_int("20001") == parse_int("2000")


@pytest.mark.parametrize("value", [0, 1, 0xABCDEF, 0xFFFFFF, 0xFFFFFFFF])
def test_parse_hex_round_trip(value):
    assert parse_hex(format(value, "x")) == value
    assert parse_hex(format(value, "X")) == value


def test_parse_hex_stops_at_invalid_character():
    assert parse_hex("ff\n") == parse_hex("ff")
    assert parse_hex("1G2") == parse_hex("1")


def test_parse_hex_wraps_to_32_bits():
    assert parse_hex("100000000") == parse_hex("0")
    assert parse_hex("1FFFFFFFF") == parse_hex("FFFFFFFF")


def test_split_words_drops_empty_pieces():
    text = "  a  bb c "
    assert split_words(text, " ") == ["a", "bb", "c"]
    assert count_words(text, " ") == len(split_words(text, " "))


def test_count_words_of_none_is_zero():
    assert count_words(None, " ") == 0
    assert split_words(None, " ") == []


def test_parse_value_without_color_uses_default():
    assert parse_value("5") == Point(5, DEFAULT_COLOR)
    assert DEFAULT_COLOR == parse_hex("FFFFFF")


def test_parse_value_with_hex_color():
    assert parse_value("3,0xFF00FF") == Point(3, parse_hex("FF00FF"))


def test_parse_value_with_decimal_color():
    assert parse_value("3,255") == Point(3, 255)


def test_parse_value_uppercase_prefix_reads_as_decimal():
    assert parse_value("3,0XFF").color == parse_int("0XFF")


def test_parse_line_reads_each_token():
    points = parse_line("1 2 3\n")
    assert [p.height for p in points] == [1, 2, 3]
    assert all(p.color == DEFAULT_COLOR for p in points)


def test_parse_line_trailing_space_keeps_newline_token():
    points = parse_line("1 2 \n")
    assert len(points) == count_words("1 2 \n", " ")
    assert points[-1] == parse_value("\n")


def test_map_dimensions():
    lines = ["1 2 3\n", "4 5\n", "6 7 8 9"]
    assert map_height(lines) == len(lines)
    assert map_width(lines) == count_words("4 5\n", " ")


def test_parse_map_trims_rows_to_width():
    lines = ["1 2 3\n", "4 5\n"]
    heightmap = parse_map(lines)
    assert heightmap.width == map_width(lines)
    assert all(len(row) == heightmap.width for row in heightmap.rows)
    assert heightmap.at(1, 1) == Point(5, DEFAULT_COLOR)


def test_parse_map_of_nothing_is_empty():
    heightmap = parse_map([])
    assert (heightmap.width, heightmap.height, heightmap.rows) == (0, 0, [])


def test_at_out_of_range_raises():
    heightmap = parse_map(["1 2\n", "3 4\n"])
    with pytest.raises(IndexError):
        heightmap.at(2, 0)
    with pytest.raises(IndexError):
        heightmap.at(-1, 0)


def test_iteration_visits_every_point():
    heightmap = parse_map(["1 2\n", "3 4\n"])
    visited = [(x, y, p.height) for x, y, p in heightmap]
    assert visited == [(0, 0, 1), (1, 0, 2), (0, 1, 3), (1, 1, 4)]


def test_read_lines_keeps_newlines(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_bytes(b"a\r b\nc")
    assert read_lines(path) == ["a\r b\n", "c"]


def test_load_map_from_file(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("0 1,0xFF0000\n2 3\n", encoding="utf-8")
    heightmap = load_map(path)
    assert isinstance(heightmap, HeightMap) and heightmap.height == 2
    assert heightmap.width == 2
    assert heightmap.at(1, 0) == Point(1, parse_hex("FF0000"))
    assert heightmap.at(0, 1) == Point(2, DEFAULT_COLOR)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_map(tmp_path / "absent.fdf")