"""Tests for width/style/color classification."""

from longhand.values.wsc import Wsc, classify_wsc_word, is_valid_wsc, parse_wsc


class TestClassifyWord:
    def test_styles(self):
        for word in ("solid", "DASHED", "none", "inset"):
            assert classify_wsc_word(word) == "style"

    def test_widths(self):
        for word in ("1px", "thin", "Thick", "0", "0.5em"):
            assert classify_wsc_word(word) == "width"

    def test_everything_else_is_color(self):
        for word in ("red", "#fff", "rgb(0, 0, 0)", "currentcolor"):
            assert classify_wsc_word(word) == "color"


class TestParseWsc:
    def test_full_value(self):
        wsc = parse_wsc("1px solid red")
        assert wsc == Wsc(width="1px", style="solid", color="red")
        assert is_valid_wsc(wsc)

    def test_order_independent(self):
        assert parse_wsc("red 1px solid").values() == ["1px", "solid", "red"]

    def test_partial_value(self):
        wsc = parse_wsc("dashed")
        assert wsc.values() == [None, "dashed", None]
        assert wsc.filled() == ["medium", "dashed", "currentcolor"]
        assert is_valid_wsc(wsc)

    def test_collision_keeps_last_and_is_invalid(self):
        wsc = parse_wsc("red blue")
        assert wsc.color == "blue"
        assert wsc.collisions == ("color",)
        assert not is_valid_wsc(wsc)

    def test_three_colors(self):
        assert not is_valid_wsc(parse_wsc("red red red"))

    def test_empty_value_is_invalid(self):
        wsc = parse_wsc("")
        assert wsc.values() == [None, None, None]
        assert not is_valid_wsc(wsc)

    def test_global_keyword_among_words_is_invalid(self):
        wsc = parse_wsc("1px inherit")
        assert wsc.keywords == ("inherit",)
        assert not is_valid_wsc(wsc)

    def test_accepts_a_word_list(self):
        assert parse_wsc(["thick", "double"]).values() == ["thick", "double", None]
