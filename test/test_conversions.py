from pytest import mark, raises

from wlcolor import Color, ColorError, to_color


class TestToColor:
    def test_color_is_returned_intact(self):
        color = Color.rgba(1, 2, 3, 4)
        assert to_color(color) is color

    def test_integer(self):
        assert to_color(0xFF0000) == Color.from_int(0xFF0000)
        assert to_color(0xFF0000).values() == (0, 0, 255, 255)

    def test_tuples(self):
        assert to_color((255, 0, 0)) == Color.rgba(255, 0, 0, 255)
        assert to_color((255, 0, 0, 64)).values() == (0, 0, 255, 64)

    @mark.parametrize("text", ["ff0000", "#FF0000", "0xffff0000"])
    def test_hex_strings(self, text):
        assert to_color(text) == Color.parse(text)

    def test_named_colors(self):
        assert to_color("red") == Color.rgba(255, 0, 0, 255)
        assert to_color("white").values() == (255, 255, 255, 255)
        assert to_color("Blue").values() == (255, 0, 0, 255)

    def test_short_hex_form_falls_back_to_names(self):
        assert to_color("#fc0") == Color.rgba(255, 204, 0, 255)

    @mark.parametrize(
        "value",
        [
            "notacolor",
            "",
            "   ",
            "#ff00",
            (1, 2),
            (1, 2, 3, 4, 5),
            (256, 0, 0),
            ("a", 0, 0),
            (1.5, 0, 0),
            (0, 0, 0, 0.5),
            None,
            True,
            1.5,
        ],
    )
    def test_invalid(self, value):
        with raises(ColorError):
            to_color(value)

    def test_error_is_value_error(self):
        with raises(ValueError) as info:
            to_color("notacolor")
        assert "notacolor" in str(info.value)
        assert info.value.value == "notacolor"
