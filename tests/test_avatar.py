"""Tests for the ASCII avatar renderer."""

import pytest

from ghfetch.avatar import avatar_url_for, render_ascii
from ghfetch.errors import DecodeError


class TestAvatarUrl:
    def test_user_png(self):
        assert avatar_url_for("octocat") == "https://github.com/octocat.png"


class TestRenderAscii:
    def test_dimensions(self, png_bytes):
        art = render_ascii(png_bytes(size=(64, 64)), 10, 4)
        rows = art.plain.split("\n")
        assert len(rows) == 4
        assert all(len(row) == 10 for row in rows)

    def test_white_is_densest_char(self, png_bytes):
        art = render_ascii(png_bytes((255, 255, 255)), 3, 2, colored=False)
        assert art.plain == "@@@\n@@@"

    def test_black_is_blank(self, png_bytes):
        art = render_ascii(png_bytes((0, 0, 0)), 3, 1, colored=False)
        assert art.plain == "   "

    def test_custom_charset(self, png_bytes):
        art = render_ascii(png_bytes((255, 255, 255)), 2, 1, colored=False, charset="ab")
        assert art.plain == "bb"

    def test_colored_cells_carry_pixel_color(self, png_bytes):
        art = render_ascii(png_bytes((255, 0, 0)), 2, 2)
        assert art.spans
        assert all(span.style.color.triplet == (255, 0, 0) for span in art.spans)

    def test_monochrome_has_no_styles(self, png_bytes):
        art = render_ascii(png_bytes((255, 0, 0)), 2, 2, colored=False)
        assert art.spans == []

    def test_undecodable_image(self):
        with pytest.raises(DecodeError, match="avatar"):
            render_ascii(b"definitely not an image", 4, 4)
