"""Tests for the pydantic primitives in models.primitives."""

import pytest
from pydantic import ValidationError

from models import Rectangle, Resolution


class TestResolution:

    def test_parse(self):
        res = Resolution.parse("1024x768")
        assert (res.width, res.height) == (1024, 768)
        assert res.as_tuple == (1024, 768)
        assert str(res) == "1024x768"

    def test_parse_is_case_insensitive(self):
        assert Resolution.parse("800X600").width == 800

    @pytest.mark.parametrize("text", ["1024", "1024x", "axb", "1x2x3", "0x768", "-5x10"])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            Resolution.parse(text)

    def test_dimensions_must_be_positive(self):
        with pytest.raises(ValidationError):
            Resolution(width=0, height=10)

    def test_is_frozen(self):
        res = Resolution(width=10, height=10)
        with pytest.raises(ValidationError):
            res.width = 20

    def test_aspect_ratio(self):
        assert Resolution(width=1600, height=900).aspect_ratio == pytest.approx(16 / 9)


class TestRectangle:

    def test_edges(self):
        rect = Rectangle(x=10.0, y=20.0, width=30.0, height=40.0)
        assert rect.left == 10.0
        assert rect.right == 40.0
        assert rect.top == 20.0
        assert rect.bottom == 60.0

    def test_positive_dimensions(self):
        with pytest.raises(ValidationError):
            Rectangle(x=0.0, y=0.0, width=0.0, height=1.0)

    def test_strictly_contains_span(self):
        rect = Rectangle(x=100.0, y=0.0, width=120.0, height=60.0)
        assert rect.strictly_contains_span(101.0, 219.0)
        assert not rect.strictly_contains_span(100.0, 150.0)   # left edge aligned
        assert not rect.strictly_contains_span(150.0, 220.0)   # right edge aligned
        assert not rect.strictly_contains_span(90.0, 130.0)    # partial overlap
