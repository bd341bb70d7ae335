"""Tests for the color model."""

import pytest

from lambert_rtx.color import BLACK, WHITE, Color, clamp, to_display


class TestClamp:

    @pytest.mark.parametrize("c", [
        Color(1.5, -0.2, 0.5),
        Color(100.0, 2.0, -50.0),
        Color(0.0, 1.0, 0.25),
    ])
    def test_channels_in_unit_range(self, c):
        clamped = c.clamp()
        for channel in (clamped.r, clamped.g, clamped.b):
            assert 0.0 <= channel <= 1.0

    @pytest.mark.parametrize("c", [Color(1.5, -0.2, 0.5), Color(0.3, 0.6, 0.9)])
    def test_idempotent(self, c):
        assert c.clamp().clamp() == c.clamp()

    def test_truncates_out_of_range(self):
        assert Color(1.5, -0.2, 0.5).clamp() == Color(1.0, 0.0, 0.5)

    def test_scalar_clamp(self):
        assert clamp(2.0) == 1.0
        assert clamp(-2.0) == 0.0
        assert clamp(0.3) == 0.3


class TestArithmetic:

    def test_tint(self):
        assert Color(0.5, 1.0, 0.2) * Color(0.5, 0.5, 1.0) == Color(0.25, 0.5, 0.2)

    def test_scale(self):
        assert Color(0.5, 1.0, 0.25) * 2.0 == Color(1.0, 2.0, 0.5)
        assert 2.0 * Color(0.5, 1.0, 0.25) == Color(1.0, 2.0, 0.5)

    def test_add(self):
        assert Color(0.5, 0.25, 0.0) + Color(0.25, 0.25, 1.0) == Color(0.75, 0.5, 1.0)


class TestDisplay:

    def test_extremes(self):
        assert to_display(WHITE) == (255, 255, 255, 255)
        assert to_display(BLACK) == (0, 0, 0, 255)

    def test_gamma_applied(self):
        # 0.5 ** (1 / 2.2) * 255 = 186.08
        assert to_display(Color(0.5, 0.5, 0.5)) == (186, 186, 186, 255)

    def test_out_of_range_is_clamped(self):
        assert to_display(Color(2.0, -1.0, 0.5)) == (255, 0, 186, 255)

    def test_alpha(self):
        assert to_display(WHITE, alpha=0)[3] == 0

    def test_from_display(self):
        assert Color.from_display((255, 255, 255)) == WHITE
        assert Color.from_display((0, 0, 0)) == BLACK
        c = Color.from_display((186, 186, 186))
        assert c.r == pytest.approx(0.5, abs=0.01)
