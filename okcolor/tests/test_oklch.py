"""Tests for Lab <-> Lch and the sRGB <-> Oklab/Oklch composites."""

import numpy as np
import pytest

from okcolor import (
    RGB,
    Lab,
    Lch,
    Oklab,
    Oklch,
    gamma_srgb_to_linear_srgb,
    lab_to_lch,
    lch_to_lab,
    linear_srgb_to_xyz,
    oklab_to_oklch,
    oklab_to_rgb,
    oklch_to_oklab,
    oklch_to_rgb,
    rgb_to_oklab,
    rgb_to_oklch,
    xyz_to_oklab,
)


class TestLabLch:
    """Test Cartesian <-> cylindrical conversion."""

    def test_zero_chroma(self):
        """Zero chroma should give a=b=0 whatever the hue."""
        lab = lch_to_lab(0.5, 0.0, 123.0)
        assert isinstance(lab, Lab)
        assert lab.l == 0.5
        np.testing.assert_allclose(lab[1:], (0, 0), atol=1e-15)

    def test_axes(self):
        np.testing.assert_allclose(lch_to_lab(0.5, 0.2, 0), (0.5, 0.2, 0), atol=1e-12)
        np.testing.assert_allclose(lch_to_lab(0.5, 0.2, 90), (0.5, 0, 0.2), atol=1e-12)
        np.testing.assert_allclose(lch_to_lab(0.5, 0.2, 180), (0.5, -0.2, 0), atol=1e-12)
        np.testing.assert_allclose(lch_to_lab(0.5, 0.2, 270), (0.5, 0, -0.2), atol=1e-12)

    def test_lightness_passes_through(self):
        assert lab_to_lch(0.42, 0.1, 0.1).l == 0.42
        assert lch_to_lab(0.42, 0.1, 10).l == 0.42

    def test_hue_quadrants(self):
        """Hue always lands in [0, 360)."""
        _, c1, h1 = lab_to_lch(0.5, 0.1, 0.1)
        _, _, h2 = lab_to_lch(0.5, -0.1, 0.1)
        _, _, h3 = lab_to_lch(0.5, -0.1, -0.1)
        _, _, h4 = lab_to_lch(0.5, 0.1, -0.1)

        assert c1 == pytest.approx(np.hypot(0.1, 0.1))
        assert h1 == pytest.approx(45)
        assert h2 == pytest.approx(135)
        assert h3 == pytest.approx(225)
        assert h4 == pytest.approx(315)

    def test_achromatic_hue_is_zero(self):
        lch = lab_to_lch(0.3, 0.0, 0.0)
        assert isinstance(lch, Lch)
        assert lch == (0.3, 0.0, 0.0)

    @pytest.mark.parametrize("h", [0, 30, 89.5, 180, 200, 270, 359])
    def test_lch_roundtrip(self, h):
        l, c, h2 = lab_to_lch(*lch_to_lab(0.6, 0.12, h))
        assert l == 0.6
        assert c == pytest.approx(0.12)
        assert h2 == pytest.approx(h % 360, abs=1e-9)

    def test_hue_outside_turn_wraps(self):
        _, _, h = lab_to_lch(*lch_to_lab(0.6, 0.12, -90))
        assert h == pytest.approx(270)
        _, _, h = lab_to_lch(*lch_to_lab(0.6, 0.12, 400))
        assert h == pytest.approx(40)

    def test_lab_roundtrip_array(self):
        rng = np.random.default_rng(3)
        l = rng.random(100)
        a = rng.uniform(-0.4, 0.4, 100)
        b = rng.uniform(-0.4, 0.4, 100)

        l2, a2, b2 = lch_to_lab(*lab_to_lch(l, a, b))

        np.testing.assert_allclose(l2, l)
        np.testing.assert_allclose(a2, a, atol=1e-12)
        np.testing.assert_allclose(b2, b, atol=1e-12)

    def test_hue_range_array(self):
        rng = np.random.default_rng(4)
        _, _, h = lab_to_lch(0.5, rng.normal(size=1000), rng.normal(size=1000))
        assert (h >= 0).all()
        assert (h < 360).all()

    def test_oklab_tagging(self):
        assert isinstance(oklab_to_oklch(0.5, 0.1, 0.0), Oklch)
        assert isinstance(oklch_to_oklab(0.5, 0.1, 0.0), Oklab)


class TestComposites:
    """Test sRGB <-> Oklab/Oklch end to end."""

    def test_black(self):
        lab = rgb_to_oklab(0, 0, 0)
        assert isinstance(lab, Oklab)
        np.testing.assert_allclose(lab, (0, 0, 0), atol=1e-12)

    def test_white(self):
        np.testing.assert_allclose(rgb_to_oklab(1, 1, 1), (1, 0, 0), atol=2e-3)

    def test_grays_are_neutral(self):
        g = np.linspace(0, 1, 11)
        L, a, b = rgb_to_oklab(g, g, g)
        assert (np.diff(L) > 0).all()
        np.testing.assert_allclose(a, 0, atol=2e-3)
        np.testing.assert_allclose(b, 0, atol=2e-3)

    def test_reference_color(self):
        """sRGB (0.1, 0.5, 0.8) is a mid-lightness blue."""
        L, C, H = rgb_to_oklch(0.1, 0.5, 0.8)
        assert L == pytest.approx(0.582, abs=2e-3)
        assert C == pytest.approx(0.146, abs=2e-3)
        assert H == pytest.approx(248, abs=1)

    def test_composite_order(self):
        """rgb_to_oklab is exactly decode -> XYZ -> Oklab."""
        expected = xyz_to_oklab(*linear_srgb_to_xyz(*gamma_srgb_to_linear_srgb(0.3, 0.2, 0.7)))
        assert rgb_to_oklab(0.3, 0.2, 0.7) == expected

    def test_oklch_matches_oklab_path(self):
        L, a, b = rgb_to_oklab(0.9, 0.4, 0.1)
        L2, C, H = rgb_to_oklch(0.9, 0.4, 0.1)
        assert L2 == L
        assert C == pytest.approx(np.hypot(a, b))

    @pytest.mark.parametrize("rgb", [
        (1, 0, 0), (0, 1, 0), (0, 0, 1),
        (1, 1, 0), (1, 0, 1), (0, 1, 1),
        (0.25, 0.25, 0.25), (0.1, 0.5, 0.8),
    ])
    def test_roundtrip_oklab(self, rgb):
        back = oklab_to_rgb(*rgb_to_oklab(*rgb))
        assert isinstance(back, RGB)
        np.testing.assert_allclose(back, rgb, atol=1e-2)
        np.testing.assert_allclose(back, rgb, atol=1e-6)

    def test_roundtrip_oklch_random(self):
        rng = np.random.default_rng(42)
        r, g, b = rng.random((3, 200))
        back = oklch_to_rgb(*rgb_to_oklch(r, g, b))
        np.testing.assert_allclose(np.stack(back), np.stack([r, g, b]), atol=1e-6)

    def test_hue_360_equals_0(self):
        np.testing.assert_allclose(oklch_to_rgb(0.7, 0.1, 360), oklch_to_rgb(0.7, 0.1, 0), atol=1e-10)

    def test_hue_negative(self):
        np.testing.assert_allclose(oklch_to_rgb(0.7, 0.1, -90), oklch_to_rgb(0.7, 0.1, 270), atol=1e-10)

    def test_out_of_gamut_not_clipped(self):
        """High chroma leaves [0, 1]; no gamut mapping is applied."""
        rgb = np.array(oklch_to_rgb(0.5, 0.4, 30))
        assert (rgb < 0).any() or (rgb > 1).any()


class TestArrayShapes:
    """Test that various array shapes work correctly."""

    def test_2d_arrays(self):
        shape = (16, 24)
        L = np.full(shape, 0.7)
        C = np.full(shape, 0.1)
        H = np.linspace(0, 360, shape[1])[None, :] * np.ones((shape[0], 1))

        r, g, b = oklch_to_rgb(L, C, H)

        assert r.shape == g.shape == b.shape == shape

    def test_float32_preserved(self):
        rgb = np.array([[0.2, 0.4, 0.6]], dtype=np.float32).T
        L, a, b = rgb_to_oklab(*rgb)
        assert L.dtype == np.float32

    def test_scalar_in_scalar_out(self):
        for value in rgb_to_oklch(0.2, 0.4, 0.6):
            assert np.ndim(value) == 0


class TestTorchBackend:
    """Test torch tensor support (if torch available)."""

    @pytest.fixture
    def torch(self):
        pytest.importorskip('torch')
        import torch
        return torch

    def test_torch_basic(self, torch):
        L, C, H = rgb_to_oklch(torch.tensor([0.1]), torch.tensor([0.5]), torch.tensor([0.8]))
        assert isinstance(L, torch.Tensor)
        assert isinstance(H, torch.Tensor)

    def test_torch_numpy_parity(self, torch):
        rgb_np = np.array([[0.1, 0.5, 0.9], [0.3, 0.3, 0.2], [0.8, 0.1, 0.6]])

        lch_np = np.stack(rgb_to_oklch(*rgb_np))
        lch_t = torch.stack(list(rgb_to_oklch(*torch.tensor(rgb_np)))).numpy()
        np.testing.assert_allclose(lch_t, lch_np, atol=1e-6)

        back = torch.stack(list(oklch_to_rgb(*torch.tensor(lch_np)))).numpy()
        np.testing.assert_allclose(back, rgb_np, atol=1e-6)
