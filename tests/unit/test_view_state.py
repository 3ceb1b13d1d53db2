"""Unit tests for ViewportTransform and CoordinateMapper."""

import pytest
from pygame import Rect

from choreo.controllers.view_state import CoordinateMapper, ViewportTransform
from choreo.core.errors import TransformUnavailable


TRANSFORMS = [
    pytest.param(ViewportTransform(), id="identity"),
    pytest.param(ViewportTransform(0.5, 0, 0, 0.5, 20, 110), id="letterbox"),
    pytest.param(ViewportTransform(1.75, 0, 0, 1.75, -12.5, 3), id="zoomed"),
    pytest.param(ViewportTransform(2, 0.5, -0.3, 1.5, 10, -40), id="sheared"),
    pytest.param(ViewportTransform(1, 0, 0, -1, 0, 600), id="flipped-y"),
]

STAGE_POINTS = [(0, 0), (1000, 600), (500, 300), (22, 578), (250.25, 220.75)]


class TestViewportTransformFit:
    """Tests for letterboxing the stage into a canvas."""

    def test_wide_canvas_scales_to_height(self):
        """Extra width becomes bars on the left and right."""
        transform = ViewportTransform.fit(Rect(0, 0, 1000, 300), 1000, 600)
        assert transform.a == pytest.approx(0.5)
        assert transform.d == pytest.approx(0.5)
        assert transform.e == pytest.approx(250)
        assert transform.f == pytest.approx(0)

    def test_tall_canvas_scales_to_width(self):
        """Extra height becomes bars above and below."""
        transform = ViewportTransform.fit(Rect(20, 60, 500, 400), 1000, 600)
        assert transform.scale == pytest.approx(0.5)
        assert transform.e == pytest.approx(20)
        assert transform.f == pytest.approx(110)

    def test_stage_corners_land_inside_canvas(self):
        """Stage corners map onto the letterboxed area of the canvas."""
        canvas = Rect(20, 60, 500, 400)
        transform = ViewportTransform.fit(canvas, 1000, 600)
        assert CoordinateMapper.to_device((0, 0), transform) == pytest.approx((20, 110))
        assert CoordinateMapper.to_device((1000, 600), transform) == pytest.approx((520, 410))

    def test_zero_size_canvas_is_not_invertible(self):
        """A collapsed canvas produces a degenerate transform."""
        transform = ViewportTransform.fit(Rect(0, 0, 0, 0), 1000, 600)
        assert transform.is_invertible() is False

    def test_zero_height_canvas_is_not_invertible(self):
        transform = ViewportTransform.fit(Rect(0, 0, 800, 0), 1000, 600)
        assert transform.is_invertible() is False


class TestToStage:
    """Tests for mapping device points back to stage coordinates."""

    def test_letterbox_mapping(self, letterbox_transform):
        """Device pixels map through the inverse scale and offset."""
        assert CoordinateMapper.to_stage((150, 222.5), letterbox_transform) == pytest.approx((260, 225))

    def test_points_outside_stage_still_map(self, letterbox_transform):
        """Points in the letterbox bars map to out-of-bounds stage points."""
        x, y = CoordinateMapper.to_stage((0, 0), letterbox_transform)
        assert x < 0
        assert y < 0

    @pytest.mark.parametrize("transform", TRANSFORMS)
    @pytest.mark.parametrize("point", STAGE_POINTS)
    def test_round_trip(self, transform, point):
        """A stage point rendered at P maps back to itself when queried at P."""
        device = CoordinateMapper.to_device(point, transform)
        assert CoordinateMapper.to_stage(device, transform) == pytest.approx(point)

    @pytest.mark.parametrize("transform", TRANSFORMS)
    def test_inverse_round_trip(self, transform):
        """to_device undoes to_stage as well."""
        device = (333.0, 71.5)
        stage = CoordinateMapper.to_stage(device, transform)
        assert CoordinateMapper.to_device(stage, transform) == pytest.approx(device)

    def test_does_not_modify_transform(self, letterbox_transform):
        before = ViewportTransform(
            letterbox_transform.a, letterbox_transform.b, letterbox_transform.c,
            letterbox_transform.d, letterbox_transform.e, letterbox_transform.f,
        )
        CoordinateMapper.to_stage((10, 10), letterbox_transform)
        assert letterbox_transform == before


class TestTransformUnavailable:
    """Tests for degenerate transforms."""

    def test_missing_transform(self):
        with pytest.raises(TransformUnavailable):
            CoordinateMapper.to_stage((10, 10), None)

    def test_zero_scale(self):
        with pytest.raises(TransformUnavailable):
            CoordinateMapper.to_stage((10, 10), ViewportTransform(0, 0, 0, 0, 5, 5))

    def test_singular_matrix(self):
        """Parallel axes collapse the plane onto a line."""
        with pytest.raises(TransformUnavailable):
            CoordinateMapper.to_stage((10, 10), ViewportTransform(1, 2, 2, 4, 0, 0))

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_non_finite_coefficients(self, bad):
        """Non-finite geometry is rejected instead of producing NaN positions."""
        with pytest.raises(TransformUnavailable):
            CoordinateMapper.to_stage((10, 10), ViewportTransform(1, 0, 0, 1, bad, 0))
