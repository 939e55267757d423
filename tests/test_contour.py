"""Tests for the contour generator."""
import math

import numpy as np
import pytest


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def two_contours():
    """One enabled circle with a transform, one disabled, one blank."""
    from complexplane.model import ContourConfig, ContourEntry
    return ContourConfig(contours=[
        ContourEntry(id="circle", expression="exp(i*t)", transform_function="z^2", color="#00d4ff",
                     t_min=0.0, t_max=math.pi, t_steps=50, animation_speed=3),
        ContourEntry(id="disabled", expression="t", enabled=False),
        ContourEntry(id="blank", expression="   "),
        ContourEntry(id="line", expression="t + i*t", t_min=-1.0, t_max=1.0, t_steps=5),
    ])


# ---------------------------------------------------------------------------
# sample_contour
# ---------------------------------------------------------------------------

class TestSampleContour:

    def test_unit_circle_is_closed(self):
        from complexplane.generators import sample_contour
        points = sample_contour("exp(i*t)", None, 0, 2 * math.pi, 200)
        assert len(points) == 200
        assert abs(points[0] - points[-1]) < 1e-3
        assert np.all(np.abs(np.abs(points) - 1) < 1e-3)

    def test_endpoints_are_included(self):
        from complexplane.generators import sample_contour
        points = sample_contour("t", None, -2, 3, 6)
        np.testing.assert_allclose(points, [-2, -1, 0, 1, 2, 3])

    def test_transform_composes(self):
        from complexplane.generators import sample_contour
        points = sample_contour("t", "z^2", 0, 2, 3)
        np.testing.assert_allclose(points, [0, 1, 4])

    def test_blank_transform_is_ignored(self):
        from complexplane.generators import sample_contour
        points = sample_contour("t", "  ", 0, 2, 3)
        np.testing.assert_allclose(points, [0, 1, 2])

    def test_non_finite_samples_are_dropped(self):
        from complexplane.generators import sample_contour
        points = sample_contour("1/t", None, -1, 1, 3)
        np.testing.assert_allclose(points, [-1, 1])

    def test_non_finite_after_transform_is_dropped(self):
        from complexplane.generators import sample_contour
        points = sample_contour("t", "log(z)", 0, 2, 3)
        assert len(points) == 2
        assert points[0] == pytest.approx(0)
        assert points[1] == pytest.approx(math.log(2))

    def test_single_step_samples_start(self):
        from complexplane.generators import sample_contour
        points = sample_contour("t", None, 1.5, 4, 1)
        np.testing.assert_allclose(points, [1.5])

    def test_zero_steps_is_empty(self):
        from complexplane.generators import sample_contour
        assert sample_contour("t", None, 0, 1, 0).size == 0

    @pytest.mark.parametrize("expr", ["", "   ", "exp(i*", "t +"])
    def test_unusable_expression_gives_empty(self, expr):
        from complexplane.generators import sample_contour
        points = sample_contour(expr, None, 0, 1, 10)
        assert points.size == 0
        assert points.dtype == np.complex128

    def test_malformed_transform_gives_empty(self):
        from complexplane.generators import sample_contour
        assert sample_contour("t", "z ^", 0, 1, 10).size == 0

    def test_evaluation_error_drops_all_samples(self):
        from complexplane.generators import sample_contour
        assert sample_contour("foo(t)", None, 0, 1, 10).size == 0
        assert sample_contour("z", None, 0, 1, 10).size == 0  # curves are in t

    def test_idempotent(self):
        from complexplane.generators import sample_contour
        a = sample_contour("exp(i*t) + t/3", "sin(z)", -1, 4, 321)
        b = sample_contour("exp(i*t) + t/3", "sin(z)", -1, 4, 321)
        np.testing.assert_array_equal(a, b)


# ---------------------------------------------------------------------------
# generate_contour_points
# ---------------------------------------------------------------------------

class TestGenerateContourPoints:

    def test_filters_disabled_and_blank(self, two_contours):
        from complexplane.generators import generate_contour_points
        results = generate_contour_points(two_contours)
        assert [r.id for r in results] == ["circle", "line"]

    def test_echoes_display_metadata(self, two_contours):
        from complexplane.generators import generate_contour_points
        circle = generate_contour_points(two_contours)[0]
        assert circle.color == "#00d4ff"
        assert circle.t_min == 0.0
        assert circle.t_max == math.pi
        assert circle.animation_speed == 3

    def test_expression_label(self, two_contours):
        from complexplane.generators import generate_contour_points
        circle, line = generate_contour_points(two_contours)
        assert circle.expression == "z^2(exp(i*t))"
        assert line.expression == "t + i*t"

    def test_points_follow_transform(self, two_contours):
        from complexplane.generators import generate_contour_points
        circle = generate_contour_points(two_contours)[0]
        assert len(circle.points) == 50
        # z^2 doubles the angle: half circle becomes a full circle
        assert circle.points[-1] == pytest.approx(1, abs=1e-9)

    def test_empty_config(self):
        from complexplane.generators import generate_contour_points
        from complexplane.model import ContourConfig
        assert generate_contour_points(ContourConfig(contours=[])) == []
