import math

import pytest

from StarChart.projection import (
    angular_separation_deg,
    ecliptic_to_equatorial,
    project,
    to_pixels,
)
from StarChart.sky_types import EquatorialPoint, PlanePoint, Projection

from chart_test_utils import make_context

ORIGIN = EquatorialPoint(0.0, 0.0)


@pytest.mark.unit
class TestProject:
    @pytest.mark.parametrize("projection", list(Projection))
    @pytest.mark.parametrize(
        "center", [ORIGIN, EquatorialPoint(123.4, 45.6), EquatorialPoint(359.9, -89.0)]
    )
    def test_center_projects_to_origin(self, projection, center):
        p = project(center, center, projection, 0.0)
        assert p.x == pytest.approx(0.0, abs=1e-12)
        assert p.y == pytest.approx(0.0, abs=1e-12)

    def test_east_is_negative_x(self):
        p = project(EquatorialPoint(1.0, 0.0), ORIGIN, Projection.GNOMONIC, 0.0)
        assert p.x == pytest.approx(-math.tan(math.radians(1.0)), abs=1e-12)
        assert p.y == pytest.approx(0.0, abs=1e-12)

    def test_north_is_positive_y(self):
        p = project(EquatorialPoint(0.0, 10.0), ORIGIN, Projection.GNOMONIC, 0.0)
        assert p.x == pytest.approx(0.0, abs=1e-12)
        assert p.y == pytest.approx(math.tan(math.radians(10.0)), abs=1e-12)

    def test_position_angle_rotates_counterclockwise(self):
        p = project(EquatorialPoint(1.0, 0.0), ORIGIN, Projection.GNOMONIC, 90.0)
        assert p.x == pytest.approx(0.0, abs=1e-12)
        assert p.y == pytest.approx(math.tan(math.radians(1.0)), abs=1e-12)

    @pytest.mark.parametrize("projection", list(Projection))
    @pytest.mark.parametrize(
        "target", [EquatorialPoint(3.0, 4.0), EquatorialPoint(350.0, -20.0)]
    )
    def test_rotation_by_90_maps_x_y_to_y_minus_x(self, projection, target):
        center = EquatorialPoint(0.0, 10.0)
        p0 = project(target, center, projection, 0.0)
        p90 = project(target, center, projection, 90.0)
        assert p90.x == pytest.approx(p0.y, abs=1e-12)
        assert p90.y == pytest.approx(-p0.x, abs=1e-12)

    @pytest.mark.parametrize(
        "projection",
        [Projection.GNOMONIC, Projection.SPHERICAL, Projection.ALTAZ],
    )
    def test_far_hemisphere_is_culled(self, projection):
        assert project(EquatorialPoint(120.0, 0.0), ORIGIN, projection, 0.0) is None
        assert project(EquatorialPoint(180.0, 0.0), ORIGIN, projection, 0.0) is None

    def test_stereographic_keeps_far_hemisphere(self):
        p = project(EquatorialPoint(120.0, 0.0), ORIGIN, Projection.STEREOGRAPHIC, 0.0)
        assert p.x == pytest.approx(-math.tan(math.radians(60.0)), abs=1e-12)
        assert p.y == pytest.approx(0.0, abs=1e-12)

    def test_stereographic_always_returns_a_point(self):
        for ra in range(0, 360, 15):
            for dec in range(-90, 91, 15):
                p = project(
                    EquatorialPoint(ra, dec),
                    EquatorialPoint(10.0, 20.0),
                    Projection.STEREOGRAPHIC,
                    33.0,
                )
                assert p is not None
                assert math.isfinite(p.x) and math.isfinite(p.y)

    def test_gnomonic_horizon_is_culled(self):
        horizon = EquatorialPoint(90.0, 0.0)
        assert project(horizon, ORIGIN, Projection.GNOMONIC, 0.0) is None

    def test_horizon_is_finite_for_other_projections(self):
        p = project(EquatorialPoint(90.0, 0.0), ORIGIN, Projection.SPHERICAL, 0.0)
        assert p.x == pytest.approx(-1.0)
        p = project(EquatorialPoint(90.0, 0.0), ORIGIN, Projection.ALTAZ, 0.0)
        assert p.x == pytest.approx(-1.0)

    @pytest.mark.parametrize(
        "projection, expected",
        [
            (Projection.GNOMONIC, math.tan(math.radians(30.0))),
            (Projection.STEREOGRAPHIC, math.tan(math.radians(15.0))),
            (Projection.SPHERICAL, math.sin(math.radians(30.0))),
            (Projection.ALTAZ, 30.0 / 90.0),
        ],
    )
    def test_radial_mapping(self, projection, expected):
        p = project(EquatorialPoint(0.0, 30.0), ORIGIN, projection, 0.0)
        assert p.y == pytest.approx(expected, abs=1e-12)

    def test_wraparound_equivalent_offsets(self):
        p1 = project(
            EquatorialPoint(1.0, 0.0),
            EquatorialPoint(359.0, 0.0),
            Projection.GNOMONIC,
            0.0,
        )
        p2 = project(
            EquatorialPoint(3.0, 0.0),
            EquatorialPoint(1.0, 0.0),
            Projection.GNOMONIC,
            0.0,
        )
        assert abs(p1.x - p2.x) <= 1e-9
        assert abs(p1.y - p2.y) <= 1e-9

    @pytest.mark.parametrize("projection", list(Projection))
    def test_wraparound_off_equator(self, projection):
        p1 = project(
            EquatorialPoint(2.5, 41.0), EquatorialPoint(357.5, 40.0), projection, 15.0
        )
        p2 = project(
            EquatorialPoint(185.0, 41.0), EquatorialPoint(180.0, 40.0), projection, 15.0
        )
        assert abs(p1.x - p2.x) <= 1e-9
        assert abs(p1.y - p2.y) <= 1e-9


@pytest.mark.unit
def test_star_one_degree_east_is_left_of_center():
    context = make_context(fov_deg=60.0, projection=Projection.GNOMONIC)
    p = context.project_to_pixels(EquatorialPoint(1.0, 0.0))
    center = context.layout.center_px
    assert p.x < center.x
    assert p.y == pytest.approx(center.y, abs=1e-9)


@pytest.mark.unit
def test_wraparound_pixel_offsets():
    a = make_context(center=EquatorialPoint(359.0, 0.0))
    b = make_context(center=EquatorialPoint(1.0, 0.0))
    pa = a.project_to_pixels(EquatorialPoint(1.0, 0.0))
    pb = b.project_to_pixels(EquatorialPoint(3.0, 0.0))
    assert abs(pa.x - pb.x) <= 1e-9
    assert abs(pa.y - pb.y) <= 1e-9


@pytest.mark.unit
def test_to_pixels_flips_y():
    px = to_pixels(PlanePoint(0.5, 0.25), PlanePoint(400.0, 300.0), 100.0)
    assert px == PlanePoint(450.0, 275.0)


@pytest.mark.unit
def test_angular_separation():
    pole = EquatorialPoint(0.0, 90.0)
    assert angular_separation_deg(ORIGIN, pole) == pytest.approx(90.0)
    assert angular_separation_deg(
        EquatorialPoint(359.0, 0.0), EquatorialPoint(1.0, 0.0)
    ) == pytest.approx(2.0)
    assert angular_separation_deg(ORIGIN, ORIGIN) == pytest.approx(0.0)


@pytest.mark.unit
def test_ecliptic_to_equatorial():
    # equinoxes on the equator, solstices at +/- obliquity
    assert ecliptic_to_equatorial(0.0).dec_deg == pytest.approx(0.0, abs=1e-12)
    summer = ecliptic_to_equatorial(90.0)
    assert summer.ra_deg == pytest.approx(90.0)
    assert summer.dec_deg == pytest.approx(23.43928)
    winter = ecliptic_to_equatorial(270.0)
    assert winter.ra_deg == pytest.approx(270.0)
    assert winter.dec_deg == pytest.approx(-23.43928)
    assert 0.0 <= ecliptic_to_equatorial(359.0).ra_deg < 360.0
