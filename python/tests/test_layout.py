import math

import pytest

from StarChart.config import ChartConfig, Margin
from StarChart.layout import ChartLayout
from StarChart.sky_types import PlanePoint


@pytest.mark.unit
def test_default_layout():
    layout = ChartLayout.from_config(ChartConfig())
    assert (layout.plot_x, layout.plot_y) == (40.0, 40.0)
    assert (layout.plot_w, layout.plot_h) == (720.0, 720.0)
    assert layout.center_px == PlanePoint(400.0, 400.0)
    assert layout.scale == pytest.approx(360.0 / math.tan(math.radians(30.0)))
    assert layout.split_threshold == pytest.approx(576.0)


@pytest.mark.unit
def test_uneven_margins_and_shorter_side():
    cfg = ChartConfig(
        width=600,
        height=800,
        margin=Margin(top=10, bottom=30, left=20, right=40),
        fov_deg=40.0,
    )
    layout = ChartLayout.from_config(cfg)
    assert layout.plot_w == 540.0
    assert layout.plot_h == 760.0
    assert layout.center_px == PlanePoint(20.0 + 270.0, 10.0 + 380.0)
    # fov fits the shorter (horizontal) side
    assert layout.scale * math.tan(math.radians(20.0)) == pytest.approx(270.0)
    assert layout.split_threshold == pytest.approx(0.8 * 540.0)
    assert (layout.left, layout.top, layout.right, layout.bottom) == (
        20.0,
        10.0,
        560.0,
        770.0,
    )


@pytest.mark.unit
def test_half_fov_lands_on_plot_edge():
    """A point fov/2 from the center sits on the edge of the shorter side"""
    layout = ChartLayout.from_config(ChartConfig(fov_deg=30.0))
    r = math.tan(math.radians(15.0)) * layout.scale
    assert layout.center_px.x + r == pytest.approx(layout.right)


@pytest.mark.unit
def test_contains():
    layout = ChartLayout.from_config(ChartConfig())
    assert layout.contains(40.0, 40.0)
    assert layout.contains(400.0, 760.0)
    assert not layout.contains(39.9, 400.0)
    assert not layout.contains(400.0, 760.1)
