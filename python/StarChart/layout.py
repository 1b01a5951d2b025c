"""
Pixel geometry of a chart, derived once from its config
"""

import math
from dataclasses import dataclass

from StarChart.config import ChartConfig
from StarChart.sky_types import PlanePoint


@dataclass(frozen=True)
class ChartLayout:
    plot_x: float
    plot_y: float
    plot_w: float
    plot_h: float
    center_px: PlanePoint
    # pixels per tangent plane unit
    scale: float
    # consecutive points further apart than this are not joined
    split_threshold: float

    @classmethod
    def from_config(cls, cfg: ChartConfig) -> "ChartLayout":
        plot_x = float(cfg.margin.left)
        plot_y = float(cfg.margin.top)
        plot_w = float(cfg.width - cfg.margin.left - cfg.margin.right)
        plot_h = float(cfg.height - cfg.margin.top - cfg.margin.bottom)
        center_px = PlanePoint(plot_x + plot_w / 2.0, plot_y + plot_h / 2.0)

        # the fov is the angular diameter fitting the shorter side
        rho_max = math.tan(math.radians(cfg.fov_deg / 2.0))
        radius_px = min(plot_w, plot_h) / 2.0
        scale = radius_px / rho_max

        return cls(
            plot_x=plot_x,
            plot_y=plot_y,
            plot_w=plot_w,
            plot_h=plot_h,
            center_px=center_px,
            scale=scale,
            split_threshold=min(plot_w, plot_h) * 0.8,
        )

    @property
    def left(self) -> float:
        return self.plot_x

    @property
    def top(self) -> float:
        return self.plot_y

    @property
    def right(self) -> float:
        return self.plot_x + self.plot_w

    @property
    def bottom(self) -> float:
        return self.plot_y + self.plot_h

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom
