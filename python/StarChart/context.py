"""
The chart context bundles config, derived layout and the
datasets a chart is rendered from. Layers only read from it.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from StarChart.config import ChartConfig
from StarChart.layout import ChartLayout
from StarChart.projection import project, to_pixels
from StarChart.sampling import adaptive_step_deg
from StarChart.sky_types import (
    CelestialObject,
    Constellation,
    EquatorialPoint,
    PlanePoint,
)


@dataclass(frozen=True)
class Datasets:
    stars: Sequence[CelestialObject] = ()
    # ingestion delivers these faintest first, they are drawn in this order
    objects: Sequence[CelestialObject] = ()
    constellations: Sequence[Constellation] = ()


class ChartContext:
    def __init__(self, data: Datasets, cfg: ChartConfig):
        self.data = data
        self.cfg = cfg.validate()
        self.layout = ChartLayout.from_config(self.cfg)

    def project_to_pixels(self, coords: EquatorialPoint) -> Optional[PlanePoint]:
        """
        Pixel position of coords on this chart,
        None when the projection culls it
        """
        tp = project(
            coords,
            self.cfg.center,
            self.cfg.projection,
            self.cfg.position_angle_deg,
        )
        if tp is None:
            return None
        return to_pixels(tp, self.layout.center_px, self.layout.scale)

    def adaptive_step_deg(self) -> int:
        return adaptive_step_deg(self.cfg.fov_deg)
