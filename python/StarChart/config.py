#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
This module holds the chart configuration and
the helpers to load/save it as json
"""

import json
import logging
import math
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dataclasses_json import dataclass_json

from StarChart.sky_types import EquatorialPoint, Projection

logger = logging.getLogger("StarChart.Config")


class ChartConfigError(ValueError):
    """Raised for configuration values a chart can not be drawn with"""


@dataclass_json
@dataclass(frozen=True)
class Margin:
    top: int = 40
    bottom: int = 40
    left: int = 40
    right: int = 40

    @classmethod
    def uniform(cls, px: int) -> "Margin":
        return cls(top=px, bottom=px, left=px, right=px)


@dataclass_json
@dataclass(frozen=True)
class ChartConfig:
    center: EquatorialPoint = field(default_factory=lambda: EquatorialPoint(0.0, 0.0))
    # PA=0 puts north up, positive rotates the chart counterclockwise
    position_angle_deg: float = 0.0
    projection: Projection = Projection.GNOMONIC
    fov_deg: float = 60.0
    width: int = 800
    height: int = 800
    margin: Margin = field(default_factory=lambda: Margin.uniform(40))
    step_ra_deg: int = 15
    step_dec_deg: int = 10
    limit_star_mag: float = 10.0
    limit_object_mag: float = 11.0
    object_scale: float = 1.0

    @property
    def plot_width(self) -> int:
        return self.width - self.margin.left - self.margin.right

    @property
    def plot_height(self) -> int:
        return self.height - self.margin.top - self.margin.bottom

    def validate(self) -> "ChartConfig":
        """
        Checks the values a layout can be derived from.
        Returns self so it can be chained.
        """
        if self.plot_width <= 0 or self.plot_height <= 0:
            raise ChartConfigError(
                f"margins {self.margin} leave no plot area in a "
                f"{self.width}x{self.height} chart"
            )
        if not (0.0 < self.fov_deg < 180.0) or not math.isfinite(self.fov_deg):
            raise ChartConfigError(
                f"field of view must be between 0 and 180 degrees, got {self.fov_deg}"
            )
        if self.step_ra_deg < 1 or self.step_dec_deg < 1:
            raise ChartConfigError(
                f"grid steps must be at least 1 degree, got "
                f"ra={self.step_ra_deg} dec={self.step_dec_deg}"
            )
        if not (-90.0 <= self.center.dec_deg <= 90.0):
            raise ChartConfigError(
                f"center declination out of range: {self.center.dec_deg}"
            )
        return self


def _normalize_options(options: Dict[str, Any]) -> Dict[str, Any]:
    """
    Accepts a couple of shorthands in config files:
    a single number for a uniform margin and any case for the projection
    """
    options = dict(options)
    margin = options.get("margin")
    if isinstance(margin, (int, float)):
        options["margin"] = Margin.uniform(int(margin)).to_dict()
    projection = options.get("projection")
    if isinstance(projection, str):
        try:
            options["projection"] = Projection.from_name(projection).value
        except ValueError as e:
            raise ChartConfigError(str(e)) from e
    return options


def load_chart_config(
    config_file_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ChartConfig:
    """
    Loads the chart config from a json file.

    Keys not present in the file use the defaults, and
    overrides (e.g. from a caller's own settings) win over both.
    """
    config_dict = ChartConfig().to_dict(encode_json=True)

    if config_file_path is not None:
        config_file_path = Path(config_file_path)
        if not os.path.exists(config_file_path):
            raise FileNotFoundError(f"Chart config {config_file_path} does not exist")
        with open(config_file_path, "r") as config_file:
            logger.info("Loading chart config from %s", config_file_path)
            config_dict.update(_normalize_options(json.load(config_file)))
    else:
        logger.debug("No chart config file given, using defaults")

    if overrides:
        config_dict.update(_normalize_options(overrides))

    try:
        return ChartConfig.from_dict(config_dict).validate()
    except ChartConfigError:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise ChartConfigError(f"Invalid chart config: {e}") from e


def dump_chart_config(cfg: ChartConfig, config_file_path: Union[str, Path]) -> None:
    """
    Write config to config file
    """
    with open(config_file_path, "w") as config_file:
        json.dump(cfg.to_dict(encode_json=True), config_file, indent=4)


def with_options(cfg: ChartConfig, **options) -> ChartConfig:
    """Returns a copy of cfg with some options changed"""
    return replace(cfg, **options)
