#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Chart layers, back to front

The set is closed: CLIPPED_LAYERS are drawn inside the plot
rectangle in this order, UNCLIPPED_LAYERS on top of them.
"""

from typing import Tuple

from .base import Layer
from .constellations import ConstellationsLayer
from .ecliptic import EclipticLayer
from .frame import FrameLayer
from .grid import GridLayer
from .labels import LabelsLayer
from .objects import ObjectsLayer
from .stars import StarsLayer
from .zenith import ZenithLayer

CLIPPED_LAYERS: Tuple[Layer, ...] = (
    EclipticLayer(),
    GridLayer(),
    ConstellationsLayer(),
    ObjectsLayer(),
    StarsLayer(),
    LabelsLayer(),
    ZenithLayer(),
)
UNCLIPPED_LAYERS: Tuple[Layer, ...] = (FrameLayer(),)

__all__ = [
    "Layer",
    "ConstellationsLayer",
    "EclipticLayer",
    "FrameLayer",
    "GridLayer",
    "LabelsLayer",
    "ObjectsLayer",
    "StarsLayer",
    "ZenithLayer",
    "CLIPPED_LAYERS",
    "UNCLIPPED_LAYERS",
]
