#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Value types shared by the projection, layout and layer code.

Everything in here is immutable: the catalogs handed to a chart
are read-only for the whole render.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


@dataclass(frozen=True)
class EquatorialPoint:
    # degrees, J2000
    ra_deg: float
    dec_deg: float


@dataclass(frozen=True)
class PlanePoint:
    """Tangent plane or pixel coordinate, callers know which"""

    x: float
    y: float


@dataclass(frozen=True)
class Size:
    # arcminutes
    major: float = 0.0
    minor: float = 0.0

    @classmethod
    def zero(cls) -> "Size":
        return cls(0.0, 0.0)


class ObjectKind(Enum):
    STAR = "star"
    DOUBLE_STAR = "double-star"
    TRIPLE_STAR = "triple-star"
    GALAXY = "galaxy"
    OPEN_CLUSTER = "open-cluster"
    GLOBULAR_CLUSTER = "globular-cluster"
    PLANETARY_NEBULA = "planetary-nebula"
    BRIGHT_NEBULA = "bright-nebula"
    MILKY_WAY = "milky-way"
    NOT_USED = "not-used"

    @classmethod
    def from_name(cls, name: str) -> "ObjectKind":
        """
        Maps the kind text produced by ingestion to a kind,
        anything unknown ends up as NOT_USED
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            return cls.NOT_USED

    @property
    def is_star(self) -> bool:
        return "star" in self.value


class Projection(Enum):
    GNOMONIC = "gnomonic"
    STEREOGRAPHIC = "stereographic"
    SPHERICAL = "spherical"
    ALTAZ = "altaz"

    @classmethod
    def from_name(cls, name: str) -> "Projection":
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = " | ".join(p.value for p in cls)
            raise ValueError(f"invalid projection '{name}'. Use: {valid}") from None


@dataclass(frozen=True)
class CelestialObject:
    kind: ObjectKind
    catalog: str
    identifier: str
    coords: EquatorialPoint
    magnitude: float
    size: Size = field(default_factory=Size.zero)
    # degrees, east of north
    position_angle: float = 0.0
    name: str = ""

    @property
    def label_text(self) -> str:
        if self.name:
            return self.name
        return f"{self.catalog} {self.identifier}"

    @property
    def is_messier(self) -> bool:
        return self.catalog == "M"


@dataclass(frozen=True)
class Constellation:
    name: str
    lines: Tuple[Tuple[EquatorialPoint, ...], ...] = ()

    @classmethod
    def from_polylines(
        cls, name: str, polylines: List[List[EquatorialPoint]]
    ) -> "Constellation":
        return cls(name, tuple(tuple(line) for line in polylines))
