"""
Drawing primitives the layers emit.

A rendered chart is a tree of Groups holding these primitives.
Every primitive carries a CSS style class string, sinks use it
to pick colors/styles. Coordinates are pixels.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

from StarChart.sky_types import PlanePoint


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    css_class: str = ""
    element_id: str = ""


@dataclass(frozen=True)
class Ellipse:
    cx: float
    cy: float
    rx: float
    ry: float
    css_class: str = ""
    element_id: str = ""


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    css_class: str = ""
    stroke_width: Optional[float] = None


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    css_class: str = ""
    element_id: str = ""
    filled: bool = True


@dataclass(frozen=True)
class Path:
    """Open polyline, never filled"""

    points: Tuple[PlanePoint, ...]
    css_class: str = ""


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    content: str
    css_class: str = ""
    # start | middle | end
    anchor: str = "start"
    # alphabetic | middle
    baseline: str = "alphabetic"


Primitive = Union[Circle, Ellipse, Line, Rect, Path, Text, "Group"]


@dataclass
class Group:
    css_class: str = ""
    element_id: str = ""
    # (degrees, cx, cy), clockwise in pixel space like svg rotate()
    rotation: Optional[Tuple[float, float, float]] = None
    clip: Optional[Rect] = None
    children: List[Primitive] = field(default_factory=list)

    def add(self, child: Primitive) -> "Group":
        self.children.append(child)
        return self

    def extend(self, children) -> "Group":
        self.children.extend(children)
        return self

    def __len__(self):
        return len(self.children)

    def walk(
        self, ancestors: Tuple["Group", ...] = ()
    ) -> Iterator[Tuple[Primitive, Tuple["Group", ...]]]:
        """
        Depth first over all descendants, yields (primitive, ancestors)
        where ancestors runs from the outermost group down to the parent
        """
        chain = ancestors + (self,)
        for child in self.children:
            yield child, chain
            if isinstance(child, Group):
                yield from child.walk(chain)

    def find(self, css_class: str) -> List[Primitive]:
        """All descendants having css_class among their class tokens"""
        return [
            child
            for child, _ in self.walk()
            if css_class in child.css_class.split()
        ]


def group_with_class(css_class: str) -> Group:
    return Group(css_class=css_class)


def polyline(points, css_class: str) -> Path:
    return Path(tuple(points), css_class)
