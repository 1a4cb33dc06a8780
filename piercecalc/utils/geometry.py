# geometry.py
# Shared 2D geometry for pierce/area estimation: point and primitive types,
# shoelace area and the snapping key that decides when two endpoints are the same point.

import math
from collections import namedtuple
from dataclasses import dataclass

DEFAULT_PRECISION = 6  # decimal places used when snapping endpoints

Point2D = namedtuple('Point2D', ['x', 'y'])


@dataclass(frozen=True)
class Circle:
    center: Point2D
    radius: float


@dataclass(frozen=True)
class ClosedPolygon:
    vertices: tuple


@dataclass(frozen=True)
class OpenPolyline:
    vertices: tuple


@dataclass(frozen=True)
class OpenSegment:
    start: Point2D
    end: Point2D


def calculate_area(points):
    """Calculate polygon area using shoelace formula."""
    n = len(points)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1]
        area -= points[j][0] * points[i][1]
    return abs(area) / 2


def circle_area(radius):
    return math.pi * radius ** 2


def point_on_circle(center, radius, angle_deg):
    """Project an angle in degrees onto the circle around center."""
    rad = math.radians(angle_deg)
    return Point2D(center.x + radius * math.cos(rad), center.y + radius * math.sin(rad))


def _snap(value, precision):
    # + 0.0 folds -0.0 into 0.0 so both print the same
    return round(value, precision) + 0.0


def point_key(point, precision=DEFAULT_PRECISION):
    """Composite key of a point rounded to the given number of decimals."""
    return f"{_snap(point.x, precision)}_{_snap(point.y, precision)}"
