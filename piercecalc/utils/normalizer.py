# normalizer.py
# Turns parsed drawing entity records into typed primitives, then into either a direct
# pierce/area contribution (circles, polylines) or an open segment for loop grouping (lines, arcs).

import logging
import math
from collections import namedtuple

from piercecalc.utils.geometry import (
    Circle, ClosedPolygon, OpenPolyline, OpenSegment, Point2D,
    calculate_area, circle_area, point_on_circle,
)

Contribution = namedtuple('Contribution', ['pierce_count', 'area'])

POLYLINE_TYPES = ("LWPOLYLINE", "POLYLINE")
SUPPORTED_TYPES = ("CIRCLE", "LINE", "ARC") + POLYLINE_TYPES

# Field names used by the JSON DXF parsers, accepted next to our own.
FIELD_ALIASES = {
    "start": ("start", "startPoint"),
    "end": ("end", "endPoint"),
    "start_angle": ("start_angle", "startAngle"),
    "end_angle": ("end_angle", "endAngle"),
}


class MalformedEntityError(ValueError):
    """A supported entity is missing a geometry field or carries a non-numeric one."""

    def __init__(self, message, index=None, entity_type=None):
        self.index = index
        self.entity_type = entity_type
        where = f"entity {index} ({entity_type})" if index is not None else f"{entity_type} entity"
        super().__init__(f"{where}: {message}")


def entity_type(entity):
    etype = entity.get("type") if isinstance(entity, dict) else None
    return etype.strip().upper() if isinstance(etype, str) else None


def _field(entity, name):
    for alias in FIELD_ALIASES.get(name, (name,)):
        if alias in entity and entity[alias] is not None:
            return entity[alias]
    return None


def _number(value, name, etype, index):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedEntityError(f"'{name}' must be a number, got {value!r}", index, etype)
    if not math.isfinite(value):
        raise MalformedEntityError(f"'{name}' must be finite, got {value!r}", index, etype)
    return float(value)


def _point(value, name, etype, index):
    if isinstance(value, dict):
        if "x" not in value or "y" not in value:
            raise MalformedEntityError(f"'{name}' needs x and y", index, etype)
        x, y = value["x"], value["y"]
    elif isinstance(value, (list, tuple)) and len(value) >= 2:
        x, y = value[0], value[1]
    else:
        raise MalformedEntityError(f"'{name}' is not a point: {value!r}", index, etype)
    return Point2D(_number(x, f"{name}.x", etype, index), _number(y, f"{name}.y", etype, index))


def _required(entity, name, etype, index):
    value = _field(entity, name)
    if value is None:
        raise MalformedEntityError(f"missing '{name}'", index, etype)
    return value


def to_primitive(entity, index=None):
    """Validate one entity record and build its typed primitive. Unsupported types return None."""
    etype = entity_type(entity)
    if etype not in SUPPORTED_TYPES:
        return None

    if etype == "CIRCLE":
        center = _point(_required(entity, "center", etype, index), "center", etype, index)
        radius = _number(_required(entity, "radius", etype, index), "radius", etype, index)
        return Circle(center, abs(radius))

    if etype in POLYLINE_TYPES:
        raw_vertices = entity.get("vertices") or []
        if not isinstance(raw_vertices, (list, tuple)):
            raise MalformedEntityError(f"'vertices' must be a list, got {raw_vertices!r}", index, etype)
        vertices = tuple(_point(v, f"vertices[{i}]", etype, index) for i, v in enumerate(raw_vertices))
        if entity.get("closed") or entity.get("shape"):
            return ClosedPolygon(vertices)
        return OpenPolyline(vertices)

    if etype == "LINE":
        start = _point(_required(entity, "start", etype, index), "start", etype, index)
        end = _point(_required(entity, "end", etype, index), "end", etype, index)
        return OpenSegment(start, end)

    # ARC
    center = _point(_required(entity, "center", etype, index), "center", etype, index)
    radius = _number(_required(entity, "radius", etype, index), "radius", etype, index)
    start_angle = _number(_required(entity, "start_angle", etype, index), "start_angle", etype, index)
    end_angle = _number(_required(entity, "end_angle", etype, index), "end_angle", etype, index)
    return OpenSegment(point_on_circle(center, radius, start_angle), point_on_circle(center, radius, end_angle))


def contribution_of(primitive):
    """Direct pierce/area contribution of a primitive that does not take part in loop grouping."""
    if isinstance(primitive, Circle):
        return Contribution(1, circle_area(primitive.radius))
    if isinstance(primitive, ClosedPolygon):
        # fewer than 3 vertices still needs its pierce, but has no area
        return Contribution(1, calculate_area(primitive.vertices) if len(primitive.vertices) > 2 else 0.0)
    if isinstance(primitive, OpenPolyline):
        return Contribution(2, 0.0)
    raise TypeError(f"{type(primitive).__name__} has no direct contribution")


def normalize_entity(entity, index=None):
    """Return a Contribution, an OpenSegment, or None for entity types we skip."""
    primitive = to_primitive(entity, index)
    if primitive is None:
        logging.debug(f"Skipping entity {index} of type {entity_type(entity)!r}")
        return None
    if isinstance(primitive, OpenSegment):
        return primitive
    return contribution_of(primitive)
