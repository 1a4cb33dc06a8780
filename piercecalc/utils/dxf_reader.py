# dxf_reader.py
# Reads DXF text with ezdxf and turns the modelspace into plain entity records
# for the pierce/area engine. Unsupported entities are passed on with only their type.

import io
import logging
from collections import Counter

import ezdxf


class DxfParseError(ValueError):
    """The uploaded content could not be read as a DXF drawing."""


def _xy(vec):
    return {"x": float(vec[0]), "y": float(vec[1])}


def entity_to_record(entity):
    entity_type = entity.dxftype()
    if entity_type == "LINE":
        return {"type": "LINE", "start": _xy(entity.dxf.start), "end": _xy(entity.dxf.end)}
    if entity_type == "CIRCLE":
        return {"type": "CIRCLE", "center": _xy(entity.dxf.center), "radius": float(entity.dxf.radius)}
    if entity_type == "ARC":
        return {
            "type": "ARC",
            "center": _xy(entity.dxf.center),
            "radius": float(entity.dxf.radius),
            "start_angle": float(entity.dxf.start_angle),
            "end_angle": float(entity.dxf.end_angle),
        }
    if entity_type == "LWPOLYLINE":
        return {
            "type": "LWPOLYLINE",
            "vertices": [{"x": float(x), "y": float(y)} for x, y in entity.get_points("xy")],
            "closed": bool(entity.closed),
        }
    if entity_type == "POLYLINE":
        if not entity.is_2d_polyline:
            # 3D polylines and meshes are not cut geometry
            return {"type": entity.get_mode()}
        return {
            "type": "POLYLINE",
            "vertices": [_xy(v.dxf.location) for v in entity.vertices],
            "closed": bool(entity.is_closed),
        }
    return {"type": entity_type}


def read_dxf_entities(content):
    """Parse DXF text and return the modelspace entities as records."""
    try:
        doc = ezdxf.read(io.StringIO(content))
    except Exception as e:
        raise DxfParseError(str(e) or type(e).__name__) from e

    records = [entity_to_record(entity) for entity in doc.modelspace()]
    counts = Counter(record["type"] for record in records)
    logging.info(f"DXF entities: {len(records)} {dict(counts)}")
    return records
