# pierce.py
# Pierce count and enclosed cut area for one drawing.
# Circles and polylines count on their own; lines and arcs are grouped into
# closed loops through their shared endpoints before they are counted.

import logging
from collections import namedtuple

from piercecalc.utils.endpoint_graph import build_endpoint_graph
from piercecalc.utils.geometry import DEFAULT_PRECISION, OpenSegment
from piercecalc.utils.loops import ORDERING_CENTROID, classify_component, find_components
from piercecalc.utils.normalizer import normalize_entity


class DrawingResult(namedtuple('DrawingResult', ['pierce_count', 'area'])):
    __slots__ = ()

    def to_dict(self):
        return {"pierceCount": self.pierce_count, "area": self.area}


def compute_drawing(entities, precision=None, ordering=None):
    """Estimate pierce count and enclosed area for a list of parsed entity records."""
    precision = DEFAULT_PRECISION if precision is None else precision
    ordering = ORDERING_CENTROID if ordering is None else ordering

    independent_pierce_count = 0
    independent_area = 0.0
    segments = []
    skipped = 0
    for index, entity in enumerate(entities):
        normalized = normalize_entity(entity, index)
        if normalized is None:
            skipped += 1
        elif isinstance(normalized, OpenSegment):
            segments.append(normalized)
        else:
            independent_pierce_count += normalized.pierce_count
            independent_area += normalized.area

    graph = build_endpoint_graph(segments, precision)
    grouped_pierce_count = 0
    grouped_area = 0.0
    closed_loops = 0
    components = find_components(graph)
    for component in components:
        contribution = classify_component(graph, component, ordering)
        if contribution.pierce_count == 1:
            closed_loops += 1
        grouped_pierce_count += contribution.pierce_count
        grouped_area += contribution.area

    result = DrawingResult(independent_pierce_count + grouped_pierce_count, independent_area + grouped_area)
    logging.info(f"Segments: {len(segments)}, components: {len(components)} ({closed_loops} closed), "
                 f"skipped entities: {skipped}")
    logging.info(f"Pierce count: {result.pierce_count}, area: {result.area:.4f}")
    return result
