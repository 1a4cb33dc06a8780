# loops.py
# Connected components of the endpoint graph, closed-loop classification and
# vertex ordering for the shoelace area of each closed loop.

import logging
import math

from shapely.geometry import LinearRing

from piercecalc.utils.geometry import calculate_area
from piercecalc.utils.normalizer import Contribution

ORDERING_CENTROID = "centroid"
ORDERING_WALK = "walk"
ORDERINGS = (ORDERING_CENTROID, ORDERING_WALK)


def find_components(graph):
    """Group graph keys into connected components (iterative DFS)."""
    visited = set()
    components = []
    for key in graph:
        if key in visited:
            continue
        component = []
        stack = [key]
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            component.append(current)
            # sorted so the visit order does not depend on string hashing
            for neighbor in sorted(graph.adjacency[current]):
                if neighbor not in visited:
                    stack.append(neighbor)
        components.append(component)
    return components


def is_closed_loop(graph, component):
    """True when every node has exactly two distinct neighbours and there are at least 3 nodes."""
    if len(component) < 3:
        return False
    return all(graph.degree(key) == 2 for key in component)


def order_by_centroid_angle(points):
    """Sort points by angle around their centroid.

    Gives the traversal order of convex and most star-shaped loops. Concave
    loops can come out misordered, which changes their area.
    """
    n = len(points)
    cx = sum(p.x for p in points) / n
    cy = sum(p.y for p in points) / n
    return sorted(points, key=lambda p: math.atan2(p.y - cy, p.x - cx))


def order_by_edge_walk(graph, component):
    """Follow the cycle through the adjacency sets, starting at the smallest key."""
    start = min(component)
    ordered = [start]
    visited = {start}
    current = start
    while True:
        step = sorted(k for k in graph.neighbors(current) if k not in visited)
        if not step:
            break
        current = step[0]
        visited.add(current)
        ordered.append(current)
    return [graph.points[key] for key in ordered]


def order_loop(graph, component, ordering=ORDERING_CENTROID):
    if ordering == ORDERING_WALK:
        return order_by_edge_walk(graph, component)
    if ordering != ORDERING_CENTROID:
        raise ValueError(f"Unknown loop ordering {ordering!r}. Allowed: {ORDERINGS}")
    ordered = order_by_centroid_angle([graph.points[key] for key in component])
    if not LinearRing(ordered).is_simple:
        logging.warning(f"Centroid ordering of a {len(ordered)}-node loop crosses itself; its area may be wrong")
    return ordered


def classify_component(graph, component, ordering=ORDERING_CENTROID):
    """A closed loop is one pierce plus its enclosed area; anything else is two open cuts."""
    if is_closed_loop(graph, component):
        return Contribution(1, calculate_area(order_loop(graph, component, ordering)))
    return Contribution(2, 0.0)
