# endpoint_graph.py
# Undirected graph of snapped segment endpoints. Endpoints whose rounded
# coordinates match become one node; repeated segments collapse into one edge.

import logging

from piercecalc.utils.geometry import DEFAULT_PRECISION, point_key


class EndpointGraph:
    def __init__(self, precision=DEFAULT_PRECISION):
        self.precision = precision
        self.adjacency = {}
        self.points = {}

    def add_node(self, point):
        key = point_key(point, self.precision)
        if key not in self.adjacency:
            self.adjacency[key] = set()
            self.points[key] = point
        return key

    def add_segment(self, segment):
        key1 = self.add_node(segment.start)
        key2 = self.add_node(segment.end)
        # a degenerate segment stores key1 in its own set
        self.adjacency[key1].add(key2)
        self.adjacency[key2].add(key1)
        return key1, key2

    def neighbors(self, key):
        """Adjacent keys other than the node itself."""
        return self.adjacency[key] - {key}

    def degree(self, key):
        return len(self.neighbors(key))

    def __contains__(self, key):
        return key in self.adjacency

    def __len__(self):
        return len(self.adjacency)

    def __iter__(self):
        return iter(self.adjacency)


def build_endpoint_graph(segments, precision=DEFAULT_PRECISION):
    """Build the endpoint graph for a sequence of OpenSegments."""
    graph = EndpointGraph(precision)
    degenerate = 0
    count = 0
    for segment in segments:
        count += 1
        key1, key2 = graph.add_segment(segment)
        if key1 == key2:
            degenerate += 1
    if degenerate:
        logging.warning(f"{degenerate} segment(s) shorter than the snapping precision ({precision} decimals)")
    logging.debug(f"Endpoint graph: {len(graph)} nodes from {count} segments")
    return graph
