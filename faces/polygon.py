# faces/polygon.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from faces.locate import get_predicate

Point = Tuple[float, float]


def signed_area_sum(coords):
    """Shoelace in the (x2 - x1) * (y2 + y1) form: twice the area, > 0 for a
    clockwise ring when y grows upwards."""
    s = 0.0
    k = len(coords)
    for i in range(k):
        x1, y1 = coords[i]
        x2, y2 = coords[(i + 1) % k]
        s += (x2 - x1) * (y2 + y1)
    return s


def color_for_id(face_id):
    return ((face_id * 113) % 255, (face_id * 157) % 255, (face_id * 193) % 255)


@dataclass
class Polygon:
    """
    One traced face: index ring into the graph's vertex list plus the
    matching coordinate ring. Neighbours are kept as face ids, never as
    references to other polygons.
    """
    indices: List[int]
    coords: List[Point]
    id: int = 0
    _neighbors: Dict[int, None] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_ring(cls, ring, vertices, face_id=0):
        return cls(list(ring), [tuple(vertices[i]) for i in ring], face_id)

    def __len__(self):
        return len(self.indices)

    @property
    def neighbors(self) -> List[int]:
        return list(self._neighbors)

    def add_neighbor(self, face_id):
        self._neighbors[face_id] = None

    def clear_neighbors(self):
        self._neighbors.clear()

    @property
    def color(self):
        return color_for_id(self.id)

    @property
    def color_css(self):
        return "rgb({}, {}, {})".format(*self.color)

    def signed_area_sum(self):
        return signed_area_sum(self.coords)

    def area(self):
        return abs(self.signed_area_sum()) / 2.0

    def is_external(self):
        return self.signed_area_sum() > 0

    def contains(self, point, method: Optional[str] = None, eps=None) -> bool:
        return get_predicate(method)((float(point[0]), float(point[1])), self.coords, eps)

    def centroid(self):
        # vertex average, good enough for placing a label
        k = len(self.coords)
        return (sum(p[0] for p in self.coords) / k, sum(p[1] for p in self.coords) / k)

    def to_dict(self):
        return {
            "id": self.id,
            "indices": list(self.indices),
            "coords": [list(p) for p in self.coords],
            "color": list(self.color),
            "neighbors": self.neighbors,
        }
