# faces/locate.py
"""
Point-in-polygon predicates over an ordered coordinate ring.

Both predicates are O(len(ring)) and treat the boundary as inside: a point on
an edge or on a vertex belongs to the face.
"""
import math

from faces.config import PARAMS, LOCATE_METHODS


def _side(p, a, b):
    """Cross product (b - a) x (p - a): > 0 when p is left of a->b."""
    return (b[0] - a[0]) * (p[1] - a[1]) - (p[0] - a[0]) * (b[1] - a[1])


def is_left(p, a, b):
    return _side(p, a, b) > 0


def _edges(ring):
    k = len(ring)
    for i in range(k):
        yield ring[i], ring[(i + 1) % k]


def on_segment(p, a, b, eps=None):
    eps = PARAMS["EPS_ON_EDGE"] if eps is None else eps
    length = math.hypot(b[0] - a[0], b[1] - a[1])
    if length == 0.0:
        return math.hypot(p[0] - a[0], p[1] - a[1]) <= eps
    if abs(_side(p, a, b)) / length > eps:
        return False
    return (min(a[0], b[0]) - eps <= p[0] <= max(a[0], b[0]) + eps and
            min(a[1], b[1]) - eps <= p[1] <= max(a[1], b[1]) + eps)


def on_boundary(p, ring, eps=None):
    return any(on_segment(p, a, b, eps) for a, b in _edges(ring))


def is_inside_ray(p, ring, eps=None):
    """
    Ray casting towards +x. Edges straddling the point's y are counted when
    their intersection lies right of the point; odd count -> inside.
    """
    if on_boundary(p, ring, eps):
        return True
    px, py = p
    count = 0
    for (x1, y1), (x2, y2) in _edges(ring):
        if (y1 <= py < y2) or (y2 <= py < y1):
            ix = (py - y1) / (y2 - y1) * (x2 - x1) + x1
            if px == ix:
                return True
            if px < ix:
                count += 1
    return count % 2 == 1


def is_inside_winding(p, ring, eps=None):
    """Winding number from the is_left test: upward crossings with the point
    on the left add one, downward crossings with it on the right subtract one."""
    if on_boundary(p, ring, eps):
        return True
    wn = 0
    for a, b in _edges(ring):
        if a[1] <= p[1]:
            if b[1] > p[1] and _side(p, a, b) > 0:
                wn += 1
        elif b[1] <= p[1] and _side(p, a, b) < 0:
            wn -= 1
    return wn != 0


PREDICATES = {
    "ray": is_inside_ray,
    "winding": is_inside_winding,
}


def get_predicate(method=None):
    method = method or PARAMS["LOCATE_METHOD"]
    if method not in PREDICATES:
        raise ValueError(f"unknown locate method {method!r}, expected one of {LOCATE_METHODS}")
    return PREDICATES[method]


def point_locate(faces, point, method=None, eps=None):
    """Id of the first face (in list order) containing point, or None."""
    inside = get_predicate(method)
    p = (float(point[0]), float(point[1]))
    for face in faces:
        if inside(p, face.coords, eps):
            return face.id
    return None
