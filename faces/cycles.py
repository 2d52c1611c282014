# faces/cycles.py
"""
Face extraction for a planar straight-line graph.

Shih's region extraction: from any unused directed edge keep walking along
the edge with the smallest clockwise turn until the walk returns to its
first half-edge. Every directed half-edge is used by exactly one face, so
the loop over unused half-edges yields every interior face plus one external
face per connected component.

Complexity: each trace step costs O(V) (one matrix row), every half-edge is
consumed once, and a fresh seed scan is O(V^2): O(V^2 + V*E) overall.
"""
from collections import deque
import math

import structlog

from faces.config import PARAMS
from faces.errors import MalformedGraphError
from faces.graph import AdjacencyMatrix
from faces.polygon import Polygon

logger = structlog.get_logger()


def connected_components(G):
    seen = set()
    comps = []
    for start in range(len(G.vertices)):
        if start in seen:
            continue
        if start not in G.adj:
            seen.add(start)
            comps.append([start])
            continue
        q = deque([start])
        seen.add(start)
        comp = [start]
        while q:
            u = q.popleft()
            for eid in G.adj.get(u, []):
                a, b = G.edge_nodes(eid)
                v = b if a == u else a
                if v not in seen:
                    seen.add(v)
                    q.append(v)
                    comp.append(v)
        comps.append(comp)
    return comps


def clockwise_angle(p_prev, p_cur, p_next):
    """
    Angle at p_cur swept clockwise from the ray p_cur->p_prev to the ray
    p_cur->p_next, in [0, 2pi). Smaller means a sharper turn back towards
    where we came from, i.e. the face stays on the left (y up).
    """
    ax, ay = p_prev[0] - p_cur[0], p_prev[1] - p_cur[1]
    bx, by = p_next[0] - p_cur[0], p_next[1] - p_cur[1]
    na = math.hypot(ax, ay)
    nb = math.hypot(bx, by)
    if na == 0.0 or nb == 0.0:
        return math.inf  # coincident vertices never win
    cosine = max(-1.0, min(1.0, (ax * bx + ay * by) / (na * nb)))
    angle = math.acos(cosine)
    if ax * by - ay * bx > 0:
        angle = 2.0 * math.pi - angle
    return angle


def next_face_vertex(vertices, parent, current, candidates):
    """Candidate with the smallest clockwise turn; ties keep the first one."""
    best = None
    best_angle = math.inf
    for w in candidates:
        a = clockwise_angle(vertices[parent], vertices[current], vertices[w])
        if a < best_angle:
            best_angle = a
            best = w
    return best


def _closes_at(matrix, vertices, ring, current):
    """
    The walk reached its start vertex again. It is closed only if the turn
    at the start picks the first half-edge again (start has degree 2, or the
    face really ends here); otherwise the face passes through the start as a
    cut vertex and the walk must go on.
    """
    start, first = ring[0], ring[1]
    candidates = sorted(set(matrix.neighbors_of(start, excluding=current)) | {first})
    return next_face_vertex(vertices, current, start, candidates) == first


def trace_face(matrix, vertices, v1, v2):
    """
    Walk one face boundary starting with half-edge v1->v2, consuming every
    half-edge it uses. At the free end of a dangling edge the walk turns back
    along the same edge. Returns (ring, closed): closed is False when no
    unused half-edge was left to continue with before coming back to v1.
    """
    ring = [v1, v2]
    matrix.consume(v1, v2)
    parent, current = v1, v2
    while True:
        candidates = matrix.neighbors_of(current, excluding=parent)
        nxt = next_face_vertex(vertices, parent, current, candidates)
        if nxt is None and matrix.is_available(current, parent):
            nxt = parent
        if nxt is None:
            return ring, False
        matrix.consume(current, nxt)
        if nxt == v1 and _closes_at(matrix, vertices, ring, current):
            return ring, True
        ring.append(nxt)
        parent, current = current, nxt


def _resume_edge(matrix, ring):
    """Unused reversed half-edge on the boundary just traced, if any."""
    for i in range(len(ring)):
        u, v = ring[i], ring[i - 1]
        if matrix.is_available(u, v):
            return u, v
    return None


def trace_all_faces(G, prof=None):
    """
    Every closed face of G as a Polygon, the external ones included, with
    ids in creation order. Open walks, rings with fewer than 3 distinct
    vertices and rings enclosing no area (the outside of a tree) are dropped.
    """
    eps_area = PARAMS["EPS_AREA"]
    if prof: prof.start("build_matrix")
    matrix = AdjacencyMatrix.build(len(G.vertices), G.edges)
    if prof: prof.stop("build_matrix")

    if prof: prof.start("trace")
    faces = []
    edge = matrix.first_available()
    while edge is not None:
        ring, closed = trace_face(matrix, G.vertices, *edge)
        face = Polygon.from_ring(ring, G.vertices, len(faces))
        if closed and len(set(ring)) >= 3 and abs(face.signed_area_sum()) > eps_area:
            faces.append(face)
        else:
            logger.debug("degenerate_ring_dropped", ring=ring, closed=closed)
        edge = _resume_edge(matrix, ring) or matrix.first_available()
    if prof: prof.stop("trace")
    return faces


def _has_cycle(G, comp_nodes):
    comp = set(comp_nodes)
    pairs = set()
    for nid in comp_nodes:
        for eid in G.adj.get(nid, []):
            a, b = G.edge_nodes(eid)
            if a in comp and b in comp:
                pairs.add((min(a, b), max(a, b)))
    return len(pairs) >= len(comp)


def check_external_faces(G, faces, strict=None):
    """
    Count externally signed faces per connected component. A component with
    a cycle must have exactly one; anything else means the embedding is not
    planar (crossing or overlapping edges). Trees bound no area and are not
    checked. Returns the offending components as (vertex list, external
    count); raises when strict.
    """
    strict = PARAMS["STRICT_EXTERNAL"] if strict is None else strict
    comps = [c for c in connected_components(G) if _has_cycle(G, c)]
    comp_of = {}
    for k, comp in enumerate(comps):
        for v in comp:
            comp_of[v] = k

    counts = [0] * len(comps)
    for f in faces:
        if f.is_external():
            counts[comp_of[f.indices[0]]] += 1

    bad = [(sorted(comps[k]), n) for k, n in enumerate(counts) if n != 1]
    if bad:
        if strict:
            raise MalformedGraphError(
                f"{len(bad)} component(s) without exactly one external face", bad)
        for comp, n in bad:
            logger.warning("external_face_defect", vertices=comp, external_faces=n)
    return bad


def extract_faces(G, strict=None, renumber=True, prof=None):
    """
    Interior faces of G. With renumber the ids become positions in the
    returned list, so faces[i].id == i.
    """
    faces = trace_all_faces(G, prof=prof)

    if prof: prof.start("filter_external")
    check_external_faces(G, faces, strict=strict)
    interior = [f for f in faces if not f.is_external()]
    if renumber:
        for i, f in enumerate(interior):
            f.id = i
    if prof: prof.stop("filter_external")

    logger.info("faces_extracted", vertices=len(G.vertices), edges=len(G.edges),
                traced=len(faces), interior=len(interior))
    return interior
