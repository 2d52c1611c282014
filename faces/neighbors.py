# faces/neighbors.py
"""
Face adjacency over an extracted face list.

Faces are addressed by id; the list is an arena where faces[i].id == i after
extraction, and neighbour sets only ever hold ids.
"""
from collections import deque


def face_by_id(faces, face_id):
    if 0 <= face_id < len(faces) and faces[face_id].id == face_id:
        return faces[face_id]
    for f in faces:
        if f.id == face_id:
            return f
    raise KeyError(f"no face with id {face_id!r}")


def find_neighbors(faces, query_face_id):
    """
    Ids of faces sharing at least one boundary edge with the query face.

    Two shared vertices are not enough: the pair must be consecutive in both
    rings. Rings may pass through a vertex more than once (dangling edges,
    bridges to holes), so the query ring is compared as a set of undirected
    edges. The hits are recorded on the query polygon; its ordered neighbour
    list is returned. O(F*C), C = ring length.
    """
    query = face_by_id(faces, query_face_id)
    edges = ring_edges(query.indices)

    for f in faces:
        if f.id == query.id:
            continue
        if any(e in edges for e in ring_edges(f.indices)):
            query.add_neighbor(f.id)
    return query.neighbors


def ring_edges(ring):
    """Undirected edges of a closed ring as frozensets."""
    k = len(ring)
    return {frozenset((ring[i], ring[(i + 1) % k])) for i in range(k)}


def build_layers(faces, start_face_id):
    """
    Breadth-first map face id -> neighbour ids, covering the faces reachable
    from start_face_id through shared edges. Each face is expanded once;
    other components do not appear at all.
    """
    face_map = {}
    queue = deque([start_face_id])
    while queue:
        fid = queue.popleft()
        if fid in face_map:
            continue
        nbrs = find_neighbors(faces, fid)
        face_map[fid] = nbrs
        for n in nbrs:
            if n not in face_map:
                queue.append(n)
    return face_map


def group_layers(faces, start_face_id):
    """[[start], [its neighbours], [their unseen neighbours], ...]"""
    face_by_id(faces, start_face_id)
    seen = {start_face_id}
    layers = []
    frontier = [start_face_id]
    while frontier:
        layers.append(frontier)
        nxt = []
        for fid in frontier:
            for n in find_neighbors(faces, fid):
                if n not in seen:
                    seen.add(n)
                    nxt.append(n)
        frontier = nxt
    return layers
