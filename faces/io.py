# faces/io.py
import json

from faces.graph import Graph, as_index


def _as_point(item):
    # expect [x, y]
    if (isinstance(item, (list, tuple)) and len(item) == 2 and
            all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in item)):
        return (float(item[0]), float(item[1]))
    return None


def _as_edge(item):
    # expect [from, to]; 2.0 is accepted as 2
    if not (isinstance(item, (list, tuple)) and len(item) == 2):
        return None
    try:
        return tuple(as_index(v) for v in item)
    except ValueError:
        return None


def parse_graph(data):
    """
    {"vertices": [[x, y], ...], "edges": [[from, to], ...]} -> Graph.
    ValueError on a malformed structure, IndexError on an edge pointing
    outside the vertex list.
    """
    if not isinstance(data, dict) or "vertices" not in data or "edges" not in data:
        raise ValueError("Expected an object with 'vertices' and 'edges' arrays.")
    if not isinstance(data["vertices"], list) or not isinstance(data["edges"], list):
        raise ValueError("'vertices' and 'edges' must be arrays.")

    vertices = []
    for k, item in enumerate(data["vertices"]):
        p = _as_point(item)
        if p is None:
            raise ValueError(f"vertices[{k}] is not an [x, y] pair: {item!r}")
        vertices.append(p)

    edges = []
    for k, item in enumerate(data["edges"]):
        e = _as_edge(item)
        if e is None:
            raise ValueError(f"edges[{k}] is not a [from, to] index pair: {item!r}")
        edges.append(e)

    return Graph(vertices, edges)


def load_graph(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_graph(data)


def loads_graph(text):
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    return parse_graph(json.loads(text))


def faces_payload(faces, params=None):
    payload = {"faces": [f.to_dict() for f in faces]}
    if params:
        payload["params"] = params
    return payload


def save_faces(path, faces, params=None):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(faces_payload(faces, params), f, ensure_ascii=False, indent=2)
