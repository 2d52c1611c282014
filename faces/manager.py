# faces/manager.py
from typing import Dict, List, Optional

from faces.cycles import extract_faces
from faces.graph import Graph
from faces.io import load_graph, faces_payload
from faces.locate import point_locate
from faces.neighbors import build_layers, face_by_id, find_neighbors, group_layers
from faces.prof import Prof


class PolygonManager:
    """
    Interior faces of one graph plus the interactive queries over them.

    Faces are extracted once, in the constructor, and kept as a tuple; a new
    graph means a new manager (see reload), never an in-place update.
    """

    def __init__(self, graph: Graph, strict: Optional[bool] = None,
                 locate_method: Optional[str] = None, prof: Optional[Prof] = None):
        self.graph = graph
        self.locate_method = locate_method
        self.prof = prof or Prof(enabled=False)
        self._faces = tuple(extract_faces(graph, strict=strict, prof=self.prof))

    @classmethod
    def from_data(cls, vertices, edges, **kwargs):
        return cls(Graph(vertices, edges), **kwargs)

    @classmethod
    def from_file(cls, path, **kwargs):
        return cls(load_graph(path), **kwargs)

    def reload(self, graph: Graph, **kwargs):
        kwargs.setdefault("locate_method", self.locate_method)
        return type(self)(graph, **kwargs)

    @property
    def faces(self):
        return self._faces

    def __len__(self):
        return len(self._faces)

    def __iter__(self):
        return iter(self._faces)

    def face(self, face_id):
        return face_by_id(self._faces, face_id)

    def point_locate(self, point, method: Optional[str] = None) -> Optional[int]:
        return point_locate(self._faces, point, method or self.locate_method)

    def neighbors_of(self, face_id) -> List[int]:
        return find_neighbors(self._faces, face_id)

    def neighbor_layers(self, start_face_id) -> Dict[int, List[int]]:
        return build_layers(self._faces, start_face_id)

    def layer_groups(self, start_face_id) -> List[List[int]]:
        return group_layers(self._faces, start_face_id)

    def all_neighbors(self) -> Dict[int, List[int]]:
        return {f.id: find_neighbors(self._faces, f.id) for f in self._faces}

    def to_dict(self):
        self.all_neighbors()
        return faces_payload(self._faces)
