from faces.cycles import extract_faces
from faces.plot import plot_preview


def test_preview_is_png(hexagon):
    faces = extract_faces(hexagon)
    png = plot_preview(hexagon, faces, highlight=1, point=(0, 0.577), title="hexagon")
    assert png.startswith(b"\x89PNG")


def test_preview_of_empty_graph():
    from faces.graph import Graph
    assert plot_preview(Graph([], []), []).startswith(b"\x89PNG")
