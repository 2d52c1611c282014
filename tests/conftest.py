import math

import matplotlib
import pytest

matplotlib.use("Agg")

from faces.graph import Graph

SQ3 = math.sqrt(3)


@pytest.fixture
def square():
    """Unit 2x2 square, one interior face."""
    return Graph([[0, 0], [2, 0], [2, 2], [0, 2]],
                 [[0, 1], [1, 2], [2, 3], [3, 0]])


@pytest.fixture
def triangle():
    return Graph([[0, 0], [2, 0], [1, 2]], [[0, 1], [1, 2], [2, 0]])


@pytest.fixture
def two_triangles():
    """Two disjoint triangles side by side."""
    return Graph([[0, 0], [2, 0], [1, 2], [3, 0], [5, 0], [4, 2]],
                 [[0, 1], [1, 2], [2, 0], [3, 4], [4, 5], [5, 3]])


@pytest.fixture
def hexagon():
    """Regular hexagon split into six triangles by spokes to the centre (vertex 6)."""
    vertices = [[1, 0], [2, SQ3], [1, 2 * SQ3], [-1, 2 * SQ3], [-2, SQ3], [-1, 0],
                [0, SQ3]]
    edges = [[0, 1], [1, 2], [2, 3], [3, 4], [4, 5], [5, 0],
             [0, 6], [1, 6], [2, 6], [3, 6], [4, 6], [5, 6]]
    return Graph(vertices, edges)


@pytest.fixture
def notched():
    """Non-convex octagon with an inner quad hanging off it: 12 vertices, 16 edges."""
    vertices = [[1, 1], [4, 1], [6, 2], [6, 4], [4, 5], [1, 5], [0, 4], [0, 2],
                [2, 2], [3, 2], [3, 4], [2, 4]]
    edges = [[0, 1], [1, 2], [2, 3], [3, 4], [4, 5], [5, 6], [6, 7], [7, 0],
             [7, 8], [8, 9], [9, 1], [2, 10], [10, 11], [11, 3], [8, 11], [9, 10]]
    return Graph(vertices, edges)


@pytest.fixture
def dart():
    """
    Arrowhead 0-1-2-3 with its reflex vertex 1 pointing in, plus chord 0-2
    running below it: the chord closes a triangle outside the arrowhead.
    """
    return Graph([[0, 0], [2, 1], [4, 0], [2, 3]],
                 [[0, 1], [1, 2], [2, 3], [3, 0], [0, 2]])


@pytest.fixture
def bowtie():
    """Two triangles touching only at vertex 0."""
    return Graph([[0, 0], [1, 1], [1, -1], [-1, 1], [-1, -1]],
                 [[0, 1], [1, 2], [2, 0], [0, 3], [3, 4], [4, 0]])


@pytest.fixture
def spiked():
    """4x2 rectangle split at x=2 by edge 1-4, spike 4-6 hanging into the left half."""
    return Graph([[0, 0], [2, 0], [4, 0], [4, 2], [2, 2], [0, 2], [1, 1]],
                 [[0, 1], [1, 2], [2, 3], [3, 4], [4, 5], [5, 0], [1, 4], [4, 6]])


@pytest.fixture
def bridged_hole():
    """6x6 square with a 2x2 square hole, tied to the outer corner by edge 0-4."""
    return Graph([[0, 0], [6, 0], [6, 6], [0, 6], [2, 2], [4, 2], [4, 4], [2, 4]],
                 [[0, 1], [1, 2], [2, 3], [3, 0], [4, 5], [5, 6], [6, 7], [7, 4],
                  [0, 4]])


@pytest.fixture
def grid2x2():
    """3x3 lattice of vertices: four unit squares."""
    vertices = [[x, y] for y in range(3) for x in range(3)]
    edges = []
    for y in range(3):
        for x in range(3):
            i = 3 * y + x
            if x < 2:
                edges.append([i, i + 1])
            if y < 2:
                edges.append([i, i + 3])
    return Graph(vertices, edges)
