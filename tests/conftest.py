"""
Shared meshes for the hemesh test suite.
"""
import pytest

from hemesh import HalfEdgeMesh


def _grid_soup(n):
    """ Flat (positions, indices) for an n x n grid of quads, 2 CCW triangles each. """
    positions = []
    for i in range(n + 1):
        for j in range(n + 1):
            positions += [float(j), float(i), 0.0]

    indices = []
    for i in range(n):
        for j in range(n):
            a = i * (n + 1) + j
            b = a + 1
            c = a + (n + 1)
            d = c + 1
            indices += [a, b, d, a, d, c]
    return positions, indices


@pytest.fixture
def triangle():
    return HalfEdgeMesh.build_from_geometry(
        [0.0, 0.0, 0.0,
         1.0, 0.0, 0.0,
         0.0, 1.0, 0.0],
        [0, 1, 2])


@pytest.fixture
def two_triangles():
    # Share the edge 0-1: 0->1 in the first, 1->0 in the second
    return HalfEdgeMesh.build_from_geometry(
        [0.0, 0.0, 0.0,
         1.0, 0.0, 0.0,
         0.5, 1.0, 0.0,
         0.5, -1.0, 0.0],
        [0, 1, 2, 1, 0, 3])


@pytest.fixture
def tetrahedron():
    return HalfEdgeMesh.build_from_geometry(
        [0.0, 0.0, 0.0,
         1.0, 0.0, 0.0,
         0.0, 1.0, 0.0,
         0.0, 0.0, 1.0],
        [0, 2, 1,
         0, 1, 3,
         1, 2, 3,
         2, 0, 3])


@pytest.fixture
def fan():
    # Unit square split into 4 triangles around the centre vertex 4
    return HalfEdgeMesh.build_from_geometry(
        [0.0, 0.0, 0.0,
         1.0, 0.0, 0.0,
         1.0, 1.0, 0.0,
         0.0, 1.0, 0.0,
         0.5, 0.5, 0.0],
        [4, 0, 1,
         4, 1, 2,
         4, 2, 3,
         4, 3, 0])


@pytest.fixture
def grid():
    return HalfEdgeMesh.build_from_geometry(*_grid_soup(3))


@pytest.fixture
def grid_soup():
    """ Factory: grid_soup(n) -> (positions, indices) of an n x n grid. """
    return _grid_soup


@pytest.fixture
def bowtie():
    # Two triangles touching only at vertex 0
    return HalfEdgeMesh.build_from_geometry(
        [0.0, 0.0, 0.0,
         1.0, 0.0, 0.0,
         1.0, 1.0, 0.0,
         -1.0, 0.0, 0.0,
         -1.0, -1.0, 0.0],
        [0, 1, 2, 0, 3, 4])


@pytest.fixture
def double_tetrahedron():
    # Two closed tetrahedra sharing only vertex 0
    return HalfEdgeMesh.build_from_geometry(
        [0.0, 0.0, 0.0,
         1.0, 0.0, 0.0,
         0.0, 1.0, 0.0,
         0.0, 0.0, 1.0,
         -1.0, 0.0, 0.0,
         0.0, -1.0, 0.0,
         0.0, 0.0, -1.0],
        [0, 2, 1, 0, 1, 3, 1, 2, 3, 2, 0, 3,
         0, 5, 4, 0, 4, 6, 4, 5, 6, 5, 0, 6])
