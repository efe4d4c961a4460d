''' mesh.py
    -------
    The HalfEdgeMesh: owner of every vertex, face and half-edge, builder
    from flat triangle-soup arrays, and the traversal helpers.
'''
import logging
from enum import Enum

import numpy as np

from .config import COORD_DTYPE, INDEX_DTYPE, DEFAULT_NORMAL
from .elements import Vertex, Face, HalfEdge
from .errors import MeshError, MeshLookupError, InputShapeError, NonManifoldError
from .index import DirectedEdgeIndex

logger = logging.getLogger(__name__)


# --- Walk Results ---
class WalkEnd(Enum):
    ''' How an around-vertex walk finished. '''
    CLOSED = 1      # came back to the starting half-edge
    BOUNDARY = 2    # met a half-edge without a pair
    ISOLATED = 3    # the vertex has no outgoing half-edge


# --- Input Checks ---
def _as_triangle_soup(positions, indices, dtype):
    ''' Validates the flat arrays and returns them as (n, 3) numpy arrays.

    Nothing is allocated for the mesh until this passes.
    '''
    try:
        pos = np.asarray(positions, dtype=dtype).reshape(-1)
    except (ValueError, TypeError) as err:
        raise InputShapeError(f'Positions are not a flat numeric array: {err}') from err
    if pos.size % 3 != 0:
        raise InputShapeError(f'Position array length {pos.size} is not a multiple of 3')
    n_vertices = pos.size // 3

    try:
        idx = np.asarray(indices).reshape(-1)
    except (ValueError, TypeError) as err:
        raise InputShapeError(f'Indices are not a flat numeric array: {err}') from err
    if idx.size % 3 != 0:
        raise InputShapeError(f'Index array length {idx.size} is not a multiple of 3')
    if idx.size and not np.issubdtype(idx.dtype, np.integer):
        raise InputShapeError(f'Indices must be integers, got dtype {idx.dtype}')

    # Range check in the source dtype; large unsigned values must not wrap
    if idx.size:
        lo, hi = int(idx.min()), int(idx.max())
        if lo < 0 or hi >= n_vertices:
            bad = lo if lo < 0 else hi
            raise InputShapeError(f'Vertex index {bad} out of range [0, {n_vertices})')

    tris = idx.astype(INDEX_DTYPE).reshape(-1, 3)
    degenerate = ((tris[:, 0] == tris[:, 1]) |
                  (tris[:, 1] == tris[:, 2]) |
                  (tris[:, 2] == tris[:, 0]))
    if degenerate.any():
        t = int(np.flatnonzero(degenerate)[0])
        raise InputShapeError(f'Triangle {t} is degenerate: vertices {tris[t].tolist()} '
                              'repeat an index')

    return pos.reshape(-1, 3), tris


# --- The Mesh Class ---
class HalfEdgeMesh:
    ''' Triangle mesh in half-edge form.

    The mesh owns three arenas (lists) of vertices, faces and half-edges.
    Elements refer to each other by arena index only. The arenas are filled
    once, by `build_from_geometry`, and never shrink afterwards, so every
    stored index stays valid for the life of the mesh; dropping the mesh
    drops the whole graph at once.

    After construction the mesh is read-only. Traversals keep no state on
    the mesh, so they can be run repeatedly or from several readers.
    '''

    def __init__(self, dtype=COORD_DTYPE):
        self.dtype = np.dtype(dtype)
        self._vertices = []
        self._faces = []
        self._halfedges = []
        self._index = DirectedEdgeIndex()
        # Outgoing half-edge count per vertex
        self._valence = []

    # --- Construction ---
    @classmethod
    def build_from_geometry(cls, positions, indices, dtype=COORD_DTYPE):
        """
        Builds a half-edge mesh from a flat triangle soup.

        Args:
            positions: flat sequence of coordinates, 3 per vertex.
            indices: flat sequence of vertex indices, 3 per triangle.
            dtype: numpy floating type used to store coordinates.

        Raises:
            InputShapeError: the arrays are malformed (raised before any
                element is created).
            NonManifoldError: a directed edge occurs twice. The partly built
                mesh is discarded and never reaches the caller.
        """
        pos, tris = _as_triangle_soup(positions, indices, dtype)
        logger.debug(f"Building half-edge mesh from {len(pos)} vertices, {len(tris)} triangles")

        mesh = cls(dtype=dtype)
        try:
            # 1. One vertex per position triple
            for row in pos.tolist():
                mesh._add_vertex(row, DEFAULT_NORMAL)

            # 2. Three half-edges and a face per triangle
            for i0, i1, i2 in tris.tolist():
                mesh._add_triangle(i0, i1, i2)

            # 3. Pair opposite half-edges now that every face exists
            mesh._index.resolve_pairs(mesh._halfedges)
        except NonManifoldError as err:
            logger.warning(f"Mesh construction aborted: {err}")
            raise

        logger.info(f"Built half-edge mesh: {mesh.n_vertices} vertices, "
                    f"{mesh.n_faces} faces, {mesh.n_halfedges} half-edges")
        return mesh

    def _add_vertex(self, position, normal):
        v = Vertex(len(self._vertices), position, normal)
        self._vertices.append(v)
        self._valence.append(0)
        return v

    def _add_halfedge(self, origin, destination):
        """ Creates the half-edge origin -> destination and registers its key. """
        he = HalfEdge(len(self._halfedges), origin)
        self._index.insert(origin, destination, he.id)
        self._halfedges.append(he)
        self._valence[origin] += 1

        # First half-edge seen leaving a vertex becomes its representative;
        # never overwritten afterwards.
        v = self._vertices[origin]
        if v._edge is None:
            v._edge = he.id
        return he

    def _add_triangle(self, i0, i1, i2):
        e01 = self._add_halfedge(i0, i1)
        e12 = self._add_halfedge(i1, i2)
        e20 = self._add_halfedge(i2, i0)

        # Close the cycle around the face
        e01._next = e12.id
        e12._next = e20.id
        e20._next = e01.id

        f = Face(len(self._faces), e01.id)
        self._faces.append(f)
        for he in (e01, e12, e20):
            he._face = f.id
        return f

    # --- Counts ---
    @property
    def n_vertices(self):
        return len(self._vertices)

    @property
    def n_faces(self):
        return len(self._faces)

    @property
    def n_halfedges(self):
        return len(self._halfedges)

    # --- Element Access ---
    def vertex(self, vid) -> Vertex:
        return self._get(self._vertices, vid, 'Vertex')

    def face(self, fid) -> Face:
        return self._get(self._faces, fid, 'Face')

    def halfedge(self, hid) -> HalfEdge:
        return self._get(self._halfedges, hid, 'Half-edge')

    @staticmethod
    def _get(arena, i, kind):
        i = int(i)
        if i < 0 or i >= len(arena):
            raise MeshLookupError(f'{kind} {i} does not exist')
        return arena[i]

    def vertices(self):
        return iter(self._vertices)

    def faces(self):
        return iter(self._faces)

    def halfedges(self):
        return iter(self._halfedges)

    def position(self, vid):
        return self.vertex(vid).position

    def normal(self, vid):
        return self.vertex(vid).normal

    @property
    def positions(self):
        ''' (n_vertices, 3) array of vertex positions. '''
        return np.array([v.position for v in self._vertices],
                        dtype=self.dtype).reshape(-1, 3)

    @property
    def normals(self):
        ''' (n_vertices, 3) array of vertex normals. '''
        return np.array([v.normal for v in self._vertices],
                        dtype=self.dtype).reshape(-1, 3)

    # --- Adjacency ---
    def _he(self, he):
        ''' Accepts a HalfEdge or its id. '''
        return he if isinstance(he, HalfEdge) else self.halfedge(he)

    def destination(self, he) -> int:
        ''' Id of the vertex a half-edge points to. '''
        return self._halfedges[self._he(he)._next]._origin

    def previous(self, he) -> int:
        ''' Id of the half-edge before this one around its (triangular) face. '''
        nxt = self._halfedges[self._he(he)._next]
        return nxt._next

    def find_halfedge(self, origin, destination):
        ''' Returns the half-edge origin -> destination, or None. '''
        hid = self._index.find(origin, destination)
        return None if hid is None else self._halfedges[hid]

    def boundary_halfedges(self):
        ''' Iterates over the half-edges that have no pair. '''
        for he in self._halfedges:
            if he._pair is None:
                yield he

    def is_boundary_vertex(self, v) -> bool:
        '''
        True unless the vertex is surrounded by a single closed fan of faces.

        By convention a vertex with no incident face is on the boundary, and
        so is a vertex where several fans meet only at that vertex.
        '''
        v = v if isinstance(v, Vertex) else self.vertex(v)
        visited = []
        if self.visit_vertex(v, visited.append) is not WalkEnd.CLOSED:
            return True
        return len(visited) != self._valence[v.id]

    # --- Traversal ---
    def face_halfedges(self, face):
        '''
        Circulates over the half-edges of a face, starting at its boundary
        edge and following `next` until the walk is back at the start.
        '''
        f = face if isinstance(face, Face) else self.face(face)
        start = f._edge
        if start is None:
            return
        he = self._halfedges[start]
        while True:
            yield he
            he = self._halfedges[he._next]
            if he.id == start:
                break

    def face_vertices(self, face):
        ''' Circulates over the vertex ids of a face. '''
        for he in self.face_halfedges(face):
            yield he._origin

    def visit_face(self, face, visitor) -> int:
        """ Calls `visitor` on each half-edge around a face. Returns the count. """
        count = 0
        for he in self.face_halfedges(face):
            visitor(he)
            count += 1
        return count

    def visit_vertex(self, vertex, visitor) -> WalkEnd:
        """
        Walks the half-edges leaving a vertex, calling `visitor` on each.

        From an outgoing half-edge e the walk steps to next(pair(e)), the
        following outgoing half-edge in rotational order. It stops when it
        returns to the starting half-edge (WalkEnd.CLOSED) or when a
        half-edge has no pair (WalkEnd.BOUNDARY). In the boundary case only
        the half-edges on one side of the starting one have been visited;
        use `outgoing_halfedges` for the whole fan.
        """
        v = vertex if isinstance(vertex, Vertex) else self.vertex(vertex)
        start = v._edge
        if start is None:
            return WalkEnd.ISOLATED

        he = self._halfedges[start]
        while True:
            visitor(he)
            if he._pair is None:
                return WalkEnd.BOUNDARY
            he = self._halfedges[self._halfedges[he._pair]._next]
            if he.id == start:
                return WalkEnd.CLOSED

    def outgoing_halfedges(self, vertex):
        """
        Iterates over every half-edge leaving a vertex.

        Interior vertices yield the same sequence as `visit_vertex`. When
        the forward walk meets the boundary, the fan is finished by
        sweeping back from the start via pair(previous(e)). If triangles
        also touch the vertex outside that fan (fans sharing only this
        vertex), the remaining fans follow, each found by scanning for a
        half-edge leaving the vertex that has not been yielded yet.
        """
        v = vertex if isinstance(vertex, Vertex) else self.vertex(vertex)
        if v._edge is None:
            return

        seen = set()
        for he in self._fan(v._edge):
            seen.add(he.id)
            yield he
        if len(seen) == self._valence[v.id]:
            return

        for other in self._halfedges:
            if other._origin != v.id or other.id in seen:
                continue
            for he in self._fan(other.id):
                seen.add(he.id)
                yield he

    def _fan(self, start):
        """ Half-edges of the fan containing half-edge `start`, same origin. """
        he = self._halfedges[start]
        while True:
            yield he
            if he._pair is None:
                break
            he = self._halfedges[self._halfedges[he._pair]._next]
            if he.id == start:
                return

        # Boundary reached going forward; walk the other way
        he = self._halfedges[start]
        while True:
            prev = self._halfedges[self.previous(he)]
            if prev._pair is None:
                return
            he = self._halfedges[prev._pair]
            yield he

    # --- Checks ---
    def validate(self):
        """
        Re-checks the structural invariants of the mesh.

        Raises MeshError describing the first violation found, otherwise
        returns True.
        """
        hes = self._halfedges
        for he in hes:
            if not he.is_linked():
                raise MeshError(f'Half-edge {he.id} is not linked')

        seen = set()
        for he in hes:
            # 1. Triangle cycle
            a = hes[he._next]
            b = hes[a._next]
            if b._next != he.id:
                raise MeshError(f'Half-edge {he.id} is not on a 3-cycle')
            if a._face != he._face or b._face != he._face:
                raise MeshError(f'Half-edge {he.id} cycle spans several faces')

            # 2. Pair symmetry
            dest = a._origin
            if he._pair is not None:
                twin = hes[he._pair]
                if twin._pair != he.id:
                    raise MeshError(f'Pair of half-edge {he.id} is not symmetric')
                if twin._origin != dest:
                    raise MeshError(f'Pair of half-edge {he.id} does not start at its destination')

            # 3. Directed edges are unique
            key = (he._origin, dest)
            if key in seen:
                raise MeshError(f'Directed edge {key[0]} -> {key[1]} occurs twice')
            seen.add(key)

        for f in self._faces:
            if f._edge is None or hes[f._edge]._face != f.id:
                raise MeshError(f'Face {f.id} boundary edge does not belong to it')

        for v in self._vertices:
            if v._edge is not None and hes[v._edge]._origin != v.id:
                raise MeshError(f'Vertex {v.id} edge does not leave the vertex')

        return True

    def __repr__(self):
        return (f'HalfEdgeMesh(vertices={self.n_vertices}, faces={self.n_faces}, '
                f'halfedges={self.n_halfedges})')


def build_from_geometry(positions, indices, dtype=COORD_DTYPE):
    ''' Shortcut for HalfEdgeMesh.build_from_geometry. '''
    return HalfEdgeMesh.build_from_geometry(positions, indices, dtype=dtype)
