''' elements.py
    -----------
    The adjacency primitives of a half-edge mesh: Vertex, Face and HalfEdge,
    plus the Vector3 value type they carry.

    Elements never hold other elements directly. Every link is the integer
    id of an element in one of the mesh's arenas (vertex, face, half-edge
    lists), so a link is valid for as long as the owning mesh is alive.
'''
from typing import NamedTuple, Optional

import numpy as np

from .config import COORD_DTYPE


class Vector3(NamedTuple):
    ''' Plain 3-component value. Immutable, copied freely. '''
    x: float
    y: float
    z: float

    def to_array(self, dtype=COORD_DTYPE):
        ''' Returns the components as a numpy array. '''
        return np.array([self.x, self.y, self.z], dtype=dtype)


class Vertex:
    ''' A mesh vertex: geometric position and normal, plus one outgoing
    half-edge.

    The outgoing half-edge is assigned once, by the builder, when the first
    half-edge leaving this vertex is created. Which of the incident
    half-edges ends up here is not canonical; callers must not rely on it.
    A vertex that no triangle references keeps no outgoing half-edge.

    Attributes:
        id (int): Position of the vertex in the mesh's vertex arena.
        position (Vector3): Vertex coordinates.
        normal (Vector3): Stored normal (a placeholder unless set by caller).
    '''
    __slots__ = ['id', 'position', 'normal', '_edge']

    def __init__(self, vid, position, normal):
        self.id = int(vid)
        self.position = Vector3(*position)
        self.normal = Vector3(*normal)
        self._edge = None

    def outgoing_edge(self) -> Optional[int]:
        ''' Id of one half-edge leaving this vertex, None if isolated. '''
        return self._edge

    def is_isolated(self) -> bool:
        return self._edge is None

    def __repr__(self):
        return (f'Vertex(id = {self.id:4d}: pos = ({self.position.x:.4f}, '
                f'{self.position.y:.4f}, {self.position.z:.4f}), edge = {self._edge})')


class Face:
    ''' A triangular face, known by one half-edge on its boundary cycle. '''
    __slots__ = ['id', '_edge']

    def __init__(self, fid, edge=None):
        self.id = int(fid)
        self._edge = edge

    def boundary_edge(self) -> Optional[int]:
        return self._edge

    def __repr__(self):
        return f'Face(id = {self.id:4d}, edge = {self._edge})'


class HalfEdge:
    ''' A directed edge belonging to exactly one face.

    The half-edge has links to
      * its origin vertex
      * the oppositely directed half-edge across the same edge (pair);
        absent on the mesh boundary
      * the face it borders
      * the next half-edge going around that face

    `next` and `face` are absent only while the mesh is being built.
    '''
    __slots__ = ['id', '_origin', '_pair', '_face', '_next']

    def __init__(self, hid, origin):
        self.id = int(hid)
        self._origin = int(origin)
        self._pair = None
        self._face = None
        self._next = None

    def origin(self) -> int:
        return self._origin

    def pair(self) -> Optional[int]:
        return self._pair

    def face(self) -> Optional[int]:
        return self._face

    def next(self) -> Optional[int]:
        return self._next

    def is_boundary(self) -> bool:
        ''' True when no triangle lies across this half-edge. '''
        return self._pair is None

    def is_linked(self) -> bool:
        ''' True once the builder has set both `next` and `face`. '''
        return self._next is not None and self._face is not None

    def __repr__(self):
        return (f'HalfEdge(id = {self.id:4d}, origin = {self._origin}, '
                f'next = {self._next}, pair = {self._pair}, face = {self._face})')
