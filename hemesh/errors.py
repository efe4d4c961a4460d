''' errors.py
    ---------
    Exceptions raised while building or checking a half-edge mesh.
'''


class MeshError(Exception):
    ''' Base class for every error raised by hemesh. '''


class InputShapeError(MeshError, ValueError):
    ''' The flat position/index arrays do not describe a triangle soup.

        Raised before any mesh element is allocated: bad array lengths,
        non-integral or out-of-range indices, degenerate triangles.
    '''


class NonManifoldError(MeshError):
    ''' Two half-edges share the same directed (origin, destination) pair.

        This happens when more than two triangles meet at an edge, or when
        two neighbouring triangles are wound inconsistently.
    '''

    def __init__(self, origin, destination, message=None):
        self.origin = int(origin)
        self.destination = int(destination)
        if message is None:
            message = (f'Non-manifold geometry: directed edge '
                       f'{self.origin} -> {self.destination} defined twice')
        super().__init__(message)


class MeshLookupError(MeshError, IndexError):
    ''' An element id does not name a vertex, face or half-edge of the mesh. '''
