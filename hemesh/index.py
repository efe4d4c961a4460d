''' index.py
    --------
    Directed-edge lookup used to pair half-edges after all faces exist.

    A triangle's half-edges are created before the neighbouring triangle
    that shares the edge, so pairs cannot be linked while faces are built.
    The builder records every directed edge here, then resolves all pairs
    in a second pass.
'''
import logging

from .errors import MeshError, NonManifoldError

logger = logging.getLogger(__name__)


class DirectedEdgeIndex:
    ''' Maps an ordered (origin, destination) vertex pair to a half-edge id.

    Keys are ordered, unlike an undirected edge registry: (a, b) and (b, a)
    are different entries and belong to the two halves of the same edge.
    A key may be inserted only once; a second insert means the input is
    non-manifold or inconsistently wound.
    '''

    def __init__(self):
        self._lookup = {}

    def __len__(self):
        return len(self._lookup)

    def __contains__(self, key):
        return tuple(key) in self._lookup

    def insert(self, origin, destination, halfedge_id):
        """ Records the half-edge created for origin -> destination. """
        key = (int(origin), int(destination))
        if key in self._lookup:
            raise NonManifoldError(*key)
        self._lookup[key] = int(halfedge_id)

    def find(self, origin, destination):
        """ Returns the half-edge id for origin -> destination, or None. """
        return self._lookup.get((int(origin), int(destination)))

    def resolve_pairs(self, halfedges):
        """
        Links every unpaired half-edge to the half-edge running the other way.

        `halfedges` is the mesh's half-edge arena; every entry must already
        have its `next` link. Pairs are always set on both sides at once.
        A half-edge with no reverse entry is left unpaired: it lies on the
        boundary, which is not an error.

        Returns the number of pairs linked.
        """
        n_linked = 0
        for he in halfedges:
            if he._pair is not None:
                continue
            if he._next is None:
                raise MeshError(f'Half-edge {he.id} has no next; '
                                'faces must be built before pairs are resolved')

            # destination(e) = origin(next(e))
            destination = halfedges[he._next]._origin
            twin_id = self._lookup.get((destination, he._origin))
            if twin_id is None:
                continue

            twin = halfedges[twin_id]
            he._pair = twin.id
            twin._pair = he.id
            n_linked += 1

        logger.debug(f"Resolved {n_linked} half-edge pairs "
                     f"({len(halfedges) - 2 * n_linked} boundary half-edges)")
        return n_linked
