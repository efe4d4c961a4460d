"""
hemesh/topology.py
------------------
Tools for inspecting the connectivity of a built half-edge mesh.
Counts boundary half-edges, undirected edges, isolated vertices and the
Euler characteristic.
"""
import numpy as np


class MeshTopology:
    """
    Inspector class for a HalfEdgeMesh object.

    Usage:
        inspector = MeshTopology(mesh)
        inspector.analyze()
        print(inspector.format_report())
    """
    def __init__(self, mesh):
        self.mesh = mesh
        # Metric Storage
        self.boundary_mask = np.zeros(0, dtype=bool)
        self.valence = np.zeros(0, dtype=np.int64)

        self._analyzed = False

    def analyze(self):
        """
        Iterates through all half-edges and collects per-element data.
        """
        mesh = self.mesh
        self.boundary_mask = np.array([he.is_boundary() for he in mesh.halfedges()],
                                      dtype=bool)
        origins = np.array([he.origin() for he in mesh.halfedges()], dtype=np.int64)

        # Outgoing half-edges per vertex
        self.valence = np.bincount(origins, minlength=mesh.n_vertices)

        self._analyzed = True
        return self

    def _require(self):
        if not self._analyzed:
            self.analyze()

    @property
    def n_boundary_halfedges(self):
        self._require()
        return int(self.boundary_mask.sum())

    @property
    def n_edges(self):
        ''' Undirected edges: each pair counts once, each boundary half-edge once. '''
        self._require()
        n_paired = len(self.boundary_mask) - self.n_boundary_halfedges
        return n_paired // 2 + self.n_boundary_halfedges

    @property
    def n_isolated_vertices(self):
        self._require()
        return int(np.count_nonzero(self.valence == 0))

    @property
    def euler_characteristic(self):
        ''' V - E + F '''
        return self.mesh.n_vertices - self.n_edges + self.mesh.n_faces

    @property
    def is_closed(self):
        ''' True when every half-edge has a pair (no boundary). '''
        return self.mesh.n_halfedges > 0 and self.n_boundary_halfedges == 0

    def summary(self):
        """ Returns the metrics as a plain dict. """
        self._require()
        return {
            'n_vertices': self.mesh.n_vertices,
            'n_faces': self.mesh.n_faces,
            'n_halfedges': self.mesh.n_halfedges,
            'n_edges': self.n_edges,
            'n_boundary_halfedges': self.n_boundary_halfedges,
            'n_isolated_vertices': self.n_isolated_vertices,
            'euler_characteristic': self.euler_characteristic,
            'is_closed': self.is_closed,
            'max_valence': int(self.valence.max()) if self.valence.size else 0,
        }

    def format_report(self):
        """ Returns a short text summary. """
        s = self.summary()
        lines = [
            f"--- Mesh Topology Report ({s['n_faces']} Faces) ---",
            f"Vertices:   {s['n_vertices']}  (isolated: {s['n_isolated_vertices']})",
            f"Edges:      {s['n_edges']}  (half-edges: {s['n_halfedges']})",
            f"Boundary:   {s['n_boundary_halfedges']} half-edges  "
            + ("[OK] Closed" if s['is_closed'] else "[~] Open"),
            f"Euler char: {s['euler_characteristic']}",
        ]
        return "\n".join(lines)
