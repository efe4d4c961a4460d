"""
ex02_vertex_walks.py
--------------------
Goal: Walk around vertices of a small open fan.
The centre vertex is interior (the walk closes); the corners sit on the
boundary (the walk reports where it stopped).
"""
from hemesh import HalfEdgeMesh, WalkEnd

def run_walk_demo():
    positions = [0.0, 0.0, 0.0,
                 1.0, 0.0, 0.0,
                 1.0, 1.0, 0.0,
                 0.0, 1.0, 0.0,
                 0.5, 0.5, 0.0]
    indices = [4, 0, 1,
               4, 1, 2,
               4, 2, 3,
               4, 3, 0]
    mesh = HalfEdgeMesh.build_from_geometry(positions, indices)

    for v in mesh.vertices():
        visited = []
        end = mesh.visit_vertex(v, lambda he: visited.append(mesh.destination(he)))
        fan = [mesh.destination(he) for he in mesh.outgoing_halfedges(v)]
        tag = "interior" if end is WalkEnd.CLOSED else end.name.lower()
        print(f"Vertex {v.id}: walk -> {visited} ({tag}), full fan -> {fan}")

if __name__ == "__main__":
    run_walk_demo()
