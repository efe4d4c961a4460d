"""
ex01_single_triangle.py
-----------------------
Goal: Build the smallest possible half-edge mesh and look at its links.
A lone triangle has three half-edges and none of them has a pair.
"""
from hemesh import HalfEdgeMesh

def run_triangle_demo():
    positions = [0.0, 0.0, 0.0,
                 1.0, 0.0, 0.0,
                 0.0, 1.0, 0.0]
    indices = [0, 1, 2]

    mesh = HalfEdgeMesh.build_from_geometry(positions, indices)
    print(mesh)

    print("\n--- Vertices ---")
    for v in mesh.vertices():
        print(f"  {v}")

    print("\n--- Half-Edges ---")
    for he in mesh.halfedges():
        print(f"  {he}  ->  dest = {mesh.destination(he)}, boundary = {he.is_boundary()}")

    print("\n--- Around Face 0 ---")
    n = mesh.visit_face(0, lambda he: print(f"  visit {he.id}: {he.origin()} -> {mesh.destination(he)}"))
    print(f"  visited {n} half-edges")

if __name__ == "__main__":
    run_triangle_demo()
