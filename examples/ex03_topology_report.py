"""
ex03_topology_report.py
-----------------------
Goal: Build a closed tetrahedron and a non-manifold soup.
Print the topology report for the first; catch the error for the second.
"""
import logging

from hemesh import HalfEdgeMesh, MeshTopology, NonManifoldError, setup_logging

def run_report_demo():
    setup_logging(logging.INFO)

    positions = [0.0, 0.0, 0.0,
                 1.0, 0.0, 0.0,
                 0.0, 1.0, 0.0,
                 0.0, 0.0, 1.0]
    tet = [0, 2, 1,
           0, 1, 3,
           1, 2, 3,
           2, 0, 3]

    mesh = HalfEdgeMesh.build_from_geometry(positions, tet)
    print(MeshTopology(mesh).format_report())

    # Two triangles wound the same way across edge 0-1
    print("\n--- Non-Manifold Input ---")
    try:
        HalfEdgeMesh.build_from_geometry(positions, [0, 1, 2, 0, 1, 3])
    except NonManifoldError as err:
        print(f"Rejected: {err}")

if __name__ == "__main__":
    run_report_demo()
