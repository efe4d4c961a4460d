# hemesh/__init__.py

__version__ = "1.0"

# Import Primitives
from .elements import Vector3, Vertex, Face, HalfEdge

# Import the Mesh class
from .index import DirectedEdgeIndex
from .mesh import HalfEdgeMesh, WalkEnd, build_from_geometry

from .errors import MeshError, MeshLookupError, InputShapeError, NonManifoldError
from .topology import MeshTopology
from .logging_config import setup_logging
