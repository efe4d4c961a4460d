''' config.py
    ---------
    Package-wide constants.

    COORD_DTYPE is the default coordinate type used when positions are
    stored; any numpy floating dtype can be passed to the builder instead.
'''
import numpy as np

COORD_DTYPE = np.float32
INDEX_DTYPE = np.int64

# Placeholder normal given to every vertex; normals are stored, not computed.
DEFAULT_NORMAL = (1.0, 0.0, 0.0)

LOGGER_NAME = "hemesh"
