"""
Global constants for the pyimdct transforms.
These constants bound the supported transform sizes and select the default
sample precision and DCT-II strategy used when none is given.
"""

import numpy as np

MAX_IMDCT_SIZE = 8192
MIN_IMDCT_SIZE = 2
DEFAULT_SAMPLE_DTYPE = np.float32
DEFAULT_DCT_ENGINE = "lee"
REFERENCE_TOLERANCE = 1e-5
MAX_MATRIX_DCT_SIZE = 1024
