"""
Closed-form O(N^2) transforms used to validate the fast paths.
"""

import numpy as np


def imdct_direct(src, scale: float = 1.0) -> np.ndarray:
    """
    Computes the 2N-point IMDCT of N coefficients straight from its definition:

        y[i] = scale * sum_j src[j] * cos(pi / (2M) * (2i + 1 + N) * (2j + 1))

    for i in [0, M), where M = 2N is the output length.

    Evaluated in double precision.

    Args:
        src: N spectral coefficients
        scale: Multiplier applied to every output sample

    Returns:
        float64 array of 2N time-domain samples.
    """
    x = np.asarray(src, dtype=np.float64)
    n = len(x)
    i = np.arange(2 * n, dtype=np.float64)[:, np.newaxis]
    j = np.arange(n, dtype=np.float64)[np.newaxis, :]
    basis = np.cos(np.pi / (4.0 * n) * (2.0 * i + 1.0 + n) * (2.0 * j + 1.0))
    return scale * (basis @ x)


def dct_ii_direct(src) -> np.ndarray:
    """
    Unnormalised DCT-II from its definition, in double precision.
    """
    x = np.asarray(src, dtype=np.float64)
    n = len(x)
    k = np.arange(n, dtype=np.float64)[:, np.newaxis]
    j = np.arange(n, dtype=np.float64)[np.newaxis, :]
    return np.cos(np.pi * (2.0 * j + 1.0) * k / (2.0 * n)) @ x
