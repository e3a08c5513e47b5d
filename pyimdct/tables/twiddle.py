"""
Precomputed coefficient tables for the IMDCT and its DCT-II engines.
All tables are generated in double precision; callers cast them to their
sample precision.
"""

import math
import numpy as np
from typing import List


def generate_twiddle_table(n: int) -> List[float]:
    """
    Generates the IMDCT pre-rotation table for an n-point transform.
    Formula: Table[i] = 2.0 * cos(pi / (4 * n) * (2 * i + 1)) for i from 0 to n - 1.
    """
    c = math.pi / (4.0 * n)
    return [2.0 * math.cos(c * (2 * i + 1)) for i in range(n)]


def generate_lee_factors(m: int) -> List[float]:
    """
    Generates the odd-half butterfly factors of one Lee DCT-II stage of length m.
    Formula: Factor[i] = 1.0 / (2.0 * cos((i + 0.5) * pi / m)) for i from 0 to m/2 - 1.
    """
    return [1.0 / (2.0 * math.cos((i + 0.5) * math.pi / m)) for i in range(m // 2)]


def generate_dct_ii_matrix(n: int) -> np.ndarray:
    """
    Generates the unnormalised n x n DCT-II matrix.

    The matrix T has elements:
        T[k, j] = cos((2j + 1) * k * pi / (2n))

    so that T @ x is the DCT-II of x without any orthonormal scaling.
    """
    k = np.arange(n, dtype=np.float64)[:, np.newaxis]
    j = np.arange(n, dtype=np.float64)[np.newaxis, :]
    return np.cos((2.0 * j + 1.0) * k * np.pi / (2.0 * n))


def generate_fft_rotation(n: int) -> np.ndarray:
    """
    Generates the post-FFT rotation used by the FFT-based DCT-II.
    Formula: Rotation[k] = exp(-i * pi * k / (2 * n)) for k from 0 to n - 1.
    """
    return np.exp(-1j * np.pi * np.arange(n, dtype=np.float64) / (2.0 * n))
