"""
DCT-II engines used by the IMDCT.
Every engine computes the unnormalised forward DCT-II

    X[k] = sum_n x[n] * cos(pi * (2n + 1) * k / (2N))

in place over a buffer of exactly N samples, N a power of two. The IMDCT only
relies on dct_ii_inplace(), so strategies are interchangeable.
"""

from typing import Dict, Type, Union

import numpy as np

from pyimdct.common.constants import MAX_IMDCT_SIZE, MAX_MATRIX_DCT_SIZE
from pyimdct.common.errors import ConfigurationError, PreconditionViolation
from pyimdct.common.utils import ilog2, is_power_of_two
from pyimdct.tables.twiddle import (
    generate_dct_ii_matrix,
    generate_fft_rotation,
    generate_lee_factors,
)


class DctII:
    """
    Base class for an N-point in-place DCT-II.
    Subclasses precompute their tables in __init__ and implement _transform().
    """

    max_size = MAX_IMDCT_SIZE

    def __init__(self, n: int):
        if not is_power_of_two(n):
            raise ConfigurationError(f"DCT-II size must be a power of two, got {n!r}")
        if n > self.max_size:
            raise ConfigurationError(
                f"{type(self).__name__} supports at most {self.max_size} points, got {n}"
            )
        self.n = n

    def dct_ii_inplace(self, buf: np.ndarray) -> None:
        """
        Computes the DCT-II of buf and stores it back into buf.

        Args:
            buf: 1-D NumPy array of exactly n samples (modified in-place)
        """
        if not isinstance(buf, np.ndarray) or buf.ndim != 1:
            raise PreconditionViolation("DCT-II buffer must be a 1-D numpy array")
        if len(buf) != self.n:
            raise PreconditionViolation(
                f"DCT-II buffer must hold {self.n} samples, got {len(buf)}"
            )
        # Work in double precision, store back at the buffer's precision
        buf[:] = self._transform(buf.astype(np.float64))

    def _transform(self, x: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class LeeDctII(DctII):
    """
    Fast recursive DCT-II (Byeong Gi Lee, 1984), O(N log N).

    Each stage splits the input into a sum half (alpha) and a scaled
    difference half (beta), transforms both and interleaves the results.
    """

    def __init__(self, n: int):
        super().__init__(n)
        # One factor table per stage length: n, n/2, ..., 2
        self.factors: Dict[int, np.ndarray] = {}
        for stage in range(ilog2(n)):
            m = n >> stage
            self.factors[m] = np.array(generate_lee_factors(m), dtype=np.float64)

    def _transform(self, x: np.ndarray) -> np.ndarray:
        m = len(x)
        if m == 1:
            return x

        half = m // 2
        rev = x[::-1]
        alpha = self._transform(x[:half] + rev[:half])
        beta = self._transform((x[:half] - rev[:half]) * self.factors[m])

        out = np.empty(m, dtype=np.float64)
        out[0::2] = alpha
        out[1:-1:2] = beta[:-1] + beta[1:]
        out[-1] = beta[-1]
        return out


class FftDctII(DctII):
    """
    DCT-II through one complex FFT of the same length (Makhoul's reordering).
    """

    def __init__(self, n: int):
        super().__init__(n)
        self.rotation = generate_fft_rotation(n)
        self.reordered = np.zeros(n, dtype=np.float64)

    def _transform(self, x: np.ndarray) -> np.ndarray:
        half = (self.n + 1) // 2
        # Even samples ascending, odd samples descending
        self.reordered[:half] = x[0::2]
        self.reordered[half:] = x[1::2][::-1]
        return (np.fft.fft(self.reordered) * self.rotation).real


class MatrixDctII(DctII):
    """
    Direct DCT-II as a dense matrix product, O(N^2).
    Intended for small transforms and for cross-checking the fast engines.
    """

    max_size = MAX_MATRIX_DCT_SIZE

    def __init__(self, n: int):
        super().__init__(n)
        self.matrix = generate_dct_ii_matrix(n)

    def _transform(self, x: np.ndarray) -> np.ndarray:
        return self.matrix @ x


DCT_ENGINES: Dict[str, Type[DctII]] = {
    "lee": LeeDctII,
    "fft": FftDctII,
    "matrix": MatrixDctII,
}


def get_dct_engine(engine: Union[str, Type[DctII]]) -> Type[DctII]:
    """
    Resolves a DCT-II engine name or class to an engine class.

    Args:
        engine: A key of DCT_ENGINES or a DctII subclass.

    Returns:
        The DctII subclass to instantiate.
    """
    if isinstance(engine, str):
        try:
            return DCT_ENGINES[engine]
        except KeyError:
            raise ConfigurationError(
                f"Unknown DCT-II engine {engine!r}, expected one of {sorted(DCT_ENGINES)}"
            ) from None
    if isinstance(engine, type) and issubclass(engine, DctII):
        return engine
    raise ConfigurationError(f"Not a DCT-II engine: {engine!r}")
