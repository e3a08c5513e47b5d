"""
Implements the Inverse Modified Discrete Cosine Transform (IMDCT).

The N-point IMDCT (N coefficients in, 2N samples out) is computed in terms of
an N-point DCT-IV, which is itself derived from an N-point DCT-II:

    Mu-Huo Cheng and Yu-Hsin Hsu, "Fast IMDCT and MDCT algorithms - a matrix
    approach," IEEE Transactions on Signal Processing, vol. 51, no. 1,
    pp. 221-229, 2003.

    Tan Li, R. Zhang, R. Yang, Heyun Huang and Fuhuei Lin, "A unified computing
    kernel for MDCT/IMDCT in modern audio coding standards," ISCIT 2007,
    pp. 546-550.

No windowing or overlap-add is performed here.
"""

from typing import Dict, Iterable, List, Type, Union

import numpy as np

from pyimdct.common.constants import (
    DEFAULT_DCT_ENGINE,
    DEFAULT_SAMPLE_DTYPE,
    MAX_IMDCT_SIZE,
    MIN_IMDCT_SIZE,
)
from pyimdct.common.debug_logger import log_debug
from pyimdct.common.errors import ConfigurationError, PreconditionViolation
from pyimdct.common.utils import alternating_signs, is_power_of_two
from pyimdct.core.dct import DctII, get_dct_engine
from pyimdct.tables.twiddle import generate_twiddle_table


class Imdct:
    """
    N-point IMDCT with a fixed size, a precomputed twiddle table and an owned
    DCT-II engine. Instances keep no per-call state.
    """

    def __init__(
        self,
        n: int,
        dct_engine: Union[str, Type[DctII]] = DEFAULT_DCT_ENGINE,
        dtype=DEFAULT_SAMPLE_DTYPE,
    ):
        """
        Instantiates an N-point IMDCT.

        Args:
            n: Number of input coefficients; a power of two in
               [MIN_IMDCT_SIZE, MAX_IMDCT_SIZE]
            dct_engine: DCT-II engine name ("lee", "fft", "matrix") or class
            dtype: Sample precision the twiddle table is stored at
        """
        if not is_power_of_two(n):
            raise ConfigurationError(f"IMDCT size must be a power of two, got {n!r}")
        if n > MAX_IMDCT_SIZE:
            raise ConfigurationError(f"maximum of {MAX_IMDCT_SIZE}-point IMDCT, got {n}")
        if n < MIN_IMDCT_SIZE:
            raise ConfigurationError(f"minimum of {MIN_IMDCT_SIZE}-point IMDCT, got {n}")

        self.n = n
        self.dtype = np.dtype(dtype)

        # Computed in double precision, stored at sample precision
        self.table = np.array(generate_twiddle_table(n), dtype=np.float64).astype(self.dtype)
        self.table.flags.writeable = False

        # Sign pattern for evaluating the DCT-II to DCT-IV recurrences as running sums
        quarter = n // 2
        self._alt = np.array(alternating_signs(quarter), dtype=self.dtype)
        self._neg_alt = -self._alt

        self.dct = get_dct_engine(dct_engine)(n)

        log_debug("IMDCT_CONFIG", "table", self.table, size=n,
                  engine=type(self.dct).__name__, dtype=self.dtype.name)

    @property
    def size(self) -> int:
        return self.n

    def imdct(self, src, dst: np.ndarray, scale: float) -> None:
        """
        Performs the N-point Inverse Modified Discrete Cosine Transform.

        Each output sample is multiplied by scale; typically scale is
        sqrt(1 / N) or sqrt(2 / 2N), though each application varies.

        Args:
            src: N spectral coefficients (not modified)
            dst: Output array of 2N samples (fully overwritten)
            scale: Multiplier applied to every output sample
        """
        n = self.n
        if np.ndim(src) != 1 or len(src) != n:
            raise PreconditionViolation(f"src must hold {n} coefficients, got {np.shape(src)}")
        if not isinstance(dst, np.ndarray) or dst.ndim != 1 or len(dst) != 2 * n:
            raise PreconditionViolation(f"dst must be a 1-D array of {2 * n} samples, got {np.shape(dst)}")
        if not np.issubdtype(dst.dtype, np.floating) or not dst.flags.writeable:
            raise PreconditionViolation(f"dst must be a writeable floating point array, got {dst.dtype}")

        scale = dst.dtype.type(scale)

        # Pre-process the input into the second half of dst
        np.multiply(src, self.table, out=dst[n:])
        log_debug("IMDCT_PRE_ROTATION", "samples", dst[n:], size=n)

        # DCT-II in place over the pre-processed second half
        self.dct.dct_ii_inplace(dst[n:])
        log_debug("IMDCT_DCT_II", "coeffs", dst[n:], size=n, engine=type(self.dct).__name__)

        # DCT-II to DCT-IV
        #
        # Split dst into four equal regions [a, b, c, d]. Regions c and d hold the
        # DCT-II output; afterwards b holds the negated first half of the DCT-IV
        # and c its second half.
        quarter = n // 2
        a = dst[:quarter]
        b = dst[quarter:n]
        c = dst[n:n + quarter]
        d = dst[n + quarter:]

        # b[0] = -c[0] / 2, b[i] = -(c[i] + b[i - 1])
        np.multiply(c, self._alt, out=b)
        b[0] *= 0.5
        np.cumsum(b, out=b)
        np.multiply(b, self._neg_alt, out=b)

        # c[0] = d[0] + b[-1], c[i] = d[i] - c[i - 1]
        d[0] += b[-1]
        np.multiply(d, self._alt, out=c)
        np.cumsum(c, out=c)
        np.multiply(c, self._alt, out=c)
        log_debug("IMDCT_DCT_IV", "coeffs", dst[quarter:n + quarter], size=n)

        # DCT-IV to IMDCT
        #
        # Expand by symmetry, scaling as we go. Region a is a scaled copy of c,
        # d a scaled copy of b, c a reversed scaled copy of b, and b the negated
        # reverse of a (the original c).
        np.multiply(c, scale, out=a)
        np.multiply(b, scale, out=d)
        np.copyto(c, d[::-1])
        np.negative(a[::-1], out=b)

        log_debug("IMDCT_OUTPUT", "samples", dst, size=n, scale=float(scale))


class ImdctBank:
    """
    A set of IMDCTs for the block sizes a decoder switches between
    (e.g. long and short blocks), dispatching on the coefficient count.
    """

    def __init__(
        self,
        sizes: Iterable[int],
        dct_engine: Union[str, Type[DctII]] = DEFAULT_DCT_ENGINE,
        dtype=DEFAULT_SAMPLE_DTYPE,
    ):
        self.transforms: Dict[int, Imdct] = {}
        for n in sizes:
            if n not in self.transforms:
                self.transforms[n] = Imdct(n, dct_engine, dtype)
        if not self.transforms:
            raise ConfigurationError("ImdctBank needs at least one transform size")

    @property
    def sizes(self) -> List[int]:
        return sorted(self.transforms)

    def __getitem__(self, n: int) -> Imdct:
        try:
            return self.transforms[n]
        except (KeyError, TypeError):
            raise ConfigurationError(
                f"No {n!r}-point IMDCT configured, available sizes: {self.sizes}"
            ) from None

    def __contains__(self, n: int) -> bool:
        return n in self.transforms

    def imdct(self, src, dst: np.ndarray, scale: float) -> None:
        """
        Runs the IMDCT whose size matches len(src).
        """
        n = len(src)
        if n not in self.transforms:
            raise PreconditionViolation(
                f"No IMDCT for {n} coefficients, available sizes: {self.sizes}"
            )
        self.transforms[n].imdct(src, dst, scale)
