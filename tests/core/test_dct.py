"""
Tests for the DCT-II engines.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pyimdct.core.dct import (
    DCT_ENGINES,
    DctII,
    FftDctII,
    LeeDctII,
    MatrixDctII,
    get_dct_engine,
)
from pyimdct.core.reference import dct_ii_direct
from pyimdct.common.constants import MAX_IMDCT_SIZE, MAX_MATRIX_DCT_SIZE
from pyimdct.common.errors import ConfigurationError, PreconditionViolation


ENGINE_CLASSES = [LeeDctII, FftDctII, MatrixDctII]


class TestDctEngines:
    """Test cases shared by every DCT-II strategy."""

    @pytest.mark.parametrize("engine_cls", ENGINE_CLASSES)
    @pytest.mark.parametrize("n", [1, 2, 4, 8, 16, 64, 256])
    def test_matches_definition(self, engine_cls, n):
        rng = np.random.default_rng(n)
        x = rng.standard_normal(n)
        buf = x.copy()

        engine_cls(n).dct_ii_inplace(buf)

        assert_allclose(buf, dct_ii_direct(x), rtol=0, atol=1e-10)

    @pytest.mark.parametrize("engine_cls", ENGINE_CLASSES)
    def test_constant_input(self, engine_cls):
        """A constant signal only has a DC term, equal to its sum."""
        buf = np.full(16, 2.0)
        engine_cls(16).dct_ii_inplace(buf)
        assert buf[0] == pytest.approx(32.0)
        assert_allclose(buf[1:], 0.0, atol=1e-12)

    @pytest.mark.parametrize("engine_cls", ENGINE_CLASSES)
    def test_float32_buffer_keeps_dtype(self, engine_cls):
        x = np.linspace(-1.0, 1.0, 32).astype(np.float32)
        buf = x.copy()
        engine_cls(32).dct_ii_inplace(buf)
        assert buf.dtype == np.float32
        assert_allclose(buf, dct_ii_direct(x), atol=1e-5)

    @pytest.mark.parametrize("engine_cls", ENGINE_CLASSES)
    def test_operates_on_views(self, engine_cls):
        """The IMDCT hands engines the second half of its output buffer."""
        x = np.arange(16, dtype=np.float64)
        whole = np.concatenate([np.full(16, -3.0), x])
        engine_cls(16).dct_ii_inplace(whole[16:])
        assert_allclose(whole[:16], -3.0)
        assert_allclose(whole[16:], dct_ii_direct(x), atol=1e-10)

    @pytest.mark.parametrize("engine_cls", ENGINE_CLASSES)
    def test_repeated_calls_are_independent(self, engine_cls):
        engine = engine_cls(8)
        first = np.arange(8, dtype=np.float64)
        second = np.ones(8)
        engine.dct_ii_inplace(first)
        engine.dct_ii_inplace(second)
        assert_allclose(second, dct_ii_direct(np.ones(8)), atol=1e-12)

    @pytest.mark.parametrize("engine_cls", ENGINE_CLASSES)
    @pytest.mark.parametrize("n", [0, 3, 12, -8, 2.0])
    def test_rejects_invalid_sizes(self, engine_cls, n):
        with pytest.raises(ConfigurationError):
            engine_cls(n)

    @pytest.mark.parametrize("engine_cls", ENGINE_CLASSES)
    def test_rejects_wrong_buffer_length(self, engine_cls):
        engine = engine_cls(8)
        with pytest.raises(PreconditionViolation):
            engine.dct_ii_inplace(np.zeros(7))
        with pytest.raises(PreconditionViolation):
            engine.dct_ii_inplace(np.zeros(16))

    @pytest.mark.parametrize("engine_cls", ENGINE_CLASSES)
    def test_rejects_non_array_buffer(self, engine_cls):
        with pytest.raises(PreconditionViolation):
            engine_cls(4).dct_ii_inplace([1.0, 2.0, 3.0, 4.0])


def test_fast_engines_accept_max_size():
    rng = np.random.default_rng(0)
    x = rng.standard_normal(MAX_IMDCT_SIZE)
    lee = x.copy()
    fft = x.copy()
    LeeDctII(MAX_IMDCT_SIZE).dct_ii_inplace(lee)
    FftDctII(MAX_IMDCT_SIZE).dct_ii_inplace(fft)
    assert_allclose(lee, fft, rtol=0, atol=1e-8)


def test_fast_engines_reject_oversize():
    with pytest.raises(ConfigurationError):
        LeeDctII(2 * MAX_IMDCT_SIZE)
    with pytest.raises(ConfigurationError):
        FftDctII(2 * MAX_IMDCT_SIZE)


def test_matrix_engine_size_limit():
    assert MatrixDctII(MAX_MATRIX_DCT_SIZE).matrix.shape == (MAX_MATRIX_DCT_SIZE, MAX_MATRIX_DCT_SIZE)
    with pytest.raises(ConfigurationError):
        MatrixDctII(2 * MAX_MATRIX_DCT_SIZE)


def test_lee_factor_tables_per_stage():
    engine = LeeDctII(16)
    assert sorted(engine.factors) == [2, 4, 8, 16]
    assert all(len(engine.factors[m]) == m // 2 for m in engine.factors)


def test_base_class_has_no_transform():
    with pytest.raises(NotImplementedError):
        DctII(4).dct_ii_inplace(np.zeros(4))


class TestGetDctEngine:
    def test_names(self):
        assert get_dct_engine("lee") is LeeDctII
        assert get_dct_engine("fft") is FftDctII
        assert get_dct_engine("matrix") is MatrixDctII
        assert set(DCT_ENGINES) == {"lee", "fft", "matrix"}

    def test_class_passthrough(self):
        class CustomDctII(MatrixDctII):
            pass

        assert get_dct_engine(CustomDctII) is CustomDctII

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError, match="Unknown DCT-II engine"):
            get_dct_engine("split-radix")

    @pytest.mark.parametrize("engine", [None, 3, object, np.fft.fft])
    def test_not_an_engine(self, engine):
        with pytest.raises(ConfigurationError):
            get_dct_engine(engine)
