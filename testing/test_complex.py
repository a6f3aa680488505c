import pytest
import numpy as np

from curvascope.complex_plane import Complex, versor, ZERO, ONE, I
from curvascope import DomainError

@pytest.fixture
def samples():
    return [Complex(0.3, 0.4), Complex(-2.0, 1.5), Complex(1e-150, -3e-151),
            Complex(0.0, -7.0), Complex(12.5, 0.0)]

def assert_close(z, w, **kwargs):
    assert np.allclose([z.re, z.im], [w.re, w.im], **kwargs)

def test_arithmetic():
    z = Complex(1.0, 2.0)
    w = Complex(3.0, -1.0)

    assert z.add(w) == Complex(4.0, 1.0)
    assert z.sub(w) == Complex(-2.0, 3.0)
    assert z.mul(w) == Complex(5.0, 5.0)
    assert z.scale(2) == Complex(2.0, 4.0)
    assert z.conj() == Complex(1.0, -2.0)
    assert z.normsq() == 5.0
    assert_close(z.div(w), Complex.from_complex((1 + 2j) / (3 - 1j)))

def test_operators_match_methods():
    z = Complex(1.0, 2.0)
    w = Complex(3.0, -1.0)

    assert z + w == z.add(w)
    assert z - w == z.sub(w)
    assert z * w == z.mul(w)
    assert 2 * z == z.scale(2)
    assert z * np.float64(2.0) == z.scale(2)
    assert 1 + z == Complex(2.0, 2.0)
    assert -z == Complex(-1.0, -2.0)
    assert abs(Complex(3.0, 4.0)) == pytest.approx(5.0)
    assert complex(z) == 1 + 2j
    assert_close(z / w, z.div(w))

def test_operations_do_not_mutate():
    z = Complex(1.0, 2.0)
    z.add(ONE).mul(I).reciprocal()
    assert z == Complex(1.0, 2.0)

    with pytest.raises(AttributeError):
        z.re = 5.0

def test_reciprocal_is_inverse(samples):
    for z in samples:
        assert_close(z.mul(z.reciprocal()), ONE)

def test_zero_division():
    with pytest.raises(DomainError):
        ZERO.reciprocal()

    with pytest.raises(DomainError):
        ONE.div(ZERO)

    with pytest.raises(DomainError):
        ONE.divide_real(0)

    # DomainError is still an ArithmeticError
    with pytest.raises(ArithmeticError):
        ONE / ZERO

def test_exp():
    assert_close(ZERO.exp(), ONE)
    assert_close(Complex(0., np.pi).exp(), Complex(-1., 0.))

    for value in [0.5 - 0.25j, -1.2 + 3j, 2j]:
        assert_close(Complex.from_complex(value).exp(),
                     Complex.from_complex(np.exp(value)))

def test_tanh():
    assert ZERO.tanh() == ZERO

    for value in [0.5 - 0.25j, -1.2 + 0.7j, 0.1j, 3.0]:
        assert_close(Complex.from_complex(value).tanh(),
                     Complex.from_complex(np.tanh(value)))

def test_versor():
    for t in np.linspace(-np.pi, np.pi, 9):
        z = versor(t)
        assert z.normsq() == pytest.approx(1.0)
        assert_close(z, Complex.from_complex(np.exp(1j * t)))
