import pytest
import numpy as np

from curvascope import tiling
from curvascope.complex_plane import Complex, versor
from curvascope import DomainError, ValidationError

HYPERBOLIC = [(p, q) for p in range(3, 13) for q in range(3, 13)
              if (p - 2) * (q - 2) > 4]
NOT_HYPERBOLIC = [(3, 3), (3, 4), (4, 3), (3, 5), (5, 3),
                  (3, 6), (6, 3), (4, 4)]

@pytest.fixture
def geometry_55():
    return tiling.generate_tiling_params(5, 5)

def reference_params(p, q):
    alpha = np.pi / p
    ref_x, ref_y = np.cos(alpha), np.sin(alpha)
    cotq = 1 / np.tan(np.pi / q)
    tanp = ref_y / ref_x
    r_side = np.sqrt((cotq - tanp) / (cotq + tanp))
    cen_x = .5 * (r_side * r_side + 1) / (r_side * ref_x)
    inv_rad_sq = cen_x * cen_x + (-2 * ref_x * cen_x + r_side) * r_side
    return cen_x, inv_rad_sq, (ref_y, -ref_x)

def test_is_hyperbolic():
    assert tiling.is_hyperbolic(5, 5)
    assert tiling.is_hyperbolic(7, 3)
    assert not tiling.is_hyperbolic(4, 4)
    assert not tiling.is_hyperbolic(6, 3)
    assert not tiling.is_hyperbolic(3, 5)

@pytest.mark.parametrize("p,q", NOT_HYPERBOLIC)
def test_validate_rejects(p, q):
    with pytest.raises(ValidationError):
        tiling.validate_schlafli(p, q)

@pytest.mark.parametrize("p,q", [(2, 9), (9, 1), (5.0, 5), (5, "5"),
                                 (True, 7), (10 ** 400, 5)])
def test_validate_rejects_malformed(p, q):
    with pytest.raises(ValidationError):
        tiling.validate_schlafli(p, q)

def test_validate_error_is_value_error():
    with pytest.raises(ValueError):
        tiling.validate_schlafli(4, 4)

@pytest.mark.parametrize("p,q", HYPERBOLIC)
def test_valid_geometry(p, q):
    tiling.validate_schlafli(p, q)
    geometry = tiling.generate_tiling_params(p, q)

    assert geometry.inversion_center.isfinite()
    assert geometry.inversion_center.im == 0.0
    assert np.isfinite(geometry.inversion_radius)
    assert geometry.inversion_radius >= 0
    assert geometry.reflection_normal.normsq() == pytest.approx(1.0)

@pytest.mark.parametrize("p,q", HYPERBOLIC)
def test_matches_reference_formula(p, q):
    cen_x, inv_rad_sq, normal = reference_params(p, q)
    geometry = tiling.generate_tiling_params(p, q)

    assert geometry.inversion_center.re == pytest.approx(cen_x)
    assert geometry.inversion_radius ** 2 == pytest.approx(inv_rad_sq)
    assert np.allclose(tuple(geometry.reflection_normal), normal)

@pytest.mark.parametrize("p,q", HYPERBOLIC)
def test_inversion_circle_orthogonal(p, q):
    geometry = tiling.generate_tiling_params(p, q)
    center = geometry.inversion_center.re
    radius = geometry.inversion_radius

    # orthogonal to the unit circle, and through the polygon vertex
    assert center ** 2 == pytest.approx(radius ** 2 + 1)
    assert geometry.polygon_vertex.sub(geometry.inversion_center).norm() == \
        pytest.approx(radius)

def test_pentagonal_tiling(geometry_55):
    ref_dir = versor(np.pi / 5)
    assert np.allclose(tuple(ref_dir), (0.80901699, 0.58778525))

    # for {5,5} everything has a closed form
    assert geometry_55.inversion_center.re == \
        pytest.approx(np.sqrt(1 + np.sqrt(5) / 2))
    assert geometry_55.inversion_radius ** 2 == pytest.approx(np.sqrt(5) / 2)
    assert geometry_55.inversion_radius == pytest.approx(1.0573712634)
    assert np.allclose(tuple(geometry_55.reflection_normal),
                       (ref_dir.im, -ref_dir.re))
    assert geometry_55.polygon_vertex.normsq() == \
        pytest.approx(np.cos(2 * np.pi / 5))

@pytest.mark.parametrize("p,q", [(4, 4), (3, 6), (6, 3), (3, 3), (4, 3)])
def test_degenerate_input_raises(p, q):
    with pytest.raises(DomainError):
        tiling.generate_tiling_params(p, q)

def test_mirrors(geometry_55):
    vertex = geometry_55.polygon_vertex

    # the polygon vertex lies on both mirrors
    assert np.allclose(tuple(geometry_55.reflect(vertex)), tuple(vertex))
    assert np.allclose(tuple(geometry_55.invert(vertex)), tuple(vertex))

    # both are involutions
    z = Complex(0.2, 0.1)
    assert np.allclose(tuple(geometry_55.reflect(geometry_55.reflect(z))),
                       tuple(z))
    assert np.allclose(tuple(geometry_55.invert(geometry_55.invert(z))),
                       tuple(z))

    # inversion preserves the unit circle
    boundary = versor(0.4)
    assert geometry_55.invert(boundary).normsq() == pytest.approx(1.0)

    with pytest.raises(DomainError):
        geometry_55.invert(geometry_55.inversion_center)
