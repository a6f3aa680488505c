r"""Compute the mirrors generating a regular {p,q} tiling of the
hyperbolic plane.

A regular tiling by p-gons meeting q at a vertex is generated by
reflecting a single fundamental triangle in its sides. In the
Poincare disk, with the center of one p-gon at the origin, two of
those sides are straight lines through the origin (the real axis and
the line at angle pi/p) and the third is an arc of a circle orthogonal
to the unit circle. The renderer folds every pixel into the
fundamental triangle by repeatedly applying these three reflections,
so all it needs to know about the tiling is

- the center and radius of the inversion circle, and
- the normal vector of the line at angle pi/p.

```python
from curvascope import tiling

tiling.validate_schlafli(5, 4)
geometry = tiling.generate_tiling_params(5, 4)
geometry.inversion_center, geometry.inversion_radius
```

"""

from collections import namedtuple
from numbers import Integral

import numpy as np

from curvascope.base import DomainError, ValidationError
from curvascope.complex_plane import Complex, versor

#smallest denominator we are willing to divide by when computing the
#inversion circle
DEGENERACY_THRESHOLD = 1e-12


def is_hyperbolic(p, q):
    """Check whether {p,q} tiles the hyperbolic plane (rather than the
    sphere or the Euclidean plane).

    """
    return (p - 2) * (q - 2) > 4

def validate_schlafli(p, q):
    """Make sure that (p, q) is the Schläfli symbol of a regular tiling
    of the hyperbolic plane.

    Raises
    ------
    ValidationError
        Raised if p or q is not an integer at least 3, or if
        (p - 2)(q - 2) <= 4.

    """
    for name, value in (("p", p), ("q", q)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ValidationError(
                "{} must be an integer, not {!r}".format(name, value)
            )
        if value < 3:
            raise ValidationError(
                "{} must be at least 3 (got {})".format(name, value)
            )
        try:
            float(value)
        except OverflowError:
            raise ValidationError(
                "{} is too large to build a tiling from".format(name)
            ) from None

    if not is_hyperbolic(p, q):
        raise ValidationError(
            "{{{},{}}} is not a valid hyperbolic tiling".format(p, q)
        )

class TilingGeometry(namedtuple("TilingGeometry",
                                ["inversion_center", "inversion_radius",
                                 "reflection_normal", "polygon_vertex"])):
    """The mirrors bounding the fundamental triangle of a {p,q} tiling.

    Attributes
    ----------
    inversion_center : Complex
        center of the circle containing the side of the triangle
        opposite the origin
    inversion_radius : float
        radius of that circle
    reflection_normal : Complex
        unit normal of the line through the origin at angle pi/p
    polygon_vertex : Complex
        vertex of the central p-gon lying on that line. The
        inversion circle passes through this point.

    """
    __slots__ = ()

    def invert(self, z):
        """Invert a point through the inversion circle.

        Raises
        ------
        DomainError
            Raised if `z` is the center of the circle.

        """
        offset = z.sub(self.inversion_center)
        radius_sq = self.inversion_radius ** 2
        return self.inversion_center.add(
            offset.reciprocal().conj().scale(radius_sq)
        )

    def reflect(self, z):
        """Reflect a point across the line through the origin with normal
        `reflection_normal`.

        """
        normal = self.reflection_normal
        dot = z.re * normal.re + z.im * normal.im
        return z.sub(normal.scale(2 * dot / normal.normsq()))

def polygon_radius(p, q):
    """Get the Euclidean distance, in the Poincare disk, from the center
    of a regular p-gon in the {p,q} tiling to one of its vertices.

    Raises
    ------
    DomainError
        Raised if {p,q} is not hyperbolic, so that no such polygon
        exists in the disk.

    """
    ref_dir = versor(np.pi / p)
    cot_q = 1 / np.tan(np.pi / q)
    tan_p = ref_dir.im / ref_dir.re

    numerator = cot_q - tan_p
    denominator = cot_q + tan_p
    if abs(denominator) < DEGENERACY_THRESHOLD:
        raise DomainError(
            "Degenerate tiling parameters for {{{},{}}}".format(p, q)
        )

    ratio = numerator / denominator
    if not ratio > DEGENERACY_THRESHOLD:
        raise DomainError(
            "{{{},{}}} does not give a polygon in the hyperbolic plane".format(
                p, q
            ))

    return float(np.sqrt(ratio))

def generate_tiling_params(p, q):
    """Compute the inversion circle and reflection line bounding the
    fundamental triangle of the {p,q} tiling.

    This function does not check that {p,q} is hyperbolic; call
    `validate_schlafli` first. Degenerate input is still caught and
    reported as a `DomainError` instead of producing NaNs.

    Parameters
    ----------
    p : int
        number of sides of each polygon
    q : int
        number of polygons meeting at each vertex

    Returns
    -------
    TilingGeometry
        center/radius of the inversion circle, and normal vector of
        the reflection line.

    Raises
    ------
    DomainError
        Raised if the computation degenerates.

    """
    ref_dir = versor(np.pi / p)
    r_side = polygon_radius(p, q)

    # the circle is orthogonal to the unit circle and passes through
    # the polygon vertex r_side * ref_dir
    denom = r_side * ref_dir.re
    if abs(denom) < DEGENERACY_THRESHOLD:
        raise DomainError(
            "Degenerate tiling parameters for {{{},{}}}".format(p, q)
        )
    cen_x = 0.5 * (r_side * r_side + 1) / denom
    inv_rad_sq = cen_x * cen_x + (-2 * ref_dir.re * cen_x + r_side) * r_side

    if not (np.isfinite(inv_rad_sq) and inv_rad_sq >= 0):
        raise DomainError(
            "Could not compute an inversion circle for {{{},{}}}".format(p, q)
        )

    return TilingGeometry(
        inversion_center=Complex(cen_x, 0.),
        inversion_radius=float(np.sqrt(inv_rad_sq)),
        reflection_normal=Complex(ref_dir.im, -ref_dir.re),
        polygon_vertex=ref_dir.scale(r_side)
    )
