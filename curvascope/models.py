r"""Map points in different models of the hyperbolic plane to the
Poincare disk.

The renderer always works in the Poincare disk, so every model in the
catalog comes with a single function taking a point in that model to
the corresponding point in the disk. Models are enumerated by the
`Model` enum, whose values are the integer indices used by the
renderer and by shared links.

```python
from curvascope import models
from curvascope.complex_plane import Complex

models.to_disk(models.Model.KLEIN, Complex(0.5, 0.))
```
    Complex(re=0.2679491924311227, im=0.0)

Two entries (the azimuthal equidistant and equal-area projections)
are listed so that their indices are reserved, but have no mapping
yet; asking for them raises `UnimplementedModelError`.

"""

from enum import Enum

import numpy as np

from curvascope.base import DomainError, UnimplementedModelError
from curvascope.complex_plane import Complex, I

# zoom factors so that the interesting part of these models fits on
# the screen
GANS_SCALE = 10.
INVERSION_SCALE = 2.5

#points this far outside the boundary of the Klein disk are rounded
#onto it instead of rejected
BOUNDARY_THRESHOLD = 1e-12


class Model(Enum):
    """Enumerate the models of the hyperbolic plane in the catalog.

    Each member's value is its integer index. Members compare equal to
    their index and (case insensitively) to their name, so
    `Model.KLEIN == 2` and `Model.KLEIN == "klein"` are both `True`.

    """
    POINCARE = 0
    HALFPLANE = 1
    KLEIN = 2
    GANS = 3
    BAND = 4
    INVERTED = 5
    AZIMUTHAL_EQUIDISTANT = 6
    EQUAL_AREA = 7

    @staticmethod
    def from_index(index):
        """Get the model with the given catalog index.

        Raises
        ------
        IndexError
            Raised if there is no model with this index.

        """
        try:
            return Model(index)
        except ValueError:
            raise IndexError(
                "No hyperbolic model with index {}".format(index)
            ) from None

    @property
    def label(self):
        return MODEL_LABELS[self]

    @property
    def implemented(self):
        return self in _MAPPINGS

    def __eq__(self, other):
        if self is other:
            return True

        if isinstance(other, Model):
            return False

        if isinstance(other, str):
            return other.upper() == self.name

        try:
            return int(other) == self.value and other == int(other)
        except (TypeError, ValueError, OverflowError):
            return False

    def __hash__(self):
        return hash(self.value)

MODEL_LABELS = {
    Model.POINCARE: "Poincaré disk",
    Model.HALFPLANE: "Upper half-plane model",
    Model.KLEIN: "Beltrami-Klein disk",
    Model.GANS: "Gans model",
    Model.BAND: "Band model",
    Model.INVERTED: "Poincaré disk complement",
    Model.AZIMUTHAL_EQUIDISTANT: "Azimuthal equidistant projection",
    Model.EQUAL_AREA: "Equal-area projection",
}

def poincare_to_disk(z):
    return z

def halfplane_to_disk(z):
    """Map the upper half-plane to the disk with a Mobius
    transformation.

    The half-plane is shifted down by 1 first, so that the bottom of
    the screen sits on the boundary of the model. Valid input is any
    point with imaginary part at least -1.

    """
    shifted = Complex(z.re, z.im + 1)
    return shifted.sub(I).div(shifted.add(I))

def klein_to_disk(z):
    """Map the Beltrami-Klein disk to the Poincare disk.

    Raises
    ------
    DomainError
        Raised if `z` is outside the closed unit disk.

    """
    radicand = 1 - z.normsq()
    if radicand < -BOUNDARY_THRESHOLD:
        raise DomainError(
            "Point {} lies outside the Klein model".format(tuple(z))
        )
    return z.divide_real(1 + np.sqrt(max(radicand, 0.)))

def gans_to_disk(z):
    """Map the Gans model (the whole plane) to the Poincare disk."""
    z = z.scale(GANS_SCALE)
    return z.divide_real(1 + np.sqrt(1 + z.normsq()))

def band_to_disk(z):
    """Map the band model to the disk. The band is the strip
    |Im z| < pi/4, which tanh takes onto the open unit disk.

    """
    return z.tanh()

def inverted_to_disk(z):
    """Map the complement of the (scaled) Poincare disk back inside the
    disk by inverting through the unit circle.

    Raises
    ------
    DomainError
        Raised if `z` is the origin (the image of the point at
        infinity).

    """
    return z.scale(INVERSION_SCALE).reciprocal()

_MAPPINGS = {
    Model.POINCARE: poincare_to_disk,
    Model.HALFPLANE: halfplane_to_disk,
    Model.KLEIN: klein_to_disk,
    Model.GANS: gans_to_disk,
    Model.BAND: band_to_disk,
    Model.INVERTED: inverted_to_disk,
}

def implemented_models():
    """List the models which have a mapping to the disk, in index order."""
    return [model for model in Model if model.implemented]

def model_map(model):
    """Get the function mapping points in a model to the Poincare disk.

    Parameters
    ----------
    model : Model or int
        model (or catalog index of the model) to get a mapping for

    Raises
    ------
    IndexError
        Raised if `model` is an integer outside the catalog.
    UnimplementedModelError
        Raised if the model has no mapping.

    """
    if not isinstance(model, Model):
        model = Model.from_index(model)

    try:
        return _MAPPINGS[model]
    except KeyError:
        raise UnimplementedModelError(
            "No mapping to the Poincare disk for model '{}'".format(
                model.label
            )) from None

def to_disk(model, z):
    """Map a point in `model` to the corresponding point in the Poincare
    disk.

    Parameters
    ----------
    model : Model or int
        which model `z` is given in
    z : Complex
        coordinates of the point in `model`

    Returns
    -------
    Complex
        coordinates of the same point in the Poincare disk

    """
    return model_map(model)(z)
