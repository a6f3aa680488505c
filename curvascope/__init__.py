r"""
curvascope
==========

`curvascope` is the geometry engine behind an interactive viewer for regular tilings of the hyperbolic plane.

A renderer draws the tiling {p,q} (p-gons, q meeting at every vertex) by folding each pixel into a single fundamental triangle. This package works out everything that renderer needs, and provides modules to:

- do arithmetic with complex numbers (`curvascope.complex_plane`)

- map points from several models of the hyperbolic plane (upper half-plane, Klein, Gans, band, ...) to the Poincare disk (`curvascope.models`)

- compute the mirrors bounding the fundamental triangle of a {p,q} tiling (`curvascope.tiling`)

- turn a drag on the canvas into a new center for the view, in whatever model is on screen (`curvascope.interaction`)

- push all of the render parameters into the renderer once per frame (`curvascope.uniforms`, `curvascope.animation`, `curvascope.app`)

- share parameters as links, and draw the fundamental triangle with matplotlib (`curvascope.links`, `curvascope.drawtools`)

## Example usage

To get the inversion circle for the {7,3} tiling and see where a drag lands in the Klein model:

```python
from curvascope import tiling, models
from curvascope.complex_plane import Complex

tiling.validate_schlafli(7, 3)
geometry = tiling.generate_tiling_params(7, 3)

models.to_disk(models.Model.KLEIN, Complex(0.3, -0.2))
```
"""

from .base import (CurvascopeError, DomainError, ValidationError,
                   UnimplementedModelError, DecodeError)
