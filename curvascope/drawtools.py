"""Draw the geometry behind a {p,q} tiling with
[matplotlib](https://matplotlib.org/).

The renderer itself only ever sees a handful of numbers (an inversion
circle and a reflection line). `TilingDrawing` draws those mirrors,
and the fundamental triangle they cut out, in the Poincare disk, which
is handy for checking that the numbers are right.

```python
from curvascope import drawtools, tiling

geometry = tiling.generate_tiling_params(5, 4)

drawing = drawtools.TilingDrawing()
drawing.draw_disk()
drawing.draw_fundamental_triangle(geometry, facecolor="lightblue")
drawing.draw_mirrors(geometry)

drawing.show()
```

"""

import numpy as np

import matplotlib.pyplot as plt
from matplotlib.patches import Arc, Circle, Polygon

#the default amount of "room" we leave outside the boundary of the disk
DRAW_NEIGHBORHOOD = 0.1

#number of points used to approximate the circular side of the
#fundamental triangle
ARC_RESOLUTION = 64


def _merge_kwargs(defaults, kwargs):
    merged = dict(defaults)
    for key, value in kwargs.items():
        merged[key] = value
    return merged

def inversion_arc_angles(geometry):
    """Get the angles (in degrees, measured at the inversion center) of
    the two points where the inversion circle meets the unit circle.

    Since the inversion circle is orthogonal to the unit circle, these
    points have real part 1 / c, where c is the (real) inversion
    center.

    """
    center = geometry.inversion_center.re
    x = 1 / center
    y = np.sqrt(max(0., 1 - x * x))
    upper = np.degrees(np.arctan2(y, x - center))
    return upper, 360 - upper

def fundamental_triangle(geometry, resolution=ARC_RESOLUTION):
    """Get points along the boundary of the fundamental triangle, as an
    (n, 2) array.

    The triangle has a vertex at the origin, one at the polygon vertex
    on the reflection line, and one where the inversion circle crosses
    the real axis.

    """
    center = np.array([geometry.inversion_center.re,
                       geometry.inversion_center.im])
    vertex = np.array([geometry.polygon_vertex.re,
                       geometry.polygon_vertex.im])

    start = np.arctan2(*(vertex - center)[::-1])
    thetas = np.linspace(start, np.pi, resolution)
    arc = center + geometry.inversion_radius * np.stack(
        [np.cos(thetas), np.sin(thetas)], axis=-1
    )

    return np.concatenate([np.zeros((1, 2)), arc], axis=0)

class TilingDrawing:
    def __init__(self, figsize=8, ax=None, fig=None):
        if ax is None or fig is None:
            fig, ax = plt.subplots(figsize=(figsize, figsize))

        self.ax, self.fig = ax, fig

        limits = (-1 - DRAW_NEIGHBORHOOD, 1 + DRAW_NEIGHBORHOOD)
        self.ax.axis("off")
        self.ax.set_aspect("equal")
        self.ax.set_xlim(limits)
        self.ax.set_ylim(limits)

    def draw_disk(self, **kwargs):
        draw_args = _merge_kwargs({
            "facecolor": "none",
            "edgecolor": "black",
            "linewidth": 1
        }, kwargs)

        disk = Circle((0., 0.), 1.0, **draw_args)
        self.ax.add_patch(disk)
        return disk

    def draw_mirrors(self, geometry, **kwargs):
        """Draw the three mirrors of the fundamental triangle: the real
        axis, the reflection line, and the part of the inversion
        circle inside the disk.

        """
        draw_args = _merge_kwargs({
            "color": "gray",
            "linewidth": 1,
            "linestyle": "--"
        }, kwargs)

        normal = geometry.reflection_normal
        direction = np.array([-normal.im, normal.re]) / normal.norm()

        lines = []
        lines += self.ax.plot([-1., 1.], [0., 0.], **draw_args)
        lines += self.ax.plot([-direction[0], direction[0]],
                              [-direction[1], direction[1]], **draw_args)

        theta1, theta2 = inversion_arc_angles(geometry)
        diameter = 2 * geometry.inversion_radius
        arc = Arc((geometry.inversion_center.re, geometry.inversion_center.im),
                  diameter, diameter, theta1=theta1, theta2=theta2,
                  **draw_args)
        self.ax.add_patch(arc)

        return lines + [arc]

    def draw_fundamental_triangle(self, geometry, **kwargs):
        draw_args = _merge_kwargs({
            "facecolor": "royalblue",
            "edgecolor": "black",
            "linewidth": 1
        }, kwargs)

        triangle = Polygon(fundamental_triangle(geometry), closed=True,
                           **draw_args)
        self.ax.add_patch(triangle)
        return triangle

    def draw_pointer(self, position, **kwargs):
        draw_args = _merge_kwargs({
            "color": "red",
            "marker": "o",
            "linestyle": "none"
        }, kwargs)

        return self.ax.plot([position.re], [position.im], **draw_args)

    def save(self, filename, **kwargs):
        self.fig.savefig(filename, **kwargs)

    def show(self):
        plt.show()
