from curvascope import drawtools
from curvascope.app import Curvascope

# pick a tiling and work out its mirrors
app = Curvascope()
app.set_tiling(7, 3)
geometry = app.params.geometry

# drag the view a little way off center
app.pointer_down()
app.pointer_move((700, 300))
app.pointer_up()

# draw the fundamental triangle, its mirrors, and where the view is centered
fig = drawtools.TilingDrawing()
fig.draw_disk()
fig.draw_fundamental_triangle(geometry, facecolor="royalblue",
                              edgecolor="none")
fig.draw_mirrors(geometry)
fig.draw_pointer(app.params.pointer)

fig.show()
