FACET_ANGLE = 5


def render_scad(obj, filename, resolution):
    """ Write the CSG tree of the shape as OpenSCAD source.
    Resolution becomes the minimal facet size of the curved primitives. """
    with open(filename, "w") as fp:
        fp.write("$fs = {};\n".format(resolution))
        fp.write("$fa = {};\n".format(FACET_ANGLE))
        fp.write(obj.scad())
