#!/usr/bin/env python3
""" Writes OpenSCAD sources of a sheet at every stage of support:
bare lattice, with base plate and pillars, and with walls and joiners on top. """

import printmail
import printmail.rendering

base = printmail.Config(cols=4, rows=4, stacks=2, add_base_plate_and_supports=False)

variants = {
    "bare": base,
    "supported": base._replace(add_base_plate_and_supports=True),
    "walled": base._replace(add_base_plate_and_supports=True,
                            add_side_walls=True,
                            add_support_joiners=True),
}

if __name__ == "__main__":
    for name, config in variants.items():
        printmail.rendering.render(printmail.assemble(config),
                                   "chainmail_{}.scad".format(name),
                                   config.wire_d / 5)
