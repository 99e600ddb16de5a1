#!/usr/bin/env python3
""" Renders a chainmail sheet with its print supports.

All lattice parameters can be overridden from the command line, for example

    ./chainmail.py --cols 6 --rows 4 --stacks 2 --add-side-walls -o sheet.stl
"""

import logging

import printmail
import printmail.config
import printmail.rendering

parser = printmail.rendering.argument_parser("Render a printable chainmail lattice")
printmail.config.add_arguments(parser)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    args = parser.parse_args()
    config = printmail.config.from_arguments(args)
    printmail.commandline_render(printmail.assemble(config), config.wire_d / 5, args=args)
