import sys
import os
import argparse
import importlib
import logging

logger = logging.getLogger(__name__)


def argument_parser(description="Render an object"):
    """ Return an argument parser with the rendering options.
    Callers may add their own arguments before parsing. """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument('--output', '-o',
                        help='File name of the output.')
    parser.add_argument('--renderer', '-r', choices=sorted(_renderers),
                        help='Renderer to use. Guessed from the output file extension if not given.')
    parser.add_argument('--resolution', type=float,
                        help='Size of the smallest rendered detail in millimeters.')
    parser.add_argument('--workers', type=int,
                        help='Number of threads used for evaluating the mesh.')
    return parser


def commandline_render(obj, resolution, default_renderer=None, args=None):
    """ Reads commandline arguments (unless already parsed arguments are given),
    chooses a renderer and passes the parameters to it. """

    if args is None:
        args = argument_parser().parse_args()

    if args.resolution is not None:
        resolution = args.resolution

    renderer = args.renderer if args.renderer is not None else default_renderer
    output = args.output

    if output is not None:
        if renderer is None:
            renderer = guess_renderer(output)
    else:
        if renderer is None:
            renderer = "stl"
        output = "output" + _renderers[renderer][1]

    kwargs = {}
    if renderer == "stl" and getattr(args, "workers", None) is not None:
        kwargs["workers"] = args.workers

    render(obj, output, resolution, renderer, **kwargs)


def guess_renderer(filename):
    ext = os.path.splitext(filename)[1]
    try:
        return _extensions[ext]
    except KeyError:
        raise ValueError("Can't guess renderer for file extension {!r}".format(ext))


def render(obj, filename, resolution, renderer=None, **kwargs):
    """ Render the shape to a file, choosing the renderer by file extension if not given. """
    if renderer is None:
        renderer = guess_renderer(filename)
    if renderer not in _renderers:
        raise ValueError("Unknown renderer {!r}".format(renderer))

    print("Rendering with renderer {} to file {}".format(renderer, filename))
    _renderers[renderer][0](obj, filename=filename, resolution=resolution, **kwargs)


def _register(name, module_name, extensions):
    try:
        module = importlib.import_module("." + module_name, __name__)
    except ImportError as e:
        logger.warning("Renderer %s is unavailable due to import error: %s", name, e)
        return

    for extension in extensions:
        _extensions[extension] = name

    setattr(sys.modules[__name__], module_name, module)
    _renderers[name] = (getattr(module, "render_" + name), extensions[0])


_renderers = {}
_extensions = {}

_register("stl", "stl_renderer", [".stl"])
_register("scad", "scad", [".scad"])
_register("slice", "slice_image", [".png"])
