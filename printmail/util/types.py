import numbers
from . import geometry


def wrap_number_like(value):
    """ Try to use the value as a number.

    Instances of numbers.Number are passed through unchanged,
    float is returned if a number supports conversion to float, otherwise an exception
    is raised. """
    if isinstance(value, numbers.Number):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        raise TypeError("Value must be instance of numbers.Number or support conversion to float")


def wrap_vector_like(value):
    """ Try to use value as a 3D vector.
    Vector-like is either instance of Vector or an iterable with exactly three
    number-like items. """

    if isinstance(value, geometry.Vector):
        return value

    try:
        items = [wrap_number_like(x) for x in value]
    except TypeError:
        raise TypeError("Value must be an iterable of numbers to be vector-like")

    if len(items) != 3:
        raise TypeError("Value must have exactly three items to be vector-like, got {}".format(len(items)))

    return geometry.Vector(*items)
