""" Helpers for point-like arguments. Sugar methods accept these anywhere a coordinate pair fits.
    A point-like value is one of:
        - any object with x and y attributes (including Point below).
        - a mapping with "x" and "y" keys, e.g. {"x": 1, "y": 2}.
        - a complex number, with x as the real part and y as the imaginary part. """

from collections import namedtuple
from collections.abc import Mapping
from typing import Any, Iterable, List, Tuple

Point = namedtuple("Point", "x y")


def is_point(obj:Any) -> bool:
    if isinstance(obj, complex):
        return True
    if isinstance(obj, Mapping):
        return "x" in obj and "y" in obj
    return hasattr(obj, "x") and hasattr(obj, "y")


def coords(p:Any) -> Tuple[Any, Any]:
    """ Return the (x, y) coordinates of a point-like value. """
    if isinstance(p, complex):
        return p.real, p.imag
    if isinstance(p, Mapping):
        return p["x"], p["y"]
    return p.x, p.y


def flatten(values:Iterable[Any]) -> List[Any]:
    """ Expand every point-like value into two coordinates. Everything else passes through in order. """
    flat = []
    for v in values:
        if is_point(v):
            flat += coords(v)
        else:
            flat.append(v)
    return flat
