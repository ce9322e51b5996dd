""" Chainable SVG path string generator. A builder collects drawing commands and renders them as the
    "d" attribute of an SVG <path> element:

    command - A single path instruction, such as M 10 20, is a letter followed by numeric arguments.
    Uppercase letters use absolute coordinates and lowercase letters use relative ones.

    point - Sugar methods take coordinates either as separate numbers or as point-like values:
    anything with x and y attributes, a mapping with "x" and "y" keys, or a complex number.

    builder - SvgPath is the builder itself. It has a raw method for every command letter in both cases,
    plus sugar methods (to, line, hline, vline, bezier3, bezier2, arc, close) that pick the case
    from the current mode, which is switched with rel() and abs().

    config - Optional settings for number formatting and strict argument validation.

    log - Appended commands and validation failures go to a standard library logger.

    canvas - An adapter that draws with complex-number points onto a builder. """

from .builder import SvgPath
from .canvas import PathCanvas
from .command import ARITY, Command, PathError, arity, format_number
from .config import PathConfig
from .log import PathLogger
from .point import Point
