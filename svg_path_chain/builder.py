""" Module for the chainable path builder. """

from functools import partialmethod
from typing import Any, Callable, Iterator, Tuple

from .command import Command, PathError
from .config import PathConfig
from .log import DEFAULT_LOGGER, PathLogger
from .point import flatten, is_point


class SvgPath:
    """ Chainable SVG path string generator with some sugar added.
        Every drawing method appends one command and returns the builder itself, so calls may be chained:
            SvgPath().to(0, 0).line(10, 0).line(10, 10).close().render() -> 'M 0 0 L 10 0 L 10 10 Z'
        Commands are never edited or removed once appended.
        Not thread-safe; use one builder per path. """

    def __init__(self, config:PathConfig=None, logger:PathLogger=None) -> None:
        self._relative = False                 # If True, sugar methods use lowercase (relative) commands.
        self._commands = []                    # Appended commands in rendering order.
        self._config = config or PathConfig()  # Formatting and validation settings.
        self._log = logger or DEFAULT_LOGGER

    @property
    def relative(self) -> bool:
        return self._relative

    @property
    def commands(self) -> Tuple[Command, ...]:
        return tuple(self._commands)

    def rel(self) -> 'SvgPath':
        """ Turn relative mode on (lowercase commands will be used). """
        self._relative = True
        return self

    def abs(self) -> 'SvgPath':
        """ Turn relative mode off (uppercase commands will be used). """
        self._relative = False
        return self

    def _emit(self, code:str, *args:Any) -> 'SvgPath':
        """ Append a command with exactly the letter <code>. Validation runs first if enabled. """
        command = Command(code, *args)
        config = self._config
        if config.validating():
            try:
                command.validate(config["validate_arity"], config["validate_finite"])
            except PathError as e:
                self._log.rejected(command, e)
                raise
        self._commands.append(command)
        self._log.appended(command)
        return self

    # Letter commands. These ignore the mode; the letter's case is used as-is.
    M = partialmethod(_emit, "M")
    m = partialmethod(_emit, "m")
    Z = partialmethod(_emit, "Z")
    z = partialmethod(_emit, "z")
    L = partialmethod(_emit, "L")
    l = partialmethod(_emit, "l")
    H = partialmethod(_emit, "H")
    h = partialmethod(_emit, "h")
    V = partialmethod(_emit, "V")
    v = partialmethod(_emit, "v")
    C = partialmethod(_emit, "C")
    c = partialmethod(_emit, "c")
    S = partialmethod(_emit, "S")
    s = partialmethod(_emit, "s")
    Q = partialmethod(_emit, "Q")
    q = partialmethod(_emit, "q")
    T = partialmethod(_emit, "T")
    t = partialmethod(_emit, "t")
    A = partialmethod(_emit, "A")
    a = partialmethod(_emit, "a")

    def _cmd(self, letter:str) -> Callable[..., 'SvgPath']:
        """ Get either the absolute (uppercase) or relative (lowercase) letter method depending on mode. """
        actual_name = letter.lower() if self._relative else letter.upper()
        return getattr(self, actual_name)

    def close(self) -> 'SvgPath':
        """ Close the current subpath (Z or z command). """
        return self._cmd('Z')()

    def to(self, *xy:Any) -> 'SvgPath':
        """ Move the pen (M or m command) to either <x, y> or a single point. """
        return self._cmd('M')(*flatten(xy)[:2])

    def line(self, *xy:Any) -> 'SvgPath':
        """ Draw a line (L or l command) to either <x, y> or a single point. """
        return self._cmd('L')(*flatten(xy)[:2])

    def hline(self, x:Any) -> 'SvgPath':
        """ Draw a horizontal line (H or h command). """
        return self._cmd('H')(x)

    def vline(self, y:Any) -> 'SvgPath':
        """ Draw a vertical line (V or v command). """
        return self._cmd('V')(y)

    def bezier3(self, *args:Any) -> 'SvgPath':
        """ Draw a cubic Bezier curve (C or c command) from (x1, y1, x2, y2, x, y) or three points.
            With only (x2, y2, x, y) or two points, draw the shortcut form (S or s command)
            whose first control point is reflected from the previous curve. """
        if args and is_point(args[0]):
            full = len(args) >= 3
        else:
            full = len(args) >= 6
        values = flatten(args)
        if full:
            return self._cmd('C')(*values[:6])
        return self._cmd('S')(*values[:4])

    def bezier2(self, *args:Any) -> 'SvgPath':
        """ Draw a quadratic Bezier curve (Q or q command) from (x1, y1, x, y) or two points.
            With only (x, y) or one point, draw the shortcut form (T or t command). """
        if args and is_point(args[0]):
            full = len(args) >= 2
        else:
            full = len(args) >= 4
        values = flatten(args)
        if full:
            return self._cmd('Q')(*values[:4])
        return self._cmd('T')(*values[:2])

    def arc(self, rx:Any, ry:Any, rotation:Any, large:Any, sweep:Any, *xy:Any) -> 'SvgPath':
        """ Draw an elliptical arc (A or a command) ending at either <x, y> or a single point.
            Only the endpoint may be given as a point. """
        return self._cmd('A')(rx, ry, rotation, large, sweep, *flatten(xy)[:2])

    def render(self) -> str:
        """ Return the SVG path string for the full command sequence. """
        fmt = self._config.formatter()
        return " ".join([cmd.render(fmt) for cmd in self._commands])

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        mode = "relative" if self._relative else "absolute"
        return f'<{type(self).__name__} ({mode}): {self.render()!r}>'

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    str = render
