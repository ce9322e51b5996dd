""" Module for single SVG path commands and the text formatting of their arguments. """

from collections import namedtuple
from math import isfinite
from numbers import Real
from typing import Any, Callable, Iterable, Optional

ABS_CODES = "MZLHVCSQTA"          # Uppercase command letters use absolute coordinates.
REL_CODES = ABS_CODES.lower()     # Lowercase command letters use coordinates relative to the current point.
ALL_CODES = ABS_CODES + REL_CODES

# Number of arguments expected by each command letter regardless of case.
# Arcs take (rx, ry, rotation, large-arc-flag, sweep-flag, x, y).
ARITY = {"M": 2, "Z": 0, "L": 2, "H": 1, "V": 1, "C": 6, "S": 4, "Q": 4, "T": 2, "A": 7}

NumberFormatter = Callable[[Any], str]


class PathError(ValueError):
    """ Raised when a command fails validation. """


def arity(code:str) -> int:
    """ Return the number of arguments the command letter <code> takes. """
    try:
        return ARITY[code.upper()]
    except KeyError:
        raise PathError(f'Unknown path command: {code!r}') from None


def format_number(value:Any, precision:Optional[int]=None) -> str:
    """ Convert a command argument to text. Flags given as bools are written as 0/1.
        If <precision> is set, floats are limited to that many significant digits with trailing zeros removed. """
    if isinstance(value, bool):
        return str(int(value))
    if precision is not None and isinstance(value, float):
        return f"{value:.{precision}g}"
    return str(value)


class Command(namedtuple("Command", "code args")):
    """ A single path instruction: a command letter followed by its numeric arguments.
        The letter's case decides absolute vs. relative coordinates and is never changed after creation.
        Argument count is not enforced here; whatever was given is rendered. """

    __slots__ = ()

    def __new__(cls, code:str, *args:Any) -> 'Command':
        return super().__new__(cls, code, args)

    def __getnewargs__(self) -> tuple:
        """ Copy and pickle rebuild commands through __new__, which takes the arguments unpacked. """
        return (self.code, *self.args)

    @classmethod
    def from_sequence(cls, seq:Iterable[Any]) -> 'Command':
        """ Make a command from a flat sequence starting with the letter, e.g. ['M', 10, 20]. """
        code, *args = seq
        return cls(code, *args)

    def is_relative(self) -> bool:
        return self.code.islower()

    def render(self, fmt:NumberFormatter=format_number) -> str:
        """ Return the letter and each formatted argument separated by single spaces. """
        return " ".join([self.code, *map(fmt, self.args)])

    def validate(self, check_arity=True, check_finite=True) -> None:
        """ Raise PathError if this command would not make sense to an SVG renderer.
            The letter itself is always checked. """
        if self.code not in ALL_CODES:
            raise PathError(f'Unknown path command: {self.code!r}')
        if check_arity:
            expected = arity(self.code)
            if len(self.args) != expected:
                raise PathError(f'Command {self.code} takes {expected} arguments, got {len(self.args)}.')
        if check_finite:
            for value in self.args:
                if not isinstance(value, Real) or not isfinite(value):
                    raise PathError(f'Command {self.code} has a bad argument: {value!r}')

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({", ".join(map(repr, [self.code, *self.args]))})'
