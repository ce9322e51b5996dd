""" Drawing calls with complex numbers as points, for code that does its geometry in the complex plane. """

from .builder import SvgPath
from .point import flatten


class PathCanvas:
    """ Draws onto a path builder with complex points (x = real, y = imag).
        Each call takes its own <relative> flag; the builder's mode is never changed. """

    def __init__(self, builder:SvgPath=None) -> None:
        self.builder = SvgPath() if builder is None else builder

    def _draw(self, letter:str, relative:bool, *points:complex) -> None:
        draw = getattr(self.builder, letter.lower() if relative else letter)
        draw(*flatten(points))

    def move_to(self, p:complex, relative=False) -> None:
        self._draw("M", relative, p)

    def line_to(self, ep:complex, relative=False) -> None:
        self._draw("L", relative, ep)

    def quad_to(self, cp:complex, ep:complex, relative=False) -> None:
        self._draw("Q", relative, cp, ep)

    def cubic_to(self, cp:complex, dp:complex, ep:complex, relative=False) -> None:
        self._draw("C", relative, cp, dp, ep)

    def arc_to(self, radii:complex, ep:complex, sweep_cw=False, large_arc=False, relative=False) -> None:
        """ Arcs are drawn unrotated, so <radii> line up with the x and y axes. """
        draw = getattr(self.builder, "a" if relative else "A")
        draw(radii.real, radii.imag, 0, large_arc, sweep_cw, ep.real, ep.imag)

    def close(self) -> None:
        self.builder.Z()

    def __str__(self) -> str:
        return self.builder.render()
