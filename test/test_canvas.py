""" Tests for the complex-number canvas adapter. """

from svg_path_chain import PathCanvas, PathConfig, SvgPath


def test_canvas() -> None:
    builder = SvgPath(PathConfig(render_precision=4))
    canvas = PathCanvas(builder)
    canvas.move_to(1+2j)
    canvas.line_to(3+4j, relative=True)
    canvas.quad_to(1j, 2+2j)
    canvas.cubic_to(1+0j, 2+0j, 3+3j, relative=True)
    canvas.arc_to(5+5j, 10+10j, sweep_cw=True)
    canvas.close()
    assert str(canvas) == "M 1 2 l 3 4 Q 0 1 2 2 c 1 0 2 0 3 3 A 5 5 0 0 1 10 10 Z"
    assert canvas.builder is builder
    # The builder's mode is left alone.
    assert not builder.relative


def test_canvas_keeps_mode() -> None:
    builder = SvgPath().rel()
    canvas = PathCanvas(builder)
    canvas.line_to(1+1j)
    canvas.arc_to(2+1j, 4j, large_arc=True, relative=True)
    builder.line(1, 1)
    assert builder.render() == "L 1.0 1.0 a 2.0 1.0 0 1 0 0.0 4.0 l 1 1"
    assert builder.relative


def test_default_builder() -> None:
    canvas = PathCanvas()
    canvas.move_to(0j)
    assert str(canvas) == "M 0.0 0.0"
