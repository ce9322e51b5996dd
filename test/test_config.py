""" Tests for builder configuration and logging. """

from io import StringIO
import logging

import pytest

from svg_path_chain import PathConfig, PathError, PathLogger, SvgPath
from svg_path_chain.log import LOGGER_NAME


def test_defaults() -> None:
    config = PathConfig()
    assert config.to_dict() == {"render_precision": None, "validate_arity": False, "validate_finite": False}
    assert not config.validating()
    assert config.formatter()(2.5) == "2.5"
    with pytest.raises(KeyError):
        PathConfig(validate_arty=True)
    with pytest.raises(KeyError):
        config.update({"render_digits": 3})
    assert config["render_precision"] is None


def test_cfg_layout() -> None:
    config = PathConfig(render_precision=None, validate_arity=True)
    stream = StringIO()
    config.write_cfg(stream)
    text = stream.getvalue()
    assert "[render]\nprecision = none\n" in text
    assert "arity = True" in text
    config = PathConfig(render_precision=3)
    config.read_cfg(StringIO("[render]\nprecision = None\n[validate]\nfinite = yes\n"))
    assert config.to_dict() == {"render_precision": None, "validate_arity": False, "validate_finite": True}


def test_cfg_round_trip() -> None:
    config = PathConfig(render_precision=4, validate_finite=True)
    stream = StringIO()
    config.write_cfg(stream)
    text = stream.getvalue()
    assert "[render]" in text
    assert "[validate]" in text
    loaded = PathConfig()
    loaded.read_cfg(StringIO(text))
    assert loaded.to_dict() == config.to_dict()
    assert loaded["validate_finite"] is True
    assert loaded.validating()


def test_cfg_partial() -> None:
    """ Options missing from the file keep their current values. """
    config = PathConfig(validate_arity=True)
    config.read_cfg(StringIO("[render]\nprecision = 2\n[other]\nkey = value\n"))
    assert config["render_precision"] == 2
    assert config["validate_arity"] is True
    assert SvgPath(config).to(1/3, 1).render() == "M 0.33 1"


def test_logging() -> None:
    logger = PathLogger("svg_path_chain.test", logging.DEBUG)
    stream = StringIO()
    handler = logger.add_stream(stream)
    try:
        path = SvgPath(PathConfig(validate_arity=True), logger)
        path.to(1, 2).to(1, 2)
        with pytest.raises(PathError):
            path.line(1)
    finally:
        logger.remove_handler(handler)
    lines = stream.getvalue().splitlines()
    assert len(lines) == 3
    assert lines[0].endswith("Appended Command('M', 1, 2)")
    assert lines[1].endswith("Appended Command('M', 1, 2)")
    assert lines[2].endswith("Rejected Command('L', 1): Command L takes 2 arguments, got 1.")


def test_quiet_by_default(capfd) -> None:
    """ With no handlers set up by the application, nothing reaches the console. """
    package_logger = logging.getLogger(LOGGER_NAME)
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)
    with pytest.raises(PathError):
        SvgPath(PathConfig(validate_arity=True)).L(1)
    out, err = capfd.readouterr()
    assert out == err == ""


def test_level_left_alone() -> None:
    """ A logger created without a level must not reset one chosen by the application. """
    package_logger = logging.getLogger(LOGGER_NAME)
    old_level = package_logger.level
    package_logger.setLevel(logging.DEBUG)
    try:
        PathLogger()
        assert package_logger.level == logging.DEBUG
    finally:
        package_logger.setLevel(old_level)


def test_log_file(tmp_path) -> None:
    logger = PathLogger("svg_path_chain.test_file", logging.DEBUG)
    filename = str(tmp_path / "path.log")
    handler = logger.add_file(filename)
    try:
        SvgPath(logger=logger).hline(5)
    finally:
        logger.remove_handler(handler)
    with open(filename, encoding="utf-8") as fp:
        assert "Appended Command('H', 5)" in fp.read()
