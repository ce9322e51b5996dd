""" Module for path builder settings, which may also be kept in a CFG/INI file:

    [render]
    precision = 4

    [validate]
    arity = True
    finite = False """

from configparser import ConfigParser
from functools import partial
from typing import Any, Mapping, TextIO

from .command import format_number, NumberFormatter

# Default value for each setting. Keys are <section>_<name> as found in a CFG file.
DEFAULTS = {"render_precision": None,  # Significant digits for float arguments. None writes them with plain str().
            "validate_arity": False,   # Reject commands with the wrong number of arguments for their letter.
            "validate_finite": False}  # Reject arguments that are not finite real numbers.


class PathConfig:
    """ Formatting and validation settings for a path builder. Unknown setting names are rejected. """

    def __init__(self, **values:Any) -> None:
        self._data = dict(DEFAULTS)
        self.update(values)

    def update(self, values:Mapping[str, Any]) -> None:
        unknown = set(values) - set(DEFAULTS)
        if unknown:
            raise KeyError(f'Unknown path settings: {sorted(unknown)}')
        self._data.update(values)

    def __getitem__(self, key:str) -> Any:
        return self._data[key]

    def to_dict(self) -> dict:
        return self._data.copy()

    def formatter(self) -> NumberFormatter:
        """ Return the number formatter for command arguments under the current settings. """
        return partial(format_number, precision=self._data["render_precision"])

    def validating(self) -> bool:
        return bool(self._data["validate_arity"] or self._data["validate_finite"])

    def read_cfg(self, file:TextIO) -> None:
        """ Update settings from a CFG file. Settings the file leaves out keep their current values.
            A precision of "none" (any case) or an empty value turns float rounding off. """
        parser = ConfigParser()
        parser.read_file(file)
        if parser.has_option("render", "precision"):
            precision = parser.get("render", "precision").strip()
            self._data["render_precision"] = None if precision.lower() in ("", "none") else int(precision)
        for name in ("arity", "finite"):
            if parser.has_option("validate", name):
                self._data["validate_" + name] = parser.getboolean("validate", name)

    def write_cfg(self, file:TextIO) -> None:
        """ Save all settings to <file> in the same layout read_cfg expects. """
        precision = self._data["render_precision"]
        parser = ConfigParser()
        parser["render"] = {"precision": "none" if precision is None else str(precision)}
        parser["validate"] = {"arity": str(self._data["validate_arity"]),
                              "finite": str(self._data["validate_finite"])}
        parser.write(file)
