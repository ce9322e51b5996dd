""" Logging for path builders. Records go to the standard library logger named by LOGGER_NAME.
    The package only attaches a NullHandler; where (and whether) records show up is the application's call. """

import logging

LOGGER_NAME = 'svg_path_chain'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class PathLogger:
    """ Traces appended and rejected commands for one or more builders. """

    _FORMATTER = logging.Formatter('[%(asctime)s] %(name)s: %(message)s', "%b %d %Y %H:%M:%S")

    def __init__(self, name=LOGGER_NAME, level:int=None) -> None:
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level)

    def add_stream(self, stream=None) -> logging.Handler:
        """ Send path records to a text stream (stderr by default). Return the handler for later removal. """
        return self._attach(logging.StreamHandler(stream))

    def add_file(self, filename:str, **kwargs) -> logging.Handler:
        return self._attach(logging.FileHandler(filename, encoding='utf-8', **kwargs))

    def _attach(self, handler:logging.Handler) -> logging.Handler:
        handler.setFormatter(self._FORMATTER)
        self._logger.addHandler(handler)
        return handler

    def remove_handler(self, handler:logging.Handler) -> None:
        self._logger.removeHandler(handler)
        handler.close()

    def appended(self, command) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug('Appended %r', command)

    def rejected(self, command, exc:Exception) -> None:
        self._logger.warning('Rejected %r: %s', command, exc)


# Shared by every builder that isn't given its own logger.
DEFAULT_LOGGER = PathLogger()
