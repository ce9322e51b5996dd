""" Test package for the chainable SVG path builder. """
