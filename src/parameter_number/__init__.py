"""
parameter_number - flags method and constructor declarations that take
too many parameters.

Usable as a pylint plugin (load-plugins=parameter_number.infrastructure.checker)
or through the ``parameter-number`` command line.
"""

__version__ = "1.0.0"
