"""
xcomplex
========

A complex-number value type over double precision floats.

>>> from xcomplex import Complex
>>> c = Complex(1.0, 2.0)
>>> c * Complex(3.0, 4.0)
Complex(-5.0, 10.0)
>>> c.norm()
2.23606797749979

Plotting helpers live in :mod:`xcomplex.plot` and need matplotlib.
"""

import logging as _logging
from importlib.metadata import PackageNotFoundError, version as _pkg_version

from .number import ABS_TOL, I, ONE, REL_TOL, ZERO, Complex

__all__ = ["Complex", "ZERO", "ONE", "I", "REL_TOL", "ABS_TOL"]

try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except PackageNotFoundError:  # running from a checkout
    __version__ = "0.0.0.dev0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
