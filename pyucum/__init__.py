"""
UCUM units (:mod:`pyucum`)
==========================

.. currentmodule:: pyucum

Parsing of unit expressions written in the Unified Code for Units of
Measure (UCUM) and conversion of values between them.

Examples
--------

Parsing a unit gives its magnitude in base units (m, s, g, rad, K, C,
cd) and its dimension:

>>> p = UnitParser()
>>> km = p.parse('km')
>>> km.magnitude
1000.0
>>> print(p.parse('kg.m/s2').dimension)
L.T⁻².M

Parsing never raises for a bad expression; the error is carried on the
result instead:

>>> p.parse('xyz').error
'Unknown unit: xyz'

Values are converted using ``UnitConverter``, or the convenience
function ``convert`` which raises a ``UcumError`` on failure:

>>> convert(5.0, 'km', 'm')
5000.0
>>> round(convert(0.0, 'Cel', 'K'), 2)
273.15
>>> convert(1.0, 'm', 's')  # doctest: +ELLIPSIS, +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
pyucum._errors.DimensionMismatchError: Units are not commensurable: L vs T

Arrays of values are converted in one call:

>>> import numpy as np
>>> convert(np.array([1.0, 2.5]), 'km', 'm')
array([1000., 2500.])
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 10)

from ._dim import Dimension, DIMENSIONLESS
from ._opts import (UcumOptions, get_ucum_options, set_ucum_options,
                    ucum_options)
from ._errors import (UcumError, LexicalError, UnknownUnitError,
                      ExpressionSyntaxError, DimensionMismatchError,
                      EmptyInputError)
from ._catalog import (Catalog, Prefix, UnitDef, UnitCategory,
                       STANDARD_CATALOG, add_prefix, add_unit)
from . import _defs  # Sets up standard units.
from ._lexer import Token, TokenKind, tokenize
from ._parser import ParsedUnit, UnitParser, ValidationResult
from ._special import (to_base, from_base, is_special_function,
                       special_functions)
from ._convert import (BaseUnitValue, ConversionResult, UnitConverter,
                       convert)
