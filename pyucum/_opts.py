from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class UcumOptions:
    """
    Dataclass that holds option flags for parsing and converting UCUM
    expressions.  See `get_ucum_options` and `set_ucum_options` for full
    details.
    """
    case_sensitive: bool
    strict: bool
    unicode_str: bool
    max_nesting: int
    warn_redefine: bool

    def __post_init__(self):
        """Check certain values"""
        if self.max_nesting < 1:
            raise ValueError("Require 'max_nesting' >= 1.")


# Create single instance and set defaults.
_ucum_options = UcumOptions(
    case_sensitive=True,
    strict=True,
    unicode_str=True,
    max_nesting=64,
    warn_redefine=False
)


# ----------------------------------------------------------------------

def get_ucum_options() -> UcumOptions:
    """
    Returns
    -------
    ucum_options : UcumOptions
        Returns a copy of the current options.  For a full description
        of each option, see `set_ucum_options`.
    """
    return replace(_ucum_options)


# noinspection PyIncorrectDocstring
def set_ucum_options(**kwargs):
    """
    Set the current UCUM options.  These act as defaults for any
    `UnitParser` or `UnitConverter` created afterwards which does not
    override them.

    Parameters
    ----------
    case_sensitive : bool, default = True
        If `True`, unit and prefix codes must match the case-sensitive
        UCUM codes exactly (``mA`` is milliampere, ``MA`` is megaampere).
        If `False`, the case-insensitive codes are tried first (e.g.
        ``MG`` for milligram), falling back to the exact code.

    strict : bool, default = True
        If `True`, the first error found anywhere in an expression is
        reported on the result, a missing closing parenthesis is an
        error and trailing tokens are rejected.  If `False`, the lenient
        behaviour is used: a missing ``)`` is tolerated and errors in
        nested factors are folded away as dimensionless unity.

    unicode_str : bool, default = True
        Generate unicode characters for superscripts when dimensions are
        converted to strings, e.g. ``L.T⁻²`` instead of ``L.T^-2``.

    max_nesting : int, default = 64
        Maximum depth of nested parentheses accepted in an expression.

    warn_redefine : bool, default = False
        If `True`, a `UserWarning` is issued when a unit is registered
        with the same code as an existing unit.  The new unit replaces
        the old one in either case.

    See Also
    --------
    get_ucum_options, ucum_options

    Examples
    --------
    >>> from pyucum import Dimension, set_ucum_options
    >>> print(Dimension(length=1, time=-2))
    L.T⁻²
    >>> set_ucum_options(unicode_str=False)
    >>> print(Dimension(length=1, time=-2))
    L.T^-2
    >>> set_ucum_options(unicode_str=True)
    """
    global _ucum_options
    _ucum_options = replace(_ucum_options, **kwargs)


@contextmanager
def ucum_options(**kwargs) -> Iterator[UcumOptions]:
    """
    Context manager that temporarily applies the given options (same
    keywords as `set_ucum_options`), restoring the previous options on
    exit.

    Examples
    --------
    >>> from pyucum import UnitParser, ucum_options
    >>> with ucum_options(case_sensitive=False):
    ...     UnitParser().parse('MG').magnitude
    0.001
    """
    global _ucum_options
    previous = _ucum_options
    _ucum_options = replace(_ucum_options, **kwargs)
    try:
        yield replace(_ucum_options)
    finally:
        _ucum_options = previous
