"""
Special (non-linear) unit conversion functions.

Each entry maps the numeric value of a special unit to the equivalent
quantity in base units (``to_base``) and back again (``from_base``).
Functions are written with numpy so that both scalars and arrays of
values are accepted.
"""
from __future__ import annotations

from typing import Callable

import numpy as np
import numpy.typing as npt

ArrayLike = npt.ArrayLike
_SpecialFn = Callable[[np.ndarray], np.ndarray]


# ======================================================================

def to_base(function: str, value: ArrayLike,
            prefix: float = 1.0) -> float | np.ndarray:
    """
    Convert the value of a special unit to its base-unit equivalent.

    Parameters
    ----------
    function : str
        Special function identifier, e.g. ``'Cel'`` or ``'pH'``.
    value : array_like
        Value(s) in the special unit.
    prefix : float, default = 1.0
        Conversion prefix of the unit.  For identifiers in the table it
        scales the base-unit result; for unknown identifiers the result
        is simply ``value * prefix``.

    Returns
    -------
    result : float or ndarray
        Base unit value(s).  A scalar input gives a float.

    Examples
    --------
    >>> to_base('Cel', 25.0)
    298.15
    """
    try:
        fwd, _ = _SPECIAL_FUNCTIONS[function]
    except KeyError:
        return _as_result(np.asarray(value, dtype=float) * prefix)

    return _as_result(fwd(np.asarray(value, dtype=float)) * prefix)


def from_base(function: str, value: ArrayLike,
              prefix: float = 1.0) -> float | np.ndarray:
    """
    Inverse of `to_base`: convert a base-unit value to the special unit.
    For unknown identifiers the result is ``value / prefix``.
    """
    try:
        _, inv = _SPECIAL_FUNCTIONS[function]
    except KeyError:
        return _as_result(np.asarray(value, dtype=float) / prefix)

    return _as_result(inv(np.asarray(value, dtype=float) / prefix))


def is_special_function(function: str) -> bool:
    return function in _SPECIAL_FUNCTIONS


def special_functions() -> list[str]:
    """Returns the identifiers in the special function table."""
    return list(_SPECIAL_FUNCTIONS)


# ----------------------------------------------------------------------

def _as_result(x: np.ndarray) -> float | np.ndarray:
    # 0-d arrays come back as plain floats.
    return float(x) if np.ndim(x) == 0 else x


def _potency(base: float) -> tuple[_SpecialFn, _SpecialFn]:
    """Homeopathic potency scale: base^-v and its inverse logarithm."""
    log_base = np.log(base)
    return (lambda v: np.power(base, -v),
            lambda v: -np.log(v) / log_base)


_SPECIAL_FUNCTIONS: dict[str, tuple[_SpecialFn, _SpecialFn]] = {
    # Temperature scales, all relative to kelvin.
    'Cel': (lambda v: v + 273.15,
            lambda v: v - 273.15),
    'degF': (lambda v: (v + 459.67) * 5 / 9,
             lambda v: v * 9 / 5 - 459.67),
    'degRe': (lambda v: v * 5 / 4 + 273.15,
              lambda v: (v - 273.15) * 4 / 5),

    # Logarithmic scales.
    'pH': (lambda v: np.power(10.0, -v),
           lambda v: -np.log10(v)),
    'ln': (np.exp, np.log),
    'lg': (lambda v: np.power(10.0, v), np.log10),
    '2lg': (np.exp2, np.log2),
    'ld': (np.exp2, np.log2),

    # Trigonometric.
    'tan': (np.tan, np.arctan),
    '100tan': (lambda v: np.tan(v / 100),
               lambda v: np.arctan(v) * 100),

    # Homeopathic potencies.
    'hpX': _potency(10),
    'hpC': _potency(100),
    'hpM': _potency(1000),
    'hpQ': _potency(50000),
}
