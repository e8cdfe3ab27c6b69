from __future__ import annotations

import warnings
from typing import NamedTuple, Optional

import numpy as np
import numpy.typing as npt

from ._catalog import UnitDef, STANDARD_CATALOG
from ._dim import Dimension, DIMENSIONLESS
from ._errors import UcumError, DimensionMismatchError
from ._opts import UcumOptions, get_ucum_options
from ._parser import ParsedUnit, UnitParser
from ._special import to_base, from_base


# ======================================================================

class ConversionResult(NamedTuple):
    """
    Outcome of `UnitConverter.convert`.  If `success` is ``False``,
    `value` is ``None`` and `message` / `error_type` describe the
    failure.
    """
    success: bool
    value: Optional[float | npt.NDArray]
    from_units: str
    to_units: str
    from_value: float | npt.ArrayLike
    message: Optional[str] = None
    from_parsed: Optional[ParsedUnit] = None
    to_parsed: Optional[ParsedUnit] = None
    error_type: Optional[type[UcumError]] = None

    def __str__(self):
        if self.success:
            return (f"{self.from_value} {self.from_units} = {self.value} "
                    f"{self.to_units}")
        return f"ConversionResult(failed: {self.message})"


class BaseUnitValue(NamedTuple):
    """
    Value expressed in base units, from
    `UnitConverter.convert_to_base_units`.  If the expression could not
    be parsed, `error` gives the reason and `value` is the unchanged
    input.
    """
    value: float | npt.ArrayLike
    dimension: Dimension
    is_special: bool
    error: Optional[str] = None


# ======================================================================

class UnitConverter:
    """
    Converts values between UCUM unit expressions.

    Linear units are converted using the ratio of their magnitudes.  If
    either side is a special unit (e.g. ``Cel``, ``[degF]``, ``[pH]``)
    the value is passed through the special function of that unit on
    its way to and from base units.

    Parameters
    ----------
    parser : UnitParser, optional
        Parser to use.  A new `UnitParser` is created if not given.

    Examples
    --------
    >>> conv = UnitConverter()
    >>> conv.convert(5.0, 'km', 'm').value
    5000.0
    >>> round(conv.convert(212.0, '[degF]', 'Cel').value, 6)
    100.0
    >>> conv.convert(1.0, 'm', 's').message
    'Units are not commensurable: L vs T'
    """

    def __init__(self, parser: UnitParser = None):
        self._parser = parser if parser is not None else UnitParser()

    @property
    def parser(self) -> UnitParser:
        return self._parser

    # -- Public Methods ------------------------------------------------

    def are_commensurable(self, units_a: str, units_b: str) -> bool:
        """
        ``True`` if both expressions parse without error and have equal
        dimensions.
        """
        parsed_a = self._parser.parse(units_a)
        parsed_b = self._parser.parse(units_b)
        if parsed_a.error or parsed_b.error:
            return False
        return parsed_a.dimension == parsed_b.dimension

    def convert(self, value: float | npt.ArrayLike, from_units: str,
                to_units: str, *, strict: bool = None) -> ConversionResult:
        """
        Convert `value` from `from_units` to `to_units`.

        Parameters
        ----------
        value : float or array_like
            Value(s) to convert.
        from_units, to_units : str
            UCUM expressions for the source and target units.
        strict : bool, optional
            Overrides the parser's `strict` setting.

        Returns
        -------
        result : ConversionResult
            On failure `success` is ``False`` and `message` starts with
            ``'Invalid source unit'``, ``'Invalid target unit'`` or
            ``'Units are not commensurable'``.
        """
        if isinstance(value, (list, tuple)):
            value = np.asarray(value, dtype=float)

        from_parsed = self._parser.parse(from_units, strict=strict)
        to_parsed = self._parser.parse(to_units, strict=strict)

        def failed(message: str, error_type: type[UcumError]):
            return ConversionResult(
                success=False, value=None, from_units=from_units,
                to_units=to_units, from_value=value, message=message,
                from_parsed=from_parsed, to_parsed=to_parsed,
                error_type=error_type)

        if from_parsed.error:
            return failed(f"Invalid source unit: {from_parsed.error}",
                          from_parsed.error_type)
        if to_parsed.error:
            return failed(f"Invalid target unit: {to_parsed.error}",
                          to_parsed.error_type)

        if from_parsed.dimension != to_parsed.dimension:
            return failed(f"Units are not commensurable: "
                          f"{from_parsed.dimension} vs "
                          f"{to_parsed.dimension}", DimensionMismatchError)

        if from_parsed.is_special or to_parsed.is_special:
            result = _from_base_value(_to_base_value(value, from_parsed),
                                      to_parsed)
        else:
            result = value * from_parsed.magnitude / to_parsed.magnitude

        return ConversionResult(
            success=True, value=result, from_units=from_units,
            to_units=to_units, from_value=value, from_parsed=from_parsed,
            to_parsed=to_parsed)

    def convert_to_base_units(self, value: float | npt.ArrayLike,
                              units: str) -> BaseUnitValue:
        """
        Express `value` in `units` as a value in base units.

        If `units` cannot be parsed, the input value is returned
        unchanged with a dimensionless dimension, the parse error is
        given in `BaseUnitValue.error` and a warning is issued.
        """
        parsed = self._parser.parse(units)
        if parsed.error:
            warnings.warn(f"Cannot convert to base units, '{units}' is "
                          f"not valid: {parsed.error}")
            return BaseUnitValue(value, DIMENSIONLESS, False, parsed.error)

        return BaseUnitValue(_to_base_value(value, parsed),
                             parsed.dimension, parsed.is_special)

    def register_unit(self, unit: UnitDef):
        """Add a custom unit to the parser used by this converter."""
        self._parser.register_unit(unit)


# ----------------------------------------------------------------------

def convert(value: float | npt.ArrayLike, from_units: str,
            to_units: str) -> float | npt.NDArray:
    """
    Convert `value` between two UCUM expressions, using the standard
    catalog and the current options.

    Returns
    -------
    result : float or ndarray

    Raises
    ------
    UcumError
        The subclass matches the reason for failure, e.g.
        `UnknownUnitError` or `DimensionMismatchError`.

    Examples
    --------
    >>> round(convert(100.0, 'mg/dL', 'g/L'), 12)
    1.0
    """
    res = _default_converter().convert(value, from_units, to_units)
    if not res.success:
        kwargs = {}
        if res.error_type is DimensionMismatchError:
            kwargs = {'from_dimension': res.from_parsed.dimension,
                      'to_dimension': res.to_parsed.dimension}
        raise (res.error_type or UcumError)(
            res.message, expression=f"{from_units} -> {to_units}", **kwargs)

    return res.value


# ----------------------------------------------------------------------

_DEFAULT_CONVERTER: Optional[tuple[UcumOptions, int, UnitConverter]] = None


def _default_converter() -> UnitConverter:
    # Rebuilt whenever the options or the standard catalog have changed.
    global _DEFAULT_CONVERTER
    opts = get_ucum_options()
    revision = STANDARD_CATALOG.revision
    if (_DEFAULT_CONVERTER is None or
            _DEFAULT_CONVERTER[:2] != (opts, revision)):
        _DEFAULT_CONVERTER = (opts, revision, UnitConverter())
    return _DEFAULT_CONVERTER[2]


def _special_atom(parsed: ParsedUnit) -> Optional[UnitDef]:
    """Returns the unit if `parsed` is a special unit with a function."""
    if (parsed.is_special and parsed.unit is not None and
            parsed.unit.conversion_function):
        return parsed.unit
    return None


def _to_base_value(value, parsed: ParsedUnit):
    unit = _special_atom(parsed)
    if unit is None:
        return value * parsed.magnitude

    if parsed.prefix is not None:
        value = value * parsed.prefix.value  # e.g. mCel -> Cel.

    return to_base(unit.conversion_function, value,
                   unit.conversion_prefix or 1.0)


def _from_base_value(value, parsed: ParsedUnit):
    unit = _special_atom(parsed)
    if unit is None:
        return value / parsed.magnitude

    result = from_base(unit.conversion_function, value,
                       unit.conversion_prefix or 1.0)
    if parsed.prefix is not None:
        result = result / parsed.prefix.value

    return result
