from __future__ import annotations

from typing import NamedTuple, Sequence

from ._opts import get_ucum_options


# ======================================================================

class Dimension(NamedTuple):
    """
    ``Dimension`` is the 7-component vector of integer exponents over the
    UCUM base quantities.  Two units are commensurable (convertible by
    scaling) if and only if their dimensions are equal.

    Field names in order:
        - length:  Base unit ``m``.
        - time:  Base unit ``s``.
        - mass:  Base unit ``g``.
        - angle:  Plane angle, base unit ``rad``.
        - temperature:  Base unit ``K``.
        - charge:  Electric charge, base unit ``C``.
        - luminosity:  Luminous intensity, base unit ``cd``.

    ``Dimension`` objects are immutable and hashable.  Multiplication and
    division combine exponents pointwise, ``**`` scales them by an
    integer.  ``Dimension()`` is the dimensionless identity.

    Examples
    --------
    >>> force = Dimension(mass=1, length=1, time=-2)
    >>> force / Dimension(mass=1) == Dimension(length=1, time=-2)
    True
    >>> print(force ** 2)
    L².T⁻⁴.M²
    """
    length: int = 0
    time: int = 0
    mass: int = 0
    angle: int = 0
    temperature: int = 0
    charge: int = 0
    luminosity: int = 0

    # -- Binary Operators ----------------------------------------------

    def __mul__(self, rhs: Dimension) -> Dimension:
        if not isinstance(rhs, Dimension):
            return NotImplemented
        return Dimension(*(a + b for a, b in zip(self, rhs)))

    def __truediv__(self, rhs: Dimension) -> Dimension:
        if not isinstance(rhs, Dimension):
            return NotImplemented
        return Dimension(*(a - b for a, b in zip(self, rhs)))

    def __pow__(self, pwr: int) -> Dimension:
        """
        Raise to an integer power.  Any dimension raised to power zero is
        dimensionless.
        """
        if isinstance(pwr, bool) or not isinstance(pwr, int):
            raise TypeError(f"Dimension power must be an integer, got "
                            f"{pwr!r}.")
        return Dimension(*(a * pwr for a in self))

    # Tuple defaults would otherwise concatenate / repeat.
    def __add__(self, rhs):
        return NotImplemented

    def __rmul__(self, lhs):
        return NotImplemented

    # -- String Magic Methods ------------------------------------------

    def __repr__(self) -> str:
        parts = [f'{name}={p}' for name, p in zip(self._fields, self)
                 if p != 0]
        return f"Dimension({', '.join(parts)})"

    def __str__(self) -> str:
        """
        Compact form using the symbols ``L T M A Θ Q J``, e.g. ``L.T⁻²``.
        A dimensionless value gives ``1``.
        """
        unicode_str = get_ucum_options().unicode_str
        parts = []
        for sym, p in zip(_DIM_SYMBOLS, self):
            if p == 0:
                continue
            if p == 1:
                parts.append(sym)
            elif unicode_str:
                parts.append(sym + _to_ucode_super(str(p)))
            else:
                parts.append(f'{sym}^{p}')

        return '.'.join(parts) if parts else '1'

    # -- Public Methods ------------------------------------------------

    @classmethod
    def from_vector(cls, vector: Sequence[int]) -> Dimension:
        """
        Build from a sequence of up to seven exponents in field order.
        Missing trailing entries are zero.
        """
        if len(vector) > len(cls._fields):
            raise ValueError(f"Dimension vector has at most "
                             f"{len(cls._fields)} entries, got "
                             f"{len(vector)}.")
        return cls(*(int(p) for p in vector))

    def inverse(self) -> Dimension:
        """Returns the reciprocal dimension (all exponents negated)."""
        return Dimension(*(-a for a in self))

    def is_dimensionless(self) -> bool:
        """Returns ``True`` if all exponents are zero."""
        return not any(self)

    def to_vector(self) -> list[int]:
        return list(self)


DIMENSIONLESS = Dimension()

# ----------------------------------------------------------------------

_DIM_SYMBOLS = ('L', 'T', 'M', 'A', 'Θ', 'Q', 'J')

_UCODE_SS_CHARS = ('⁺⁻ᐧ⁰¹²³⁴⁵⁶⁷⁸⁹', '+-.0123456789')


def _to_ucode_super(ss: str) -> str:
    """
    Convert numeric characters in a string to unicode superscript.
    """
    trans = str.maketrans(_UCODE_SS_CHARS[1], _UCODE_SS_CHARS[0])
    return ss.translate(trans)
