from __future__ import annotations

import threading
import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ._dim import Dimension, DIMENSIONLESS
from ._opts import get_ucum_options


# ======================================================================

class UnitCategory(Enum):
    CLINICAL = 'clinical'
    NONCLINICAL = 'nonclinical'
    OBSOLETE = 'obsolete'
    CONSTANT = 'constant'


# ----------------------------------------------------------------------

@dataclass(frozen=True, kw_only=True)
class Prefix:
    """
    Metric or binary prefix, e.g. ``k`` (kilo, 10³) or ``Ki`` (kibi,
    2¹⁰).  `exponent` is base-10 for metric prefixes and base-2 for
    binary prefixes.
    """
    code: str
    ci_code: str
    name: str
    value: float
    exponent: int
    print_symbol: str = None

    def __str__(self):
        return self.code


# ----------------------------------------------------------------------

@dataclass(frozen=True, kw_only=True)
class UnitDef:
    """
    Catalog entry for a single UCUM unit.

    `magnitude` is the size of one unit expressed in the base units
    (``m s g rad K C cd``) and `dimension` gives the powers of those
    base units.  Special (non-linear) units additionally name a
    `conversion_function` from the special function table, and may give
    a `conversion_prefix` applied to the base-unit side of the function.

    If `ci_code` is not given it defaults to the upper case of `code`.
    """
    code: str
    name: str
    quantity: str = ''
    magnitude: float = 1.0
    dimension: Dimension = DIMENSIONLESS
    ci_code: str = None
    plural_name: Optional[str] = None
    print_symbol: Optional[str] = None
    unit_class: Optional[str] = None
    is_base: bool = False
    is_metric: bool = False
    is_special: bool = False
    is_arbitrary: bool = False
    conversion_function: Optional[str] = None
    conversion_prefix: Optional[float] = None
    synonyms: tuple[str, ...] = field(default=())
    category: Optional[UnitCategory] = None

    def __post_init__(self):
        if not self.code:
            raise ValueError("Unit code cannot be empty.")
        if self.ci_code is None:
            object.__setattr__(self, 'ci_code', self.code.upper())
        if not isinstance(self.dimension, Dimension):
            object.__setattr__(self, 'dimension',
                               Dimension.from_vector(self.dimension))
        if self.is_special and not self.conversion_function:
            raise ValueError(f"Special unit '{self.code}' requires a "
                             f"conversion function.")

    def __str__(self):
        return self.code

    @property
    def plural(self) -> str:
        """Plural display name, falling back to `name`."""
        return self.plural_name if self.plural_name else self.name

    def is_commensurable_with(self, other: UnitDef) -> bool:
        return self.dimension == other.dimension


# ======================================================================

class Catalog:
    """
    Indexed collection of unit and prefix definitions.

    Lookups use two indices for each kind of entry: one keyed on the
    case-sensitive code and one keyed on the upper-cased case-insensitive
    code.  Registering an entry with an existing code replaces it (last
    write wins).  Writes are serialised by a lock; readers are not
    blocked.

    Each `UnitParser` works from its own `copy()` of a catalog, so units
    registered on one parser are not seen by another.
    """

    def __init__(self):
        self._units: dict[str, UnitDef] = {}
        self._units_ci: dict[str, UnitDef] = {}
        self._prefixes: dict[str, Prefix] = {}
        self._prefixes_ci: dict[str, Prefix] = {}
        self._candidates: dict[bool, list[tuple[str, Prefix]]] = {}
        self._revision = 0
        self._lock = threading.Lock()

    def __contains__(self, code: str) -> bool:
        return code in self._units

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self):
        return (f"Catalog(<{len(self._units)} units>, "
                f"<{len(self._prefixes)} prefixes>)")

    @property
    def revision(self) -> int:
        """Count of registrations made, used to detect changes."""
        return self._revision

    # -- Lookup --------------------------------------------------------

    def unit(self, code: str, case_sensitive: bool = True
             ) -> Optional[UnitDef]:
        """
        Returns the unit with the given code, or ``None`` if not found.
        If `case_sensitive` is ``False`` the case-insensitive index is
        tried first, then the exact code.
        """
        if not case_sensitive:
            unit = self._units_ci.get(code.upper())
            if unit is not None:
                return unit
        return self._units.get(code)

    def prefix(self, code: str, case_sensitive: bool = True
               ) -> Optional[Prefix]:
        """As for `unit`, but for prefixes."""
        if not case_sensitive:
            prefix = self._prefixes_ci.get(code.upper())
            if prefix is not None:
                return prefix
        return self._prefixes.get(code)

    def units(self) -> list[UnitDef]:
        """All units in registration order."""
        return list(self._units.values())

    def prefixes(self) -> list[Prefix]:
        """All prefixes in registration order."""
        return list(self._prefixes.values())

    def base_units(self) -> list[UnitDef]:
        return [u for u in self._units.values() if u.is_base]

    def prefix_candidates(self, case_sensitive: bool = True
                          ) -> list[tuple[str, Prefix]]:
        """
        Returns ``(code, prefix)`` pairs ordered by descending code
        length, so that e.g. ``da`` is tried before ``d``.  For
        case-insensitive matching the codes are the upper-cased
        case-insensitive codes.
        """
        try:
            return self._candidates[case_sensitive]
        except KeyError:
            pass

        if case_sensitive:
            pairs = [(p.code, p) for p in self._prefixes.values()]
        else:
            pairs = [(p.ci_code.upper(), p) for p in self._prefixes.values()]
        pairs.sort(key=lambda pair: len(pair[0]), reverse=True)
        self._candidates[case_sensitive] = pairs
        return pairs

    # -- Registration --------------------------------------------------

    def register_unit(self, unit: UnitDef):
        """
        Add `unit` to the catalog.  An existing unit with the same code
        is replaced, with a warning if the `warn_redefine` option is
        set.
        """
        with self._lock:
            old = self._units.get(unit.code)
            if old is not None:
                if get_ucum_options().warn_redefine:
                    warnings.warn(f"Unit '{unit.code}' redefined.")
                if self._units_ci.get(old.ci_code.upper()) is old:
                    del self._units_ci[old.ci_code.upper()]

            self._units[unit.code] = unit
            self._units_ci.setdefault(unit.ci_code.upper(), unit)
            self._revision += 1

    def register_prefix(self, prefix: Prefix):
        with self._lock:
            self._prefixes[prefix.code] = prefix
            self._prefixes_ci[prefix.ci_code.upper()] = prefix
            self._candidates = {}
            self._revision += 1

    def copy(self) -> Catalog:
        """Returns an independent snapshot of this catalog."""
        new = Catalog()
        with self._lock:
            new._units = dict(self._units)
            new._units_ci = dict(self._units_ci)
            new._prefixes = dict(self._prefixes)
            new._prefixes_ci = dict(self._prefixes_ci)
        return new


# ======================================================================

STANDARD_CATALOG = Catalog()


def add_prefix(code: str, name: str, value: float, exponent: int, *,
               ci_code: str = None, print_symbol: str = None):
    """
    Register a new prefix in the standard catalog.
    """
    STANDARD_CATALOG.register_prefix(Prefix(
        code=code, ci_code=ci_code if ci_code else code.upper(), name=name,
        value=value, exponent=exponent, print_symbol=print_symbol))


def add_unit(code: str, name: str, magnitude: float,
             dimension: Dimension | tuple[int, ...] = DIMENSIONLESS,
             **kwargs) -> UnitDef:
    """
    Register a new unit in the standard catalog.

    Parameters
    ----------
    code : str
        Case-sensitive UCUM code, e.g. ``'[ft_i]'``.
    name : str
        Display name.
    magnitude : float
        Size of the unit in base units.
    dimension : Dimension or tuple
        Powers of the base units, as a `Dimension` or a vector in
        `Dimension` field order.
    kwargs :
        Any other `UnitDef` field.

    Returns
    -------
    unit : UnitDef
        The registered unit.
    """
    if not isinstance(dimension, Dimension):
        dimension = Dimension.from_vector(dimension)
    unit = UnitDef(code=code, name=name, magnitude=magnitude,
                   dimension=dimension, **kwargs)
    STANDARD_CATALOG.register_unit(unit)
    return unit
