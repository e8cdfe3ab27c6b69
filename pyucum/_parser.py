from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import NamedTuple, Optional

from ._catalog import Catalog, Prefix, UnitDef, STANDARD_CATALOG
from ._dim import Dimension, DIMENSIONLESS, _to_ucode_super
from ._errors import (UcumError, UnknownUnitError, ExpressionSyntaxError,
                      EmptyInputError)
from ._lexer import Token, TokenKind, tokenize
from ._opts import get_ucum_options


# ======================================================================

@dataclass(frozen=True, kw_only=True)
class ParsedUnit:
    """
    Result of parsing a UCUM expression.

    `magnitude` and `dimension` are the values folded over the whole
    expression.  For a single atomic unit, `unit`, `prefix` and
    `exponent` describe it.  For a composite expression, `components`
    holds the operands in order and `operators` the ``'.'`` or ``'/'``
    placed before each operand after the first.  Components are only
    used for display (`code`, `get_name`) and are never used to
    recompute the magnitude.

    If parsing failed, `error` holds the message and `error_type` the
    matching `UcumError` subclass; `magnitude` is then 1 and
    `dimension` is dimensionless.
    """
    original: str
    magnitude: float = 1.0
    dimension: Dimension = DIMENSIONLESS
    unit: Optional[UnitDef] = None
    prefix: Optional[Prefix] = None
    exponent: int = 1
    components: tuple[ParsedUnit, ...] = field(default=())
    operators: tuple[str, ...] = field(default=())
    is_special: bool = False
    error: Optional[str] = None
    error_type: Optional[type[UcumError]] = None

    def __str__(self):
        if self.error:
            return f"{self.original} (error: {self.error})"
        return self.code

    # -- Properties ----------------------------------------------------

    @property
    def code(self) -> str:
        """
        UCUM code rebuilt from the parsed parts, e.g. ``'kg.m/s2'``.
        Unity and annotations give ``'1'``.
        """
        if self.components:
            # Parenthesised group raised to a power.
            if self.exponent != 1:
                return f'({self.components[0].code}){self.exponent}'

            parts = [self.components[0]._operand_code()]
            for op, comp in zip(self.operators, self.components[1:]):
                parts += [op, comp._operand_code()]
            return ''.join(parts)

        if self.unit is None:
            return '1'

        prefix_code = self.prefix.code if self.prefix else ''
        exp_str = str(self.exponent) if self.exponent != 1 else ''
        return prefix_code + self.unit.code + exp_str

    @property
    def is_valid(self) -> bool:
        """
        ``True`` if there is no error and the result is a unit, a
        composite or dimensionless unity.
        """
        if self.error is not None:
            return False
        return (self.unit is not None or bool(self.components) or
                self.is_unity)

    @property
    def is_unity(self) -> bool:
        return (self.unit is None and not self.components and
                self.magnitude == 1.0 and
                self.dimension.is_dimensionless())

    # -- Public Methods ------------------------------------------------

    def get_name(self, plural: bool = False) -> str:
        """
        Display name, e.g. ``'kilometers per hour'``.  Only the leading
        unit is made plural.
        """
        if self.error:
            return self.original

        if self.components:
            parts = [self.components[0].get_name(plural)]
            for op, comp in zip(self.operators, self.components[1:]):
                parts += ['per' if op == '/' else '', comp.get_name()]
            name = ' '.join(p for p in parts if p)
            return name + self._exponent_str()

        if self.unit is None:
            return '1'

        prefix_name = self.prefix.name if self.prefix else ''
        unit_name = self.unit.plural if plural else self.unit.name
        return prefix_name + unit_name + self._exponent_str()

    def raise_error(self):
        """Raise the stored error, if any, as its `error_type`."""
        if self.error is not None:
            raise (self.error_type or UcumError)(
                self.error, expression=self.original)

    # -- Private Methods -----------------------------------------------

    def _exponent_str(self) -> str:
        if self.exponent == 1:
            return ''
        if get_ucum_options().unicode_str:
            return _to_ucode_super(str(self.exponent))
        return f'^{self.exponent}'

    def _operand_code(self) -> str:
        if len(self.components) > 1:
            return f'({self.code})'
        return self.code


class ValidationResult(NamedTuple):
    is_valid: bool
    unit: Optional[ParsedUnit]
    normalized_code: Optional[str]
    messages: tuple[str, ...]


# ======================================================================

class UnitParser:
    """
    Parser for UCUM unit expressions, such as ``'kg.m/s2'``,
    ``'mg/dL'``, ``'[lb_av]'`` or ``'mm[Hg]'``.

    Each parser holds its own copy of the unit catalog, so units added
    with `register_unit` are only visible to that parser.

    Parameters
    ----------
    catalog : Catalog, optional
        Catalog to copy.  Defaults to the standard UCUM catalog.
    case_sensitive : bool, optional
        Match codes case-sensitively.  Defaults to the current
        `UcumOptions` value.
    strict : bool, optional
        Use strict error handling (see `set_ucum_options`).  Defaults to
        the current `UcumOptions` value.

    Examples
    --------
    >>> parser = UnitParser()
    >>> km = parser.parse('km')
    >>> km.magnitude, km.dimension
    (1000.0, Dimension(length=1))
    >>> parser.parse('xyz').error
    'Unknown unit: xyz'
    """

    def __init__(self, catalog: Catalog = None, *,
                 case_sensitive: bool = None, strict: bool = None):
        opts = get_ucum_options()
        self._catalog = (catalog if catalog is not None
                         else STANDARD_CATALOG).copy()
        self._case_sensitive = (case_sensitive if case_sensitive is not None
                                else opts.case_sensitive)
        self._strict = strict if strict is not None else opts.strict
        self._max_nesting = opts.max_nesting

    def __repr__(self):
        return (f"UnitParser(case_sensitive={self._case_sensitive}, "
                f"strict={self._strict})")

    # -- Properties ----------------------------------------------------

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def units(self) -> list[UnitDef]:
        return self._catalog.units()

    @property
    def max_nesting(self) -> int:
        return self._max_nesting

    @property
    def prefixes(self) -> list[Prefix]:
        return self._catalog.prefixes()

    # -- Public Methods ------------------------------------------------

    def parse(self, expression: str, *, strict: bool = None) -> ParsedUnit:
        """
        Parse a unit expression.  This never raises for a bad
        expression; check `ParsedUnit.error` (or `is_valid`) on the
        result.

        Parameters
        ----------
        expression : str
            UCUM expression, e.g. ``'kg.m/s2'``.
        strict : bool, optional
            Overrides the parser's `strict` setting for this call.

        Returns
        -------
        result : ParsedUnit
        """
        if not expression:
            return _error_result(expression, "Empty unit string",
                                 EmptyInputError)

        strict = self._strict if strict is None else strict
        try:
            tokens = tokenize(expression)
            return _ExpressionParser(self, tokens, expression,
                                     strict).parse()
        except UcumError as e:
            return _error_result(expression, e.args[0], type(e))
        except Exception as e:
            # e.g. arithmetic failures from custom units with zero size.
            return _error_result(expression, f"Parse error: {e}", UcumError)

    def parse_atom(self, atom: str, exponent: int = 1,
                   original: str = None) -> ParsedUnit:
        """
        Resolve a single unit atom, raised to `exponent`.

        The atom is first looked up exactly, then with any brackets
        removed.  Failing that, prefixes are tried longest first against
        the bracket-free atom, accepting the first whose remainder is a
        metric unit (so ``km`` is kilo + metre but ``k[lb_av]`` is
        unknown).

        Parameters
        ----------
        atom : str
            Unit atom, e.g. ``'km'``, ``'[ft_i]'``, ``'[kg]'``.
        exponent : int, default = 1
            Integer power applied to the unit.
        original : str, optional
            Expression to record as `ParsedUnit.original`.  Defaults to
            `atom`.

        Returns
        -------
        result : ParsedUnit
            The resolved unit, or an ``'Unknown unit: ...'`` error.
        """
        original = atom if original is None else original

        # Exact code, then with brackets removed.
        unit = self.resolve_atom(atom)
        stripped = atom.replace('[', '').replace(']', '')
        if unit is None and stripped != atom:
            unit = self.resolve_atom(stripped)

        if unit is not None:
            return _atom_result(original, unit, None, exponent)

        # Prefix + metric unit.  The remainder is looked up without
        # brackets, then (for units such as 'm[Hg]') as written.
        if self._case_sensitive:
            target, target_atom = stripped, atom
        else:
            target, target_atom = stripped.upper(), atom.upper()

        for prefix_code, prefix in self._catalog.prefix_candidates(
                self._case_sensitive):
            if not target.startswith(prefix_code):
                continue

            n = len(prefix_code)
            unit = self.resolve_atom(stripped[n:]) if stripped[n:] else None
            if unit is None and atom != stripped and \
                    target_atom.startswith(prefix_code):
                unit = self.resolve_atom(atom[n:])

            if unit is not None and unit.is_metric:
                return _atom_result(original, unit, prefix, exponent)

        return _error_result(original, f"Unknown unit: {atom}",
                             UnknownUnitError)

    def register_unit(self, unit: UnitDef):
        """
        Add a custom unit to this parser's catalog, replacing any unit
        with the same code.  No other checks are made.
        """
        self._catalog.register_unit(unit)

    def resolve_atom(self, code: str) -> Optional[UnitDef]:
        """Catalog unit with this code, or ``None``."""
        return self._catalog.unit(code, self._case_sensitive)

    def resolve_prefix(self, code: str) -> Optional[Prefix]:
        """Catalog prefix with this code, or ``None``."""
        return self._catalog.prefix(code, self._case_sensitive)

    def validate(self, expression: str) -> ValidationResult:
        """
        Parse `expression` and summarise the outcome.  A valid result
        includes the normalised code, e.g. ``'kg.m/s2'``.
        """
        parsed = self.parse(expression)
        if not parsed.is_valid:
            message = parsed.error or f"Invalid unit: {expression}"
            return ValidationResult(False, parsed, None, (message,))

        return ValidationResult(True, parsed, parsed.code, ())


# ======================================================================

class _ExpressionParser:
    """
    Recursive descent over a token list::

        term   := factor (('.' | '/') factor)*
        factor := '(' term ')' exponent? | atom exponent? | annotation
                  | '1'

    Magnitude and dimension are folded left to right as operands are
    read.  In strict mode the first error stops the parse and becomes
    the result; otherwise errors below the top level are folded in as
    dimensionless unity.
    """

    def __init__(self, parser: UnitParser, tokens: list[Token],
                 original: str, strict: bool):
        self._parser = parser
        self._tokens = tokens
        self._original = original
        self._strict = strict
        self._idx = 0
        self._depth = 0

    def parse(self) -> ParsedUnit:
        result = self._term()
        if result.error or not self._strict:
            return result

        token = self._peek()
        if token.kind != TokenKind.END:
            return self._unexpected(token)
        return result

    # -- Grammar -------------------------------------------------------

    def _term(self) -> ParsedUnit:
        left = self._factor()
        if left.error and self._strict:
            return left

        while (op := self._peek()).kind in (TokenKind.MULTIPLY,
                                            TokenKind.DIVIDE):
            self._idx += 1
            right = self._factor()
            if right.error and self._strict:
                return right

            if op.kind == TokenKind.MULTIPLY:
                mag = left.magnitude * right.magnitude
                dim = left.dimension * right.dimension
            else:
                mag = left.magnitude / right.magnitude
                dim = left.dimension / right.dimension

            # Extend the running composite rather than nesting it.
            if left.components and left.exponent == 1:
                comps, ops = left.components, left.operators
            else:
                comps, ops = (left,), ()

            left = ParsedUnit(original=self._original, magnitude=mag,
                              dimension=dim, components=comps + (right,),
                              operators=ops + (op.text,),
                              is_special=left.is_special or right.is_special)

        return left

    def _factor(self) -> ParsedUnit:
        token = self._peek()

        if token.kind == TokenKind.OPEN_PAREN:
            return self._group(token)

        if token.kind == TokenKind.UNIT:
            self._idx += 1
            exponent = self._exponent()
            result = self._parser.parse_atom(token.text, exponent,
                                             self._original)
            self._skip_annotation()
            return result

        if token.kind == TokenKind.ANNOTATION:
            self._idx += 1
            return ParsedUnit(original=self._original)

        if token.kind == TokenKind.NUMBER and token.text == '1':
            self._idx += 1
            self._skip_annotation()
            return ParsedUnit(original=self._original)

        return self._unexpected(token)

    def _group(self, open_token: Token) -> ParsedUnit:
        """Parenthesised term with an optional exponent."""
        if self._depth >= self._parser.max_nesting:
            return _error_result(
                self._original, f"Parentheses nested too deeply at "
                                f"position {open_token.position}",
                ExpressionSyntaxError)

        self._depth += 1
        self._idx += 1
        inner = self._term()
        self._depth -= 1
        if inner.error and self._strict:
            return inner

        if self._peek().kind == TokenKind.CLOSE_PAREN:
            self._idx += 1
        elif self._strict:
            return _error_result(
                self._original, f"Missing closing parenthesis for "
                                f"position {open_token.position}",
                ExpressionSyntaxError)

        exponent = self._exponent()
        self._skip_annotation()
        if inner.error and exponent != 1:
            # Lenient only: a failed group raised to a power is unity.
            return ParsedUnit(original=self._original)
        if exponent == 1 or inner.is_unity:
            return inner

        mag = _int_pow(inner.magnitude, exponent)
        dim = inner.dimension ** exponent
        if inner.unit is not None and not inner.components:
            return replace(inner, exponent=inner.exponent * exponent,
                           magnitude=mag, dimension=dim)

        return ParsedUnit(original=self._original, magnitude=mag,
                          dimension=dim, exponent=exponent,
                          components=(inner,), is_special=inner.is_special)

    # -- Helpers -------------------------------------------------------

    def _exponent(self) -> int:
        token = self._peek()
        if token.kind == TokenKind.NUMBER:
            self._idx += 1
            return int(token.text)
        return 1

    def _peek(self) -> Token:
        # The END token is never consumed.
        return self._tokens[min(self._idx, len(self._tokens) - 1)]

    def _skip_annotation(self):
        if self._peek().kind == TokenKind.ANNOTATION:
            self._idx += 1

    def _unexpected(self, token: Token) -> ParsedUnit:
        if token.kind == TokenKind.END:
            msg = "Unexpected end of expression"
        else:
            msg = (f"Unexpected token: {token.text} at position "
                   f"{token.position}")
        return _error_result(self._original, msg, ExpressionSyntaxError)


# ----------------------------------------------------------------------

def _atom_result(original: str, unit: UnitDef, prefix: Optional[Prefix],
                 exponent: int) -> ParsedUnit:
    magnitude = unit.magnitude
    if prefix is not None:
        magnitude *= prefix.value

    return ParsedUnit(original=original, unit=unit, prefix=prefix,
                      exponent=exponent,
                      magnitude=_int_pow(magnitude, exponent),
                      dimension=unit.dimension ** exponent,
                      is_special=unit.is_special)


def _error_result(original: str, message: str,
                  error_type: type[UcumError]) -> ParsedUnit:
    return ParsedUnit(original=original, error=message,
                      error_type=error_type)


def _int_pow(base: float, exponent: int) -> float:
    """
    Raise to an integer power by repeated squaring and multiplication.
    The number of multiplications grows with the number of bits in
    `exponent`, not its size.
    """
    if exponent == 0:
        return 1.0
    if exponent == 1:
        return base
    if exponent == -1:
        return 1.0 / base

    result, n = 1.0, abs(exponent)
    while n:
        if n & 1:
            result *= base
        n >>= 1
        if n:
            base *= base
    return result if exponent > 0 else 1.0 / result
