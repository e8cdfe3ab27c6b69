from __future__ import annotations


# ======================================================================

class UcumError(ValueError):
    """
    Base class for errors found when lexing, parsing or converting UCUM
    expressions.  Parsing never raises these directly; the message and
    class are carried on the result instead (see `ParsedUnit.error` and
    `ParsedUnit.error_type`).  They are raised by the convenience
    function `convert` and by `ParsedUnit.raise_error`.

    Notes
    -----
    `UcumError` may also have additional attributes not listed here
    depending on where it was raised.
    """

    def __init__(self, *args, expression: str = None, position: int = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `ValueError`.
        expression : str, default = None
            The unit expression being processed.
        position : int, default = None
            Character offset in `expression` where the problem was found,
            if known.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.expression, self.position = expression, position
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


class LexicalError(UcumError):
    """Unclosed annotation or bracket, or an unexpected character."""


class UnknownUnitError(UcumError):
    """An atom that is not a catalog unit nor a prefix + metric unit."""


class ExpressionSyntaxError(UcumError):
    """Unexpected or missing token in an otherwise lexable expression."""


class DimensionMismatchError(UcumError):
    """
    Both sides of a conversion are valid but their dimensions differ.
    Carries the attributes `from_dimension` and `to_dimension`.
    """


class EmptyInputError(UcumError):
    """The expression string is empty."""
