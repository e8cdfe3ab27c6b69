from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

from ._errors import LexicalError


# ======================================================================

class TokenKind(Enum):
    UNIT = 'unit'
    NUMBER = 'number'
    MULTIPLY = 'multiply'
    DIVIDE = 'divide'
    OPEN_PAREN = 'open_paren'
    CLOSE_PAREN = 'close_paren'
    ANNOTATION = 'annotation'
    END = 'end'


class Token(NamedTuple):
    """
    Single lexical token.  `position` is the offset of the token in the
    source expression and is only used for diagnostics.
    """
    kind: TokenKind
    text: str
    position: int


# ----------------------------------------------------------------------

def tokenize(expression: str) -> list[Token]:
    """
    Split a UCUM expression into tokens, finishing with an ``END``
    token.

    Unit atoms are runs of letters, ``_``, ``%`` and ``'``, together
    with any number of bracketed runs ``[...]`` (which may contain any
    printable character except ``[``).  A signed integer written
    directly after an atom is returned as a separate ``NUMBER`` token
    holding the exponent, e.g. ``'s-2'`` gives ``UNIT('s')``,
    ``NUMBER('-2')``.

    Parameters
    ----------
    expression : str
        Unit expression to split.

    Returns
    -------
    tokens : list[Token]

    Raises
    ------
    LexicalError
        For an unclosed annotation ``{...``, an unclosed or nested
        bracket, or any character that cannot start a token.

    Examples
    --------
    >>> [t.text for t in tokenize('kg.m/s2')]
    ['kg', '.', 'm', '/', 's', '2', '']
    """
    tokens = []
    pos, n = 0, len(expression)

    while pos < n:
        ch = expression[pos]

        if ch in ' \t':
            pos += 1
            continue

        if ch in _SINGLE_CHAR_TOKENS:
            tokens.append(Token(_SINGLE_CHAR_TOKENS[ch], ch, pos))
            pos += 1
            continue

        # Annotations are kept verbatim, including the braces.
        if ch == '{':
            close = expression.find('}', pos)
            if close < 0:
                raise LexicalError(f"Unclosed annotation at position {pos}",
                                   expression=expression, position=pos)
            tokens.append(Token(TokenKind.ANNOTATION,
                                expression[pos:close + 1], pos))
            pos = close + 1
            continue

        # Numbers (e.g. literal unity '1' or an exponent after ')').
        if m := _NUMBER_RX.match(expression, pos):
            tokens.append(Token(TokenKind.NUMBER, m.group(), pos))
            pos = m.end()
            continue

        if _is_atom_char(ch) or ch == '[':
            end = _scan_atom(expression, pos)
            tokens.append(Token(TokenKind.UNIT, expression[pos:end], pos))
            pos = end

            # Exponent attached directly to the atom.
            if m := _NUMBER_RX.match(expression, pos):
                tokens.append(Token(TokenKind.NUMBER, m.group(), pos))
                pos = m.end()
            continue

        raise LexicalError(f"Unexpected character '{ch}' at position {pos}",
                           expression=expression, position=pos)

    tokens.append(Token(TokenKind.END, '', pos))
    return tokens


# ----------------------------------------------------------------------

_NUMBER_RX = re.compile(r'[+-]?[0-9]+')

_SINGLE_CHAR_TOKENS = {
    '.': TokenKind.MULTIPLY,
    '/': TokenKind.DIVIDE,
    '(': TokenKind.OPEN_PAREN,
    ')': TokenKind.CLOSE_PAREN
}


def _is_atom_char(ch: str) -> bool:
    return ('a' <= ch <= 'z') or ('A' <= ch <= 'Z') or ch in "_%'"


def _scan_atom(expression: str, start: int) -> int:
    """
    Returns the end offset of the unit atom starting at `start`.  An
    atom never ends inside brackets: an unclosed or nested bracket is a
    `LexicalError`, not a shorter atom.
    """
    pos, n = start, len(expression)
    bracket_pos = None

    while pos < n:
        ch = expression[pos]
        if bracket_pos is not None:
            if ch == ']':
                bracket_pos = None
            elif ch == '[':
                raise LexicalError(
                    f"Nested bracket at position {pos}",
                    expression=expression, position=pos)
            elif not ('!' <= ch <= '~'):
                break
        elif ch == '[':
            bracket_pos = pos
        elif not _is_atom_char(ch):
            break
        pos += 1

    if bracket_pos is not None:
        raise LexicalError(f"Unclosed bracket at position {bracket_pos}",
                           expression=expression, position=bracket_pos)

    return pos
