"""Data models for tab notation tokens.

This module defines the token kinds produced by the tokenizer, the literal
values some tokens carry, and the token record itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kinds of tokens found in tab notation source.

    The enum value is the human-readable name used in diagnostics.
    """

    # single character tokens
    EMPTY = "Empty"  # `.`
    NEXT = "Next"  # `,`
    # one or two character tokens
    NOTE = "Note"  # `[A-G][b#]?`
    # multi character tokens
    SPREAD_EMPTY = "Spread Empty"  # `:[0-9]+`
    SPREAD_NEXT = "Spread Next"  # `;[0-9]+`
    # literals
    NUMBER = "Number"  # `[0-9]+`
    OPTIONS = "Options"  # `[time=4/4; fidelity=16]`
    END_OF_FILE = "EndOfFile"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumberLiteral:
    """A literal whole number, such as a fret or a spread amount.

    Parameters
    ----------
    value : int
        The parsed unsigned value.
    """

    value: int


@dataclass(frozen=True)
class OptionsLiteral:
    """The text of an options block, without its surrounding brackets.

    Parameters
    ----------
    text : str
        Raw option text (e.g., "time=4/4; fidelity=16").
    """

    text: str


TokenLiteral = NumberLiteral | OptionsLiteral | None


@dataclass(frozen=True)
class Token:
    """A token scanned from tab notation source.

    Parameters
    ----------
    kind : TokenKind
        The token classification.
    text : str
        The raw text exactly as it appears in the source.
    literal : TokenLiteral
        Parsed literal value, or None for tokens without one.
    line : int
        The 1-based source line the token was found on.

    Examples
    --------
    >>> token = Token(TokenKind.NUMBER, "4", NumberLiteral(4), 1)
    >>> str(token)
    '[1] Number "4"'
    """

    kind: TokenKind
    text: str
    literal: TokenLiteral
    line: int

    def __str__(self) -> str:
        return f'[{self.line}] {self.kind} "{self.text}"'
