"""Single-pass tokenizer for tab notation.

This module scans tab notation source into a flat sequence of tokens,
recording lexical errors instead of stopping at the first one.
"""

from __future__ import annotations

import logging

from tab_interpreter.errors import TokenizeError, Watcher
from tab_interpreter.lexer.models import (
    NumberLiteral,
    OptionsLiteral,
    Token,
    TokenKind,
    TokenLiteral,
)

logger = logging.getLogger(__name__)

# Returned by peek/advance once the source is exhausted
NUL = "\0"

NOTE_NAMES = frozenset("ABCDEFG")
NOTE_MODIFIERS = frozenset("b#")


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


class Tokenizer:
    """Lexical analyzer that turns a source string into tokens.

    Parameters
    ----------
    source : str
        The complete tab notation source.

    Examples
    --------
    >>> tokenizer = Tokenizer("[time=4/4] E A D G B E\\n. 2 7,")
    >>> tokens = tokenizer.generate_tokens()
    >>> [t.text for t in tokens[:3]]
    ['[time=4/4]', 'E', 'A']
    >>> tokens[-1].kind
    <TokenKind.END_OF_FILE: 'EndOfFile'>
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.watcher = Watcher()
        self._tokens: list[Token] = []
        self._scanned = False
        self._start = 0
        self._current = 0
        self._line = 1

    def generate_tokens(self) -> tuple[Token, ...]:
        """Scan the source and return its tokens.

        The source is scanned only once; later calls return the cached result.

        Returns
        -------
        tuple[Token, ...]
            The tokens in source order, ending with one EndOfFile token.

        Raises
        ------
        TokenizeError
            If any lexical error was found. The message lists every error.
        """
        if not self._scanned:
            while not self._is_at_end():
                # each token starts where the previous one ended
                self._start = self._current
                self._consume_next()

            self._tokens.append(Token(TokenKind.END_OF_FILE, "", None, self._line))
            self._scanned = True
            logger.debug("Scanned %d tokens over %d lines", len(self._tokens), self._line)

        if self.watcher.had_error:
            raise TokenizeError(self.watcher)
        return tuple(self._tokens)

    def _consume_next(self) -> None:
        c = self._advance()
        if c == ".":
            self._add_token(TokenKind.EMPTY)
        elif c == ",":
            self._add_token(TokenKind.NEXT)
        elif c in NOTE_NAMES:
            if self._peek() in NOTE_MODIFIERS:
                self._current += 1
            self._add_token(TokenKind.NOTE)
        elif c == ":":
            self._spread(TokenKind.SPREAD_EMPTY)
        elif c == ";":
            self._spread(TokenKind.SPREAD_NEXT)
        elif c == "\n":
            self._line += 1
        elif c <= " ":
            pass
        elif c == "[":
            self._options()
        elif _is_digit(c):
            self._number()
        else:
            self.watcher.error(self._line, f"Unknown character value: {c}")

    def _is_at_end(self) -> bool:
        return self._current >= len(self.source)

    def _advance(self) -> str:
        c = self._peek()
        self._current += 1
        return c

    def _peek(self) -> str:
        if self._is_at_end():
            return NUL
        return self.source[self._current]

    def _add_token(self, kind: TokenKind, literal: TokenLiteral = None) -> None:
        text = self.source[self._start : self._current]
        self._tokens.append(Token(kind, text, literal, self._line))

    def _skip_digits(self) -> None:
        while _is_digit(self._peek()):
            self._advance()

    def _spread(self, kind: TokenKind) -> None:
        self._skip_digits()

        # the amount excludes the leading sigil
        text = self.source[self._start + 1 : self._current]
        try:
            amount = int(text)
        except ValueError as e:
            self.watcher.error(
                self._line,
                f'Spread amount "{text}" for "{kind}" could not be parsed into a number: {e}',
            )
            return
        self._add_token(kind, NumberLiteral(amount))

    def _options(self) -> None:
        while self._peek() != "]" and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self.watcher.error(
                self._line,
                'Unterminated options sequence. Close options sequences with "]".',
            )
            return

        # closing bracket
        self._advance()
        text = self.source[self._start + 1 : self._current - 1]
        self._add_token(TokenKind.OPTIONS, OptionsLiteral(text))

    def _number(self) -> None:
        self._skip_digits()

        text = self.source[self._start : self._current]
        try:
            value = int(text)
        except ValueError as e:
            self.watcher.error(
                self._line,
                f'String "{text}" could not be parsed into a number: {e}',
            )
            return
        self._add_token(TokenKind.NUMBER, NumberLiteral(value))


def tokenize(source: str) -> tuple[Token, ...]:
    """Tokenize tab notation source.

    Parameters
    ----------
    source : str
        The complete tab notation source.

    Returns
    -------
    tuple[Token, ...]
        Tokens in source order, ending with one EndOfFile token.

    Raises
    ------
    TokenizeError
        If the source contains lexical errors.

    Examples
    --------
    >>> [t.kind.value for t in tokenize("E 0,")]
    ['Note', 'Number', 'Next', 'EndOfFile']
    """
    return Tokenizer(source).generate_tokens()
