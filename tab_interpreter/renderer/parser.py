"""Rendering of a token stream into ASCII guitar tablature.

This module provides the Parser that walks the tokens produced by the
tokenizer and drives a StaffManager to build the tab text.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tab_interpreter.errors import OptionsError, RenderError, Watcher
from tab_interpreter.lexer.models import NumberLiteral, OptionsLiteral, Token, TokenKind
from tab_interpreter.renderer.manager import StaffManager

logger = logging.getLogger(__name__)


class Parser:
    """Generates guitar tablature from a sequence of tokens.

    Parameters
    ----------
    source : Sequence[Token]
        Tokens as produced by the tokenizer, ending with EndOfFile.

    Examples
    --------
    >>> from tab_interpreter.lexer import tokenize
    >>> parser = Parser(tokenize("E A D G B E\\n0 3 5,"))
    >>> print(parser.generate_tabs().splitlines()[3])
    D  |-5-
    """

    def __init__(self, source: Sequence[Token]) -> None:
        self.source = source
        self.watcher = Watcher()
        self._tabs: str | None = None

    def generate_tabs(self) -> str:
        """Render the tokens into tablature text.

        The tokens are rendered only once; later calls return the cached
        result.

        Returns
        -------
        str
            One block per staff: a line per string followed by the beat
            count line, with blocks separated by blank lines.

        Raises
        ------
        RenderError
            If any options block was invalid. The message lists every error.
        """
        if self._tabs is None:
            staff_manager = StaffManager()
            for token in self.source:
                self._apply(staff_manager, token)
            self._tabs = str(staff_manager)
            logger.debug("Rendered %d staffs", len(staff_manager.staffs))

        if self.watcher.had_error:
            raise RenderError(self.watcher)
        return self._tabs

    def _apply(self, staff_manager: StaffManager, token: Token) -> None:
        kind = token.kind
        if kind is TokenKind.NOTE:
            staff_manager.add_note(token.text)
        elif kind is TokenKind.NUMBER:
            staff_manager.add_tab(token.text)
        elif kind is TokenKind.EMPTY:
            staff_manager.add_empty()
        elif kind is TokenKind.NEXT:
            staff_manager.add_next()
        elif kind is TokenKind.SPREAD_EMPTY:
            if isinstance(token.literal, NumberLiteral):
                staff_manager.add_spread_empty(token.literal.value)
        elif kind is TokenKind.SPREAD_NEXT:
            if isinstance(token.literal, NumberLiteral):
                staff_manager.add_spread_next(token.literal.value)
        elif kind is TokenKind.OPTIONS:
            if isinstance(token.literal, OptionsLiteral):
                try:
                    staff_manager.set_options(token.literal.text)
                except OptionsError as e:
                    self.watcher.error(token.line, f"\n{e}")


def render(tokens: Sequence[Token]) -> str:
    """Render tokens into guitar tablature text.

    Raises
    ------
    RenderError
        If the tokens contain invalid options blocks.
    """
    return Parser(tokens).generate_tabs()
