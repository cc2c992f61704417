"""Tokenizer for compact tab notation.

This module scans notation source such as ``"E A D G B E\\n0 3 5,"`` into
typed tokens for the renderer.
"""

from tab_interpreter.lexer.models import (
    NumberLiteral,
    OptionsLiteral,
    Token,
    TokenKind,
    TokenLiteral,
)
from tab_interpreter.lexer.tokenizer import Tokenizer, tokenize

__all__ = [
    "NumberLiteral",
    "OptionsLiteral",
    "Token",
    "TokenKind",
    "TokenLiteral",
    "Tokenizer",
    "tokenize",
]
