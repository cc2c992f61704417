"""Interpreter that turns compact tab notation into ASCII guitar tablature.

The notation declares the strings of a staff as note names, then writes fret
numbers string by string, with ``.`` for an empty string, ``,`` to rest the
remaining strings of a beat, ``:n``/``;n`` to repeat those, and
``[time=3/4; fidelity=8]`` options blocks to change the defaults.

Examples
--------
>>> from tab_interpreter import interpret
>>> tabs = interpret("E A D G B E\\n0 3 5,")
>>> print(tabs.splitlines()[0])
E  |---

>>> from tab_interpreter import tokenize
>>> [str(t) for t in tokenize("C# 12")]
['[1] Note "C#"', '[1] Number "12"', '[1] EndOfFile ""']
"""

from tab_interpreter.config import InterpreterConfig
from tab_interpreter.errors import (
    OptionsError,
    RenderError,
    StaffStateError,
    TabInterpreterError,
    TokenizeError,
    Watcher,
)
from tab_interpreter.interpreter import interpret, run
from tab_interpreter.lexer import (
    NumberLiteral,
    OptionsLiteral,
    Token,
    TokenKind,
    Tokenizer,
    tokenize,
)
from tab_interpreter.renderer import Parser, Staff, StaffManager, StaffOptions, Time, render

__all__ = [
    "InterpreterConfig",
    "NumberLiteral",
    "OptionsError",
    "OptionsLiteral",
    "Parser",
    "RenderError",
    "Staff",
    "StaffManager",
    "StaffOptions",
    "StaffStateError",
    "TabInterpreterError",
    "Time",
    "Token",
    "TokenKind",
    "TokenizeError",
    "Tokenizer",
    "Watcher",
    "interpret",
    "render",
    "run",
    "tokenize",
]
