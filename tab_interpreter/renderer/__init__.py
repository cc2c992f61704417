"""Tab rendering engine.

This module turns the token stream from the tokenizer into staffs of ASCII
guitar tablature, tracking time signature and beat resolution per staff.
"""

from tab_interpreter.renderer.manager import StaffManager
from tab_interpreter.renderer.options import StaffOptions
from tab_interpreter.renderer.parser import Parser, render
from tab_interpreter.renderer.staff import Staff
from tab_interpreter.renderer.timing import Time

__all__ = [
    "Parser",
    "Staff",
    "StaffManager",
    "StaffOptions",
    "Time",
    "render",
]
