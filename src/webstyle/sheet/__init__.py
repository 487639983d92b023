"""Text style sheets: parse, then compile to tokens."""

from webstyle.sheet.compiler import ASPECTS, build_descriptor, compile_sheet
from webstyle.sheet.model import Argument, Block, Declaration, Quoted, Sheet
from webstyle.sheet.parser import parse_sheet

__all__ = [
    "ASPECTS",
    "Argument",
    "Block",
    "Declaration",
    "Quoted",
    "Sheet",
    "build_descriptor",
    "compile_sheet",
    "parse_sheet",
]
