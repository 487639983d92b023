"""Lark parser that turns style-sheet source into a :class:`Sheet`."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import LarkError

from webstyle.errors import SheetSyntaxError
from webstyle.sheet.model import Argument, Block, Declaration, Quoted, Sheet

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class SheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into sheet model objects."""

    # ---- values ----

    def quoted(self, items: list[Token]) -> Quoted:
        raw = str(items[0])
        # Strip surrounding quotes and process escapes.
        return Quoted(raw[1:-1].replace('\\"', '"').replace("\\\\", "\\"))

    def word(self, items: list[Token]) -> str:
        return str(items[0])

    def list_value(self, items: list[object]) -> tuple:
        return tuple(items)

    # ---- structural ----

    @v_args(meta=True)
    def argument(self, meta, items: list[object]) -> Argument:
        return Argument(str(items[0]), items[1], line=_line(meta))

    def arguments(self, items: list[Argument]) -> tuple[Argument, ...]:
        return tuple(items)

    @v_args(meta=True)
    def declaration(self, meta, items: list[object]) -> Declaration:
        arguments = items[1] if len(items) > 1 else ()
        return Declaration(str(items[0]), arguments, line=_line(meta))

    def modifiers(self, items: list[Token]) -> tuple[str, ...]:
        return tuple(str(t) for t in items)

    @v_args(meta=True)
    def block(self, meta, items: list[object]) -> Block:
        return Block(items[0], tuple(items[1:]), line=_line(meta))

    def start(self, items: list[object]) -> Sheet:
        return Sheet(tuple(items))


def _line(meta) -> int | None:
    return None if getattr(meta, "empty", True) else meta.line


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )


def parse_sheet(source: str) -> Sheet:
    """Parse style-sheet source into a Sheet.

    Raises SheetSyntaxError (with line and column when known) on bad input.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise SheetSyntaxError(str(e), line=line, column=column) from e
    return SheetTransformer().transform(tree)
