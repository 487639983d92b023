"""Sheet model: the parsed form of a style sheet, before compilation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class Quoted:
    """A double-quoted literal; compiled as a raw value and never checked."""

    text: str


Value = Union[str, Quoted, tuple]


@dataclass(frozen=True)
class Argument:
    name: str
    value: Value
    line: int | None = None


@dataclass(frozen=True)
class Declaration:
    """``aspect(name: value, ...)``: one style descriptor."""

    aspect: str
    arguments: tuple[Argument, ...] = ()
    line: int | None = None


@dataclass(frozen=True)
class Block:
    """``mod[, mod...] { ... }``: items compiled under a modifier scope."""

    modifiers: tuple[str, ...]
    items: tuple[Declaration | Block, ...] = ()
    line: int | None = None


@dataclass(frozen=True)
class Sheet:
    items: tuple[Declaration | Block, ...] = field(default_factory=tuple)

    def walk(self) -> Iterator[tuple[Declaration | Block, int]]:
        """Yield every item with its block depth, in source order."""
        yield from _walk(self.items, 0)

    def declarations(self) -> list[Declaration]:
        return [item for item, _ in self.walk() if isinstance(item, Declaration)]

    def blocks(self) -> list[Block]:
        return [item for item, _ in self.walk() if isinstance(item, Block)]


def _walk(
    items: tuple[Declaration | Block, ...], depth: int
) -> Iterator[tuple[Declaration | Block, int]]:
    for item in items:
        yield item, depth
        if isinstance(item, Block):
            yield from _walk(item.items, depth + 1)
