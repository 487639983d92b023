"""Declarative-block builder: accumulate tokens under one active modifier scope.

A builder is single-use and single-writer. Only one scope is active at a
time: entering a scope replaces the current one and leaving it clears back
to no scope (the outer scope is not restored). ``flush`` hands back the
tokens and closes the builder.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from webstyle.errors import BuilderClosedError
from webstyle.markup import Markup
from webstyle.modifiers import Modifier, apply_modifiers, as_modifiers, modifier_prefix
from webstyle.styling import On, StyleMethods, Styled, style_tokens

logger = logging.getLogger(__name__)


class StyleBuilder(StyleMethods):
    """Mutable token accumulator behind the nested block syntax.

    Chained aspect methods (``border``, ``font``...) are available and return
    the builder, so a block body reads like the chained form::

        builder = StyleBuilder()
        builder.padding()
        with builder.on(Modifier.HOVER):
            builder.background(blue(600))
        builder.flush()  # ["p-4", "hover:bg-blue-600"]
    """

    def __init__(self) -> None:
        self._tokens: list[str] = []
        self._scope: tuple[Modifier, ...] = ()
        self._closed = False

    @property
    def scope(self) -> tuple[Modifier, ...]:
        """The active modifier scope; empty when none is active."""
        return self._scope

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self._tokens)

    def _check_open(self) -> None:
        if self._closed:
            raise BuilderClosedError("StyleBuilder has already been flushed")

    def enter_scope(self, *modifiers: Modifier | str) -> StyleBuilder:
        self._check_open()
        scope = as_modifiers(modifiers)
        if self._scope:
            logger.debug(
                "Scope %r replaced by %r", modifier_prefix(self._scope), modifier_prefix(scope)
            )
        self._scope = scope
        return self

    def exit_scope(self) -> StyleBuilder:
        self._check_open()
        self._scope = ()
        return self

    @contextmanager
    def on(self, *modifiers: Modifier | str) -> Iterator[StyleBuilder]:
        """Scope every token added inside the ``with`` block to *modifiers*."""
        self.enter_scope(*modifiers)
        try:
            yield self
        finally:
            if not self._closed:
                self.exit_scope()

    def add_token(self, base: str) -> StyleBuilder:
        """Add one base token, prefixed by the active scope."""
        self._check_open()
        self._tokens.extend(apply_modifiers([base], self._scope))
        return self

    def add(self, descriptor: object, on: On = ()) -> StyleBuilder:
        """Compile *descriptor* and add its tokens under the active scope.

        Explicit *on* modifiers are applied inside the scope prefix.
        """
        self._check_open()
        for token in style_tokens(descriptor, on):
            self.add_token(token)
        return self

    def _apply(self, descriptor: object, on: On) -> StyleBuilder:
        return self.add(descriptor, on)

    def flush(self) -> list[str]:
        """Return the accumulated tokens and close the builder."""
        self._check_open()
        self._closed = True
        tokens, self._tokens = self._tokens, []
        logger.debug("Flushed %d token(s)", len(tokens))
        return tokens


class StyleBlock(StyleBuilder):
    """A builder bound to a node; leaving the ``with`` block styles the node.

    Example::

        with style_block(Element("div")) as block:
            block.padding()
            with block.on(Modifier.MD):
                block.flex(Direction.ROW)
        block.node.render()
    """

    def __init__(self, node: Markup) -> None:
        super().__init__()
        self.source = node
        self.node: Styled | None = None

    def flush(self) -> list[str]:
        """Close the block early; ``node`` is styled with the tokens so far."""
        tokens = super().flush()
        self.node = Styled(self.source, tuple(tokens))
        return tokens

    def __enter__(self) -> StyleBlock:
        self._check_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None and not self.closed:
            self.flush()


def style_block(node: Markup) -> StyleBlock:
    return StyleBlock(node)


@dataclass(frozen=True)
class Scoped:
    """A group of descriptors applied under one modifier scope."""

    modifiers: tuple[Modifier, ...]
    styles: tuple[object, ...]


def scoped(modifiers: On, *styles: object) -> Scoped:
    """Group *styles* under *modifiers*, e.g. ``scoped(Modifier.HOVER, Background(...))``."""
    return Scoped(as_modifiers(modifiers), styles)


def apply_block(node: Markup, *groups: Scoped | object) -> Styled:
    """Build the tokens for *groups* in order and attach them to *node*.

    Bare descriptors are added with no scope; each :class:`Scoped` group
    enters its scope, adds its styles and exits.
    """
    builder = StyleBuilder()
    for group in groups:
        if isinstance(group, Scoped):
            builder.enter_scope(*group.modifiers)
            for style in group.styles:
                builder.add(style)
            builder.exit_scope()
        else:
            builder.add(group)
    return Styled(node, tuple(builder.flush()))
