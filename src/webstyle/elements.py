"""Minimal element tree: enough markup to receive and render style tokens."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Mapping

from webstyle.markup import Markup, class_attribute
from webstyle.styling import Stylable


@dataclass(frozen=True)
class Text(Stylable):
    """Escaped text content. Styling it wraps the text in a ``<span>``."""

    value: str

    @property
    def classes(self) -> tuple[str, ...]:
        return ()

    def render(self) -> str:
        return html.escape(self.value, quote=False)


@dataclass(frozen=True)
class Element(Stylable):
    """An HTML element with a fixed class list, attributes and children.

    Example::

        Element("button", children=("Save",)).padding(length=2).rounded()
    """

    tag: str
    classes: tuple[str, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple[Markup | str, ...] = ()
    self_closing: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "classes", tuple(self.classes))
        object.__setattr__(self, "children", tuple(self.children))

    def _attribute_text(self) -> str:
        parts: list[str] = []
        if self.classes:
            parts.append(f'class="{html.escape(class_attribute(self.classes))}"')
        for key, value in self.attributes.items():
            parts.append(f'{key}="{html.escape(str(value))}"')
        return "".join(f" {p}" for p in parts)

    def render(self) -> str:
        attrs = self._attribute_text()
        if self.self_closing:
            return f"<{self.tag}{attrs} />"
        inner = "".join(
            html.escape(child, quote=False) if isinstance(child, str) else child.render()
            for child in self.children
        )
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"
