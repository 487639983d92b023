"""Renderable-node contract consumed by the style adapter and builder.

The style compiler only needs two things from a node: its current class list
and a way to render it. Compiled tokens are merged into the class attribute
in order, joined by one space, duplicates kept.
"""

from __future__ import annotations

import html
import re
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class Markup(Protocol):
    @property
    def classes(self) -> tuple[str, ...]: ...

    def render(self) -> str: ...


def merge_classes(existing: Iterable[str], added: Iterable[str]) -> tuple[str, ...]:
    """Append *added* after *existing*, preserving order and duplicates."""
    return tuple(existing) + tuple(added)


def class_attribute(classes: Iterable[str]) -> str:
    return " ".join(classes)


# First opening tag: <name ...> or <name .../>
_FIRST_TAG_RE = re.compile(r"<([A-Za-z][\w:-]*)(\s[^<>]*?)?(/?)>")
_CLASS_ATTR_RE = re.compile(r"""\sclass=(["'])(.*?)\1""")


def inject_classes(markup: str, classes: Iterable[str]) -> str:
    """Merge *classes* into the class attribute of the first tag in *markup*.

    Bare text (no tag at all) is wrapped in a ``<span>`` carrying the classes.
    """
    classes = tuple(classes)
    if not classes:
        return markup
    joined = html.escape(class_attribute(classes), quote=True)

    match = _FIRST_TAG_RE.search(markup)
    if match is None:
        return f'<span class="{joined}">{markup}</span>'

    attrs = match.group(2) or ""
    existing = _CLASS_ATTR_RE.search(attrs)
    if existing is not None:
        merged = f"{existing.group(2)} {joined}" if existing.group(2) else joined
        quote = existing.group(1)
        attrs = (
            attrs[: existing.start()]
            + f" class={quote}{merged}{quote}"
            + attrs[existing.end():]
        )
    else:
        attrs = f' class="{joined}"' + attrs
    tag = f"<{match.group(1)}{attrs}{match.group(3)}>"
    return markup[: match.start()] + tag + markup[match.end():]
