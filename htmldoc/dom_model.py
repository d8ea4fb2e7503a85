"""Node tree model for building HTML documents and serializing them.

Escaping is deliberately narrow: attribute values have ``"`` replaced by
``&quot;`` and nothing else is touched. Text and attribute values containing
``<``, ``>`` or ``&`` are emitted verbatim, so callers must pre-escape any
content that comes from an untrusted source (``html.escape`` does the job).
``htmldoc.audit`` can report where such characters occur in a tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

DOCTYPE = "<!DOCTYPE html>\n"
ROOT_TAG = "html"


@dataclass(frozen=True)
class Attribute:
    name: str
    value: str

    def render(self) -> str:
        value = self.value
        if '"' in value:
            value = value.replace('"', "&quot;")
        return f'{self.name}="{value}"'


@dataclass(frozen=True)
class TextNode:
    """A leaf holding literal text. Rendered verbatim, without escaping."""

    text: str

    def render(self) -> str:
        return self.text


class Element:
    """A tagged node with ordered attributes and ordered children.

    Attributes and children can only be appended. ``add_child`` hands back the
    new child so construction can continue on it; the parent keeps ownership.
    """

    __slots__ = ("_tag_name", "_attributes", "_children")

    def __init__(self, tag_name: str) -> None:
        self._tag_name = tag_name
        self._attributes: List[Attribute] = []
        self._children: List[Node] = []

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def attributes(self) -> Tuple[Attribute, ...]:
        return tuple(self._attributes)

    @property
    def children(self) -> Tuple[Node, ...]:
        return tuple(self._children)

    def add_attribute(self, name: str, value: str) -> None:
        """Append an attribute. Duplicate names are kept and all rendered."""
        self._attributes.append(Attribute(name, value))

    def add_child(self, tag_name: str) -> Element:
        child = Element(tag_name)
        self._children.append(child)
        return child

    def add_text_child(self, text: str) -> None:
        self._children.append(TextNode(text))

    def render(self) -> str:
        """Serialize this element and its descendants.

        The walk keeps its own stack, so nesting depth is bounded only by
        memory. Pending closing tags sit on the stack as plain strings.
        """
        parts: List[str] = []
        stack: List[Element | TextNode | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            if isinstance(item, TextNode):
                parts.append(item.text)
                continue
            parts.append(f"<{item._tag_name}")
            for attribute in item._attributes:
                parts.append(" ")
                parts.append(attribute.render())
            if not item._children:
                # Any childless element self-closes, void or not.
                parts.append(" />")
                continue
            parts.append(">")
            stack.append(f"</{item._tag_name}>")
            stack.extend(reversed(item._children))
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"Element({self._tag_name!r}, attributes={len(self._attributes)}, "
            f"children={len(self._children)})"
        )


Node = Element | TextNode


class Document:
    """A single HTML document rooted at an ``html`` element."""

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root = Element(ROOT_TAG)

    def root(self) -> Element:
        return self._root

    def get_html(self) -> str:
        """Serialize the current tree, prefixed with the HTML5 doctype."""
        return DOCTYPE + self._root.render() + "\n"


__all__ = ["Attribute", "Document", "Element", "Node", "TextNode", "DOCTYPE", "ROOT_TAG"]
