"""Build document trees from declarative descriptions."""

from __future__ import annotations

import html
from pathlib import Path
from typing import Iterable, List, Tuple

from .dom_model import Document, Element
from .io_utils import read_structured
from .models import AttributeSpec, DocumentSpec, ElementSpec, TextSpec


def _apply_attributes(element: Element, attributes: Iterable[AttributeSpec]) -> None:
    for attribute in attributes:
        value = html.escape(attribute.value, quote=False) if attribute.escape else attribute.value
        element.add_attribute(attribute.name, value)


def _apply_children(element: Element, children: List[ElementSpec | TextSpec]) -> None:
    # Pending (parent, child spec) pairs, last child on top.
    stack: List[Tuple[Element, ElementSpec | TextSpec]] = [
        (element, child) for child in reversed(children)
    ]
    while stack:
        parent, child = stack.pop()
        if isinstance(child, TextSpec):
            text = html.escape(child.text, quote=False) if child.escape else child.text
            parent.add_text_child(text)
            continue
        node = parent.add_child(child.tag)
        _apply_attributes(node, child.attributes)
        stack.extend((node, grandchild) for grandchild in reversed(child.children))


def build_document(spec: DocumentSpec) -> Document:
    """Create a Document whose html root follows ``spec`` in order."""
    document = Document()
    root = document.root()
    _apply_attributes(root, spec.attributes)
    _apply_children(root, spec.children)
    return document


def load_document_spec(path: Path) -> DocumentSpec:
    data = read_structured(path) or {}
    return DocumentSpec.model_validate(data)


def example_document() -> Document:
    """The canonical usage example: a link and a paragraph inside a body."""
    document = Document()
    body = document.root().add_child("body")
    link = body.add_child("a")
    link.add_attribute("href", "http://unlicense.org/")
    link.add_text_child("Click on me!")
    paragraph = body.add_child("p")
    paragraph.add_text_child("Hello world!")
    return document


__all__ = ["build_document", "example_document", "load_document_spec"]
