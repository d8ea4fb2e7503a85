"""Report text and attribute values that would reach the output unescaped.

Rendering passes ``<``, ``>`` and ``&`` through untouched. This walks a tree
in render order and lists every place those characters appear so callers can
decide whether the content was pre-escaped on purpose.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Literal, Tuple

from .dom_model import Element, Node, TextNode

MARKUP_CHARS = ("&", "<", ">")


@dataclass(frozen=True)
class Finding:
    path: str
    kind: Literal["text", "attribute"]
    detail: str

    def format(self) -> str:
        return f"[audit] {self.path}: {self.detail}"


def _markup_chars(value: str) -> List[str]:
    return [char for char in MARKUP_CHARS if char in value]


def _describe(chars: List[str]) -> str:
    return " ".join(repr(char) for char in chars)


def _child_paths(element: Element, path: str) -> List[Tuple[Node, str]]:
    seen: Counter[str] = Counter()
    paths: List[Tuple[Node, str]] = []
    for child in element.children:
        key = "#text" if isinstance(child, TextNode) else child.tag_name
        paths.append((child, f"{path}/{key}[{seen[key]}]"))
        seen[key] += 1
    return paths


def find_unescaped_markup(element: Element) -> List[Finding]:
    """Return findings for ``element`` and its descendants, in render order."""
    findings: List[Finding] = []
    stack: List[Tuple[Node, str]] = [(element, element.tag_name)]
    while stack:
        node, path = stack.pop()
        if isinstance(node, TextNode):
            chars = _markup_chars(node.text)
            if chars:
                findings.append(
                    Finding(path=path, kind="text", detail=f"text contains {_describe(chars)}")
                )
            continue

        for attribute in node.attributes:
            chars = _markup_chars(attribute.value)
            if chars:
                findings.append(
                    Finding(
                        path=path,
                        kind="attribute",
                        detail=f"attribute {attribute.name!r} contains {_describe(chars)}",
                    )
                )
        stack.extend(reversed(_child_paths(node, path)))
    return findings


__all__ = ["Finding", "MARKUP_CHARS", "find_unescaped_markup"]
