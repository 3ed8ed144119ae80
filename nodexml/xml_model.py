"""Node model for XML serialization."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from .errors import MissingNameError

Scalar = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class XmlText:
    value: Scalar = None


@dataclass
class XmlElement:
    name: str
    attributes: Dict[str, Scalar] = field(default_factory=dict)
    children: List["XmlNode"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise MissingNameError()
        if not isinstance(self.attributes, Mapping):
            self.attributes = {}
        self.children = [to_node(child) for child in _child_values(self.children)]


XmlNode = Union[XmlElement, XmlText]


def _child_values(children: Any) -> List[Any]:
    if children is None:
        return []
    if isinstance(children, (list, tuple)):
        return list(children)
    # A lone mapping or scalar is one child; it is never iterated or dropped.
    return [children]


def _leaf(value: Any) -> XmlNode:
    if isinstance(value, (XmlElement, XmlText)):
        return value
    if isinstance(value, (list, tuple)):
        raise MissingNameError()
    return XmlText(value)


def to_node(value: Any) -> XmlNode:
    """Coerce a raw tree value into an ``XmlElement`` or ``XmlText``.

    Mappings are elements and must carry a non-empty ``name``; lists and
    tuples in node position are treated the same way and therefore fail.
    Anything else is a text leaf. Nested mappings are converted with an
    explicit stack, children before parents, so tree depth is not bound by
    the interpreter recursion limit.
    """
    if not isinstance(value, Mapping):
        return _leaf(value)

    # Entries: raw mapping, its raw children, children converted so far.
    stack = [(value, _child_values(value.get("children")), [])]
    while True:
        raw, pending, built = stack[-1]
        if len(built) < len(pending):
            child = pending[len(built)]
            if isinstance(child, Mapping):
                stack.append((child, _child_values(child.get("children")), []))
            else:
                built.append(_leaf(child))
            continue

        stack.pop()
        element = XmlElement(
            name=raw.get("name"),
            attributes=raw.get("attributes") or {},
            children=built,
        )
        if not stack:
            return element
        stack[-1][2].append(element)


__all__ = ["Scalar", "XmlElement", "XmlNode", "XmlText", "to_node"]
