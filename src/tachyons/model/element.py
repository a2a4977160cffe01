"""Element tree model: an immutable UI element descriptor and its helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

__all__ = [
    "Element",
    "children_to_list",
    "clone_element",
    "create_element",
    "is_element",
]


@dataclass(frozen=True)
class Element:
    """A single node in a UI element tree.

    Children live under ``props["children"]`` and may be absent, a single
    value, or a (possibly nested) list. Anything that is not an ``Element``
    is an opaque leaf such as a text string.
    """

    type: Any
    props: Mapping[str, Any] = field(default_factory=dict)
    key: str | None = None

    @property
    def children(self) -> Any:
        return self.props.get("children")


def is_element(value: object) -> bool:
    return isinstance(value, Element)


def create_element(type: Any, props: Mapping[str, Any] | None = None, *children: Any) -> Element:
    """Build an Element; positional *children* replace ``props["children"]``.

    A single positional child is stored as-is, several are stored as a list.
    ``key`` is lifted out of *props* onto the element.
    """
    new_props = dict(props or {})
    key = new_props.pop("key", None)
    if len(children) == 1:
        new_props["children"] = children[0]
    elif children:
        new_props["children"] = list(children)
    return Element(type=type, props=new_props, key=key)


def children_to_list(children: Any) -> list[Any]:
    """Flatten *children* into a list, dropping ``None`` and booleans."""
    result: list[Any] = []
    if children is None or isinstance(children, bool):
        return result
    if isinstance(children, (list, tuple)):
        for child in children:
            result.extend(children_to_list(child))
        return result
    result.append(children)
    return result


_NO_CHILDREN = object()


def clone_element(element: Element, props: Mapping[str, Any] | None = None, children: Any = _NO_CHILDREN) -> Element:
    """Return a copy of *element* with *props* merged over its own.

    When *children* is given it replaces ``props["children"]``.
    """
    new_props = dict(element.props)
    if props:
        new_props.update(props)
    if children is not _NO_CHILDREN:
        if children is None:
            new_props.pop("children", None)
        else:
            new_props["children"] = children
    return replace(element, props=new_props)
