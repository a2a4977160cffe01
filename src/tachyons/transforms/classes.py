"""Class-string transform: resolves class props on every element of a tree."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tachyons.model.element import Element, children_to_list, clone_element, is_element
from tachyons.model.options import Options, StyleObject
from tachyons.resolver import transform_style

__all__ = ["ClassStyleTransform", "recursive_style", "style_prop_pairs"]


def style_prop_pairs(props: Mapping[str, Any], options: Options) -> dict[str, str]:
    """Return the ``class prop -> style prop`` pairs to resolve on an element.

    Explicit ``cls_map`` entries come first, then the primary pair
    (``cls`` -> ``style``), then every prop ending in the capitalized class
    prop name (``containerCls`` -> ``containerStyle``).
    """
    pairs = dict(options.cls_map)
    if options.cls_prop_name:
        pairs[options.cls_prop_name] = options.style_prop_name
        suffix = options.cls_prop_name_cap
        style_suffix = options.style_prop_name_cap
        for name in props:
            if suffix and name.endswith(suffix):
                pairs[name] = name[: -len(suffix)] + style_suffix
    return pairs


def recursive_style(
    tree: Any,
    stylesheet: Mapping[str, StyleObject],
    options: Options,
) -> Any:
    """Resolve class props throughout *tree*.

    Returns *tree* itself when nothing in it needed resolving; otherwise a new
    tree sharing every untouched subtree with the original.
    """
    if not is_element(tree):
        return tree

    props = tree.props
    updates: dict[str, Any] = {}
    translated = False

    for cls_prop, style_prop in style_prop_pairs(props, options).items():
        resolved = transform_style(tree, props.get(style_prop), props.get(cls_prop), stylesheet, options)
        if resolved is not None:
            updates[style_prop] = resolved
            translated = True

    children = props.get("children")
    if isinstance(children, (list, tuple)):
        children = children_to_list(children)
        for i, child in enumerate(children):
            if is_element(child):
                converted = recursive_style(child, stylesheet, options)
                if converted is not child:
                    children[i] = converted
                    translated = True
    else:
        converted = recursive_style(children, stylesheet, options)
        if converted is not children:
            children = converted
            translated = True

    if translated:
        return clone_element(tree, updates, children)
    return tree


class ClassStyleTransform:
    """Apply :func:`recursive_style` against a fixed stylesheet and options."""

    def __init__(self, stylesheet: Mapping[str, StyleObject], options: Options) -> None:
        self.stylesheet = stylesheet
        self.options = options

    def apply(self, tree: Element | Any) -> Element | Any:
        return recursive_style(tree, self.stylesheet, self.options)
