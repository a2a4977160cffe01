from tachyons.model.element import Element, children_to_list, clone_element, create_element, is_element
from tachyons.model.options import Options, StyleObject, TransformFunction

__all__ = [
    "Element",
    "Options",
    "StyleObject",
    "TransformFunction",
    "children_to_list",
    "clone_element",
    "create_element",
    "is_element",
]
