"""Render wrapper: passes a component's output through a tree transform."""

from __future__ import annotations

import functools
from typing import Any, Callable

__all__ = ["wrap"]


def _wrap_function(func: Callable[..., Any], transform: Callable[[Any], Any]) -> Callable[..., Any]:
    @functools.wraps(func)
    def wrapped_render(*args: Any, **kwargs: Any) -> Any:
        return transform(func(*args, **kwargs))

    return wrapped_render


def wrap(component_or_function: Any, transform: Callable[[Any], Any]) -> Any:
    """Return *component_or_function* with its rendered output sent through *transform*.

    *transform* is a ``tree -> tree`` callable such as ``ClassStyleTransform.apply``.

    A class with a ``render`` method gets a subclass whose ``render`` is the
    original one composed with *transform*; the class name, qualname, module
    and docstring carry over. Any other callable is wrapped directly, which
    also covers methods since ``self`` is forwarded like any argument.
    """
    if isinstance(component_or_function, type) and callable(
        getattr(component_or_function, "render", None)
    ):
        component = component_or_function
        namespace = {
            "render": _wrap_function(component.render, transform),
            "__module__": component.__module__,
            "__qualname__": component.__qualname__,
            "__doc__": component.__doc__,
        }
        return type(component.__name__, (component,), namespace)

    if not callable(component_or_function):
        raise TypeError(f"wrap() expects a component class or a callable, got {component_or_function!r}")
    return _wrap_function(component_or_function, transform)
