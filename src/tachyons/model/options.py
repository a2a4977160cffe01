"""Compiler options: unit sizes, theme tables and class-prop naming."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable

from tachyons.util import b_, bg, tint
from tachyons.util import merge as deep_merge

StyleObject = dict[str, Any]
TransformFunction = Callable[..., StyleObject]


def _default_fn() -> dict[str, TransformFunction]:
    return {"bg": bg, "b_": b_, "tint": tint}


@dataclass
class Options:
    """Settings read by the resolver and the tree transformer.

    Only the compiler writes to an ``Options`` instance, through
    :meth:`merge`; mapping fields are merged key by key, everything else is
    replaced.
    """

    rem: float = 16
    font_rem: float | None = None
    colors: dict[str, str] = field(default_factory=dict)
    fonts: dict[str, str] = field(default_factory=dict)
    custom_styles: dict[str, StyleObject] = field(default_factory=dict)
    fn: dict[str, TransformFunction] = field(default_factory=_default_fn)
    cls_prop_name: str = "cls"
    cls_prop_name_cap: str = "Cls"
    style_prop_name: str = "style"
    cls_map: dict[str, str] = field(default_factory=dict)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    def copy(self) -> Options:
        """Return a copy whose mapping fields can be merged into independently."""
        tables = {
            f.name: deep_merge({}, getattr(self, f.name))
            for f in fields(self)
            if isinstance(getattr(self, f.name), dict)
        }
        return replace(self, **tables)

    @property
    def style_prop_name_cap(self) -> str:
        return self.style_prop_name[:1].upper() + self.style_prop_name[1:]

    def merge(self, config: Mapping[str, Any]) -> None:
        """Deep-merge a partial configuration into these options.

        Unknown keys and ``None`` values are skipped. Custom styles are
        replaced token by token, never merged property by property.
        """
        known = self.field_names()
        for name, value in config.items():
            if name not in known or value is None:
                continue
            current = getattr(self, name)
            if name == "custom_styles":
                current.update({token: dict(style) for token, style in value.items()})
                continue
            if isinstance(value, Mapping) and isinstance(current, dict):
                deep_merge(current, value)
            else:
                setattr(self, name, value)
