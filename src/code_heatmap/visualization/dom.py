"""Minimal element tree the heatmap renders into.

Elements carry a tag, a class list, attributes, inline style and either
escaped text, raw markup or child elements.  Event handlers are plain
callables registered per event name and invoked synchronously by
:meth:`Element.dispatch`, one event at a time, so handlers never overlap.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Callable, Dict, Iterator, List, Optional


@dataclass(frozen=True)
class PointerEvent:
    """Pointer position, in page coordinates, at the time of an event."""

    page_x: float = 0.0
    page_y: float = 0.0


EventHandler = Callable[["Element", PointerEvent], None]


class Element:
    def __init__(
        self,
        tag: str,
        class_name: str = "",
        attrs: Optional[Dict[str, str]] = None,
        style: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
        html: Optional[str] = None,
    ):
        self.tag = tag
        self.class_name = class_name
        self.attrs: Dict[str, str] = dict(attrs or {})
        self.style: Dict[str, str] = dict(style or {})
        self.text = text
        self.html = html
        self.children: List[Element] = []
        self.parent: Optional[Element] = None
        self._handlers: Dict[str, List[EventHandler]] = {}

    def __repr__(self) -> str:
        return f"<Element {self.tag} class={self.class_name!r} children={len(self.children)}>"

    # ── Tree construction ─────────────────────────────────────────

    def append(self, child: "Element | str", class_name: str = "", **kwargs) -> "Element":
        """Append ``child`` (or a new element with tag ``child``) and return it."""
        if isinstance(child, str):
            child = Element(child, class_name=class_name, **kwargs)
        child.parent = self
        self.children.append(child)
        return child

    def extend(self, children) -> None:
        for child in children:
            self.append(child)

    # ── Classes ───────────────────────────────────────────────────

    @property
    def classes(self) -> List[str]:
        return self.class_name.split()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    # ── Queries ───────────────────────────────────────────────────

    def iter(self) -> Iterator["Element"]:
        """Descendants in document order, excluding ``self``."""
        for child in self.children:
            yield child
            yield from child.iter()

    def select_all(self, class_name: str) -> List["Element"]:
        return [el for el in self.iter() if el.has_class(class_name)]

    def select(self, class_name: str) -> Optional["Element"]:
        return next((el for el in self.iter() if el.has_class(class_name)), None)

    def find_by_id(self, element_id: str) -> Optional["Element"]:
        return next((el for el in self.iter() if el.attrs.get("id") == element_id), None)

    # ── Events ────────────────────────────────────────────────────

    def on(self, event: str, handler: EventHandler) -> "Element":
        self._handlers.setdefault(event, []).append(handler)
        return self

    def handlers(self, event: str) -> List[EventHandler]:
        return list(self._handlers.get(event, ()))

    def dispatch(self, event: str, pointer: Optional[PointerEvent] = None) -> None:
        pointer = pointer or PointerEvent()
        for handler in self.handlers(event):
            handler(self, pointer)

    # ── Serialization ─────────────────────────────────────────────

    def to_html(self) -> str:
        attrs = dict(self.attrs)
        if self.class_name:
            attrs["class"] = self.class_name
        if self.style:
            attrs["style"] = "; ".join(f"{k}: {v}" for k, v in self.style.items())
        rendered_attrs = "".join(f' {k}="{escape(str(v))}"' for k, v in attrs.items())

        if self.children:
            inner = "".join(child.to_html() for child in self.children)
        elif self.html is not None:
            inner = self.html
        elif self.text is not None:
            inner = escape(self.text)
        else:
            inner = ""
        return f"<{self.tag}{rendered_attrs}>{inner}</{self.tag}>"
