"""A minimal HTML element tree and document renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

VOID_ELEMENTS = frozenset(
    {
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

_FORBIDDEN_CHILD_TAGS = ("body", "head")


class HtmlElement:
    """An HTML element with attributes, text, children and trailing text."""

    def __init__(
        self,
        tag: str,
        text: str = "",
        attributes: dict[str, str] | None = None,
    ) -> None:
        self.tag = tag
        self._text = text
        self.tail = ""
        self.attributes: dict[str, str] = dict(attributes or {})
        self._children: list[HtmlElement] = []

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_ELEMENTS

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        if self.is_void:
            raise ValueError(f"Void element {self.tag} does not allow text content")
        self._text = value

    @property
    def children(self) -> tuple[HtmlElement, ...]:
        return tuple(self._children)

    def add_child(self, element: HtmlElement) -> None:
        """Append a child element.

        Void elements take no children, and ``head`` or ``body`` cannot be
        a child of anything.
        """
        if self.is_void:
            raise ValueError(f"Void element {self.tag} does not allow child elements")
        if element.tag in _FORBIDDEN_CHILD_TAGS:
            raise ValueError(
                f"Element with tag '{element.tag}' not allowed as child element."
            )
        self._children.append(element)

    def remove_child(self, index: int) -> HtmlElement:
        """Remove and return the child at ``index``; IndexError if there is none."""
        return self._children.pop(index)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def render(self) -> str:
        """Return the element, its children and its tail as markup."""
        parts = [f"<{self.tag}"]
        parts.extend(f" {name}={value}" for name, value in self.attributes.items())
        if self._text or self._children:
            parts.append(">")
            parts.append(self._text)
            parts.extend(child.render() for child in self._children)
            parts.append(f"</{self.tag}>")
        else:
            parts.append("/>")
        parts.append(self.tail)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


@dataclass
class HtmlDocument:
    """An HTML document made of a head and a body."""

    head: HtmlElement = field(default_factory=lambda: HtmlElement("head"))
    body: HtmlElement = field(default_factory=lambda: HtmlElement("body"))

    def render(self) -> str:
        return f"<html>{self.head.render()}{self.body.render()}</html>"

    def __str__(self) -> str:
        return self.render()