# rosterapp/views/nodes.py
from __future__ import annotations

from html import escape
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

VOID_TAGS = frozenset({"img", "input", "br", "hr", "meta", "link"})
# browsers read these bodies verbatim; entity-escaping would corrupt CSS/JS
RAW_TEXT_TAGS = frozenset({"style", "script"})

Child = Union["Element", str]


class Element:
    """One node of a view tree. Children are Elements or plain text."""

    __slots__ = ("tag", "attrs", "children")

    def __init__(self, tag: str, attrs: Optional[Dict[str, Any]] = None, children: Optional[List[Child]] = None):
        self.tag = tag
        self.attrs: Dict[str, Any] = dict(attrs or {})
        self.children: List[Child] = list(children or [])

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, attrs={self.attrs!r}, children={len(self.children)})"

    # ---------- queries (used by callers and tests) ----------

    @property
    def classes(self) -> Tuple[str, ...]:
        return tuple(str(self.attrs.get("class") or "").split())

    def iter(self) -> Iterator["Element"]:
        yield self
        for c in self.children:
            if isinstance(c, Element):
                yield from c.iter()

    def find_all(self, tag: Optional[str] = None, *, class_: Optional[str] = None, id: Optional[str] = None) -> List["Element"]:
        out = []
        for node in self.iter():
            if tag is not None and node.tag != tag:
                continue
            if class_ is not None and class_ not in node.classes:
                continue
            if id is not None and node.attrs.get("id") != id:
                continue
            out.append(node)
        return out

    def find(self, tag: Optional[str] = None, *, class_: Optional[str] = None, id: Optional[str] = None) -> Optional["Element"]:
        found = self.find_all(tag, class_=class_, id=id)
        return found[0] if found else None

    def text(self) -> str:
        parts = []
        for c in self.children:
            parts.append(c.text() if isinstance(c, Element) else c)
        return "".join(parts)


def _attr_name(key: str) -> str:
    # class_ / for_ -> class / for; data_foo -> data-foo
    return key.rstrip("_").replace("_", "-")


def el(tag: str, *children: Any, **attrs: Any) -> Element:
    """
    Build an element: el("a", "Fido", href="/players/1").
    None children are skipped and lists/tuples are flattened, so optional and
    mapped children can be passed inline.
    """
    flat: List[Child] = []
    for c in children:
        if c is None:
            continue
        if isinstance(c, (list, tuple)):
            flat.extend(x if isinstance(x, Element) else str(x) for x in c if x is not None)
        elif isinstance(c, Element):
            flat.append(c)
        else:
            flat.append(str(c))
    return Element(tag, {_attr_name(k): v for k, v in attrs.items()}, flat)


def _render_attrs(attrs: Dict[str, Any]) -> str:
    out = []
    for k, v in attrs.items():
        if v is None or v is False:
            continue
        if v is True:
            out.append(f" {k}")
        else:
            out.append(f' {k}="{escape(str(v), quote=True)}"')
    return "".join(out)


def render_html(node: Child) -> str:
    """
    Serialize a view tree. Text and attribute values are escaped, except the
    bodies of raw-text elements (style, script), which are written as-is.
    """
    if not isinstance(node, Element):
        return escape(str(node), quote=False)
    open_tag = f"<{node.tag}{_render_attrs(node.attrs)}>"
    if node.tag in VOID_TAGS:
        return open_tag
    if node.tag in RAW_TEXT_TAGS:
        inner = "".join(c if isinstance(c, str) else render_html(c) for c in node.children)
    else:
        inner = "".join(render_html(c) for c in node.children)
    return f"{open_tag}{inner}</{node.tag}>"
