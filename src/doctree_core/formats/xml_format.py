"""XML front-end (stdlib ``xml.etree.ElementTree``).

Element ↔ mapping conventions:

- the document is ``{root_tag: content}``
- attributes become keys prefixed with ``@_``
- text becomes ``#text``, or the element's whole value when it has no
  attributes and no children
- repeated child tags collect into a sequence
- an empty element is ``""``

All leaf values decode as text. Text between child elements (mixed
content) is not kept.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from ..errors import DecodeError, EncodeError
from ..values import Value, VBool, VDict, VList, VNull, VNumber, VText
from .base import Format

ATTRIBUTE_PREFIX = "@_"
TEXT_KEY = "#text"
DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


class XMLFormat(Format):
    name = "xml"
    extensions = (".xml",)

    def decode(self, text: str) -> Value:
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            line, column = exc.position
            raise DecodeError(self.name, str(exc), line, column) from exc
        return VDict({root.tag: _element_to_value(root)})

    def encode(self, value: Value, compact: bool = False, indent: int = 2) -> str:
        if not isinstance(value, VDict) or len(value.entries) != 1:
            raise EncodeError(self.name, "the document must be a mapping with exactly one root element")
        (tag, content), = value.entries.items()
        if isinstance(content, VList):
            raise EncodeError(self.name, f"root element {tag!r} cannot be a sequence")

        root = _build_element(tag, content)
        if not compact:
            ET.indent(root, space=" " * indent)
        body = ET.tostring(root, encoding="unicode")
        sep = "" if compact else "\n"
        return f"{DECLARATION}{sep}{body}{sep}"


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------

def _element_to_value(el: ET.Element) -> Value:
    attrs = {ATTRIBUTE_PREFIX + k: VText(v) for k, v in el.attrib.items()}
    children = list(el)
    text = (el.text or "").strip()

    if not attrs and not children:
        return VText(text)

    entries: dict[str, Value] = dict(attrs)
    grouped: set[str] = set()
    for child in children:
        child_value = _element_to_value(child)
        if child.tag not in entries:
            entries[child.tag] = child_value
        elif child.tag in grouped:
            entries[child.tag].items.append(child_value)
        else:
            entries[child.tag] = VList([entries[child.tag], child_value])
            grouped.add(child.tag)
    if text:
        entries[TEXT_KEY] = VText(text)
    return VDict(entries)


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------

def _scalar_text(value: Value) -> str:
    if isinstance(value, VNull):
        return ""
    if isinstance(value, (VBool, VNumber, VText)):
        return str(value)
    raise EncodeError("xml", f"expected a scalar, got {type(value).__name__}")


def _build_element(tag: str, value: Value) -> ET.Element:
    el = ET.Element(tag)
    if not isinstance(value, VDict):
        el.text = _scalar_text(value) or None
        return el

    for key, child in value.entries.items():
        if key.startswith(ATTRIBUTE_PREFIX):
            el.set(key[len(ATTRIBUTE_PREFIX):], _scalar_text(child))
        elif key == TEXT_KEY:
            el.text = _scalar_text(child)
        elif isinstance(child, VList):
            for item in child.items:
                if isinstance(item, VList):
                    raise EncodeError("xml", f"nested sequence under {key!r}")
                el.append(_build_element(key, item))
        else:
            el.append(_build_element(key, child))
    return el
