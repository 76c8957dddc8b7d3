"""Write SVG markup from element dictionaries.

An element is a dict with a ``tag`` key, attribute keys, and an optional
``children`` list of nested elements. Attribute values may be:

- str: written verbatim
- int / float: rounded to ``precision`` decimals
- list of (x, y) tuples: written as a ``points`` list ("x,y x,y ...")
- list of str / number tokens: joined with spaces (path data)
"""

from __future__ import annotations

from typing import Any

SVG_NS = "http://www.w3.org/2000/svg"


def format_number(value: float, precision: int = 2) -> str:
    v = round(float(value), precision)
    if v == 0:
        v = 0.0  # no "-0.0"
    if v.is_integer():
        return str(int(v))
    return str(v)


def format_value(value: Any, precision: int = 2) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value, precision)
    if isinstance(value, (list, tuple)):
        parts = []
        for item in value:
            if isinstance(item, tuple):
                parts.append(",".join(format_number(c, precision) for c in item))
            elif isinstance(item, (int, float)):
                parts.append(format_number(item, precision))
            else:
                parts.append(str(item))
        return " ".join(parts)
    return str(value)


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")
    )


def serialize_element(elem: dict[str, Any], precision: int = 2, indent: int = 1) -> list[str]:
    tag = elem.get("tag", "path")
    pad = "  " * indent
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "children")}
    attr_str = " ".join(f'{k}="{_escape(format_value(v, precision))}"' for k, v in attrs.items())
    opening = f"{tag} {attr_str}" if attr_str else tag

    children = elem.get("children")
    if not children:
        return [f"{pad}<{opening} />"]

    lines = [f"{pad}<{opening}>"]
    for child in children:
        lines.extend(serialize_element(child, precision, indent + 1))
    lines.append(f"{pad}</{tag}>")
    return lines


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    metadata: dict[str, str] | None = None,
    precision: int = 2,
    xml_declaration: bool = False,
) -> str:
    """Generate SVG markup for a canvas of the given size."""
    w = format_number(canvas_w, precision)
    h = format_number(canvas_h, precision)
    lines = []
    if xml_declaration:
        lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        f'<svg xmlns="{SVG_NS}" viewBox="0 0 {w} {h}" width="{w}" height="{h}">'
    )

    if metadata:
        lines.append("  <metadata>")
        for key, value in metadata.items():
            lines.append(f"    <{key}>{_escape(value)}</{key}>")
        lines.append("  </metadata>")

    for elem in elements:
        lines.extend(serialize_element(elem, precision))

    lines.append("</svg>")
    return "\n".join(lines)
