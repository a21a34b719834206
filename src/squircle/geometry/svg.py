from __future__ import annotations

from xml.sax.saxutils import quoteattr

from .engine import PathGeometry
from .path import format_number

DEFAULT_SURFACE_COLOR = "#ffffff"
DEFAULT_BORDER_COLOR = "#000000"


def render_svg_document(geometry: PathGeometry, precision: int | None = None) -> str:
    """Standalone SVG markup: the filled outline plus, if bordered, the inset stroke.

    Numbers use the precision the geometry was computed with unless overridden.
    """

    if precision is None:
        precision = geometry.precision

    width = format_number(geometry.width, precision)
    height = format_number(geometry.height, precision)
    fill = geometry.surface_color or DEFAULT_SURFACE_COLOR
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        f"  <path d={quoteattr(geometry.path.to_svg(precision))} fill={quoteattr(fill)}/>",
    ]
    inset = geometry.positioned_inset()
    if geometry.has_stroke and inset is not None:
        stroke = geometry.border_color or DEFAULT_BORDER_COLOR
        lines.append(
            f"  <path d={quoteattr(inset.to_svg(precision))} fill=\"none\" "
            f"stroke={quoteattr(stroke)} stroke-width=\"{format_number(geometry.stroke_width, precision)}\"/>"
        )
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


__all__ = ["render_svg_document"]
