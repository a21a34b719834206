"""Example squircle: a card with one sharp corner and a thin border."""

from __future__ import annotations

from squircle.geometry import RoundedSurfaceOptions, SquircleEngine, render_svg_document


def build():
    """Compute the outline and border inset for a 320 x 180 card."""

    options = RoundedSurfaceOptions(
        smooth_factor=0.6,
        base_radius=28,
        bottom_left_radius=0,
        border_width=2,
        surface_color="#f4f1ea",
        border_color="#3a3a3a",
    )
    return SquircleEngine().compute(320, 180, options)


if __name__ == "__main__":
    print(render_svg_document(build()), end="")
