from __future__ import annotations

import pathlib

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from squircle._config import ensure_user_config, get_engine_settings
from squircle.geometry import PathGeometry, RoundedSurfaceOptions, SquircleEngine, render_svg_document
from squircle.validation import ValidationError

console = Console()
app = typer.Typer(help="Compute continuous-curvature rounded rectangle outlines.")


def _options(
    radius: float,
    top_left: float | None,
    top_right: float | None,
    bottom_right: float | None,
    bottom_left: float | None,
    smoothing: float,
    preserve_smoothing: bool,
    stroke_width: float,
    fill: str | None = None,
    border: str | None = None,
) -> RoundedSurfaceOptions:
    return RoundedSurfaceOptions(
        smooth_factor=smoothing,
        base_radius=radius,
        top_left_radius=top_left,
        top_right_radius=top_right,
        bottom_right_radius=bottom_right,
        bottom_left_radius=bottom_left,
        preserve_smoothing=preserve_smoothing,
        surface_color=fill,
        border_color=border,
        border_width=stroke_width,
    )


def _compute(width: float, height: float, options: RoundedSurfaceOptions) -> PathGeometry:
    ensure_user_config()
    engine = SquircleEngine(settings=get_engine_settings())
    try:
        geometry = engine.compute(width, height, options)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if geometry is None:
        raise typer.BadParameter("width and height must be positive.")
    return geometry


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


@app.command()
def path(
    width: float = typer.Argument(..., help="Frame width."),
    height: float = typer.Argument(..., help="Frame height."),
    smoothing: float = typer.Option(..., "--smoothing", "-s", help="Corner smoothing in [0, 1]."),
    radius: float = typer.Option(0.0, "--radius", "-r", help="Radius shared by every corner."),
    top_left: float | None = typer.Option(None, help="Top-left radius override."),
    top_right: float | None = typer.Option(None, help="Top-right radius override."),
    bottom_right: float | None = typer.Option(None, help="Bottom-right radius override."),
    bottom_left: float | None = typer.Option(None, help="Bottom-left radius override."),
    preserve_smoothing: bool = typer.Option(
        False, "--preserve-smoothing/--no-preserve-smoothing", help="Keep smoothing even if corners must shrink."
    ),
    stroke_width: float = typer.Option(0.0, "--stroke-width", "-w", help="Border width; adds an inset path."),
    raw: bool = typer.Option(False, "--raw", help="Print only the path data."),
) -> None:
    """
    Print the SVG path data for a squircle outline.
    """

    options = _options(
        radius, top_left, top_right, bottom_right, bottom_left, smoothing, preserve_smoothing, stroke_width
    )
    geometry = _compute(width, height, options)
    if raw:
        typer.echo(geometry.svg)
        if geometry.inset_svg is not None:
            typer.echo(geometry.inset_svg)
        return

    console.print(Panel(geometry.svg, title=f"Outline {width:g} x {height:g}", border_style="green"))
    if geometry.has_stroke:
        console.print(Panel(geometry.inset_svg or "", title="Stroke inset", border_style="cyan"))
        table = Table(show_header=False)
        table.add_row("stroke width", f"{geometry.stroke_width:g}")
        table.add_row("inset offset", f"{geometry.inset_offset:g}")
        console.print(table)
    elif stroke_width > 0:
        console.print("[yellow]Stroke resolved to zero; no border path produced.[/yellow]")


@app.command()
def export(
    width: float = typer.Argument(..., help="Frame width."),
    height: float = typer.Argument(..., help="Frame height."),
    smoothing: float = typer.Option(..., "--smoothing", "-s", help="Corner smoothing in [0, 1]."),
    radius: float = typer.Option(0.0, "--radius", "-r", help="Radius shared by every corner."),
    top_left: float | None = typer.Option(None, help="Top-left radius override."),
    top_right: float | None = typer.Option(None, help="Top-right radius override."),
    bottom_right: float | None = typer.Option(None, help="Bottom-right radius override."),
    bottom_left: float | None = typer.Option(None, help="Bottom-left radius override."),
    preserve_smoothing: bool = typer.Option(
        False, "--preserve-smoothing/--no-preserve-smoothing", help="Keep smoothing even if corners must shrink."
    ),
    stroke_width: float = typer.Option(0.0, "--stroke-width", "-w", help="Border width."),
    fill: str = typer.Option("#ffffff", help="Fill color written to the SVG."),
    border: str = typer.Option("#000000", help="Border color written to the SVG."),
    output: pathlib.Path = typer.Option(
        pathlib.Path("squircle.svg"),
        "--output",
        "-o",
        help="Path to the SVG file that will be produced.",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing SVG."),
) -> None:
    """
    Write the outline (and its border, if any) to a standalone SVG file.
    """

    options = _options(
        radius,
        top_left,
        top_right,
        bottom_right,
        bottom_left,
        smoothing,
        preserve_smoothing,
        stroke_width,
        fill=fill,
        border=border,
    )
    geometry = _compute(width, height, options)

    final_output = output
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")

    final_output.parent.mkdir(parents=True, exist_ok=True)
    try:
        final_output.write_text(render_svg_document(geometry))
    except OSError as exc:
        raise typer.BadParameter(f"Failed to write SVG: {exc}") from exc

    console.print(
        Panel(
            f"Wrote SVG to [green]{final_output}[/green].",
            title="Export complete",
            border_style="green",
        )
    )


if __name__ == "__main__":
    app()
