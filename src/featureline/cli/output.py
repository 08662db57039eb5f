"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from featureline.core import CompoundCurve
from featureline.domain import Point, Rect

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Featureline[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_feature_info(feature: CompoundCurve) -> None:
    """Print feature kind and display attributes.

    Args:
        feature: Feature to describe
    """
    kind = feature.feature_type.value if feature.feature_type else "curve"
    centerline = feature.centerline.value if feature.centerline else "none"
    edges = "shown" if feature.edgeline_visible else "hidden"

    line = Text("  ")
    line.append(kind, style="bold")
    line.append(f" {SYM_DOT} width {feature.width:g} {SYM_DOT} resolution {feature.resolution:g}")
    console.print(line)
    console.print(f"  centerline {centerline} {SYM_DOT} edge lines {edges}")


def _fmt(p: Point) -> str:
    return f"({p.x:.2f}, {p.y:.2f})"


def print_ctrl_points(feature: CompoundCurve) -> None:
    """Print every control point with its segment and role.

    Args:
        feature: Feature whose control points are listed
    """
    roles = ("anchor", "handle", "handle", "anchor")
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("idx", justify="right")
    table.add_column("segment", justify="right")
    table.add_column("role")
    table.add_column("point")

    for idx in range(feature.ctrl_points()):
        point = feature.ctrl_point(idx)
        if point is None:
            continue
        seg_idx, local = divmod(idx, 4)
        table.add_row(str(idx), str(seg_idx), roles[local], _fmt(point))

    console.print(table)


def print_geometry_summary(
    segments: int,
    ctrl_points: int,
    curve_points: int,
    surface_points: int,
    bounds: Rect,
    area: float,
    edits: int,
) -> None:
    """Print the derived geometry summary.

    Args:
        segments: Number of curve segments
        ctrl_points: Number of addressable control points
        curve_points: Number of centerline points
        surface_points: Number of fill polygon points
        bounds: Rectangle enclosing centerline and surface
        area: Unsigned area of the fill polygon
        edits: Number of control point edits applied
    """
    console.print(f"  Segments              {segments}")
    console.print(f"  Control points        {ctrl_points}")
    console.print(f"  Centerline points     {curve_points}")
    console.print(f"  Surface points        {surface_points}")
    console.print(f"  Surface area          {area:,.1f}")
    console.print(
        f"  Bounds                ({bounds.x:.1f}, {bounds.y:.1f}) "
        f"{bounds.width:.1f} {SYM_DOT} {bounds.height:.1f}"
    )
    if edits:
        console.print(f"  Edits applied         {edits}")


def print_points(title: str, points: list[Point]) -> None:
    """Print a point sequence, one point per line.

    Args:
        title: Heading for the sequence
        points: Points to print
    """
    console.print(f"\n[bold]{title}[/bold] ({len(points)})")
    for i, p in enumerate(points):
        console.print(f"  {i:>4}  {_fmt(p)}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
