"""CLI application entry point for featureline.

This module provides the main CLI interface using Typer.
"""

import math
import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from featureline import __version__
from featureline.cli.output import (
    console,
    print_ctrl_points,
    print_error,
    print_feature_info,
    print_geometry_summary,
    print_header,
    print_points,
    print_step,
    print_success,
)
from featureline.config import (
    CurveConfig,
    FeatureConfig,
    FeaturelineSettings,
    LoggingConfig,
    SurfaceConfig,
)
from featureline.core import CompoundCurve, signed_area
from featureline.domain import CenterLine, Point
from featureline.exceptions import (
    ControlPointIndexError,
    FeaturelineError,
    UnknownFeatureTypeError,
)
from featureline.features import create_feature, feature_class
from featureline.utils import FeatureLogger, configure_logging

EDGELINE_CHOICES: dict[str, bool | None] = {"auto": None, "show": True, "hide": False}

# Create the Typer app
app = typer.Typer(
    name="featureline",
    help="Build Bezier map features, apply control point edits and inspect their surfaces.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Featureline[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_numbers(text: str, count: int, option: str) -> list[float]:
    """Parse a comma-separated list of exactly ``count`` numbers.

    Args:
        text: Raw option value, e.g. ``"300,300,300,400"``
        count: Expected number of values
        option: Option name for the error message

    Returns:
        Parsed values

    Raises:
        typer.BadParameter: If the value is malformed or not finite
    """
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != count:
        raise typer.BadParameter(
            f"expected {count} comma-separated numbers, got '{text}'", param_hint=option
        )
    try:
        values = [float(part) for part in parts]
    except ValueError:
        raise typer.BadParameter(f"not a number list: '{text}'", param_hint=option) from None
    if not all(math.isfinite(value) for value in values):
        raise typer.BadParameter(f"values must be finite: '{text}'", param_hint=option)
    return values


@app.command()
def inspect(
    feature: Annotated[
        str,
        typer.Option(
            "--feature",
            "-f",
            help="Feature type (road|river|railroad)",
        ),
    ] = "road",
    width: Annotated[
        float | None,
        typer.Option(
            "--width",
            "-w",
            help="Surface width (default: feature type default)",
        ),
    ] = None,
    resolution: Annotated[
        float,
        typer.Option(
            "--resolution",
            "-r",
            help="Tessellation step in curve parameter t, in (0, 1]",
        ),
    ] = 0.025,
    centerline: Annotated[
        str | None,
        typer.Option(
            "--centerline",
            help="Centerline marking (solid|double_solid|stripe)",
        ),
    ] = None,
    edgelines: Annotated[
        str,
        typer.Option(
            "--edgelines",
            help="Edge lines (auto|show|hide), auto uses the feature type default",
        ),
    ] = "auto",
    segment: Annotated[
        list[str] | None,
        typer.Option(
            "--segment",
            "-s",
            help="Append a segment 'x2,y2,x3,y3' (repeatable)",
        ),
    ] = None,
    move: Annotated[
        list[str] | None,
        typer.Option(
            "--move",
            "-m",
            help="Move control point 'idx,x,y' (repeatable, applied in order)",
        ),
    ] = None,
    points: Annotated[
        bool,
        typer.Option(
            "--points",
            help="List control points",
        ),
    ] = False,
    dump: Annotated[
        bool,
        typer.Option(
            "--dump",
            help="Print centerline and surface point sequences",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Build a feature, apply edits and print its centerline and surface geometry.

    The feature starts with one default-shaped segment. Segments given with
    --segment are appended with smooth joints, then --move edits are applied
    by global control point index.

    Example:
        featureline -f road -s 400,200,500,100 -m 3,330,40 --points
    """
    try:
        feature_type = feature_class(feature).feature_type
        centerline_style = CenterLine(centerline.lower()) if centerline else None
    except UnknownFeatureTypeError as e:
        print_error(str(e), details="Valid values: road, river, railroad")
        raise typer.Exit(code=1)
    except ValueError:
        print_error(
            f"Invalid centerline: {centerline}",
            details="Valid values: solid, double_solid, stripe",
        )
        raise typer.Exit(code=1)

    if edgelines.lower() not in EDGELINE_CHOICES:
        print_error(
            f"Invalid edge line mode: {edgelines}",
            details="Valid values: auto, show, hide",
        )
        raise typer.Exit(code=1)
    edgeline_visible = EDGELINE_CHOICES[edgelines.lower()]

    new_segments = [parse_numbers(s, 4, "--segment") for s in segment or []]
    edits = [parse_numbers(m, 3, "--move") for m in move or []]

    try:
        settings = FeaturelineSettings(
            feature=FeatureConfig(
                feature_type=feature_type,
                centerline=centerline_style,
                curve=CurveConfig(resolution=resolution),
                surface=SurfaceConfig(width=width, edgeline_visible=edgeline_visible),
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level,
            ),
        )
    except ValidationError as e:
        print_error("Invalid feature settings", details=_first_error(e))
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    feature_logger = FeatureLogger(logger)

    try:
        curve = create_feature(settings.feature)
        feature_logger.log_feature_created(
            feature_type.value, curve.width, curve.resolution
        )

        for values in new_segments:
            p2, p3 = Point.from_tuple(values[:2]), Point.from_tuple(values[2:])
            curve.add_segment(p2, p3)
            feature_logger.log_segment_added(len(curve.segments()), p2, p3)

        for raw_idx, x, y in edits:
            _apply_edit(curve, raw_idx, Point(x, y), feature_logger)

        start = time.perf_counter()
        surface = curve.surface()
        duration_ms = (time.perf_counter() - start) * 1000
        feature_logger.log_surface_rebuilt(len(surface), duration_ms, curve.bounds())

        if quiet:
            return

        print_header(__version__)
        print_step("Feature")
        print_feature_info(curve)

        if points:
            print_step("Control points")
            print_ctrl_points(curve)

        centerline_points = curve.curve()
        print_step("Geometry")
        print_geometry_summary(
            segments=len(curve.segments()),
            ctrl_points=curve.ctrl_points(),
            curve_points=len(centerline_points),
            surface_points=len(surface),
            bounds=curve.bounds(),
            area=abs(signed_area(surface)),
            edits=feature_logger.stats.ctrl_point_edits,
        )

        if dump:
            print_points("Centerline", centerline_points)
            print_points("Surface", surface)

        print_success("Done")

    except FeaturelineError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _apply_edit(
    curve: CompoundCurve, raw_idx: float, point: Point, feature_logger: FeatureLogger
) -> None:
    """Apply one control point move, reporting invalid indices.

    Args:
        curve: Feature to edit
        raw_idx: Global control point index as parsed from the command line,
            finite but possibly fractional
        point: New position
        feature_logger: Logger recording the edit

    Raises:
        typer.Exit: If the index is not a valid control point index
    """
    idx = int(raw_idx)
    try:
        if idx != raw_idx:
            raise ControlPointIndexError(raw_idx, curve.ctrl_points())
        old = curve.ctrl_point(idx)
        curve.set_ctrl_point(idx, point)
    except ControlPointIndexError as e:
        feature_logger.log_edit_rejected(idx, e)
        print_error(str(e))
        raise typer.Exit(code=1)
    feature_logger.log_ctrl_point_edit(idx, old, point)


def _first_error(error: ValidationError) -> str:
    """Human-readable description of the first validation error."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
