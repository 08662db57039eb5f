"""Logging utilities for Featureline."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from featureline.domain import Point, Rect

_HANDLER_TAG = "_featureline_handler"


@dataclass
class EditStats:
    """Statistics from an editing session."""

    ctrl_point_edits: int = 0
    segments_added: int = 0
    surface_rebuilds: int = 0
    surface_points: int = 0
    edited_indices: list[int] = field(default_factory=list)

    @property
    def total_operations(self) -> int:
        """Count of all recorded edits and rebuilds."""
        return self.ctrl_point_edits + self.segments_added + self.surface_rebuilds


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers installed by a previous call.
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(console_handler, _HANDLER_TAG, True)
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("featureline")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class FeatureLogger:
    """Logger for tracking feature edits and surface rebuilds."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = EditStats()

    def log_feature_created(self, feature_type: str, width: float, resolution: float) -> None:
        """Log feature construction."""
        self._logger.info(
            "Feature created",
            feature=feature_type,
            width=width,
            resolution=resolution,
        )

    def log_segment_added(self, segment_count: int, p2: Point, p3: Point) -> None:
        """Log an appended segment."""
        self._logger.debug(
            "Segment added",
            segments=segment_count,
            p2=p2.to_tuple(),
            p3=p3.to_tuple(),
        )
        self._stats.segments_added += 1

    def log_ctrl_point_edit(self, idx: int, old: Point | None, new: Point) -> None:
        """Log a control point move."""
        self._logger.debug(
            "Control point moved",
            idx=idx,
            old=old.to_tuple() if old else None,
            new=new.to_tuple(),
        )
        self._stats.ctrl_point_edits += 1
        self._stats.edited_indices.append(idx)

    def log_edit_rejected(self, idx: int, error: Exception) -> None:
        """Log a control point edit that could not be applied."""
        self._logger.warning(
            "Control point edit rejected",
            idx=idx,
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_surface_rebuilt(
        self, point_count: int, duration_ms: float, bounds: Rect | None = None
    ) -> None:
        """Log a surface polygon rebuild."""
        self._logger.info(
            "Surface rebuilt",
            points=point_count,
            duration_ms=round(duration_ms, 3),
            bounds=bounds.to_dict() if bounds is not None else None,
        )
        self._stats.surface_rebuilds += 1
        self._stats.surface_points = point_count

    @property
    def stats(self) -> EditStats:
        """Get current editing statistics."""
        return self._stats
