"""Exception hierarchy for the line chart geometry pipeline."""

from __future__ import annotations


class LineChartError(Exception):
    """Base class for all chart errors."""


class InvalidRegionError(LineChartError, ValueError):
    """Raised when a drawing region cannot hold any geometry (height <= 0)."""


class InvalidSampleError(LineChartError, TypeError):
    """Raised when a sample is not an integer."""


class NotEnoughPointsError(LineChartError, ValueError):
    """Raised when a curve is requested for fewer than two points."""


class InvalidConfigurationError(LineChartError, ValueError):
    """Raised when a ChartConfiguration or ChartStyle is inconsistent."""
