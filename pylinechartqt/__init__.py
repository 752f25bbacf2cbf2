from .models import (
    ChartConfiguration,
    ChartLayer,
    ChartPath,
    ChartStyle,
    CurveSegment,
    DotPrimitive,
    DrawingRegion,
    FillPrimitive,
    GridLinePrimitive,
    LinePrimitive,
    LineShadow,
    Point,
    RenderResult,
    TextPrimitive,
)
from .errors import (
    LineChartError,
    InvalidConfigurationError,
    InvalidRegionError,
    InvalidSampleError,
    NotEnoughPointsError,
)
from .mapping import map_values, content_width
from .curve import interpolate
from .paths import build_line_path, build_fill_path
from .surface import ChartSurface, render_chart
from .chart_widget import LineChartWidget

__all__ = [
    # Models
    "ChartConfiguration",
    "ChartLayer",
    "ChartPath",
    "ChartStyle",
    "CurveSegment",
    "DrawingRegion",
    "LineShadow",
    "Point",
    "RenderResult",
    # Primitives
    "DotPrimitive",
    "FillPrimitive",
    "GridLinePrimitive",
    "LinePrimitive",
    "TextPrimitive",
    # Errors
    "LineChartError",
    "InvalidConfigurationError",
    "InvalidRegionError",
    "InvalidSampleError",
    "NotEnoughPointsError",
    # Geometry pipeline
    "map_values",
    "content_width",
    "interpolate",
    "build_line_path",
    "build_fill_path",
    "render_chart",
    "ChartSurface",
    # Qt widget
    "LineChartWidget",
]
