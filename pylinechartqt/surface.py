"""Render orchestration: samples in, immutable drawing primitives out.

``render_chart`` is the pure pipeline (map -> interpolate/build paths ->
overlays). ``ChartSurface`` wraps it with the state a host needs: the frame
size, the active configuration and post-render listeners.

Typical usage:

    surface = ChartSurface(ChartConfiguration(draw_curve=True, draw_dots=True))
    surface.set_region_size(400, 300)
    surface.add_listener(lambda result: print(result.content_width))
    result = surface.render([10, 20, 15, 30, 5])
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .curve import interpolate
from .mapping import content_width, data_width, map_values, validate_samples, value_domain
from .models import (
    ChartConfiguration,
    ChartStyle,
    DrawingRegion,
    FillPrimitive,
    LinePrimitive,
    RenderResult,
)
from .overlays import (
    dot_markers,
    format_grid_labels,
    grid_labels,
    horizontal_grid,
    value_labels,
    vertical_grid,
)
from .paths import build_fill_path, build_line_path

logger = logging.getLogger(__name__)

RenderListener = Callable[[RenderResult], None]


def render_chart(
    values: Sequence[int],
    config: ChartConfiguration,
    region: DrawingRegion,
    style: Optional[ChartStyle] = None,
) -> RenderResult:
    """Run one complete render pass.

    Args:
        values: Integer samples, replacing any previous series.
        config: Overlay toggles.
        region: Plotting area. Its width is the visible viewport width used by
            the horizontal grid; the data itself may extend beyond it.
        style: Layout and appearance constants.

    Returns:
        A RenderResult. Empty data or a region with no height yields an empty
        result instead of an error.

    Raises:
        InvalidSampleError: If a sample is not an integer.
    """
    style = style or ChartStyle()
    samples = validate_samples(values)
    total_width = content_width(len(samples), style.spacing)

    if not samples:
        logger.debug("No samples; nothing to draw")
        return RenderResult.empty(region, total_width)
    if not region.is_drawable:
        logger.warning(
            "Skipping render of %d samples: region height is %s",
            len(samples),
            region.height,
        )
        return RenderResult.empty(region, total_width)

    points = map_values(samples, region, style.spacing, style.left_margin)
    segments = interpolate(points) if config.draw_curve and len(points) >= 2 else None

    line = None
    line_path = build_line_path(points, segments)
    if line_path is not None:
        line = LinePrimitive(
            path=line_path,
            color=style.line_color,
            width=style.line_width,
            shadow=style.shadow if config.draw_line_shadow else None,
        )

    fill = None
    fill_path = build_fill_path(points, region, segments)
    if fill_path is not None:
        fill = FillPrimitive(
            path=fill_path,
            gradient_colors=style.gradient_colors,
            top=0.0,
            bottom=region.height,
        )

    h_grid: Tuple = ()
    h_labels: Tuple = ()
    if config.draw_horizontal_grid:
        h_grid = horizontal_grid(region.height, region.width, style)
        labels = config.grid_labels
        if labels is None:
            labels = format_grid_labels(*value_domain(samples))
        h_labels = grid_labels(labels, region.height, style)

    result = RenderResult(
        region=region,
        points=tuple(points),
        line=line,
        fill=fill,
        dots=dot_markers(points, style) if config.draw_dots else (),
        vertical_grid=vertical_grid(points, region, style) if config.draw_vertical_grid else (),
        horizontal_grid=h_grid,
        grid_labels=h_labels,
        value_labels=value_labels(points, samples, style) if config.draw_value_labels else (),
        data_width=data_width(len(samples), style.spacing),
        content_width=total_width,
        values=samples,
    )
    logger.debug(
        "Rendered %d samples (%s line, content width %.1f)",
        len(samples),
        "curved" if segments is not None else "straight",
        total_width,
    )
    return result


class ChartSurface:
    """Stateful host-facing wrapper around ``render_chart``.

    A data replacement requested while a pass is running (for example from a
    listener) is queued and rendered once the current pass finishes. Only the
    most recent queued replacement is kept; passes never interleave.
    """

    def __init__(
        self,
        config: Optional[ChartConfiguration] = None,
        style: Optional[ChartStyle] = None,
    ) -> None:
        self._config = config or ChartConfiguration()
        self._style = style or ChartStyle()
        self._frame_width = 0.0
        self._frame_height = 0.0
        self._values: Tuple[int, ...] = ()
        self._listeners: List[RenderListener] = []
        self._last_result: Optional[RenderResult] = None
        self._rendering = False
        self._pending: Optional[Tuple[Tuple[int, ...], Optional[ChartConfiguration]]] = None

    @property
    def config(self) -> ChartConfiguration:
        return self._config

    @property
    def style(self) -> ChartStyle:
        return self._style

    @property
    def values(self) -> Tuple[int, ...]:
        return self._values

    @property
    def region(self) -> DrawingRegion:
        """Plotting area: the frame minus the top and bottom label margins."""
        return DrawingRegion(
            width=self._frame_width,
            height=self._frame_height - self._style.vertical_margin,
        )

    @property
    def last_result(self) -> Optional[RenderResult]:
        return self._last_result

    @property
    def is_rendering(self) -> bool:
        return self._rendering

    def content_width(self) -> float:
        """Scrollable width for the current series."""
        return content_width(len(self._values), self._style.spacing)

    def set_region_size(self, width: float, height: float) -> DrawingRegion:
        """Set the host frame size. Takes effect on the next render."""
        self._frame_width = max(0.0, float(width))
        self._frame_height = max(0.0, float(height))
        return self.region

    def set_configuration(self, config: ChartConfiguration) -> None:
        self._config = config

    def add_listener(self, listener: RenderListener) -> None:
        """Register a callback invoked with every completed RenderResult."""
        self._listeners.append(listener)

    def remove_listener(self, listener: RenderListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def render(
        self,
        values: Sequence[int],
        config: Optional[ChartConfiguration] = None,
    ) -> Optional[RenderResult]:
        """Replace the series and render it.

        Args:
            values: The new series. Validated immediately.
            config: Replaces the active configuration when given.

        Returns:
            The result of the last pass run by this call, or None when the
            request was queued behind a pass already in progress.
        """
        samples = validate_samples(values)
        if self._rendering:
            logger.debug("Render in progress; queueing %d samples", len(samples))
            if config is None and self._pending is not None:
                config = self._pending[1]
            self._pending = (samples, config)
            return None

        self._rendering = True
        try:
            request: Optional[Tuple[Tuple[int, ...], Optional[ChartConfiguration]]]
            request = (samples, config)
            result: Optional[RenderResult] = None
            while request is not None:
                result = self._run_pass(*request)
                request, self._pending = self._pending, None
            return result
        finally:
            self._rendering = False
            self._pending = None

    def refresh(self) -> Optional[RenderResult]:
        """Re-render the current series, e.g. after a size change."""
        return self.render(self._values)

    def clear(self) -> Optional[RenderResult]:
        return self.render(())

    def _run_pass(
        self, samples: Tuple[int, ...], config: Optional[ChartConfiguration]
    ) -> RenderResult:
        if config is not None:
            self._config = config
        self._values = samples
        result = render_chart(samples, self._config, self.region, self._style)
        self._last_result = result
        for listener in list(self._listeners):
            listener(result)
        return result
