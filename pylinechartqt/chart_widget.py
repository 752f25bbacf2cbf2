"""Scrollable line chart widget.

This module hosts the geometry pipeline in a PySide6 widget. The data layer is
painted on a canvas inside a QScrollArea; the horizontal grid and its labels
are painted on the widget itself, underneath the transparent scroll area, so
they stay put while the data scrolls.

Typical usage:

    chart = LineChartWidget(config=ChartConfiguration.all_enabled(draw_curve=True))
    chart.set_data([random.randint(0, 30) for _ in range(100)])
    chart.rendered.connect(lambda result: print(result.content_width))
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Optional, Sequence

from PySide6 import QtCore, QtGui
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame, QScrollArea, QVBoxLayout, QWidget
import pyqtgraph as pg

from .models import (
    ChartConfiguration,
    ChartLayer,
    ChartPath,
    ChartStyle,
    ClosePath,
    Color,
    CubicTo,
    DotPrimitive,
    FillPrimitive,
    GridLinePrimitive,
    LinePrimitive,
    LineTo,
    MoveTo,
    RenderResult,
    TextPrimitive,
)
from .surface import ChartSurface

logger = logging.getLogger(__name__)


def _to_qcolor(color: Color) -> QtGui.QColor:
    """Convert a style color into a QColor.

    Accepts QColor objects, (r, g, b) / (r, g, b, a) tuples with values 0-255
    and anything QColor parses (names, "#RRGGBB", "#AARRGGBB").

    Raises:
        ValueError: If the color cannot be parsed.
        TypeError: If the color has an unsupported type.
    """
    if isinstance(color, QtGui.QColor):
        return pg.mkColor(color)
    if isinstance(color, tuple) and len(color) in (3, 4):
        return pg.mkColor(tuple(int(c) for c in color))
    if isinstance(color, str):
        qcolor = QtGui.QColor(color)
        if qcolor.isValid():
            return qcolor
        raise ValueError(f"Invalid color name: '{color}'")
    raise TypeError(
        f"Color must be an RGB(A) tuple, a QColor object, "
        f"or a color string, got {type(color)}"
    )


def to_qpainter_path(path: ChartPath) -> QtGui.QPainterPath:
    """Convert a ChartPath into a QPainterPath."""
    qpath = QtGui.QPainterPath()
    for command in path.commands:
        if isinstance(command, MoveTo):
            qpath.moveTo(command.point.x, command.point.y)
        elif isinstance(command, LineTo):
            qpath.lineTo(command.point.x, command.point.y)
        elif isinstance(command, CubicTo):
            qpath.cubicTo(
                command.control1.x,
                command.control1.y,
                command.control2.x,
                command.control2.y,
                command.point.x,
                command.point.y,
            )
        elif isinstance(command, ClosePath):
            qpath.closeSubpath()
    return qpath


def _paint_line(painter: QtGui.QPainter, line: LinePrimitive) -> None:
    qpath = to_qpainter_path(line.path)
    painter.setBrush(Qt.NoBrush)

    if line.shadow is not None:
        # Blur approximated by a wider translucent stroke under the line.
        shadow_color = _to_qcolor(line.shadow.color)
        shadow_color.setAlphaF(shadow_color.alphaF() * line.shadow.opacity * 0.3)
        dx, dy = line.shadow.offset
        painter.save()
        painter.translate(dx, dy)
        painter.setPen(pg.mkPen(color=shadow_color, width=line.width + line.shadow.radius))
        painter.drawPath(qpath)
        painter.restore()

    painter.setPen(pg.mkPen(color=_to_qcolor(line.color), width=line.width))
    painter.drawPath(qpath)


def _paint_fill(painter: QtGui.QPainter, fill: FillPrimitive) -> None:
    gradient = QtGui.QLinearGradient(0.0, fill.top, 0.0, fill.bottom)
    gradient.setColorAt(0.0, _to_qcolor(fill.gradient_colors[0]))
    gradient.setColorAt(1.0, _to_qcolor(fill.gradient_colors[1]))
    painter.fillPath(to_qpainter_path(fill.path), QtGui.QBrush(gradient))


def _paint_dot(painter: QtGui.QPainter, dot: DotPrimitive) -> None:
    center = QtCore.QPointF(dot.center.x, dot.center.y)
    painter.setPen(pg.mkPen(None))
    painter.setBrush(pg.mkBrush(_to_qcolor(dot.color)))
    outer = dot.outer_diameter / 2.0
    painter.drawEllipse(center, outer, outer)
    painter.setBrush(pg.mkBrush(_to_qcolor(dot.inner_color)))
    inner = dot.inner_diameter / 2.0
    painter.drawEllipse(center, inner, inner)


def _paint_grid_line(painter: QtGui.QPainter, grid_line: GridLinePrimitive) -> None:
    dash = None
    if grid_line.is_dashed and grid_line.width > 0:
        # Qt dash patterns are expressed in units of the pen width.
        dash = [d / grid_line.width for d in grid_line.dash_pattern]
    painter.setPen(
        pg.mkPen(color=_to_qcolor(grid_line.color), width=grid_line.width, dash=dash)
    )
    painter.drawLine(
        QtCore.QPointF(grid_line.start.x, grid_line.start.y),
        QtCore.QPointF(grid_line.end.x, grid_line.end.y),
    )


def _paint_text(painter: QtGui.QPainter, text: TextPrimitive) -> None:
    font = QtGui.QFont(painter.font())
    font.setPixelSize(max(1, int(round(text.font_size))))
    painter.setFont(font)
    painter.setPen(_to_qcolor(text.color))
    metrics = QtGui.QFontMetricsF(font)
    rect = QtCore.QRectF(
        text.position.x,
        text.position.y,
        metrics.horizontalAdvance(text.text) + 2.0,
        metrics.height(),
    )
    painter.drawText(rect, Qt.AlignLeft | Qt.AlignTop, text.text)


_PAINTERS: Dict[type, Callable[[QtGui.QPainter, Any], None]] = {
    LinePrimitive: _paint_line,
    FillPrimitive: _paint_fill,
    DotPrimitive: _paint_dot,
    GridLinePrimitive: _paint_grid_line,
    TextPrimitive: _paint_text,
}


def paint_primitives(
    painter: QtGui.QPainter, primitives: Sequence[Any]
) -> None:
    """Paint primitives in order with the matching painter function."""
    for primitive in primitives:
        paint = _PAINTERS.get(type(primitive))
        if paint is None:
            raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")
        paint(painter, primitive)


class ChartCanvas(QWidget):
    """Scrollable content: the line, fill, dots, vertical grid and value labels."""

    def __init__(self, style: ChartStyle, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._style = style
        self._result: Optional[RenderResult] = None

    @property
    def result(self) -> Optional[RenderResult]:
        return self._result

    def set_result(self, result: Optional[RenderResult]) -> None:
        self._result = result
        self.update()

    def paintEvent(self, _e: QtGui.QPaintEvent) -> None:  # noqa: N802
        if self._result is None or self._result.is_empty:
            return
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.Antialiasing, True)
        p.translate(0.0, self._style.top_space)
        paint_primitives(p, self._result.layer_primitives(ChartLayer.DATA))
        p.end()


class LineChartWidget(QWidget):
    """Horizontally scrollable single-series line/curve chart.

    Configure the chart before assigning data; every ``set_data`` call
    replaces the whole series and redraws from scratch.

    Attributes:
        rendered: Signal emitted with the RenderResult of every render pass.
    """

    rendered = Signal(object)

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        config: Optional[ChartConfiguration] = None,
        style: Optional[ChartStyle] = None,
    ) -> None:
        """Initialize the chart widget.

        Args:
            parent: Parent widget.
            config: Overlay toggles. Defaults to a bare straight line.
            style: Layout and appearance constants.
        """
        super().__init__(parent)
        self._surface = ChartSurface(config, style)
        self._surface.add_listener(self._on_rendered)

        # Deferred scroll to the most recent data after each render
        self._scroll_timer = QtCore.QTimer(self)
        self._scroll_timer.setSingleShot(True)
        self._scroll_timer.timeout.connect(self.scroll_to_latest)

        self._build_ui()

    def _build_ui(self) -> None:
        """Build the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._canvas = ChartCanvas(self._surface.style)

        self._scroll = QScrollArea(self)
        self._scroll.setFrameShape(QFrame.NoFrame)
        self._scroll.setWidgetResizable(False)
        self._scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self._scroll.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        # Transparent so the pinned horizontal grid painted below shows through
        self._scroll.setStyleSheet("background: transparent;")
        self._scroll.viewport().setAutoFillBackground(False)
        self._scroll.setWidget(self._canvas)

        layout.addWidget(self._scroll)

    @property
    def surface(self) -> ChartSurface:
        return self._surface

    @property
    def canvas(self) -> ChartCanvas:
        return self._canvas

    @property
    def scroll_area(self) -> QScrollArea:
        return self._scroll

    def configuration(self) -> ChartConfiguration:
        return self._surface.config

    def set_configuration(self, config: ChartConfiguration) -> None:
        """Replace the overlay toggles and redraw the current series."""
        self._surface.set_configuration(config)
        if self._surface.values:
            self._surface.refresh()

    def set_data(self, values: Sequence[int]) -> None:
        """Replace the plotted series.

        Args:
            values: Integer samples, oldest first.
        """
        self._surface.set_region_size(self.width(), self.height())
        self._surface.render(values)

    def data(self) -> Sequence[int]:
        return self._surface.values

    def clear(self) -> None:
        self._surface.clear()

    def last_result(self) -> Optional[RenderResult]:
        return self._surface.last_result

    def scroll_to_latest(self) -> None:
        """Scroll to the rightmost (most recent) content."""
        bar = self._scroll.horizontalScrollBar()
        bar.setValue(bar.maximum())

    def resizeEvent(self, e: QtGui.QResizeEvent) -> None:  # noqa: N802
        super().resizeEvent(e)
        self._surface.set_region_size(self.width(), self.height())
        if self._surface.values:
            self._surface.refresh()

    def paintEvent(self, _e: QtGui.QPaintEvent) -> None:  # noqa: N802
        style = self._surface.style
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.Antialiasing, True)
        p.fillRect(self.rect(), _to_qcolor(style.background_color))
        result = self._surface.last_result
        if result is not None and not result.is_empty:
            p.translate(0.0, style.top_space)
            paint_primitives(p, result.layer_primitives(ChartLayer.GRID))
        p.end()

    def _on_rendered(self, result: RenderResult) -> None:
        width = int(math.ceil(result.content_width))
        logger.debug("Resizing chart canvas to %dx%d", width, self.height())
        self._canvas.resize(width, max(1, self.height()))
        self._canvas.set_result(result)
        self.update()
        self.rendered.emit(result)
        if not result.is_empty:
            self._scroll_timer.start(self._surface.style.scroll_delay_ms)
