"""Tests for the Qt host in chart_widget.py.

Runs on the offscreen Qt platform. Tests color conversion, ChartPath to
QPainterPath conversion, rendering through LineChartWidget (region sizing,
canvas width, the rendered signal, reconfiguration) and that painting every
primitive type succeeds.
"""

import pytest

pytest.importorskip("PySide6")

from PySide6 import QtGui  # noqa: E402

from pylinechartqt.chart_widget import (  # noqa: E402
    LineChartWidget,
    _to_qcolor,
    paint_primitives,
    to_qpainter_path,
)
from pylinechartqt.curve import interpolate  # noqa: E402
from pylinechartqt.mapping import map_values  # noqa: E402
from pylinechartqt.models import (  # noqa: E402
    ChartConfiguration,
    DrawingRegion,
)
from pylinechartqt.paths import build_fill_path, build_line_path  # noqa: E402
from pylinechartqt.surface import render_chart  # noqa: E402


class TestToQColor:
    """Tests for _to_qcolor."""

    def test_hex_string(self, qapp):
        color = _to_qcolor("#ffa500")
        assert (color.red(), color.green(), color.blue()) == (255, 165, 0)

    def test_named_color(self, qapp):
        assert _to_qcolor("white").name() == "#ffffff"

    def test_rgba_tuple(self, qapp):
        color = _to_qcolor((0, 0, 0, 77))
        assert color.alpha() == 77

    def test_qcolor_is_copied(self, qapp):
        original = QtGui.QColor(1, 2, 3)
        copy = _to_qcolor(original)
        assert copy == original and copy is not original

    def test_invalid_name(self, qapp):
        with pytest.raises(ValueError):
            _to_qcolor("not-a-color")

    def test_unsupported_type(self, qapp):
        with pytest.raises(TypeError):
            _to_qcolor(12)


class TestToQPainterPath:
    """Tests for to_qpainter_path."""

    def test_polyline(self, region, sample_values):
        points = map_values(sample_values, region, 60.0)
        qpath = to_qpainter_path(build_line_path(points))

        assert qpath.elementCount() == len(points)
        last = qpath.currentPosition()
        assert (last.x(), last.y()) == pytest.approx(points[-1].as_tuple())

    def test_curve(self, region, sample_values):
        points = map_values(sample_values, region, 60.0)
        qpath = to_qpainter_path(build_line_path(points, interpolate(points)))

        # One MoveTo plus three elements per cubic
        assert qpath.elementCount() == 1 + 3 * (len(points) - 1)

    def test_fill_mask_is_closed(self, region, sample_values):
        points = map_values(sample_values, region, 60.0)
        qpath = to_qpainter_path(build_fill_path(points, region))

        rect = qpath.boundingRect()
        assert rect.bottom() == pytest.approx(region.height)
        assert rect.left() == pytest.approx(points[0].x)
        assert rect.right() == pytest.approx(points[-1].x)


class TestPaintPrimitives:
    """Tests for paint_primitives."""

    def test_paints_every_primitive_type(self, qapp, sample_values):
        result = render_chart(
            sample_values,
            ChartConfiguration.all_enabled(draw_curve=True),
            DrawingRegion(400.0, 220.0),
        )
        image = QtGui.QImage(500, 300, QtGui.QImage.Format_ARGB32)
        image.fill(0)
        painter = QtGui.QPainter(image)
        try:
            paint_primitives(painter, list(result.primitives()))
        finally:
            painter.end()

        # Below the peak (value 30 at x=210) the gradient fill is opaque
        assert image.pixelColor(210, 110).alpha() == 255
        # Right of the data and the grid nothing is painted
        assert image.pixelColor(450, 5).alpha() == 0

    def test_unsupported_primitive(self, qapp):
        image = QtGui.QImage(10, 10, QtGui.QImage.Format_ARGB32)
        painter = QtGui.QPainter(image)
        try:
            with pytest.raises(TypeError):
                paint_primitives(painter, [object()])
        finally:
            painter.end()


class TestLineChartWidget:
    """Tests for LineChartWidget."""

    def _make_widget(self, config=None):
        widget = LineChartWidget(config=config or ChartConfiguration.all_enabled())
        widget.resize(400, 300)
        return widget

    def test_set_data_renders(self, qapp, sample_values):
        widget = self._make_widget()
        widget.set_data(sample_values)
        result = widget.last_result()

        assert result.region == DrawingRegion(400.0, 220.0)
        assert len(result.points) == 5
        assert tuple(widget.data()) == tuple(sample_values)
        assert widget.canvas.result is result

    def test_canvas_sized_to_content(self, qapp):
        widget = self._make_widget()
        widget.set_data(list(range(20)))

        assert widget.canvas.width() == 20 * 60 + 2 * 60

    def test_rendered_signal(self, qapp, sample_values):
        widget = self._make_widget()
        received = []
        widget.rendered.connect(received.append)
        widget.set_data(sample_values)

        assert received == [widget.last_result()]

    def test_set_configuration_redraws(self, qapp, sample_values):
        widget = self._make_widget(ChartConfiguration())
        widget.set_data(sample_values)
        assert widget.last_result().dots == ()

        widget.set_configuration(ChartConfiguration(draw_dots=True))

        assert len(widget.last_result().dots) == 5
        assert widget.configuration().draw_dots

    def test_clear(self, qapp, sample_values):
        widget = self._make_widget()
        widget.set_data(sample_values)
        widget.clear()

        assert widget.last_result().is_empty

    def test_grab_paints(self, qapp, sample_values):
        """Test that the widget and canvas paint without errors."""
        widget = self._make_widget(ChartConfiguration.all_enabled(draw_curve=True))
        widget.set_data(sample_values)

        assert not widget.grab().isNull()
        assert not widget.canvas.grab().isNull()

    def test_scroll_to_latest(self, qapp):
        widget = self._make_widget()
        widget.set_data(list(range(50)))
        widget.scroll_to_latest()

        bar = widget.scroll_area.horizontalScrollBar()
        assert bar.value() == bar.maximum()
