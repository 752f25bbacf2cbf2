"""Tests for render orchestration in surface.py.

Tests the render_chart pipeline (toggles, empty and single-point series, flat
data, unusable regions, idempotence, grid label sources) and the ChartSurface
state: region sizing, listeners and queueing of re-entrant renders.
"""

import logging

import pytest

from pylinechartqt.errors import InvalidSampleError
from pylinechartqt.models import (
    ChartConfiguration,
    ChartLayer,
    ChartStyle,
    CubicTo,
    DrawingRegion,
    LineTo,
    RenderResult,
)
from pylinechartqt.surface import ChartSurface, render_chart


class TestRenderChart:
    """Tests for render_chart."""

    def test_worked_example(self, sample_values, region):
        result = render_chart(sample_values, ChartConfiguration(), region)

        assert [p.y for p in result.points] == pytest.approx([160.0, 80.0, 120.0, 0.0, 200.0])
        assert result.values == tuple(sample_values)
        assert result.content_width == 5 * 60.0 + 120.0
        assert result.data_width == 300.0

    def test_defaults_draw_line_and_fill_only(self, sample_values, region):
        """Test that with every toggle off only the line and its fill are drawn."""
        result = render_chart(sample_values, ChartConfiguration(), region)

        assert result.line is not None
        assert result.line.shadow is None
        assert all(isinstance(c, LineTo) for c in result.line.path.commands[1:])
        assert result.fill is not None and result.fill.path.is_closed
        assert result.dots == ()
        assert result.vertical_grid == ()
        assert result.horizontal_grid == ()
        assert result.grid_labels == ()
        assert result.value_labels == ()

    def test_all_overlays(self, sample_values, region):
        config = ChartConfiguration.all_enabled(draw_curve=True)
        result = render_chart(sample_values, config, region)

        assert all(isinstance(c, CubicTo) for c in result.line.path.commands[1:])
        assert result.line.shadow == ChartStyle().shadow
        assert len(result.dots) == 5
        assert len(result.vertical_grid) == 5
        assert len(result.horizontal_grid) == 5
        assert [t.text for t in result.grid_labels] == ["30", "23", "17", "11", "5"]
        assert [t.text for t in result.value_labels] == ["10", "20", "15", "30", "5"]

    def test_vertical_grid_without_dots(self, sample_values, region):
        config = ChartConfiguration(draw_vertical_grid=True)
        result = render_chart(sample_values, config, region)

        assert len(result.vertical_grid) == 5
        assert result.dots == ()

    def test_fixed_grid_labels(self, sample_values, region):
        config = ChartConfiguration(
            draw_horizontal_grid=True, grid_labels=("0", "7", "15", "22", "30")
        )
        result = render_chart(sample_values, config, region)

        assert [t.text for t in result.grid_labels] == ["30", "22", "15", "7", "0"]

    def test_horizontal_grid_spans_region_width(self, sample_values):
        region = DrawingRegion(width=123.0, height=80.0)
        config = ChartConfiguration(draw_horizontal_grid=True)
        result = render_chart(sample_values, config, region)

        assert all(line.end.x == 123.0 for line in result.horizontal_grid)

    def test_empty_data(self, region, all_enabled):
        """Test that no samples degrade to an empty result."""
        result = render_chart([], all_enabled, region)

        assert result.is_empty
        assert list(result.primitives()) == []
        assert result.content_width == 120.0

    def test_single_point(self, region):
        """Test that one sample draws a dot and a label but no line."""
        result = render_chart([7], ChartConfiguration.all_enabled(draw_curve=True), region)

        assert result.line is None
        assert len(result.dots) == 1
        assert [t.text for t in result.value_labels] == ["7"]
        assert result.fill.path.start == result.fill.path.end

    def test_flat_series(self, region, all_enabled):
        result = render_chart([5, 5, 5], all_enabled, region)

        assert {p.y for p in result.points} == {100.0}
        assert [t.text for t in result.grid_labels] == ["7", "6", "5", "4", "3"]

    def test_non_positive_height_is_not_rendered(self, sample_values, all_enabled, caplog):
        """Test that a region without height logs a warning instead of raising."""
        with caplog.at_level(logging.WARNING, logger="pylinechartqt.surface"):
            result = render_chart(sample_values, all_enabled, DrawingRegion(300.0, -10.0))

        assert result.is_empty
        assert "region height" in caplog.text

    def test_invalid_sample_raises(self, region):
        with pytest.raises(InvalidSampleError):
            render_chart([1, 2.5], ChartConfiguration(), region)

    def test_idempotent(self, sample_values, region):
        """Test that rendering identical inputs gives identical outputs."""
        config = ChartConfiguration.all_enabled(draw_curve=True)
        assert render_chart(sample_values, config, region) == render_chart(
            list(sample_values), config, region
        )

    def test_paint_order_and_layers(self, sample_values, region):
        config = ChartConfiguration.all_enabled()
        result = render_chart(sample_values, config, region)
        primitives = list(result.primitives())

        assert primitives[0] is result.fill
        assert primitives[-1] is result.value_labels[-1]
        grid = result.layer_primitives(ChartLayer.GRID)
        assert len(grid) == len(result.horizontal_grid) + len(result.grid_labels)


class TestChartSurface:
    """Tests for ChartSurface."""

    def test_region_excludes_margins(self):
        surface = ChartSurface()
        region = surface.set_region_size(400, 300)

        assert region == DrawingRegion(400.0, 220.0)
        assert surface.region == region

    def test_region_too_small(self, sample_values):
        surface = ChartSurface()
        surface.set_region_size(400, 60)

        assert surface.render(sample_values).is_empty

    def test_render_uses_configuration(self, sample_values):
        surface = ChartSurface(ChartConfiguration(draw_dots=True))
        surface.set_region_size(400, 300)
        result = surface.render(sample_values)

        assert len(result.dots) == 5
        assert surface.last_result is result
        assert surface.values == tuple(sample_values)
        assert surface.content_width() == result.content_width

    def test_render_replaces_configuration(self, sample_values):
        surface = ChartSurface(ChartConfiguration(draw_dots=True))
        surface.set_region_size(400, 300)
        result = surface.render(sample_values, ChartConfiguration())

        assert result.dots == ()
        assert surface.config == ChartConfiguration()

    def test_listeners(self, sample_values):
        surface = ChartSurface()
        surface.set_region_size(400, 300)
        seen = []
        surface.add_listener(seen.append)

        result = surface.render(sample_values)
        surface.remove_listener(seen.append)
        surface.render([1, 2])

        assert seen == [result]

    def test_reentrant_render_is_queued(self, sample_values):
        """Test that a replacement requested mid-pass runs after the pass."""
        surface = ChartSurface()
        surface.set_region_size(400, 300)
        seen = []
        inner_returns = []

        def on_rendered(result: RenderResult) -> None:
            seen.append(result.values)
            if len(seen) == 1:
                assert surface.is_rendering
                inner_returns.append(surface.render([1, 2]))
                inner_returns.append(surface.render([3, 4, 5]))

        surface.add_listener(on_rendered)
        final = surface.render(sample_values)

        assert inner_returns == [None, None]
        assert seen == [tuple(sample_values), (3, 4, 5)]
        assert final.values == (3, 4, 5)
        assert surface.values == (3, 4, 5)
        assert not surface.is_rendering

    def test_refresh_after_resize(self, sample_values):
        surface = ChartSurface(ChartConfiguration(draw_horizontal_grid=True))
        surface.set_region_size(400, 300)
        surface.render(sample_values)
        surface.set_region_size(500, 180)
        result = surface.refresh()

        assert result.region == DrawingRegion(500.0, 100.0)
        assert max(p.y for p in result.points) == pytest.approx(100.0)

    def test_clear(self, sample_values):
        surface = ChartSurface()
        surface.set_region_size(400, 300)
        surface.render(sample_values)

        assert surface.clear().is_empty
        assert surface.values == ()

    def test_listener_errors_propagate(self, sample_values):
        surface = ChartSurface()
        surface.set_region_size(400, 300)

        def boom(_result):
            raise RuntimeError("listener failed")

        surface.add_listener(boom)
        with pytest.raises(RuntimeError):
            surface.render(sample_values)
        assert not surface.is_rendering

    def test_failed_pass_drops_queued_series(self):
        """Test that a series queued by a failing listener is not replayed later."""
        surface = ChartSurface()
        surface.set_region_size(400, 300)
        seen = []

        def queue_then_fail(result: RenderResult) -> None:
            seen.append(result.values)
            if result.values == (1, 2, 3):
                surface.render([9, 9])
                raise RuntimeError("listener failed")

        surface.add_listener(queue_then_fail)
        with pytest.raises(RuntimeError):
            surface.render([1, 2, 3])
        result = surface.render([4, 5, 6])

        assert seen == [(1, 2, 3), (4, 5, 6)]
        assert result.values == (4, 5, 6)
        assert surface.values == (4, 5, 6)

    def test_queued_configuration_survives_newer_series(self, sample_values):
        """Test that the latest configuration wins even when a later request omits one."""
        surface = ChartSurface()
        surface.set_region_size(400, 300)

        def replace(result: RenderResult) -> None:
            if result.values == tuple(sample_values):
                surface.render([7, 8], ChartConfiguration(draw_dots=True))
                surface.render([7, 9])

        surface.add_listener(replace)
        final = surface.render(sample_values)

        assert final.values == (7, 9)
        assert surface.config.draw_dots
        assert len(final.dots) == 2
