"""Coordinate mapping from integer samples to screen points.

Samples are spaced evenly along x and normalised along y so that the largest
sample touches the top of the region (y=0) and the smallest touches the
bottom (y=region.height).
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidRegionError, InvalidSampleError
from .models import DrawingRegion, Point

logger = logging.getLogger(__name__)

# Half-span of the value domain shown around a flat series.
FLAT_DOMAIN_HALF_SPAN = 2


def validate_samples(values: Sequence[int]) -> Tuple[int, ...]:
    """Return ``values`` as a tuple of ints, rejecting anything non-integral.

    Raises:
        InvalidSampleError: If a sample is not an integer (bools included).
    """
    samples = []
    for i, value in enumerate(values):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidSampleError(
                f"Sample {i} must be an integer, got {type(value).__name__}"
            )
        samples.append(int(value))
    return tuple(samples)


def map_values(
    values: Sequence[int],
    region: DrawingRegion,
    spacing: float,
    left_margin: Optional[float] = None,
) -> List[Point]:
    """Map samples to points inside ``region``.

    Args:
        values: Integer samples; the index of each sample is its x slot.
        region: Drawing region the points must fit into.
        spacing: Horizontal distance between consecutive samples.
        left_margin: Leading margin before the first sample. Defaults to
            half the spacing.

    Returns:
        One point per sample, in input order. A series whose samples are all
        equal maps onto a flat line at mid-height.

    Raises:
        InvalidRegionError: If the region height is not positive.
        InvalidSampleError: If a sample is not an integer.
    """
    samples = validate_samples(values)
    if not samples:
        return []
    if not region.is_drawable:
        raise InvalidRegionError(
            f"Drawing region height must be positive, got {region.height}"
        )
    if left_margin is None:
        left_margin = spacing / 2.0

    v = np.asarray(samples, dtype=np.float64)
    v_min = float(np.min(v))
    v_max = float(np.max(v))
    value_range = v_max - v_min

    xs = np.arange(len(v), dtype=np.float64) * float(spacing) + float(left_margin)
    if value_range == 0:
        logger.debug("Flat series of %d samples; mapping to mid-height", len(v))
        ys = np.full(len(v), float(region.height) / 2.0)
    else:
        ys = float(region.height) * (1.0 - (v - v_min) / value_range)

    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def value_domain(values: Sequence[int]) -> Optional[Tuple[float, float]]:
    """Values represented by the bottom and the top of the region.

    A flat series is centred in a domain of ``FLAT_DOMAIN_HALF_SPAN`` on either
    side so the line sits on the middle grid line. Returns ``None`` for an
    empty series.
    """
    if len(values) == 0:
        return None
    low = float(min(values))
    high = float(max(values))
    if low == high:
        return (low - FLAT_DOMAIN_HALF_SPAN, high + FLAT_DOMAIN_HALF_SPAN)
    return (low, high)


def data_width(count: int, spacing: float) -> float:
    """Width of the layer holding the plotted data."""
    return count * spacing


def content_width(count: int, spacing: float) -> float:
    """Total scrollable width: the data plus one spacing of padding per side."""
    return count * spacing + 2 * spacing
