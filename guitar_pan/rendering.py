"""
Drawing functions for the two drums.

Every shape painted here is built from the descriptors returned by
``guitar_pan.geometry``; no boundary is derived independently, so the
painted regions match the tap regions. Polygons and circles are drawn with
OpenCV using fixed-point coordinates to keep sub-pixel accuracy.
"""

import cv2
import numpy as np
from collections.abc import Sequence

from guitar_pan.geometry import (
    inner_note_center,
    inner_note_radius,
    outer_segment_bounds,
)
from guitar_pan.models import (
    CanvasSettings,
    DrumLayout,
    DrumViewport,
    InstrumentLayout,
    NoteSpot,
    Point,
    RingType,
    SegmentBounds,
)

SHIFT_BITS = 4
_SCALE = 1 << SHIFT_BITS
ARC_STEP_DEGREES = 2.0


def _fixed(value: float) -> int:
    return int(round(value * _SCALE))


def _fixed_point(point: Point) -> tuple[int, int]:
    return _fixed(point[0]), _fixed(point[1])


def segment_polygon(bounds: SegmentBounds, center: Point) -> np.ndarray:
    """Build the annular-sector outline of one outer segment.

    The outer arc runs from ``start_angle`` through ``start_angle + sweep``
    and the inner arc runs back, so the polygon is closed and simple.

    Args:
        bounds: Segment boundary from ``outer_segment_bounds``.
        center: Drum center in pixels.

    Returns:
        Int32 array of shape (N, 2) in fixed-point coordinates
        (``SHIFT_BITS`` fractional bits), ready for ``cv2.fillPoly``.
    """
    steps = max(2, int(np.ceil(bounds.sweep_angle / ARC_STEP_DEGREES)) + 1)
    angles = np.radians(
        np.linspace(bounds.start_angle, bounds.start_angle + bounds.sweep_angle, steps)
    )
    cos, sin = np.cos(angles), np.sin(angles)

    outer = np.stack(
        [center[0] + bounds.outer_radius * cos, center[1] + bounds.outer_radius * sin],
        axis=1,
    )
    inner = np.stack(
        [center[0] + bounds.inner_radius * cos, center[1] + bounds.inner_radius * sin],
        axis=1,
    )[::-1]

    points = np.concatenate([outer, inner])
    return np.round(points * _SCALE).astype(np.int32)


def _draw_label(
    canvas: np.ndarray, text: str, anchor: Point, settings: CanvasSettings
) -> None:
    """Draw ``text`` centered on ``anchor``."""
    if not text:
        return
    font = cv2.FONT_HERSHEY_SIMPLEX
    (w, h), _ = cv2.getTextSize(text, font, settings.font_scale, 1)
    org = (int(round(anchor[0] - w / 2)), int(round(anchor[1] + h / 2)))
    cv2.putText(
        canvas, text, org, font, settings.font_scale, settings.outline_color, 1, cv2.LINE_AA
    )


def _spot_fill(spot: NoteSpot, settings: CanvasSettings, highlight: int | None):
    if highlight is not None and spot.id == highlight:
        return settings.highlight_color
    return settings.segment_color if spot.ring is RingType.OUTER else settings.inner_color


def draw_drum(
    canvas: np.ndarray,
    layout: DrumLayout,
    center: Point,
    radius: float,
    settings: CanvasSettings,
    highlight: int | None = None,
) -> np.ndarray:
    """Paint one drum onto ``canvas`` in place.

    Args:
        canvas: H×W×3 uint8 RGB array.
        layout: Validated drum layout.
        center: Drum center in canvas pixels.
        radius: Drum radius in pixels.
        settings: Colors, outline width and font scale.
        highlight: Optional note id painted in the highlight color.

    Returns:
        The same canvas, for chaining.
    """
    if radius <= 0:
        return canvas

    c = _fixed_point(center)
    r = _fixed(radius)
    thickness = settings.outline_thickness
    cv2.circle(canvas, c, r, settings.drum_color, -1, cv2.LINE_AA, SHIFT_BITS)

    for spot in layout.outer_notes:
        bounds = outer_segment_bounds(
            spot.angular_index, layout.outer_count, spot.boundary_ratio, radius
        )
        polygon = segment_polygon(bounds, center)
        cv2.fillPoly(
            canvas, [polygon], _spot_fill(spot, settings, highlight), cv2.LINE_AA, SHIFT_BITS
        )
        cv2.polylines(
            canvas, [polygon], True, settings.outline_color, thickness, cv2.LINE_AA, SHIFT_BITS
        )

        theta = np.radians(bounds.center_angle)
        label_at = (
            center[0] + bounds.mid_radius * np.cos(theta),
            center[1] + bounds.mid_radius * np.sin(theta),
        )
        _draw_label(canvas, spot.name, label_at, settings)

    for spot in layout.inner_notes:
        note_center = inner_note_center(spot.offset, center, radius, spot.boundary_ratio)
        note_radius = inner_note_radius(
            spot.boundary_ratio, radius, spot.size_factor, layout.geometry.base_proportion
        )
        nc = _fixed_point(note_center)
        nr = _fixed(note_radius)
        cv2.circle(
            canvas, nc, nr, _spot_fill(spot, settings, highlight), -1, cv2.LINE_AA, SHIFT_BITS
        )
        cv2.circle(canvas, nc, nr, settings.outline_color, thickness, cv2.LINE_AA, SHIFT_BITS)
        _draw_label(canvas, spot.name, note_center, settings)

    cv2.circle(canvas, c, r, settings.outline_color, thickness, cv2.LINE_AA, SHIFT_BITS)
    return canvas


def render_instrument(
    instrument: InstrumentLayout,
    viewports: Sequence[DrumViewport],
    settings: CanvasSettings,
    highlight: int | None = None,
) -> np.ndarray:
    """Render both drums side by side on a fresh canvas.

    Args:
        instrument: The two drum layouts.
        viewports: Placement of the left and right drum, in that order.
        settings: Canvas size and styling.
        highlight: Optional note id painted in the highlight color.

    Returns:
        RGB image as an H×W×3 uint8 array.
    """
    canvas = np.full(
        (settings.height, settings.width, 3), settings.background_color, np.uint8
    )
    for (_, layout), viewport in zip(instrument.drums, viewports):
        draw_drum(canvas, layout, viewport.center, viewport.radius, settings, highlight)
    return canvas


def create_region_mask(
    image_shape: tuple[int, int],
    layout: DrumLayout,
    spot: NoteSpot,
    center: Point,
    radius: float,
) -> np.ndarray:
    """Rasterize the tap region of a single note.

    Args:
        image_shape: Mask dimensions as (height, width) in pixels.
        layout: Layout the spot belongs to.
        spot: The note whose region is drawn.
        center: Drum center in pixels.
        radius: Drum radius in pixels.

    Returns:
        2D uint8 mask with the region set to 255 and everything else 0.
    """
    mask = np.zeros(image_shape, np.uint8)
    if radius <= 0:
        return mask

    if spot.ring is RingType.OUTER:
        bounds = outer_segment_bounds(
            spot.angular_index, layout.outer_count, spot.boundary_ratio, radius
        )
        cv2.fillPoly(mask, [segment_polygon(bounds, center)], 255, cv2.LINE_8, SHIFT_BITS)
    else:
        note_center = inner_note_center(spot.offset, center, radius, spot.boundary_ratio)
        note_radius = inner_note_radius(
            spot.boundary_ratio, radius, spot.size_factor, layout.geometry.base_proportion
        )
        cv2.circle(
            mask, _fixed_point(note_center), _fixed(note_radius), 255, -1, cv2.LINE_8, SHIFT_BITS
        )
    return mask
