"""Region boundaries and hit-testing for the drum surfaces.

Every function in this module is pure: the result depends only on the
arguments, nothing is cached and nothing is mutated, so the functions can be
called from any thread. The render adapter builds its shapes from
``outer_segment_bounds``, ``inner_note_center`` and ``inner_note_radius``,
the very functions the hit-tests use, so what is painted is what is hit.

Conventions:

- Coordinates are screen pixels with x to the right and y downward.
- Angles are degrees in [0, 360), measured from the 3 o'clock direction and
  increasing clockwise on screen (``atan2(dy, dx)`` in y-down coordinates,
  which is also the OpenCV arc convention).
- Outer segment ``k`` of ``N`` is centered at ``REFERENCE_ANGLE + k * 360 / N``
  and covers the half-open interval ``[edge(k), edge(k + 1))``, with
  ``edge(N)`` wrapping to ``edge(0)``. The radial band is closed on both
  sides. Inner note circles are closed.
"""

import math

from guitar_pan.models import (
    DEFAULT_BASE_PROPORTION,
    DrumLayout,
    NoteSpot,
    Point,
    SegmentBounds,
)

REFERENCE_ANGLE = 0.0
FULL_TURN = 360.0


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def normalize_angle(angle: float) -> float:
    """Wrap an angle in degrees into [0, 360).

    Args:
        angle: Any finite angle in degrees.

    Returns:
        The equivalent angle in [0, 360).
    """
    wrapped = angle % FULL_TURN
    # Tiny negative inputs round up to exactly 360.0
    return 0.0 if wrapped >= FULL_TURN else wrapped


def segment_edge_angle(edge_index: int, outer_count: int) -> float:
    """Angle at which outer segment ``edge_index`` begins.

    Segment ``k`` ends exactly where segment ``k + 1`` begins because both
    use this function with the same argument, so neighbouring segments
    share bit-identical boundaries.

    Args:
        edge_index: Segment index; taken modulo ``outer_count``.
        outer_count: Number of outer segments (must be >= 1).

    Returns:
        The boundary angle in [0, 360).
    """
    k = edge_index % outer_count
    return normalize_angle(REFERENCE_ANGLE + (2 * k - 1) * (FULL_TURN / 2.0) / outer_count)


def point_distance(point: Point, center: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(point[0] - center[0], point[1] - center[1])


def point_angle(point: Point, center: Point) -> float:
    """Angle of ``point`` seen from ``center``, normalized into [0, 360)."""
    return normalize_angle(
        math.degrees(math.atan2(point[1] - center[1], point[0] - center[0]))
    )


def angle_in_segment(angle: float, start: float, end: float) -> bool:
    """Test membership of ``angle`` in the half-open arc ``[start, end)``.

    An arc with ``end < start`` wraps through 0 and is tested as the two
    sub-ranges ``[start, 360)`` and ``[0, end)``. ``start == end`` denotes the
    full circle (a drum with a single outer note).

    Args:
        angle: Angle in [0, 360).
        start: Arc start in [0, 360).
        end: Arc end in [0, 360).

    Returns:
        True if the angle lies in the arc.
    """
    if start < end:
        return start <= angle < end
    return angle >= start or angle < end


def outer_segment_bounds(
    outer_index: int, outer_count: int, boundary_ratio: float, drum_radius: float
) -> SegmentBounds:
    """Compute the boundary of one outer-ring segment.

    Args:
        outer_index: Position of the segment in the ring (0-based).
        outer_count: Number of segments in the ring.
        boundary_ratio: Ring inner edge as a fraction of the drum radius.
        drum_radius: Drum radius in pixels.

    Returns:
        SegmentBounds with start/end angles, sweep and the radial band.

    Raises:
        ValueError: If the ring has no segments, the index is outside the
            ring, the ratio is outside (0, 1) or the radius is negative.
            Drums without outer notes are expected to be skipped by the
            caller.
    """
    if outer_count < 1:
        raise ValueError(f"outer_count must be at least 1, got {outer_count}")
    if not 0 <= outer_index < outer_count:
        raise ValueError(f"outer_index {outer_index} outside ring of {outer_count}")
    if not 0.0 < boundary_ratio < 1.0:
        raise ValueError(f"boundary_ratio must lie in (0, 1), got {boundary_ratio}")
    if not drum_radius >= 0.0:
        raise ValueError(f"drum_radius must be non-negative, got {drum_radius}")

    return SegmentBounds(
        start_angle=segment_edge_angle(outer_index, outer_count),
        end_angle=segment_edge_angle(outer_index + 1, outer_count),
        sweep_angle=FULL_TURN / outer_count,
        inner_radius=boundary_ratio * drum_radius,
        outer_radius=drum_radius,
    )


def inner_note_center(
    offset: tuple[float, float],
    drum_center: Point,
    drum_radius: float,
    boundary_ratio: float,
) -> Point:
    """Center of an inner note circle.

    Args:
        offset: Note offset in inner-area radii.
        drum_center: Drum center in pixels.
        drum_radius: Drum radius in pixels.
        boundary_ratio: Inner-area edge as a fraction of the drum radius.

    Returns:
        The note center in pixels.
    """
    scale = boundary_ratio * drum_radius
    return (drum_center[0] + offset[0] * scale, drum_center[1] + offset[1] * scale)


def inner_note_radius(
    boundary_ratio: float,
    drum_radius: float,
    size_factor: float,
    base_proportion: float = DEFAULT_BASE_PROPORTION,
) -> float:
    """Radius of an inner note circle in pixels.

    Args:
        boundary_ratio: Inner-area edge as a fraction of the drum radius.
        drum_radius: Drum radius in pixels.
        size_factor: The note's relative size.
        base_proportion: Base note radius in inner-area radii.

    Returns:
        ``boundary_ratio * drum_radius * base_proportion * size_factor``.
    """
    inner_area_radius = boundary_ratio * drum_radius
    return inner_area_radius * base_proportion * size_factor


def hit_test_outer(
    point: Point,
    drum_center: Point,
    drum_radius: float,
    outer_index: int,
    outer_count: int,
    boundary_ratio: float,
) -> bool:
    """Check whether a point falls in one outer-ring segment.

    Degenerate input (no segments, non-positive radius, index outside the
    ring, ratio outside (0, 1), non-finite coordinates) is a miss; this
    function never raises.

    Args:
        point: Tap position in pixels.
        drum_center: Drum center in pixels.
        drum_radius: Drum radius in pixels.
        outer_index: Segment to test against.
        outer_count: Number of segments in the ring.
        boundary_ratio: Ring inner edge as a fraction of the drum radius.

    Returns:
        True if the point lies in the segment's band and angular range.
    """
    if outer_count <= 0 or not drum_radius > 0.0:
        return False
    if not 0 <= outer_index < outer_count or not 0.0 < boundary_ratio < 1.0:
        return False
    if not _finite(point[0], point[1], drum_center[0], drum_center[1], drum_radius):
        return False

    bounds = outer_segment_bounds(outer_index, outer_count, boundary_ratio, drum_radius)
    distance = point_distance(point, drum_center)
    if distance < bounds.inner_radius or distance > bounds.outer_radius:
        return False

    angle = point_angle(point, drum_center)
    return angle_in_segment(angle, bounds.start_angle, bounds.end_angle)


def hit_test_inner(
    point: Point,
    drum_center: Point,
    drum_radius: float,
    offset: tuple[float, float],
    boundary_ratio: float,
    size_factor: float,
    base_proportion: float = DEFAULT_BASE_PROPORTION,
) -> bool:
    """Check whether a point falls in an inner note circle.

    The circle is closed: a point exactly on the rim is a hit. Degenerate
    input (non-positive radius, ratio outside (0, 1), non-finite sizes) is
    a miss; this function never raises.

    Args:
        point: Tap position in pixels.
        drum_center: Drum center in pixels.
        drum_radius: Drum radius in pixels.
        offset: Note offset in inner-area radii.
        boundary_ratio: Inner-area edge as a fraction of the drum radius.
        size_factor: The note's relative size.
        base_proportion: Base note radius in inner-area radii.

    Returns:
        True if the point lies within the note circle.
    """
    if not _finite(
        point[0], point[1], drum_center[0], drum_center[1], drum_radius, *offset
    ):
        return False
    if not drum_radius > 0.0 or not 0.0 < boundary_ratio < 1.0:
        return False
    if not _finite(size_factor, base_proportion):
        return False

    center = inner_note_center(offset, drum_center, drum_radius, boundary_ratio)
    radius = inner_note_radius(boundary_ratio, drum_radius, size_factor, base_proportion)
    return radius > 0.0 and point_distance(point, center) <= radius


def resolve_spot(
    point: Point, drum_layout: DrumLayout, drum_center: Point, drum_radius: float
) -> NoteSpot | None:
    """Find the note spot under a tap.

    Outer notes are tested first; their segments partition the ring, so at
    most one can match. Inner notes are tested next; a valid layout keeps
    them disjoint, so again at most one can match.

    Args:
        point: Tap position in drum-local pixels.
        drum_layout: Validated layout of the tapped drum.
        drum_center: Drum center in the same pixel space.
        drum_radius: Drum radius in pixels.

    Returns:
        The matching NoteSpot, or None if the tap hits no note.
    """
    outer_count = drum_layout.outer_count
    for spot in drum_layout.outer_notes:
        if hit_test_outer(
            point,
            drum_center,
            drum_radius,
            spot.angular_index,
            outer_count,
            spot.boundary_ratio,
        ):
            return spot

    base_proportion = drum_layout.geometry.base_proportion
    for spot in drum_layout.inner_notes:
        if hit_test_inner(
            point,
            drum_center,
            drum_radius,
            spot.offset,
            spot.boundary_ratio,
            spot.size_factor,
            base_proportion,
        ):
            return spot

    return None


def resolve_tap(
    point: Point, drum_layout: DrumLayout, drum_center: Point, drum_radius: float
) -> int | None:
    """Resolve a tap to a note id.

    Args:
        point: Tap position in drum-local pixels.
        drum_layout: Validated layout of the tapped drum.
        drum_center: Drum center in the same pixel space.
        drum_radius: Drum radius in pixels.

    Returns:
        The id of the tapped note, or None if the tap hits no note.
    """
    spot = resolve_spot(point, drum_layout, drum_center, drum_radius)
    return spot.id if spot is not None else None
