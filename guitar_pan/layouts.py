"""Stock layouts for the left and right drums.

Each drum carries seven outer notes, placed clockwise from 3 o'clock in
angular-index order, and three inner notes clustered above the center. The
two drums together cover every note in the catalog exactly once.
"""

from collections.abc import Sequence

from guitar_pan.models import (
    DrumLayout,
    GeometrySettings,
    InstrumentLayout,
    NoteSpot,
    RingType,
)
from guitar_pan.note_catalog import lookup

DEFAULT_RING_RATIO = 0.6
DEFAULT_INNER_AREA_RATIO = 0.6


def build_note_spot(
    name: str,
    ring: RingType,
    *,
    angular_index: int | None = None,
    boundary_ratio: float = DEFAULT_RING_RATIO,
    size_factor: float = 1.0,
    offset: tuple[float, float] = (0.0, 0.0),
) -> NoteSpot:
    """Create a NoteSpot whose id comes from the note catalog.

    Args:
        name: Any catalog spelling of the note ("Eb3" and "D#3" are the same note).
        ring: OUTER or INNER.
        angular_index: Position in the outer ring (OUTER only).
        boundary_ratio: Ring or inner-area boundary ratio.
        size_factor: Relative region size.
        offset: Inner note offset in inner-area radii.

    Returns:
        The validated NoteSpot.

    Raises:
        UnknownNoteError: If ``name`` is not in the catalog.
    """
    note = lookup(name)
    return NoteSpot(
        id=note.id,
        name=name,
        ring=ring,
        angular_index=angular_index,
        boundary_ratio=boundary_ratio,
        size_factor=size_factor,
        offset=offset,
    )


def build_drum_layout(
    outer_names: Sequence[str],
    inner_specs: Sequence[tuple[str, tuple[float, float], float]] = (),
    *,
    ring_ratio: float = DEFAULT_RING_RATIO,
    inner_area_ratio: float = DEFAULT_INNER_AREA_RATIO,
    geometry: GeometrySettings | None = None,
) -> DrumLayout:
    """Build a drum layout from note names.

    Args:
        outer_names: Outer note names in angular-index order.
        inner_specs: ``(name, offset, size_factor)`` for each inner note.
        ring_ratio: Ring inner edge shared by all outer notes.
        inner_area_ratio: Inner-area edge shared by all inner notes.
        geometry: Geometry constants; defaults to GeometrySettings().

    Returns:
        The validated DrumLayout.
    """
    outer = [
        build_note_spot(name, RingType.OUTER, angular_index=i, boundary_ratio=ring_ratio)
        for i, name in enumerate(outer_names)
    ]
    inner = [
        build_note_spot(
            name,
            RingType.INNER,
            boundary_ratio=inner_area_ratio,
            size_factor=size_factor,
            offset=offset,
        )
        for name, offset, size_factor in inner_specs
    ]
    return DrumLayout(
        outer_notes=outer,
        inner_notes=inner,
        geometry=geometry or GeometrySettings(),
    )


LEFT_DRUM = build_drum_layout(
    ["F#3", "Bb3", "D3", "G#3", "E3", "E4", "C4"],
    [
        ("D4", (-0.3, -0.1), 0.35),
        ("F#4", (0.3, -0.1), 0.3),
        ("G#4", (0.0, -0.6), 0.3),
    ],
)

RIGHT_DRUM = build_drum_layout(
    ["F3", "A3", "C#3", "G3", "Eb3", "Eb4", "B3"],
    [
        ("C#4", (-0.3, -0.1), 0.35),
        ("F4", (0.3, -0.1), 0.3),
        ("G4", (0.0, -0.6), 0.3),
    ],
)

DEFAULT_INSTRUMENT = InstrumentLayout(left=LEFT_DRUM, right=RIGHT_DRUM)
