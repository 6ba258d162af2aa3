"""Core domain models for the two-drum layout.

A drum is described declaratively: an ordered ring of OUTER notes that split
the rim band into equal angular segments, and a handful of INNER notes placed
freely inside the inner disk. Every model is frozen, and every layout rule is
checked when the model is built so that a malformed layout never reaches the
hit-testing code.
"""

import math
from collections import Counter
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from guitar_pan.models.settings_models import GeometrySettings

# Slack for containment checks on layouts typed in by hand.
LAYOUT_TOLERANCE = 1e-9


class RingType(str, Enum):
    """Which part of the drum a note occupies."""

    OUTER = "outer"
    INNER = "inner"


class NoteSpot(BaseModel):
    """Placement of one note on a drum.

    OUTER spots are positioned by ``angular_index`` and share the ring's inner
    edge ``boundary_ratio``. INNER spots are circles whose center is
    ``offset`` (a fraction of the inner-area radius) away from the drum
    center, and whose radius scales with ``size_factor``.

    Attributes:
        id: Note identifier, unique across the whole instrument.
        name: Display name of the note (e.g. "C#3").
        ring: OUTER or INNER.
        angular_index: Position in the outer ring (OUTER only).
        boundary_ratio: Ring inner edge (OUTER) or inner-area edge (INNER)
            as a fraction of the drum radius.
        size_factor: Relative size of the region.
        offset: Center offset of an INNER note, in inner-area radii.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, description="Instrument-wide note identifier")
    name: str = Field("", description="Display name of the note")
    ring: RingType = Field(..., description="Outer ring or inner area")
    angular_index: int | None = Field(
        None, ge=0, description="Position within the outer ring"
    )
    boundary_ratio: float = Field(
        ..., gt=0.0, lt=1.0, description="Ring or inner-area boundary ratio"
    )
    size_factor: float = Field(1.0, gt=0.0, description="Relative region size")
    offset: tuple[float, float] = Field(
        (0.0, 0.0), description="Inner note center offset in inner-area radii"
    )

    @field_validator("offset")
    @classmethod
    def _offset_in_unit_square(cls, value: tuple[float, float]) -> tuple[float, float]:
        for component in value:
            if not -1.0 <= component <= 1.0:
                raise ValueError(f"offset components must lie in [-1, 1], got {value}")
        return value

    @model_validator(mode="after")
    def _ring_fields_consistent(self) -> "NoteSpot":
        if self.ring is RingType.OUTER and self.angular_index is None:
            raise ValueError(f"outer note {self.id} ({self.name}) needs an angular_index")
        if self.ring is RingType.OUTER and self.offset != (0.0, 0.0):
            raise ValueError(f"outer note {self.id} ({self.name}) must not have an offset")
        if self.ring is RingType.INNER and self.angular_index is not None:
            raise ValueError(
                f"inner note {self.id} ({self.name}) must not have an angular_index"
            )
        return self

    @property
    def offset_magnitude(self) -> float:
        """Distance of an inner note's center from the drum center, in inner-area radii."""
        return math.hypot(*self.offset)


class DrumLayout(BaseModel):
    """Complete, validated configuration of one drum.

    Attributes:
        outer_notes: OUTER spots in angular placement order.
        inner_notes: INNER spots; their order carries no meaning.
        geometry: Geometry constants shared with the render adapter.
    """

    model_config = ConfigDict(frozen=True)

    outer_notes: tuple[NoteSpot, ...] = Field(
        default_factory=tuple, description="Outer ring notes"
    )
    inner_notes: tuple[NoteSpot, ...] = Field(
        default_factory=tuple, description="Inner area notes"
    )
    geometry: GeometrySettings = Field(
        default_factory=GeometrySettings, description="Shared geometry constants"
    )

    @model_validator(mode="after")
    def _check_layout(self) -> "DrumLayout":
        self._check_rings()
        self._check_angular_indices()
        self._check_boundary_ratios()
        self._check_inner_containment()
        self._check_inner_overlap()
        self._check_unique_ids()
        return self

    def _check_rings(self) -> None:
        for ring, spots in ((RingType.OUTER, self.outer_notes), (RingType.INNER, self.inner_notes)):
            for spot in spots:
                if spot.ring is not ring:
                    raise ValueError(
                        f"note {spot.id} ({spot.name}) is listed as {ring.value} "
                        f"but is {spot.ring.value}"
                    )

    def _check_angular_indices(self) -> None:
        counts = Counter(spot.angular_index for spot in self.outer_notes)
        expected = set(range(len(self.outer_notes)))
        duplicates = sorted(i for i, n in counts.items() if n > 1)
        missing = sorted(expected - set(counts))
        if duplicates or missing:
            raise ValueError(
                f"outer angular indices must be exactly 0..{len(self.outer_notes) - 1}; "
                f"duplicates={duplicates}, missing={missing}"
            )

    def _check_boundary_ratios(self) -> None:
        outer_ratios = {spot.boundary_ratio for spot in self.outer_notes}
        if len(outer_ratios) > 1:
            raise ValueError(
                f"outer notes must share one ring boundary ratio, got {sorted(outer_ratios)}"
            )
        inner_ratios = {spot.boundary_ratio for spot in self.inner_notes}
        if len(inner_ratios) > 1:
            raise ValueError(
                f"inner notes must share one inner-area boundary ratio, got {sorted(inner_ratios)}"
            )
        if outer_ratios and inner_ratios:
            ring, inner = outer_ratios.pop(), inner_ratios.pop()
            if inner > ring:
                raise ValueError(
                    f"inner area ratio {inner} extends past the outer ring edge {ring}"
                )

    def _check_inner_containment(self) -> None:
        base = self.geometry.base_proportion
        for spot in self.inner_notes:
            reach = spot.offset_magnitude + base * spot.size_factor
            if reach > 1.0 + LAYOUT_TOLERANCE:
                raise ValueError(
                    f"inner note {spot.id} ({spot.name}) reaches {reach:.3f} inner-area "
                    f"radii from the center; it must stay within 1.0"
                )

    def _check_inner_overlap(self) -> None:
        base = self.geometry.base_proportion
        spots = self.inner_notes
        for i, a in enumerate(spots):
            for b in spots[i + 1 :]:
                gap = math.hypot(a.offset[0] - b.offset[0], a.offset[1] - b.offset[1])
                reach = base * (a.size_factor + b.size_factor)
                if gap <= reach:
                    raise ValueError(
                        f"inner notes {a.id} ({a.name}) and {b.id} ({b.name}) overlap: "
                        f"centers {gap:.3f} apart, radii sum {reach:.3f}"
                    )

    def _check_unique_ids(self) -> None:
        counts = Counter(spot.id for spot in self.notes)
        duplicates = sorted(i for i, n in counts.items() if n > 1)
        if duplicates:
            raise ValueError(f"note ids must be unique within a drum, repeated: {duplicates}")

    @property
    def notes(self) -> tuple[NoteSpot, ...]:
        """All spots, outer ring first."""
        return self.outer_notes + self.inner_notes

    @property
    def outer_count(self) -> int:
        return len(self.outer_notes)

    @property
    def ring_ratio(self) -> float | None:
        """Ring inner edge as a fraction of the drum radius, or None without outer notes."""
        return self.outer_notes[0].boundary_ratio if self.outer_notes else None

    @property
    def inner_area_ratio(self) -> float | None:
        """Inner-area edge as a fraction of the drum radius, or None without inner notes."""
        return self.inner_notes[0].boundary_ratio if self.inner_notes else None

    def find(self, note_id: int) -> NoteSpot | None:
        """Return the spot carrying ``note_id``, or None if this drum lacks it."""
        for spot in self.notes:
            if spot.id == note_id:
                return spot
        return None


class InstrumentLayout(BaseModel):
    """The two drums that make up the instrument.

    Attributes:
        left: Layout of the left drum.
        right: Layout of the right drum.
    """

    model_config = ConfigDict(frozen=True)

    left: DrumLayout
    right: DrumLayout

    @model_validator(mode="after")
    def _ids_unique_across_drums(self) -> "InstrumentLayout":
        shared = sorted({s.id for s in self.left.notes} & {s.id for s in self.right.notes})
        if shared:
            raise ValueError(f"note ids must be unique across drums, shared: {shared}")
        return self

    @property
    def drums(self) -> tuple[tuple[str, DrumLayout], ...]:
        """``(side, layout)`` pairs in left-to-right order."""
        return (("left", self.left), ("right", self.right))
