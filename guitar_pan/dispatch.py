"""Tap dispatch from viewport clicks to note triggers.

This module places the two drums in a viewport, maps a click in viewport
pixels to the drum under it, resolves the note through the geometry engine
and hands the note id to a trigger callback. The trigger stands in for the
audio engine; it is called synchronously and exactly once per hit.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from guitar_pan.geometry import resolve_spot
from guitar_pan.models import DrumViewport, InstrumentLayout, Point

logger = logging.getLogger(__name__)


class NoteTrigger(Protocol):
    def __call__(self, note_id: int) -> None: ...


class TapResult(BaseModel):
    """Outcome of one dispatched tap.

    Attributes:
        drum: "left" or "right" when the tap landed on a drum, else None.
        note_id: Id of the resolved note, or None for a miss.
        note_name: Display name of the resolved note ("" for a miss).
    """

    model_config = ConfigDict(frozen=True)

    drum: str | None = Field(None, description="Side of the tapped drum")
    note_id: int | None = Field(None, description="Resolved note id")
    note_name: str = Field("", description="Resolved note name")

    @property
    def hit(self) -> bool:
        return self.note_id is not None


def place_drums(
    width: float, height: float, fill: float = 0.9
) -> tuple[DrumViewport, DrumViewport]:
    """Lay out two equal drums side by side.

    Each drum gets half the width; its diameter is the smaller of the
    viewport height and that half-width, scaled by ``fill``. The drums are
    centered in their halves and vertically centered.

    Args:
        width: Viewport width in pixels.
        height: Viewport height in pixels.
        fill: Fraction of the available square each drum occupies.

    Returns:
        Viewports for the left and right drum. Both have radius 0 when the
        viewport is empty.
    """
    half = width / 2.0
    diameter = max(0.0, min(height, half) * fill)
    radius = diameter / 2.0
    cy = height / 2.0
    return (
        DrumViewport(center=(half / 2.0, cy), radius=radius),
        DrumViewport(center=(half + half / 2.0, cy), radius=radius),
    )


class TapDispatcher:
    """Route taps on the two-drum viewport to a note trigger.

    Args:
        instrument: Layouts of the left and right drum.
        viewports: Placement of the left and right drum, in that order.
        trigger: Called with the note id of every hit.
    """

    def __init__(
        self,
        instrument: InstrumentLayout,
        viewports: Sequence[DrumViewport],
        trigger: NoteTrigger | None = None,
    ):
        if len(viewports) != 2:
            raise ValueError(f"expected 2 viewports, got {len(viewports)}")
        self.instrument = instrument
        self.viewports = tuple(viewports)
        self.trigger = trigger

    def dispatch(self, point: Point) -> TapResult:
        """Resolve a click in viewport pixels and fire the trigger on a hit.

        Args:
            point: Click position in viewport pixels.

        Returns:
            TapResult describing which drum and note, if any, was tapped.
        """
        for (side, layout), viewport in zip(self.instrument.drums, self.viewports):
            if not viewport.contains(point):
                continue

            spot = resolve_spot(point, layout, viewport.center, viewport.radius)
            if spot is None:
                logger.debug(f"Tap at {point} on {side} drum hit no note")
                return TapResult(drum=side)

            logger.debug(
                f"{spot.ring.value.capitalize()} note tapped on {side} drum: "
                f"{spot.name} (id {spot.id})"
            )
            if self.trigger is not None:
                self.trigger(spot.id)
            return TapResult(drum=side, note_id=spot.id, note_name=spot.name)

        logger.debug(f"Tap at {point} missed both drums")
        return TapResult()
