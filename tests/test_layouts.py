import math

import pytest
from pydantic import ValidationError

from guitar_pan.geometry import inner_note_center, outer_segment_bounds, resolve_tap
from guitar_pan.layouts import (
    DEFAULT_INSTRUMENT,
    LEFT_DRUM,
    RIGHT_DRUM,
    build_drum_layout,
    build_note_spot,
)
from guitar_pan.models import RingType
from guitar_pan.note_catalog import NOTE_COUNT, UnknownNoteError, note_id


def test_default_instrument_covers_catalog_once():
    ids = [spot.id for _, drum in DEFAULT_INSTRUMENT.drums for spot in drum.notes]
    assert sorted(ids) == list(range(NOTE_COUNT))


@pytest.mark.parametrize("drum", [LEFT_DRUM, RIGHT_DRUM])
def test_default_drums_have_seven_outer_and_three_inner(drum):
    assert drum.outer_count == 7
    assert len(drum.inner_notes) == 3
    assert drum.ring_ratio == pytest.approx(0.6)
    assert drum.inner_area_ratio == pytest.approx(0.6)


def test_build_note_spot_resolves_alias():
    spot = build_note_spot("Eb3", RingType.OUTER, angular_index=0)
    assert spot.id == note_id("D#3")
    assert spot.name == "Eb3"


def test_build_note_spot_unknown_name():
    with pytest.raises(UnknownNoteError):
        build_note_spot("H2", RingType.OUTER, angular_index=0)


def test_build_drum_layout_rejects_overlapping_inner_notes():
    with pytest.raises(ValidationError):
        build_drum_layout(["C4"], [("D4", (0.0, 0.0), 1.0), ("E4", (0.1, 0.0), 1.0)])


def test_left_drum_tap_at_three_oclock_is_first_outer_note():
    center, radius = (100.0, 100.0), 100.0
    assert resolve_tap((180.0, 100.0), LEFT_DRUM, center, radius) == note_id("F#3")


def test_left_drum_outer_notes_run_clockwise():
    center, radius = (0.0, 0.0), 100.0
    names = ["F#3", "Bb3", "D3", "G#3", "E3", "E4", "C4"]
    for index, name in enumerate(names):
        bounds = outer_segment_bounds(index, 7, LEFT_DRUM.ring_ratio, radius)
        theta = math.radians(bounds.center_angle)
        point = (80.0 * math.cos(theta), 80.0 * math.sin(theta))
        assert resolve_tap(point, LEFT_DRUM, center, radius) == note_id(name)


@pytest.mark.parametrize("drum", [LEFT_DRUM, RIGHT_DRUM])
def test_inner_note_centers_resolve_to_themselves(drum):
    center, radius = (200.0, 200.0), 150.0
    for spot in drum.inner_notes:
        point = inner_note_center(spot.offset, center, radius, spot.boundary_ratio)
        assert resolve_tap(point, drum, center, radius) == spot.id


def test_drum_center_is_not_a_note():
    assert resolve_tap((100.0, 100.0), RIGHT_DRUM, (100.0, 100.0), 100.0) is None
