import logging

import pytest

from guitar_pan.dispatch import TapDispatcher, TapResult, place_drums
from guitar_pan.geometry import inner_note_center
from guitar_pan.layouts import DEFAULT_INSTRUMENT, LEFT_DRUM, RIGHT_DRUM
from guitar_pan.note_catalog import note_id


@pytest.fixture
def played():
    return []


@pytest.fixture
def dispatcher(played):
    return TapDispatcher(DEFAULT_INSTRUMENT, place_drums(960, 480), trigger=played.append)


def test_place_drums_side_by_side():
    left, right = place_drums(960, 480)
    assert left.radius == pytest.approx(216.0)
    assert right.radius == pytest.approx(216.0)
    assert left.center == pytest.approx((240.0, 240.0))
    assert right.center == pytest.approx((720.0, 240.0))


@pytest.mark.parametrize("width, height", [(960, 480), (400, 800), (1000, 100)])
def test_placed_drums_fit_and_do_not_overlap(width, height):
    left, right = place_drums(width, height)
    for v in (left, right):
        assert v.center[0] - v.radius >= 0 and v.center[0] + v.radius <= width
        assert v.center[1] - v.radius >= 0 and v.center[1] + v.radius <= height
    assert right.center[0] - left.center[0] > left.radius + right.radius


def test_place_drums_empty_viewport():
    left, right = place_drums(0, 0)
    assert left.radius == 0.0 and right.radius == 0.0


def test_dispatch_outer_hit_triggers_once(dispatcher, played):
    result = dispatcher.dispatch((240.0 + 0.8 * 216.0, 240.0))
    assert result == TapResult(drum="left", note_id=note_id("F#3"), note_name="F#3")
    assert result.hit
    assert played == [note_id("F#3")]


def test_dispatch_inner_hit_on_right_drum(dispatcher, played):
    viewport = dispatcher.viewports[1]
    spot = RIGHT_DRUM.inner_notes[2]
    point = inner_note_center(spot.offset, viewport.center, viewport.radius, spot.boundary_ratio)
    result = dispatcher.dispatch(point)
    assert result.drum == "right"
    assert result.note_id == note_id("G4")
    assert played == [note_id("G4")]


def test_dispatch_drum_body_is_a_miss(dispatcher, played):
    result = dispatcher.dispatch((240.0, 240.0))
    assert result.drum == "left"
    assert not result.hit
    assert played == []


def test_dispatch_outside_both_drums(dispatcher, played):
    result = dispatcher.dispatch((480.0, 5.0))
    assert result == TapResult()
    assert played == []


def test_dispatch_without_trigger():
    dispatcher = TapDispatcher(DEFAULT_INSTRUMENT, place_drums(960, 480))
    assert dispatcher.dispatch((240.0 + 0.8 * 216.0, 240.0)).hit


def test_dispatch_logs_taps(dispatcher, caplog):
    with caplog.at_level(logging.DEBUG, logger="guitar_pan.dispatch"):
        dispatcher.dispatch((240.0 + 0.8 * 216.0, 240.0))
    assert "Outer note tapped on left drum: F#3" in caplog.text


def test_dispatcher_needs_two_viewports():
    with pytest.raises(ValueError):
        TapDispatcher(DEFAULT_INSTRUMENT, place_drums(960, 480)[:1])


def test_left_drum_every_note_reachable(dispatcher, played):
    viewport = dispatcher.viewports[0]
    for spot in LEFT_DRUM.inner_notes:
        point = inner_note_center(spot.offset, viewport.center, viewport.radius, spot.boundary_ratio)
        dispatcher.dispatch(point)
    assert played == [s.id for s in LEFT_DRUM.inner_notes]
