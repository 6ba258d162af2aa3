import pytest
from pydantic import ValidationError
from guitar_pan.models import DrumViewport, SegmentBounds


def test_segmentbounds_properties():
    b = SegmentBounds(
        start_angle=340.0, end_angle=20.0, sweep_angle=40.0, inner_radius=50.0, outer_radius=100.0
    )
    assert b.center_angle == pytest.approx(0.0)
    assert b.mid_radius == pytest.approx(75.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"start_angle": 360.0, "end_angle": 0.0, "sweep_angle": 90.0},
        {"start_angle": -1.0, "end_angle": 0.0, "sweep_angle": 90.0},
        {"start_angle": 0.0, "end_angle": 90.0, "sweep_angle": 0.0},
    ],
)
def test_segmentbounds_validation_raises(kwargs):
    with pytest.raises(ValidationError):
        SegmentBounds(inner_radius=1.0, outer_radius=2.0, **kwargs)


def test_drumviewport_contains():
    v = DrumViewport(center=(10.0, 10.0), radius=5.0)
    assert v.contains((10.0, 10.0))
    assert v.contains((15.0, 10.0))
    assert not v.contains((15.1, 10.0))
