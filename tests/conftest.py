import pytest

from guitar_pan.models.core_models import DrumLayout, NoteSpot, RingType


def make_outer(count, ratio=0.6, first_id=0):
    return [
        NoteSpot(
            id=first_id + i,
            name="",
            ring=RingType.OUTER,
            angular_index=i,
            boundary_ratio=ratio,
        )
        for i in range(count)
    ]


@pytest.fixture
def drum_center():
    return (100.0, 100.0)


@pytest.fixture
def drum_radius():
    return 100.0


@pytest.fixture
def seven_note_drum():
    # 7 outer notes, ring boundary at 0.6, no inner notes
    return DrumLayout(outer_notes=make_outer(7))


@pytest.fixture
def inner_note():
    return NoteSpot(
        id=100,
        name="",
        ring=RingType.INNER,
        boundary_ratio=0.6,
        size_factor=0.8,
        offset=(0.0, -0.5),
    )


@pytest.fixture
def seven_note_drum_with_inner(inner_note):
    # Same ring plus one inner note at offset (0, -0.5), size 0.8
    return DrumLayout(outer_notes=make_outer(7), inner_notes=[inner_note])
