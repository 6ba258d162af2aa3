import pytest
from guitar_pan.models import NoteSpot, RingType


@pytest.fixture
def outer_spot():
    return NoteSpot(id=0, name="C4", ring=RingType.OUTER, angular_index=0, boundary_ratio=0.6)


@pytest.fixture
def inner_spot():
    return NoteSpot(
        id=1, name="D4", ring=RingType.INNER, boundary_ratio=0.5, offset=(0.2, -0.4)
    )
