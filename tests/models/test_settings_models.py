import pytest
from pydantic import ValidationError
from guitar_pan.models import (
    DEFAULT_BASE_PROPORTION,
    AppSettings,
    CanvasSettings,
    GeometrySettings,
)


def test_geometrysettings_default():
    assert GeometrySettings().base_proportion == pytest.approx(DEFAULT_BASE_PROPORTION)


@pytest.mark.parametrize("val", [0.0, -0.1, 1.5])
def test_geometrysettings_base_proportion_invalid(val):
    with pytest.raises(ValidationError):
        GeometrySettings(base_proportion=val)


def test_canvassettings_default():
    c = CanvasSettings()
    assert c.width == 2 * c.height
    assert 0.0 < c.drum_fill <= 1.0
    assert len(c.background_color) == 3


@pytest.mark.parametrize(
    "kwargs",
    [{"width": 0}, {"height": -1}, {"drum_fill": 0.0}, {"drum_fill": 1.2}, {"outline_thickness": 0}],
)
def test_canvassettings_invalid(kwargs):
    with pytest.raises(ValidationError):
        CanvasSettings(**kwargs)


def test_appsettings_contains_all():
    s = AppSettings()
    assert hasattr(s, "geometry")
    assert hasattr(s, "canvas")
