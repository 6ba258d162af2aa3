"""Configuration models for geometry, rendering and the UI shell.

This module defines Pydantic models that hold every tunable constant of the
application. Geometry settings are shared by the hit-testing engine and the
render adapter so that painted shapes and tap regions are derived from the
same numbers.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_PROPORTION = 0.3


class GeometrySettings(BaseModel):
    """Geometry constants shared by hit-testing and rendering.

    Attributes:
        base_proportion: Fraction of the inner-area radius used as the base
            radius of an inner note before its size factor is applied.
    """

    model_config = ConfigDict(frozen=True)

    base_proportion: float = Field(
        DEFAULT_BASE_PROPORTION,
        gt=0.0,
        le=1.0,
        description="Inner note radius as a fraction of the inner-area radius",
    )


class CanvasSettings(BaseModel):
    """Configuration for drawing the two drums onto an RGB canvas.

    Colors are RGB tuples because the canvas is handed straight to the web
    UI, which expects RGB arrays.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        drum_fill: Fraction of the available square each drum occupies.
        background_color: Canvas background.
        drum_color: Fill of the drum body.
        segment_color: Fill of outer ring segments.
        inner_color: Fill of inner note circles.
        highlight_color: Fill of the most recently tapped region.
        outline_color: Color of all outlines and labels.
        outline_thickness: Outline width in pixels.
        font_scale: OpenCV font scale for note labels.
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(960, ge=20, le=4096, description="Canvas width in pixels")
    height: int = Field(480, ge=10, le=4096, description="Canvas height in pixels")
    drum_fill: float = Field(
        0.9, gt=0.0, le=1.0, description="Fraction of available space per drum"
    )

    background_color: tuple[int, int, int] = (255, 255, 255)
    drum_color: tuple[int, int, int] = (64, 64, 64)
    segment_color: tuple[int, int, int] = (200, 200, 200)
    inner_color: tuple[int, int, int] = (255, 255, 255)
    highlight_color: tuple[int, int, int] = (255, 200, 60)
    outline_color: tuple[int, int, int] = (0, 0, 0)

    outline_thickness: int = Field(2, ge=1, le=10, description="Outline width")
    font_scale: float = Field(0.5, gt=0.0, le=4.0, description="Label font scale")


class AppSettings(BaseModel):
    """Complete configuration for the drum application.

    Attributes:
        geometry: Shared geometry constants.
        canvas: Rendering and viewport configuration.
    """

    model_config = ConfigDict(frozen=True)

    geometry: GeometrySettings = Field(
        default_factory=GeometrySettings, description="Geometry constants"
    )
    canvas: CanvasSettings = Field(
        default_factory=CanvasSettings, description="Canvas configuration"
    )
