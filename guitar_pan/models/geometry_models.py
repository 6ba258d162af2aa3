"""Immutable geometric descriptors produced by the geometry engine.

These models carry the boundary of a single region (or the placement of a
whole drum) from the engine to its consumers. They hold plain numbers only;
any drawing path built from them belongs to the renderer.
"""

from pydantic import BaseModel, ConfigDict, Field

Point = tuple[float, float]


class SegmentBounds(BaseModel):
    """Angular and radial extent of one outer-ring segment.

    Angles are degrees in [0, 360), measured clockwise on screen from the
    3 o'clock direction. The segment covers ``[start_angle, end_angle)``,
    wrapping through 0 when ``end_angle < start_angle``.

    Attributes:
        start_angle: Angle at which the segment begins.
        end_angle: Angle at which the next segment begins.
        sweep_angle: Angular width of the segment (360 / segment count).
        inner_radius: Radius of the ring's inner edge in pixels.
        outer_radius: Radius of the ring's outer edge in pixels.
    """

    model_config = ConfigDict(frozen=True)

    start_angle: float = Field(..., ge=0.0, lt=360.0)
    end_angle: float = Field(..., ge=0.0, lt=360.0)
    sweep_angle: float = Field(..., gt=0.0, le=360.0)
    inner_radius: float = Field(..., ge=0.0)
    outer_radius: float = Field(..., ge=0.0)

    @property
    def center_angle(self) -> float:
        """Angle bisecting the segment, normalized into [0, 360)."""
        return (self.start_angle + self.sweep_angle / 2.0) % 360.0

    @property
    def mid_radius(self) -> float:
        """Radius halfway across the ring band."""
        return (self.inner_radius + self.outer_radius) / 2.0


class DrumViewport(BaseModel):
    """On-screen placement of one drum.

    Attributes:
        center: Drum center in canvas pixel coordinates.
        radius: Drum radius in pixels.
    """

    model_config = ConfigDict(frozen=True)

    center: Point
    radius: float = Field(..., ge=0.0)

    def contains(self, point: Point) -> bool:
        """Return True if ``point`` lies on or inside the drum's rim."""
        dx = point[0] - self.center[0]
        dy = point[1] - self.center[1]
        return dx * dx + dy * dy <= self.radius * self.radius
