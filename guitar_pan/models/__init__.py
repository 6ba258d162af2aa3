"""Domain models for the guitar-pan application.

This module provides a centralized location for all data models used by the
drum geometry engine and its collaborators. It includes:

- Core layout models (NoteSpot, DrumLayout, InstrumentLayout)
- Immutable geometric descriptors (SegmentBounds, DrumViewport)
- Configuration for geometry, rendering and the UI shell

All models are built using Pydantic for validation, so an invalid layout is
rejected when it is constructed rather than when a tap is resolved.
"""

# Re-export core models
from guitar_pan.models.core_models import (
    RingType,
    NoteSpot,
    DrumLayout,
    InstrumentLayout,
)

# Re-export geometry descriptors
from guitar_pan.models.geometry_models import Point, SegmentBounds, DrumViewport

# Re-export setting models
from guitar_pan.models.settings_models import (
    DEFAULT_BASE_PROPORTION,
    GeometrySettings,
    CanvasSettings,
    AppSettings,
)
