"""UI update functions for the Gradio interface.

This module sits between the Gradio components and the drum engine. It
renders the instrument view, turns image clicks into dispatched taps and
formats the status text shown next to the drums. Rendering is cached
because the view only changes with the highlighted note.
"""

import logging
from functools import lru_cache

import numpy as np

from guitar_pan.dispatch import TapDispatcher, TapResult, place_drums
from guitar_pan.layouts import DEFAULT_INSTRUMENT
from guitar_pan.models import AppSettings
from guitar_pan.note_catalog import by_id
from guitar_pan.rendering import render_instrument

logger = logging.getLogger(__name__)

VIEW_CACHE_SIZE = 32
HISTORY_LENGTH = 16

SETTINGS = AppSettings()


def trigger_note(note_id: int) -> None:
    """Hand a resolved note to the audio side.

    Audio playback lives outside this package; the web shell only logs
    the note and its frequency.
    """
    note = by_id(note_id)
    logger.info(f"Trigger note {note.name} (id {note.id}, {note.frequency:.2f} Hz)")


@lru_cache(maxsize=1)
def get_dispatcher() -> TapDispatcher:
    """Dispatcher for the default instrument on the configured canvas."""
    canvas = SETTINGS.canvas
    viewports = place_drums(canvas.width, canvas.height, canvas.drum_fill)
    return TapDispatcher(DEFAULT_INSTRUMENT, viewports, trigger=trigger_note)


@lru_cache(maxsize=VIEW_CACHE_SIZE)
def render_view(highlight: int | None = None) -> np.ndarray:
    """Render the default instrument, optionally highlighting one note.

    Args:
        highlight: Note id to paint in the highlight color, or None.

    Returns:
        RGB image of both drums.
    """
    dispatcher = get_dispatcher()
    return render_instrument(
        dispatcher.instrument, dispatcher.viewports, SETTINGS.canvas, highlight
    )


def format_status(result: TapResult) -> str:
    """Describe a tap result for display."""
    if result.drum is None:
        return "Missed both drums"
    if not result.hit:
        return f"{result.drum.capitalize()} drum: no note here"
    note = by_id(result.note_id)
    return (
        f"{result.drum.capitalize()} drum: {note.name} "
        f"({note.frequency:.2f} Hz, MIDI {note.midi_number})"
    )


def handle_tap(
    index: tuple[int, int] | list[int] | None, history: list[str] | None = None
) -> tuple[np.ndarray, str, list[str]]:
    """Dispatch a click on the rendered view.

    Args:
        index: Click position ``(x, y)`` in image pixels, as reported by
            the image component.
        history: Names of previously played notes, oldest first.

    Returns:
        Tuple of (view, status_text, history) where view highlights the
        tapped note and history includes it.
    """
    history = list(history or [])
    try:
        x, y = index
        point = (float(x), float(y))
    except (TypeError, ValueError) as e:
        logger.warning(f"Ignoring malformed tap {index!r}: {e}")
        return render_view(), "Invalid tap", history

    result = get_dispatcher().dispatch(point)
    if result.hit:
        history = (history + [result.note_name])[-HISTORY_LENGTH:]
    return render_view(result.note_id), format_status(result), history
