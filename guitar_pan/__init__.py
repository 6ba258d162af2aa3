"""Geometry and tap resolution for a two-drum steel pan.

This package describes each drum declaratively as a ring of outer notes
splitting the rim into equal angular segments plus a few freely placed inner
note circles, and turns a tap coordinate into the note under it. It includes
layout validation, pure hit-testing, an OpenCV render adapter built on the
same boundary formulas, and a small Gradio shell.

The processing flow consists of:
1. Building and validating drum layouts from note names
2. Placing both drums in a viewport
3. Mapping a click to a drum and resolving it to a note id
4. Forwarding the note id to a trigger callback
5. Rendering the drums with the tapped note highlighted

Example:
    Resolving a tap on the stock left drum:

    >>> from guitar_pan.geometry import resolve_tap
    >>> from guitar_pan.layouts import LEFT_DRUM
    >>>
    >>> # Drum of radius 100 centered at (100, 100); tap 80 px right of center
    >>> note_id = resolve_tap((180.0, 100.0), LEFT_DRUM, (100.0, 100.0), 100.0)
"""
