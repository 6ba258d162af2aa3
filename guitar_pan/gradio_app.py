"""Gradio web interface for the two-drum steel pan.

This module builds a small web UI around the drum engine: the rendered
instrument is shown as an image, a click on the image is dispatched as a tap,
and the tapped note is highlighted and listed below the drums.
"""

import logging

import gradio as gr

from guitar_pan.note_catalog import all_notes
from guitar_pan.ui_updates import handle_tap, render_view

logger = logging.getLogger(__name__)


def on_drum_select(history: list[str], evt: gr.SelectData) -> tuple:
    """Forward an image click to the tap handler.

    Args:
        history: Notes played so far in this session.
        evt: Gradio selection event; ``evt.index`` is the ``[x, y]`` pixel.

    Returns:
        Tuple of (view, status_text, history_text, history).
    """
    view, status, history = handle_tap(evt.index, history)
    return view, status, " ".join(history), history


def create_gradio_interface() -> gr.Blocks:
    """Create and configure the main Gradio web interface.

    Returns:
        Configured Gradio Blocks interface ready for launching.
    """
    with gr.Blocks(title="Guitar Pan") as interface:
        gr.Markdown("# Guitar Pan")
        gr.Markdown(
            "Tap a region of either drum to play its note. "
            f"The two drums share {len(all_notes())} notes between them."
        )

        history_state = gr.State([])

        drums = gr.Image(
            value=render_view(),
            label="Drums",
            interactive=False,
            show_label=False,
        )
        with gr.Row():
            status = gr.Textbox(label="Last Tap", value="Tap a drum to play")
            played = gr.Textbox(label="Played Notes", value="")

        drums.select(
            fn=on_drum_select,
            inputs=[history_state],
            outputs=[drums, status, played, history_state],
        )

    return interface


if __name__ == "__main__":
    # Reduce logging verbosity for asyncio to suppress connection noise
    logging.basicConfig(level=logging.INFO)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    demo = create_gradio_interface()
    demo.launch(
        share=False,
        show_error=True,
        server_port=7860,
    )
