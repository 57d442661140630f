"""Gradio preview UI for trying out texts before linking to the GIF endpoint."""
from __future__ import annotations

import os
import tempfile

import gradio as gr

from .config import load_settings
from .encode import save_gif
from .errors import SparklerError
from .pipeline import render


def _render_preview(text: str):
    text = (text or "").strip()
    if not text:
        return None, "Enter some text to continue."

    path = None
    try:
        frames = render(text)
        with tempfile.NamedTemporaryFile(suffix=".gif", delete=False) as handle:
            path = handle.name
        save_gif(frames, path)
    except (SparklerError, OSError) as exc:
        if path and os.path.exists(path):
            os.unlink(path)
        return None, f"Error: {exc}"

    width, height = frames[0].size
    return path, f"Rendered {len(frames)} frames at {width}x{height}."


def build_demo() -> gr.Blocks:
    with gr.Blocks(analytics_enabled=False, title="Sparkler") as demo:
        gr.Markdown("## Sparkler")
        gr.Markdown("Type some text and preview it as a sparkling GIF.")

        with gr.Row():
            text_input = gr.Textbox(
                label="Text",
                value=load_settings().default_text,
                info="Lines wrap every 15 characters.",
            )
            render_btn = gr.Button("Render", variant="primary")

        preview = gr.Image(label="Preview", type="filepath", interactive=False)
        status_box = gr.Textbox(label="Status", interactive=False)

        render_btn.click(_render_preview, inputs=[text_input], outputs=[preview, status_box])
        text_input.submit(_render_preview, inputs=[text_input], outputs=[preview, status_box])
    return demo


__all__ = ["build_demo"]


if __name__ == "__main__":  # pragma: no cover - convenience launch
    build_demo().launch(
        share=False,
        inbrowser=True,
        server_name=os.getenv("SPARKLER_SERVER_NAME", "127.0.0.1"),
        server_port=int(os.getenv("SPARKLER_STUDIO_PORT", "7860")),
        show_error=True,
    )
