from __future__ import annotations

import logging
import sys
from functools import partial
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

if __package__ in {None, ""}:
    # Allow running via ``python animal_list/gradio_app.py`` by adding repo root to sys.path
    sys.path.append(str(Path(__file__).resolve().parents[1]))

import gradio as gr
import pandas as pd
from PIL import Image

from animal_list.cli import build_parser, load_config
from animal_list.core.config import AppConfig
from animal_list.core.images import ImageLibrary, ZoomState
from animal_list.core.models import Animal
from animal_list.gradio_controller import GradioAnimalController
from animal_list.logging_config import setup_logging

logger = logging.getLogger(__name__)

TABLE_HEADERS = ["#", "Name", "Description"]


def animals_table(animals: Sequence[Animal]) -> pd.DataFrame:
    rows = [[index, animal.name, animal.description] for index, animal in enumerate(animals)]
    return pd.DataFrame(rows, columns=TABLE_HEADERS)


def gallery_items(animals: Sequence[Animal], images: ImageLibrary) -> List[Tuple[Image.Image, str]]:
    return [(images.thumbnail(animal), animal.name) for animal in animals]


def parse_index_list(raw: Any) -> List[int]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        return [int(x) for x in raw]
    if isinstance(raw, str):
        return [int(x.strip()) for x in raw.split(",") if x.strip()]
    return [int(raw)]


def append_log(log: str, message: str) -> str:
    lines = [line for line in (log or "").splitlines() if line.strip()]
    lines.append(message)
    if len(lines) > 200:
        lines = lines[-200:]
    return "\n".join(lines)


def render_detail(animal: Optional[Animal], zoomed: bool, images: ImageLibrary) -> Optional[Image.Image]:
    if animal is None:
        return None
    return images.detail(animal, ZoomState(zoomed).content_mode)


def detail_text(animal: Optional[Animal]) -> str:
    if animal is None:
        return "_Select an animal to see its details._"
    return f"### {animal.name} Details\n\n**{animal.name}**\n\n{animal.description}"


def list_outputs(controller: GradioAnimalController, images: ImageLibrary):
    animals = controller.animals()
    return animals_table(animals), gallery_items(animals, images)


def init_session(config: AppConfig, images: ImageLibrary):
    controller = GradioAnimalController.from_config(config)
    table, gallery = list_outputs(controller, images)
    log = append_log("", f"Loaded {len(table)} animals")
    return controller, table, gallery, log, "Ready", None, False, None, detail_text(None)


def add_animal(controller: GradioAnimalController, log: str, images: ImageLibrary):
    if controller is None:
        return gr.update(), gr.update(), log, "Session not initialized."
    animal = controller.add_placeholder()
    table, gallery = list_outputs(controller, images)
    log = append_log(log, f"Added {animal.name}")
    return table, gallery, log, f"Added {animal.name}"


def delete_animals(controller: GradioAnimalController, rows_raw: Any, log: str, images: ImageLibrary):
    if controller is None:
        return gr.update(), gr.update(), log, "Session not initialized."
    try:
        rows = parse_index_list(rows_raw)
    except ValueError:
        return gr.update(), gr.update(), log, f"Rows must be comma-separated numbers, got {rows_raw!r}."
    if not rows:
        return gr.update(), gr.update(), log, "No rows given."
    try:
        removed = controller.delete_rows(rows)
    except IndexError as exc:
        return gr.update(), gr.update(), log, str(exc)
    names = ", ".join(animal.name for animal in removed)
    table, gallery = list_outputs(controller, images)
    log = append_log(log, f"Deleted {names}")
    return table, gallery, log, f"Deleted {names}"


def selected_row(evt: gr.SelectData) -> Optional[int]:
    index = evt.index
    if isinstance(index, (list, tuple)):
        index = index[0] if index else None
    return int(index) if index is not None else None


def select_animal(controller: GradioAnimalController, images: ImageLibrary, evt: gr.SelectData):
    row = selected_row(evt)
    animal = controller.animal_at(row) if controller is not None and row is not None else None
    return animal, False, render_detail(animal, False, images), detail_text(animal)


def toggle_zoom(animal: Optional[Animal], zoomed: bool, images: ImageLibrary):
    if animal is None:
        return zoomed, None
    zoom = ZoomState(bool(zoomed))
    zoom.toggle()
    return zoom.zoomed, render_detail(animal, zoom.zoomed, images)


def build_demo(config: Optional[AppConfig] = None) -> gr.Blocks:
    config = config or AppConfig()
    images = ImageLibrary.from_config(config.images)

    with gr.Blocks(title="Animals") as demo:
        gr.Markdown("## Animals")

        controller_state = gr.State()
        log_state = gr.State("")
        animal_state = gr.State()
        zoom_state = gr.State(False)

        with gr.Row():
            with gr.Column(scale=1):
                add_btn = gr.Button("+", variant="primary")
                animal_table = gr.Dataframe(
                    headers=TABLE_HEADERS,
                    label="Animals",
                    interactive=False,
                    row_count=(0, "dynamic"),
                    col_count=(3, "fixed"),
                )
                thumbnails = gr.Gallery(label="Thumbnails", columns=5, height="auto")
                with gr.Row():
                    delete_rows = gr.Textbox(label="Rows to delete (comma-separated)", placeholder="0, 2")
                    delete_btn = gr.Button("Delete")
                status_message = gr.Markdown("")
                log_box = gr.Textbox(lines=6, label="Log", interactive=False)

            with gr.Column(scale=1):
                detail_image = gr.Image(label="Image", type="pil", interactive=False)
                zoom_btn = gr.Button("Zoom")
                detail_info = gr.Markdown(detail_text(None))

        demo.load(
            fn=partial(init_session, config, images),
            inputs=[],
            outputs=[
                controller_state,
                animal_table,
                thumbnails,
                log_state,
                status_message,
                animal_state,
                zoom_state,
                detail_image,
                detail_info,
            ],
        ).then(fn=lambda log: log, inputs=[log_state], outputs=[log_box])

        add_btn.click(
            fn=partial(add_animal, images=images),
            inputs=[controller_state, log_state],
            outputs=[animal_table, thumbnails, log_state, status_message],
        ).then(fn=lambda log: log, inputs=[log_state], outputs=[log_box])

        delete_btn.click(
            fn=partial(delete_animals, images=images),
            inputs=[controller_state, delete_rows, log_state],
            outputs=[animal_table, thumbnails, log_state, status_message],
        ).then(fn=lambda log: log, inputs=[log_state], outputs=[log_box])

        def on_select(controller: GradioAnimalController, evt: gr.SelectData):
            return select_animal(controller, images, evt)

        animal_table.select(
            fn=on_select,
            inputs=[controller_state],
            outputs=[animal_state, zoom_state, detail_image, detail_info],
        )

        zoom_btn.click(
            fn=partial(toggle_zoom, images=images),
            inputs=[animal_state, zoom_state],
            outputs=[zoom_state, detail_image],
        )

    return demo


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser("Animal list demo (Gradio)")
    parser.add_argument("--server-port", type=int, default=None, help="Port for the web server")
    args = parser.parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)
    config = load_config(args)
    logger.info("Serving %d seed animals", len(config.catalog.seeds))
    demo = build_demo(config)
    demo.launch(server_port=args.server_port)


if __name__ == "__main__":
    main()
