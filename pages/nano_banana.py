# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Nano Banana: edit one or more images with a text instruction."""

import mesop as me

from common.analytics import track_click
from common.error_handling import (
    GenerationError,
    TranslationError,
    ValidationError,
    friendly_error_message,
)
from common.utils import ACCEPTED_IMAGE_TYPES, download_filename
from components.chip_selector.chip_selector import chip_selector, chip_value
from components.download_button.download_button import download_button
from components.prompt_editor.prompt_editor import prompt_editor
from components.snackbar.snackbar import show_snackbar, snackbar
from config.default import Default as cfg
from models.gemini import LANGUAGES, translate_text
from models.prompt_assembly import RESOLUTION_OPTIONS
from models.requests import ImageInput
from services import nano_banana_service
from services.access_service import allow_feature
from state.nano_banana_state import PageState
from state.state import AppState


@me.component
def nano_banana_content():
    """The Nano Banana tab."""
    state = me.state(PageState)
    is_busy = state.is_generating or state.is_translating

    with me.box(style=me.Style(display="flex", flex_direction="column", gap=24)):
        with me.box(style=me.Style(display="flex", flex_direction="column", gap=8)):
            me.text("1. Upload Images", type="subtitle-1")
            _image_slots(disabled=is_busy)

        prompt_editor(
            label="2. Describe your edit",
            prompt=state.prompt,
            placeholder="e.g., 'add a birthday hat on the person' or 'change the background to a beach'",
            on_prompt_blur=on_prompt_blur,
            on_translate=on_translate_click,
            on_language_select=on_language_click,
            on_copied=on_prompt_copied,
            target_language=state.target_language,
            is_busy=state.is_generating,
            is_translating=state.is_translating,
            editor_key="nano_prompt",
        )

        with me.box(style=me.Style(display="flex", flex_direction="column", gap=8)):
            me.text("3. Resolution", type="subtitle-1")
            chip_selector(
                options=RESOLUTION_OPTIONS,
                selected=state.resolution,
                on_select=on_resolution_click,
                key_prefix="nano_resolution",
                disabled=is_busy,
            )

        _generate_button()

        if state.error_message:
            with me.box(
                style=me.Style(
                    padding=me.Padding.all(16),
                    border_radius=8,
                    background=me.theme_var("error-container"),
                )
            ):
                me.text(
                    state.error_message,
                    style=me.Style(color=me.theme_var("on-error-container")),
                )

        _results()

        snackbar(is_visible=state.show_snackbar, label=state.snackbar_message)


@me.component
def _image_slots(disabled: bool):
    state = me.state(PageState)
    max_images = cfg().MAX_EDIT_IMAGES
    with me.box(
        style=me.Style(display="flex", flex_direction="row", flex_wrap="wrap", gap=10)
    ):
        for i, data_uri in enumerate(state.image_data_uris):
            with me.box(style=me.Style(position="relative")):
                me.image(
                    src=data_uri,
                    alt=state.image_names[i] if i < len(state.image_names) else "",
                    style=me.Style(
                        width=100, height=100, border_radius=8, object_fit="cover"
                    ),
                )
                with me.content_button(
                    type="icon",
                    key=str(i),
                    on_click=on_remove_image,
                    disabled=disabled,
                    style=me.Style(position="absolute", top=0, right=0),
                ):
                    me.icon("close")

        if len(state.image_data_uris) < max_images:
            me.uploader(
                label="Upload Images",
                accepted_file_types=ACCEPTED_IMAGE_TYPES,
                on_upload=on_upload,
                multiple=True,
                type="stroked",
                disabled=disabled,
                key=f"nano_uploader_{state.uploader_key}",
            )
    me.text(
        f"PNG, JPG, WEBP (Max {max_images} files)",
        style=me.Style(font_size=12, color=me.theme_var("on-surface-variant")),
    )


@me.component
def _generate_button():
    state = me.state(PageState)
    if state.is_generating:
        with me.content_button(type="raised", disabled=True):
            with me.box(
                style=me.Style(display="flex", flex_direction="row", align_items="center", gap=8)
            ):
                me.progress_spinner(diameter=20, stroke_width=3)
                me.text("Generating...")
    else:
        me.button(
            "Translating..." if state.is_translating else "Generate",
            on_click=on_generate_click,
            type="raised",
            disabled=state.is_translating,
        )


@me.component
def _results():
    state = me.state(PageState)
    results = nano_banana_service.current_results(state)
    if not results:
        return

    with me.box(style=me.Style(display="flex", flex_direction="column", gap=16)):
        with me.box(
            style=me.Style(
                display="flex",
                flex_direction="row",
                align_items="center",
                justify_content="space-between",
            )
        ):
            me.text("Results", type="headline-6")
            with me.box(style=me.Style(display="flex", flex_direction="row", align_items="center", gap=4)):
                with me.content_button(
                    type="icon", on_click=on_undo_click, disabled=state.history_index <= 0
                ):
                    me.icon("undo")
                me.text(f"{state.history_index + 1}/{len(state.history)}")
                with me.content_button(
                    type="icon",
                    on_click=on_redo_click,
                    disabled=state.history_index >= len(state.history) - 1,
                ):
                    me.icon("redo")

        for index, result in enumerate(results):
            if result.kind == "image":
                with me.box(style=me.Style(display="flex", flex_direction="column", gap=8)):
                    me.image(
                        src=result.value,
                        alt=f"Result {index + 1}",
                        style=me.Style(width="100%", border_radius=8),
                    )
                    download_button(
                        src=result.value,
                        filename=download_filename(
                            result.value, f"jiplak-nano-result-{index + 1}"
                        ),
                        on_saved=on_result_saved,
                        key=f"save_{state.history_index}_{index}",
                    )
            else:
                me.markdown(result.value)


def on_upload(e: me.UploadEvent):
    state = me.state(PageState)
    images = [
        ImageInput(data=file.getvalue(), mime_type=file.mime_type, name=file.name)
        for file in e.files
    ]
    notice = nano_banana_service.add_images(state, images)
    state.uploader_key += 1
    yield
    if notice:
        yield from show_snackbar(state, notice)


def on_remove_image(e: me.ClickEvent):
    nano_banana_service.remove_image(me.state(PageState), int(e.key))


def on_prompt_blur(e: me.InputBlurEvent):
    me.state(PageState).prompt = e.value


def on_resolution_click(e: me.ClickEvent):
    me.state(PageState).resolution = chip_value(e)


def on_prompt_copied(e: me.WebEvent):
    yield from show_snackbar(me.state(PageState), "Prompt copied!")

def on_language_click(e: me.ClickEvent):
    me.state(PageState).target_language = chip_value(e)


@track_click(element_id="nano_translate")
def on_translate_click(e: me.ClickEvent):
    state = me.state(PageState)
    if state.is_translating or state.is_generating or not state.prompt.strip():
        return
    if not allow_feature(me.state(AppState), "nano"):
        return
    language = LANGUAGES[state.target_language]
    state.is_translating = True
    yield

    try:
        state.prompt = translate_text(state.prompt, language)
        state.is_translating = False
        yield from show_snackbar(state, f"Translated to {language}!")
    except TranslationError as ex:
        state.is_translating = False
        yield from show_snackbar(state, friendly_error_message(ex, "nano"))


@track_click(element_id="nano_generate")
def on_generate_click(e: me.ClickEvent):
    """Sends the images and instruction to the image model."""
    state = me.state(PageState)
    if state.is_generating or state.is_translating:
        return
    if not allow_feature(me.state(AppState), "nano"):
        return

    try:
        images, instruction = nano_banana_service.prepare_edit(state)
    except ValidationError as ex:
        yield from show_snackbar(state, str(ex))
        return

    state.is_generating = True
    state.error_message = ""
    yield

    try:
        nano_banana_service.run_edit(state, images, instruction)
        state.is_generating = False
        yield from show_snackbar(state, "Edit generated successfully!")
    except GenerationError as ex:
        state.error_message = friendly_error_message(ex, "nano")
        state.is_generating = False
        yield from show_snackbar(state, state.error_message, seconds=6)


def on_result_saved(e: me.WebEvent):
    yield from show_snackbar(me.state(PageState), "Image saved!")

def on_undo_click(e: me.ClickEvent):
    nano_banana_service.undo(me.state(PageState))


def on_redo_click(e: me.ClickEvent):
    nano_banana_service.redo(me.state(PageState))
