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
"""JIPLAK_PROMPT: recreate a photo as a prompt for an image generator."""

import mesop as me

from common.analytics import track_click
from common.error_handling import (
    GenerationError,
    TranslationError,
    ValidationError,
    friendly_error_message,
)
from common.utils import ACCEPTED_IMAGE_TYPES
from components.chip_selector.chip_selector import chip_selector, chip_value
from components.prompt_editor.prompt_editor import prompt_editor
from components.snackbar.snackbar import show_snackbar, snackbar
from models.gemini import LANGUAGES, describe_image, translate_text
from models.prompt_assembly import ASPECT_RATIOS, ORIGINAL_ASPECT_RATIO
from models.requests import ImageInput
from services import prompt_service
from services.access_service import allow_feature
from state.jiplak_state import PageState
from state.state import AppState

GEMINI_APP_URL = "https://gemini.google.com/"


@me.component
def jiplak_content():
    """The prompt-from-photo tab."""
    state = me.state(PageState)

    with me.box(style=me.Style(display="flex", flex_direction="column", gap=24)):
        if state.is_loading:
            _loading_view()
        elif state.error_message:
            _error_view()
        elif state.final_prompt or state.description:
            _prompt_view()
        else:
            _uploader_view()

        snackbar(is_visible=state.show_snackbar, label=state.snackbar_message)


@me.component
def _uploader_view():
    state = me.state(PageState)
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            align_items="center",
            gap=12,
            padding=me.Padding.all(32),
            border=me.Border.all(
                me.BorderSide(width=1, style="dashed", color=me.theme_var("outline"))
            ),
            border_radius=12,
        )
    ):
        me.text("Lampirkan gambar yang mau kamu buat ulang")
        me.uploader(
            label="Upload Image",
            accepted_file_types=ACCEPTED_IMAGE_TYPES,
            on_upload=on_upload,
            type="flat",
            key=f"jiplak_uploader_{state.uploader_key}",
        )
        me.text(
            "PNG, JPG, WEBP",
            style=me.Style(font_size=12, color=me.theme_var("on-surface-variant")),
        )


@me.component
def _loading_view():
    state = me.state(PageState)
    with me.box(
        style=me.Style(display="flex", flex_direction="column", align_items="center", gap=16)
    ):
        if state.image_data_uri:
            me.image(
                src=state.image_data_uri,
                alt="Processing...",
                style=me.Style(max_height=240, border_radius=8, opacity=0.6),
            )
        me.progress_spinner()
        me.text("Generating scene prompt...")


@me.component
def _error_view():
    state = me.state(PageState)
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            align_items="center",
            gap=16,
            padding=me.Padding.all(16),
            border_radius=8,
            background=me.theme_var("error-container"),
        )
    ):
        me.text(state.error_message, style=me.Style(color=me.theme_var("on-error-container")))
        me.button("Try Again", on_click=on_clear_click, type="flat")


@me.component
def _prompt_view():
    state = me.state(PageState)

    if state.image_data_uri:
        me.image(
            src=state.image_data_uri,
            alt="Image preview",
            style=me.Style(width="100%", border_radius=8),
        )
    me.button("← Ganti gambar lain", on_click=on_clear_click)

    if state.subject_count > 1:
        with me.box(
            style=me.Style(
                padding=me.Padding.all(12),
                border_radius=8,
                background=me.theme_var("secondary-container"),
            )
        ):
            me.text(
                f"AI Pro Tip: We've detected {state.subject_count} people. The prompt "
                "describes each one. For best results, use a separate face reference "
                "for each person.",
                style=me.Style(font_size=14),
            )

    me.checkbox(
        label="Ceklis ini jika wajah akan diganti dengan wajah kita",
        checked=state.use_face_reference,
        on_change=on_face_reference_change,
    )
    if state.subject_count > 1 and state.use_face_reference:
        me.checkbox(
            label="Use a separate face reference for each person",
            checked=state.use_separate_references,
            on_change=on_separate_references_change,
        )

    with me.box(style=me.Style(display="flex", flex_direction="column", gap=8)):
        me.text("Ukuran/Bentuk Layar", type="subtitle-1")
        chip_selector(
            options=[ORIGINAL_ASPECT_RATIO, *ASPECT_RATIOS],
            selected=state.aspect_ratio,
            on_select=on_aspect_ratio_click,
            key_prefix="jiplak_ar",
        )

    prompt_editor(
        label="Hasil Jiplak Promptnya",
        prompt=state.final_prompt,
        on_prompt_blur=on_prompt_blur,
        on_translate=on_translate_click,
        on_language_select=on_language_click,
        on_copied=on_prompt_copied,
        target_language=state.target_language,
        is_busy=state.is_loading,
        is_translating=state.is_translating,
        editor_key="jiplak_prompt",
    )
    me.text(
        "Kamu bisa rubah ulang aspek baju ataupun rambut juga accesoris di kolom input ini",
        style=me.Style(font_size=14, color=me.theme_var("on-surface-variant")),
    )
    with me.box(style=me.Style(display="flex", flex_direction="column", align_items="center", gap=8)):
        me.text(
            "Copy the prompt and use it in your favorite image generator!",
            style=me.Style(font_size=14),
        )
        me.link(text="Open Gemini App", url=GEMINI_APP_URL, open_in_new_tab=True)


@track_click(element_id="jiplak_upload")
def on_upload(e: me.UploadEvent):
    """Shows the uploaded image, then asks Gemini to describe it."""
    if not allow_feature(me.state(AppState), "jiplak"):
        return
    state = me.state(PageState)
    file = e.files[0]
    image = ImageInput(data=file.getvalue(), mime_type=file.mime_type, name=file.name)
    state.uploader_key += 1

    try:
        token = prompt_service.begin_describe(state, image)
    except ValidationError as ex:
        yield from show_snackbar(state, str(ex))
        return
    yield

    try:
        description = describe_image(image)
    except GenerationError as ex:
        if prompt_service.fail_describe(state, token, friendly_error_message(ex, "jiplak")):
            yield from show_snackbar(state, state.error_message)
        return

    if prompt_service.complete_describe(state, token, description):
        yield from show_snackbar(state, "Scene prompt generated!")


def on_clear_click(e: me.ClickEvent):
    """Drops the image and prompt; a description still in flight is discarded."""
    state = me.state(PageState)
    prompt_service.reset(state)
    yield


def on_face_reference_change(e: me.CheckboxChangeEvent):
    prompt_service.update_options(me.state(PageState), use_face_reference=e.checked)


def on_separate_references_change(e: me.CheckboxChangeEvent):
    prompt_service.update_options(me.state(PageState), use_separate_references=e.checked)


def on_aspect_ratio_click(e: me.ClickEvent):
    prompt_service.update_options(me.state(PageState), aspect_ratio=chip_value(e))


def on_prompt_blur(e: me.InputBlurEvent):
    """Keeps a manual edit as an override of the generated prompt."""
    prompt_service.edit_prompt(me.state(PageState), e.value)


def on_prompt_copied(e: me.WebEvent):
    yield from show_snackbar(me.state(PageState), "Prompt copied!")

def on_language_click(e: me.ClickEvent):
    me.state(PageState).target_language = chip_value(e)


@track_click(element_id="jiplak_translate")
def on_translate_click(e: me.ClickEvent):
    state = me.state(PageState)
    if state.is_translating or not state.final_prompt.strip():
        return
    if not allow_feature(me.state(AppState), "jiplak"):
        return
    language = LANGUAGES[state.target_language]
    state.is_translating = True
    yield

    try:
        translated = translate_text(state.final_prompt, language)
        prompt_service.edit_prompt(state, translated)
        state.is_translating = False
        yield from show_snackbar(state, f"Translated to {language}!")
    except TranslationError as ex:
        state.is_translating = False
        yield from show_snackbar(state, friendly_error_message(ex, "jiplak"))
