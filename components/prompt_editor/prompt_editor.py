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

from collections.abc import Callable

import mesop as me

from components.chip_selector.chip_selector import chip_selector
from components.clipboard_button.clipboard_button import clipboard_button
from models.gemini import LANGUAGES


@me.component
def prompt_editor(
    label: str,
    prompt: str,
    on_prompt_blur: Callable,
    on_translate: Callable,
    on_language_select: Callable,
    on_copied: Callable,
    target_language: str,
    is_busy: bool,
    is_translating: bool,
    editor_key: str,
    placeholder: str = "",
):
    """An editable prompt with copy and ID/EN translate controls."""
    with me.box(style=me.Style(display="flex", flex_direction="column", gap=8)):
        me.text(label, type="subtitle-1")
        me.textarea(
            value=prompt,
            placeholder=placeholder,
            on_blur=on_prompt_blur,
            disabled=is_busy or is_translating,
            rows=8,
            autosize=True,
            appearance="outline",
            key=editor_key,
            style=me.Style(width="100%"),
        )
        with me.box(
            style=me.Style(
                display="flex",
                flex_direction="row",
                align_items="center",
                justify_content="flex-end",
                gap=8,
            )
        ):
            chip_selector(
                options=list(LANGUAGES),
                selected=target_language,
                on_select=on_language_select,
                key_prefix=f"{editor_key}_language",
                disabled=is_busy or is_translating,
            )
            clipboard_button(
                text=prompt,
                on_copied=on_copied,
                disabled=is_busy or is_translating,
                key=f"{editor_key}_copy",
            )
            if is_translating:
                me.progress_spinner(diameter=20, stroke_width=3)
            else:
                me.button(
                    "Translate",
                    on_click=on_translate,
                    type="stroked",
                    disabled=is_busy or not prompt.strip(),
                )
