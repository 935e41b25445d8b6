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


@me.component
def pin_auth(on_pin_blur: Callable, on_pin_enter: Callable, on_submit: Callable, error: str):
    """The PIN form shown before any feature is available."""
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            align_items="center",
            justify_content="center",
            min_height="100vh",
            gap=16,
        )
    ):
        me.text("JIPLAK_PROMPT 2.0", type="headline-3")
        me.text(
            "Please enter your PIN to access the application.",
            style=me.Style(color=me.theme_var("on-surface-variant")),
        )
        me.input(
            label="PIN",
            type="password",
            appearance="outline",
            on_blur=on_pin_blur,
            on_enter=on_pin_enter,
            key="pin_input",
            style=me.Style(width=240),
        )
        if error:
            me.text(error, style=me.Style(color=me.theme_var("error"), font_size=14))
        me.button("Enter", on_click=on_submit, type="flat")
