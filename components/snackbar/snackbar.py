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

import time

import mesop as me


@me.component
def snackbar(is_visible: bool, label: str):
    """A transient notice pinned to the bottom of the page."""
    with me.box(
        style=me.Style(
            display="block" if is_visible else "none",
            height="fit-content",
            position="fixed",
            bottom=24,
            left=0,
            right=0,
            z_index=1000,
        )
    ):
        with me.box(
            style=me.Style(
                display="flex",
                justify_content="center",
            )
        ):
            with me.box(
                style=me.Style(
                    background=me.theme_var("inverse-surface"),
                    color=me.theme_var("inverse-on-surface"),
                    border_radius=8,
                    max_width=560,
                    padding=me.Padding.symmetric(vertical=12, horizontal=16),
                )
            ):
                me.text(label)


def show_snackbar(state, message: str, seconds: float = 3):
    """Displays a snackbar message on a page state with show_snackbar/snackbar_message."""
    state.snackbar_message = message
    state.show_snackbar = True
    yield
    time.sleep(seconds)
    state.show_snackbar = False
    yield
