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

CHIP_STYLE = me.Style(
    padding=me.Padding(top=4, right=12, bottom=4, left=12),
    border_radius=8,
    font_size=14,
    height=32,
)


@me.component
def chip_selector(
    options: list[str],
    selected: str,
    on_select: Callable,
    key_prefix: str,
    disabled: bool = False,
):
    """A row of buttons where exactly one option is selected.

    The handler receives a ClickEvent whose key is f"{key_prefix}:{option}".
    """
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="row",
            flex_wrap="wrap",
            gap=8,
        )
    ):
        for option in options:
            me.button(
                option,
                key=f"{key_prefix}:{option}",
                on_click=on_select,
                type="flat" if option == selected else "stroked",
                disabled=disabled,
                style=CHIP_STYLE,
            )


def chip_value(e: me.ClickEvent) -> str:
    """Extracts the option from a chip_selector click."""
    _, _, value = e.key.partition(":")
    return value
