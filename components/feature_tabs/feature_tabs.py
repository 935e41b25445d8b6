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
from dataclasses import dataclass

import mesop as me


@dataclass
class Tab:
    key: str
    label: str
    selected: bool = False
    disabled: bool = False
    icon: str | None = None


@me.component
def feature_tabs(tabs: list[Tab], on_tab_click: Callable):
    """The header row used to switch between features.

    Clicks on disabled tabs are not wired, so a locked feature cannot be opened.
    """
    with me.box(
        style=me.Style(
            display="flex",
            width="100%",
            margin=me.Margin(bottom=24),
            border=me.Border(
                bottom=me.BorderSide(
                    width=1, style="solid", color=me.theme_var("outline-variant")
                )
            ),
        )
    ):
        for tab in tabs:
            with me.box(
                key=tab.key,
                on_click=None if tab.disabled else on_tab_click,
                style=_make_tab_style(tab.selected, tab.disabled),
            ):
                if tab.icon:
                    me.icon(tab.icon)
                me.text(tab.label)


def _make_tab_style(selected: bool, disabled: bool) -> me.Style:
    """Makes the styles for the tab based on selected/disabled state."""
    style = _make_default_tab_style()
    if disabled:
        style.color = me.theme_var("outline")
        style.cursor = "not-allowed"
        style.opacity = 0.5
    elif selected:
        style.border = me.Border(
            bottom=me.BorderSide(width=2, style="solid", color=me.theme_var("primary"))
        )
        style.color = me.theme_var("primary")
        style.cursor = "default"
    return style


def _make_default_tab_style():
    return me.Style(
        align_items="center",
        color=me.theme_var("on-surface-variant"),
        display="flex",
        cursor="pointer",
        flex_grow=1,
        justify_content="center",
        line_height=1,
        font_size=14,
        font_weight="medium",
        padding=me.Padding(top=12, bottom=12, left=16, right=16),
        text_align="center",
        gap=8,
    )
