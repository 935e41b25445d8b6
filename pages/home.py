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
"""The app shell: PIN gate, header and feature tabs."""

import mesop as me

from common.analytics import log_access_event, log_page_view
from common.error_handling import AuthenticationError
from components.feature_tabs.feature_tabs import Tab, feature_tabs
from components.pin_auth.pin_auth import pin_auth
from models.access import AccessTier, resolve_tab
from pages.jiplak import jiplak_content
from pages.nano_banana import nano_banana_content
from services.access_service import gate_for, start_session
from state.state import AppState


def on_load(e: me.LoadEvent):
    """Restores the access session kept for this browser session."""
    app_state = me.state(AppState)
    gate = start_session(app_state)
    app_state.active_tab = resolve_tab(gate.tier, app_state.active_tab)
    log_page_view("home")
    yield


def on_pin_blur(e: me.InputBlurEvent):
    me.state(AppState).pin_input = e.value


def on_pin_enter(e: me.InputEnterEvent):
    _submit_pin(e.value)


def on_pin_submit(e: me.ClickEvent):
    _submit_pin(me.state(AppState).pin_input)


def _submit_pin(pin: str):
    app_state = me.state(AppState)
    app_state.pin_input = ""
    try:
        session = gate_for(app_state).submit_pin(pin)
    except AuthenticationError as ex:
        app_state.pin_error = ex.message
        log_access_event("rejected")
        return
    app_state.pin_error = ""
    # Entering a limited session switches away from full-only tabs.
    app_state.active_tab = resolve_tab(session.tier, app_state.active_tab)
    log_access_event("granted", session.tier.value)


def on_logout_click(e: me.ClickEvent):
    app_state = me.state(AppState)
    gate_for(app_state).logout()
    log_access_event("logout")
    app_state.active_tab = "jiplak"


def on_tab_click(e: me.ClickEvent):
    app_state = me.state(AppState)
    app_state.active_tab = resolve_tab(gate_for(app_state).tier, e.key)


@me.component
def _header():
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="row",
            align_items="center",
            justify_content="space-between",
            padding=me.Padding.symmetric(vertical=24, horizontal=16),
        )
    ):
        with me.box(style=me.Style(display="flex", flex_direction="column", gap=4)):
            me.text("JIPLAK_PROMPT", type="headline-3")
            me.text(
                "Lampirkan gambar yang mau kamu buat ulang",
                style=me.Style(color=me.theme_var("on-surface-variant")),
            )
        with me.content_button(type="stroked", on_click=on_logout_click):
            with me.box(style=me.Style(display="flex", align_items="center", gap=6)):
                me.icon("logout")
                me.text("Logout")


@me.page(
    path="/",
    title="JIPLAK_PROMPT",
    on_load=on_load,
    security_policy=me.SecurityPolicy(allowed_script_srcs=["https://cdn.jsdelivr.net"]),
)
def page():
    """Define the Mesop page route for the app."""
    app_state = me.state(AppState)
    tier = gate_for(app_state).tier

    if tier is AccessTier.NONE:
        pin_auth(
            on_pin_blur=on_pin_blur,
            on_pin_enter=on_pin_enter,
            on_submit=on_pin_submit,
            error=app_state.pin_error,
        )
        return

    active_tab = resolve_tab(tier, app_state.active_tab)
    with me.box(style=me.Style(max_width=960, margin=me.Margin.symmetric(horizontal="auto"))):
        _header()
        feature_tabs(
            tabs=[
                Tab(key="jiplak", label="JIPLAK_PROMPT", icon="photo_camera",
                    selected=active_tab == "jiplak"),
                Tab(key="nano", label="NANO BANANA", icon="auto_fix_high",
                    selected=active_tab == "nano", disabled=tier is not AccessTier.FULL),
            ],
            on_tab_click=on_tab_click,
        )
        with me.box(style=me.Style(padding=me.Padding.symmetric(horizontal=16, vertical=8))):
            if active_tab == "nano":
                nano_banana_content()
            else:
                jiplak_content()
        me.text(
            "Developer : zakiromdoni",
            style=me.Style(
                text_align="center",
                font_size=12,
                color=me.theme_var("outline"),
                padding=me.Padding.all(24),
            ),
        )
