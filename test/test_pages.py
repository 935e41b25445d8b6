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

import uuid
from types import SimpleNamespace

import mesop as me
import pytest
from conftest import make_image_bytes

from common.session_store import session_store
from models.requests import GenerationResult, ImageDescription
from pages import jiplak, nano_banana
from services import nano_banana_service
from services.access_service import SESSION_EXPIRED_MESSAGE
from state.jiplak_state import PageState as JiplakState
from state.nano_banana_state import PageState as NanoBananaState
from state.state import AppState

ACTIVE_LIMITED = {"authStatus": "limited", "sessionExpiry": "9999999999999"}
EXPIRED_LIMITED = {"authStatus": "limited", "sessionExpiry": "1"}


def quiet_snackbar(state, message, seconds=3):
    state.snackbar_message = message
    yield


class Recorder:
    """Stands in for a model call and remembers its arguments."""

    def __init__(self, result=None):
        self.result = result
        self.calls = []

    def __call__(self, *args, **kwargs):
        self.calls.append(args)
        return self.result


@pytest.fixture
def states(monkeypatch):
    states = {
        AppState: AppState(session_id=f"page-{uuid.uuid4()}"),
        JiplakState: JiplakState(),
        NanoBananaState: NanoBananaState(),
    }
    monkeypatch.setattr(me, "state", lambda cls: states[cls])
    monkeypatch.setattr(jiplak, "show_snackbar", quiet_snackbar)
    monkeypatch.setattr(nano_banana, "show_snackbar", quiet_snackbar)
    yield states
    session_store.entries(states[AppState].session_id).clear()


def sign_in(states, entries):
    session_store.entries(states[AppState].session_id).update(entries)


def upload_event():
    data = make_image_bytes(640, 480)
    file = SimpleNamespace(getvalue=lambda: data, mime_type="image/png", name="photo.png")
    return SimpleNamespace(files=[file])


class TestJiplakHandlers:
    def test_upload_with_expired_session_skips_the_model(self, states, monkeypatch):
        sign_in(states, EXPIRED_LIMITED)
        describe = Recorder(ImageDescription(prompt="X", subject_count=1))
        monkeypatch.setattr(jiplak, "describe_image", describe)

        list(jiplak.on_upload(upload_event()))

        assert describe.calls == []
        assert states[AppState].pin_error == SESSION_EXPIRED_MESSAGE
        assert states[JiplakState].image_data_uri == ""
        assert states[AppState].session_id not in session_store

    def test_upload_with_active_session_describes_the_image(self, states, monkeypatch):
        sign_in(states, ACTIVE_LIMITED)
        describe = Recorder(ImageDescription(prompt="A quiet street", subject_count=0))
        monkeypatch.setattr(jiplak, "describe_image", describe)

        list(jiplak.on_upload(upload_event()))

        assert len(describe.calls) == 1
        page = states[JiplakState]
        assert page.final_prompt.startswith("A quiet street")
        assert page.final_prompt.endswith("--ar 4:3")
        assert not page.is_loading

    def test_translate_with_expired_session_skips_the_model(self, states, monkeypatch):
        sign_in(states, EXPIRED_LIMITED)
        states[JiplakState].final_prompt = "A quiet street"
        translate = Recorder("Jalan yang sepi")
        monkeypatch.setattr(jiplak, "translate_text", translate)

        list(jiplak.on_translate_click(SimpleNamespace(key="")))

        assert translate.calls == []
        assert states[JiplakState].final_prompt == "A quiet street"
        assert not states[JiplakState].is_translating


class TestNanoBananaHandlers:
    def test_translate_needs_full_access(self, states, monkeypatch):
        sign_in(states, ACTIVE_LIMITED)
        states[NanoBananaState].prompt = "add a hat"
        translate = Recorder("tambahkan topi")
        monkeypatch.setattr(nano_banana, "translate_text", translate)

        list(nano_banana.on_translate_click(SimpleNamespace(key="")))

        assert translate.calls == []
        assert states[NanoBananaState].prompt == "add a hat"

    def test_generate_with_expired_session_skips_the_model(self, states, monkeypatch):
        sign_in(states, EXPIRED_LIMITED)
        page = states[NanoBananaState]
        page.image_data_uris = ["data:image/png;base64,iVBORw=="]
        page.image_names = ["a.png"]
        page.prompt = "add a hat"
        run_edit = Recorder(())
        monkeypatch.setattr(nano_banana_service, "run_edit", run_edit)

        list(nano_banana.on_generate_click(SimpleNamespace(key="")))

        assert run_edit.calls == []
        assert not page.is_generating
        assert states[AppState].pin_error == SESSION_EXPIRED_MESSAGE

    def test_generate_with_full_session(self, states, monkeypatch):
        sign_in(states, {"authStatus": "full"})
        page = states[NanoBananaState]
        page.image_data_uris = ["data:image/png;base64,iVBORw=="]
        page.image_names = ["a.png"]
        page.prompt = "add a hat"
        edit = Recorder([GenerationResult(kind="text", value="done")])
        run_edit = nano_banana_service.run_edit
        monkeypatch.setattr(
            nano_banana_service,
            "run_edit",
            lambda state, images, instruction: run_edit(state, images, instruction, edit=edit),
        )

        list(nano_banana.on_generate_click(SimpleNamespace(key="")))

        assert len(edit.calls) == 1
        assert page.history == [[{"kind": "text", "value": "done"}]]
        assert not page.is_generating


class TestBrowserActions:
    def test_copy_confirms_in_snackbar(self, states):
        list(jiplak.on_prompt_copied(SimpleNamespace(value={})))
        list(nano_banana.on_prompt_copied(SimpleNamespace(value={})))
        assert states[JiplakState].snackbar_message == "Prompt copied!"
        assert states[NanoBananaState].snackbar_message == "Prompt copied!"

    def test_save_confirms_in_snackbar(self, states):
        list(nano_banana.on_result_saved(SimpleNamespace(value={})))
        assert states[NanoBananaState].snackbar_message == "Image saved!"
