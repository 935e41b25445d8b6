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

import pytest
from conftest import FakeClient, image_part, make_image_bytes, make_response

from common.error_handling import GenerationError, ValidationError
from models.gemini import edit_images
from models.requests import GenerationResult, ImageInput
from services import nano_banana_service
from state.nano_banana_state import PageState


@pytest.fixture
def state():
    return PageState()


def png(name="a.png"):
    return ImageInput(data=make_image_bytes(), mime_type="image/png", name=name)


def text_result(value):
    return [GenerationResult(kind="text", value=value)]


class TestAddImages:
    def test_adds_images(self, state):
        assert nano_banana_service.add_images(state, [png("a.png"), png("b.png")]) is None
        assert state.image_names == ["a.png", "b.png"]
        assert all(uri.startswith("data:image/png;base64,") for uri in state.image_data_uris)

    def test_limit_is_enforced(self, state):
        notice = nano_banana_service.add_images(state, [png() for _ in range(4)], max_images=3)
        assert notice == "You can only upload a maximum of 3 images."
        assert len(state.image_data_uris) == 3

        notice = nano_banana_service.add_images(state, [png()], max_images=3)
        assert notice == "You can only upload a maximum of 3 images."
        assert len(state.image_data_uris) == 3

    def test_lowered_limit_adds_nothing(self, state):
        nano_banana_service.add_images(state, [png() for _ in range(5)], max_images=5)

        notice = nano_banana_service.add_images(state, [png("new.png")], max_images=2)

        assert notice == "You can only upload a maximum of 2 images."
        assert len(state.image_data_uris) == 5
        assert "new.png" not in state.image_names

    def test_unsupported_types_are_skipped(self, state):
        gif = ImageInput(data=b"GIF89a", mime_type="image/gif", name="x.gif")
        notice = nano_banana_service.add_images(state, [gif, png()])
        assert notice == "Only PNG, JPG and WEBP images are supported."
        assert len(state.image_data_uris) == 1

    def test_remove_image(self, state):
        nano_banana_service.add_images(state, [png("a.png"), png("b.png")])
        nano_banana_service.remove_image(state, 0)
        nano_banana_service.remove_image(state, 7)
        assert state.image_names == ["b.png"]


class TestPrepareEdit:
    def test_requires_an_image(self, state):
        state.prompt = "add a hat"
        with pytest.raises(ValidationError, match="at least one image"):
            nano_banana_service.prepare_edit(state)

    def test_requires_a_prompt(self, state):
        nano_banana_service.add_images(state, [png()])
        state.prompt = "   "
        with pytest.raises(ValidationError, match="enter a prompt"):
            nano_banana_service.prepare_edit(state)

    def test_decodes_images_and_applies_resolution(self, state):
        nano_banana_service.add_images(state, [png("a.png")])
        state.prompt = "add a hat"
        state.resolution = "HD"

        images, instruction = nano_banana_service.prepare_edit(state)

        assert images == [png("a.png")]
        assert instruction == "add a hat, HD, 1080p, high quality"


class TestHistory:
    def test_successful_edit_is_pushed(self, state):
        snapshot = nano_banana_service.run_edit(
            state, [png()], "edit", edit=lambda images, instruction: text_result("one")
        )
        assert snapshot == tuple(text_result("one"))
        assert state.history_index == 0
        assert state.history == [[{"kind": "text", "value": "one"}]]

    def test_failed_edit_leaves_history_untouched(self, state):
        nano_banana_service.run_edit(state, [png()], "edit", edit=lambda i, p: text_result("one"))
        client = FakeClient(response=make_response(parts=[]))

        with pytest.raises(GenerationError):
            nano_banana_service.run_edit(
                state, [png()], "edit", edit=lambda i, p: edit_images(i, p, client=client)
            )

        assert state.history == [[{"kind": "text", "value": "one"}]]
        assert state.history_index == 0

    def test_edit_through_gateway(self, state):
        client = FakeClient(response=make_response(parts=[image_part(b"img")]))
        snapshot = nano_banana_service.run_edit(
            state, [png()], "edit", edit=lambda i, p: edit_images(i, p, client=client)
        )
        assert snapshot[0].kind == "image"

    def test_undo_redo_and_branch(self, state):
        for value in ("A", "B", "C"):
            nano_banana_service.run_edit(state, [png()], "edit", edit=lambda i, p, v=value: text_result(v))

        assert nano_banana_service.undo(state) == tuple(text_result("B"))
        assert nano_banana_service.undo(state) == tuple(text_result("A"))
        assert nano_banana_service.redo(state) == tuple(text_result("B"))
        nano_banana_service.undo(state)

        nano_banana_service.run_edit(state, [png()], "edit", edit=lambda i, p: text_result("D"))
        assert state.history_index == 1
        assert [snapshot[0]["value"] for snapshot in state.history] == ["A", "D"]
        assert nano_banana_service.current_results(state) == tuple(text_result("D"))

    def test_empty_history(self, state):
        assert nano_banana_service.undo(state) == ()
        assert nano_banana_service.current_results(state) == ()
