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
"""State transitions for the Nano Banana multi-image edit tab."""

from collections.abc import Callable

from common.analytics import get_logger
from common.error_handling import ValidationError
from common.utils import ACCEPTED_IMAGE_TYPES, split_data_uri, to_data_uri
from config.default import Default
from models.gemini import edit_images
from models.history import EditHistory, Snapshot
from models.prompt_assembly import apply_resolution_preset
from models.requests import GenerationResult, ImageInput

config = Default()

logger = get_logger(__name__)


def add_images(state, images: list[ImageInput], max_images: int | None = None) -> str | None:
    """Adds uploads up to the limit. Returns a notice when some were skipped."""
    max_images = max_images or config.MAX_EDIT_IMAGES
    accepted = [image for image in images if image.mime_type in ACCEPTED_IMAGE_TYPES]
    slots = max(max_images - len(state.image_data_uris), 0)
    for image in accepted[:slots]:
        state.image_data_uris.append(to_data_uri(image.data, image.mime_type))
        state.image_names.append(image.name)

    if len(accepted) > slots:
        return f"You can only upload a maximum of {max_images} images."
    if len(accepted) < len(images):
        return "Only PNG, JPG and WEBP images are supported."
    return None


def remove_image(state, index: int) -> None:
    if 0 <= index < len(state.image_data_uris):
        del state.image_data_uris[index]
        del state.image_names[index]


def prepare_edit(state) -> tuple[list[ImageInput], str]:
    """Validates the form and returns (images, final instruction).

    Raises:
        ValidationError: If there are no images or no prompt.
    """
    if not state.image_data_uris:
        raise ValidationError("Please upload at least one image.")
    if not state.prompt.strip():
        raise ValidationError("Please enter a prompt to describe your edit.")

    images = []
    for data_uri, name in zip(state.image_data_uris, state.image_names):
        mime_type, data = split_data_uri(data_uri)
        images.append(ImageInput(data=data, mime_type=mime_type, name=name))
    return images, apply_resolution_preset(state.prompt, state.resolution)


def history_from_state(state) -> EditHistory:
    return EditHistory.from_state(state.history, state.history_index)


def store_history(state, history: EditHistory) -> None:
    state.history, state.history_index = history.to_state()


def run_edit(
    state,
    images: list[ImageInput],
    instruction: str,
    edit: Callable[[list[ImageInput], str], list[GenerationResult]] = edit_images,
) -> Snapshot:
    """Calls the image model and pushes the results onto the history.

    History is only touched once the call has succeeded; errors propagate.
    """
    results = edit(images, instruction)
    history = history_from_state(state)
    history.push(results)
    store_history(state, history)
    logger.info(f"Stored edit result {history.cursor + 1} of {len(history)}")
    return history.current()


def undo(state) -> Snapshot:
    history = history_from_state(state)
    snapshot = history.undo()
    store_history(state, history)
    return snapshot


def redo(state) -> Snapshot:
    history = history_from_state(state)
    snapshot = history.redo()
    store_history(state, history)
    return snapshot


def current_results(state) -> Snapshot:
    return history_from_state(state).current()
