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
"""
State transitions for the prompt-from-photo tab.

Functions here take the tab's page state (state/jiplak_state.py) and leave
the remote call itself to the caller, so a page handler can yield between
starting a request and applying its result.
"""

from common.analytics import get_logger
from common.error_handling import ValidationError
from common.utils import ACCEPTED_IMAGE_TYPES, get_image_dimensions, to_data_uri
from models.prompt_assembly import (
    ORIGINAL_ASPECT_RATIO,
    PromptContext,
    PromptDraft,
    reduce_aspect_ratio,
)
from models.requests import ImageDescription, ImageInput

logger = get_logger(__name__)


def validate_image(image: ImageInput) -> None:
    """Raises ValidationError for empty or unsupported uploads."""
    if not image.data:
        raise ValidationError("Please upload an image first.")
    if image.mime_type not in ACCEPTED_IMAGE_TYPES:
        raise ValidationError("Only PNG, JPG and WEBP images are supported.")


def original_aspect_ratio(image_bytes: bytes) -> str | None:
    """The reduced W:H ratio of an image, or None when it cannot be measured."""
    dimensions = get_image_dimensions(image_bytes)
    if not dimensions:
        return None
    try:
        return reduce_aspect_ratio(*dimensions)
    except ValueError as ex:
        logger.warning(f"Ignoring image dimensions: {ex}")
        return None


def draft_from_state(state) -> PromptDraft:
    return PromptDraft(
        context=PromptContext(
            description=state.description,
            subject_count=state.subject_count,
            aspect_ratio=state.aspect_ratio,
            original_aspect_ratio=state.original_aspect_ratio,
            use_face_reference=state.use_face_reference,
            use_separate_references=state.use_separate_references,
        ),
        text=state.final_prompt,
        overridden=state.prompt_overridden,
    )


def store_draft(state, draft: PromptDraft) -> None:
    context = draft.context
    state.description = context.description
    state.subject_count = context.subject_count
    state.aspect_ratio = context.aspect_ratio
    state.original_aspect_ratio = context.original_aspect_ratio
    state.use_face_reference = context.use_face_reference
    state.use_separate_references = context.use_separate_references
    state.final_prompt = draft.text
    state.prompt_overridden = draft.overridden


def reset(state) -> None:
    """Clears the image and prompt. Any request still in flight becomes stale."""
    draft = PromptDraft()
    store_draft(state, draft)
    state.image_data_uri = ""
    state.image_name = ""
    state.error_message = ""
    state.is_loading = False
    state.describe_token += 1


def begin_describe(state, image: ImageInput) -> int:
    """Shows the new image and returns the token its description must carry.

    Raises:
        ValidationError: If the upload is not a supported image.
    """
    validate_image(image)
    reset(state)
    state.image_data_uri = to_data_uri(image.data, image.mime_type)
    state.image_name = image.name
    state.original_aspect_ratio = original_aspect_ratio(image.data)
    state.aspect_ratio = ORIGINAL_ASPECT_RATIO
    state.is_loading = True
    return state.describe_token


def is_current(state, token: int) -> bool:
    return token == state.describe_token


def complete_describe(state, token: int, description: ImageDescription) -> bool:
    """Applies a description. Returns False when the response is stale."""
    if not is_current(state, token):
        logger.info(f"Discarding stale description for request {token}")
        return False
    draft = draft_from_state(state)
    draft.load_description(description.prompt, description.subject_count)
    store_draft(state, draft)
    state.is_loading = False
    return True


def fail_describe(state, token: int, message: str) -> bool:
    """Records a failed description. Returns False when the request is stale."""
    if not is_current(state, token):
        return False
    state.error_message = message
    state.image_data_uri = ""
    state.image_name = ""
    state.is_loading = False
    return True


def update_options(state, **changes) -> str:
    """Changes prompt options and returns the prompt to show."""
    draft = draft_from_state(state)
    draft.update(**changes)
    store_draft(state, draft)
    return draft.text


def edit_prompt(state, text: str) -> None:
    draft = draft_from_state(state)
    draft.edit(text)
    store_draft(state, draft)
