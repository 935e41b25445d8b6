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
"""Gemini calls: describe an image, translate a prompt, edit images."""

from google import genai
from google.genai import types

from common.analytics import get_logger, track_model_call
from common.error_handling import GenerationError, TranslationError, is_quota_error
from common.utils import to_data_uri
from config.default import Default
from models.requests import GenerationResult, ImageDescription, ImageInput

config = Default()

logger = get_logger(__name__)

LANGUAGES = {
    "ID": "Indonesian",
    "EN": "English",
}

DESCRIBE_INSTRUCTION = """Analyze the attached image, focusing on the people in it: their clothing, appearance, poses, expressions, body language and how they interact. Then write a single, highly detailed, photorealistic master prompt that an image generation AI could use to recreate this exact scene.

The prompt must cover:
- SCENE: the location, time of day, props and atmosphere.
- COMPOSITION: camera angle, framing, and the relative positions of all subjects.
- SUBJECT DETAILS: each person's clothing, shoes, accessories and pose.
- STYLE & QUALITY: lighting, color grading and photographic quality.

Also count the people visible in the image.

Your entire output must be a single JSON object with two keys: "prompt", containing the final master prompt, and "subject_count", containing the number of people."""

TRANSLATE_TEMPLATE = (
    "Translate the following text to {language}. Only return the translated text, "
    'without any additional explanation or formatting: "{text}"'
)

_client = None


def get_client() -> genai.Client:
    """Returns the shared Gemini client, creating it on first use."""
    global _client
    if _client is None:
        _client = genai.Client(api_key=config.require_api_key())
    return _client


def _image_part(image: ImageInput) -> types.Part:
    return types.Part.from_bytes(data=image.data, mime_type=image.mime_type)


def describe_image(image: ImageInput, client: genai.Client | None = None) -> ImageDescription:
    """Generates a recreation prompt and a subject count for one image.

    Raises:
        GenerationError: On API failure, a blocked request or a malformed response.
    """
    client = client or get_client()
    generation_config = types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=ImageDescription,
    )

    try:
        with track_model_call(model_name=config.MODEL_ID, mime_type=image.mime_type):
            response = client.models.generate_content(
                model=config.MODEL_ID,
                contents=[_image_part(image), DESCRIBE_INSTRUCTION],
                config=generation_config,
            )
    except Exception as ex:
        logger.error(f"Describe request failed: {ex}")
        raise GenerationError(
            f"Failed to generate a detailed prompt: {getattr(ex, 'message', None) or ex}",
            quota_exhausted=is_quota_error(ex),
        ) from ex

    if not response.text:
        logger.warning(f"Describe returned no text: {getattr(response, 'prompt_feedback', None)}")
        raise GenerationError("The image could not be described. It may have been blocked.")

    try:
        description = ImageDescription.model_validate_json(response.text)
    except ValueError as ex:
        logger.error(f"Could not parse describe response: {ex}. Raw response: {response.text}")
        raise GenerationError("Failed to generate a detailed prompt. The response was malformed.") from ex

    if not description.prompt.strip():
        raise GenerationError("Failed to generate a detailed prompt. The response was empty.")
    return description


def translate_text(text: str, language: str, client: genai.Client | None = None) -> str:
    """Translates text to a language name ("Indonesian") or code ("ID").

    Raises:
        TranslationError: On API failure or an empty translation.
    """
    client = client or get_client()
    language = LANGUAGES.get(language, language)

    try:
        with track_model_call(model_name=config.MODEL_ID, language=language, text_length=len(text)):
            response = client.models.generate_content(
                model=config.MODEL_ID,
                contents=TRANSLATE_TEMPLATE.format(language=language, text=text),
            )
    except Exception as ex:
        logger.error(f"Translation to {language} failed: {ex}")
        raise TranslationError(
            f"Translation to {language} failed.", quota_exhausted=is_quota_error(ex)
        ) from ex

    translated = (response.text or "").strip()
    if not translated:
        raise TranslationError(f"Translation to {language} failed.")
    return translated


def _response_parts(response) -> list:
    if not response.candidates:
        return []
    content = response.candidates[0].content
    if content is None or not content.parts:
        return []
    return content.parts


def edit_images(
    images: list[ImageInput], instruction: str, client: genai.Client | None = None
) -> list[GenerationResult]:
    """Sends images plus an edit instruction to the image model.

    Returns:
        The response parts in order, images as data URIs.

    Raises:
        GenerationError: On API failure, or when the response has no content.
    """
    client = client or get_client()
    contents = [_image_part(image) for image in images]
    contents.append(instruction)

    try:
        with track_model_call(
            model_name=config.IMAGE_EDIT_MODEL_ID,
            num_input_images=len(images),
            prompt_length=len(instruction),
        ) as details:
            response = client.models.generate_content(
                model=config.IMAGE_EDIT_MODEL_ID,
                contents=contents,
                config=types.GenerateContentConfig(response_modalities=["IMAGE", "TEXT"]),
            )
            details["num_parts"] = len(_response_parts(response))
    except Exception as ex:
        logger.error(f"Image edit request failed: {ex}")
        raise GenerationError(
            getattr(ex, "message", None) or str(ex), quota_exhausted=is_quota_error(ex)
        ) from ex

    results = []
    for part in _response_parts(response):
        if part.inline_data and part.inline_data.data:
            mime_type = part.inline_data.mime_type or "image/png"
            results.append(
                GenerationResult(kind="image", value=to_data_uri(part.inline_data.data, mime_type))
            )
        elif part.text:
            results.append(GenerationResult(kind="text", value=part.text))

    if not results:
        feedback = getattr(response, "prompt_feedback", None)
        logger.warning(f"Image edit returned no content. Feedback: {feedback}")
        raise GenerationError(
            "The model returned no content. The request may have been blocked; "
            "try a different prompt or images."
        )
    return results
