# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import base64
import binascii
import io

from PIL import Image, UnidentifiedImageError

from common.analytics import get_logger

logger = get_logger(__name__)

ACCEPTED_IMAGE_TYPES = ["image/png", "image/jpeg", "image/webp"]


def to_data_uri(data: bytes, mime_type: str) -> str:
    """Encodes raw bytes as a base64 data URI."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def split_data_uri(data_uri: str) -> tuple[str, bytes]:
    """Splits a base64 data URI into (mime_type, bytes).

    Raises:
        ValueError: If the string is not a base64 data URI.
    """
    if not data_uri or not data_uri.startswith("data:"):
        raise ValueError("Not a data URI.")
    header, _, payload = data_uri.partition(",")
    if not header.endswith(";base64"):
        raise ValueError("Only base64 data URIs are supported.")
    mime_type = header[len("data:") : -len(";base64")]
    try:
        return mime_type, base64.b64decode(payload, validate=True)
    except binascii.Error as ex:
        raise ValueError(f"Invalid base64 payload: {ex}") from ex


def get_image_dimensions(image_bytes: bytes) -> tuple[int, int] | None:
    """Retrieves the width and height of an encoded image.

    Returns:
        A tuple (width, height), or None if the bytes are not a readable image.
    """
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            return img.width, img.height
    except (UnidentifiedImageError, OSError) as e:
        logger.info(f"Could not read image dimensions: {e}")
        return None


_EXTENSIONS = {"image/png": "png", "image/jpeg": "jpg", "image/webp": "webp"}


def download_filename(data_uri: str, stem: str) -> str:
    """A file name for saving a data URI, with the extension of its MIME type."""
    try:
        mime_type, _ = split_data_uri(data_uri)
    except ValueError:
        mime_type = ""
    return f"{stem}.{_EXTENSIONS.get(mime_type, 'png')}"
