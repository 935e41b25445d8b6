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

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ImageInput(BaseModel):
    """An uploaded image as sent to the model."""

    data: bytes
    mime_type: str
    name: str = ""


class ImageDescription(BaseModel):
    """
    Response schema for the describe call.
    Also used as the `response_schema` of the Gemini request.
    """

    prompt: str = Field(
        description="A single, highly detailed and descriptive prompt that recreates the image."
    )
    subject_count: int = Field(
        default=0, ge=0, description="The number of people visible in the image."
    )


class GenerationResult(BaseModel):
    """One part of a Nano Banana response: text, or an image as a data URI."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text", "image"]
    value: str
