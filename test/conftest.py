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

import io
import os
import sys
from types import SimpleNamespace

import pytest
from PIL import Image

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


def make_image_bytes(width: int = 64, height: int = 32, fmt: str = "PNG") -> bytes:
    """Creates a small solid image and returns its encoded bytes."""
    img = Image.new("RGB", (width, height), color="blue")
    byte_io = io.BytesIO()
    img.save(byte_io, fmt)
    return byte_io.getvalue()


def text_part(text: str):
    return SimpleNamespace(text=text, inline_data=None)


def image_part(data: bytes, mime_type: str = "image/png"):
    return SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type))


def make_response(text=None, parts=None, prompt_feedback=None):
    """A stand-in for a GenerateContentResponse."""
    candidates = []
    if parts is not None:
        candidates = [SimpleNamespace(content=SimpleNamespace(parts=parts))]
    return SimpleNamespace(text=text, candidates=candidates, prompt_feedback=prompt_feedback)


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


class FakeClient:
    """Records generate_content calls and returns a canned response or error."""

    def __init__(self, response=None, error=None):
        self.models = FakeModels(response=response, error=error)


class FakeAPIError(Exception):
    """Mimics the SDK's APIError attributes."""

    def __init__(self, code: int, status: str, message: str):
        self.code = code
        self.status = status
        self.message = message
        super().__init__(f"{code} {status}. {message}")


@pytest.fixture
def png_bytes():
    return make_image_bytes()


@pytest.fixture
def fake_client_factory():
    return FakeClient
