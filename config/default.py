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
"""Application configuration read from the environment."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv(override=True)


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class Default:
    """Defaults for the application, overridable with environment variables."""

    # pylint: disable=invalid-field-call

    # Gemini
    GEMINI_API_KEY: str = field(
        default_factory=lambda: os.environ.get("GEMINI_API_KEY")
        or os.environ.get("API_KEY", "")
    )
    MODEL_ID: str = field(
        default_factory=lambda: os.environ.get("MODEL_ID", "gemini-2.5-flash")
    )
    IMAGE_EDIT_MODEL_ID: str = field(
        default_factory=lambda: os.environ.get(
            "IMAGE_EDIT_MODEL_ID", "gemini-2.5-flash-image-preview"
        )
    )

    # Access gate
    LIMITED_PIN: str = field(default_factory=lambda: os.environ.get("LIMITED_PIN", "69"))
    FULL_PIN: str = field(default_factory=lambda: os.environ.get("FULL_PIN", "24"))
    LIMITED_SESSION_MINUTES: int = field(
        default_factory=lambda: _env_int("LIMITED_SESSION_MINUTES", 15)
    )

    # Nano Banana
    MAX_EDIT_IMAGES: int = field(default_factory=lambda: _env_int("MAX_EDIT_IMAGES", 20))

    APP_ENV: str = field(default_factory=lambda: os.environ.get("APP_ENV", "local"))

    def require_api_key(self) -> str:
        """Returns the provider key, or fails when it is not configured."""
        if not self.GEMINI_API_KEY:
            raise RuntimeError(
                "GEMINI_API_KEY is not set. Add it to the environment or a .env file."
            )
        return self.GEMINI_API_KEY
