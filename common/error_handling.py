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

QUOTA_EXHAUSTED_MESSAGES = {
    "jiplak": "You have reached the usage limit for prompt generation. Please try again later.",
    "nano": (
        "Anda telah melebihi batas penggunaan gratis untuk fitur ini. "
        "Silakan coba lagi nanti atau periksa paket dan tagihan Anda di Google AI Studio."
    ),
}


class GenerationError(Exception):
    """Raised when the model fails to describe or edit an image."""

    def __init__(self, message, quota_exhausted: bool = False):
        self.message = message
        self.quota_exhausted = quota_exhausted
        super().__init__(self.message)


class TranslationError(Exception):
    """Raised when a prompt could not be translated."""

    def __init__(self, message, quota_exhausted: bool = False):
        self.message = message
        self.quota_exhausted = quota_exhausted
        super().__init__(self.message)


class AuthenticationError(Exception):
    """Raised when a PIN does not match any access tier."""

    def __init__(self, message="Invalid PIN. Please try again."):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """User input is incomplete. The message is shown to the user as is."""

    pass


def is_quota_error(ex: Exception) -> bool:
    """Checks an SDK error for the provider's quota exhaustion signals."""
    if getattr(ex, "code", None) == 429:
        return True
    if getattr(ex, "status", None) == "RESOURCE_EXHAUSTED":
        return True
    message = str(ex)
    return "RESOURCE_EXHAUSTED" in message or "quota" in message.lower()


def friendly_error_message(ex: Exception, feature: str) -> str:
    """Turns an exception into the notice shown for the given feature."""
    if getattr(ex, "quota_exhausted", False):
        return QUOTA_EXHAUSTED_MESSAGES.get(feature, QUOTA_EXHAUSTED_MESSAGES["jiplak"])
    message = getattr(ex, "message", None) or str(ex)
    return message or "An unknown error occurred."
