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

import mesop as me


@me.stateclass
class PageState:
    """Prompt-from-photo tab state"""

    # Input
    image_data_uri: str = ""
    image_name: str = ""
    uploader_key: int = 0

    # Request tracking
    is_loading: bool = False
    describe_token: int = 0
    error_message: str = ""

    # Prompt context
    description: str = ""
    subject_count: int = 0
    aspect_ratio: str = "Original"
    original_aspect_ratio: str | None = None
    use_face_reference: bool = True
    use_separate_references: bool = True

    # Editor
    final_prompt: str = ""
    prompt_overridden: bool = False
    is_translating: bool = False
    target_language: str = "ID"

    # UI
    show_snackbar: bool = False
    snackbar_message: str = ""
