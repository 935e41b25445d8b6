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

from dataclasses import field

import mesop as me


@me.stateclass
class PageState:
    """Nano Banana tab state"""

    # pylint: disable=invalid-field-call

    # Input
    image_data_uris: list[str] = field(default_factory=list)
    image_names: list[str] = field(default_factory=list)
    uploader_key: int = 0
    prompt: str = ""
    resolution: str = "Default"
    target_language: str = "ID"

    # Requests
    is_generating: bool = False
    is_translating: bool = False
    error_message: str = ""

    # Undo/redo history, see models/history.py
    history: list[list[dict]] = field(default_factory=list)
    history_index: int = -1

    # UI
    show_snackbar: bool = False
    snackbar_message: str = ""
