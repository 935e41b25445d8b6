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

import typing

import mesop as me


@me.web_component(path="./download_button.js")
def download_button(
    *,
    src: str,
    filename: str,
    on_saved: typing.Callable[[me.WebEvent], None] | None = None,
    label: str = "Save",
    key: str | None = None,
):
    """Saves a data URI to disk under `filename`, without opening a new tab."""
    return me.insert_web_component(
        key=key,
        name="download-button",
        properties={
            "src": src,
            "filename": filename,
            "label": label,
        },
        events={
            "savedEvent": on_saved,
        },
    )
