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

import pytest

from config.default import Default


class TestDefault:
    def test_api_key_falls_back_to_api_key_variable(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("API_KEY", "fallback-key")
        assert Default().GEMINI_API_KEY == "fallback-key"

    def test_missing_api_key_is_fatal(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        with pytest.raises(RuntimeError, match="GEMINI_API_KEY is not set"):
            Default().require_api_key()

    def test_integer_settings(self, monkeypatch):
        monkeypatch.setenv("LIMITED_SESSION_MINUTES", "5")
        monkeypatch.setenv("MAX_EDIT_IMAGES", "not-a-number")
        config = Default()
        assert config.LIMITED_SESSION_MINUTES == 5
        assert config.MAX_EDIT_IMAGES == 20
