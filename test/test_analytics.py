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

import json
import logging

import pytest

from common.analytics import (
    JsonFormatter,
    events_logger,
    log_access_event,
    track_click,
    track_model_call,
)


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def events():
    handler = ListHandler()
    events_logger.addHandler(handler)
    yield handler.records
    events_logger.removeHandler(handler)


def payload(record) -> dict:
    return json.loads(JsonFormatter().format(record))


class TestEvents:
    def test_model_call_success(self, events):
        with track_model_call("gemini-2.5-flash", prompt_length=12) as details:
            details["num_parts"] = 2

        event = payload(events[-1])
        assert event["event_type"] == "model_call"
        assert event["status"] == "success"
        assert event["details"] == {"prompt_length": 12, "num_parts": 2}

    def test_model_call_failure_is_reraised(self, events):
        with pytest.raises(RuntimeError):
            with track_model_call("gemini-2.5-flash"):
                raise RuntimeError("boom")

        event = payload(events[-1])
        assert event["status"] == "failure"
        assert event["severity"] == "ERROR"
        assert event["details"]["error"] == "boom"

    def test_rejected_pin_is_a_warning(self, events):
        log_access_event("rejected")
        event = payload(events[-1])
        assert event["severity"] == "WARNING"
        assert event["outcome"] == "rejected"

    def test_track_click_runs_handler(self, events):
        @track_click(element_id="some_button")
        def handler(value):
            return value * 2

        assert handler(21) == 42
        assert payload(events[-1])["element_id"] == "some_button"
