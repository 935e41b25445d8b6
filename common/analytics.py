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
"""
Structured logging for the app.

Every event is one JSON log line. On Cloud Run the records go through the
Cloud Logging handler, which turns the extra fields into a jsonPayload;
locally they are printed by JsonFormatter.
"""

import functools
import json
import logging
import os
import time
from contextlib import contextmanager

import mesop as me
from google.cloud import logging as cloud_logging

from common.session_store import session_store

EVENT_FIELD = "event"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with the event fields inlined."""

    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "severity": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, EVENT_FIELD, None) or {})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    """Returns a module logger with the app's handler attached once."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    if os.environ.get("K_SERVICE"):
        handler = cloud_logging.Client().get_default_handler()
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger


events_logger = get_logger("jiplak.events")


def _session_context() -> dict:
    """Tab, session and tier of the current Mesop request, if there is one."""
    from state.state import AppState

    try:
        app_state = me.state(AppState)
    except Exception:
        # No Mesop context: tests, timers and other threads.
        return {"tab": "unknown", "session_id": "unknown", "tier": "unknown"}
    return {
        "tab": app_state.active_tab,
        "session_id": app_state.session_id,
        "tier": session_store.entries(app_state.session_id).get("authStatus", "none"),
    }


def _emit(event_type: str, message: str, level: int = logging.INFO, **fields):
    event = {"event_type": event_type, **_session_context(), **fields}
    events_logger.log(level, message, extra={EVENT_FIELD: event})


def log_page_view(page_name: str):
    _emit("page_view", f"Page view: {page_name}", page_name=page_name)


def log_ui_click(element_id: str, **extras):
    _emit("ui_click", f"UI click: {element_id}", element_id=element_id, **extras)


def log_access_event(outcome: str, tier: str = "none"):
    """Audits PIN attempts and logouts. The PIN itself is never logged."""
    level = logging.WARNING if outcome == "rejected" else logging.INFO
    _emit("access", f"Access {outcome}", level=level, outcome=outcome, granted_tier=tier)


def track_click(element_id: str):
    """Decorator that logs a click before running a Mesop event handler."""

    def decorator(handler_function):
        @functools.wraps(handler_function)
        def wrapper(*args, **kwargs):
            log_ui_click(element_id)
            return handler_function(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def track_model_call(model_name: str, **details):
    """Logs duration and outcome of the model call made inside the block.

    Yields the details dict so the caller can add fields once the response
    is known. Exceptions are logged and re-raised.
    """
    start = time.perf_counter()
    status = "success"
    try:
        yield details
    except Exception as ex:
        status = "failure"
        details["error"] = str(ex)
        raise
    finally:
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        _emit(
            "model_call",
            f"Model call: {model_name} ({status})",
            level=logging.INFO if status == "success" else logging.ERROR,
            model_name=model_name,
            status=status,
            duration_ms=duration_ms,
            details=details,
        )
