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
"""Browser session identity shared by FastAPI and the Mesop app."""

import uuid

import flask
from fastapi import Request

SESSION_COOKIE = "session_id"


async def set_session_cookie(request: Request, call_next):
    """
    FastAPI middleware that gives every browser a session id cookie.

    The cookie has no max-age, so it lasts until the browser session ends.
    """
    session_id = request.cookies.get(SESSION_COOKIE) or str(uuid.uuid4())
    request.state.session_id = session_id

    response = await call_next(request)

    response.set_cookie(key=SESSION_COOKIE, value=session_id, httponly=True, samesite="Lax")
    return response


def browser_session_id() -> str | None:
    """The session cookie of the request a Mesop handler is running for."""
    if not flask.has_request_context():
        return None
    return flask.request.cookies.get(SESSION_COOKIE) or None
