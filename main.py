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
"""Serves the Mesop app from FastAPI."""

import os

import mesop as me
from fastapi import FastAPI
from fastapi.middleware.wsgi import WSGIMiddleware

from common.analytics import get_logger
from common.auth import set_session_cookie
from config.default import Default

# Registers the Mesop page routes.
import pages.home  # noqa: F401  pylint: disable=unused-import

logger = get_logger(__name__)


def create_app(config: Default | None = None) -> FastAPI:
    """Builds the FastAPI app. Fails when no Gemini API key is configured."""
    config = config or Default()
    config.require_api_key()

    app = FastAPI(title="JIPLAK_PROMPT")
    app.middleware("http")(set_session_cookie)

    @app.get("/health")
    def health():
        return {"status": "ok", "env": config.APP_ENV}

    app.mount(
        "/",
        WSGIMiddleware(
            me.create_wsgi_app(debug_mode=os.environ.get("DEBUG_MODE", "") == "true")
        ),
    )
    logger.info(f"Starting app in {config.APP_ENV} mode")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 8080)),
        reload=True,
        reload_includes=["*.py"],
        timeout_graceful_shutdown=0,
    )
