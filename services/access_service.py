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
"""Access checks for Mesop event handlers."""

import uuid

from common.auth import browser_session_id
from common.error_handling import AuthenticationError
from common.session_store import session_store
from models.access import TAB_TIERS, AccessGate, AccessTier

SESSION_EXPIRED_MESSAGE = "Your session has expired. Please enter your PIN again."


def gate_for(app_state) -> AccessGate:
    """
    The gate over this browser session's server-side entries.

    Mesop handlers are short lived, so no timer is started here; an expired
    limited session reads as unauthenticated on the next event instead.
    """
    if not app_state.session_id:
        return AccessGate({}, timer_factory=None)
    return AccessGate(session_store.entries(app_state.session_id), timer_factory=None)


def start_session(app_state) -> AccessGate:
    """Binds the app state to the browser's session cookie and restores access."""
    app_state.session_id = browser_session_id() or app_state.session_id or str(uuid.uuid4())
    gate = gate_for(app_state)
    gate.restore()
    return gate


def require_tier(app_state, *tiers: AccessTier) -> AccessTier:
    """Returns the current tier, or raises AuthenticationError if it is not allowed.

    An expired session is cleared, so the next render shows the PIN form.
    """
    gate = gate_for(app_state)
    tier = gate.tier
    if tier is AccessTier.NONE:
        gate.logout()
        raise AuthenticationError(SESSION_EXPIRED_MESSAGE)
    if tier not in tiers:
        raise AuthenticationError("Your session does not include this feature.")
    return tier


def require_feature(app_state, feature: str) -> AccessTier:
    """require_tier for the tiers allowed to use a tab ("jiplak" or "nano")."""
    return require_tier(app_state, *TAB_TIERS[feature])


def allow_feature(app_state, feature: str) -> bool:
    """Checks access before a handler calls the model.

    When refused, the reason is kept on the app state for the PIN form.
    """
    try:
        require_feature(app_state, feature)
    except AuthenticationError as ex:
        app_state.pin_error = ex.message
        return False
    return True
