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
"""PIN based access tiers for the app."""

import threading
import time
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from common.analytics import get_logger
from common.error_handling import AuthenticationError
from config.default import Default

config = Default()

logger = get_logger(__name__)

AUTH_STATUS_KEY = "authStatus"
SESSION_EXPIRY_KEY = "sessionExpiry"

DEFAULT_TAB = "jiplak"


class AccessTier(str, Enum):
    NONE = "none"
    LIMITED = "limited"
    FULL = "full"


# Tabs and the tiers allowed to open them.
TAB_TIERS = {
    "jiplak": {AccessTier.LIMITED, AccessTier.FULL},
    "nano": {AccessTier.FULL},
}


@dataclass(frozen=True)
class AccessSession:
    tier: AccessTier = AccessTier.NONE
    expires_at: Optional[int] = None  # epoch milliseconds

    def is_expired(self, now_ms: int) -> bool:
        return self.expires_at is not None and now_ms >= self.expires_at


UNAUTHENTICATED = AccessSession()


def _daemon_timer(interval: float, function: Callable[[], None]):
    timer = threading.Timer(interval, function)
    timer.daemon = True
    return timer


def resolve_tab(tier: AccessTier, tab: str) -> str:
    """Returns the tab to show, falling back to the default when not allowed."""
    if tier in TAB_TIERS.get(tab, set()):
        return tab
    return DEFAULT_TAB


class AccessGate:
    """
    Maps a PIN to an access tier and keeps it in session storage.

    Limited sessions expire after a fixed time. Expiry is reported as soon as
    the clock passes it; a timer also clears the stored entries when it fires.
    Pass timer_factory=None where no background timer should be started.
    """

    def __init__(
        self,
        store: MutableMapping[str, str],
        clock: Callable[[], float] = time.time,
        timer_factory: Optional[Callable] = _daemon_timer,
        limited_pin: Optional[str] = None,
        full_pin: Optional[str] = None,
        limited_minutes: Optional[int] = None,
    ):
        self._store = store
        self._clock = clock
        self._timer_factory = timer_factory
        self._timer = None
        self.limited_pin = limited_pin if limited_pin is not None else config.LIMITED_PIN
        self.full_pin = full_pin if full_pin is not None else config.FULL_PIN
        minutes = limited_minutes if limited_minutes is not None else config.LIMITED_SESSION_MINUTES
        self.limited_duration_ms = minutes * 60 * 1000

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _stored_session(self) -> AccessSession:
        status = self._store.get(AUTH_STATUS_KEY)
        if status == AccessTier.FULL.value:
            return AccessSession(AccessTier.FULL)
        if status == AccessTier.LIMITED.value:
            try:
                expires_at = int(self._store.get(SESSION_EXPIRY_KEY, ""))
            except ValueError:
                # A limited session without a readable expiry is not valid.
                return UNAUTHENTICATED
            return AccessSession(AccessTier.LIMITED, expires_at)
        return UNAUTHENTICATED

    @property
    def session(self) -> AccessSession:
        session = self._stored_session()
        if session.is_expired(self._now_ms()):
            return UNAUTHENTICATED
        return session

    @property
    def tier(self) -> AccessTier:
        return self.session.tier

    def submit_pin(self, pin: str) -> AccessSession:
        """Grants the tier matching the PIN.

        Raises:
            AuthenticationError: If the PIN matches no tier.
        """
        pin = (pin or "").strip()
        if pin and pin == self.limited_pin:
            self._cancel_timer()
            expires_at = self._now_ms() + self.limited_duration_ms
            self._store[AUTH_STATUS_KEY] = AccessTier.LIMITED.value
            self._store[SESSION_EXPIRY_KEY] = str(expires_at)
            self._schedule_expiry(expires_at)
            logger.info(f"Limited access granted until {expires_at}")
            return AccessSession(AccessTier.LIMITED, expires_at)
        if pin and pin == self.full_pin:
            self._cancel_timer()
            self._store[AUTH_STATUS_KEY] = AccessTier.FULL.value
            self._store.pop(SESSION_EXPIRY_KEY, None)
            logger.info("Full access granted")
            return AccessSession(AccessTier.FULL)
        logger.info("Rejected PIN attempt")
        raise AuthenticationError()

    def logout(self) -> None:
        self._cancel_timer()
        self._store.pop(AUTH_STATUS_KEY, None)
        self._store.pop(SESSION_EXPIRY_KEY, None)

    def restore(self) -> AccessSession:
        """Rebuilds the session from storage, clearing it if it has expired."""
        stored = self._stored_session()
        if stored.tier is AccessTier.NONE or stored.is_expired(self._now_ms()):
            self.logout()
            return UNAUTHENTICATED
        if stored.tier is AccessTier.LIMITED:
            self._schedule_expiry(stored.expires_at)
        return stored

    def _schedule_expiry(self, expires_at: int) -> None:
        if self._timer_factory is None:
            return
        self._cancel_timer()
        delay = max(expires_at - self._now_ms(), 0) / 1000
        self._timer = self._timer_factory(delay, lambda: self._on_expiry(expires_at))
        self._timer.start()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_expiry(self, expires_at: int) -> None:
        self._timer = None
        # Only clear the session this timer was scheduled for.
        if self._stored_session() == AccessSession(AccessTier.LIMITED, expires_at):
            logger.info("Limited session expired")
            self._store.pop(AUTH_STATUS_KEY, None)
            self._store.pop(SESSION_EXPIRY_KEY, None)
