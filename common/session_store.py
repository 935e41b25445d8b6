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
"""Server-side key/value entries for each browser session."""

import threading
from collections.abc import Iterator, MutableMapping


class SessionStore:
    """
    Entries per session id, kept in process memory.

    A session's entries outlive Mesop page state, so they survive a page
    reload for as long as the browser keeps its session cookie.
    """

    def __init__(self):
        self._sessions: dict[str, dict[str, str]] = {}
        self._lock = threading.Lock()

    def entries(self, session_id: str) -> "SessionEntries":
        return SessionEntries(self, session_id)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


class SessionEntries(MutableMapping):
    """A mapping view over one session's entries. Empty sessions are dropped."""

    def __init__(self, store: SessionStore, session_id: str):
        self._store = store
        self.session_id = session_id

    def _snapshot(self) -> dict[str, str]:
        with self._store._lock:
            return dict(self._store._sessions.get(self.session_id, {}))

    def __getitem__(self, key: str) -> str:
        return self._snapshot()[key]

    def __setitem__(self, key: str, value: str) -> None:
        with self._store._lock:
            self._store._sessions.setdefault(self.session_id, {})[key] = value

    def __delitem__(self, key: str) -> None:
        with self._store._lock:
            entries = self._store._sessions.get(self.session_id, {})
            del entries[key]
            if not entries:
                self._store._sessions.pop(self.session_id, None)

    def __iter__(self) -> Iterator[str]:
        return iter(self._snapshot())

    def __len__(self) -> int:
        return len(self._snapshot())


session_store = SessionStore()
