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
"""Undo/redo history of Nano Banana results."""

from typing import Iterable

from models.requests import GenerationResult

Snapshot = tuple[GenerationResult, ...]


class EditHistory:
    """
    An ordered list of result snapshots with a cursor.

    Pushing after an undo discards everything past the cursor, so a new edit
    always continues from the snapshot currently on screen.
    """

    def __init__(self, snapshots: Iterable[Iterable[GenerationResult]] = (), cursor: int | None = None):
        self._snapshots: list[Snapshot] = [tuple(s) for s in snapshots]
        last = len(self._snapshots) - 1
        if cursor is None:
            cursor = last
        self._cursor = max(min(cursor, last), 0) if self._snapshots else -1

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def snapshots(self) -> list[Snapshot]:
        return list(self._snapshots)

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def __len__(self) -> int:
        return len(self._snapshots)

    def push(self, snapshot: Iterable[GenerationResult]) -> None:
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(tuple(snapshot))
        self._cursor = len(self._snapshots) - 1

    def undo(self) -> Snapshot:
        if self.can_undo:
            self._cursor -= 1
        return self.current()

    def redo(self) -> Snapshot:
        if self.can_redo:
            self._cursor += 1
        return self.current()

    def current(self) -> Snapshot:
        if not self._snapshots:
            return ()
        return self._snapshots[self._cursor]

    def to_state(self) -> tuple[list[list[dict]], int]:
        """Serialises to plain lists and dicts for Mesop page state."""
        return (
            [[result.model_dump() for result in snapshot] for snapshot in self._snapshots],
            self._cursor,
        )

    @classmethod
    def from_state(cls, snapshots: list[list[dict]], cursor: int) -> "EditHistory":
        return cls(
            ([GenerationResult(**result) for result in snapshot] for snapshot in snapshots),
            cursor,
        )
