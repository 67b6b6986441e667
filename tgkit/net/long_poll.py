"""Long polling for updates and dispatching them to an event handler."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class _UpdateSource(Protocol):
    def get_updates(
        self,
        offset: int,
        limit: int,
        timeout: int,
        allowed_updates: Sequence[str] | None,
    ) -> Sequence[Any]: ...


class _UpdateHandler(Protocol):
    def handle_update(self, update: Any) -> None: ...


class LongPoll:
    """Fetches updates in batches and passes each one to an event handler.

    The offset of the next request is one past the highest update id seen,
    so no update is delivered twice.
    """

    def __init__(
        self,
        api: _UpdateSource,
        event_handler: _UpdateHandler,
        limit: int = 100,
        timeout: int = 10,
        allowed_updates: Sequence[str] | None = None,
    ) -> None:
        self.api = api
        self.event_handler = event_handler
        self.limit = limit
        self.timeout = timeout
        self.allowed_updates = allowed_updates
        self.last_update_id = 0

    def start(self) -> None:
        """Fetch one batch of updates and dispatch them; meant to run in a loop."""
        updates = self.api.get_updates(
            offset=self.last_update_id,
            limit=self.limit,
            timeout=self.timeout,
            allowed_updates=self.allowed_updates,
        )
        for update in updates:
            if update.update_id >= self.last_update_id:
                self.last_update_id = update.update_id + 1
            self.event_handler.handle_update(update)