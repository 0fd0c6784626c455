"""In-memory storage for session state."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.state import AppState


class StateStore(Protocol):
    """Storage interface for per-session application state."""

    def get(self, session_id: UUID) -> AppState | None:
        """Return the state for a session if present and not expired."""

    def save(self, session_id: UUID, state: AppState) -> None:
        """Store the state for a session, refreshing its TTL."""


@dataclass
class _StoreEntry:
    state: AppState
    expires_at: datetime


@dataclass
class InMemoryStateStore(StateStore):
    """Process-local state store; sessions vanish on restart or expiry."""

    ttl_seconds: int
    _entries: dict[UUID, _StoreEntry]

    def __init__(self, ttl_seconds: int = 86400) -> None:
        self.ttl_seconds = ttl_seconds
        self._entries = {}

    def get(self, session_id: UUID) -> AppState | None:
        """Return session state if it hasn't expired."""
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(session_id, None)
            return None
        return entry.state

    def save(self, session_id: UUID, state: AppState) -> None:
        """Store session state with a fresh TTL and drop expired sessions."""
        now = datetime.now(tz=UTC)
        expires_at = now + timedelta(seconds=self.ttl_seconds)
        self._entries[session_id] = _StoreEntry(state=state, expires_at=expires_at)
        self._sweep(now)

    def _sweep(self, now: datetime) -> None:
        expired = [key for key, entry in self._entries.items() if now >= entry.expires_at]
        for key in expired:
            del self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)
