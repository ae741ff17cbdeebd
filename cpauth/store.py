"""In-memory registry of public identities and pending challenges."""

from __future__ import annotations

import secrets
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from .constants import AUTH_ID_BYTES
from .exceptions import UnknownChallenge, UnknownUser, UserAlreadyRegistered


@dataclass(frozen=True)
class UserRecord:
    """Public identity registered by a prover."""

    user: str
    y1: int
    y2: int


@dataclass(frozen=True)
class ChallengeSession:
    """One pending authentication attempt."""

    auth_id: str
    user: str
    r1: int
    r2: int
    c: int
    created_at: float = field(default_factory=time.monotonic)


class SessionStore:
    """Thread safe maps from user to identity and from auth id to session.

    Every mutation runs under a single lock. Sessions are single use: once
    taken they are gone, whatever the outcome of verification. With a ``ttl``
    sessions older than ``ttl`` seconds behave as if they never existed.
    """

    def __init__(
        self,
        ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._users: Dict[str, UserRecord] = {}
        self._sessions: Dict[str, ChallengeSession] = {}

    def register_user(self, user: str, y1: int, y2: int) -> UserRecord:
        record = UserRecord(user=user, y1=y1, y2=y2)
        with self._lock:
            if user in self._users:
                raise UserAlreadyRegistered(f"User '{user}' is already registered")
            self._users[user] = record
        return record

    def get_user(self, user: str) -> Optional[UserRecord]:
        with self._lock:
            return self._users.get(user)

    def create_challenge(self, user: str, r1: int, r2: int, c: int) -> ChallengeSession:
        with self._lock:
            if user not in self._users:
                raise UnknownUser(f"User '{user}' not found")
            auth_id = secrets.token_urlsafe(AUTH_ID_BYTES)
            while auth_id in self._sessions:
                auth_id = secrets.token_urlsafe(AUTH_ID_BYTES)
            session = ChallengeSession(
                auth_id=auth_id,
                user=user,
                r1=r1,
                r2=r2,
                c=c,
                created_at=self._clock(),
            )
            self._sessions[auth_id] = session
        return session

    def take_challenge(self, auth_id: str) -> ChallengeSession:
        with self._lock:
            session = self._sessions.pop(auth_id, None)
        if session is None or self._expired(session, self._clock()):
            raise UnknownChallenge(f"AuthId '{auth_id}' not found")
        return session

    def purge_expired(self, now: Optional[float] = None) -> int:
        """Drop stale sessions and return how many were removed."""

        if self.ttl is None:
            return 0
        now = self._clock() if now is None else now
        with self._lock:
            stale = [key for key, session in self._sessions.items() if self._expired(session, now)]
            for key in stale:
                del self._sessions[key]
        return len(stale)

    def pending_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _expired(self, session: ChallengeSession, now: float) -> bool:
        return self.ttl is not None and now - session.created_at > self.ttl


__all__ = ["ChallengeSession", "SessionStore", "UserRecord"]
