"""
In-Memory Compose Session Repository.

Open workout composers are transient and never persisted; they live in a
dict keyed by session id until saved or cancelled.
"""
import logging
import threading
from typing import Dict, List, Optional

from application.use_cases.compose_workout import ComposeWorkoutSession

logger = logging.getLogger(__name__)


class InMemoryComposeSessionRepository:
    """Keeps open ComposeWorkoutSession objects for the lifetime of the process."""

    def __init__(self) -> None:
        self._sessions: Dict[str, ComposeWorkoutSession] = {}
        self._lock = threading.Lock()

    def add(self, session: ComposeWorkoutSession) -> None:
        with self._lock:
            self._sessions[session.id] = session
        logger.debug(f"Opened compose session {session.id}")

    def get(self, session_id: str) -> Optional[ComposeWorkoutSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def remove(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def list_ids(self) -> List[str]:
        with self._lock:
            return list(self._sessions)
