"""
Compose Session Repository Interface (Port).

Workout composer sessions hold transient drafts between user actions. They
are never written to the object store; this port only decides where they
live while a composer is open.
"""
from typing import TYPE_CHECKING, List, Optional, Protocol

if TYPE_CHECKING:
    from application.use_cases.compose_workout import ComposeWorkoutSession


class ComposeSessionRepository(Protocol):
    """Abstract interface for keeping open composer sessions."""

    def add(self, session: "ComposeWorkoutSession") -> None:
        """
        Keep a newly opened session.

        Args:
            session: Session to keep (keyed by its id)
        """
        ...

    def get(self, session_id: str) -> Optional["ComposeWorkoutSession"]:
        """
        Get an open session.

        Args:
            session_id: Session id

        Returns:
            The session or None if unknown
        """
        ...

    def remove(self, session_id: str) -> bool:
        """
        Forget a session (saved or cancelled).

        Args:
            session_id: Session id

        Returns:
            True if the session was known
        """
        ...

    def list_ids(self) -> List[str]:
        """Ids of all open sessions."""
        ...
