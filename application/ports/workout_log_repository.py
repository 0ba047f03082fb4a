"""
Workout log repository port (interface).

This Protocol defines the contract for reading a user's logged workouts.
Persistence itself lives outside this service; implementations only need to
return recent sessions already sorted newest-first.
"""

from typing import List, Protocol

from models.workout import WorkoutSession


class WorkoutLogRepository(Protocol):
    """
    Read-only access to logged workout sessions.

    Used by the history aggregator and the deload monitor. Sessions are
    snapshots; the engine never writes back through this port.
    """

    def get_recent_sessions(self, user_id: str, limit: int) -> List[WorkoutSession]:
        """
        Get a user's most recent workout sessions.

        Args:
            user_id: The user's ID
            limit: Maximum number of sessions to return

        Returns:
            Sessions ordered by date descending (newest first)
        """
        ...
