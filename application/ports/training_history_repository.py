"""
Training History Repository Interface (Port).

Read access to completed workouts, in the two shapes the engine consumes:
fatigue events for the recovery model and completed sessions for weekly
volume tracking.
"""
from datetime import datetime
from typing import List, Protocol

from domain.models.recovery import FatigueEvent
from domain.models.workout import WorkoutSession


class TrainingHistoryRepository(Protocol):
    """Abstract interface for training history queries."""

    def get_recent_fatigue_events(self, since: datetime) -> List[FatigueEvent]:
        """
        Get fatigue events for workouts started at or after ``since``.

        Only completed, non-warm-up sets contribute load.

        Args:
            since: Lower bound on workout start

        Returns:
            One FatigueEvent per (muscle group, workout)
        """
        ...

    def get_completed_sessions(self, start: datetime, end: datetime) -> List[WorkoutSession]:
        """
        Get workout sessions started in [start, end).

        Args:
            start: Inclusive lower bound
            end: Exclusive upper bound

        Returns:
            WorkoutSession list with their exercises and sets
        """
        ...
