"""
GetWeeklyVolume Use Case.

Builds the weekly volume tracker for the week containing a reference time
from the sessions completed in that week.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Sequence

from application.ports import TrainingHistoryRepository
from backend.core.engine_config import AdaptiveEngineConfig, resolve_config
from backend.core.volume_tracker import (
    aggregate_weekly_volume,
    compute_weekly_volume,
    get_week_start,
    get_weekly_progress,
)
from domain.models import MuscleGroup, VolumeTarget, WeeklyProgress, WeeklyVolumeTracker

logger = logging.getLogger(__name__)


@dataclass
class GetWeeklyVolumeResult:
    """Result of the GetWeeklyVolume use case execution."""

    success: bool
    tracker: Optional[WeeklyVolumeTracker] = None
    progress: Optional[WeeklyProgress] = None
    error: Optional[str] = None

    @property
    def volume_needs(self) -> Dict[MuscleGroup, float]:
        return self.tracker.volume_needs if self.tracker else {}


class GetWeeklyVolumeUseCase:
    """
    Use case for the current week's volume against targets.

    Workflow:
    1. Resolve the Monday-start week containing the reference time
    2. Load sessions completed in that week
    3. Credit completed sets per muscle group and compare to targets
    """

    def __init__(
        self,
        history_repo: TrainingHistoryRepository,
        config: Optional[AdaptiveEngineConfig] = None,
        targets: Optional[Sequence[VolumeTarget]] = None,
    ) -> None:
        self._history_repo = history_repo
        self._config = resolve_config(config)
        self._targets = targets

    def execute(self, reference: Optional[datetime] = None) -> GetWeeklyVolumeResult:
        reference = reference or datetime.now(timezone.utc)
        week_start = get_week_start(reference)
        week_end = week_start + timedelta(days=7)

        try:
            sessions = self._history_repo.get_completed_sessions(week_start, week_end)
        except Exception:
            logger.exception(f"Failed to load sessions for week of {week_start.date()}")
            return GetWeeklyVolumeResult(success=False, error="repository_error")

        logger.debug(f"Week of {week_start.date()}: {len(sessions)} sessions")
        volumes = aggregate_weekly_volume(sessions, self._config)
        tracker = compute_weekly_volume(week_start, volumes, self._targets)
        return GetWeeklyVolumeResult(
            success=True,
            tracker=tracker,
            progress=get_weekly_progress(tracker, self._config),
        )
