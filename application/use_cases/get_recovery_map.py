"""
GetRecoveryMap Use Case.

Loads recent fatigue events from training history and evaluates the
recovery model for every muscle group at a point in time.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from application.ports import TrainingHistoryRepository
from backend.core.engine_config import AdaptiveEngineConfig, resolve_config
from backend.core.recovery_model import calculate_recovery, group_by_category
from domain.models import MuscleGroupCategory, MuscleRecoveryStatus

logger = logging.getLogger(__name__)


@dataclass
class GetRecoveryMapResult:
    """Result of the GetRecoveryMap use case execution."""

    success: bool
    evaluated_at: Optional[datetime] = None
    statuses: List[MuscleRecoveryStatus] = field(default_factory=list)
    by_category: List[Tuple[MuscleGroupCategory, List[MuscleRecoveryStatus]]] = field(
        default_factory=list
    )
    error: Optional[str] = None


class GetRecoveryMapUseCase:
    """
    Use case for computing the per-muscle-group recovery map.

    Usage:
        >>> use_case = GetRecoveryMapUseCase(history_repo=history_repo)
        >>> result = use_case.execute()
        >>> [s.recovery_percentage for s in result.statuses]
    """

    def __init__(
        self,
        history_repo: TrainingHistoryRepository,
        config: Optional[AdaptiveEngineConfig] = None,
    ) -> None:
        self._history_repo = history_repo
        self._config = resolve_config(config)

    def execute(self, now: Optional[datetime] = None) -> GetRecoveryMapResult:
        """
        Compute recovery as of ``now`` (current UTC time if omitted).

        Only events inside the recovery window are requested from history.
        """
        now = now or datetime.now(timezone.utc)
        since = now - timedelta(hours=self._config.recovery_window_hours)

        try:
            events = self._history_repo.get_recent_fatigue_events(since)
        except Exception:
            logger.exception("Failed to load fatigue events")
            return GetRecoveryMapResult(success=False, error="repository_error")

        logger.debug(f"Evaluating recovery from {len(events)} fatigue events")
        statuses = calculate_recovery(events, now, self._config)
        return GetRecoveryMapResult(
            success=True,
            evaluated_at=now,
            statuses=statuses,
            by_category=group_by_category(statuses),
        )
