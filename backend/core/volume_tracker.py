"""
Weekly Volume Tracker.

Aggregates completed working sets per muscle group within a Monday-start week
and compares them against weekly targets, producing remaining-set debt.

Crediting is pattern-level: each exercise credits every primary muscle group
of its movement pattern with one full set per completed set, regardless of
the exercise's fine-grained split. Isolation exercises credit nothing under
this mapping.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from backend.core.engine_config import AdaptiveEngineConfig, resolve_config
from domain.models.exercise import MovementPattern
from domain.models.muscle_group import MuscleGroup
from domain.models.volume import VolumeTarget, WeeklyProgress, WeeklyVolumeTracker
from domain.models.workout import WorkoutSession

logger = logging.getLogger(__name__)


def get_week_start(value: Union[date, datetime]) -> datetime:
    """
    Roll a date back to the most recent Monday at local midnight.

    Sunday rolls back six days (never forward). A Monday maps to itself.
    Timezone info on a datetime input is preserved.

    Args:
        value: Any date or datetime

    Returns:
        Monday 00:00 of the week containing ``value``
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    monday = value - timedelta(days=value.weekday())
    return monday.replace(hour=0, minute=0, second=0, microsecond=0)


def infer_primary_muscle_groups(
    movement_pattern: MovementPattern,
    config: Optional[AdaptiveEngineConfig] = None,
) -> Tuple[MuscleGroup, ...]:
    """Primary muscle groups credited for a movement pattern."""
    config = resolve_config(config)
    return tuple(config.pattern_muscle_groups.get(movement_pattern, ()))


def calculate_muscle_group_volumes(
    session: WorkoutSession,
    config: Optional[AdaptiveEngineConfig] = None,
) -> Dict[MuscleGroup, float]:
    """
    Completed sets credited per muscle group for one session.

    Example:
        3 completed sets of a push exercise -> pecs 3, delts 3, triceps 3
    """
    volumes: Dict[MuscleGroup, float] = {}
    for group in session.exercises:
        set_count = group.completed_set_count
        if set_count == 0:
            continue
        for muscle_group in infer_primary_muscle_groups(group.exercise.movement_pattern, config):
            volumes[muscle_group] = volumes.get(muscle_group, 0.0) + set_count
    return volumes


def aggregate_weekly_volume(
    sessions: Iterable[WorkoutSession],
    config: Optional[AdaptiveEngineConfig] = None,
) -> Dict[MuscleGroup, float]:
    """Sum credited sets across sessions."""
    totals: Dict[MuscleGroup, float] = {}
    for session in sessions:
        for muscle_group, sets in calculate_muscle_group_volumes(session, config).items():
            totals[muscle_group] = totals.get(muscle_group, 0.0) + sets
    return totals


def compute_weekly_volume(
    week_start: Union[date, datetime],
    completed_set_counts: Mapping[MuscleGroup, float],
    targets: Optional[Sequence[VolumeTarget]] = None,
) -> WeeklyVolumeTracker:
    """
    Build the tracker for a week.

    Args:
        week_start: Any instant in the week; normalized to Monday midnight
        completed_set_counts: Credited sets per muscle group
        targets: Weekly targets (defaults to DEFAULT_VOLUME_TARGETS)

    Returns:
        WeeklyVolumeTracker with remaining = max(0, min_sets - current)
    """
    return WeeklyVolumeTracker.create(
        week_start=get_week_start(week_start),
        current_volume=completed_set_counts,
        targets=targets,
    )


def get_weekly_progress(
    tracker: WeeklyVolumeTracker,
    config: Optional[AdaptiveEngineConfig] = None,
) -> WeeklyProgress:
    """
    Progress against minimum targets.

    progress[mg] = min(100, current / min_sets * 100); a zero minimum counts
    as complete. On track when the average progress reaches the threshold
    (70% by default). A tracker without targets is trivially on track.
    """
    config = resolve_config(config)

    progress: Dict[MuscleGroup, float] = {}
    for target in tracker.targets:
        current = tracker.current_volume.get(target.muscle_group, 0.0)
        if target.min_sets == 0:
            progress[target.muscle_group] = 100.0
        else:
            progress[target.muscle_group] = min(current / target.min_sets * 100, 100.0)

    if progress:
        average = sum(progress.values()) / len(progress)
    else:
        average = 100.0

    return WeeklyProgress(
        tracker=tracker,
        progress_percentage=progress,
        is_on_track=average >= config.on_track_threshold,
    )


def prioritize_volume_needs(volume_needs: Mapping[MuscleGroup, float]) -> List[MuscleGroup]:
    """
    Muscle groups ordered by remaining-set debt, highest first.

    Ties keep the mapping's insertion order.
    """
    return [mg for mg, _ in sorted(volume_needs.items(), key=lambda item: -item[1])]
