"""
Muscle Recovery Model.

Converts a history of training-load events into a per-muscle-group recovery
percentage at a point in time. Pure functions of (events, now); no state.

Model:
- Each event leaves residual fatigue ``e^(-t / tau_adjusted)`` where t is the
  hours elapsed and ``tau_adjusted = tau_base * max(load / baseline, 0.5)``.
  Heavier sessions recover more slowly; very light ones never faster than
  half the base tau.
- Residuals stack additively across events (back-to-back sessions compound).
- recovery = clamp(round_half_up((1 - total_fatigue) * 100), 0, 100).
- Events outside the recovery window (default 7 days) are ignored.
"""

import logging
import math
from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from backend.core.engine_config import AdaptiveEngineConfig, resolve_config
from domain.models.muscle_group import MUSCLE_GROUP_CATEGORIES, MuscleGroup, MuscleGroupCategory
from domain.models.recovery import FatigueEvent, MuscleRecoveryStatus, RecoveryStatusLevel

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600.0


# =============================================================================
# Core Formulas
# =============================================================================


def get_recovery_status(
    percentage: float,
    config: Optional[AdaptiveEngineConfig] = None,
) -> RecoveryStatusLevel:
    """
    Bucket a recovery percentage.

    Returns:
        FRESH at >= 80, RECOVERING at 50-79, FATIGUED below 50 (defaults)
    """
    config = resolve_config(config)
    if percentage >= config.fresh_threshold:
        return RecoveryStatusLevel.FRESH
    if percentage >= config.recovering_threshold:
        return RecoveryStatusLevel.RECOVERING
    return RecoveryStatusLevel.FATIGUED


def adjusted_time_constant(
    base_tau: float,
    volume_load: float,
    config: Optional[AdaptiveEngineConfig] = None,
) -> float:
    """Scale tau by session load relative to baseline, floored at half of tau."""
    config = resolve_config(config)
    ratio = volume_load / config.baseline_volume_load
    return base_tau * max(ratio, config.min_load_ratio)


def remaining_fatigue(
    elapsed_hours: float,
    base_tau: float,
    volume_load: float,
    config: Optional[AdaptiveEngineConfig] = None,
) -> float:
    """
    Residual fatigue left by one event after ``elapsed_hours``.

    Formula: fatigue(t) = e^(-t / tau_adjusted)

    Returns:
        A value in (0, 1]; 1.0 right after the session
    """
    tau = adjusted_time_constant(base_tau, volume_load, config)
    return math.exp(-elapsed_hours / tau)


def hours_until_recovery(
    current_fatigue: float,
    tau: float,
    target_percentage: float = 80,
) -> Optional[float]:
    """
    Estimate hours until recovery reaches ``target_percentage``.

    Solves current_fatigue * e^(-t / tau) = 1 - target/100 for t.

    This is an approximation when fatigue comes from several stacked events:
    the total is treated as if it decayed under the single representative
    tau passed in (the muscle group's base tau), regardless of the load
    adjustment each event received. Treat the result as advisory only.

    Returns:
        Hours (> 0), or None if recovery is already at or above target
    """
    target_fatigue = 1 - target_percentage / 100
    if current_fatigue <= target_fatigue:
        return None
    if target_fatigue <= 0:
        # 100% target is only reached asymptotically
        return math.inf
    return -tau * math.log(target_fatigue / current_fatigue)


def round_half_up(value: float) -> int:
    """Round halves up (2.5 -> 3), matching JavaScript Math.round rather than round()."""
    return math.floor(value + 0.5)


def _hours_between(earlier: datetime, later: datetime) -> float:
    return (later - earlier).total_seconds() / SECONDS_PER_HOUR


def total_fatigue(
    events: Iterable[FatigueEvent],
    now: datetime,
    base_tau: float,
    config: Optional[AdaptiveEngineConfig] = None,
) -> float:
    """Sum of residual fatigue over events inside the recovery window."""
    config = resolve_config(config)
    fatigue = 0.0
    for event in events:
        elapsed = _hours_between(event.workout_date, now)
        if elapsed < 0 or elapsed > config.recovery_window_hours:
            continue
        fatigue += remaining_fatigue(elapsed, base_tau, event.volume_load, config)
    return fatigue


# =============================================================================
# Recovery Map
# =============================================================================


def calculate_recovery(
    events: Sequence[FatigueEvent],
    now: datetime,
    config: Optional[AdaptiveEngineConfig] = None,
) -> List[MuscleRecoveryStatus]:
    """
    Compute recovery status for every muscle group.

    Always returns one entry per MuscleGroup (13), in enum order. Muscle
    groups without events are 100% fresh with no last-workout date or ETA.

    Args:
        events: Fatigue events, any order
        now: Point in time to evaluate at (same tz-awareness as the events)
        config: Engine tunables (defaults if omitted)

    Returns:
        List of MuscleRecoveryStatus
    """
    config = resolve_config(config)

    events_by_muscle: Dict[MuscleGroup, List[FatigueEvent]] = defaultdict(list)
    for event in events:
        events_by_muscle[event.muscle_group].append(event)

    statuses = []
    for muscle_group in MuscleGroup:
        category = MUSCLE_GROUP_CATEGORIES[muscle_group]
        muscle_events = events_by_muscle.get(muscle_group)

        if not muscle_events:
            statuses.append(
                MuscleRecoveryStatus(
                    muscle_group=muscle_group,
                    category=category,
                    recovery_percentage=100,
                    status=RecoveryStatusLevel.FRESH,
                )
            )
            continue

        ordered = sorted(muscle_events, key=lambda e: e.workout_date)
        base_tau = config.base_time_constants[muscle_group]
        fatigue = total_fatigue(ordered, now, base_tau, config)

        percentage = max(0, min(100, round_half_up((1 - fatigue) * 100)))
        hours = hours_until_recovery(fatigue, base_tau, config.fresh_threshold)

        statuses.append(
            MuscleRecoveryStatus(
                muscle_group=muscle_group,
                category=category,
                recovery_percentage=percentage,
                status=get_recovery_status(percentage, config),
                last_workout_date=ordered[-1].workout_date,
                hours_until_fresh=(
                    round_half_up(hours) if hours is not None and math.isfinite(hours) else None
                ),
            )
        )

    return statuses


# =============================================================================
# Fatigue Event Derivation
# =============================================================================


def build_fatigue_events(rows: Iterable[Mapping[str, Any]]) -> List[FatigueEvent]:
    """
    Group completed working-set rows into fatigue events.

    Each row describes one completed, non-warm-up set credited to one muscle
    group of the exercise, with keys ``muscle_group``, ``split`` (percent),
    ``workout_date`` (datetime), ``reps`` and ``weight``.

    Volume load contribution per row: reps * max(weight, 1) * split / 100, so
    bodyweight sets (no weight) still count their reps. Rows are grouped by
    (muscle group, workout start).

    Returns:
        One FatigueEvent per (muscle group, workout date), first-seen order
    """
    grouped: Dict[Tuple[MuscleGroup, datetime], float] = {}

    for row in rows:
        workout_date = row.get("workout_date")
        if workout_date is None:
            continue
        try:
            muscle_group = MuscleGroup(row["muscle_group"])
        except (KeyError, ValueError):
            logger.warning(f"Skipping set row with unknown muscle group: {row.get('muscle_group')}")
            continue

        reps = row.get("reps") or 0
        weight = row.get("weight")
        weight = max(weight if weight is not None else 1.0, 1.0)
        split = row.get("split") or 0

        key = (muscle_group, workout_date)
        grouped[key] = grouped.get(key, 0.0) + reps * weight * split / 100.0

    return [
        FatigueEvent(muscle_group=muscle_group, volume_load=load, workout_date=workout_date)
        for (muscle_group, workout_date), load in grouped.items()
    ]


# =============================================================================
# Display Helpers
# =============================================================================

CATEGORY_ORDER: Tuple[MuscleGroupCategory, ...] = (
    MuscleGroupCategory.ARMS,
    MuscleGroupCategory.BACK,
    MuscleGroupCategory.CORE,
    MuscleGroupCategory.LEGS,
)


def format_time_until_fresh(hours: float) -> str:
    """Short human label for an ETA: '< 1h', '~5h', '~1d', '~3d'."""
    if hours < 1:
        return "< 1h"
    if hours < 24:
        return f"~{round_half_up(hours)}h"
    days = hours / 24
    if days < 2:
        return "~1d"
    return f"~{round_half_up(days)}d"


def group_by_category(
    statuses: Iterable[MuscleRecoveryStatus],
) -> List[Tuple[MuscleGroupCategory, List[MuscleRecoveryStatus]]]:
    """Group statuses by category (arms, back, core, legs), dropping empty groups."""
    buckets: Dict[MuscleGroupCategory, List[MuscleRecoveryStatus]] = defaultdict(list)
    for status in statuses:
        buckets[status.category].append(status)
    return [(category, buckets[category]) for category in CATEGORY_ORDER if buckets.get(category)]
