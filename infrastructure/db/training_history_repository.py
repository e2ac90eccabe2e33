"""
Supabase implementation of TrainingHistoryRepository.

Reads workouts and workout_sets, joined with the exercise catalog, and
shapes them into fatigue events (recovery) or completed sessions (weekly
volume).
"""
import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError
from supabase import Client

from backend.core.recovery_model import build_fatigue_events
from domain.models import CompletedExercise, FatigueEvent, WorkoutSession, WorkoutSet
from infrastructure.db.exercise_catalog_repository import SupabaseExerciseCatalogRepository

logger = logging.getLogger(__name__)

SET_COLUMNS = "workout, exercise, set, reps, weight, is_completed, is_warmup"


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO timestamp as returned by PostgREST ('Z' suffix allowed).

    Values without an offset come from `timestamp` columns and are UTC.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable timestamp: {value}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class SupabaseTrainingHistoryRepository:
    """
    Supabase implementation of TrainingHistoryRepository protocol.

    Workouts are keyed by their ``start`` timestamp; soft-deleted workouts
    are ignored.
    """

    def __init__(self, client: Client, catalog_repo: Optional[SupabaseExerciseCatalogRepository] = None):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
            catalog_repo: Catalog used to resolve exercises (built from client if omitted)
        """
        self._client = client
        self._catalog_repo = catalog_repo or SupabaseExerciseCatalogRepository(client)

    def get_recent_fatigue_events(self, since: datetime) -> List[FatigueEvent]:
        workouts = self._fetch_workouts(gte=since, finished_only=True)
        if not workouts:
            return []

        try:
            sets = self._client.table("workout_sets") \
                .select(SET_COLUMNS) \
                .in_("workout", list(workouts)) \
                .eq("is_completed", True) \
                .eq("is_warmup", False) \
                .execute()
        except Exception:
            logger.exception("Error fetching working sets")
            raise

        set_rows = sets.data or []
        exercise_ids = [str(row["exercise"]) for row in set_rows if row.get("exercise") is not None]
        catalog = {e.exercise.id: e for e in self._catalog_repo.get_many(exercise_ids)}

        rows = []
        for set_row in set_rows:
            entry = catalog.get(str(set_row.get("exercise")))
            started_at = workouts.get(str(set_row.get("workout")))
            if entry is None or started_at is None:
                continue
            for split in entry.muscle_group_splits:
                rows.append(
                    {
                        "muscle_group": split.muscle_group.value,
                        "split": split.split,
                        "workout_date": started_at,
                        "reps": set_row.get("reps"),
                        "weight": set_row.get("weight"),
                    }
                )

        events = build_fatigue_events(rows)
        logger.debug(f"Built {len(events)} fatigue events from {len(set_rows)} sets")
        return events

    def get_completed_sessions(self, start: datetime, end: datetime) -> List[WorkoutSession]:
        workouts = self._fetch_workouts(gte=start, lt=end, with_details=True)
        if not workouts:
            return []

        try:
            sets = self._client.table("workout_sets") \
                .select(SET_COLUMNS) \
                .in_("workout", list(workouts)) \
                .order("set") \
                .execute()
        except Exception:
            logger.exception("Error fetching workout sets")
            raise

        set_rows = sets.data or []
        exercise_ids = [str(row["exercise"]) for row in set_rows if row.get("exercise") is not None]
        exercises = {e.exercise.id: e.exercise for e in self._catalog_repo.get_many(exercise_ids)}

        # workout id -> exercise id -> sets, first-seen exercise order
        grouped: Dict[str, Dict[str, List[WorkoutSet]]] = defaultdict(dict)
        for row in set_rows:
            exercise_id = str(row.get("exercise"))
            if exercise_id not in exercises:
                continue
            try:
                workout_set = WorkoutSet(
                    set_number=row.get("set") or 1,
                    reps=row.get("reps"),
                    weight=row.get("weight"),
                    is_completed=bool(row.get("is_completed")),
                    is_warmup=bool(row.get("is_warmup")),
                )
            except ValidationError as e:
                logger.warning(f"Skipping invalid set in workout {row.get('workout')}: {e}")
                continue
            grouped[str(row.get("workout"))].setdefault(exercise_id, []).append(workout_set)

        sessions = []
        for workout_id, details in workouts.items():
            by_exercise = grouped.get(workout_id, {})
            sessions.append(
                WorkoutSession(
                    workout_id=workout_id,
                    name=details["name"],
                    started_at=details["start"],
                    ended_at=details["stop"],
                    exercises=[
                        CompletedExercise(
                            exercise=exercises[exercise_id],
                            sets=workout_sets,
                            order_index=index,
                        )
                        for index, (exercise_id, workout_sets) in enumerate(by_exercise.items())
                    ],
                )
            )
        return sessions

    def _fetch_workouts(
        self,
        gte: datetime,
        lt: Optional[datetime] = None,
        with_details: bool = False,
        finished_only: bool = False,
    ) -> Dict[str, Any]:
        """
        Workouts started in [gte, lt), ordered by start.

        With ``finished_only``, workouts still in progress (no stop) are left out.

        Returns:
            id -> start datetime, or id -> {name, start, stop} with ``with_details``
        """
        try:
            query = self._client.table("workouts") \
                .select("id, name, start, stop") \
                .gte("start", gte.isoformat()) \
                .is_("deleted_at", "null")
            if lt is not None:
                query = query.lt("start", lt.isoformat())
            if finished_only:
                query = query.not_.is_("stop", "null")
            result = query.order("start").execute()
        except Exception:
            logger.exception("Error fetching workouts")
            raise

        workouts: Dict[str, Any] = {}
        for row in result.data or []:
            started_at = parse_timestamp(row.get("start"))
            if started_at is None:
                continue
            if finished_only and not row.get("stop"):
                continue
            if with_details:
                workouts[str(row["id"])] = {
                    "name": row.get("name"),
                    "start": started_at,
                    "stop": parse_timestamp(row.get("stop")),
                }
            else:
                workouts[str(row["id"])] = started_at
        return workouts
