"""
Volume router.

Weekly working-set volume per muscle group against weekly targets.
"""
from datetime import datetime
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import get_weekly_volume_use_case
from application.use_cases import GetWeeklyVolumeResult, GetWeeklyVolumeUseCase

router = APIRouter(
    prefix="/volume",
    tags=["Volume"],
)


# =============================================================================
# Response Models
# =============================================================================


class MuscleGroupVolumeResponse(BaseModel):
    """Current sets against the weekly range for one muscle group."""
    muscle_group: str
    current_sets: float
    min_sets: int
    max_sets: int
    remaining_sets: float
    excess_sets: float = 0


class WeeklyVolumeResponse(BaseModel):
    """Volume for the current Monday-start week."""
    week_start: datetime
    muscle_groups: List[MuscleGroupVolumeResponse] = Field(default_factory=list)


class WeeklyProgressResponse(BaseModel):
    """Progress against minimum targets."""
    week_start: datetime
    progress_percentage: Dict[str, float] = Field(default_factory=dict)
    is_on_track: bool


def _require_success(result: GetWeeklyVolumeResult) -> None:
    if not result.success:
        raise HTTPException(status_code=503, detail=result.error)


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/weekly", response_model=WeeklyVolumeResponse)
def get_weekly_volume(
    use_case: GetWeeklyVolumeUseCase = Depends(get_weekly_volume_use_case),
) -> WeeklyVolumeResponse:
    """Get this week's completed sets and remaining sets per muscle group."""
    result = use_case.execute()
    _require_success(result)

    tracker = result.tracker
    excess = tracker.excess_volume
    return WeeklyVolumeResponse(
        week_start=tracker.week_start,
        muscle_groups=[
            MuscleGroupVolumeResponse(
                muscle_group=target.muscle_group.value,
                current_sets=tracker.current_volume.get(target.muscle_group, 0.0),
                min_sets=target.min_sets,
                max_sets=target.max_sets,
                remaining_sets=tracker.remaining_volume.get(target.muscle_group, 0.0),
                excess_sets=excess.get(target.muscle_group, 0.0),
            )
            for target in tracker.targets
        ],
    )


@router.get("/progress", response_model=WeeklyProgressResponse)
def get_weekly_progress(
    use_case: GetWeeklyVolumeUseCase = Depends(get_weekly_volume_use_case),
) -> WeeklyProgressResponse:
    """Get this week's progress percentage per muscle group and on-track flag."""
    result = use_case.execute()
    _require_success(result)

    return WeeklyProgressResponse(
        week_start=result.tracker.week_start,
        progress_percentage={
            mg.value: pct for mg, pct in result.progress.progress_percentage.items()
        },
        is_on_track=result.progress.is_on_track,
    )
