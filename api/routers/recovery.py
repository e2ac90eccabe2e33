"""
Recovery router.

Exposes the per-muscle-group recovery map computed from recent training.
"""
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import get_recovery_map_use_case
from application.use_cases import GetRecoveryMapUseCase
from backend.core.recovery_model import format_time_until_fresh

router = APIRouter(
    prefix="/recovery",
    tags=["Recovery"],
)


# =============================================================================
# Response Models
# =============================================================================


class MuscleRecoveryResponse(BaseModel):
    """Recovery state of one muscle group."""
    muscle_group: str
    category: str
    recovery_percentage: int
    status: str
    last_workout_date: Optional[datetime] = None
    hours_until_fresh: Optional[int] = None
    time_until_fresh: Optional[str] = None


class RecoveryMapResponse(BaseModel):
    """Recovery for all muscle groups, with a category index."""
    evaluated_at: datetime
    muscle_groups: List[MuscleRecoveryResponse] = Field(default_factory=list)
    by_category: Dict[str, List[str]] = Field(default_factory=dict)


# =============================================================================
# Endpoints
# =============================================================================


@router.get("", response_model=RecoveryMapResponse)
def get_recovery_map(
    use_case: GetRecoveryMapUseCase = Depends(get_recovery_map_use_case),
) -> RecoveryMapResponse:
    """
    Get recovery status for every muscle group.

    Always returns all 13 muscle groups; groups not trained in the last
    week are reported as 100% fresh.
    """
    result = use_case.execute()
    if not result.success:
        raise HTTPException(status_code=503, detail=result.error)

    return RecoveryMapResponse(
        evaluated_at=result.evaluated_at,
        muscle_groups=[
            MuscleRecoveryResponse(
                muscle_group=s.muscle_group.value,
                category=s.category.value,
                recovery_percentage=s.recovery_percentage,
                status=s.status.value,
                last_workout_date=s.last_workout_date,
                hours_until_fresh=s.hours_until_fresh,
                time_until_fresh=(
                    format_time_until_fresh(s.hours_until_fresh)
                    if s.hours_until_fresh is not None
                    else None
                ),
            )
            for s in result.statuses
        ],
        by_category={
            category.value: [s.muscle_group.value for s in statuses]
            for category, statuses in result.by_category
        },
    )
