"""
Supabase implementation of EquipmentRepository.

Reads and updates the equipment_instances table.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError
from supabase import Client

from domain.models import EquipmentInstance, ExerciseType

logger = logging.getLogger(__name__)

EQUIPMENT_COLUMNS = "id, name, exercise_type, gym_floor_id, capacity, is_available"


def row_to_equipment(row: Dict[str, Any]) -> EquipmentInstance:
    return EquipmentInstance(
        id=str(row["id"]),
        name=row.get("name") or "",
        exercise_type=ExerciseType(row["exercise_type"]),
        gym_floor_id=str(row["gym_floor_id"]),
        capacity=row.get("capacity") if row.get("capacity") is not None else 1,
        is_available=bool(row.get("is_available", True)),
    )


class SupabaseEquipmentRepository:
    """Supabase implementation of EquipmentRepository protocol."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def list_all(self) -> List[EquipmentInstance]:
        try:
            result = self._client.table("equipment_instances") \
                .select(EQUIPMENT_COLUMNS) \
                .is_("deleted_at", "null") \
                .order("id") \
                .execute()
        except Exception:
            logger.exception("Error fetching equipment instances")
            raise
        return self._parse(result.data or [])

    def get_available_equipment(
        self,
        equipment_ids: Optional[Sequence[str]] = None,
    ) -> List[EquipmentInstance]:
        if equipment_ids is not None and not equipment_ids:
            return []

        try:
            query = self._client.table("equipment_instances") \
                .select(EQUIPMENT_COLUMNS) \
                .eq("is_available", True) \
                .is_("deleted_at", "null")
            if equipment_ids is not None:
                query = query.in_("id", list(equipment_ids))
            result = query.order("id").execute()
        except Exception:
            logger.exception("Error fetching available equipment")
            raise
        return self._parse(result.data or [])

    def set_availability(self, equipment_id: str, is_available: bool) -> Optional[EquipmentInstance]:
        try:
            result = self._client.table("equipment_instances") \
                .update({"is_available": is_available}) \
                .eq("id", equipment_id) \
                .execute()
        except Exception:
            logger.exception(f"Error updating availability of equipment {equipment_id}")
            raise

        parsed = self._parse(result.data or [])
        if not parsed:
            logger.warning(f"Equipment {equipment_id} not found")
            return None
        logger.info(f"Equipment {equipment_id} is_available={is_available}")
        return parsed[0]

    def _parse(self, rows: List[Dict[str, Any]]) -> List[EquipmentInstance]:
        instances = []
        for row in rows:
            try:
                instances.append(row_to_equipment(row))
            except (KeyError, ValueError, ValidationError) as e:
                logger.warning(f"Skipping invalid equipment row {row.get('id')}: {e}")
        return instances
