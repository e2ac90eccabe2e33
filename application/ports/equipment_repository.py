"""
Equipment Repository Interface (Port).

Access to the gym's equipment instances and their availability.
"""
from typing import List, Optional, Protocol, Sequence

from domain.models.equipment import EquipmentInstance


class EquipmentRepository(Protocol):
    """Abstract interface for equipment instance data access."""

    def list_all(self) -> List[EquipmentInstance]:
        """Get every equipment instance, available or not."""
        ...

    def get_available_equipment(
        self,
        equipment_ids: Optional[Sequence[str]] = None,
    ) -> List[EquipmentInstance]:
        """
        Get instances that are currently available.

        Args:
            equipment_ids: Restrict to these instance IDs, or None for all

        Returns:
            Available EquipmentInstance list
        """
        ...

    def set_availability(self, equipment_id: str, is_available: bool) -> Optional[EquipmentInstance]:
        """
        Mark an instance as available or taken.

        Args:
            equipment_id: Instance ID
            is_available: New availability

        Returns:
            The updated instance, or None if not found
        """
        ...
