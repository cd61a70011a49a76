"""
Assignment DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime

from allocations.domain.assignment import Assignment


@dataclass
class AssignmentDTO:
    """DTO for an issued key, as shown to its owner."""

    id: uuid.UUID
    key: str
    tier: str
    product_type: str
    order_id: str
    user_id: str
    assigned_at: datetime
    expires_at: datetime

    @classmethod
    def from_entity(cls, assignment: Assignment) -> "AssignmentDTO":
        return cls(
            id=assignment.id,
            key=str(assignment.key_value),
            tier=assignment.tier.value,
            product_type=assignment.product_type,
            order_id=assignment.order_id,
            user_id=assignment.user_id,
            assigned_at=assignment.assigned_at,
            expires_at=assignment.expires_at,
        )
