"""
GetAssignmentHandler.
"""
from allocations.application.dto.assignment_dto import AssignmentDTO
from allocations.application.queries.get_assignment import GetAssignmentQuery
from allocations.domain.services import AllocationService
from allocations.ports.assignment_ledger import AssignmentLedger


class GetAssignmentHandler:
    """Handler for GetAssignmentQuery."""

    def __init__(self, ledger: AssignmentLedger):
        self.ledger = ledger

    async def handle(self, query: GetAssignmentQuery) -> AssignmentDTO:
        """
        Handle get assignment query.

        Raises:
            AssignmentNotFoundError: If the order holds no assignment
        """
        assignment = await AllocationService.lookup(query.order_id, self.ledger)
        return AssignmentDTO.from_entity(assignment)
