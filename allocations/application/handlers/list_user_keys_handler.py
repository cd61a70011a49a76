"""
ListUserKeysHandler.

Projects a user's assignments for the account view.
"""
from typing import List

from allocations.application.dto.assignment_dto import AssignmentDTO
from allocations.application.queries.list_user_keys import ListUserKeysQuery
from allocations.domain.services import AllocationService
from allocations.ports.assignment_ledger import AssignmentLedger


class ListUserKeysHandler:
    """Handler for ListUserKeysQuery."""

    def __init__(self, ledger: AssignmentLedger):
        self.ledger = ledger

    async def handle(self, query: ListUserKeysQuery) -> List[AssignmentDTO]:
        """
        Handle list user keys query.

        Args:
            query: ListUserKeysQuery

        Returns:
            AssignmentDTO list, newest first
        """
        assignments = await AllocationService.list_for_user(query.user_id, self.ledger)
        return [AssignmentDTO.from_entity(assignment) for assignment in assignments]
