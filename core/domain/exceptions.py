"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidTierError(DomainException):
    """Raised when an unknown duration tier is supplied."""

    def __init__(self, message: str = "Invalid tier"):
        super().__init__(message, code="INVALID_TIER")


class InventoryException(DomainException):
    """Base exception for key inventory errors."""

    pass


class KeyNotFoundError(InventoryException):
    """Raised when a key is not available in the requested tier."""

    def __init__(self, message: str = "Key not found"):
        super().__init__(message, code="KEY_NOT_FOUND")


class KeyAlreadyAssignedError(InventoryException):
    """Raised when an issued key is targeted by an admin removal."""

    def __init__(self, message: str = "Key is already assigned"):
        super().__init__(message, code="KEY_ALREADY_ASSIGNED")


class AllocationException(DomainException):
    """Base exception for allocation errors."""

    pass


class OutOfStockError(AllocationException):
    """Raised when a tier has no available key to allocate."""

    def __init__(self, message: str = "No keys available in this tier"):
        super().__init__(message, code="OUT_OF_STOCK")


class AssignmentNotFoundError(AllocationException):
    """Raised when an order has no assignment."""

    def __init__(self, message: str = "Assignment not found"):
        super().__init__(message, code="ASSIGNMENT_NOT_FOUND")


class OrderException(DomainException):
    """Base exception for order errors."""

    pass


class OrderNotFoundError(OrderException):
    """Raised when an order is not found."""

    def __init__(self, message: str = "Order not found"):
        super().__init__(message, code="ORDER_NOT_FOUND")


class InvalidOrderStateError(OrderException):
    """Raised when an order transition is not allowed from its current state."""

    def __init__(self, message: str = "Invalid order state"):
        super().__init__(message, code="INVALID_ORDER_STATE")
