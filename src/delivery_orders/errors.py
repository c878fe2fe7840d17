"""Domain errors raised by the order services."""

from __future__ import annotations


class OrderError(Exception):
    """Base class for caller-input and domain-validation failures."""

    status_code = 400
    default_message = "Order request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AddressNotFound(OrderError):
    default_message = "Address not found"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Address '{name}' not found")


class InvalidCoordinates(OrderError):
    default_message = "Invalid coordinates or distance calculation"


class InvalidOrderType(OrderError):
    default_message = "Invalid order type"

    def __init__(self, order_type: str):
        self.order_type = order_type
        super().__init__(f"Invalid order type '{order_type}'")


class InvalidPriceCalculation(OrderError):
    default_message = "Invalid price calculation"


class OrderNotFound(OrderError):
    status_code = 404
    default_message = "Order not found"

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order '{order_id}' not found")


class OrderAlreadyDone(OrderError):
    status_code = 409
    default_message = "Cannot change status from Done"


class IllegalTransition(OrderError):
    default_message = "Invalid status update attempt"

    def __init__(self, current_status: str, requested_status: str, role: str):
        self.current_status = current_status
        self.requested_status = requested_status
        self.role = role
        super().__init__(
            f"Invalid status update attempt: {role} cannot move '{current_status}' to '{requested_status}'"
        )


InvalidDistanceCalculation = InvalidCoordinates
