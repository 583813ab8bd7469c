"""Domain exceptions."""


class UserdeskError(Exception):
    """Base exception for Userdesk."""

    pass


class NotFound(UserdeskError):
    """Requested resource was not found."""

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"{entity} '{identifier}' not found")
        self.entity = entity
        self.identifier = identifier


class Conflict(UserdeskError):
    """Resource clashes with an existing one."""

    pass


class ValidationError(UserdeskError):
    """Validation failed for input data."""

    pass


class DeliveryError(UserdeskError):
    """Mail gateway refused or failed to deliver a message."""

    def __init__(self, message: str | None = None) -> None:
        if message:
            super().__init__(f"Error delivering mail. Message: {message}")
        else:
            super().__init__("Error delivering mail.")
        self.message = message
