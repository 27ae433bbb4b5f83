"""Domain exceptions."""


class AccessLedgerError(Exception):
    """Base exception for accessledger."""

    pass


class Unauthenticated(AccessLedgerError):
    """Request could not be tied to a user."""

    pass


class PermissionDenied(AccessLedgerError):
    """User does not have access to the requested entity."""

    pass


class NotFound(AccessLedgerError):
    """Requested resource was not found."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind} '{identifier}' does not exist")
        self.kind = kind
        self.identifier = identifier


class ValidationError(AccessLedgerError):
    """Validation failed for input data."""

    pass
