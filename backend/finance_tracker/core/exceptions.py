"""HTTP errors raised by the services."""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 for a stored record that does not exist (or no longer does)."""

    def __init__(self, resource: str = "Resource", identifier: str | None = None):
        self.resource = resource
        self.identifier = identifier
        label = f"{resource} '{identifier}'" if identifier is not None else resource
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
