class FinDashError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(FinDashError):
    """Requested resource does not exist."""


class ConflictError(FinDashError):
    """Operation conflicts with existing state (e.g. duplicate category name)."""
