class ActionError(Exception):
    """Base class for failures an action reports back to its caller."""

    code = "error"

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class NotFoundError(ActionError):
    code = "not_found"


class ConflictError(ActionError):
    code = "conflict"


class InvalidRequestError(ActionError):
    code = "invalid"
