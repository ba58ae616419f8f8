# hrms/exceptions.py


class StorageError(Exception):
    """A database operation failed or ran past its deadline."""


class StorageUnavailable(StorageError):
    """The initial connection or ping to MongoDB did not complete."""


class EmployeeAPIError(Exception):
    """Base class for errors rendered as ``{"error": message}``."""

    status_code = 500
    message = "internal server error"

    def __init__(self, message=None, status_code=None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidId(EmployeeAPIError):
    status_code = 400
    message = "Invalid id"


class ParseError(EmployeeAPIError):
    status_code = 400
    message = "Error parsing employee"


class NotFound(EmployeeAPIError):
    status_code = 404
    message = "employee not found"


class QueryFailed(EmployeeAPIError):
    status_code = 400
    message = "error finding employee"


class WriteFailed(EmployeeAPIError):
    # message names the failed write, e.g. "error creating employee"
    status_code = 500
    message = "error writing employee"
