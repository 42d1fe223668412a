# files_manager/core/errors.py


class FilesManagerError(Exception):
    """Base class for failures the API layer turns into `{"error": ...}`."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FilesManagerError):
    status_code = 400


class Unauthorized(FilesManagerError):
    # same body whatever sub-check failed
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFound(FilesManagerError):
    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class NoContent(FilesManagerError):
    status_code = 400

    def __init__(self, message: str = "A folder doesn't have content"):
        super().__init__(message)


class JobFailure(FilesManagerError):
    """Raised by background jobs; never reaches a client."""
