"""Error kinds raised by the exam engine and rendered by the API layer."""


class ExamPortalError(Exception):
    status_code = 500
    message = "Internal error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFound(ExamPortalError):
    """Unknown exam code."""
    status_code = 404
    message = "Exam not found"


class InvalidInput(ExamPortalError):
    """Missing or blank required field, or an unparsable body."""
    status_code = 400
    message = "Invalid submission"


class Unauthorized(ExamPortalError):
    """Admin key mismatch. The message never mentions the exam code."""
    status_code = 401
    message = "Unauthorized"


class StoreError(ExamPortalError):
    """The database failed while serving the request."""
    status_code = 500
    message = "Database error"
