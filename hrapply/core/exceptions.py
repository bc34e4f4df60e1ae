"""
Domain exceptions
All of them surface to clients as {"success": false, "error": <message>}
"""


class ApplicationServiceError(Exception):
    """Base class for errors raised by the services"""


class ApplicationNotFoundError(ApplicationServiceError):
    def __init__(self, application_id):
        self.application_id = application_id
        super().__init__(f"Application not found: {application_id}")


class UploadTooLargeError(ApplicationServiceError):
    def __init__(self, limit_bytes: int):
        self.limit_bytes = limit_bytes
        super().__init__(f"File too large. Maximum size: {limit_bytes // (1024 * 1024)}MB")


class ResumeParsingError(ApplicationServiceError):
    """The completion service reply could not be used"""
