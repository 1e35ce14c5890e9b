"""
AuroraSync Client - Server Error Exception

Exception raised for server-related errors.
"""

from .api_error import AuroraSyncAPIError


class AuroraSyncServerError(AuroraSyncAPIError):
    """Exception for server errors."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
