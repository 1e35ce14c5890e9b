"""
AuroraSync Client - API Error Exception

Base exception class for all API-related errors.
"""


class AuroraSyncAPIError(Exception):
    """Base exception for API errors."""
    pass
