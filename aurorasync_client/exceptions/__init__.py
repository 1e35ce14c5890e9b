"""
AuroraSync Client - Exceptions Package

Contains all exception classes for the AuroraSync client.
"""

from .api_error import AuroraSyncAPIError
from .server_error import AuroraSyncServerError

__all__ = [
    'AuroraSyncAPIError',
    'AuroraSyncServerError'
]
