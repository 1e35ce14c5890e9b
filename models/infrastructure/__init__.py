"""
AuroraSync Server - Infrastructure Models Package

This package contains dataclass models for request-scoped upload handling.
"""

from models.infrastructure.incoming_file import IncomingFile

__all__ = [
    'IncomingFile',
]
