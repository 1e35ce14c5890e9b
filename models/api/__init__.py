"""
AuroraSync Server - API Models Package

This package contains Pydantic models for all API endpoints and the
persisted metadata index.
"""

from models.api.file_meta import FileMeta, MetadataIndex
from models.api.client_file import ClientFile
from models.api.needed_file import NeededFile
from models.api.upload_result import UploadResult

__all__ = [
    'FileMeta',
    'MetadataIndex',
    'ClientFile',
    'NeededFile',
    'UploadResult',
]
