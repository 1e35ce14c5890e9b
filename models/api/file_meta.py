"""
AuroraSync Server - File Metadata Model

Pydantic model for one entry of the persisted metadata index.
"""

from typing import Dict
from pydantic import BaseModel, ConfigDict, Field


class FileMeta(BaseModel):
    """Server's last-known state of one backed-up file"""
    model_config = ConfigDict(populate_by_name=True)

    last_modified: int = Field(alias="lastModified")  # epoch milliseconds
    size: int  # bytes on disk


# Relative path (forward slashes, no leading slash) -> FileMeta
MetadataIndex = Dict[str, FileMeta]
