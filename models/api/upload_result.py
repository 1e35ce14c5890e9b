"""
AuroraSync Server - Upload Result Model

Pydantic model for upload responses.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class UploadResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    saved_count: int = Field(alias="savedCount")
    saved: List[str]
