"""
AuroraSync Server - Needed File Model

Pydantic model for one entry of the need-upload list returned by sync-list.
"""

from pydantic import BaseModel, ConfigDict, Field


class NeededFile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rel: str
    last_modified: int = Field(alias="lastModified")
    size: int
