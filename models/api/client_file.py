"""
AuroraSync Server - Client File Model

Pydantic model for one entry of a client inventory in sync-list requests.
"""

from pydantic import BaseModel, ConfigDict, Field


class ClientFile(BaseModel):
    """File as reported by the client; never persisted"""
    model_config = ConfigDict(populate_by_name=True)

    rel: str = ""
    path: str = ""
    name: str = ""
    last_modified: int = Field(default=0, alias="lastModified")
    size: int = 0
