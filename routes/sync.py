"""
AuroraSync Server - Sync List Endpoint

This module contains the inventory endpoint: the client posts its file list
and receives the files the server is missing or holds stale copies of.
"""

import logging
from xml.etree.ElementTree import ParseError
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import Response

from inventory_xml import ParseInventory, BuildSyncListResponse
from sync_planner import PlanUpload


# Create logger
logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()


# ==================== Sync Endpoints ====================

@router.post("/sync-list", tags=["Sync"])
async def sync_list(request: Request):
    """
    Compare a client inventory against the metadata index

    Request body is an XML <files> document; see inventory_xml.

    Returns:
        Response: XML <files> document listing every file to upload

    Raises:
        HTTPException: 400 for an empty or malformed body, 500 otherwise
    """
    import backup_state

    try:
        try:
            body = (await request.body()).decode('utf-8')
        except UnicodeDecodeError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Body is not valid UTF-8"
            )

        if not body.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Empty body"
            )

        try:
            client_files = ParseInventory(body)
        except ParseError as e:
            logger.warning(f"Rejected malformed inventory: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Malformed inventory: {str(e)}"
            )

        needed = PlanUpload(client_files, backup_state.metadata_manager.Snapshot())

        logger.info(f"Received inventory ({len(client_files)}). Need {len(needed)} files.")

        return Response(content=BuildSyncListResponse(needed), media_type="application/xml")

    except HTTPException:
        # Re-raise HTTP exceptions
        raise
    except Exception as e:
        logger.error(f"sync-list error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
