"""
AuroraSync Server - Status Endpoints

This module contains status-related endpoints including the root banner and
the health check.
"""

from datetime import datetime, timezone
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


# Create router instance
router = APIRouter()

SERVICE_NAME = "AuroraSync Server"
SERVICE_VERSION = "1.0.0"


# ==================== Status Endpoints ====================

@router.get("/", response_class=PlainTextResponse, tags=["Status"])
async def root():
    """Banner used by clients to confirm the server is reachable"""
    return "AuroraSync server running."


@router.get("/health", tags=["Status"])
async def health_check():
    """
    Health check endpoint to verify server is running

    Returns:
        dict: Server status information
    """
    import backup_state

    indexed_files = backup_state.metadata_manager.Count() if backup_state.metadata_manager else 0

    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "indexed_files": indexed_files,
        "timestamp_utc": datetime.now(timezone.utc).isoformat()
    }
