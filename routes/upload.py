"""
AuroraSync Server - Upload Endpoint

This module contains the upload endpoint. A multipart request carries one or
more file parts plus sibling fields rel, filepath, lastModified and size; the
i-th value of each field describes the i-th file part.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Request, status
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException

from models.api import UploadResult
from models.infrastructure import IncomingFile
from upload_receiver import ReceiveUploads
from field_parsing import ParseIntField


# Create logger
logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()


# ==================== Form Field Helpers ====================

def _FieldAt(values: List, position: int) -> str:
    """Form field value for the file at position, empty if not supplied"""
    if position < len(values) and isinstance(values[position], str):
        return values[position]
    return ""


def BuildIncomingFiles(form: FormData) -> List[IncomingFile]:
    """
    Pair every file part of a multipart form with its sibling fields

    Args:
        form: Parsed multipart form

    Returns:
        List[IncomingFile]: One entry per file part, in form order
    """
    uploads = [value for _, value in form.multi_items() if isinstance(value, UploadFile)]

    rels = form.getlist("rel")
    paths = form.getlist("filepath")
    last_modifieds = form.getlist("lastModified")
    sizes = form.getlist("size")

    incoming = []
    for position, upload in enumerate(uploads):
        incoming.append(IncomingFile(
            stream=upload.file,
            filename=upload.filename or "",
            rel=_FieldAt(rels, position),
            path=_FieldAt(paths, position),
            last_modified=ParseIntField(_FieldAt(last_modifieds, position), 0),
            size=ParseIntField(_FieldAt(sizes, position), -1)
        ))

    return incoming


# ==================== Upload Endpoints ====================

@router.post("/upload", response_model=UploadResult, tags=["Upload"])
async def upload(request: Request):
    """
    Store uploaded files in the backup tree and update the metadata index

    Returns:
        UploadResult: savedCount and the normalized relative paths saved

    Raises:
        HTTPException: 400 if the request is not multipart or has no files,
                       500 if any file fails (remaining files are skipped)
    """
    import backup_state

    content_type = request.headers.get("content-type", "")
    if not content_type.lower().startswith("multipart/form-data"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Expected multipart/form-data"
        )

    form: Optional[FormData] = None
    try:
        form = await request.form()
        files = BuildIncomingFiles(form)
        if not files:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No files uploaded."
            )

        return ReceiveUploads(files, backup_state.metadata_manager, backup_state.backup_root)

    except StarletteHTTPException:
        # Re-raise HTTP exceptions, including multipart parse errors
        raise
    except Exception as e:
        logger.error(f"upload error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
    finally:
        if form is not None:
            await form.close()
