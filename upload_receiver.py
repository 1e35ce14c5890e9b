"""
AuroraSync Server - Upload Receiver

This module writes uploaded files into the backup tree and records them in
the metadata index.

The on-disk size after the write is authoritative; the client-reported size is
ignored. The index is saved once per upload request. If any file in the
request fails, the remaining files are skipped and nothing from the request
reaches the index, although files written before the failure stay on disk.
A later sync-list request asks for them again.
"""

import logging
import time
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from models.api import FileMeta, UploadResult
from models.infrastructure import IncomingFile
from managers.metadata_manager import MetadataManager
from file_storage import GetFilePath, WriteFileStream
from path_normalizer import NormalizeClientRel, TokenFactory

logger = logging.getLogger(__name__)


def CurrentTimeMillis() -> int:
    """Current wall-clock time in epoch milliseconds"""
    return int(time.time() * 1000)


def ReceiveUploads(
    files: Iterable[IncomingFile],
    metadata_manager: MetadataManager,
    backup_root: Union[str, Path],
    token_factory: Optional[TokenFactory] = None,
    clock: Optional[Callable[[], int]] = None
) -> UploadResult:
    """
    Store a batch of uploaded files and update the metadata index

    Args:
        files: Uploaded files with their sibling form fields
        metadata_manager: Owner of the metadata index
        backup_root: Root directory for received files
        token_factory: Generator for files without any usable path
        clock: Source of epoch milliseconds for files without a client timestamp

    Returns:
        UploadResult: Count and normalized relative paths of saved files

    Raises:
        ValueError: If a relative path resolves outside the backup root
        OSError: If a file cannot be written
    """
    clock = clock or CurrentTimeMillis
    saved = []
    entries = []

    for incoming in files:
        rel = NormalizeClientRel(
            incoming.rel,
            incoming.path,
            fallback_name=incoming.filename,
            token_factory=token_factory
        )

        out_path = GetFilePath(rel, backup_root)
        actual_size = WriteFileStream(incoming.stream, out_path)
        saved.append(rel)

        last_modified = incoming.last_modified if incoming.last_modified > 0 else clock()
        entries.append((rel, FileMeta(last_modified=last_modified, size=actual_size)))

        if incoming.size >= 0 and incoming.size != actual_size:
            logger.debug(f"Client reported {incoming.size} bytes for {rel}, wrote {actual_size}")
        logger.info(f"Saved {rel} ({actual_size} bytes)")

    metadata_manager.CommitBatch(entries)

    return UploadResult(saved_count=len(saved), saved=saved)
