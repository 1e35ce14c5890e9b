"""
AuroraSync Client - Backup Operation

Runs one backup pass: scan the folder, ask the server what it needs, upload it.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Union

from .api import AuroraSyncAPI
from .exceptions import AuroraSyncAPIError
from .inventory import scan_folder

# Configure logging
logger = logging.getLogger(__name__)


@dataclass
class BackupSummary:
    """Outcome of one backup pass"""
    scanned: int = 0
    needed: int = 0
    uploaded: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failed


def backup_folder(api: AuroraSyncAPI, root: Union[str, Path],
                  progress_callback: Optional[Callable[[str, int, int], None]] = None) -> BackupSummary:
    """
    Back up every new or changed file under root.

    Files are uploaded one per request, so a failure only affects that file;
    the server requests it again on the next pass.

    Args:
        api: Connected API client
        root: Folder to back up
        progress_callback: Optional callback(message, current, total)

    Returns:
        BackupSummary with counts and per-file outcome

    Raises:
        AuroraSyncAPIError: If the sync-list request fails
    """
    root = Path(root).absolute()
    summary = BackupSummary()

    files = scan_folder(root)
    summary.scanned = len(files)
    local_by_rel = {entry["rel"]: entry for entry in files}

    needed = api.request_sync_list(files)
    summary.needed = len(needed)
    logger.info(f"Server needs {len(needed)} of {len(files)} files")

    for position, entry in enumerate(needed, start=1):
        rel = entry["rel"]
        local = local_by_rel.get(rel)
        if local is None:
            logger.warning(f"Server requested unknown file: {rel}")
            summary.failed.append(rel)
            continue

        if progress_callback:
            progress_callback(f"Uploading {rel}", position, len(needed))

        try:
            api.upload_file(local["path"], rel, local["lastModified"], local["size"])
            summary.uploaded.append(rel)
        except (AuroraSyncAPIError, OSError) as e:
            logger.error(f"Failed to upload {rel}: {e}")
            summary.failed.append(rel)

    logger.info(f"Uploaded {len(summary.uploaded)} files, {len(summary.failed)} failed")
    return summary
