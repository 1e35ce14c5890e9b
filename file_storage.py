"""
AuroraSync Server - File Storage Management

This module handles the on-disk backup tree:
- Backup root directory creation
- Resolution of normalized relative paths to destination paths
- Streaming writes of uploaded files (chunked for large files)
"""

import logging
import shutil
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Union

logger = logging.getLogger(__name__)


# ==================== Storage Configuration ====================

DEFAULT_BACKUP_ROOT = "Backups/Received"
COPY_CHUNK_SIZE = 64 * 1024


# ==================== Storage Directory Management ====================

def InitializeStorage(backup_root: Union[str, Path] = DEFAULT_BACKUP_ROOT) -> Path:
    """
    Initialize the backup root directory

    Args:
        backup_root: Root directory for received files

    Returns:
        Path: Absolute path to the backup root
    """
    storage_path = Path(backup_root)

    try:
        storage_path.mkdir(parents=True, exist_ok=True)
        logger.info(f"Backup root directory ready: {storage_path.absolute()}")
    except Exception as e:
        logger.error(f"Failed to initialize storage: {str(e)}")
        raise

    return storage_path.absolute()


def GetFilePath(relative_path: str, backup_root: Union[str, Path] = DEFAULT_BACKUP_ROOT) -> Path:
    """
    Resolve a normalized relative path to its location under the backup root

    Forward slashes in the relative path become the host's separator.

    Args:
        relative_path: Forward-slash separated path (e.g., "DCIM/photo.jpg")
        backup_root: Root directory for received files

    Returns:
        Path: Absolute destination path

    Raises:
        ValueError: If the path resolves outside the backup root
    """
    root = Path(backup_root).absolute()
    parts = [part for part in PurePosixPath(relative_path).parts if part not in ('', '/')]
    file_path = root.joinpath(*parts)

    resolved_root = root.resolve()
    resolved_file = file_path.resolve()
    if resolved_file == resolved_root or resolved_root not in resolved_file.parents:
        raise ValueError(f"Relative path escapes backup root: {relative_path}")

    return file_path


# ==================== File Writing ====================

def WriteFileStream(stream: BinaryIO, destination: Path, chunk_size: int = COPY_CHUNK_SIZE) -> int:
    """
    Stream bytes to a destination file, replacing any existing file in full

    Parent directories are created as needed.

    Args:
        stream: Readable binary stream, consumed from its current position
        destination: Destination file path
        chunk_size: Size of chunks to copy (default 64KB)

    Returns:
        int: Size of the written file as reported by the filesystem
    """
    destination.parent.mkdir(parents=True, exist_ok=True)

    with open(destination, 'wb') as f:
        shutil.copyfileobj(stream, f, chunk_size)

    return destination.stat().st_size
