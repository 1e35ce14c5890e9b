"""
AuroraSync Server - Metadata Store

This module persists the metadata index (relative path -> last modified, size)
as a single human-readable JSON document.

Loading is fail-open: a missing or corrupt document yields an empty index so
the server keeps accepting uploads. The worst outcome is a full re-upload of
files that were already backed up.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from pydantic import ValidationError

from models.api import FileMeta, MetadataIndex

logger = logging.getLogger(__name__)


def TryLoadMetadata(metadata_path: Union[str, Path]) -> Tuple[Optional[MetadataIndex], Optional[str]]:
    """
    Read the persisted metadata document

    Args:
        metadata_path: Path to the JSON metadata document

    Returns:
        (index, error_message): index is None when error_message is set
    """
    metadata_path = Path(metadata_path)

    if not metadata_path.exists():
        return None, f"Metadata file not found: {metadata_path}"

    try:
        with open(metadata_path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        return None, f"Failed to read metadata file {metadata_path}: {str(e)}"

    if raw is None:
        return {}, None

    if not isinstance(raw, dict):
        return None, f"Metadata file {metadata_path} does not contain a JSON object"

    try:
        index = {rel: FileMeta.model_validate(entry) for rel, entry in raw.items()}
    except ValidationError as e:
        return None, f"Invalid metadata entry in {metadata_path}: {str(e)}"

    return index, None


def LoadMetadata(metadata_path: Union[str, Path]) -> MetadataIndex:
    """
    Load the metadata index, returning an empty index on any failure

    Args:
        metadata_path: Path to the JSON metadata document

    Returns:
        MetadataIndex: Loaded index, or {} if the file is missing or unreadable
    """
    index, error = TryLoadMetadata(metadata_path)

    if error is not None:
        if Path(metadata_path).exists():
            logger.warning(f"{error} - starting with an empty metadata index")
        else:
            logger.info(f"No metadata file at {metadata_path} - starting with an empty metadata index")
        return {}

    logger.info(f"Loaded metadata for {len(index)} files from {metadata_path}")
    return index


def SaveMetadata(metadata_path: Union[str, Path], index: MetadataIndex) -> None:
    """
    Write the full metadata index, replacing any existing document

    The write is not atomic; a crash mid-write can leave a corrupt file,
    which LoadMetadata treats as an empty index.

    Args:
        metadata_path: Path to the JSON metadata document
        index: Index to serialize
    """
    metadata_path = Path(metadata_path)
    metadata_path.parent.mkdir(parents=True, exist_ok=True)

    document = {rel: meta.model_dump(by_alias=True) for rel, meta in index.items()}

    with open(metadata_path, 'w', encoding='utf-8') as f:
        json.dump(document, f, indent=2, ensure_ascii=False)

    logger.debug(f"Saved metadata for {len(index)} files to {metadata_path}")
