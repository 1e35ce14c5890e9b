"""
AuroraSync Server - Metadata Manager

This module owns the in-memory metadata index for the lifetime of the process.
All reads and writes go through a single lock so that concurrent upload
batches commit and persist one at a time.
"""

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from models.api import FileMeta, MetadataIndex
from metadata_store import LoadMetadata, SaveMetadata

logger = logging.getLogger(__name__)


class MetadataManager:
    """
    Lock-guarded owner of the metadata index

    The in-memory index is the source of truth; the JSON document is rewritten
    in full after every committed upload batch.
    """

    def __init__(self, metadata_path: Union[str, Path], index: Optional[MetadataIndex] = None):
        """
        Initialize metadata manager

        Args:
            metadata_path: Path to the JSON metadata document
            index: Initial index (empty if omitted; use Load() to read from disk)
        """
        self.metadata_path = Path(metadata_path)
        self._index: Dict[str, FileMeta] = dict(index or {})
        self._lock = threading.Lock()

    @classmethod
    def Load(cls, metadata_path: Union[str, Path]) -> "MetadataManager":
        """Create a manager from the persisted document (empty if missing or corrupt)"""
        return cls(metadata_path, LoadMetadata(metadata_path))

    def Get(self, rel: str) -> Optional[FileMeta]:
        with self._lock:
            return self._index.get(rel)

    def Count(self) -> int:
        with self._lock:
            return len(self._index)

    def Snapshot(self) -> MetadataIndex:
        """Shallow copy of the index; FileMeta entries are never mutated in place"""
        with self._lock:
            return dict(self._index)

    def CommitBatch(self, entries: List[Tuple[str, FileMeta]]) -> None:
        """
        Record a batch of uploaded files and persist the full index once

        Entries are applied in order, so a later duplicate rel overwrites an
        earlier one.

        Args:
            entries: (relative path, FileMeta) pairs from one upload request
        """
        with self._lock:
            for rel, meta in entries:
                self._index[rel] = meta
            SaveMetadata(self.metadata_path, self._index)

        logger.debug(f"Committed {len(entries)} metadata entries to {self.metadata_path}")
