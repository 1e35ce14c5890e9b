"""
AuroraSync Server - Sync Planner

This module compares a client inventory against the metadata index and
computes the files the client must upload.

A file is needed when the server has never seen it, when the client's copy is
newer, or when the sizes differ in either direction. This is a cheap
"newer-or-different" check, not a content comparison: a changed file with the
same size and an older timestamp (e.g. after clock skew) is not detected.
"""

import logging
from typing import Iterable, List, Mapping, Optional

from models.api import ClientFile, FileMeta, NeededFile
from path_normalizer import NormalizeClientRel, TokenFactory

logger = logging.getLogger(__name__)


def NeedsUpload(client_file: ClientFile, server_meta: Optional[FileMeta]) -> bool:
    """Check whether the client's copy is missing, newer, or a different size"""
    if server_meta is None:
        return True
    if client_file.last_modified > server_meta.last_modified:
        return True
    return client_file.size != server_meta.size


def PlanUpload(
    client_files: Iterable[ClientFile],
    index: Mapping[str, FileMeta],
    token_factory: Optional[TokenFactory] = None
) -> List[NeededFile]:
    """
    Compute the need-upload list for a client inventory

    Output follows the input order. Duplicate normalized paths are not merged;
    each occurrence is evaluated and reported on its own.

    Args:
        client_files: Files reported by the client
        index: Current metadata index (relative path -> FileMeta)
        token_factory: Generator for files without any usable path

    Returns:
        List[NeededFile]: Normalized relative path plus the client's reported
                          last modified time and size for every needed file
    """
    needed = []

    for client_file in client_files:
        rel = NormalizeClientRel(client_file.rel, client_file.path, token_factory=token_factory)

        if NeedsUpload(client_file, index.get(rel)):
            needed.append(NeededFile(
                rel=rel,
                last_modified=client_file.last_modified,
                size=client_file.size
            ))

    return needed
