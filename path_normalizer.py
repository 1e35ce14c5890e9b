"""
AuroraSync Server - Path Normalization

This module derives the canonical relative path used as the metadata index key
and as the location of a file under the backup root.

Clients describe a file with two hints:
- rel: a relative path within the client's backup folder (preferred)
- path: the absolute path on the device, which is trimmed at the well-known
  Android shared storage root when present
"""

import logging
import re
import uuid
from pathlib import PurePosixPath
from typing import Callable, Optional

logger = logging.getLogger(__name__)


# ==================== Normalization Configuration ====================

# Shared storage root on Android devices; everything after it is kept
DEVICE_STORAGE_MARKER = "storage/emulated/0"
_DEVICE_STORAGE_PATTERN = re.compile(re.escape(DEVICE_STORAGE_MARKER), re.IGNORECASE)

TokenFactory = Callable[[], str]


def GenerateToken() -> str:
    """Generate a unique name for files that arrive without any usable path"""
    return str(uuid.uuid4())


# ==================== Normalization ====================

def _ToForwardSlashes(value: str) -> str:
    return value.replace('\\', '/')


def _FileNameOf(value: str) -> str:
    """Last path component of a client path, accepting either separator"""
    if not value:
        return ""
    return PurePosixPath(_ToForwardSlashes(value)).name.strip()


def NormalizeClientRel(
    rel: str,
    path: str,
    fallback_name: str = "",
    token_factory: Optional[TokenFactory] = None
) -> str:
    """
    Derive a canonical relative path from client-supplied hints

    Rules, in order:
    1. A non-blank rel wins: backslashes become slashes, leading slashes go
    2. A blank path yields the fallback file name, or a fresh token
    3. A path containing the device storage marker (case-insensitive) yields
       everything after the marker
    4. Otherwise the path with its leading slashes removed

    Never raises and never returns an empty string. If a rule produces an
    empty result (e.g. rel "///" or a path that is only the marker), the
    fallback file name is used, then a fresh token.

    Args:
        rel: Client-provided relative path (may be empty)
        path: Client-side absolute path (may be empty)
        fallback_name: Original file name, used when no path can be derived
        token_factory: Generator for unique names (defaults to uuid4)

    Returns:
        str: Forward-slash separated relative path without leading slash
    """
    rel = rel or ""
    path = path or ""

    if rel.strip():
        normalized = _ToForwardSlashes(rel).lstrip('/')
    elif not path.strip():
        normalized = ""
    else:
        p = _ToForwardSlashes(path)
        match = _DEVICE_STORAGE_PATTERN.search(p)
        if match:
            normalized = p[match.end():].lstrip('/')
        else:
            normalized = p.lstrip('/')

    if normalized:
        return normalized

    normalized = _FileNameOf(fallback_name)
    if normalized:
        return normalized

    token = (token_factory or GenerateToken)()
    logger.debug(f"No usable path from rel={rel!r}, path={path!r}; generated '{token}'")
    return token
