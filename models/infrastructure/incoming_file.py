"""
AuroraSync Server - Incoming File Model

Dataclass for one uploaded file part together with its sibling form fields.
"""

from dataclasses import dataclass
from typing import BinaryIO


@dataclass
class IncomingFile:
    """
    One file from an upload request

    The stream is read once, from its current position, by the upload receiver.
    """
    stream: BinaryIO
    filename: str  # Original name of the uploaded part
    rel: str = ""  # Client-provided relative path (preferred)
    path: str = ""  # Client-side absolute path (fallback)
    last_modified: int = 0  # Client-reported epoch milliseconds, 0 if unknown
    size: int = -1  # Client-reported size, informational only
