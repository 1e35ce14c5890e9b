"""
AuroraSync Client - Local Inventory

Enumerates files under a backup folder and converts between the inventory
XML documents exchanged with the server and plain dictionaries.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union
from xml.etree import ElementTree as ET

# Configure logging
logger = logging.getLogger(__name__)


def scan_folder(root: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Enumerate all files under root.

    Args:
        root: Folder to back up

    Returns:
        List of dicts with rel, path, name, lastModified (epoch ms) and size,
        sorted by rel
    """
    root = Path(root).absolute()
    files = []

    for file_path in root.rglob("*"):
        if not file_path.is_file():
            continue

        stat = file_path.stat()
        files.append({
            "rel": file_path.relative_to(root).as_posix(),
            "path": str(file_path),
            "name": file_path.name,
            "lastModified": int(stat.st_mtime * 1000),
            "size": stat.st_size
        })

    files.sort(key=lambda f: f["rel"])
    logger.debug(f"Found {len(files)} files under {root}")
    return files


def build_inventory_xml(files: List[Dict[str, Any]]) -> str:
    """
    Build a sync-list request document.

    Args:
        files: Dicts as returned by scan_folder

    Returns:
        XML document text
    """
    root = ET.Element("files")

    for entry in files:
        element = ET.SubElement(root, "file")
        for field in ("rel", "path", "name", "lastModified", "size"):
            ET.SubElement(element, field).text = str(entry.get(field, ""))

    return ET.tostring(root, encoding="unicode")


def parse_needed_files(body: Union[str, bytes]) -> List[Dict[str, Any]]:
    """
    Parse a sync-list response document.

    Args:
        body: XML document text

    Returns:
        List of dicts with rel, lastModified and size
    """
    root = ET.fromstring(body)
    needed = []

    for element in root.findall("file"):
        needed.append({
            "rel": element.findtext("rel", default=""),
            "lastModified": int(element.findtext("lastModified", default="0") or 0),
            "size": int(element.findtext("size", default="0") or 0)
        })

    return needed
