"""
AuroraSync Server - Inventory XML Codec

This module parses sync-list request bodies and builds sync-list responses.

Request:
    <files>
      <file><rel/><path/><name/><lastModified/><size/></file>
    </files>

Response:
    <files>
      <file><rel/><lastModified/><size/></file>
    </files>
"""

from typing import Iterable, List
from xml.etree import ElementTree as ET

from models.api import ClientFile, NeededFile
from field_parsing import ParseIntField


def _ChildText(element: ET.Element, tag: str) -> str:
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text


def ParseInventory(body: str) -> List[ClientFile]:
    """
    Parse a client inventory document

    Non-integer lastModified and size values default to 0. Missing text
    fields default to empty strings.

    Args:
        body: XML document text

    Returns:
        List[ClientFile]: Files in document order

    Raises:
        xml.etree.ElementTree.ParseError: If the body is not well-formed XML
    """
    root = ET.fromstring(body)

    return [
        ClientFile(
            rel=_ChildText(element, "rel"),
            path=_ChildText(element, "path"),
            name=_ChildText(element, "name"),
            last_modified=ParseIntField(_ChildText(element, "lastModified"), 0),
            size=ParseIntField(_ChildText(element, "size"), 0)
        )
        for element in root.findall("file")
    ]


def BuildSyncListResponse(needed: Iterable[NeededFile]) -> str:
    """
    Build the need-upload response document

    Args:
        needed: Files the client must upload

    Returns:
        str: XML document text
    """
    root = ET.Element("files")

    for needed_file in needed:
        element = ET.SubElement(root, "file")
        ET.SubElement(element, "rel").text = needed_file.rel
        ET.SubElement(element, "lastModified").text = str(needed_file.last_modified)
        ET.SubElement(element, "size").text = str(needed_file.size)

    ET.indent(root)
    return ET.tostring(root, encoding="unicode")
