"""
Tests for the inventory XML codec in AuroraSync Server
"""

import sys
from pathlib import Path
from xml.etree import ElementTree as ET

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.api import ClientFile, NeededFile
from inventory_xml import ParseInventory, BuildSyncListResponse


def test_parse_inventory_fields():
    body = """<?xml version="1.0" encoding="utf-8"?>
    <files>
      <file>
        <rel>a/b.txt</rel>
        <path>/storage/emulated/0/a/b.txt</path>
        <name>b.txt</name>
        <lastModified>1000</lastModified>
        <size>50</size>
      </file>
      <file>
        <path>/x.txt</path>
      </file>
    </files>"""

    files = ParseInventory(body)

    assert files == [
        ClientFile(rel="a/b.txt", path="/storage/emulated/0/a/b.txt", name="b.txt", last_modified=1000, size=50),
        ClientFile(rel="", path="/x.txt", name="", last_modified=0, size=0),
    ]


def test_unparseable_numbers_default_to_zero():
    body = "<files><file><rel>a</rel><lastModified>soon</lastModified><size>1.5</size></file></files>"

    files = ParseInventory(body)

    assert files[0].last_modified == 0
    assert files[0].size == 0


def test_underscore_and_non_ascii_numbers_default_to_zero():
    body = "<files><file><rel>a</rel><lastModified>1_000</lastModified><size>١٢</size></file></files>"

    files = ParseInventory(body)

    assert (files[0].last_modified, files[0].size) == (0, 0)


def test_empty_inventory():
    assert ParseInventory("<files/>") == []
    assert ParseInventory("<inventory><other/></inventory>") == []


def test_malformed_inventory_raises():
    with pytest.raises(ET.ParseError):
        ParseInventory("<files><file>")


def test_build_sync_list_response():
    document = BuildSyncListResponse([
        NeededFile(rel="a/b.txt", last_modified=1000, size=50),
        NeededFile(rel="c & d.txt", last_modified=2, size=0),
    ])

    root = ET.fromstring(document)
    assert root.tag == "files"
    assert [
        (f.findtext("rel"), f.findtext("lastModified"), f.findtext("size"))
        for f in root.findall("file")
    ] == [("a/b.txt", "1000", "50"), ("c & d.txt", "2", "0")]


def test_build_empty_response():
    root = ET.fromstring(BuildSyncListResponse([]))

    assert root.tag == "files"
    assert list(root) == []
